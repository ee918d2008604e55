from typing import Optional


# "&" must stay first so the entities added below are not escaped again
_REPLACEMENTS = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)


def escape_html(value: Optional[str]) -> str:
    """Escape user input for safe interpolation into email HTML"""
    if not value:
        return ""
    for char, entity in _REPLACEMENTS:
        value = value.replace(char, entity)
    return value
