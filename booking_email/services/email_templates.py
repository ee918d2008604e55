"""Booking notification email template

One fixed layout. Every user-supplied value is escaped before it is
placed into the subject or the body.
"""

from booking_email.models import BookingRequest, RenderedEmail
from booking_email.utils.html_escape import escape_html


URGENT_LABEL = "⚡ СРОЧНАЯ ЗАЯВКА ⚡"
REGULAR_LABEL = "Новая заявка"
URGENT_SUBJECT_PREFIX = "⚡ СРОЧНО: "

CELL_STYLE = "padding: 10px; border: 1px solid #ddd;"

ROW_TEMPLATE = """
        <tr>
          <td style="{style}"><strong>{label}:</strong></td>
          <td style="{style}">{value}</td>
        </tr>"""

BOOKING_EMAIL_TEMPLATE = """
      <h1>{label}</h1>
      <h2>Детали заявки:</h2>
      <table style="border-collapse: collapse; width: 100%;">{rows}
      </table>
      <p style="margin-top: 20px; color: #666;">
        Отправлено с сайта {site_name}
      </p>
    """


def _row(label: str, value: str) -> str:
    return ROW_TEMPLATE.format(style=CELL_STYLE, label=label, value=value)


def build_subject(booking: BookingRequest) -> str:
    """Email subject, prefixed when the request is urgent"""
    prefix = URGENT_SUBJECT_PREFIX if booking.urgent else ""
    return f"{prefix}Новая заявка от {escape_html(booking.name)}"


def render_booking_email(booking: BookingRequest, site_name: str) -> RenderedEmail:
    """
    Render the notification email for a booking request.

    Rows for email, date and message are left out of the markup entirely
    when the field is empty.
    """
    safe_email = escape_html(booking.email)
    safe_date = escape_html(booking.date)
    safe_message = escape_html(booking.message)

    rows = [
        _row("Имя", escape_html(booking.name)),
        _row("Телефон", escape_html(booking.phone)),
    ]
    if safe_email:
        rows.append(_row("Email", safe_email))
    rows.append(_row("Услуга", escape_html(booking.service)))
    if safe_date:
        rows.append(_row("Дата", safe_date))
    if safe_message:
        rows.append(_row("Сообщение", safe_message))

    html = BOOKING_EMAIL_TEMPLATE.format(
        label=URGENT_LABEL if booking.urgent else REGULAR_LABEL,
        rows="".join(rows),
        site_name=escape_html(site_name),
    )

    return RenderedEmail(subject=build_subject(booking), html=html)
