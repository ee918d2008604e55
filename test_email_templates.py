"""Tests for HTML escaping and the booking email template."""
import pytest

from booking_email.models import BookingRequest
from booking_email.services.email_templates import render_booking_email
from booking_email.utils.html_escape import escape_html


class TestEscapeHtml:
    def test_escapes_all_special_characters(self):
        assert escape_html("<a href=\"x\">Tom & Jerry's</a>") == (
            "&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&#039;s&lt;/a&gt;"
        )

    def test_ampersand_is_not_escaped_twice(self):
        assert escape_html("&lt;") == "&amp;lt;"

    @pytest.mark.parametrize("value", [None, ""])
    def test_absent_input_is_empty(self, value):
        assert escape_html(value) == ""

    def test_plain_text_is_unchanged(self):
        assert escape_html("Новая заявка 123") == "Новая заявка 123"


def _booking(**overrides):
    data = {"name": "Jean", "phone": "+41791234567", "service": "Plumbing"}
    data.update(overrides)
    return BookingRequest(**data)


class TestRenderBookingEmail:
    def test_subject_for_regular_request(self):
        email = render_booking_email(_booking(), site_name="HandyMan Swiss")

        assert email.subject == "Новая заявка от Jean"
        assert "<h1>Новая заявка</h1>" in email.html
        assert "СРОЧН" not in email.html

    def test_urgent_request(self):
        email = render_booking_email(_booking(urgent=True), site_name="HandyMan Swiss")

        assert email.subject == "⚡ СРОЧНО: Новая заявка от Jean"
        assert "<h1>⚡ СРОЧНАЯ ЗАЯВКА ⚡</h1>" in email.html

    def test_optional_rows_omitted_when_absent(self):
        email = render_booking_email(_booking(), site_name="HandyMan Swiss")

        assert email.html.count("<tr>") == 3
        assert "Имя:" in email.html
        assert "Телефон:" in email.html
        assert "Услуга:" in email.html
        assert "Email:" not in email.html
        assert "Дата:" not in email.html
        assert "Сообщение:" not in email.html

    def test_all_rows_rendered_in_order(self):
        booking = _booking(email="jean@example.ch", date="2026-11-02", message="Kitchen tap")
        email = render_booking_email(booking, site_name="HandyMan Swiss")

        assert email.html.count("<tr>") == 6
        labels = ["Имя:", "Телефон:", "Email:", "Услуга:", "Дата:", "Сообщение:"]
        positions = [email.html.index(label) for label in labels]
        assert positions == sorted(positions)
        assert "jean@example.ch" in email.html
        assert "Kitchen tap" in email.html

    def test_footer_names_site(self):
        email = render_booking_email(_booking(), site_name="HandyMan Swiss")

        assert "Отправлено с сайта HandyMan Swiss" in email.html

    def test_every_field_is_escaped(self):
        hostile = "<script>alert('x')</script> & \"quoted\""
        booking = _booking(
            name=hostile,
            phone=hostile,
            service=hostile,
            email=hostile,
            date=hostile,
            message=hostile,
        )
        email = render_booking_email(booking, site_name="HandyMan Swiss")

        escaped = "&lt;script&gt;alert(&#039;x&#039;)&lt;/script&gt; &amp; &quot;quoted&quot;"
        assert "<script>" not in email.html
        assert "<script>" not in email.subject
        assert "'x'" not in email.html
        assert email.html.count(escaped) == 6
        assert email.subject == f"Новая заявка от {escaped}"

    def test_braces_in_input_are_kept_literally(self):
        email = render_booking_email(_booking(message="{rows} {site_name}"), site_name="HandyMan Swiss")

        assert "{rows} {site_name}" in email.html
