import pytest

from showcase.contact.validation import (
    is_valid_email,
    is_within_length,
    sanitize_input,
    validate_contact_form,
)
from showcase.models import ContactFormData


def make_form(**overrides) -> ContactFormData:
    base = {
        "name": "John Doe",
        "email": "john@example.com",
        "subject": "Project Inquiry",
        "message": "I would like to discuss a project with you.",
    }
    base.update(overrides)
    return ContactFormData(**base)


class TestIsValidEmail:
    @pytest.mark.parametrize("email", ["test@example.com", "user.name@domain.co.uk", "a@b.io"])
    def test_valid(self, email):
        assert is_valid_email(email)

    @pytest.mark.parametrize(
        "email",
        ["invalid", "missing@domain", "@nodomain.com", "spaces in@email.com", "user @example.com", "", "a@b.c\n"],
    )
    def test_invalid(self, email):
        assert not is_valid_email(email)


class TestValidateContactForm:
    def test_valid_form(self):
        result = validate_contact_form(make_form())

        assert result.valid is True
        assert result.errors == {}

    def test_all_fields_empty(self):
        result = validate_contact_form(make_form(name="", email="", subject="", message=""))

        assert result.valid is False
        assert result.errors == {
            "name": "Name is required",
            "email": "Please enter a valid email address",
            "subject": "Subject is required",
            "message": "Message is required",
        }

    def test_whitespace_only_counts_as_empty(self):
        result = validate_contact_form(make_form(name="   ", subject="\t"))

        assert set(result.errors) == {"name", "subject"}

    def test_email_is_trimmed(self):
        assert validate_contact_form(make_form(email="  john@example.com  ")).valid

    def test_short_message(self):
        result = validate_contact_form(make_form(message="Hi"))

        assert result.errors == {"message": "Message must be at least 10 characters"}

    def test_message_length_is_measured_after_trim(self):
        result = validate_contact_form(make_form(message="   short   "))

        assert "message" in result.errors

    def test_message_upper_bound(self):
        assert validate_contact_form(make_form(message="a" * 5000)).valid

        result = validate_contact_form(make_form(message="a" * 5001))
        assert result.errors == {"message": "Message must be less than 5000 characters"}


class TestSanitizeInput:
    def test_escapes_html(self):
        assert sanitize_input("<script>alert(\"x\")</script>") == (
            "&lt;script&gt;alert(&quot;x&quot;)&lt;/script&gt;"
        )

    def test_escapes_quotes_and_ampersand(self):
        assert sanitize_input("Tom & Jerry's") == "Tom &amp; Jerry&#039;s"

    def test_plain_text_unchanged(self):
        assert sanitize_input("Hello world") == "Hello world"

    def test_not_idempotent(self):
        assert sanitize_input(sanitize_input("&")) == "&amp;amp;"


class TestIsWithinLength:
    def test_bounds_are_inclusive(self):
        assert is_within_length("abc", 3, 5)
        assert is_within_length("abcde", 3, 5)

    def test_outside(self):
        assert not is_within_length("ab", 3, 5)
        assert not is_within_length("abcdef", 3, 5)
