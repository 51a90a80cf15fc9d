import re

from showcase.models import ContactFormData, ValidationResult

EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

MIN_MESSAGE_LENGTH = 10
MAX_MESSAGE_LENGTH = 5000

_HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_RE.fullmatch(email))


def validate_contact_form(data: ContactFormData) -> ValidationResult:
    errors = {}
    name = data.name.strip()
    email = data.email.strip()
    subject = data.subject.strip()
    message = data.message.strip()

    if not name:
        errors["name"] = "Name is required"

    if not is_valid_email(email):
        errors["email"] = "Please enter a valid email address"

    if not subject:
        errors["subject"] = "Subject is required"

    if not message:
        errors["message"] = "Message is required"
    elif len(message) < MIN_MESSAGE_LENGTH:
        errors["message"] = f"Message must be at least {MIN_MESSAGE_LENGTH} characters"
    elif len(message) > MAX_MESSAGE_LENGTH:
        errors["message"] = f"Message must be less than {MAX_MESSAGE_LENGTH} characters"

    return ValidationResult(valid=not errors, errors=errors)


def sanitize_input(text: str) -> str:
    """
    Basic HTML escaping for user input.

    Not idempotent: escaping an already escaped string escapes its
    ampersands again ("&amp;" -> "&amp;amp;").
    """
    for char, entity in _HTML_ESCAPES:
        text = text.replace(char, entity)
    return text


def is_within_length(text: str, min_length: int, max_length: int) -> bool:
    return min_length <= len(text) <= max_length
