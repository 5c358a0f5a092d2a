"""
Fallback text for empty resume fields.

The rendered document never shows a blank gap: empty fields are replaced by
placeholder text, either plain or styled as a muted hint.
"""

from html import escape

NAME_PLACEHOLDER = "Your Name"
TITLE_PLACEHOLDER = "Professional Title"
EMAIL_PLACEHOLDER = "your.email@example.com"
PHONE_PLACEHOLDER = "(555) 123-4567"

DEFAULT_INITIALS = "JD"
DEFAULT_FIRST_NAME = "John"

PLACEHOLDER_STYLE = "color: #9ca3af; font-style: italic;"


def is_blank(value) -> bool:
    return value is None or not str(value).strip()


def get_placeholder(value, fallback: str) -> str:
    """Return value, or the plain fallback text when value is blank."""
    if is_blank(value):
        return fallback
    return value


def get_placeholder_or_empty(value, fallback: str) -> str:
    """
    Return HTML for value, or the fallback wrapped as a muted italic hint.

    The result is already escaped and can be interpolated into markup as is.
    """
    if is_blank(value):
        return f'<span class="placeholder" style="{PLACEHOLDER_STYLE}">{escape(fallback)}</span>'
    return escape(value)


def get_initials(name) -> str:
    if is_blank(name):
        return DEFAULT_INITIALS
    return "".join(part[0] for part in name.split()).upper()


def get_first_name(name) -> str:
    if is_blank(name):
        return DEFAULT_FIRST_NAME
    return name.split()[0]
