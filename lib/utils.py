# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common input helpers used across the service layer.
# =============================================================================

from typing import Any
from uuid import UUID

from app.exceptions import ValidationError


# =============================================================================
# Text Utilities
# =============================================================================

def clean_text(value: Any) -> str | None:
    """
    Normalize an optional text input.

    Returns the stripped string, or None when the value is missing or blank.
    UUID objects are converted to their string form.

    Example:
        clean_text("  hello ")  # "hello"
        clean_text("   ")       # None
        clean_text(None)        # None
    """
    if value is None:
        return None
    if isinstance(value, UUID):
        value = str(value)
    text = str(value).strip()
    return text or None


def require_text(value: Any, message: str, field: str | None = None) -> str:
    """
    Return the stripped value or raise ValidationError with a user-facing message.

    Args:
        value: Raw input
        message: Message shown to the caller when the value is blank
        field: Input name, recorded for logs

    Raises:
        ValidationError: If the value is missing or blank
    """
    text = clean_text(value)
    if text is None:
        raise ValidationError(message, field=field)
    return text
