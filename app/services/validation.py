# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Input normalization and validation — pure functions, no I/O."""
import re
from typing import Optional

from app.core.errors import ValidationError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MAX_EMAIL_LENGTH = 320
MIN_MESSAGE_LENGTH = 10
MAX_SOURCE_LENGTH = 100


def _reject_nul(value: str, field: str) -> None:
    # PostgreSQL text columns cannot store NUL; psycopg2 raises before the query runs.
    if "\x00" in value:
        raise ValidationError(f"{field} must not contain NUL characters")


def normalize_email(email: str) -> str:
    return email.strip().lower()


def is_valid_email(email: str) -> bool:
    return len(email) <= MAX_EMAIL_LENGTH and EMAIL_PATTERN.match(email) is not None


def require_email(email: Optional[str]) -> str:
    """Normalize a mandatory email. Raises ValidationError."""
    if email is None or not email.strip():
        raise ValidationError("Email is required")
    _reject_nul(email, "Email")
    normalized = normalize_email(email)
    if not is_valid_email(normalized):
        raise ValidationError("Please provide a valid email address")
    return normalized


def optional_email(email: Optional[str]) -> Optional[str]:
    """Blank emails count as absent; anything else must be valid."""
    if email is None or not email.strip():
        return None
    _reject_nul(email, "Email")
    normalized = normalize_email(email)
    if not is_valid_email(normalized):
        raise ValidationError("Please provide a valid email address")
    return normalized


def require_message(message: Optional[str]) -> str:
    if message is None:
        raise ValidationError("Message is required")
    _reject_nul(message, "Message")
    trimmed = message.strip()
    if len(trimmed) < MIN_MESSAGE_LENGTH:
        raise ValidationError(
            f"Message must be at least {MIN_MESSAGE_LENGTH} characters"
        )
    return trimmed


def resolve_source(source: Optional[str], default: str) -> str:
    if source is None or not source.strip():
        return default
    _reject_nul(source, "Source")
    source = source.strip()
    if len(source) > MAX_SOURCE_LENGTH:
        raise ValidationError(
            f"Source must be at most {MAX_SOURCE_LENGTH} characters"
        )
    return source
