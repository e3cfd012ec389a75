"""Credential input policy for email addresses and passwords.

All functions are pure and never raise on bad input; None and empty strings
are simply invalid (or count as zero).
"""

import re

EMAIL_MAX_LENGTH = 100
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 12

_EMAIL_PATTERN = re.compile(r'[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}')
_ALPHANUMERIC_PATTERN = re.compile(r'[A-Za-z0-9]+')


def count_uppercase(value: str | None) -> int:
    """Count ASCII uppercase letters."""
    if not value:
        return 0
    return sum(1 for c in value if 'A' <= c <= 'Z')


def count_digits(value: str | None) -> int:
    """Count ASCII digits."""
    if not value:
        return 0
    return sum(1 for c in value if '0' <= c <= '9')


def count_lowercase(value: str | None) -> int:
    """Count ASCII lowercase letters."""
    if not value:
        return 0
    return sum(1 for c in value if 'a' <= c <= 'z')


def validate_email(email: str | None) -> bool:
    """Check email against local-part@domain.tld. No existence checks."""
    if not email or len(email) > EMAIL_MAX_LENGTH:
        return False
    return _EMAIL_PATTERN.fullmatch(email) is not None


def password_error(password: str | None) -> str | None:
    """Return the reason a password is rejected, or None if it is valid.

    Rules:
        - 8 to 12 characters
        - exactly one uppercase letter
        - at least two digits
        - at least one lowercase letter
        - letters and digits only
    """
    if not password:
        return "Password is required"
    if len(password) < PASSWORD_MIN_LENGTH or len(password) > PASSWORD_MAX_LENGTH:
        return f"Password must be {PASSWORD_MIN_LENGTH}-{PASSWORD_MAX_LENGTH} characters"
    if not _ALPHANUMERIC_PATTERN.fullmatch(password):
        return "Password must contain only letters and digits"
    if count_uppercase(password) != 1:
        return "Password must contain exactly one uppercase letter"
    if count_digits(password) < 2:
        return "Password must contain at least two digits"
    if count_lowercase(password) < 1:
        return "Password must contain at least one lowercase letter"
    return None


def validate_password(password: str | None) -> bool:
    """True when password_error() finds nothing to reject."""
    return password_error(password) is None
