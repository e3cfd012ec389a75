"""Bearer token extraction for the login endpoint."""

import re
from typing import Optional

from fastapi import Header

from domain.model.errors import ValidationError

MISSING_TOKEN_MESSAGE = "Authorization header is required with format: Bearer <token>"

_BEARER_PREFIX = re.compile(r'^Bearer(?:\s+|$)', re.IGNORECASE)


def strip_bearer(authorization: Optional[str]) -> str | None:
    """Return the token from an Authorization header value, or None if empty."""
    if authorization is None:
        return None
    token = _BEARER_PREFIX.sub('', authorization.strip(), count=1).strip()
    return token or None


def get_bearer_token(authorization: Optional[str] = Header(None)) -> str:
    """Extract the bearer token. Missing or empty is an input error, not an auth failure."""
    token = strip_bearer(authorization)
    if token is None:
        raise ValidationError(MISSING_TOKEN_MESSAGE)
    return token
