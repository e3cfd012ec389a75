"""JWT (HS256) implementation of TokenProvider, backed by python-jose."""

import logging
import uuid
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"
JWT_EXPIRATION = timedelta(hours=24)
EMAIL_CLAIM = "email"


class JWTTokenProvider:
    """Issues and verifies signed identity tokens.

    The secret is fixed at construction. Tokens carry the email twice:
    as ``sub`` and as a dedicated ``email`` claim that callers read.
    """

    def __init__(self, secret: str, expiration: timedelta = JWT_EXPIRATION):
        if not secret:
            raise ValueError("JWT secret must not be empty")
        self._secret = secret
        self._expiration = expiration

    def issue(self, email: str) -> str:
        """Create a token for email, valid for the configured lifetime."""
        now = datetime.now(timezone.utc)
        payload = {
            "sub": email,
            EMAIL_CLAIM: email,
            "iat": now,
            "exp": now + self._expiration,
            # iat has one-second resolution; jti keeps refreshed tokens distinct
            "jti": uuid.uuid4().hex,
        }
        return jwt.encode(payload, self._secret, algorithm=JWT_ALGORITHM)

    def _decode(self, token: str) -> dict | None:
        if not token or not isinstance(token, str):
            return None
        try:
            return jwt.decode(
                token,
                self._secret,
                algorithms=[JWT_ALGORITHM],
                options={"require_exp": True, "verify_aud": False},
            )
        except JWTError as e:
            logger.debug(f"JWT verification failed: {e}")
            return None
        except (ValueError, TypeError, AttributeError) as e:
            logger.debug(f"JWT could not be parsed: {e}")
            return None

    def verify(self, token: str) -> bool:
        return self._decode(token) is not None

    def extract_email(self, token: str) -> str | None:
        """Read the email claim without checking signature or expiry.

        Only safe after verify(token) returned True.
        """
        try:
            claims = jwt.get_unverified_claims(token)
        except (JWTError, ValueError, TypeError, AttributeError):
            return None
        email = claims.get(EMAIL_CLAIM)
        return email if isinstance(email, str) else None

    def verify_and_extract(self, token: str) -> str | None:
        claims = self._decode(token)
        if claims is None:
            return None
        email = claims.get(EMAIL_CLAIM)
        return email if isinstance(email, str) else None
