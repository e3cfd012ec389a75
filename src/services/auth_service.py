"""Auth service: registration and token refresh business logic.

Pure business logic with no HTTP dependencies.
Raises domain errors that route handlers map to HTTP status codes.
"""

import logging

from domain.model.errors import DuplicateError, NotFoundError, UnauthorizedError, ValidationError
from domain.model.user import Phone, User
from port.password_hasher import PasswordHasher
from port.token_provider import TokenProvider
from port.user_repository import UserRepository
from utils.validation import password_error, validate_email, validate_password

logger = logging.getLogger(__name__)

INVALID_EMAIL_MESSAGE = "Invalid email format. Email must match pattern: example@domain.com"
INVALID_PASSWORD_MESSAGE = (
    "Invalid password format. Password must be 8-12 characters with exactly "
    "one uppercase letter and at least two digits"
)
INVALID_TOKEN_MESSAGE = "Invalid or expired token"


class AuthService:
    def __init__(self, repo: UserRepository, tokens: TokenProvider, hasher: PasswordHasher):
        self.repo = repo
        self.tokens = tokens
        self.hasher = hasher

    def register(
        self,
        email: str,
        password: str,
        name: str | None = None,
        phones: list[Phone] | None = None,
    ) -> tuple[User, str]:
        """Register a new user.

        Returns the stored User and a freshly issued token.

        Raises:
            ValidationError: email or password does not meet the input policy
            DuplicateError: email already registered (including a lost insert race)
        """
        if not validate_email(email):
            raise ValidationError(INVALID_EMAIL_MESSAGE)

        if not validate_password(password):
            logger.info("Registration rejected", extra={"reason": password_error(password)})
            raise ValidationError(INVALID_PASSWORD_MESSAGE)

        if self.repo.exists_by_email(email):
            raise DuplicateError(f"User with email {email} already exists")

        user = User.create(
            email=email,
            password_hash=self.hasher.hash(password),
            name=name,
            phones=phones,
        )
        user = self.repo.save(user)

        token = self.tokens.issue(user.email)
        logger.info("User registered", extra={"userId": user.id, "email": user.email})
        return user, token

    def authenticate_and_refresh(self, token: str) -> tuple[User, str]:
        """Validate a bearer token, stamp the login and issue a new token.

        Raises:
            UnauthorizedError: token is malformed, forged or expired
            NotFoundError: token is valid but its email has no user
        """
        email = self.tokens.verify_and_extract(token)
        if email is None:
            logger.warning("Token validation failed for login attempt")
            raise UnauthorizedError(INVALID_TOKEN_MESSAGE)

        user = self.repo.find_by_email(email)
        if user is None:
            raise NotFoundError(f"User not found for email: {email}")

        user.record_login()
        user = self.repo.save(user)

        new_token = self.tokens.issue(user.email)
        logger.info("User logged in", extra={"userId": user.id, "email": user.email})
        return user, new_token
