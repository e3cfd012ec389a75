"""Domain-level exceptions.

Services raise these errors to express business rule violations.
Each error carries an ErrorKind; route handlers map the kind to an HTTP status.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Failure taxonomy shared by the service and the HTTP layer."""
    INVALID_INPUT = 'invalid_input'
    ALREADY_EXISTS = 'already_exists'
    UNAUTHORIZED = 'unauthorized'
    NOT_FOUND = 'not_found'
    UNHANDLED = 'unhandled'


class DomainError(Exception):
    """Base class for all domain errors."""
    kind = ErrorKind.UNHANDLED


class ValidationError(DomainError):
    """Input violates a business validation rule."""
    kind = ErrorKind.INVALID_INPUT


class DuplicateError(DomainError):
    """Entity with the same unique key already exists."""
    kind = ErrorKind.ALREADY_EXISTS


class UnauthorizedError(DomainError):
    """Presented credential failed verification."""
    kind = ErrorKind.UNAUTHORIZED


class NotFoundError(DomainError):
    """Requested entity does not exist."""
    kind = ErrorKind.NOT_FOUND
