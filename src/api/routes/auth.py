"""Authentication routes (sign-up, login)."""

import logging

from fastapi import APIRouter, Depends, status

from api.dependencies import get_auth_service
from api.models import ErrorResponse, SignUpRequest, UserResponse
from api.security import get_bearer_token
from services.auth_service import AuthService
from utils.config import get_settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    422: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post(
    "/sign-up",
    response_model=UserResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
)
def sign_up(request: SignUpRequest, service: AuthService = Depends(get_auth_service)):
    """Register a new user.

    Returns:
        User record and bearer token

    Raises:
        ValidationError (400): email or password format is invalid
        DuplicateError (422): email already registered
    """
    phones = [phone.to_domain() for phone in request.phones or []]
    user, token = service.register(
        email=request.email,
        password=request.password,
        name=request.name,
        phones=phones,
    )
    return UserResponse.from_domain(user, token, expose_password_hash=get_settings().expose_password_hash)


@router.get(
    "/login",
    response_model=UserResponse,
    response_model_exclude_unset=True,
    responses=_ERROR_RESPONSES,
)
def login(token: str = Depends(get_bearer_token), service: AuthService = Depends(get_auth_service)):
    """Validate the bearer token, refresh last login and return a new token.

    Raises:
        ValidationError (400): Authorization header missing or empty
        UnauthorizedError (401): token invalid or expired
        NotFoundError (404): no user for the token's email
    """
    user, new_token = service.authenticate_and_refresh(token)
    return UserResponse.from_domain(user, new_token, expose_password_hash=get_settings().expose_password_hash)
