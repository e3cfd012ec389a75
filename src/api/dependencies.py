from datetime import timedelta
from functools import lru_cache

from fastapi import Depends, HTTPException

from adapter.fake.user_repository import FakeUserRepository
from adapter.mongodb.connection import get_database_name, get_mongodb_client, is_configured
from adapter.mongodb.user_repository import MongoUserRepository
from adapter.security.bcrypt_hasher import BcryptPasswordHasher
from adapter.security.jwt_token_provider import JWTTokenProvider
from port.password_hasher import PasswordHasher
from port.token_provider import TokenProvider
from port.user_repository import UserRepository
from services.auth_service import AuthService
from utils.config import get_settings

# Used when MONGO_URL is not configured (local runs)
_memory_repo = FakeUserRepository()


def _get_db():
    """Get MongoDB database, raising 503 if unavailable."""
    client = get_mongodb_client()
    if client is None:
        raise HTTPException(status_code=503, detail="Database unavailable")
    return client[get_database_name()]


def get_user_repo() -> UserRepository:
    if not is_configured():
        return _memory_repo
    return MongoUserRepository(_get_db())


@lru_cache(maxsize=1)
def get_token_provider() -> TokenProvider:
    settings = get_settings()
    return JWTTokenProvider(
        settings.jwt_secret_key,
        expiration=timedelta(hours=settings.jwt_expiration_hours),
    )


@lru_cache(maxsize=1)
def get_password_hasher() -> PasswordHasher:
    return BcryptPasswordHasher(rounds=get_settings().bcrypt_rounds)


def get_auth_service(
    repo: UserRepository = Depends(get_user_repo),
    tokens: TokenProvider = Depends(get_token_provider),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> AuthService:
    return AuthService(repo, tokens, hasher)
