"""Process-wide MongoDB client for the user directory."""

import logging
from pymongo import MongoClient
from pymongo.errors import ConnectionFailure, PyMongoError

from utils.config import get_settings

logger = logging.getLogger(__name__)

logging.getLogger('pymongo').setLevel(logging.WARNING)

USERS_COLLECTION_NAME = 'users'

_client_cache: MongoClient | None = None
_connection_failed = False
_connected_once = False


def reset_client():
    """Forget the cached client and any earlier failure."""
    global _client_cache, _connection_failed, _connected_once
    _client_cache = None
    _connection_failed = False
    _connected_once = False


def is_configured() -> bool:
    return bool(get_settings().mongo_url)


def get_database_name() -> str:
    return get_settings().mongodb_database


def get_mongodb_client() -> MongoClient | None:
    """Get the cached MongoDB client, reconnecting if the cached one is dead.

    Returns None when MONGO_URL is unset or the initial connection failed.
    A failed initial connection is a configuration problem and is not retried
    until reset_client() is called.
    """
    global _client_cache, _connection_failed, _connected_once

    if _client_cache is not None:
        try:
            _client_cache.admin.command('ping')
            return _client_cache
        except PyMongoError:
            _client_cache = None
            logger.debug("[MONGODB] Cached client failed ping, reconnecting")

    settings = get_settings()
    if _connection_failed or not settings.mongo_url:
        return None

    try:
        client = MongoClient(
            settings.mongo_url,
            serverSelectionTimeoutMS=5000,
            connectTimeoutMS=5000,
            socketTimeoutMS=30000,
            maxPoolSize=10,
            retryWrites=True,
            retryReads=True,
        )
        client.admin.command('ping')
    except (ConnectionFailure, PyMongoError) as e:
        logger.error("[MONGODB] Connection failed", extra={"error": str(e)[:200]})
        _connection_failed = not _connected_once
        return None

    _client_cache = client
    _connected_once = True
    logger.info("[MONGODB] Connected", extra={"database": settings.mongodb_database})
    return client
