"""MongoDB adapter: connection setup and the generic repository."""

from .config import MongoConfig
from .connection import (
    check_mongodb,
    close_mongodb,
    connect_mongodb,
    ping_mongodb,
    sanitize_mongodb_url,
)
from .exceptions import (
    DecodeError,
    InvalidIdentifierError,
    MongoConnectionError,
    NotFoundError,
    PersistenceError,
    QueryError,
    RepositoryError,
)
from .models import MongoModel, PyObjectId, parse_object_id
from .repository import MongoRepository

__all__ = [
    "MongoConfig",
    "connect_mongodb",
    "ping_mongodb",
    "check_mongodb",
    "close_mongodb",
    "sanitize_mongodb_url",
    "MongoModel",
    "PyObjectId",
    "parse_object_id",
    "MongoRepository",
    "RepositoryError",
    "InvalidIdentifierError",
    "PersistenceError",
    "QueryError",
    "DecodeError",
    "NotFoundError",
    "MongoConnectionError",
]
