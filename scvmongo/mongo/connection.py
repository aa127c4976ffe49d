"""
MongoDB connection establishment.

This module provides:
- Client creation via Motor (async driver)
- A bounded-time ping before the database handle is handed out
- URL sanitizing for logs
"""

import asyncio
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from .config import MongoConfig
from .exceptions import MongoConnectionError

logger = logging.getLogger(__name__)

CONNECTION_ERROR_PREFIX = "an unexpected error happened while opening the connection"
URI_SCHEMES = ("mongodb://", "mongodb+srv://")


async def connect_mongodb(
    database_name: str,
    connection_string: str,
    config: Optional[MongoConfig] = None,
) -> AsyncIOMotorDatabase:
    """
    Open a client and return the named database once it answers a ping.

    Args:
        database_name: Logical database to hand out
        connection_string: mongodb:// or mongodb+srv:// URI
        config: Timeouts; defaults to MongoConfig()

    Raises:
        MongoConnectionError: URI is malformed or the ping fails in time
    """
    config = config or MongoConfig()

    # pymongo reads a bare string as a hostname, so the scheme is checked here
    if not connection_string.startswith(URI_SCHEMES):
        raise MongoConnectionError(
            f"{CONNECTION_ERROR_PREFIX}: error parsing uri: "
            'scheme must be "mongodb" or "mongodb+srv"'
        )

    try:
        client = AsyncIOMotorClient(
            connection_string,
            serverSelectionTimeoutMS=config.server_selection_timeout_ms,
        )
    except PyMongoError as e:
        raise MongoConnectionError(f"{CONNECTION_ERROR_PREFIX}: {e}", cause=e) from e

    database = await ping_mongodb(client, database_name, config.ping_timeout_seconds)
    logger.info(
        f"Connected to MongoDB at {sanitize_mongodb_url(connection_string)} "
        f"(database: {database_name})"
    )
    return database


async def ping_mongodb(
    client: Optional[AsyncIOMotorClient],
    database_name: str,
    timeout: Optional[float] = None,
) -> AsyncIOMotorDatabase:
    """
    Check a client answers a ping within `timeout` seconds.

    The client is closed when the check fails.
    """
    if client is None:
        raise MongoConnectionError(f"{CONNECTION_ERROR_PREFIX}: client is None")

    try:
        await asyncio.wait_for(client.admin.command("ping"), timeout=timeout)
    except (PyMongoError, asyncio.TimeoutError) as e:
        client.close()
        reason = str(e) or "ping timed out"
        raise MongoConnectionError(f"{CONNECTION_ERROR_PREFIX}: {reason}", cause=e) from e

    return client[database_name]


async def check_mongodb(database: AsyncIOMotorDatabase, timeout: float = 5.0) -> bool:
    """
    Check if an already connected database is healthy.
    """
    try:
        await asyncio.wait_for(database.command("ping"), timeout=timeout)
        return True
    except (PyMongoError, asyncio.TimeoutError) as e:
        logger.warning(f"MongoDB health check failed: {e}")
        return False


def close_mongodb(database: Optional[AsyncIOMotorDatabase]) -> None:
    """
    Close the client that owns `database`.
    """
    if database is not None:
        database.client.close()


def sanitize_mongodb_url(url: str) -> str:
    """
    Hide password in MongoDB URL for safe logging.
    """
    if "@" not in url:
        return url

    # Handle mongodb+srv:// or mongodb://
    if "://" in url:
        protocol, rest = url.split("://", 1)
        if "@" in rest:
            credentials, host = rest.rsplit("@", 1)
            if ":" in credentials:
                username = credentials.split(":", 1)[0]
                return f"{protocol}://{username}:***@{host}"
    return url
