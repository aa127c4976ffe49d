"""Logfire observability initialization and instrumentation."""

import logging

import logfire

from scvmongo import __version__
from scvmongo.config import Settings

logger = logging.getLogger(__name__)


def initialize_logfire(settings: Settings) -> bool:
    """
    Initialize Logfire when a token is configured.

    Instruments:
    - PyMongo commands (Motor runs on top of PyMongo)
    - Python logging (bridged to Logfire)

    FastAPI is instrumented by the app factory once an app exists.

    Args:
        settings: Application settings containing the Logfire token

    Returns:
        True when Logfire is active. Failures are logged, never raised.
    """
    if not settings.logfire_token:
        logger.warning("Logfire token not set - observability disabled")
        return False

    try:
        logfire.configure(
            token=settings.logfire_token,
            service_name="scvmongo",
            service_version=__version__,
            environment=settings.environment,
        )

        logfire.instrument_pymongo()

        root_logger = logging.getLogger()
        root_logger.addHandler(logfire.LogfireLoggingHandler())

        logger.info("Logfire tracking initialized")
        return True

    except Exception as e:
        logger.warning(f"Failed to initialize Logfire: {e}")
        # Continue running - observability is optional
        return False
