"""HTTP layer: bearer token guard, error conversion and app wiring."""

from .auth import BearerAuth, Claims, HMAC_ALGORITHMS, verify_authorization
from .errors import (
    UNKNOWN_ERROR_MESSAGE,
    describe_error,
    handle_errors,
    install_error_handlers,
)
from .exceptions import (
    AuthError,
    InvalidTokenError,
    MalformedAuthorizationError,
    MissingAuthorizationError,
)
from .responses import error_response

__all__ = [
    "BearerAuth",
    "Claims",
    "HMAC_ALGORITHMS",
    "verify_authorization",
    "handle_errors",
    "install_error_handlers",
    "describe_error",
    "UNKNOWN_ERROR_MESSAGE",
    "error_response",
    "AuthError",
    "MissingAuthorizationError",
    "MalformedAuthorizationError",
    "InvalidTokenError",
]
