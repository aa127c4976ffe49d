"""
Bearer token guard for FastAPI routes.

Claims are handed to the endpoint as a parameter:

    auth = BearerAuth(settings.auth.jwt_secret)

    @app.get("/me")
    async def me(claims: Claims = Depends(auth)):
        return claims
"""

import logging
from typing import Any, Optional

import jwt
from fastapi import Request

from .exceptions import (
    InvalidTokenError,
    MalformedAuthorizationError,
    MissingAuthorizationError,
)

logger = logging.getLogger(__name__)

Claims = dict[str, Any]

# Symmetric algorithms only; anything else is rejected by jwt.decode
HMAC_ALGORITHMS = ["HS256", "HS384", "HS512"]

MISSING_HEADER_MESSAGE = "an authorization header is required"
MALFORMED_HEADER_MESSAGE = (
    "authorization header not properly formatted, should be Bearer + {token}"
)
INVALID_TOKEN_MESSAGE = "invalid authorization token"


def _extract_bearer_token(authorization: Optional[str]) -> str:
    if not authorization:
        raise MissingAuthorizationError(MISSING_HEADER_MESSAGE)

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise MalformedAuthorizationError(MALFORMED_HEADER_MESSAGE)

    return parts[1]


def verify_authorization(authorization: Optional[str], secret: str) -> Claims:
    """
    Validate an authorization header value and return the token claims.

    Args:
        authorization: Raw header value, e.g. "Bearer eyJ..."
        secret: Shared HMAC secret

    Raises:
        MissingAuthorizationError: No header
        MalformedAuthorizationError: Not "Bearer <token>"
        InvalidTokenError: Token does not verify against the secret
    """
    token = _extract_bearer_token(authorization)
    if not token:
        raise InvalidTokenError(INVALID_TOKEN_MESSAGE)

    try:
        claims = jwt.decode(token, secret, algorithms=HMAC_ALGORITHMS)
    except jwt.PyJWTError as e:
        logger.info(f"Rejected bearer token: {e}")
        raise InvalidTokenError(str(e)) from e

    return claims


class BearerAuth:
    """FastAPI dependency that verifies the bearer token and returns its claims."""

    def __init__(self, secret: str):
        if not secret:
            raise ValueError("BearerAuth requires a non-empty secret")
        self._secret = secret

    async def __call__(self, request: Request) -> Claims:
        return verify_authorization(request.headers.get("authorization"), self._secret)
