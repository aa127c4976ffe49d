"""Conversion of uncaught handler failures into 500 responses."""

import functools
import inspect
import logging
from typing import Any, Callable

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from .exceptions import AuthError
from .responses import error_response

logger = logging.getLogger(__name__)

UNKNOWN_ERROR_MESSAGE = "unknown error occurred"

# Raised on purpose by handlers and dependencies; never converted to a 500
PASSTHROUGH_ERRORS = (HTTPException, AuthError)


def describe_error(exc: BaseException) -> str:
    """Message for a failure, falling back to a generic one when blank."""
    message = str(exc)
    if message.strip():
        return message
    return UNKNOWN_ERROR_MESSAGE


def _internal_error(exc: Exception, handler_name: str) -> JSONResponse:
    logger.error(f"Unhandled error in {handler_name}: {exc!r}", exc_info=exc)
    return error_response(500, describe_error(exc))


def _is_async(handler: Callable[..., Any]) -> bool:
    # partials of coroutine functions and objects with an async __call__
    return inspect.iscoroutinefunction(handler) or inspect.iscoroutinefunction(
        getattr(handler, "__call__", None)
    )


def handle_errors(handler: Callable[..., Any]) -> Callable[..., Any]:
    """
    Wrap an endpoint so any exception it raises becomes a 500 response.

    Works for async and sync endpoints, including partials and callable
    objects. The wrapped signature is kept so FastAPI still resolves the
    endpoint's parameters and dependencies.
    """
    name = getattr(handler, "__name__", repr(handler))

    if _is_async(handler):

        @functools.wraps(handler)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await handler(*args, **kwargs)
            except PASSTHROUGH_ERRORS:
                raise
            except Exception as e:
                return _internal_error(e, name)

        return async_wrapper

    @functools.wraps(handler)
    def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return handler(*args, **kwargs)
        except PASSTHROUGH_ERRORS:
            raise
        except Exception as e:
            return _internal_error(e, name)

    return sync_wrapper


async def auth_error_handler(request: Request, exc: AuthError) -> JSONResponse:
    return error_response(exc.status_code, exc.message)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    return _internal_error(exc, f"{request.method} {request.url.path}")


def install_error_handlers(app: FastAPI) -> None:
    """Register the 401 and catch-all 500 handlers on an app."""
    app.add_exception_handler(AuthError, auth_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
