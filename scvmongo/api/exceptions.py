"""HTTP guard exceptions."""


class AuthError(Exception):
    """Base authentication error, rendered as a 401 response."""

    def __init__(self, message: str, status_code: int = 401):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class MissingAuthorizationError(AuthError):
    """No authorization header."""

    pass


class MalformedAuthorizationError(AuthError):
    """Authorization header is not `Bearer <token>`."""

    pass


class InvalidTokenError(AuthError):
    """Token failed parsing or verification."""

    pass
