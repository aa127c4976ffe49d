"""MongoDB repository exceptions."""


class RepositoryError(Exception):
    """Base repository exception."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class InvalidIdentifierError(RepositoryError):
    """Identifier is not a valid ObjectId."""

    pass


class PersistenceError(RepositoryError):
    """Insert, update or delete failed in the driver."""

    pass


class QueryError(RepositoryError):
    """Find failed in the driver."""

    pass


class DecodeError(RepositoryError):
    """Stored document does not match the target model."""

    pass


class NotFoundError(RepositoryError):
    """No document matched the identifier."""

    pass


class MongoConnectionError(RepositoryError):
    """Connection or health check failed."""

    pass
