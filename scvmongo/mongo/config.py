"""MongoDB connection config."""

from pydantic import BaseModel


class MongoConfig(BaseModel):
    """MongoDB config."""

    url: str = "mongodb://localhost:27017"
    database: str = "scvmongo"
    ping_timeout_seconds: float = 10.0
    server_selection_timeout_ms: int = 10000
