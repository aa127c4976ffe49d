"""Entity models and driver test doubles shared by the tests."""

from decimal import Decimal
from typing import Any

from pymongo.errors import PyMongoError

from scvmongo.mongo import MongoModel

TEST_SECRET = "test-secret-key-for-hmac-signatures-long-enough-for-hs512-xxxxxx"


class Widget(MongoModel):
    name: str = "widget"
    quantity: int = 0


class Gadget(MongoModel):
    serial: str


class Priced(MongoModel):
    price: Decimal = Decimal("1.50")


class Bare(MongoModel):
    pass


class FailingCursor:
    """Async cursor whose first fetch fails like a driver error would."""

    def __init__(self, error: PyMongoError):
        self.error = error
        self.closed = False

    def __aiter__(self) -> "FailingCursor":
        return self

    async def __anext__(self) -> Any:
        raise self.error

    async def close(self) -> None:
        self.closed = True


class ListCursor:
    """Async cursor over fixed documents."""

    def __init__(self, documents: list[dict[str, Any]]):
        self._documents = iter(documents)
        self.closed = False

    def __aiter__(self) -> "ListCursor":
        return self

    async def __anext__(self) -> dict[str, Any]:
        try:
            return next(self._documents)
        except StopIteration:
            raise StopAsyncIteration

    async def close(self) -> None:
        self.closed = True
