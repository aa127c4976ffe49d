"""Base class for business services backed by a repository."""

from typing import Generic, TypeVar

from motor.motor_asyncio import AsyncIOMotorDatabase

from scvmongo.repository import Repository

T = TypeVar("T")


class Service(Generic[T]):
    """
    Holds the database handle and the repository a service works through.

    Subclasses add the business operations; storage access goes through
    `self.repository` so it can be swapped in tests.
    """

    def __init__(self, database: AsyncIOMotorDatabase | None, repository: Repository[T]):
        self.database = database
        self.repository = repository
