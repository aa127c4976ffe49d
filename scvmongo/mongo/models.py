"""Base model for entities stored through a MongoRepository."""

from typing import Annotated, Any

from bson import ObjectId
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from .exceptions import InvalidIdentifierError


def _stringify_object_id(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    return value


# Stored as ObjectId, exposed as its 24-char hex string
PyObjectId = Annotated[str, BeforeValidator(_stringify_object_id)]


class MongoModel(BaseModel):
    """
    Base class for repository entities.

    The only field the repository knows about is `id`, which maps to the
    `_id` key of the stored document. It is assigned by the database on
    insert and never written by updates.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: PyObjectId | None = Field(default=None, alias="_id")

    def to_document(self) -> dict[str, Any]:
        """Dump every field except the identifier, using storage aliases."""
        return self.model_dump(by_alias=True, exclude={"id"})


def parse_object_id(value: str) -> ObjectId:
    """Convert a 24-char hex identifier to an ObjectId."""
    # ObjectId(None) mints a fresh id, so the type is checked first
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise InvalidIdentifierError(f"invalid identifier: {value!r}")
    return ObjectId(value)
