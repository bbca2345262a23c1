"""Helpers for turning request ids into MongoDB ObjectIds."""

from typing import Any, List, Optional

from bson import ObjectId
from bson.errors import InvalidId

from app.utils.errors import ValidationError


def to_object_id(value: Any) -> ObjectId:
    """Convert a string id to an ObjectId, rejecting malformed ids."""
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(str(value).strip())
    except (InvalidId, TypeError):
        raise ValidationError("{0} is not a valid id!", value)


def parse_id_list(value: Optional[str]) -> List[ObjectId]:
    """Parse a comma-joined list of ids such as ``"a1,b2"``.

    Blank entries are ignored, so ``""`` and ``None`` give an empty list.
    """
    if not value:
        return []
    return [to_object_id(part) for part in value.split(",") if part.strip()]


def stringify_ids(value: Any) -> Any:
    """Recursively replace ObjectIds with their string form."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, list):
        return [stringify_ids(item) for item in value]
    if isinstance(value, dict):
        return {key: stringify_ids(item) for key, item in value.items()}
    return value
