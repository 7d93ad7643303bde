"""
Document identifier validation.

Every route keyed by a document id runs the same strict check before the
store is touched.
"""

from bson import ObjectId
from bson.errors import InvalidId
from fastapi import Path

from parcelly.app.core.exceptions import InvalidIdentifierError


def is_valid_object_id(value: str) -> bool:
    """
    True only for canonical ObjectId strings.

    ObjectId.is_valid also accepts any 12-byte value and mixed-case hex, so
    the parsed id must render back to exactly the input.
    """
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        return False
    try:
        return str(ObjectId(value)) == value
    except (InvalidId, TypeError):
        return False


def parse_object_id(value: str) -> ObjectId:
    """Convert a caller-supplied id, raising InvalidIdentifierError if malformed."""
    if not is_valid_object_id(value):
        raise InvalidIdentifierError(value)
    return ObjectId(value)


def valid_object_id(id: str = Path(..., description="Document ID (24 hex characters)")) -> ObjectId:
    """
    FastAPI dependency for `{id}` path segments.

    Usage:
        @router.get("/g/{id}")
        async def get_parcel(oid: ObjectId = Depends(valid_object_id)):
            ...
    """
    return parse_object_id(id)
