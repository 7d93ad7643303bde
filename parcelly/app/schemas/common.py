"""
Shared response schemas.

Write acknowledgements mirror the store driver's result objects, and
documents are rendered with their ObjectIds as hex strings.
"""

from typing import Any, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult


def serialize_document(value: Any) -> Any:
    """Recursively render ObjectIds in a document (or list of documents) as strings."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {key: serialize_document(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize_document(item) for item in value]
    return value


class InsertResponse(BaseModel):
    """Acknowledgement for a single-document insert."""
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool = True
    inserted_id: str = Field(..., alias="insertedId")

    @classmethod
    def from_result(cls, result: InsertOneResult) -> "InsertResponse":
        return cls(acknowledged=result.acknowledged, inserted_id=str(result.inserted_id))


class UpdateResponse(BaseModel):
    """Acknowledgement for a single-document update."""
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool = True
    matched_count: int = Field(..., alias="matchedCount")
    modified_count: int = Field(..., alias="modifiedCount")
    upserted_count: int = Field(0, alias="upsertedCount")
    upserted_id: Optional[str] = Field(None, alias="upsertedId")

    @classmethod
    def from_result(cls, result: UpdateResult) -> "UpdateResponse":
        upserted_id = result.upserted_id
        return cls(
            acknowledged=result.acknowledged,
            matched_count=result.matched_count,
            modified_count=result.modified_count,
            upserted_count=1 if upserted_id is not None else 0,
            upserted_id=str(upserted_id) if upserted_id is not None else None,
        )


class DeleteResponse(BaseModel):
    """Acknowledgement for a single-document delete."""
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool = True
    deleted_count: int = Field(..., alias="deletedCount")

    @classmethod
    def from_result(cls, result: DeleteResult) -> "DeleteResponse":
        return cls(acknowledged=result.acknowledged, deleted_count=result.deleted_count)


class StatusMessage(BaseModel):
    """Simple success/message envelope."""
    success: bool
    message: str
