"""
Parcel store access.

All reads and writes against the parcel collection go through ParcelStore.
"""

import logging
from typing import Any, Dict, List

from bson import ObjectId
from fastapi import Depends
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from parcelly.app.core.config import settings
from parcelly.app.db.mongo import get_db
from parcelly.app.core.exceptions import ParcelLockedError, ResourceNotFoundError
from parcelly.app.models.enums import UpdateMode
from parcelly.app.models.parcel_enums import PARCEL_EDITABLE_FIELDS, ParcelStatus
from parcelly.app.schemas.common import serialize_document

logger = logging.getLogger(__name__)


class ParcelStore:

    def __init__(self, db: AsyncDatabase):
        self.collection = db[settings.parcel_collection]

    async def list_all(self) -> List[Dict[str, Any]]:
        docs = await self.collection.find().to_list(length=None)
        return serialize_document(docs)

    async def list_by_owner(self, email: str) -> List[Dict[str, Any]]:
        docs = await self.collection.find({"email": email}).to_list(length=None)
        return serialize_document(docs)

    async def list_for_delivery_man(self, delivery_man_id: str) -> List[Dict[str, Any]]:
        """Parcels assigned to a delivery man, matched on the id's string form."""
        docs = await self.collection.find({"deliveryManId": delivery_man_id}).to_list(length=None)
        return serialize_document(docs)

    async def get(self, parcel_id: ObjectId) -> Dict[str, Any]:
        doc = await self.collection.find_one({"_id": parcel_id})
        if doc is None:
            raise ResourceNotFoundError("Parcel", str(parcel_id))
        return serialize_document(doc)

    async def create(self, fields: Dict[str, Any]) -> InsertOneResult:
        # insert_one adds _id to the dict it is given
        document = {key: value for key, value in fields.items() if key != "_id"}
        return await self.collection.insert_one(document)

    async def delete(self, parcel_id: ObjectId) -> DeleteResult:
        return await self.collection.delete_one({"_id": parcel_id})

    async def update(
        self,
        parcel_id: ObjectId,
        fields: Dict[str, Any],
        mode: UpdateMode,
        upsert: bool = False,
    ) -> UpdateResult:
        """
        Write caller fields onto a parcel with `$set`.

        FULL_MERGE writes every supplied field; ALLOW_LISTED drops anything
        outside PARCEL_EDITABLE_FIELDS. `_id` is never written.
        """
        if mode == UpdateMode.ALLOW_LISTED:
            changes = {key: value for key, value in fields.items() if key in PARCEL_EDITABLE_FIELDS}
        else:
            changes = {key: value for key, value in fields.items() if key != "_id"}

        if not changes:
            # MongoDB < 5.0 and the in-memory test store reject an empty $set
            existing = await self.collection.find_one({"_id": parcel_id}, {"_id": 1})
            if existing is not None:
                return UpdateResult({"n": 1, "nModified": 0}, acknowledged=True)
            if not upsert:
                return UpdateResult({"n": 0, "nModified": 0}, acknowledged=True)
            await self.collection.insert_one({"_id": parcel_id})
            return UpdateResult({"n": 1, "nModified": 0, "upserted": parcel_id}, acknowledged=True)

        return await self.collection.update_one({"_id": parcel_id}, {"$set": changes}, upsert=upsert)

    async def update_guarded(self, parcel_id: ObjectId, fields: Dict[str, Any]) -> UpdateResult:
        """
        Structured update that refuses parcels already on the way.

        The lock is checked against the stored status, never the incoming one.
        Not atomic: two concurrent calls can both pass the check.
        """
        existing = await self.collection.find_one({"_id": parcel_id})
        if existing is None:
            raise ResourceNotFoundError("Parcel", str(parcel_id))

        current_status = existing.get("status")
        if current_status == ParcelStatus.ON_THE_WAY.value:
            logger.info("Refused update of parcel %s with status %r", parcel_id, current_status)
            raise ParcelLockedError(str(parcel_id), current_status)

        return await self.update(parcel_id, fields, UpdateMode.ALLOW_LISTED)

    async def cancel(self, parcel_id: ObjectId) -> UpdateResult:
        return await self.update(
            parcel_id, {"status": ParcelStatus.CANCELED.value}, UpdateMode.FULL_MERGE
        )


def get_parcel_store(db: AsyncDatabase = Depends(get_db)) -> ParcelStore:
    return ParcelStore(db)
