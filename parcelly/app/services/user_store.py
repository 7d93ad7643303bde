"""
User store access.
"""

from typing import Any, Dict, List, Optional, Union

from bson import ObjectId
from fastapi import Depends
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.results import InsertOneResult, UpdateResult

from parcelly.app.core.config import settings
from parcelly.app.db.mongo import get_db
from parcelly.app.core.exceptions import ResourceNotFoundError
from parcelly.app.models.enums import UserRole
from parcelly.app.schemas.common import serialize_document


class UserStore:

    def __init__(self, db: AsyncDatabase):
        self.collection = db[settings.user_collection]

    async def create(self, fields: Dict[str, Any]) -> InsertOneResult:
        document = {key: value for key, value in fields.items() if key != "_id"}
        return await self.collection.insert_one(document)

    async def upsert_by_email(self, fields: Dict[str, Any]) -> Union[Dict[str, Any], UpdateResult]:
        """
        Register a user on first sign-in.

        An existing user is returned untouched (first write wins). Otherwise
        the profile is upserted on its email and the write result returned.
        """
        email = fields.get("email") or ""
        existing = await self.collection.find_one({"email": email})
        if existing is not None:
            return serialize_document(existing)

        changes = {key: value for key, value in fields.items() if key != "_id"}
        return await self.collection.update_one({"email": email}, {"$set": changes}, upsert=True)

    async def set_role(self, user_id: ObjectId, role: UserRole) -> UpdateResult:
        """Overwrite only the role field."""
        return await self.collection.update_one({"_id": user_id}, {"$set": {"role": role.value}})

    async def list_all(self) -> List[Dict[str, Any]]:
        docs = await self.collection.find().to_list(length=None)
        return serialize_document(docs)

    async def find_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        """Raw user document (ObjectId intact) or None."""
        return await self.collection.find_one({"email": email})

    async def get_by_email(self, email: str) -> Dict[str, Any]:
        doc = await self.find_by_email(email)
        if doc is None:
            raise ResourceNotFoundError("User", email)
        return serialize_document(doc)

    async def list_by_role(self, role: UserRole) -> List[Dict[str, Any]]:
        docs = await self.collection.find({"role": role.value}).to_list(length=None)
        return serialize_document(docs)


def get_user_store(db: AsyncDatabase = Depends(get_db)) -> UserStore:
    return UserStore(db)
