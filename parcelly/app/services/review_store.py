"""
Review store access.
"""

from typing import Any, Dict, List

from fastapi import Depends
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.results import InsertOneResult

from parcelly.app.core.config import settings
from parcelly.app.db.mongo import get_db
from parcelly.app.schemas.common import serialize_document


class ReviewStore:

    def __init__(self, db: AsyncDatabase):
        self.collection = db[settings.review_collection]

    async def list_all(self) -> List[Dict[str, Any]]:
        docs = await self.collection.find().to_list(length=None)
        return serialize_document(docs)

    async def create(self, fields: Dict[str, Any]) -> InsertOneResult:
        document = {key: value for key, value in fields.items() if key != "_id"}
        return await self.collection.insert_one(document)

    async def list_for_delivery_man(self, delivery_man_id: str) -> List[Dict[str, Any]]:
        docs = await self.collection.find({"deliveryManId": delivery_man_id}).to_list(length=None)
        return serialize_document(docs)


def get_review_store(db: AsyncDatabase = Depends(get_db)) -> ReviewStore:
    return ReviewStore(db)
