# app/utils/counter.py
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

from app.models.base import utcnow
from app.models.counter import CounterModel


async def next_sequence(db: AsyncIOMotorDatabase, key: str) -> int:
    """Atomically increment the named counter and return its new value."""
    now = utcnow()
    counter = await db[CounterModel.COLLECTION].find_one_and_update(
        {"key": key},
        {
            "$inc": {"value": 1},
            "$set": {"updatedAt": now},
            "$setOnInsert": {"createdAt": now},
        },
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )
    return counter["value"]
