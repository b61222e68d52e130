# app/routes/common.py
from typing import Any, Dict, Optional, Type, Union

from fastapi import HTTPException
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.models.base import DocumentModel, utcnow


def create_error_response(
    message: str,
    details: Optional[str] = None,
    example: Optional[str] = None
) -> Dict[str, Any]:
    """Create a detailed error response"""
    response = {
        "message": message,
        "details": details if details else message
    }
    if example:
        response["example"] = example
    return response


def key_query(field: str, key: Union[int, str]) -> Dict[str, Any]:
    """Match a business key stored either as a number or as a string.

    Seeded documents keep whatever type the export used while counters hand
    out integers, so a key arriving as ``"12"`` must also match ``12``.
    """
    candidates = [key]
    text = str(key).strip()
    if isinstance(key, int):
        candidates.append(text)
    elif text.lstrip("-").isdigit():
        candidates.append(int(text))
    if len(candidates) == 1:
        return {field: key}
    return {field: {"$in": candidates}}


def not_found(entity: str, field: str, key: Any) -> HTTPException:
    return HTTPException(
        status_code=404,
        detail=create_error_response(
            message=f"{entity} not found",
            details=f"No {entity.lower()} found with {field}: {key}",
            example=f"Please ensure you're using a valid {field}"
        )
    )


async def find_by_key(
    db: AsyncIOMotorDatabase,
    model: Type[DocumentModel],
    key: Union[int, str],
    entity: str,
) -> Dict[str, Any]:
    document = await db[model.COLLECTION].find_one(key_query(model.BUSINESS_KEY, key))
    if document is None:
        raise not_found(entity, model.BUSINESS_KEY, key)
    return document


async def save_document(db: AsyncIOMotorDatabase, document: DocumentModel) -> Dict[str, Any]:
    """Upsert a document by its business key and return the stored version."""
    update = document.to_update(utcnow())
    # _id is immutable and owned by the driver for API-created documents
    update["$set"].pop("_id", None)
    collection = db[document.COLLECTION]
    await collection.update_one(document.key_filter(), update, upsert=True)
    return await collection.find_one(document.key_filter())


async def update_document(
    db: AsyncIOMotorDatabase,
    model: Type[DocumentModel],
    existing: Dict[str, Any],
    changes: Dict[str, Any],
) -> Dict[str, Any]:
    """Merge `changes` into `existing`, revalidate, and persist the result."""
    merged = {**existing, **changes, "updatedAt": utcnow()}
    document = model.model_validate(merged)
    return await save_document(db, document)
