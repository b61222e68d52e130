# app/models/base.py
from datetime import datetime, timezone
from typing import Annotated, Any, ClassVar, Dict, Optional, Tuple

from bson import ObjectId
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator, model_validator


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def blank_to_none(value: Any) -> Any:
    # Exports write unknown dates as "" or 0; those mean "no date"
    return value or None


LooseDatetime = Annotated[Optional[datetime], BeforeValidator(blank_to_none)]


class DocumentModel(BaseModel):
    """Persisted shape of one collection's documents.

    Subclasses declare the collection name, the business key used as the
    upsert match field, and every field with its default. Fields that are
    not declared are dropped, and an explicit ``null`` is treated like an
    absent field so that the declared default applies. Apart from the
    business key and dates, values are copied as exported.
    """

    COLLECTION: ClassVar[str]
    BUSINESS_KEY: ClassVar[str]
    LABEL: ClassVar[str]
    TIMESTAMP_FIELDS: ClassVar[Tuple[str, ...]] = ("createdAt", "updatedAt")

    id: Any = Field(default=None, alias="_id")
    createdAt: LooseDatetime = None
    updatedAt: LooseDatetime = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, value: Any) -> Any:
        # Documents created through the API carry a driver-generated ObjectId
        return str(value) if isinstance(value, ObjectId) else value

    @property
    def key_value(self) -> Any:
        return getattr(self, self.BUSINESS_KEY)

    def key_filter(self) -> Dict[str, Any]:
        return {self.BUSINESS_KEY: self.key_value}

    def to_update(self, now: Optional[datetime] = None) -> Dict[str, Dict[str, Any]]:
        """Build the ``$set``/``$setOnInsert`` update for an upsert.

        Timestamps missing from the source go to ``$setOnInsert`` so that
        repeating the upsert leaves an existing document untouched.
        """
        now = now or utcnow()
        document = self.model_dump(by_alias=True)
        if document.get("_id") is None:
            document.pop("_id", None)

        on_insert = {}
        for field in self.TIMESTAMP_FIELDS:
            if document.get(field) is None:
                document.pop(field, None)
                on_insert[field] = now

        update = {"$set": document}
        if on_insert:
            update["$setOnInsert"] = on_insert
        return update
