# app/models/counter.py
from typing import Any

from app.models.base import DocumentModel


class CounterModel(DocumentModel):
    COLLECTION = "Counter"
    BUSINESS_KEY = "key"
    LABEL = "counters"

    key: str
    value: Any = None
