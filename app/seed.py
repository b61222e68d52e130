# app/seed.py
"""Seed the employee-management database from MongoDB JSON exports.

Each collection is read from ``<json_dir>/<Collection>.json`` and upserted
by its business key, so the script can be run any number of times against
the same exports.

Usage:
    python -m app.seed
    python -m app.seed --json-dir ./exports --only Employee --only Project
"""
import argparse
import asyncio
import json
import logging
import os
import sys
from typing import Any, Dict, List, Optional, Sequence, Type

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pydantic import BaseModel, Field, ValidationError

from app.config import Settings, get_settings
from app.database import DOCUMENT_MODELS
from app.logging_config import setup_logging
from app.models.base import DocumentModel, utcnow
from app.utils.extended_json import parse_extended_json

logger = logging.getLogger(__name__)


class SeedResult(BaseModel):
    collection: str
    total: int = 0
    seeded: int = 0
    failed_keys: List[Any] = Field(default_factory=list)

    @property
    def failed(self) -> int:
        return self.total - self.seeded


def load_export(path: str) -> List[Dict[str, Any]]:
    """Read one JSON export and return its raw records.

    A missing, empty, undecodable or malformed file yields no records.
    Extended JSON wrappers are left in place; `seed_collection` converts
    them record by record.
    """
    if not os.path.exists(path):
        logger.warning("JSON file not found: %s", path)
        return []

    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
        if not content.strip():
            logger.warning("JSON file is empty: %s", path)
            return []
        data = json.loads(content)
    except (UnicodeDecodeError, json.JSONDecodeError):
        logger.exception("Error parsing JSON file %s", path)
        return []

    return data if isinstance(data, list) else [data]


def record_key(record: Any, field: str) -> Any:
    """Best-effort business key of a raw record, for error reporting."""
    if not isinstance(record, dict):
        return None
    key = record.get(field)
    try:
        return parse_extended_json(key)
    except (ValueError, TypeError, OverflowError):
        return key


async def seed_collection(
    db: AsyncIOMotorDatabase,
    model: Type[DocumentModel],
    json_dir: str,
) -> SeedResult:
    logger.info("Seeding %s...", model.COLLECTION)
    records = load_export(os.path.join(json_dir, f"{model.COLLECTION}.json"))
    result = SeedResult(collection=model.COLLECTION, total=len(records))

    if not records:
        logger.warning("No %s to seed", model.LABEL)
        return result

    collection = db[model.COLLECTION]
    for record in records:
        key = record_key(record, model.BUSINESS_KEY)
        try:
            document = model.model_validate(parse_extended_json(record))
            await collection.update_one(
                document.key_filter(),
                document.to_update(utcnow()),
                upsert=True,
            )
            result.seeded += 1
        except Exception:
            logger.exception("Error seeding %s %s", model.COLLECTION, key)
            result.failed_keys.append(key)

    if result.failed:
        logger.warning("Seeded %d/%d %s", result.seeded, result.total, model.LABEL)
    else:
        logger.info("Seeded %d/%d %s", result.seeded, result.total, model.LABEL)
    return result


def select_models(only: Optional[Sequence[str]] = None) -> List[Type[DocumentModel]]:
    """Restrict the seed order to the named collections, keeping its order."""
    if not only:
        return list(DOCUMENT_MODELS)
    known = {model.COLLECTION for model in DOCUMENT_MODELS}
    unknown = sorted(set(only) - known)
    if unknown:
        raise ValueError(f"Unknown collection(s): {', '.join(unknown)}")
    return [model for model in DOCUMENT_MODELS if model.COLLECTION in only]


async def run_seed(
    settings: Settings,
    json_dir: Optional[str] = None,
    models: Optional[Sequence[Type[DocumentModel]]] = None,
) -> List[SeedResult]:
    json_dir = json_dir or settings.SEED_JSON_DIR
    models = list(models) if models is not None else list(DOCUMENT_MODELS)
    logger.info("Starting database seed from %s", json_dir)

    client = AsyncIOMotorClient(settings.DATABASE_URL)
    try:
        await client.admin.command("ping")
        logger.info("Connected to MongoDB")

        db = client[settings.database_name]
        results = []
        for model in models:
            results.append(await seed_collection(db, model, json_dir))

        logger.info("Database seeded successfully!")
        return results
    except Exception:
        logger.exception("Error seeding database")
        raise
    finally:
        client.close()


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Upsert MongoDB JSON exports into the employee-management database."
    )
    parser.add_argument(
        "--json-dir",
        help="Directory holding <Collection>.json exports (default: SEED_JSON_DIR)",
    )
    parser.add_argument(
        "--only",
        action="append",
        metavar="COLLECTION",
        choices=[model.COLLECTION for model in DOCUMENT_MODELS],
        help="Seed only this collection; may be repeated",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as e:
        setup_logging()
        if any(error["loc"] == ("DATABASE_URL",) for error in e.errors()):
            logger.error("DATABASE_URL environment variable is not set")
        else:
            logger.error("Invalid settings: %s", e)
        return 1

    setup_logging(settings.LOG_LEVEL)

    try:
        results = asyncio.run(run_seed(settings, args.json_dir, select_models(args.only)))
    except Exception as e:
        logger.error("Seed failed: %s", e)
        return 1

    for result in results:
        print(f"{result.collection}: {result.seeded}/{result.total}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
