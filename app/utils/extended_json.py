# app/utils/extended_json.py
"""Conversion of MongoDB Extended JSON exports into native Python values.

`mongoexport` and Atlas dumps wrap types JSON cannot express in single-key
objects such as ``{"$date": "2024-10-04T19:48:57.118Z"}``. The seed script
reads those exports, so every record goes through `parse_extended_json`
before it is validated.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Union

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_date(value: Union[str, int, float, dict]) -> datetime:
    """Parse the payload of a ``$date`` wrapper into an aware UTC datetime.

    Relaxed mode exports an ISO-8601 string, canonical mode a
    ``{"$numberLong": "<ms>"}`` object; bare epoch milliseconds are accepted
    as well.
    """
    if isinstance(value, dict) and "$numberLong" in value:
        value = int(value["$numberLong"])
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return EPOCH + timedelta(milliseconds=value)
    if isinstance(value, str):
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)
    raise ValueError(f"Unsupported $date value: {value!r}")


def parse_extended_json(value: Any) -> Any:
    if isinstance(value, list):
        return [parse_extended_json(item) for item in value]
    if not isinstance(value, dict):
        return value

    if "$date" in value:
        return parse_date(value["$date"])
    if "$numberLong" in value:
        return int(value["$numberLong"])
    if "$numberInt" in value:
        return int(value["$numberInt"])
    if "$numberDouble" in value:
        return float(value["$numberDouble"])
    if "$oid" in value:
        return value["$oid"]

    return {key: parse_extended_json(item) for key, item in value.items()}
