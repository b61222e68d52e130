"""Tests for MongoDB Extended JSON normalisation."""

from datetime import datetime, timezone

import pytest

from app.utils.extended_json import parse_date, parse_extended_json


class TestScalarWrappers:
    def test_number_int(self):
        assert parse_extended_json({"$numberInt": "5"}) == 5

    def test_number_long(self):
        assert parse_extended_json({"$numberLong": "1728074791"}) == 1728074791

    def test_number_double(self):
        assert parse_extended_json({"$numberDouble": "2.5"}) == 2.5

    def test_oid_becomes_hex_string(self):
        assert parse_extended_json({"$oid": "6915278f2ea0c14829bb978a"}) == "6915278f2ea0c14829bb978a"

    def test_iso_date(self):
        value = parse_extended_json({"$date": "2024-10-04T19:48:57.118Z"})
        assert value == datetime(2024, 10, 4, 19, 48, 57, 118000, tzinfo=timezone.utc)

    def test_canonical_date(self):
        value = parse_extended_json({"$date": {"$numberLong": "1728071337118"}})
        assert value == datetime(2024, 10, 4, 19, 48, 57, 118000, tzinfo=timezone.utc)

    def test_plain_values_untouched(self):
        for value in ("text", 3, 1.5, True, None):
            assert parse_extended_json(value) == value


class TestNesting:
    def test_nested_objects_and_arrays(self):
        record = {
            "_id": {"$oid": "6915278f2ea0c14829bb978a"},
            "employeeId": {"$numberInt": "7"},
            "skills": [{"name": "Python", "years": {"$numberInt": "4"}}],
            "statusHistory": [
                {"status": "active", "at": {"$date": "2024-01-01T00:00:00Z"}},
            ],
            "customFields": {"badge": {"$numberLong": "12"}},
        }

        parsed = parse_extended_json(record)

        assert parsed == {
            "_id": "6915278f2ea0c14829bb978a",
            "employeeId": 7,
            "skills": [{"name": "Python", "years": 4}],
            "statusHistory": [
                {"status": "active", "at": datetime(2024, 1, 1, tzinfo=timezone.utc)},
            ],
            "customFields": {"badge": 12},
        }

    def test_input_not_mutated(self):
        record = {"count": {"$numberInt": "1"}}
        parse_extended_json(record)
        assert record == {"count": {"$numberInt": "1"}}


class TestParseDate:
    def test_naive_iso_string_is_treated_as_utc(self):
        assert parse_date("2024-10-04T19:48:57") == datetime(2024, 10, 4, 19, 48, 57, tzinfo=timezone.utc)

    def test_offset_is_normalised_to_utc(self):
        assert parse_date("2024-10-04T21:48:57+02:00") == datetime(2024, 10, 4, 19, 48, 57, tzinfo=timezone.utc)

    def test_rejects_unknown_payload(self):
        with pytest.raises(ValueError):
            parse_date(["2024"])
