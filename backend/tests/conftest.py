"""Pytest configuration and shared fixtures.

This module provides centralized test fixtures for:
- Diagnostic collection
- A representative user schema and matching document
- Firestore REST document payloads
"""

import pytest

from docmirror.config import Settings
from docmirror.projections import DiagnosticCollector
from docmirror.schemas import Schema, load_schema
from docmirror.values import DocumentReference, GeoPoint, Timestamp


@pytest.fixture
def collector() -> DiagnosticCollector:
    """Empty diagnostic collector."""
    return DiagnosticCollector()


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from the environment."""
    return Settings(_env_file=None, max_schema_depth=32, json_sort_keys=True)


@pytest.fixture
def user_schema() -> Schema:
    """Schema covering every field type."""
    return load_schema({
        "idField": "uid",
        "timestampField": "updatedAt",
        "fields": [
            {"name": "uid", "type": "string"},
            {"name": "active", "type": "boolean"},
            {"name": "age", "type": "number"},
            {"name": "location", "type": "geopoint"},
            {"name": "prefs", "type": "json"},
            {"name": "team", "type": "reference"},
            {"name": "updatedAt", "type": "timestamp"},
            {"name": "scores", "type": "number", "repeated": True},
            {
                "name": "address",
                "type": "map",
                "fields": [
                    {"name": "city", "type": "string"},
                    {"name": "zip", "type": "string"},
                ],
            },
        ],
    })


@pytest.fixture
def user_document() -> dict:
    """Document matching user_schema, plus an undeclared key."""
    return {
        "uid": "alice",
        "active": True,
        "age": 34,
        "location": GeoPoint(latitude=40.7128, longitude=-74.006),
        "prefs": {"theme": "dark", "langs": ["en", "fr"]},
        "team": DocumentReference(path="teams/red"),
        "updatedAt": Timestamp(seconds=1700000000, nanoseconds=123000000),
        "scores": [1, 2.5, 3],
        "address": {"city": "NYC", "zip": "10001", "floor": 4},
        "internalNotes": "not in schema",
    }


@pytest.fixture
def rest_payload() -> dict:
    """Firestore REST document for the same user."""
    return {
        "name": "projects/demo/databases/(default)/documents/users/alice",
        "createTime": "2023-11-14T22:13:20Z",
        "updateTime": "2023-11-14T22:13:20.123456Z",
        "fields": {
            "uid": {"stringValue": "alice"},
            "active": {"booleanValue": True},
            "age": {"integerValue": "34"},
            "location": {"geoPointValue": {"latitude": 40.7128, "longitude": -74.006}},
            "prefs": {
                "mapValue": {
                    "fields": {
                        "theme": {"stringValue": "dark"},
                        "langs": {
                            "arrayValue": {
                                "values": [{"stringValue": "en"}, {"stringValue": "fr"}]
                            }
                        },
                    }
                }
            },
            "team": {
                "referenceValue": "projects/demo/databases/(default)/documents/teams/red"
            },
            "updatedAt": {"timestampValue": "2023-11-14T22:13:20.123Z"},
            "scores": {
                "arrayValue": {
                    "values": [
                        {"integerValue": "1"},
                        {"doubleValue": 2.5},
                        {"integerValue": "3"},
                    ]
                }
            },
            "address": {
                "mapValue": {
                    "fields": {
                        "city": {"stringValue": "NYC"},
                        "zip": {"stringValue": "10001"},
                        "floor": {"integerValue": "4"},
                    }
                }
            },
            "nickname": {"nullValue": None},
        },
    }
