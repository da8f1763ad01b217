"""Pydantic schemas."""

from docmirror.schemas.schema import FieldType, Schema, SchemaField, load_schema

__all__ = [
    "FieldType",
    "Schema",
    "SchemaField",
    "load_schema",
]
