"""docmirror: schema-driven projection of documents into column-oriented rows."""

from docmirror.projections import project, project_document, process_field
from docmirror.schemas import FieldType, Schema, SchemaField, load_schema

__all__ = [
    "FieldType",
    "Schema",
    "SchemaField",
    "load_schema",
    "process_field",
    "project",
    "project_document",
]
