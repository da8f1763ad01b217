"""Pydantic schemas for the projection schema description format.

The JSON format is shared with configuration loading:

    {
      "idField": "uid",
      "timestampField": "updatedAt",
      "fields": [
        {"name": "email", "type": "string"},
        {"name": "tags", "type": "string", "repeated": true},
        {"name": "address", "type": "map", "fields": [{"name": "city", "type": "string"}]}
      ]
    }

idField and timestampField are only read by the components that deliver rows
to a destination; the projector looks at `fields` alone.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FieldType(str, Enum):
    """Supported field type tags."""

    BOOLEAN = "boolean"
    GEOPOINT = "geopoint"
    JSON = "json"
    NUMBER = "number"
    MAP = "map"
    REFERENCE = "reference"
    STRING = "string"
    TIMESTAMP = "timestamp"


class SchemaField(BaseModel):
    """One named slot to extract from a document.

    `type` holds the raw tag so that a schema with an unknown tag still loads;
    the projector rejects it when the field is reached.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Key read from the document and written to the output")
    type: str = Field(description="Field type tag, see FieldType")
    repeated: bool = Field(default=False, description="Value is a sequence of same-typed values")
    fields: list["SchemaField"] | None = Field(
        default=None,
        description="Nested field descriptors, only meaningful for map fields",
    )

    @property
    def field_type(self) -> FieldType | None:
        """The parsed type tag, or None if the tag is not supported."""
        try:
            return FieldType(self.type)
        except ValueError:
            return None


class Schema(BaseModel):
    """Top-level schema description."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id_field: str | None = Field(default=None, alias="idField")
    timestamp_field: str | None = Field(default=None, alias="timestampField")
    fields: list[SchemaField]

    def to_json(self) -> str:
        """Serialize back to the schema description format."""
        return self.model_dump_json(by_alias=True, exclude_defaults=True)


def load_schema(source: str | bytes | Mapping[str, Any]) -> Schema:
    """Load a schema description from JSON text or an already-parsed mapping.

    Raises:
        pydantic.ValidationError: If the description is structurally invalid.
    """
    if isinstance(source, Mapping):
        return Schema.model_validate(source)
    return Schema.model_validate_json(source)
