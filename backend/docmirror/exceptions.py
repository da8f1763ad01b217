"""Exceptions raised by the projection engine.

Only caller bugs raise. Data that disagrees with the schema is skipped and
reported through a diagnostic sink instead.
"""

from typing import Any


class ProjectionError(Exception):
    """Base class for all docmirror errors."""


class SchemaDefinitionError(ProjectionError):
    """The schema itself is malformed. Aborts the whole projection."""


class InvalidFieldDefinitionError(SchemaDefinitionError):
    """A field descriptor carries a type tag outside the supported set."""

    def __init__(self, definition: Any):
        self.definition = definition
        if hasattr(definition, "model_dump_json"):
            rendered = definition.model_dump_json(exclude_defaults=True)
        else:
            rendered = repr(definition)
        super().__init__(f"Invalid field definition: {rendered}")


class SchemaDepthExceededError(SchemaDefinitionError):
    """Nested map fields go deeper than the configured limit."""

    def __init__(self, path: str, max_depth: int):
        self.path = path
        self.max_depth = max_depth
        super().__init__(
            f"Schema nesting exceeds max depth {max_depth} at field '{path}'"
        )


class InvalidDocumentError(ProjectionError):
    """A document handle produced data that cannot be read as a record."""
