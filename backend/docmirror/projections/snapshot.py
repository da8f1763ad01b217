"""Document handles and the projection entry point.

A document handle is anything with a `to_dict()` method returning the
document's data, which is what Firestore's DocumentSnapshot exposes. Two
adapters are provided for data that does not come from an SDK.
"""

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol

from pydantic import TypeAdapter

from docmirror.config import Settings
from docmirror.exceptions import InvalidDocumentError
from docmirror.projections.diagnostics import DiagnosticSink
from docmirror.projections.processor import project
from docmirror.schemas import Schema, SchemaField
from docmirror.utils.firestore_helpers import decode_fields
from docmirror.values import DocumentReference, Timestamp, from_native

_FIELD_LIST = TypeAdapter(list[SchemaField])


class DocumentSnapshot(Protocol):
    """A handle that can read its full document data as a record."""

    def to_dict(self) -> Mapping[str, Any] | None: ...


@dataclass(frozen=True)
class MappingDocument:
    """Wraps an in-memory mapping as a document handle."""

    data: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Mapping[str, Any]:
        return self.data


@dataclass(frozen=True)
class RestDocument:
    """A document in the Firestore REST API JSON encoding.

    Args:
        name: Full resource name (projects/.../documents/collection/id).
        fields: Typed field values, decoded lazily by to_dict().
        create_time: When the document was created, if known.
        update_time: When the document was last updated, if known.
    """

    name: str
    fields: Mapping[str, Any] = field(default_factory=dict)
    create_time: Timestamp | None = None
    update_time: Timestamp | None = None

    @classmethod
    def from_json(cls, payload: str | bytes | Mapping[str, Any]) -> "RestDocument":
        """Build from a REST document payload (JSON text or parsed object).

        Raises:
            InvalidDocumentError: If the payload is not a document object.
        """
        if not isinstance(payload, Mapping):
            try:
                payload = json.loads(payload)
            except ValueError as e:
                raise InvalidDocumentError(f"Document payload is not valid JSON: {e}") from e
        if not isinstance(payload, Mapping) or "name" not in payload:
            raise InvalidDocumentError("Document payload must be an object with a 'name'")

        try:
            create_time = payload.get("createTime")
            update_time = payload.get("updateTime")
            return cls(
                name=payload["name"],
                fields=payload.get("fields", {}),
                create_time=Timestamp.from_rfc3339(create_time) if create_time else None,
                update_time=Timestamp.from_rfc3339(update_time) if update_time else None,
            )
        except ValueError as e:
            raise InvalidDocumentError(str(e)) from e

    @property
    def reference(self) -> DocumentReference:
        return DocumentReference.from_resource_name(self.name)

    def to_dict(self) -> dict[str, Any]:
        return decode_fields(self.fields)


def project_document(
    snapshot: DocumentSnapshot,
    fields: Schema | Sequence[SchemaField | Mapping[str, Any]],
    sink: DiagnosticSink | None = None,
    settings: Settings | None = None,
) -> dict[str, Any]:
    """Extract the snapshot data matching the fields specified in the schema.

    Args:
        snapshot: Document handle exposing to_dict(). A None result (missing
            document) projects to an empty record.
        fields: A Schema, or its ordered field descriptors as models or dicts.
        sink: Receives diagnostics for skipped values. Defaults to logging.
        settings: Engine settings. Defaults to the module-level settings.

    Returns:
        The projected output record.

    Raises:
        InvalidDocumentError: If the handle's data is not a mapping.
        SchemaDefinitionError: If the schema is malformed.
        pydantic.ValidationError: If a descriptor dict is structurally invalid.
    """
    if isinstance(fields, Schema):
        fields = fields.fields
    descriptors = _FIELD_LIST.validate_python(list(fields))

    data = snapshot.to_dict()
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise InvalidDocumentError(
            f"Document data must be a mapping, got {type(data).__name__}"
        )

    return project(from_native(data), descriptors, sink=sink, settings=settings)
