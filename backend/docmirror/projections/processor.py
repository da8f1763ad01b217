"""Field processing and document projection.

`project` walks a list of field descriptors in order, reads each value from
the document, skips what is missing or malformed and hands the rest to
`process_field`. Map fields recurse back into `project` with their nested
descriptors.

Output conventions:
- A key is present only if its value was extracted; no key maps to None.
- In repeated fields an element that fails validation becomes a None hole so
  indexes line up with the source sequence.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from docmirror.config import Settings
from docmirror.config import settings as default_settings
from docmirror.exceptions import InvalidFieldDefinitionError, SchemaDepthExceededError
from docmirror.projections.coercers import CoercionContext, CoercionError
from docmirror.projections.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticSink,
    default_sink,
)
from docmirror.projections.registry import TypeHandler, get_handler
from docmirror.schemas import SchemaField


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _read_field(data: Any, name: str) -> Any:
    # Only mappings have readable keys; other structured values yield nothing
    if isinstance(data, Mapping):
        return data.get(name)
    return None


def _join_path(parent: str, name: str) -> str:
    return f"{parent}.{name}" if parent else name


def _coerce(
    handler: TypeHandler,
    value: Any,
    context: CoercionContext,
    field: SchemaField,
    path: str,
    sink: DiagnosticSink,
    index: int | None = None,
) -> Any | None:
    try:
        return handler.coercer(value, context)
    except CoercionError as e:
        sink.emit(Diagnostic(
            code=DiagnosticCode.COERCION_FAILED,
            path=path,
            field_type=field.type,
            value_type=type(value).__name__,
            index=index,
            detail=str(e),
        ))
        return None


def process_field(
    field: SchemaField,
    value: Any,
    sink: DiagnosticSink | None = None,
    settings: Settings | None = None,
    *,
    path: str | None = None,
    depth: int = 0,
) -> Any | None:
    """Validate and coerce one non-null document value.

    Args:
        field: Descriptor of the field being processed.
        value: Raw document value (never None).
        sink: Receives diagnostics for rejected values. Defaults to logging.
        settings: Engine settings. Defaults to the module-level settings.
        path: Dotted path of the field, used in diagnostics.
        depth: Nesting depth of the field's parent record.

    Returns:
        The coerced value, or None if a scalar value failed validation or
        conversion, or if a repeated field was given something other than a
        list or tuple.

    Raises:
        InvalidFieldDefinitionError: If the field's type tag is not supported.
    """
    if sink is None:
        sink = default_sink
    if settings is None:
        settings = default_settings
    if path is None:
        path = field.name

    field_type = field.field_type
    if field_type is None:
        raise InvalidFieldDefinitionError(field)
    handler = get_handler(field_type)

    context = CoercionContext(
        project_nested=lambda nested: _project(
            nested, field.fields or [], sink, settings, path, depth + 1
        ),
        json_sort_keys=settings.json_sort_keys,
    )

    if field.repeated:
        if not _is_sequence(value):
            sink.emit(Diagnostic(
                code=DiagnosticCode.REPEATED_NOT_ARRAY,
                path=path,
                field_type=field.type,
                value_type=type(value).__name__,
            ))
            return None

        result = []
        for index, element in enumerate(value):
            if handler.validator(element):
                result.append(_coerce(handler, element, context, field, path, sink, index))
            else:
                sink.emit(Diagnostic(
                    code=DiagnosticCode.INVALID_ELEMENT_TYPE,
                    path=path,
                    field_type=field.type,
                    value_type=type(element).__name__,
                    index=index,
                ))
                result.append(None)
        return result

    if handler.validator(value):
        return _coerce(handler, value, context, field, path, sink)

    sink.emit(Diagnostic(
        code=DiagnosticCode.INVALID_TYPE,
        path=path,
        field_type=field.type,
        value_type=type(value).__name__,
    ))
    return None


def _project(
    data: Any,
    fields: Sequence[SchemaField],
    sink: DiagnosticSink,
    settings: Settings,
    parent_path: str,
    depth: int,
) -> dict[str, Any]:
    if depth > settings.max_schema_depth:
        raise SchemaDepthExceededError(parent_path, settings.max_schema_depth)

    record: dict[str, Any] = {}
    for field in fields:
        path = _join_path(parent_path, field.name)
        value = _read_field(data, field.name)

        if value is None:
            # No data for this field
            continue

        if field.repeated and not _is_sequence(value):
            sink.emit(Diagnostic(
                code=DiagnosticCode.REPEATED_NOT_ARRAY,
                path=path,
                field_type=field.type,
                value_type=type(value).__name__,
            ))
            continue

        if field.field_type is None:
            raise InvalidFieldDefinitionError(field)

        processed = process_field(field, value, sink, settings, path=path, depth=depth)
        if processed is not None:
            record[field.name] = processed

    return record


def project(
    data: Mapping[str, Any],
    fields: Sequence[SchemaField],
    sink: DiagnosticSink | None = None,
    settings: Settings | None = None,
) -> dict[str, Any]:
    """Extract the document data matching the given field descriptors.

    Args:
        data: Document record. Keys not named by a descriptor are ignored.
        fields: Ordered field descriptors.
        sink: Receives diagnostics for skipped values. Defaults to logging.
        settings: Engine settings. Defaults to the module-level settings.

    Returns:
        A new dict holding only the fields that were present and valid.

    Raises:
        InvalidFieldDefinitionError: If a present field has an unsupported type tag.
        SchemaDepthExceededError: If map fields nest deeper than max_schema_depth.
    """
    return _project(
        data,
        fields,
        default_sink if sink is None else sink,
        default_settings if settings is None else settings,
        "",
        0,
    )
