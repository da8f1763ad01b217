"""Type registry.

Maps each field type tag to the validator that accepts raw values for it and
the coercer that converts accepted values into their output form. The tag set
is closed, so the mapping is fixed at import time and read-only.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping

from docmirror.projections import coercers, validators
from docmirror.projections.coercers import CoercionContext
from docmirror.schemas import FieldType


@dataclass(frozen=True)
class TypeHandler:
    """Validator/coercer pair for one type tag.

    Args:
        validator: Predicate deciding whether a raw value fits the type.
        coercer: Converts a validated value into its output representation.
    """

    validator: Callable[[Any], bool]
    coercer: Callable[[Any, CoercionContext], Any]


TYPE_HANDLERS: Mapping[FieldType, TypeHandler] = MappingProxyType({
    FieldType.BOOLEAN: TypeHandler(validators.is_boolean, coercers.unchanged),
    FieldType.GEOPOINT: TypeHandler(validators.is_geopoint, coercers.to_geopoint),
    FieldType.JSON: TypeHandler(validators.is_structured, coercers.to_json),
    FieldType.NUMBER: TypeHandler(validators.is_number, coercers.unchanged),
    FieldType.MAP: TypeHandler(validators.is_structured, coercers.to_nested_record),
    FieldType.REFERENCE: TypeHandler(validators.is_reference, coercers.to_path),
    FieldType.STRING: TypeHandler(validators.is_string, coercers.unchanged),
    FieldType.TIMESTAMP: TypeHandler(validators.is_timestamp, coercers.to_epoch_seconds),
})


def get_handler(field_type: FieldType) -> TypeHandler:
    """Get the handler for a type tag.

    Args:
        field_type: A supported type tag.

    Returns:
        The tag's TypeHandler.
    """
    return TYPE_HANDLERS[field_type]
