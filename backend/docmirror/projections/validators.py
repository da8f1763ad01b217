"""Field validators.

Validators are pure predicates deciding whether a raw document value is
acceptable for a type tag.
"""

from collections.abc import Mapping
from numbers import Real
from typing import Any

from docmirror.values import WRAPPER_TYPES, DocumentReference, GeoPoint, Timestamp


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_number(value: Any) -> bool:
    # bool is an int subclass but never a number here
    return isinstance(value, Real) and not isinstance(value, bool)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_structured(value: Any) -> bool:
    """True for any non-scalar value: mappings, sequences and wrapper values."""
    return isinstance(value, (Mapping, list, tuple) + WRAPPER_TYPES)


def is_geopoint(value: Any) -> bool:
    return isinstance(value, GeoPoint)


def is_timestamp(value: Any) -> bool:
    return isinstance(value, Timestamp)


def is_reference(value: Any) -> bool:
    return isinstance(value, DocumentReference)
