"""Field coercers.

Coercers convert a validated document value into the representation written
to the output row.
"""

import base64
import json
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Callable

from docmirror.values import DocumentReference, GeoPoint, Timestamp


class CoercionError(Exception):
    """A validated value could not be converted. Treated like a failed validation."""


@dataclass(frozen=True)
class CoercionContext:
    """Per-field state a coercer may need.

    Args:
        project_nested: Projects a nested record against the field's nested schema.
        json_sort_keys: Sort object keys when serializing json fields.
    """

    project_nested: Callable[[Any], dict]
    json_sort_keys: bool = True


def _json_default(value: Any) -> Any:
    """Encode values the json module does not handle natively."""
    if isinstance(value, GeoPoint):
        return {"latitude": value.latitude, "longitude": value.longitude}
    if isinstance(value, Timestamp):
        return {"seconds": value.seconds, "nanoseconds": value.nanoseconds}
    if isinstance(value, DocumentReference):
        return value.path
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, bytes):
        return base64.b64encode(value).decode("ascii")
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=repr)
    return str(value)


def unchanged(value: Any, context: CoercionContext) -> Any:
    return value


def to_json(value: Any, context: CoercionContext) -> str:
    # Mixed or non-string keys and self-containing values cannot be encoded
    try:
        return json.dumps(value, default=_json_default, sort_keys=context.json_sort_keys)
    except (TypeError, ValueError) as e:
        raise CoercionError(str(e)) from e


def to_geopoint(value: GeoPoint, context: CoercionContext) -> dict[str, float]:
    return {"latitude": value.latitude, "longitude": value.longitude}


def to_epoch_seconds(value: Timestamp, context: CoercionContext) -> int:
    return value.seconds


def to_path(value: DocumentReference, context: CoercionContext) -> str:
    return value.path


def to_nested_record(value: Any, context: CoercionContext) -> dict:
    return context.project_nested(value)
