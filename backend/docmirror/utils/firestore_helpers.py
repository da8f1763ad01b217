"""Firestore REST value decoding utilities.

The Firestore REST API encodes every value as a single-key object naming its
type, e.g. {"integerValue": "42"} or {"mapValue": {"fields": {...}}}. These
pure functions turn that encoding into plain Python values and docmirror
wrapper types.
"""

import base64
import binascii
from collections.abc import Mapping
from typing import Any

from docmirror.exceptions import InvalidDocumentError
from docmirror.values import DocumentReference, GeoPoint, Timestamp


def decode_value(typed_value: Mapping[str, Any]) -> Any:
    """Decode one Firestore REST typed value.

    Args:
        typed_value: Object with exactly one '<kind>Value' key.

    Returns:
        The decoded Python value.

    Raises:
        InvalidDocumentError: If the value kind is unknown or its payload is malformed.
    """
    if not isinstance(typed_value, Mapping) or len(typed_value) != 1:
        raise InvalidDocumentError(f"Expected a single typed value, got: {typed_value!r}")

    kind, payload = next(iter(typed_value.items()))
    try:
        if kind == "nullValue":
            return None
        elif kind in ("stringValue", "booleanValue"):
            return payload
        elif kind == "integerValue":
            # int64 values arrive as strings
            return int(payload)
        elif kind == "doubleValue":
            return float(payload)
        elif kind == "timestampValue":
            return Timestamp.from_rfc3339(payload)
        elif kind == "geoPointValue":
            return GeoPoint(
                latitude=float(payload.get("latitude", 0.0)),
                longitude=float(payload.get("longitude", 0.0)),
            )
        elif kind == "referenceValue":
            return DocumentReference.from_resource_name(payload)
        elif kind == "bytesValue":
            return base64.b64decode(payload, validate=True)
        elif kind == "arrayValue":
            return [decode_value(v) for v in payload.get("values", [])]
        elif kind == "mapValue":
            return decode_fields(payload.get("fields", {}))
    except (TypeError, ValueError, AttributeError, binascii.Error) as e:
        raise InvalidDocumentError(f"Malformed {kind}: {payload!r}") from e

    raise InvalidDocumentError(f"Unknown Firestore value type: {kind}")


def decode_fields(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Decode a Firestore REST 'fields' object into a plain dict.

    Args:
        fields: Mapping of field name to typed value.

    Returns:
        Dict of field name to decoded value.
    """
    if not isinstance(fields, Mapping):
        raise InvalidDocumentError(f"Expected a fields object, got: {type(fields).__name__}")
    return {name: decode_value(value) for name, value in fields.items()}
