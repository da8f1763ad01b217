"""Document value types.

Documents carry plain JSON-like values plus three domain wrappers: geographic
points, timestamps and references to other documents. The wrappers are
modelled as frozen dataclasses so validators can stay simple isinstance
checks. `from_native` converts objects produced by a document SDK into them.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_RFC3339 = re.compile(
    r"^(?P<date>\d{4}-\d{2}-\d{2})[Tt ](?P<time>\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d{1,9}))?"
    r"(?P<offset>[Zz]|[+-]\d{2}:\d{2})$"
)

# Resource names look like projects/{p}/databases/{d}/documents/{path}
_DOCUMENTS_SEGMENT = "/documents/"


@dataclass(frozen=True)
class GeoPoint:
    """A latitude/longitude pair in degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"Latitude out of range: {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"Longitude out of range: {self.longitude}")


@dataclass(frozen=True)
class Timestamp:
    """A point in time as whole seconds since the epoch plus nanoseconds.

    nanoseconds is always in [0, 999_999_999], so instants before the epoch
    have negative seconds and a positive fraction.
    """

    seconds: int
    nanoseconds: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.nanoseconds < 1_000_000_000:
            raise ValueError(f"Nanoseconds out of range: {self.nanoseconds}")

    @classmethod
    def from_datetime(cls, value: datetime) -> "Timestamp":
        """Build a Timestamp from a datetime. Naive datetimes are taken as UTC.

        Datetime subclasses exposing a `nanosecond` attribute (as Firestore's
        DatetimeWithNanoseconds does) keep their full precision.
        """
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        delta = value - EPOCH
        seconds = delta.days * 86400 + delta.seconds
        nanoseconds = getattr(value, "nanosecond", None)
        if not isinstance(nanoseconds, int) or isinstance(nanoseconds, bool):
            nanoseconds = delta.microseconds * 1000
        return cls(seconds=seconds, nanoseconds=nanoseconds)

    @classmethod
    def from_rfc3339(cls, text: str) -> "Timestamp":
        """Parse an RFC 3339 timestamp such as '2024-05-01T12:30:00.123456789Z'.

        Raises:
            ValueError: If the text is not a valid RFC 3339 timestamp.
        """
        match = _RFC3339.match(text.strip())
        if match is None:
            raise ValueError(f"Invalid RFC 3339 timestamp: {text!r}")

        offset = match.group("offset")
        suffix = "+00:00" if offset in ("Z", "z") else offset
        parsed = datetime.fromisoformat(f"{match.group('date')}T{match.group('time')}{suffix}")

        fraction = match.group("fraction") or ""
        nanoseconds = int(fraction.ljust(9, "0")) if fraction else 0
        delta = parsed - EPOCH
        return cls(seconds=delta.days * 86400 + delta.seconds, nanoseconds=nanoseconds)

    def to_datetime(self) -> datetime:
        """Convert to an aware UTC datetime (truncated to microseconds)."""
        return EPOCH + timedelta(seconds=self.seconds, microseconds=self.nanoseconds // 1000)


@dataclass(frozen=True)
class DocumentReference:
    """A pointer to another document, identified by its slash-separated path."""

    path: str

    @property
    def id(self) -> str:
        return self.path.rsplit("/", 1)[-1]

    @classmethod
    def from_resource_name(cls, name: str) -> "DocumentReference":
        """Build a reference from a full resource name or a relative path.

        'projects/p/databases/(default)/documents/users/alice' -> 'users/alice'
        """
        if _DOCUMENTS_SEGMENT in name:
            name = name.split(_DOCUMENTS_SEGMENT, 1)[1]
        return cls(path=name.strip("/"))


WRAPPER_TYPES = (GeoPoint, Timestamp, DocumentReference)

_SCALAR_TYPES = (bool, int, float, str, bytes)


def from_native(value: Any) -> Any:
    """Convert a value read from a document SDK into docmirror value types.

    Applied recursively through mappings and sequences:
    - datetime -> Timestamp
    - objects exposing latitude and longitude -> GeoPoint
    - objects exposing a string path and an id -> DocumentReference

    Anything else is returned unchanged, including point-like objects whose
    coordinates are missing, non-numeric or out of range.
    """
    if value is None or isinstance(value, _SCALAR_TYPES + WRAPPER_TYPES):
        return value
    if isinstance(value, datetime):
        return Timestamp.from_datetime(value)
    if isinstance(value, Mapping):
        return {key: from_native(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [from_native(item) for item in value]
    if hasattr(value, "latitude") and hasattr(value, "longitude"):
        try:
            return GeoPoint(latitude=float(value.latitude), longitude=float(value.longitude))
        except (TypeError, ValueError):
            # Left raw so the geopoint validator rejects it like any other bad value
            return value
    if isinstance(getattr(value, "path", None), str) and hasattr(value, "id"):
        return DocumentReference(path=value.path)
    return value
