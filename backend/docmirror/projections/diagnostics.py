"""Diagnostics for data that does not match the schema.

Mismatches are never fatal. The projector reports each one to a sink and keeps
going. The default sink writes them to the module logger; tests and callers
that want the events themselves pass a DiagnosticCollector.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Protocol

logger = logging.getLogger(__name__)


class DiagnosticCode(str, Enum):
    """Kinds of data-quality mismatch."""

    REPEATED_NOT_ARRAY = "repeated_not_array"
    INVALID_TYPE = "invalid_type"
    INVALID_ELEMENT_TYPE = "invalid_element_type"
    COERCION_FAILED = "coercion_failed"


@dataclass(frozen=True)
class Diagnostic:
    """A single skipped value.

    Args:
        code: Kind of mismatch.
        path: Dotted path of the field (e.g. 'address.city').
        field_type: Declared type tag of the field.
        value_type: Python type name of the offending value.
        index: Element index for repeated fields, None otherwise.
        detail: Reason a validated value could not be converted.
    """

    code: DiagnosticCode
    path: str
    field_type: str
    value_type: str
    index: int | None = None
    detail: str | None = None

    @property
    def message(self) -> str:
        if self.code == DiagnosticCode.COERCION_FAILED:
            position = f" [{self.index}]" if self.index is not None else ""
            kind = "array field" if self.index is not None else "field"
            return (
                f"{self.field_type} {kind} '{self.path}'{position}: "
                f"Could not convert value: {self.detail}"
            )
        if self.code == DiagnosticCode.REPEATED_NOT_ARRAY:
            return f"Array field '{self.path}' does not contain an array, skipping"
        if self.code == DiagnosticCode.INVALID_ELEMENT_TYPE:
            return (
                f"{self.field_type} array field '{self.path}' [{self.index}]: "
                f"Invalid data type: {self.value_type}"
            )
        return f"{self.field_type} field '{self.path}': Invalid data type: {self.value_type}"


class DiagnosticSink(Protocol):
    """Receives diagnostics emitted during a projection."""

    def emit(self, diagnostic: Diagnostic) -> None: ...


class LoggingSink:
    """Writes each diagnostic as a warning on the docmirror logger."""

    def emit(self, diagnostic: Diagnostic) -> None:
        logger.warning("%s", diagnostic.message)


@dataclass
class DiagnosticCollector:
    """Accumulates diagnostics in memory."""

    diagnostics: list[Diagnostic] = field(default_factory=list)

    def emit(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    def by_code(self, code: DiagnosticCode) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.code == code]

    def __len__(self) -> int:
        return len(self.diagnostics)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.diagnostics)


default_sink = LoggingSink()
