"""Schema-driven document projection.

Projections extract the fields a schema names from a document, validate
them against their declared types and coerce them into values a
column-oriented sink can store.
"""

from docmirror.projections.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticCollector,
    DiagnosticSink,
    LoggingSink,
)
from docmirror.projections.processor import process_field, project
from docmirror.projections.registry import TYPE_HANDLERS, TypeHandler, get_handler
from docmirror.projections.snapshot import (
    DocumentSnapshot,
    MappingDocument,
    RestDocument,
    project_document,
)

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticCollector",
    "DiagnosticSink",
    "DocumentSnapshot",
    "LoggingSink",
    "MappingDocument",
    "RestDocument",
    "TYPE_HANDLERS",
    "TypeHandler",
    "get_handler",
    "process_field",
    "project",
    "project_document",
]
