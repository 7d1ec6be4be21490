"""tourbinder utilities."""

from .config_loader import BinderSettings, load_settings, QUIZ_FILE
from .diagnostics import (
    DiagnosticSink,
    LoggingDiagnosticSink,
    CollectingDiagnosticSink,
    CallbackDiagnosticSink,
    as_sink,
)
from .json_reader import JsonReader, ReadResult, read_structured

__all__ = [
    "BinderSettings",
    "load_settings",
    "QUIZ_FILE",
    "DiagnosticSink",
    "LoggingDiagnosticSink",
    "CollectingDiagnosticSink",
    "CallbackDiagnosticSink",
    "as_sink",
    "JsonReader",
    "ReadResult",
    "read_structured",
]
