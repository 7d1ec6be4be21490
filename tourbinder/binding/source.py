"""Accept either a reader result or a bare record as binder input."""

from typing import Any, TypeVar

from tourbinder.utils.diagnostics import DiagnosticSink
from tourbinder.utils.json_reader import ReadResult

T = TypeVar("T")


def unwrap_source(source: "ReadResult[T] | T", sink: DiagnosticSink) -> T:
    """
    Return the record to bind over.

    A failed read is reported to the sink exactly once; binding then
    proceeds over whatever partial record the reader returned.
    """
    if isinstance(source, ReadResult):
        if not source.success:
            sink.emit(source.message)
        return source.record
    return source


def records_of(record: Any, field: str = "data") -> list[Any]:
    """List of entries of a content file, tolerating a missing record."""
    if record is None:
        return []
    return list(getattr(record, field, None) or [])
