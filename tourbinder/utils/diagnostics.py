"""
Diagnostic channel - where non-fatal content problems are reported.

Binders never decide how a diagnostic is shown. They call `emit()` on a
sink supplied by the host.
"""

import logging
from typing import Callable, Protocol, Union, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class DiagnosticSink(Protocol):
    def emit(self, text: str) -> None:
        ...


class LoggingDiagnosticSink:
    """Default sink: forwards every diagnostic to the `tourbinder` logger."""

    def __init__(self, level: Union[int, str] = logging.WARNING):
        if isinstance(level, str):
            resolved = logging.getLevelName(level.upper())
            if not isinstance(resolved, int):
                raise ValueError(f"Unknown log level: {level}")
            level = resolved
        self.level = level

    def emit(self, text: str) -> None:
        logger.log(self.level, text)


class CollectingDiagnosticSink:
    """Keeps diagnostics in memory, in the order they were emitted."""

    def __init__(self):
        self.messages: list[str] = []

    def emit(self, text: str) -> None:
        self.messages.append(text)

    def clear(self) -> None:
        self.messages.clear()


class CallbackDiagnosticSink:
    """Wraps a plain `fn(text)` callable."""

    def __init__(self, callback: Callable[[str], None]):
        self.callback = callback

    def emit(self, text: str) -> None:
        self.callback(text)


SinkLike = Union[DiagnosticSink, Callable[[str], None], None]


def as_sink(sink: SinkLike) -> DiagnosticSink:
    """
    Normalize whatever the host passed as a diagnostic channel.

    Args:
        sink: A sink, a callable taking the message, or None for logging

    Returns:
        An object with an `emit(text)` method
    """
    if sink is None:
        return LoggingDiagnosticSink()
    if isinstance(sink, DiagnosticSink):
        return sink
    if callable(sink):
        return CallbackDiagnosticSink(sink)
    raise TypeError(f"Not a diagnostic sink: {sink!r}")
