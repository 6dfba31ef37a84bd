"""Pluggable sinks for advisory pipeline events.

Stages report progress (OCR started, items dropped, state transitions) through
a sink instead of writing to the log directly, so a deployment can route them
to metrics or tracing. Sinks must never raise into the caller.
"""

from abc import ABC, abstractmethod

from receiptly.logging.logger import Log


class BaseEventSink(ABC):
    """Contract for structured event sinks."""

    @abstractmethod
    def emit(self, event: str, **fields: object) -> None:
        """Record a single named event with structured fields."""


class LogEventSink(BaseEventSink):
    """Writes events to the application log at debug level."""

    def emit(self, event: str, **fields: object) -> None:
        Log.debug(f"event {event}", **fields)


class NullEventSink(BaseEventSink):
    """Discards every event."""

    def emit(self, event: str, **fields: object) -> None:
        _ = event, fields
