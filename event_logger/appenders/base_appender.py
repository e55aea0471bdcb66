"""
Appender interface and template implementation

An appender delivers log events to one channel (console, spreadsheet
cell, ...). Appenders are passive recorders: they never transform or
drop a valid event, so every appender registered in a logger reports the
same last event. The logger relies on this when it reads the history
from the first appender only.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional

from event_logger.core.context import LoggingContext, get_default_context
from event_logger.core.exceptions import ValidationError
from event_logger.core.log_event import ExtraFields, LogEvent, validate_log_event
from event_logger.core.log_level import LogEventType
from event_logger.formatters.base_formatter import BaseFormatter


class Appender(ABC):
    """
    Appender contract.

    ``kind`` is a stable tag identifying the channel. A logger accepts
    at most one appender per kind.
    """

    kind: str = ""

    @abstractmethod
    def log_event(self, event: LogEvent) -> None:
        """
        Deliver a log event.

        Raises:
            ValidationError: If event is not a valid log event
        """

    @abstractmethod
    def log_message(
        self,
        message: str,
        event_type: LogEventType,
        extra_fields: Optional[ExtraFields] = None,
    ) -> None:
        """
        Build a log event with the shared factory and deliver it.

        Raises:
            ValidationError: If the arguments do not form a valid event
        """

    @abstractmethod
    def get_last_log_event(self) -> Optional[LogEvent]:
        """Return the last event delivered, or None."""


class AbstractAppender(Appender):
    """
    Template for concrete appenders.

    Provides access to the shared layout and event factory, validation
    and last-event bookkeeping. Subclasses implement ``_send_event``.
    """

    def __init__(self, context: Optional[LoggingContext] = None):
        """
        Initialize appender.

        Args:
            context: Context providing layout and event factory
                     (default: the process-wide context)
        """
        self._context = context or get_default_context()
        self._last_log_event: Optional[LogEvent] = None

    @property
    def context(self) -> LoggingContext:
        return self._context

    def get_layout(self) -> BaseFormatter:
        """Shared layout, lazily created."""
        return self._context.get_layout()

    def get_event_factory(self):
        """Shared log event factory."""
        return self._context.get_event_factory()

    def log_event(self, event: LogEvent) -> None:
        """Validate, deliver, then remember the event."""
        validate_log_event(event, f"{type(self).__name__}.log_event")
        self._send_event(event)
        self._last_log_event = event

    def log_message(
        self,
        message: str,
        event_type: LogEventType,
        extra_fields: Optional[ExtraFields] = None,
    ) -> None:
        """Build an event with the shared factory and deliver it."""
        if (isinstance(event_type, bool) or not isinstance(event_type, int)
                or event_type not in list(LogEventType)):
            raise ValidationError(
                f"[{type(self).__name__}.log_message]: event type='{event_type}' must be "
                f"provided and must be a valid LogEventType value."
            )
        event = self.get_event_factory()(message, LogEventType(event_type), extra_fields)
        self.log_event(event)

    def get_last_log_event(self) -> Optional[LogEvent]:
        return self._last_log_event

    def clear_last_log_event(self) -> None:
        """Forget the last event. Intended for tests."""
        self._last_log_event = None

    def format(self, event: LogEvent) -> str:
        """Format an event with the shared layout."""
        return self.get_layout().format(event)

    @abstractmethod
    def _send_event(self, event: LogEvent) -> None:
        """Write an already validated event to the channel."""

    def _details(self) -> str:
        """Subclass-specific part of __str__."""
        return ""

    def __str__(self) -> str:
        layout = self._context.get_layout() if self._context.has_layout() else None
        factory = (
            getattr(self._context.get_event_factory(), "__name__", "anonymous")
            if self._context.has_event_factory() else None
        )
        last = self._last_log_event
        return (
            f"AbstractAppender: {{layout={layout}, logEventFactory=\"{factory}\", "
            f"lastLogEvent={last}}} {type(self).__name__}: {{{self._details()}}}"
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind!r})"
