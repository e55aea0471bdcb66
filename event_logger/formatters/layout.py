"""
Layout with a pluggable formatting function

The formatting function is the strategy: any callable taking one LogEvent
and returning a non-empty string. It is checked once, when the Layout is
built, against a synthetic probe event.
"""

import json
from datetime import datetime
from typing import Callable, Optional

from event_logger.core.exceptions import ValidationError
from event_logger.core.log_event import LogEvent, date_to_str, validate_log_event
from event_logger.core.log_level import LogEventType
from event_logger.formatters.base_formatter import BaseFormatter, positional_arity

Formatter = Callable[[LogEvent], str]

_PROBE_EVENT = LogEvent(
    event_type=LogEventType.INFO,
    message="Layout probe event",
    timestamp=datetime(2000, 1, 1),
)


def short_formatter(event: LogEvent) -> str:
    """
    Format as '[TYPE] message', followed by the extra fields as JSON.

    Example:
        [INFO] Script started {"userId":123}
    """
    text = f"[{event.event_type.label}] {event.message}"
    extras = event.extra_fields_json()
    if extras:
        text += f" {extras}"
    return text


def long_formatter(event: LogEvent) -> str:
    """
    Format as '[YYYY-MM-DD HH:MM:SS,mmm] [TYPE] message {extras}'.

    This is the default formatter.
    """
    return f"[{date_to_str(event.timestamp)}] {short_formatter(event)}"


def json_formatter(event: LogEvent) -> str:
    """Format the event as one compact JSON object."""
    return json.dumps(event.to_dict(), separators=(",", ":"), ensure_ascii=False)


class Layout(BaseFormatter):
    """
    Default layout implementation.

    Example:
        # Default: timestamp, type and message
        layout = Layout()

        # Short form without timestamp
        layout = Layout(short_formatter)

        # Custom strategy
        layout = Layout(lambda e: f"{e.event_type.name}: {e.message}")
    """

    def __init__(self, formatter: Optional[Formatter] = None):
        """
        Initialize layout.

        Args:
            formatter: Function formatting one LogEvent (default: long_formatter)

        Raises:
            ValidationError: If formatter is not a one-argument function
                             returning a non-empty string
        """
        self._formatter = long_formatter if formatter is None else formatter
        self._validate_formatter(self._formatter)

    @property
    def formatter(self) -> Formatter:
        """The formatting function."""
        return self._formatter

    def format(self, event: LogEvent) -> str:
        """
        Format a log event.

        Raises:
            ValidationError: If event is not a valid log event
        """
        validate_log_event(event, "Layout.format")
        return self._formatter(event)

    @property
    def formatter_name(self) -> str:
        return getattr(self._formatter, "__name__", None) or "anonymous"

    def __str__(self) -> str:
        return f'Layout: {{formatter: [Function: "{self.formatter_name}"]}}'

    def __repr__(self) -> str:
        return f"Layout(formatter={self.formatter_name})"

    @staticmethod
    def _validate_formatter(formatter) -> None:
        prefix = "[Layout.__init__]: Invalid Layout: "
        arity = positional_arity(formatter) if callable(formatter) else "N/A"
        if not callable(formatter) or arity != 1:
            raise ValidationError(
                f"{prefix}The formatter must be a function accepting a single "
                f"LogEvent argument. Example: lambda e: f'[{{e.event_type.name}}] "
                f"{{e.message}}'. Got: type=\"{type(formatter).__name__}\", arity={arity}"
            )
        try:
            probe = formatter(_PROBE_EVENT)
        except Exception as e:
            raise ValidationError(f"{prefix}The formatter failed on a probe event", e)
        if not isinstance(probe, str) or not probe:
            raise ValidationError(
                f"{prefix}The formatter must return a non-empty string. "
                f"Got: {probe!r}"
            )
