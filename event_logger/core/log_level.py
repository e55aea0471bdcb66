"""
Log event types, verbosity levels and actions

LogEventType orders events by verbosity (ERROR is the loudest).
LogLevel is built from the same values plus OFF, so filtering is a
plain numeric comparison: an event is admitted when level >= event type.
"""

from enum import IntEnum

from event_logger.core.exceptions import ConfigurationError, ValidationError


class LogEventType(IntEnum):
    """
    Severity of a log event.

    Values must start at 1; 0 is reserved for LogLevel.OFF.
    """

    ERROR = 1
    WARN = 2
    INFO = 3
    TRACE = 4

    def __str__(self) -> str:
        return self.name

    @property
    def label(self) -> str:
        """Label used by layouts, e.g. 'INFO'."""
        return self.name

    @property
    def is_critical(self) -> bool:
        """True for events tracked in the logger history (ERROR, WARN)."""
        return self <= LogEventType.WARN

    @property
    def color_code(self) -> str:
        """ANSI color code for console output."""
        colors = {
            LogEventType.ERROR: "\033[31m",  # Red
            LogEventType.WARN: "\033[33m",   # Yellow
            LogEventType.INFO: "\033[32m",   # Green
            LogEventType.TRACE: "\033[37m",  # White
        }
        return colors.get(self, "\033[0m")

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return "\033[0m"

    @classmethod
    def from_string(cls, name: str) -> "LogEventType":
        """
        Convert string to LogEventType.

        Args:
            name: Event type name (case-insensitive)

        Raises:
            ValidationError: If name is not a declared event type
        """
        key = str(name).upper()
        if key in cls.__members__:
            return cls[key]
        raise ValidationError(f"Invalid log event type: {name}")


class LogLevel(IntEnum):
    """
    Verbosity level of the logger.

    Same numeric values as LogEventType with OFF=0 in front. OFF
    disables dispatching, and with it the configured action.
    """

    OFF = 0
    ERROR = 1
    WARN = 2
    INFO = 3
    TRACE = 4

    def __str__(self) -> str:
        return self.name

    def admits(self, event_type: LogEventType) -> bool:
        """Return True if an event of the given type passes this level."""
        return self != LogLevel.OFF and self >= event_type

    @classmethod
    def from_string(cls, name: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Raises:
            ConfigurationError: If name is not a declared level
        """
        key = str(name).upper()
        if key in cls.__members__:
            return cls[key]
        raise ConfigurationError(f"Invalid log level: {name}")

    @classmethod
    def coerce(cls, value) -> "LogLevel":
        """
        Convert an int or LogLevel into a LogLevel.

        Raises:
            ConfigurationError: If value is not defined in LogLevel
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError(
                f"The input value level='{value}' was not defined in LogLevel."
            )
        try:
            return cls(value)
        except ValueError as e:
            raise ConfigurationError(
                f"The input value level='{value}' was not defined in LogLevel."
            ) from e


class LogAction(IntEnum):
    """Action taken after an ERROR or WARN event is dispatched."""

    CONTINUE = 0  # Record the event and keep going
    EXIT = 1      # Record the event, then fail with CriticalLogError

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_string(cls, name: str) -> "LogAction":
        """
        Convert string to LogAction.

        Raises:
            ConfigurationError: If name is not a declared action
        """
        key = str(name).upper()
        if key in cls.__members__:
            return cls[key]
        raise ConfigurationError(f"Invalid log action: {name}")

    @classmethod
    def coerce(cls, value) -> "LogAction":
        """
        Convert an int or LogAction into a LogAction.

        Raises:
            ConfigurationError: If value is not defined in LogAction
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError(
                f"The input value action='{value}' was not defined in LogAction."
            )
        try:
            return cls(value)
        except ValueError as e:
            raise ConfigurationError(
                f"The input value action='{value}' was not defined in LogAction."
            ) from e


def _check_level_alignment() -> None:
    """LogLevel must be {OFF} + LogEventType with matching values."""
    values = [level.value for level in LogLevel]
    if values != list(range(len(values))) or LogLevel.OFF != 0:
        raise ConfigurationError("LogLevel values must increase from OFF=0")
    for event_type in LogEventType:
        if LogLevel.__members__.get(event_type.name) != event_type.value:
            raise ConfigurationError(
                f"LogEventType.{event_type.name} has no matching LogLevel"
            )


_check_level_alignment()
