"""
Logging context

Holds the state shared by the logger and every appender: the layout,
the log event factory and the logger itself. Each slot is filled once
(lazily or by the first setter call) and then stays fixed until it is
explicitly cleared. A module-level default context backs the
get_instance()/clear_instance() helpers; tests build their own.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Callable, Optional

from event_logger.core.log_event import LogEvent, create_log_event, validate_event_factory
from event_logger.core.log_level import LogAction, LogLevel
from event_logger.formatters.base_formatter import BaseFormatter, validate_layout
from event_logger.formatters.layout import Layout

if TYPE_CHECKING:
    from event_logger.core.logger import Logger

LogEventFactory = Callable[..., LogEvent]


class LoggingContext:
    """
    Shared layout, event factory and logger.

    Example:
        context = LoggingContext()
        context.set_layout(Layout(short_formatter))
        logger = context.get_logger(LogLevel.INFO, LogAction.CONTINUE)
        logger.info("Script started")
    """

    def __init__(self):
        self._layout: Optional[BaseFormatter] = None
        self._event_factory: Optional[LogEventFactory] = None
        self._logger: Optional["Logger"] = None

    # Layout

    def get_layout(self) -> BaseFormatter:
        """Return the shared layout, creating the default one on first use."""
        if self._layout is None:
            self._layout = Layout()
        return self._layout

    def set_layout(self, layout: BaseFormatter) -> None:
        """
        Set the shared layout if none was set or created yet.

        Later calls are ignored so that all appenders render the same way.

        Raises:
            ValidationError: If layout is not a valid layout
        """
        validate_layout(layout, "LoggingContext.set_layout")
        if self._layout is None:
            self._layout = layout

    def has_layout(self) -> bool:
        return self._layout is not None

    def clear_layout(self) -> None:
        """Forget the shared layout. Intended for tests."""
        self._layout = None

    # Event factory

    def get_event_factory(self) -> LogEventFactory:
        """Return the shared event factory (default: create_log_event)."""
        if self._event_factory is None:
            self._event_factory = create_log_event
        return self._event_factory

    def set_event_factory(self, factory: LogEventFactory) -> None:
        """
        Set the shared event factory if none was set or used yet.

        Raises:
            ValidationError: If factory cannot be called as
                             factory(message, event_type, extra_fields)
        """
        validate_event_factory(factory, "LoggingContext.set_event_factory")
        if self._event_factory is None:
            self._event_factory = factory

    def has_event_factory(self) -> bool:
        return self._event_factory is not None

    def clear_event_factory(self) -> None:
        """Forget the shared event factory. Intended for tests."""
        self._event_factory = None

    # Logger

    def get_logger(
        self,
        level: LogLevel = LogLevel.WARN,
        action: LogAction = LogAction.EXIT,
    ) -> "Logger":
        """
        Return the logger, creating it with level and action on first call.

        Subsequent calls ignore the arguments.

        Raises:
            ConfigurationError: If the logger is created and level or
                                action is not a declared value
        """
        if self._logger is None:
            from event_logger.core.logger import Logger
            self._logger = Logger(level, action, context=self)
        return self._logger

    def install_logger(self, logger: "Logger") -> "Logger":
        """
        Make logger the shared one if no logger is active yet.

        Returns:
            The active logger (the given one, or the one already installed)
        """
        if self._logger is None:
            self._logger = logger
        return self._logger

    def peek_logger(self) -> Optional["Logger"]:
        """Return the logger if active, without creating it."""
        return self._logger

    def has_logger(self) -> bool:
        return self._logger is not None

    def clear_logger(self) -> None:
        """
        Drop the logger with its level, action, history and counters.

        Appenders keep their own state.
        """
        self._logger = None

    def reset(self) -> None:
        """Clear every slot."""
        self.clear_logger()
        self.clear_layout()
        self.clear_event_factory()

    def __repr__(self) -> str:
        return (
            f"LoggingContext(layout={self._layout!s}, "
            f"event_factory={getattr(self._event_factory, '__name__', None)}, "
            f"logger={'active' if self._logger else 'none'})"
        )


_default_context = LoggingContext()


def get_default_context() -> LoggingContext:
    """Return the process-wide default context."""
    return _default_context
