"""Logger builder pattern"""

from typing import Any, List, Optional

from event_logger.appenders.console_appender import ConsoleAppender
from event_logger.core.context import LoggingContext, get_default_context
from event_logger.core.log_level import LogAction, LogLevel
from event_logger.core.logger import Logger
from event_logger.core.logger_config import LoggerConfig


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self, context: Optional[LoggingContext] = None):
        self._config = LoggerConfig()
        self._context = context
        self._console_enabled = False
        self._console_stream = None
        self._layout = None
        self._event_factory = None
        self._custom_appenders: List[Any] = []

    def with_config(self, config: LoggerConfig) -> "LoggerBuilder":
        """Start from an existing configuration."""
        self._config = LoggerConfig(config.level, config.action, config.colored_output)
        return self

    def with_level(self, level: LogLevel) -> "LoggerBuilder":
        """Set verbosity level."""
        self._config.level = LogLevel.coerce(level)
        return self

    def with_action(self, action: LogAction) -> "LoggerBuilder":
        """Set the action for ERROR and WARN events."""
        self._config.action = LogAction.coerce(action)
        return self

    def with_console(self, colored: bool = False, stream=None) -> "LoggerBuilder":
        """Register a console appender."""
        self._console_enabled = True
        self._console_stream = stream
        self._config.colored_output = colored
        return self

    def with_layout(self, layout) -> "LoggerBuilder":
        """
        Set the shared layout.

        Applied to the context at build time; ignored if the context
        already has a layout.
        """
        self._layout = layout
        return self

    def with_event_factory(self, factory) -> "LoggerBuilder":
        """
        Set the shared log event factory.

        Applied to the context at build time; ignored if the context
        already has a factory.
        """
        self._event_factory = factory
        return self

    def add_appender(self, appender) -> "LoggerBuilder":
        """
        Add a custom appender.

        Args:
            appender: Appender instance

        Returns:
            Self for method chaining
        """
        self._custom_appenders.append(appender)
        return self

    def build(self) -> Logger:
        """
        Build a logger bound to the builder context (default: process-wide).

        Raises:
            ValidationError: If the layout, factory or appenders are invalid
            UniquenessError: If two appenders share the same kind
        """
        context = self._context or get_default_context()
        if self._layout is not None:
            context.set_layout(self._layout)
        if self._event_factory is not None:
            context.set_event_factory(self._event_factory)

        logger = Logger.from_config(self._config, context)
        appenders = []
        if self._console_enabled:
            appenders.append(ConsoleAppender(
                context,
                stream=self._console_stream,
                colored=self._config.colored_output,
            ))
        for appender in self._custom_appenders:
            appenders.append(appender)
        if appenders:
            logger.set_appenders(appenders)
        return logger

    def install(self) -> Logger:
        """
        Build the logger and make it the shared one of the context.

        If a shared logger already exists it is returned unchanged.
        """
        context = self._context or get_default_context()
        if context.has_logger():
            return context.peek_logger()
        return context.install_logger(self.build())
