"""
Logger configuration management
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from event_logger.core.exceptions import ConfigurationError
from event_logger.core.log_level import LogAction, LogLevel

ENV_LEVEL = "EVENT_LOGGER_LEVEL"
ENV_ACTION = "EVENT_LOGGER_ACTION"


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    Level and action are fixed once the logger is created.
    """

    level: LogLevel = LogLevel.WARN
    action: LogAction = LogAction.EXIT

    # Console settings, used for the auto-registered console appender
    colored_output: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        if isinstance(self.level, str):
            self.level = LogLevel.from_string(self.level)
        if isinstance(self.action, str):
            self.action = LogAction.from_string(self.action)
        self.level = LogLevel.coerce(self.level)
        self.action = LogAction.coerce(self.action)
        if not isinstance(self.colored_output, bool):
            raise ConfigurationError("colored_output must be a bool")

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration (WARN, EXIT)."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Everything is logged, errors and warnings do not stop the flow."""
        return cls(level=LogLevel.TRACE, action=LogAction.CONTINUE, colored_output=True)

    @classmethod
    def lenient_config(cls) -> "LoggerConfig":
        """Informational logging that keeps going on errors and warnings."""
        return cls(level=LogLevel.INFO, action=LogAction.CONTINUE)

    @classmethod
    def production_config(cls) -> "LoggerConfig":
        """Only errors are logged, and they stop the flow."""
        return cls(level=LogLevel.ERROR, action=LogAction.EXIT)

    @classmethod
    def silent_config(cls) -> "LoggerConfig":
        """Nothing is dispatched; the action has no effect."""
        return cls(level=LogLevel.OFF, action=LogAction.CONTINUE)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LoggerConfig":
        """
        Create configuration from environment variables.

        Reads EVENT_LOGGER_LEVEL and EVENT_LOGGER_ACTION by name
        (e.g. 'INFO', 'CONTINUE'); missing variables keep the defaults.

        Raises:
            ConfigurationError: If a variable holds an unknown name
        """
        environ = os.environ if environ is None else environ
        config = cls()
        if environ.get(ENV_LEVEL):
            config.level = LogLevel.from_string(environ[ENV_LEVEL].strip())
        if environ.get(ENV_ACTION):
            config.action = LogAction.from_string(environ[ENV_ACTION].strip())
        return config
