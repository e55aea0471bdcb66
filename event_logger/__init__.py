"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Event Logger - A lightweight event logging framework
Routes leveled log events to pluggable appenders and keeps track of
errors and warnings
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from event_logger.core.exceptions import (
    LoggerError,
    ValidationError,
    ConfigurationError,
    NotInitializedError,
    UniquenessError,
    CriticalLogError,
)
from event_logger.core.log_level import LogEventType, LogLevel, LogAction
from event_logger.core.log_event import LogEvent, create_log_event, validate_log_event
from event_logger.core.context import LoggingContext, get_default_context
from event_logger.core.logger_config import LoggerConfig
from event_logger.core.logger import (
    Logger,
    LogResult,
    get_instance,
    get_logger,
    clear_instance,
)
from event_logger.core.logger_builder import LoggerBuilder
from event_logger.formatters.layout import Layout, short_formatter, long_formatter
from event_logger.appenders import Appender, AbstractAppender, ConsoleAppender, CellAppender

# Import submodules (not all classes by default)
from event_logger import appenders
from event_logger import formatters

__all__ = [
    "LoggerError",
    "ValidationError",
    "ConfigurationError",
    "NotInitializedError",
    "UniquenessError",
    "CriticalLogError",
    "LogEventType",
    "LogLevel",
    "LogAction",
    "LogEvent",
    "create_log_event",
    "validate_log_event",
    "LoggingContext",
    "get_default_context",
    "LoggerConfig",
    "Logger",
    "LogResult",
    "get_instance",
    "get_logger",
    "clear_instance",
    "LoggerBuilder",
    "Layout",
    "short_formatter",
    "long_formatter",
    "Appender",
    "AbstractAppender",
    "ConsoleAppender",
    "CellAppender",
    "appenders",
    "formatters",
]
