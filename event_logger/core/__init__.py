"""
Core module for the event logger

This module contains the fundamental classes:
- Logger: Event router with level filtering and critical event tracking
- LoggerBuilder: Builder pattern for logger construction
- LogEvent: Immutable log event
- LogEventType / LogLevel / LogAction: Enumerations
- LoggerConfig: Configuration management
- LoggingContext: Shared layout, event factory and logger
"""

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
from event_logger.core.logger import Logger, LogResult
from event_logger.core.logger_builder import LoggerBuilder

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
    "LoggerBuilder",
]
