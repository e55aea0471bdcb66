"""
Main Logger class - routes log events to appenders

Events pass the level filter, are built once by the shared factory and
delivered to every appender in registration order. ERROR and WARN events
are recorded and counted; with LogAction.EXIT they also fail the call
with a CriticalLogError carrying the formatted message.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from event_logger.core.context import LoggingContext, get_default_context
from event_logger.core.exceptions import (
    CriticalLogError,
    NotInitializedError,
    UniquenessError,
    ValidationError,
)
from event_logger.core.log_event import ExtraFields, LogEvent, validate_log_event
from event_logger.core.log_level import LogAction, LogEventType, LogLevel
from event_logger.core.logger_config import LoggerConfig


@dataclass(frozen=True)
class LogResult:
    """
    Outcome of one logging call.

    ``error`` is set only when a critical event was escalated; the event
    is already recorded in the logger at that point.
    """

    event_type: LogEventType
    dispatched: bool = False
    event: Optional[LogEvent] = None
    error: Optional[CriticalLogError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        """Raise the escalation error, if any."""
        if self.error is not None:
            raise self.error


class Logger:
    """
    Event router with level filtering and critical event tracking.

    Level and action are fixed at creation. Use get_instance() for the
    shared logger, or create one directly for an isolated setup.

    Example:
        logger = get_instance(LogLevel.INFO, LogAction.CONTINUE)
        logger.add_appender(ConsoleAppender())
        logger.info("Script started")   # [INFO] Script started
        logger.trace("Step one")        # filtered out by INFO
    """

    DEFAULT_LEVEL = LogLevel.WARN
    DEFAULT_ACTION = LogAction.EXIT

    def __init__(
        self,
        level: LogLevel = DEFAULT_LEVEL,
        action: LogAction = DEFAULT_ACTION,
        context: Optional[LoggingContext] = None,
        colored_output: bool = False,
    ):
        """
        Initialize logger.

        Args:
            level: Verbosity level
            action: What to do after an ERROR or WARN event is dispatched
            context: Context providing layout and event factory
            colored_output: Colors for the auto-registered console appender

        Raises:
            ConfigurationError: If level or action is not a declared value
        """
        self._level = LogLevel.coerce(level)
        self._action = LogAction.coerce(action)
        self._context = context or get_default_context()
        self._colored_output = colored_output
        self._appenders: List[Any] = []
        self._critical_events: List[LogEvent] = []
        self._err_cnt = 0
        self._warn_cnt = 0

    @classmethod
    def from_config(
        cls, config: LoggerConfig, context: Optional[LoggingContext] = None
    ) -> "Logger":
        """Create a logger from a LoggerConfig."""
        return cls(
            config.level,
            config.action,
            context=context,
            colored_output=config.colored_output,
        )

    @property
    def context(self) -> LoggingContext:
        return self._context

    # Logging

    def try_log(
        self,
        message: str,
        event_type: LogEventType,
        extra_fields: Optional[ExtraFields] = None,
    ) -> LogResult:
        """
        Route a message and report the outcome instead of raising.

        Raises:
            ValidationError: If the event type, message or extra fields
                             are invalid, or an appender misbehaves
        """
        event_type = self._check_event_type(event_type)
        if not self._level.admits(event_type):
            return LogResult(event_type)

        if not self._appenders:
            from event_logger.appenders.console_appender import ConsoleAppender
            self.add_appender(ConsoleAppender(self._context, colored=self._colored_output))

        event = self._context.get_event_factory()(message, event_type, extra_fields)
        validate_log_event(event, "Logger.log")
        for appender in self._appenders:
            appender.log_event(event)

        if not event_type.is_critical:
            return LogResult(event_type, dispatched=True, event=event)

        # All appenders got the same event, the first one stands for all
        last_event = self._appenders[0].get_last_log_event()
        if last_event is None:
            raise ValidationError(
                f"[Logger.log]: Appender {type(self._appenders[0]).__name__} did not "
                f"return a LogEvent from get_last_log_event()"
            )
        self._critical_events.append(last_event)
        if event_type == LogEventType.ERROR:
            self._err_cnt += 1
        else:
            self._warn_cnt += 1

        error = None
        if self._action == LogAction.EXIT:
            error = CriticalLogError(self._context.get_layout().format(last_event), last_event)
        return LogResult(event_type, dispatched=True, event=event, error=error)

    def log(
        self,
        message: str,
        event_type: LogEventType,
        extra_fields: Optional[ExtraFields] = None,
    ) -> None:
        """
        Route a message to all appenders if the level allows it.

        Raises:
            CriticalLogError: If an ERROR/WARN event was dispatched and
                              the action is LogAction.EXIT
            ValidationError: If the arguments do not form a valid event
        """
        self.try_log(message, event_type, extra_fields).raise_for_error()

    def error(self, message: str, extra_fields: Optional[ExtraFields] = None) -> None:
        """Log error message."""
        self.log(message, LogEventType.ERROR, extra_fields)

    def warn(self, message: str, extra_fields: Optional[ExtraFields] = None) -> None:
        """Log warning message."""
        self.log(message, LogEventType.WARN, extra_fields)

    def info(self, message: str, extra_fields: Optional[ExtraFields] = None) -> None:
        """Log info message."""
        self.log(message, LogEventType.INFO, extra_fields)

    def trace(self, message: str, extra_fields: Optional[ExtraFields] = None) -> None:
        """Log trace message."""
        self.log(message, LogEventType.TRACE, extra_fields)

    # Appenders

    def add_appender(self, appender: Any) -> None:
        """
        Add an appender.

        Raises:
            ValidationError: If appender is None or not an appender
            UniquenessError: If an appender of the same kind is registered
        """
        if appender is None:
            raise ValidationError(
                "[Logger.add_appender]: You can't add an appender that is None."
            )
        self._assert_unique_kinds(self._appenders + [appender])
        self._appenders.append(appender)

    def set_appenders(self, appenders: Iterable[Any]) -> None:
        """
        Replace all appenders at once.

        Raises:
            ValidationError: If appenders is None or contains None
            UniquenessError: If two appenders share the same kind
        """
        if appenders is None:
            raise ValidationError("[Logger.set_appenders]: 'appenders' must not be None.")
        new_appenders = list(appenders)
        self._assert_unique_kinds(new_appenders)
        self._appenders = new_appenders

    def remove_appender(self, appender: Any) -> None:
        """Remove an appender; does nothing if it is not registered."""
        for i, registered in enumerate(self._appenders):
            if registered is appender:
                del self._appenders[i]
                return

    def get_appenders(self) -> List[Any]:
        """Copy of the registered appenders, in registration order."""
        return list(self._appenders)

    # State

    def get_level(self) -> LogLevel:
        return self._level

    def get_action(self) -> LogAction:
        return self._action

    def get_err_cnt(self) -> int:
        """Number of ERROR events dispatched."""
        return self._err_cnt

    def get_warn_cnt(self) -> int:
        """Number of WARN events dispatched."""
        return self._warn_cnt

    def get_critical_events(self) -> List[LogEvent]:
        """Copy of the dispatched ERROR and WARN events, oldest first."""
        return list(self._critical_events)

    def has_errors(self) -> bool:
        return self._err_cnt > 0

    def has_warnings(self) -> bool:
        return self._warn_cnt > 0

    def has_messages(self) -> bool:
        """True if any ERROR or WARN event was dispatched."""
        return len(self._critical_events) > 0

    def reset(self) -> None:
        """
        Clear the history and counters.

        Appenders and configuration are kept.
        """
        self._critical_events = []
        self._err_cnt = 0
        self._warn_cnt = 0

    clear = reset

    def export_state(self) -> Dict[str, Any]:
        """
        Snapshot of the logger state for persistence or analysis.

        Returns:
            Dictionary with level, action, errorCount, warningCount and
            a copy of criticalEvents
        """
        return {
            "level": self._level.name,
            "action": self._action.name,
            "errorCount": self._err_cnt,
            "warningCount": self._warn_cnt,
            "criticalEvents": list(self._critical_events),
        }

    def to_short_string(self) -> str:
        """Like __str__, listing appenders by kind only."""
        kinds = ", ".join(a.kind for a in self._appenders)
        return f"{self._summary()}, appenders: [{kinds}]}}"

    def __str__(self) -> str:
        appenders = ", ".join(str(a) for a in self._appenders)
        return f"{self._summary()}, appenders: [{appenders}]}}"

    def __repr__(self) -> str:
        return f"Logger(level={self._level.name}, action={self._action.name})"

    def _summary(self) -> str:
        return (
            f'Logger: {{level: "{self._level.name}", action: "{self._action.name}", '
            f"errCnt: {self._err_cnt}, warnCnt: {self._warn_cnt}"
        )

    @staticmethod
    def _check_event_type(event_type: Any) -> LogEventType:
        if (isinstance(event_type, bool) or not isinstance(event_type, int)
                or event_type not in list(LogEventType)):
            raise ValidationError(
                f"[Logger.log]: event type='{event_type}' must be a valid LogEventType value."
            )
        return LogEventType(event_type)

    @staticmethod
    def _assert_unique_kinds(appenders: List[Any]) -> None:
        seen = set()
        for appender in appenders:
            if appender is None:
                raise ValidationError("Appender list contains a None entry.")
            if not (callable(getattr(appender, "log_event", None))
                    and callable(getattr(appender, "get_last_log_event", None))):
                raise ValidationError(
                    f"'{type(appender).__name__}' does not implement the Appender interface."
                )
            kind = getattr(appender, "kind", None)
            if not kind:
                raise ValidationError(
                    f"Appender '{type(appender).__name__}' must declare a non-empty kind."
                )
            if kind in seen:
                raise UniquenessError(f"Only one appender of kind '{kind}' is allowed.")
            seen.add(kind)


# Shared logger helpers, backed by a LoggingContext (default: process-wide)


def get_instance(
    level: LogLevel = Logger.DEFAULT_LEVEL,
    action: LogAction = Logger.DEFAULT_ACTION,
    context: Optional[LoggingContext] = None,
) -> Logger:
    """
    Return the shared logger, creating it on the first call.

    Subsequent calls ignore level and action.

    Raises:
        ConfigurationError: If the logger is created with an undeclared
                            level or action
    """
    return (context or get_default_context()).get_logger(level, action)


def get_logger(context: Optional[LoggingContext] = None) -> Logger:
    """
    Return the shared logger without creating it.

    Raises:
        NotInitializedError: If no logger is active
    """
    logger = (context or get_default_context()).peek_logger()
    if logger is None:
        raise NotInitializedError(
            "A logger instance can't be None. Please invoke get_instance first."
        )
    return logger


def clear_instance(context: Optional[LoggingContext] = None) -> None:
    """Drop the shared logger and its state. Intended for tests."""
    (context or get_default_context()).clear_logger()


def _init_if_needed(context: Optional[LoggingContext]) -> Logger:
    context = context or get_default_context()
    logger = context.peek_logger()
    if logger is None:
        logger = context.get_logger()
        logger.trace(
            f"Logger instantiated via lazy initialization with default parameters "
            f"(level=LogLevel.{logger.get_level().name}, "
            f"action=LogAction.{logger.get_action().name})"
        )
    return logger


def log(
    message: str,
    event_type: LogEventType,
    extra_fields: Optional[ExtraFields] = None,
    context: Optional[LoggingContext] = None,
) -> None:
    """Log through the shared logger, creating it with defaults if needed."""
    _init_if_needed(context).log(message, event_type, extra_fields)


def error(message: str, extra_fields: Optional[ExtraFields] = None,
          context: Optional[LoggingContext] = None) -> None:
    log(message, LogEventType.ERROR, extra_fields, context)


def warn(message: str, extra_fields: Optional[ExtraFields] = None,
         context: Optional[LoggingContext] = None) -> None:
    log(message, LogEventType.WARN, extra_fields, context)


def info(message: str, extra_fields: Optional[ExtraFields] = None,
         context: Optional[LoggingContext] = None) -> None:
    log(message, LogEventType.INFO, extra_fields, context)


def trace(message: str, extra_fields: Optional[ExtraFields] = None,
          context: Optional[LoggingContext] = None) -> None:
    log(message, LogEventType.TRACE, extra_fields, context)


def get_err_cnt(context: Optional[LoggingContext] = None) -> int:
    return get_logger(context).get_err_cnt()


def get_warn_cnt(context: Optional[LoggingContext] = None) -> int:
    return get_logger(context).get_warn_cnt()


def has_errors(context: Optional[LoggingContext] = None) -> bool:
    return get_logger(context).has_errors()


def has_warnings(context: Optional[LoggingContext] = None) -> bool:
    return get_logger(context).has_warnings()


def has_messages(context: Optional[LoggingContext] = None) -> bool:
    return get_logger(context).has_messages()


def get_critical_events(context: Optional[LoggingContext] = None) -> List[LogEvent]:
    return get_logger(context).get_critical_events()


def get_appenders(context: Optional[LoggingContext] = None) -> List[Any]:
    return get_logger(context).get_appenders()


def get_level(context: Optional[LoggingContext] = None) -> LogLevel:
    return get_logger(context).get_level()


def get_action(context: Optional[LoggingContext] = None) -> LogAction:
    return get_logger(context).get_action()


def add_appender(appender: Any, context: Optional[LoggingContext] = None) -> None:
    get_logger(context).add_appender(appender)


def set_appenders(appenders: Iterable[Any], context: Optional[LoggingContext] = None) -> None:
    get_logger(context).set_appenders(appenders)


def remove_appender(appender: Any, context: Optional[LoggingContext] = None) -> None:
    get_logger(context).remove_appender(appender)


def reset(context: Optional[LoggingContext] = None) -> None:
    get_logger(context).reset()


def export_state(context: Optional[LoggingContext] = None) -> Dict[str, Any]:
    return get_logger(context).export_state()
