"""
Exception hierarchy for the event logger

All errors are raised synchronously and never retried inside the package.
Each error also derives from the closest built-in exception so callers
catching ValueError/RuntimeError keep working.
"""

from typing import Optional


class LoggerError(Exception):
    """
    Base class for controlled, domain-level failures.

    Supports chaining through an optional cause. When a cause is given,
    its type and message are appended to this error's message.

    Example:
        try:
            parse(row)
        except KeyError as e:
            raise ValidationError("Row is missing a field", e)
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        if cause is not None and str(cause):
            message = (
                f"{message} (caused by '{type(cause).__name__}' "
                f"with message '{cause}')"
            )
        super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def rethrow_cause_if_needed(self) -> None:
        """
        Re-raise the deepest original cause, or this error if there is none.

        Nested LoggerError causes are unwrapped recursively.
        """
        if isinstance(self.cause, LoggerError):
            self.cause.rethrow_cause_if_needed()
        if self.cause is not None:
            raise self.cause
        raise self

    def __str__(self) -> str:
        return self.message


class ValidationError(LoggerError, ValueError):
    """Malformed log event, layout, factory or appender argument."""


class ConfigurationError(LoggerError, ValueError):
    """Invalid level or action when configuring the logger."""


class NotInitializedError(LoggerError, RuntimeError):
    """Operation needs an active logger or appender that was never created."""


class UniquenessError(LoggerError, ValueError):
    """Two appenders of the same kind in one logger registry."""


class CriticalLogError(LoggerError):
    """
    ERROR/WARN event escalated because the logger action is EXIT.

    The message is the layout-formatted event, identical to what the
    appenders received. The event itself is kept in ``event``.
    """

    def __init__(self, message: str, event=None, cause: Optional[BaseException] = None):
        super().__init__(message, cause)
        self.event = event
