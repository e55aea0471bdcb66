"""
Base formatter interface

A formatter (layout) turns a LogEvent into the core content string sent
to every appender. It does not decorate the output; appenders may add
their own presentation (colors, cell fonts) on top of it.
"""

import inspect
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from event_logger.core.exceptions import ValidationError
from event_logger.core.log_event import LogEvent


def positional_arity(func: Callable) -> Optional[int]:
    """
    Number of required positional parameters of func.

    Returns:
        The count, or None if func takes *args or has no signature metadata
    """
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return None
    required = 0
    for param in signature.parameters.values():
        if param.kind == inspect.Parameter.VAR_POSITIONAL:
            return None
        if param.kind == inspect.Parameter.KEYWORD_ONLY and param.default is param.empty:
            return -1  # cannot be called positionally only
        if (param.kind in (inspect.Parameter.POSITIONAL_ONLY,
                           inspect.Parameter.POSITIONAL_OR_KEYWORD)
                and param.default is param.empty):
            required += 1
    return required


class BaseFormatter(ABC):
    """
    Abstract base class for layouts.

    Formatters convert LogEvent objects into formatted strings.
    """

    @abstractmethod
    def format(self, event: LogEvent) -> str:
        """
        Format a log event into a string.

        Args:
            event: The log event to format

        Returns:
            Formatted string representation of the log event
        """
        pass

    def __call__(self, event: LogEvent) -> str:
        """Allow formatters to be callable."""
        return self.format(event)


def validate_layout(layout: Any, context: Optional[str] = None) -> None:
    """
    Check that an object can act as a layout.

    Args:
        layout: Object to validate
        context: Caller name used as message prefix

    Raises:
        ValidationError: If layout is None, has no callable ``format``,
                         or ``format`` does not take exactly one argument
    """
    prefix = f"[{context}]: " if context else ""
    if layout is None:
        raise ValidationError(f"{prefix}Invalid Layout: layout object is None")
    format_fn = getattr(layout, "format", None)
    if not callable(format_fn):
        raise ValidationError(
            f"{prefix}Invalid Layout: the 'format' method is missing or not a function"
        )
    if positional_arity(format_fn) not in (1, None):
        raise ValidationError(
            f"{prefix}Invalid Layout: 'format' function should take exactly one "
            f"argument (event: LogEvent)"
        )
