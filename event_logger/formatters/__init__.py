"""
Layouts module

Provides the layout used by every appender to format log events.
"""

from event_logger.formatters.base_formatter import BaseFormatter, validate_layout
from event_logger.formatters.layout import (
    Layout,
    short_formatter,
    long_formatter,
    json_formatter,
)

__all__ = [
    "BaseFormatter",
    "validate_layout",
    "Layout",
    "short_formatter",
    "long_formatter",
    "json_formatter",
]
