"""
Spreadsheet cell appender

Shows the last log event in a single spreadsheet cell, with a font color
per event type. The cell is any object exposing:

    set_value(value), get_value(), clear(), set_font_color(color),
    get_cell_count(), get_address()
"""

import re
from typing import Any, Dict, Optional

from event_logger.appenders.base_appender import AbstractAppender
from event_logger.core.context import LoggingContext
from event_logger.core.exceptions import ValidationError
from event_logger.core.log_event import LogEvent
from event_logger.core.log_level import LogEventType

HEX_COLOR_PATTERN = re.compile(r"^#?[0-9A-Fa-f]{6}$")

DEFAULT_COLORS: Dict[LogEventType, str] = {
    LogEventType.ERROR: "9c0006",  # Red
    LogEventType.WARN: "ed7d31",   # Orange
    LogEventType.INFO: "548235",   # Green
    LogEventType.TRACE: "7f7f7f",  # Gray
}

# Argument names, as shown in error messages and __str__
_FONT_LABELS: Dict[LogEventType, str] = {
    LogEventType.ERROR: "err_font",
    LogEventType.WARN: "warn_font",
    LogEventType.INFO: "info_font",
    LogEventType.TRACE: "trace_font",
}

_EVENT_NAMES: Dict[LogEventType, str] = {
    LogEventType.ERROR: "error",
    LogEventType.WARN: "warning",
    LogEventType.INFO: "info",
    LogEventType.TRACE: "trace",
}


def validate_color(color: Any, name: str, context: Optional[str] = None) -> None:
    """
    Check a color is a 6-digit hex value, with or without '#'.

    Raises:
        ValidationError: If color is missing or malformed
    """
    prefix = f"[{context}]: " if context else ""
    if not isinstance(color, str) or not color:
        raise ValidationError(
            f"{prefix}The input value '{color}' for '{name}' event is missing or not a "
            f"string. Please provide a 6-digit hexadecimal color as 'RRGGBB' or '#RRGGBB'."
        )
    if not HEX_COLOR_PATTERN.match(color):
        raise ValidationError(
            f"{prefix}The input value '{color}' for '{name}' event is not a valid 6-digit "
            f"hexadecimal color. Please use 'RRGGBB' or '#RRGGBB' format."
        )


class CellAppender(AbstractAppender):
    """
    Write formatted log events into one spreadsheet cell.

    Example:
        cell = sheet.get_range("C2")
        logger.add_appender(CellAppender(cell, err_font="#ff0000"))
    """

    kind = "cell"

    def __init__(
        self,
        cell: Any,
        err_font: str = DEFAULT_COLORS[LogEventType.ERROR],
        warn_font: str = DEFAULT_COLORS[LogEventType.WARN],
        info_font: str = DEFAULT_COLORS[LogEventType.INFO],
        trace_font: str = DEFAULT_COLORS[LogEventType.TRACE],
        context: Optional[LoggingContext] = None,
    ):
        """
        Initialize cell appender.

        Args:
            cell: Single-cell range receiving the messages
            err_font: Hex color for ERROR events
            warn_font: Hex color for WARN events
            info_font: Hex color for INFO events
            trace_font: Hex color for TRACE events
            context: Context providing layout and event factory

        Raises:
            ValidationError: If cell is missing, spans several cells,
                             or a color is not a valid hex color
        """
        where = "CellAppender.__init__"
        if cell is None or not callable(getattr(cell, "set_value", None)):
            raise ValidationError(
                f"[{where}]: A valid cell range for input argument cell is required."
            )
        if cell.get_cell_count() != 1:
            raise ValidationError(
                f"[{where}]: Input argument cell must represent a single cell."
            )
        fonts = {
            LogEventType.ERROR: err_font,
            LogEventType.WARN: warn_font,
            LogEventType.INFO: info_font,
            LogEventType.TRACE: trace_font,
        }
        for event_type, color in fonts.items():
            validate_color(color, _EVENT_NAMES[event_type], where)

        super().__init__(context)
        self._cell = cell
        self._colors = fonts
        self._clear_cell_if_not_empty()

    @property
    def cell(self) -> Any:
        return self._cell

    @property
    def colors(self) -> Dict[LogEventType, str]:
        """Copy of the color per event type."""
        return dict(self._colors)

    def _send_event(self, event: LogEvent) -> None:
        msg = self.format(event)
        self._clear_cell_if_not_empty()
        color = self._colors.get(event.event_type)
        if color:
            self._cell.set_font_color(color)
        self._cell.set_value(msg)

    def _clear_cell_if_not_empty(self) -> None:
        value = self._cell.get_value()
        if value is not None and value != "":
            self._cell.clear()

    def _details(self) -> str:
        fonts = ",".join(
            f'{_FONT_LABELS[event_type]}="{color}"'
            for event_type, color in self._colors.items()
        )
        return f'cell(address)="{self._cell.get_address()}", event fonts(map)={{{fonts}}}'
