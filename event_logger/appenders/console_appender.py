"""Console appender with optional ANSI colors"""

import sys
from typing import Optional

from event_logger.appenders.base_appender import AbstractAppender
from event_logger.core.context import LoggingContext
from event_logger.core.log_event import LogEvent


class ConsoleAppender(AbstractAppender):
    """
    Write formatted log events to a stream.

    Default appender: a logger with no appenders registers one on its
    first dispatched event.
    """

    kind = "console"

    def __init__(
        self,
        context: Optional[LoggingContext] = None,
        stream=None,
        colored: bool = False,
    ):
        """
        Initialize console appender.

        Args:
            context: Context providing layout and event factory
            stream: Output stream (default: sys.stderr at write time)
            colored: Wrap lines in the event type's ANSI color
        """
        super().__init__(context)
        self.stream = stream
        self.colored = colored

    def _send_event(self, event: LogEvent) -> None:
        msg = self.format(event)
        if self.colored:
            msg = f"{event.event_type.color_code}{msg}{event.event_type.reset_code}"
        stream = self.stream or sys.stderr
        stream.write(msg + "\n")
        stream.flush()

    def flush(self) -> None:
        """Flush stream."""
        (self.stream or sys.stderr).flush()

    def _details(self) -> str:
        return f"colored={self.colored}" if self.colored else ""
