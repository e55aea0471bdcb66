"""Appenders module - Log output channels"""

from event_logger.appenders.base_appender import Appender, AbstractAppender
from event_logger.appenders.console_appender import ConsoleAppender
from event_logger.appenders.cell_appender import CellAppender

__all__ = ["Appender", "AbstractAppender", "ConsoleAppender", "CellAppender"]
