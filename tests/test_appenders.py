"""Tests for appenders"""

import pytest
from datetime import datetime
from unittest.mock import Mock

from event_logger import (
    AbstractAppender,
    CellAppender,
    ConsoleAppender,
    Layout,
    LogEvent,
    LogEventType,
    LoggingContext,
    ValidationError,
    short_formatter,
)
from event_logger.appenders.cell_appender import DEFAULT_COLORS, validate_color
from event_logger.core.log_event import create_log_event

from conftest import FakeCell


class RecordingAppender(AbstractAppender):
    """Keeps delivered events in memory."""

    kind = "recording"

    def __init__(self, context=None):
        super().__init__(context)
        self.sent = []

    def _send_event(self, event):
        self.sent.append(self.format(event))


class FailingAppender(AbstractAppender):
    kind = "failing"

    def _send_event(self, event):
        raise IOError("channel closed")


@pytest.fixture
def short_context(context):
    context.set_layout(Layout(short_formatter))
    return context


class TestAbstractAppender:
    """Test behavior shared by all appenders."""

    def test_initial_state(self, context):
        appender = RecordingAppender(context)
        assert appender.get_last_log_event() is None
        assert appender.context is context

    def test_default_context(self):
        from event_logger import get_default_context
        assert RecordingAppender().context is get_default_context()

    def test_log_event(self, short_context):
        appender = RecordingAppender(short_context)
        event = create_log_event("hello", LogEventType.INFO)
        appender.log_event(event)
        assert appender.get_last_log_event() is event
        assert appender.sent == ["[INFO] hello"]

    def test_log_message_uses_factory(self, short_context):
        appender = RecordingAppender(short_context)
        appender.log_message("hello", LogEventType.WARN, {"userId": 456})
        last = appender.get_last_log_event()
        assert last.message == "hello"
        assert last.event_type == LogEventType.WARN
        assert last.extra_fields["userId"] == 456
        assert appender.sent == ['[WARN] hello {"userId":456}']

    def test_log_message_custom_factory(self, context):
        calls = []

        def tagged_factory(message, event_type, extra_fields=None):
            calls.append(message)
            return create_log_event(message, event_type, {"source": "tagged"})

        context.set_event_factory(tagged_factory)
        appender = RecordingAppender(context)
        appender.log_message("hello", LogEventType.INFO)
        assert calls == ["hello"]
        assert appender.get_last_log_event().extra_fields["source"] == "tagged"

    @pytest.mark.parametrize("event_type", [-1, 0, None, "INFO"])
    def test_log_message_invalid_type(self, context, event_type):
        appender = RecordingAppender(context)
        with pytest.raises(ValidationError, match="must be provided"):
            appender.log_message("hello", event_type)
        assert appender.get_last_log_event() is None

    def test_log_invalid_event(self, context):
        appender = RecordingAppender(context)
        with pytest.raises(ValidationError, match=r"\[RecordingAppender.log_event\]"):
            appender.log_event(None)
        assert appender.sent == []

    def test_duck_typed_event_is_revalidated(self, context):
        bogus = Mock(event_type=7, message="x", timestamp=datetime.now(), extra_fields=None)
        appender = RecordingAppender(context)
        with pytest.raises(ValidationError):
            appender.log_event(bogus)

    def test_last_event_only_after_delivery(self, context):
        appender = FailingAppender(context)
        with pytest.raises(IOError):
            appender.log_message("hello", LogEventType.ERROR)
        assert appender.get_last_log_event() is None

    def test_repeated_calls(self, short_context):
        appender = RecordingAppender(short_context)
        event = create_log_event("same", LogEventType.INFO)
        appender.log_event(event)
        appender.log_event(event)
        assert appender.get_last_log_event() is event
        assert appender.sent == ["[INFO] same", "[INFO] same"]

    def test_clear_last_log_event(self, context):
        appender = RecordingAppender(context)
        appender.log_message("hello", LogEventType.INFO)
        appender.clear_last_log_event()
        assert appender.get_last_log_event() is None

    def test_str_before_layout_is_set(self, context):
        appender = RecordingAppender(context)
        assert str(appender) == (
            'AbstractAppender: {layout=None, logEventFactory="None", lastLogEvent=None} '
            "RecordingAppender: {}"
        )

    def test_str_after_logging(self, short_context):
        appender = RecordingAppender(short_context)
        event = LogEvent(LogEventType.ERROR, "boom", datetime(2025, 1, 1))
        appender.log_event(event)
        appender.get_event_factory()
        assert str(appender) == (
            'AbstractAppender: {layout=Layout: {formatter: [Function: "short_formatter"]}, '
            'logEventFactory="create_log_event", lastLogEvent=LogEvent: '
            '{timestamp="2025-01-01 00:00:00,000", type="ERROR", message="boom"}} '
            "RecordingAppender: {}"
        )


class TestConsoleAppender:
    """Test ConsoleAppender."""

    def test_writes_formatted_line(self, short_context, stream):
        appender = ConsoleAppender(short_context, stream=stream)
        appender.log_message("Script started", LogEventType.INFO)
        assert stream.getvalue() == "[INFO] Script started\n"

    def test_default_layout_has_timestamp(self, context, stream):
        appender = ConsoleAppender(context, stream=stream)
        appender.log_event(LogEvent(LogEventType.TRACE, "step", datetime(2025, 1, 1, 1, 1, 1, 1000)))
        assert stream.getvalue() == "[2025-01-01 01:01:01,001] [TRACE] step\n"

    def test_colored(self, short_context, stream):
        appender = ConsoleAppender(short_context, stream=stream, colored=True)
        appender.log_message("bad", LogEventType.ERROR)
        assert stream.getvalue() == "\033[31m[ERROR] bad\033[0m\n"

    def test_default_stream_is_stderr(self, short_context, capsys):
        appender = ConsoleAppender(short_context)
        appender.log_message("to stderr", LogEventType.WARN)
        captured = capsys.readouterr()
        assert captured.err == "[WARN] to stderr\n"
        assert captured.out == ""

    def test_kind(self):
        assert ConsoleAppender.kind == "console"


class TestCellAppender:
    """Test CellAppender."""

    def test_writes_to_cell(self, short_context, cell):
        appender = CellAppender(cell, context=short_context)
        appender.log_message("Loaded", LogEventType.INFO)
        assert cell.value == "[INFO] Loaded"
        assert cell.font_color == DEFAULT_COLORS[LogEventType.INFO]
        assert appender.get_last_log_event().message == "Loaded"

    def test_custom_colors(self, short_context, cell):
        appender = CellAppender(cell, err_font="#ff0000", context=short_context)
        appender.log_message("Failed", LogEventType.ERROR)
        assert cell.font_color == "#ff0000"
        assert appender.colors[LogEventType.WARN] == "ed7d31"

    def test_clears_cell_on_creation(self, context):
        cell = FakeCell(value="old content")
        CellAppender(cell, context=context)
        assert cell.value == ""
        assert cell.clear_calls == 1

    def test_cell_is_overwritten(self, short_context, cell):
        appender = CellAppender(cell, context=short_context)
        appender.log_message("first", LogEventType.INFO)
        appender.log_message("second", LogEventType.WARN)
        assert cell.value == "[WARN] second"
        assert cell.font_color == "ed7d31"

    def test_missing_cell(self, context):
        with pytest.raises(ValidationError, match="valid cell range"):
            CellAppender(None, context=context)

    def test_multi_cell_range(self, context):
        with pytest.raises(ValidationError, match="single cell"):
            CellAppender(FakeCell(cell_count=4), context=context)

    @pytest.mark.parametrize("kwargs, message", [
        ({"err_font": None}, "missing or not a string"),
        ({"warn_font": ""}, "missing or not a string"),
        ({"info_font": "xxxxxx"}, "not a valid 6-digit"),
        ({"trace_font": "******"}, "not a valid 6-digit"),
        ({"err_font": "#12345"}, "not a valid 6-digit"),
    ])
    def test_invalid_colors(self, context, cell, kwargs, message):
        with pytest.raises(ValidationError, match=message):
            CellAppender(cell, context=context, **kwargs)

    def test_validate_color(self):
        validate_color("9c0006", "error")
        validate_color("#A1b2C3", "error")

    def test_str(self, short_context, cell):
        appender = CellAppender(cell, context=short_context)
        assert str(appender).endswith(
            'CellAppender: {cell(address)="C2", event fonts(map)={err_font="9c0006",'
            'warn_font="ed7d31",info_font="548235",trace_font="7f7f7f"}}'
        )

    def test_with_mock_range(self, short_context):
        rng = Mock()
        rng.get_cell_count.return_value = 1
        rng.get_value.return_value = ""
        appender = CellAppender(rng, context=short_context)
        appender.log_message("Saved", LogEventType.TRACE)
        rng.set_font_color.assert_called_once_with("7f7f7f")
        rng.set_value.assert_called_once_with("[TRACE] Saved")
        rng.clear.assert_not_called()

    def test_kind(self):
        assert CellAppender.kind == "cell"
