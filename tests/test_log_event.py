"""Tests for log levels and log events"""

import pytest
from datetime import date, datetime

from event_logger import LogEvent, LogEventType, LogLevel, LogAction, ValidationError
from event_logger.core.exceptions import ConfigurationError
from event_logger.core.log_event import (
    create_log_event,
    date_to_str,
    event_type_to_label,
    validate_event_factory,
    validate_log_event,
)


class TestLogLevel:
    """Test event types, levels and actions."""

    def test_event_types_start_at_one(self):
        assert [e.value for e in LogEventType] == [1, 2, 3, 4]
        assert LogEventType.ERROR < LogEventType.WARN < LogEventType.INFO < LogEventType.TRACE

    def test_levels_mirror_event_types(self):
        assert LogLevel.OFF == 0
        for event_type in LogEventType:
            assert LogLevel[event_type.name] == event_type.value

    def test_admits(self):
        assert LogLevel.WARN.admits(LogEventType.ERROR)
        assert LogLevel.WARN.admits(LogEventType.WARN)
        assert not LogLevel.WARN.admits(LogEventType.INFO)
        assert not LogLevel.OFF.admits(LogEventType.ERROR)

    @pytest.mark.parametrize("level", list(LogLevel))
    @pytest.mark.parametrize("event_type", list(LogEventType))
    def test_admits_matches_numeric_rule(self, level, event_type):
        assert level.admits(event_type) == (level != 0 and level >= event_type)

    def test_from_string(self):
        assert LogLevel.from_string("info") == LogLevel.INFO
        assert LogEventType.from_string("Trace") == LogEventType.TRACE
        assert LogAction.from_string("continue") == LogAction.CONTINUE

    def test_from_string_invalid(self):
        with pytest.raises(ConfigurationError):
            LogLevel.from_string("VERBOSE")
        with pytest.raises(ValidationError):
            LogEventType.from_string("DEBUG")

    def test_coerce(self):
        assert LogLevel.coerce(3) is LogLevel.INFO
        with pytest.raises(ConfigurationError):
            LogLevel.coerce(9)
        with pytest.raises(ConfigurationError):
            LogLevel.coerce("INFO")
        with pytest.raises(ConfigurationError):
            LogAction.coerce(True)

    def test_is_critical(self):
        assert LogEventType.ERROR.is_critical
        assert LogEventType.WARN.is_critical
        assert not LogEventType.INFO.is_critical
        assert not LogEventType.TRACE.is_critical


class TestLogEvent:
    """Test log event structure and validation."""

    def test_create_event(self):
        event = LogEvent(event_type=LogEventType.INFO, message="Test message")
        assert event.event_type == LogEventType.INFO
        assert event.type == LogEventType.INFO
        assert event.message == "Test message"
        assert isinstance(event.timestamp, datetime)
        assert dict(event.extra_fields) == {}

    def test_event_type_from_int(self):
        event = LogEvent(event_type=2, message="Test")
        assert event.event_type is LogEventType.WARN

    def test_factory_with_extra_fields(self):
        extras = {"userId": 123, "sessionId": "abc", "logTime": lambda: "now"}
        event = create_log_event("Test", LogEventType.INFO, extras)
        assert event.extra_fields["userId"] == 123
        assert event.extra_fields["sessionId"] == "abc"
        assert callable(event.extra_fields["logTime"])

    def test_factory_default_timestamp(self):
        before = datetime.now()
        event = create_log_event("Test", LogEventType.TRACE)
        assert before <= event.timestamp <= datetime.now()

    def test_event_is_immutable(self):
        event = create_log_event("Test", LogEventType.INFO, {"a": 1})
        with pytest.raises(AttributeError):
            event.message = "changed"
        with pytest.raises(TypeError):
            event.extra_fields["a"] = 2

    def test_extra_fields_are_copied(self):
        extras = {"a": 1}
        event = create_log_event("Test", LogEventType.INFO, extras)
        extras["a"] = 2
        assert event.extra_fields["a"] == 1

    def test_events_compare_by_identity(self):
        ts = datetime(2025, 1, 1)
        first = LogEvent(LogEventType.INFO, "same", ts)
        second = LogEvent(LogEventType.INFO, "same", ts)
        assert first != second
        assert first == first

    @pytest.mark.parametrize("event_type", [-1, 0, 5, "INFO", None, True])
    def test_invalid_type(self, event_type):
        with pytest.raises(ValidationError):
            create_log_event("Test", event_type)

    @pytest.mark.parametrize("message", ["", None, 42])
    def test_invalid_message(self, message):
        with pytest.raises(ValidationError):
            create_log_event(message, LogEventType.INFO)

    def test_empty_message_error_text(self):
        with pytest.raises(ValidationError, match="LogEvent.message cannot be empty"):
            create_log_event("", LogEventType.INFO)

    def test_invalid_timestamp(self):
        with pytest.raises(ValidationError):
            LogEvent(LogEventType.INFO, "Test", "2025-01-01")

    @pytest.mark.parametrize("extras", [
        "invalid",
        {"flag": True},
        {"items": [1, 2]},
        {1: "x"},
        {"message": "reserved"},
        {"fn": lambda x: x},
    ])
    def test_invalid_extra_fields(self, extras):
        with pytest.raises(ValidationError):
            create_log_event("Test", LogEventType.INFO, extras)

    def test_thunk_evaluated_once(self):
        calls = []

        def elapsed():
            calls.append(1)
            return "12ms"

        event = create_log_event("Test", LogEventType.INFO, {"elapsed": elapsed})
        str(event)
        event.to_dict()
        event.extra_fields_json()
        assert event.resolved_extra_fields() == {"elapsed": "12ms"}
        assert len(calls) == 1

    @pytest.mark.parametrize("thunk", [
        lambda: datetime(2024, 1, 1),
        lambda: 42,
        lambda: None,
    ])
    def test_thunk_must_return_string(self, thunk):
        with pytest.raises(ValidationError, match="must return a string"):
            create_log_event("Test", LogEventType.INFO, {"t": thunk})

    def test_failing_thunk(self):
        def broken():
            raise KeyError("clock")

        with pytest.raises(ValidationError, match="caused by 'KeyError'"):
            create_log_event("Test", LogEventType.INFO, {"t": broken})

    def test_date_extra_field(self):
        event = create_log_event("Test", LogEventType.INFO, {"day": date(2025, 1, 2)})
        assert event.resolved_extra_fields() == {"day": "2025-01-02"}

    def test_str(self):
        ts = datetime(2025, 1, 1, 1, 1, 1, 1000)
        event = LogEvent(LogEventType.INFO, "Hello", ts, {"userId": 123, "sessionId": "abc"})
        assert str(event) == (
            'LogEvent: {timestamp="2025-01-01 01:01:01,001", type="INFO", message="Hello", '
            'extraFields={"userId":123,"sessionId":"abc"}}'
        )

    def test_str_without_extras(self):
        ts = datetime(2025, 6, 3, 12, 30, 45, 123456)
        event = LogEvent(LogEventType.ERROR, "Boom", ts)
        assert str(event) == 'LogEvent: {timestamp="2025-06-03 12:30:45,123", type="ERROR", message="Boom"}'

    def test_to_dict(self):
        ts = datetime(2025, 1, 1)
        event = LogEvent(LogEventType.WARN, "Test", ts, {"calls": lambda: "3"})
        data = event.to_dict()
        assert data["type"] == "WARN"
        assert data["message"] == "Test"
        assert data["timestamp"] == ts.isoformat()
        assert data["extraFields"] == {"calls": "3"}


class TestValidateLogEvent:
    """Test validation of objects claiming to be log events."""

    class DuckEvent:
        def __init__(self, event_type, message, timestamp, extra_fields=None):
            self.event_type = event_type
            self.message = message
            self.timestamp = timestamp
            self.extra_fields = extra_fields

    def test_valid_duck_event(self):
        validate_log_event(self.DuckEvent(LogEventType.INFO, "ok", datetime.now()))

    def test_none(self):
        with pytest.raises(ValidationError, match="non-null object"):
            validate_log_event(None, "Test")

    def test_invalid_duck_event(self):
        with pytest.raises(ValidationError, match=r"^\[Test\]: "):
            validate_log_event(self.DuckEvent(LogEventType.INFO, None, datetime.now()), "Test")
        with pytest.raises(ValidationError):
            validate_log_event(self.DuckEvent(LogEventType.INFO, "ok", None))
        with pytest.raises(ValidationError):
            validate_log_event(self.DuckEvent(LogEventType.INFO, "ok", datetime.now(), "bad"))


class TestHelpers:
    """Test module helpers."""

    def test_date_to_str(self):
        assert date_to_str(datetime(2025, 1, 1, 1, 1, 1, 1000)) == "2025-01-01 01:01:01,001"

    def test_date_to_str_invalid(self):
        with pytest.raises(ValidationError):
            date_to_str(None)

    def test_event_type_to_label(self):
        assert event_type_to_label(LogEventType.INFO) == "INFO"
        assert event_type_to_label(1) == "ERROR"

    def test_validate_event_factory(self):
        validate_event_factory(create_log_event)
        validate_event_factory(lambda message, event_type, extra_fields=None: None)

    def test_validate_event_factory_invalid(self):
        with pytest.raises(ValidationError, match="Not a function"):
            validate_event_factory("factory")
        with pytest.raises(ValidationError):
            validate_event_factory(lambda message: None)
