"""
Log event data structure

A LogEvent is immutable and validated on construction. Events coming
from outside the package (custom factories, custom appenders) are
re-validated with validate_log_event() before they are used.
"""

from __future__ import annotations
import inspect
import json
from dataclasses import dataclass, field
from datetime import date, datetime
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Union

from event_logger.core.exceptions import ValidationError
from event_logger.core.log_level import LogEventType

ExtraFieldValue = Union[str, int, float, date, Callable[[], str]]
ExtraFields = Mapping[str, ExtraFieldValue]

# Keys clashing with the event attributes
RESERVED_EXTRA_KEYS = frozenset({"type", "message", "timestamp"})


def date_to_str(value: datetime) -> str:
    """
    Format a datetime as 'YYYY-MM-DD HH:MM:SS,mmm'.

    Raises:
        ValidationError: If value is not a datetime
    """
    if not isinstance(value, datetime):
        raise ValidationError(f"[date_to_str]: Invalid datetime '{value}'")
    return f"{value.strftime('%Y-%m-%d %H:%M:%S')},{value.microsecond // 1000:03d}"


def event_type_to_label(event_type: LogEventType) -> str:
    """Return the label of an event type, e.g. 'INFO'."""
    return LogEventType(event_type).label


def _prefix(context: Optional[str]) -> str:
    return f"[{context}]: " if context else ""


def _is_thunk(value: Any) -> bool:
    if not callable(value):
        return False
    try:
        inspect.signature(value).bind()
    except TypeError:
        return False
    except ValueError:
        # Builtins without signature metadata
        return True
    return True


def _is_valid_extra_value(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (str, int, float, date)):
        return True
    return _is_thunk(value)


def validate_extra_fields(extra_fields: Any, context: Optional[str] = None) -> None:
    """
    Check extra fields are a mapping of str to str/number/date/thunk.

    Raises:
        ValidationError: On a non-mapping, a non-str or reserved key,
                         or a value of an unsupported type
    """
    prefix = _prefix(context)
    if not isinstance(extra_fields, Mapping):
        raise ValidationError(f"{prefix}extraFields must be a non-null mapping.")
    for key, value in extra_fields.items():
        if not isinstance(key, str):
            raise ValidationError(f"{prefix}extraFields key '{key}' must be a string.")
        if key in RESERVED_EXTRA_KEYS:
            raise ValidationError(f"{prefix}extraFields key '{key}' is reserved.")
        if not _is_valid_extra_value(value):
            raise ValidationError(
                f"{prefix}extraFields['{key}']='{value}' must be a string, number, "
                f"date or a function with no arguments returning a string."
            )


def _resolve_extra_fields(extra_fields: ExtraFields) -> Dict[str, Any]:
    """
    Evaluate thunks and render dates of already validated extra fields.

    Raises:
        ValidationError: If a thunk fails or does not return a string
    """
    resolved = {}
    for key, value in extra_fields.items():
        if isinstance(value, date):
            resolved[key] = value.isoformat()
        elif callable(value):
            try:
                result = value()
            except Exception as e:
                raise ValidationError(
                    f"[LogEvent]: extraFields['{key}'] function failed", e
                )
            if not isinstance(result, str):
                raise ValidationError(
                    f"[LogEvent]: extraFields['{key}'] function must return a string. "
                    f"Got: type=\"{type(result).__name__}\""
                )
            resolved[key] = result
        else:
            resolved[key] = value
    return resolved


def _validate_attrs(event_type: Any, message: Any, timestamp: Any, context: Optional[str]) -> None:
    prefix = _prefix(context)
    if isinstance(event_type, bool) or not isinstance(event_type, int):
        raise ValidationError(
            f"{prefix}LogEvent.type='{event_type}' property must be a number "
            f"(LogEventType value)."
        )
    if event_type not in list(LogEventType):
        raise ValidationError(
            f"{prefix}LogEvent.type='{event_type}' property is not defined in LogEventType."
        )
    if not isinstance(message, str):
        raise ValidationError(f"{prefix}LogEvent.message='{message}' property must be a string.")
    if not message:
        raise ValidationError(f"{prefix}LogEvent.message cannot be empty.")
    if not isinstance(timestamp, datetime):
        raise ValidationError(
            f"{prefix}LogEvent.timestamp='{timestamp}' property must be a datetime."
        )


def validate_log_event(candidate: Any, context: Optional[str] = None) -> None:
    """
    Validate any object claiming to be a log event.

    The candidate needs ``event_type``, ``message`` and ``timestamp``
    attributes; ``extra_fields`` is optional.

    Args:
        candidate: Object to validate
        context: Caller name used as message prefix

    Raises:
        ValidationError: If the candidate does not conform
    """
    if candidate is None:
        raise ValidationError(f"{_prefix(context)}LogEvent must be a non-null object.")
    _validate_attrs(
        getattr(candidate, "event_type", None),
        getattr(candidate, "message", None),
        getattr(candidate, "timestamp", None),
        context,
    )
    extra_fields = getattr(candidate, "extra_fields", None)
    if extra_fields is not None:
        validate_extra_fields(extra_fields, context)


@dataclass(frozen=True, eq=False)
class LogEvent:
    """
    Immutable log event sent to the appenders.

    Compared by identity: two events with the same content are still
    two events.
    """

    event_type: LogEventType
    message: str
    timestamp: datetime = field(default_factory=datetime.now)
    extra_fields: ExtraFields = field(default_factory=dict)
    _resolved_extras: Optional[Mapping[str, Any]] = field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        """Validate and freeze the event."""
        extra_fields = {} if self.extra_fields is None else self.extra_fields
        _validate_attrs(self.event_type, self.message, self.timestamp, "LogEvent")
        validate_extra_fields(extra_fields, "LogEvent")
        object.__setattr__(self, "event_type", LogEventType(self.event_type))
        object.__setattr__(self, "extra_fields", MappingProxyType(dict(extra_fields)))
        # Thunks are evaluated here, once; renderings reuse the captured values
        object.__setattr__(
            self, "_resolved_extras", MappingProxyType(_resolve_extra_fields(self.extra_fields))
        )

    @property
    def type(self) -> LogEventType:
        """Alias for event_type."""
        return self.event_type

    def resolved_extra_fields(self) -> Dict[str, Any]:
        """
        Return extra fields as plain JSON-friendly values.

        Thunk results are the ones captured when the event was created;
        dates are rendered in ISO format.
        """
        return dict(self._resolved_extras)

    def extra_fields_json(self) -> str:
        """Compact JSON of the extra fields, '' if there are none."""
        if not self.extra_fields:
            return ""
        return json.dumps(self.resolved_extra_fields(), separators=(",", ":"), ensure_ascii=False)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log event to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "type": self.event_type.name,
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
            "extraFields": self.resolved_extra_fields(),
        }

    def __str__(self) -> str:
        """Diagnostic form, independent of the shared layout."""
        text = (
            f'LogEvent: {{timestamp="{date_to_str(self.timestamp)}", '
            f'type="{self.event_type.name}", message="{self.message}"'
        )
        if self.extra_fields:
            text += f", extraFields={self.extra_fields_json()}"
        return text + "}"


def create_log_event(
    message: str,
    event_type: LogEventType,
    extra_fields: Optional[ExtraFields] = None,
    timestamp: Optional[datetime] = None,
) -> LogEvent:
    """
    Default log event factory.

    Args:
        message: Non-empty message
        event_type: LogEventType value
        extra_fields: Optional extra fields
        timestamp: Event time (default: now)

    Raises:
        ValidationError: If any argument is invalid
    """
    return LogEvent(
        event_type=event_type,
        message=message,
        timestamp=datetime.now() if timestamp is None else timestamp,
        extra_fields={} if extra_fields is None else extra_fields,
    )


def validate_event_factory(factory: Any, context: Optional[str] = None) -> None:
    """
    Check a factory can be called as factory(message, event_type, extra_fields).

    Raises:
        ValidationError: If factory is not a function with that signature
    """
    prefix = _prefix(context)
    if not callable(factory):
        raise ValidationError(f"{prefix}Invalid LogEventFactory: Not a function")
    try:
        inspect.signature(factory).bind("message", LogEventType.INFO, None)
    except TypeError as e:
        raise ValidationError(
            f"{prefix}Invalid LogEventFactory: Must accept "
            f"(message, event_type, extra_fields)",
            e,
        )
    except ValueError:
        # No signature metadata (some builtins): accepted as callable
        return
