"""
Property values attached to log events

A property value is one of four shapes: a scalar, a sequence, a structure
(destructured object) or a dictionary. Each knows how to render itself as
text for message templates and XML attributes.
"""

import dataclasses
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum
from pathlib import PurePath
from typing import Any, Optional, Tuple
from uuid import UUID

# Nesting limit when capturing collections and destructured objects
MAX_DESTRUCTURING_DEPTH = 10

_SCALAR_TYPES = (
    str,
    bool,
    int,
    float,
    complex,
    Decimal,
    UUID,
    datetime,
    date,
    time,
    timedelta,
    Enum,
    PurePath,
    bytes,
)


class Destructuring(Enum):
    """How a captured object is turned into a property value"""

    DEFAULT = ""
    DESTRUCTURE = "@"
    STRINGIFY = "$"


class LogEventPropertyValue(ABC):
    """Base class for property values"""

    @abstractmethod
    def render(self, format_spec: Optional[str] = None) -> str:
        """Render the value as text"""
        pass

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class ScalarValue(LogEventPropertyValue):
    """A single atomic value"""

    value: Any

    def render(self, format_spec: Optional[str] = None) -> str:
        value = self.value
        if value is None:
            return "null"

        if isinstance(value, str):
            # "l" renders strings literally, without quotes
            if format_spec == "l":
                return value
            return '"' + value.replace('"', '\\"') + '"'

        if isinstance(value, Enum):
            return value.name

        if format_spec:
            try:
                return format(value, format_spec)
            except (TypeError, ValueError):
                return str(value)
        return str(value)

    def render_text(self) -> str:
        """Plain text of the value, strings unquoted"""
        if isinstance(self.value, str):
            return self.value
        return self.render()


@dataclass(frozen=True)
class SequenceValue(LogEventPropertyValue):
    """An ordered collection of values"""

    elements: Tuple[LogEventPropertyValue, ...] = ()

    def render(self, format_spec: Optional[str] = None) -> str:
        return "[" + ", ".join(e.render(format_spec) for e in self.elements) + "]"


@dataclass(frozen=True)
class StructureValue(LogEventPropertyValue):
    """A destructured object: named properties plus an optional type tag"""

    properties: Tuple["LogEventProperty", ...] = ()
    type_tag: Optional[str] = None

    def render(self, format_spec: Optional[str] = None) -> str:
        body = ", ".join(
            f"{prop.name}: {prop.value.render(format_spec)}" for prop in self.properties
        )
        rendered = "{ " + body + " }" if body else "{ }"
        if self.type_tag:
            return f"{self.type_tag} {rendered}"
        return rendered


@dataclass(frozen=True)
class DictionaryValue(LogEventPropertyValue):
    """A mapping from scalar keys to values"""

    elements: Tuple[Tuple[ScalarValue, LogEventPropertyValue], ...] = ()

    def render(self, format_spec: Optional[str] = None) -> str:
        pairs = ", ".join(
            f"({key.render(format_spec)}: {value.render(format_spec)})"
            for key, value in self.elements
        )
        return "[" + pairs + "]"


@dataclass(frozen=True)
class LogEventProperty:
    """A named property value"""

    name: str
    value: LogEventPropertyValue

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Property name must not be empty")
        if not isinstance(self.value, LogEventPropertyValue):
            raise TypeError(
                f"Property value must be a LogEventPropertyValue, got {type(self.value).__name__}"
            )


def _destructure_object(obj: Any, depth: int) -> StructureValue:
    """Capture the public fields of a dataclass or plain object"""
    if dataclasses.is_dataclass(obj):
        items = [(f.name, getattr(obj, f.name)) for f in dataclasses.fields(obj)]
    else:
        items = [
            (name, value)
            for name, value in vars(obj).items()
            if not name.startswith("_")
        ]

    return StructureValue(
        properties=tuple(
            LogEventProperty(name, create_property_value(value, Destructuring.DESTRUCTURE, depth + 1))
            for name, value in items
        ),
        type_tag=type(obj).__name__,
    )


def create_property_value(
    obj: Any,
    destructuring: Destructuring = Destructuring.DEFAULT,
    depth: int = 0,
) -> LogEventPropertyValue:
    """
    Capture a Python object as a property value

    Args:
        obj: Object to capture
        destructuring: DESTRUCTURE breaks dataclasses and plain objects into
            structures, STRINGIFY captures ``str(obj)``
        depth: Current nesting depth, capture stops at MAX_DESTRUCTURING_DEPTH

    Returns:
        The captured property value
    """
    if isinstance(obj, LogEventPropertyValue):
        return obj

    if depth > MAX_DESTRUCTURING_DEPTH:
        return ScalarValue(None)

    if destructuring is Destructuring.STRINGIFY:
        return ScalarValue(str(obj))

    if obj is None or isinstance(obj, _SCALAR_TYPES):
        return ScalarValue(obj)

    if isinstance(obj, Mapping):
        return DictionaryValue(
            tuple(
                (ScalarValue(key), create_property_value(value, destructuring, depth + 1))
                for key, value in obj.items()
            )
        )

    if isinstance(obj, (list, tuple, set, frozenset)):
        return SequenceValue(
            tuple(create_property_value(item, destructuring, depth + 1) for item in obj)
        )

    if (
        destructuring is Destructuring.DESTRUCTURE
        and not isinstance(obj, type)
        and (dataclasses.is_dataclass(obj) or hasattr(obj, "__dict__"))
    ):
        return _destructure_object(obj, depth)

    return ScalarValue(obj)
