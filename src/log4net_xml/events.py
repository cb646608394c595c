"""
Log event model
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import Any, Dict, Optional, Union

from .templates import MessageTemplate, parse_template
from .values import LogEventProperty, LogEventPropertyValue, create_property_value

# Property names with a dedicated place in the XML output
SOURCE_CONTEXT = "SourceContext"
THREAD_ID = "ThreadId"
ENVIRONMENT_USER_NAME = "EnvironmentUserName"
PROCESS_NAME = "ProcessName"
METHOD = "Method"
MACHINE_NAME = "MachineName"


class LogEventLevel(IntEnum):
    """Severity of a log event, lowest first"""

    VERBOSE = 0
    DEBUG = 1
    INFORMATION = 2
    WARNING = 3
    ERROR = 4
    FATAL = 5


@dataclass(frozen=True, eq=False)
class LogEvent:
    """A structured log event

    The event owns its property mapping: the mapping passed in is copied,
    and later changes go through ``add_or_update_property`` or
    ``add_property_if_absent``.
    """

    timestamp: datetime
    level: LogEventLevel
    message_template: MessageTemplate
    properties: Dict[str, LogEventPropertyValue] = field(default_factory=dict)
    exception: Optional[BaseException] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "level", LogEventLevel(self.level))
        object.__setattr__(
            self,
            "properties",
            {name: create_property_value(value) for name, value in self.properties.items()},
        )

    @classmethod
    def create(
        cls,
        level: LogEventLevel,
        template: Union[str, MessageTemplate],
        *args: Any,
        exception: Optional[BaseException] = None,
        timestamp: Optional[datetime] = None,
        **properties: Any,
    ) -> "LogEvent":
        """
        Build an event from a template and its arguments

        Positional arguments bind to the template's holes, keyword
        arguments become additional properties. Properties bound from the
        template win over keyword arguments of the same name.
        """
        if isinstance(template, str):
            template = parse_template(template)

        bound = template.bind(args)
        for name, value in properties.items():
            if name not in bound:
                bound[name] = create_property_value(value)

        return cls(
            timestamp=timestamp or datetime.now().astimezone(),
            level=level,
            message_template=template,
            properties=bound,
            exception=exception,
        )

    def render_message(self) -> str:
        """Render the message template against the event's properties"""
        return self.message_template.render(self.properties)

    def add_or_update_property(self, prop: LogEventProperty) -> None:
        self.properties[prop.name] = prop.value

    def add_property_if_absent(self, prop: LogEventProperty) -> None:
        self.properties.setdefault(prop.name, prop.value)

    def remove_property(self, name: str) -> None:
        self.properties.pop(name, None)

    def get_property(self, name: str) -> Optional[LogEventPropertyValue]:
        return self.properties.get(name)
