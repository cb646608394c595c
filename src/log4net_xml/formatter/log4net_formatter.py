"""
log4net XML formatter

Renders events in the log4net-events-1.2 schema understood by log4net
receivers and viewers::

    <event logger="..." timestamp="..." level="..." thread="..." username="..." domain="...">
      <locationInfo class="..." method="..."/>
      <properties>
        <data name="..." value="..."/>
      </properties>
      <message>...</message>
      <throwable>...</throwable>
    </event>
"""

import xml.etree.ElementTree as ET

from ..events import (
    ENVIRONMENT_USER_NAME,
    MACHINE_NAME,
    METHOD,
    PROCESS_NAME,
    SOURCE_CONTEXT,
    THREAD_ID,
    LogEvent,
)
from .base import XmlEventFormatter

LOG4NET_NAMESPACE = "http://logging.apache.org/log4net/schemas/log4net-events-1.2/"


class Log4netTextFormatter(XmlEventFormatter):
    """Formats log events as log4net ``<event>`` elements"""

    def build_element(self, log_event: LogEvent) -> ET.Element:
        properties = dict(log_event.properties)

        # SourceContext is both the logger and the location class
        source_context = self.property_text(properties.pop(SOURCE_CONTEXT, None))

        event = ET.Element(
            "event",
            {
                "logger": source_context,
                "timestamp": log_event.timestamp.isoformat(timespec="microseconds"),
                "level": self.level_name(log_event.level),
                "thread": self.property_text(properties.pop(THREAD_ID, None)),
                "username": self.property_text(properties.pop(ENVIRONMENT_USER_NAME, None)),
                "domain": self.property_text(properties.pop(PROCESS_NAME, None)),
                "xmlns": LOG4NET_NAMESPACE,
            },
        )

        ET.SubElement(
            event,
            "locationInfo",
            {
                "class": source_context,
                "method": self.property_text(properties.pop(METHOD, None)),
            },
        )

        data = ET.SubElement(event, "properties")
        machine_name = properties.pop(MACHINE_NAME, None)
        if machine_name is not None:
            ET.SubElement(
                data,
                "data",
                {"name": MACHINE_NAME, "value": self.property_text(machine_name)},
            )
        for name, value in properties.items():
            ET.SubElement(
                data,
                "data",
                {"name": self.clean(name), "value": self.property_text(value)},
            )

        ET.SubElement(event, "message").text = self.clean(log_event.render_message())

        if log_event.exception is not None:
            ET.SubElement(event, "throwable").text = self.exception_text(log_event.exception)

        return event
