"""
log4j XML formatter

Renders events in the log4j XMLLayout shape read by Chainsaw and Log4View.
Machine and process names travel as the ``log4jmachinename`` and
``log4japp`` properties those viewers look for.
"""

import xml.etree.ElementTree as ET

from ..events import MACHINE_NAME, METHOD, PROCESS_NAME, SOURCE_CONTEXT, THREAD_ID, LogEvent
from .base import XmlEventFormatter

LOG4J_NAMESPACE = "http://jakarta.apache.org/log4j/"

LOG4J_MACHINE_NAME = "log4jmachinename"
LOG4J_APP = "log4japp"


class Log4jTextFormatter(XmlEventFormatter):
    """Formats log events as ``log4j:event`` elements"""

    def build_element(self, log_event: LogEvent) -> ET.Element:
        properties = dict(log_event.properties)
        source_context = self.property_text(properties.pop(SOURCE_CONTEXT, None))

        event = ET.Element(
            "log4j:event",
            {
                "logger": source_context,
                "timestamp": str(int(log_event.timestamp.timestamp() * 1000)),
                "level": self.level_name(log_event.level),
                "thread": self.property_text(properties.pop(THREAD_ID, None)),
                "xmlns:log4j": LOG4J_NAMESPACE,
            },
        )

        ET.SubElement(event, "log4j:message").text = self.clean(log_event.render_message())

        if log_event.exception is not None:
            ET.SubElement(event, "log4j:throwable").text = self.exception_text(log_event.exception)

        ET.SubElement(
            event,
            "log4j:locationInfo",
            {
                "class": source_context,
                "method": self.property_text(properties.pop(METHOD, None)),
            },
        )

        data = ET.SubElement(event, "log4j:properties")
        renamed = ((MACHINE_NAME, LOG4J_MACHINE_NAME), (PROCESS_NAME, LOG4J_APP))
        for name, log4j_name in renamed:
            value = properties.pop(name, None)
            if value is not None:
                ET.SubElement(
                    data,
                    "log4j:data",
                    {"name": log4j_name, "value": self.property_text(value)},
                )
        for name, value in properties.items():
            ET.SubElement(
                data,
                "log4j:data",
                {"name": self.clean(name), "value": self.property_text(value)},
            )

        return event
