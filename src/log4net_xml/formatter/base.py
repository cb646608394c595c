"""
Base classes for event formatters
"""

import re
import traceback
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from typing import Dict, Optional, TextIO

from ..config import InvalidXmlChars
from ..events import LogEvent, LogEventLevel
from ..values import LogEventPropertyValue, ScalarValue

# Level names shared by log4net and log4j
LEVEL_NAMES: Dict[LogEventLevel, str] = {
    LogEventLevel.VERBOSE: "TRACE",
    LogEventLevel.DEBUG: "DEBUG",
    LogEventLevel.INFORMATION: "INFO",
    LogEventLevel.WARNING: "WARN",
    LogEventLevel.ERROR: "ERROR",
    LogEventLevel.FATAL: "FATAL",
}

REPLACEMENT_CHAR = "\ufffd"

# Characters not allowed anywhere in an XML 1.0 document
_ILLEGAL_XML_CHAR_RE = re.compile(
    "[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]"
)


class EventFormatter(ABC):
    """Writes log events to a text output in some wire format"""

    @abstractmethod
    def format(self, log_event: LogEvent, output: TextIO) -> None:
        """Write ``log_event`` to ``output``"""
        pass


class XmlEventFormatter(EventFormatter):
    """Common plumbing for formatters that emit one XML element per event"""

    def __init__(self, invalid_xml_chars: InvalidXmlChars = "replace"):
        if invalid_xml_chars not in ("replace", "strip"):
            raise ValueError(f"Unknown invalid_xml_chars mode: {invalid_xml_chars!r}")
        self.invalid_xml_chars = invalid_xml_chars

    def format(self, log_event: LogEvent, output: TextIO) -> None:
        output.write(self.render(log_event))

    def render(self, log_event: LogEvent) -> str:
        """Return the XML element for ``log_event`` as a string"""
        element = self.build_element(log_event)
        return ET.tostring(element, encoding="unicode")

    @abstractmethod
    def build_element(self, log_event: LogEvent) -> ET.Element:
        """Build the XML element for one event"""
        pass

    def clean(self, text: str) -> str:
        """Remove characters that would make the document malformed"""
        replacement = REPLACEMENT_CHAR if self.invalid_xml_chars == "replace" else ""
        return _ILLEGAL_XML_CHAR_RE.sub(replacement, text)

    def property_text(self, value: Optional[LogEventPropertyValue]) -> str:
        """Attribute text for a property value, empty when absent"""
        if value is None:
            return ""
        if isinstance(value, ScalarValue):
            return self.clean(value.render_text())
        return self.clean(value.render())

    def exception_text(self, exception: BaseException) -> str:
        """Type, message and traceback of ``exception`` (with chained causes)"""
        lines = traceback.format_exception(
            type(exception), exception, exception.__traceback__
        )
        return self.clean("".join(lines).rstrip("\n"))

    @staticmethod
    def level_name(level: LogEventLevel) -> str:
        return LEVEL_NAMES[level]
