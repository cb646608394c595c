"""
Shared helpers for formatter tests
"""

import xml.etree.ElementTree as ET
from datetime import datetime, timedelta, timezone

import pytest

from log4net_xml import LogEvent, LogEventLevel, MessageTemplate

LOG4NET_NS = "{http://logging.apache.org/log4net/schemas/log4net-events-1.2/}"
LOG4J_NS = "{http://jakarta.apache.org/log4j/}"


def some_log_event(level=LogEventLevel.INFORMATION, message="Some message", exception=None):
    return LogEvent(
        timestamp=datetime(2024, 5, 17, 13, 45, 30, 123456, tzinfo=timezone(timedelta(hours=2))),
        level=level,
        message_template=MessageTemplate.literal(message),
        exception=exception,
    )


@pytest.fixture
def log_event():
    return some_log_event()


def parse(xml_text: str) -> ET.Element:
    return ET.fromstring(xml_text)
