"""
Bridge from the standard ``logging`` module to the XML event formatters
"""

import getpass
import io
import logging
import socket
from datetime import datetime, timezone
from functools import lru_cache
from typing import Dict, Optional, Type

from ..config import FormatterConfig, get_default_config
from ..events import (
    ENVIRONMENT_USER_NAME,
    MACHINE_NAME,
    METHOD,
    PROCESS_NAME,
    SOURCE_CONTEXT,
    THREAD_ID,
    LogEvent,
    LogEventLevel,
)
from ..templates import MessageTemplate
from ..values import LogEventPropertyValue, ScalarValue, create_property_value
from .base import XmlEventFormatter
from .log4j_formatter import Log4jTextFormatter
from .log4net_formatter import Log4netTextFormatter

logger = logging.getLogger(__name__)


def level_from_logging(levelno: int) -> LogEventLevel:
    """Map a ``logging`` level number to the nearest event level at or below it"""
    if levelno >= logging.CRITICAL:
        return LogEventLevel.FATAL
    if levelno >= logging.ERROR:
        return LogEventLevel.ERROR
    if levelno >= logging.WARNING:
        return LogEventLevel.WARNING
    if levelno >= logging.INFO:
        return LogEventLevel.INFORMATION
    if levelno >= logging.DEBUG:
        return LogEventLevel.DEBUG
    return LogEventLevel.VERBOSE


@lru_cache(maxsize=1)
def _environment_user_name() -> Optional[str]:
    try:
        return getpass.getuser()
    except (KeyError, OSError) as e:
        logger.debug("Could not determine the current user name: %s", e)
        return None


@lru_cache(maxsize=1)
def _machine_name() -> str:
    return socket.gethostname()


class EventRecordFormatter(logging.Formatter):
    """Formats ``logging.LogRecord`` objects through an XML event formatter"""

    event_formatter_class: Type[XmlEventFormatter] = Log4netTextFormatter

    def __init__(self, config: Optional[FormatterConfig] = None):
        super().__init__()
        self.config = config or get_default_config()
        self.event_formatter = self.event_formatter_class(
            invalid_xml_chars=self.config.invalid_xml_chars
        )

    def format(self, record: logging.LogRecord) -> str:
        output = io.StringIO()
        self.event_formatter.format(self.to_log_event(record), output)
        return output.getvalue()

    def to_log_event(self, record: logging.LogRecord) -> LogEvent:
        """Convert a stdlib record to a log event"""
        properties: Dict[str, LogEventPropertyValue] = {
            SOURCE_CONTEXT: ScalarValue(record.name),
        }
        if record.funcName:
            properties[METHOD] = ScalarValue(record.funcName)
        if self.config.enrich_thread_id and record.thread is not None:
            properties[THREAD_ID] = ScalarValue(record.thread)
        if self.config.enrich_process_name and record.processName:
            properties[PROCESS_NAME] = ScalarValue(record.processName)
        if self.config.enrich_user_name:
            user_name = _environment_user_name()
            if user_name:
                properties[ENVIRONMENT_USER_NAME] = ScalarValue(user_name)
        if self.config.enrich_machine_name:
            properties[MACHINE_NAME] = ScalarValue(_machine_name())

        prefix = self.config.context_prefix
        for key, value in record.__dict__.items():
            if prefix and key.startswith(prefix) and len(key) > len(prefix):
                properties[key[len(prefix):]] = create_property_value(value)

        exception = None
        if record.exc_info and record.exc_info[1] is not None:
            exception = record.exc_info[1]

        return LogEvent(
            timestamp=datetime.fromtimestamp(record.created, tz=timezone.utc).astimezone(),
            level=level_from_logging(record.levelno),
            message_template=MessageTemplate.literal(record.getMessage()),
            properties=properties,
            exception=exception,
        )


class Log4netFormatter(EventRecordFormatter):
    """``logging.Formatter`` producing log4net XML events"""

    event_formatter_class = Log4netTextFormatter


class Log4jFormatter(EventRecordFormatter):
    """``logging.Formatter`` producing log4j XML events"""

    event_formatter_class = Log4jTextFormatter
