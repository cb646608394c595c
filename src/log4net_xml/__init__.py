"""
log4net XML formatting

Renders structured log events as log4net-events-1.2 (and log4j) XML elements
for shipping to log4net-compatible collectors.
"""

__version__ = "1.0.0"

from .config import (
    FormatterConfig,
    FormatterType,
    get_default_config,
    set_default_config,
)
from .events import (
    ENVIRONMENT_USER_NAME,
    MACHINE_NAME,
    METHOD,
    PROCESS_NAME,
    SOURCE_CONTEXT,
    THREAD_ID,
    LogEvent,
    LogEventLevel,
)
from .formatter import (
    LOG4J_NAMESPACE,
    LOG4NET_NAMESPACE,
    EventFormatter,
    Log4jFormatter,
    Log4jTextFormatter,
    Log4netFormatter,
    Log4netTextFormatter,
    create_event_formatter,
    get_formatter,
    level_from_logging,
)
from .templates import MessageTemplate, PropertyToken, TextToken, parse_template
from .values import (
    DictionaryValue,
    Destructuring,
    LogEventProperty,
    LogEventPropertyValue,
    ScalarValue,
    SequenceValue,
    StructureValue,
    create_property_value,
)

__all__ = [
    # Configuration
    "FormatterConfig",
    "FormatterType",
    "get_default_config",
    "set_default_config",
    # Events
    "LogEvent",
    "LogEventLevel",
    "SOURCE_CONTEXT",
    "THREAD_ID",
    "ENVIRONMENT_USER_NAME",
    "PROCESS_NAME",
    "METHOD",
    "MACHINE_NAME",
    # Property values
    "LogEventProperty",
    "LogEventPropertyValue",
    "ScalarValue",
    "SequenceValue",
    "StructureValue",
    "DictionaryValue",
    "Destructuring",
    "create_property_value",
    # Templates
    "MessageTemplate",
    "TextToken",
    "PropertyToken",
    "parse_template",
    # Formatters
    "EventFormatter",
    "Log4netTextFormatter",
    "Log4jTextFormatter",
    "Log4netFormatter",
    "Log4jFormatter",
    "LOG4NET_NAMESPACE",
    "LOG4J_NAMESPACE",
    "create_event_formatter",
    "get_formatter",
    "level_from_logging",
]
