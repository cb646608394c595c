"""
Formatters for log4net and log4j XML output
"""

import logging
from typing import Dict, Optional

from ..config import FormatterConfig, get_default_config
from .base import LEVEL_NAMES, EventFormatter, XmlEventFormatter
from .log4j_formatter import LOG4J_NAMESPACE, Log4jTextFormatter
from .log4net_formatter import LOG4NET_NAMESPACE, Log4netTextFormatter
from .logging_formatter import (
    EventRecordFormatter,
    Log4jFormatter,
    Log4netFormatter,
    level_from_logging,
)

_EVENT_FORMATTERS = {
    "log4net": Log4netTextFormatter,
    "log4j": Log4jTextFormatter,
}

_RECORD_FORMATTERS = {
    "log4net": Log4netFormatter,
    "log4j": Log4jFormatter,
}

# Cache of stdlib formatters keyed by configuration
_formatter_cache: Dict[str, logging.Formatter] = {}


def _get_formatter_cache_key(config: FormatterConfig) -> str:
    """Generate cache key for formatter"""
    return (
        f"{config.formatter_type}_{config.enrich_thread_id}_{config.enrich_user_name}_"
        f"{config.enrich_process_name}_{config.enrich_machine_name}_"
        f"{config.context_prefix}_{config.invalid_xml_chars}"
    )


def create_event_formatter(config: Optional[FormatterConfig] = None) -> EventFormatter:
    """Create the event formatter selected by ``config.formatter_type``"""
    config = config or get_default_config()
    try:
        formatter_class = _EVENT_FORMATTERS[config.formatter_type]
    except KeyError:
        raise ValueError(f"Unknown formatter type: {config.formatter_type!r}") from None
    return formatter_class(invalid_xml_chars=config.invalid_xml_chars)


def get_formatter(config: Optional[FormatterConfig] = None) -> logging.Formatter:
    """Get a ``logging.Formatter`` for ``config`` from cache or create a new one"""
    config = config or get_default_config()
    cache_key = _get_formatter_cache_key(config)

    if cache_key not in _formatter_cache:
        try:
            formatter_class = _RECORD_FORMATTERS[config.formatter_type]
        except KeyError:
            raise ValueError(f"Unknown formatter type: {config.formatter_type!r}") from None
        _formatter_cache[cache_key] = formatter_class(config)

    return _formatter_cache[cache_key]


__all__ = [
    "EventFormatter",
    "XmlEventFormatter",
    "Log4netTextFormatter",
    "Log4jTextFormatter",
    "EventRecordFormatter",
    "Log4netFormatter",
    "Log4jFormatter",
    "LEVEL_NAMES",
    "LOG4NET_NAMESPACE",
    "LOG4J_NAMESPACE",
    "level_from_logging",
    "create_event_formatter",
    "get_formatter",
]
