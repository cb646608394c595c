import os
from dataclasses import dataclass
from typing import Literal, Optional

FormatterType = Literal["log4net", "log4j"]
InvalidXmlChars = Literal["replace", "strip"]


@dataclass
class FormatterConfig:
    """Configuration for XML event formatters"""

    formatter_type: FormatterType = "log4net"
    enrich_thread_id: bool = True
    enrich_user_name: bool = True
    enrich_process_name: bool = True
    enrich_machine_name: bool = True
    context_prefix: str = "ctx_"
    invalid_xml_chars: InvalidXmlChars = "replace"

    @classmethod
    def _parse_bool_env(cls, key: str, default: str = "false") -> bool:
        """Parse boolean from environment variable"""
        return os.getenv(key, default).lower() == "true"

    @classmethod
    def from_env(cls) -> "FormatterConfig":
        """Create configuration from environment variables"""
        formatter_type = os.getenv("LOG4NET_XML_FORMATTER", "log4net").lower()
        if formatter_type not in ["log4net", "log4j"]:
            formatter_type = "log4net"

        invalid_xml_chars = os.getenv("LOG4NET_XML_INVALID_CHARS", "replace").lower()
        if invalid_xml_chars not in ["replace", "strip"]:
            invalid_xml_chars = "replace"

        return cls(
            formatter_type=formatter_type,
            enrich_thread_id=cls._parse_bool_env("LOG4NET_XML_THREAD_ID", "true"),
            enrich_user_name=cls._parse_bool_env("LOG4NET_XML_USER_NAME", "true"),
            enrich_process_name=cls._parse_bool_env("LOG4NET_XML_PROCESS_NAME", "true"),
            enrich_machine_name=cls._parse_bool_env("LOG4NET_XML_MACHINE_NAME", "true"),
            context_prefix=os.getenv("LOG4NET_XML_CONTEXT_PREFIX", "ctx_"),
            invalid_xml_chars=invalid_xml_chars,
        )


_default_config: Optional[FormatterConfig] = None


def get_default_config() -> FormatterConfig:
    """Get the default configuration instance"""
    global _default_config
    if _default_config is None:
        _default_config = FormatterConfig.from_env()
    return _default_config


def set_default_config(config: FormatterConfig) -> None:
    """Set the default configuration instance"""
    global _default_config
    _default_config = config
