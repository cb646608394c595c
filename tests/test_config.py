import pytest

from log4net_xml import Log4jTextFormatter, Log4netTextFormatter, create_event_formatter
from log4net_xml.config import (
    FormatterConfig,
    get_default_config,
    set_default_config,
)


@pytest.fixture(autouse=True)
def restore_default_config():
    original = get_default_config()
    yield
    set_default_config(original)


def test_formatter_config_defaults():
    config = FormatterConfig()
    assert config.formatter_type == "log4net"
    assert config.enrich_thread_id is True
    assert config.enrich_user_name is True
    assert config.enrich_process_name is True
    assert config.enrich_machine_name is True
    assert config.context_prefix == "ctx_"
    assert config.invalid_xml_chars == "replace"


def test_formatter_config_from_env(monkeypatch):
    monkeypatch.setenv("LOG4NET_XML_FORMATTER", "LOG4J")
    monkeypatch.setenv("LOG4NET_XML_THREAD_ID", "false")
    monkeypatch.setenv("LOG4NET_XML_USER_NAME", "False")
    monkeypatch.setenv("LOG4NET_XML_PROCESS_NAME", "no")
    monkeypatch.setenv("LOG4NET_XML_MACHINE_NAME", "TRUE")
    monkeypatch.setenv("LOG4NET_XML_CONTEXT_PREFIX", "log_")
    monkeypatch.setenv("LOG4NET_XML_INVALID_CHARS", "strip")

    config = FormatterConfig.from_env()
    assert config.formatter_type == "log4j"
    assert config.enrich_thread_id is False
    assert config.enrich_user_name is False
    assert config.enrich_process_name is False
    assert config.enrich_machine_name is True
    assert config.context_prefix == "log_"
    assert config.invalid_xml_chars == "strip"


def test_unknown_env_values_fall_back(monkeypatch):
    monkeypatch.setenv("LOG4NET_XML_FORMATTER", "json")
    monkeypatch.setenv("LOG4NET_XML_INVALID_CHARS", "ignore")

    config = FormatterConfig.from_env()
    assert config.formatter_type == "log4net"
    assert config.invalid_xml_chars == "replace"


def test_get_default_config():
    config = get_default_config()
    assert isinstance(config, FormatterConfig)


def test_set_default_config():
    custom_config = FormatterConfig(formatter_type="log4j")
    set_default_config(custom_config)

    config = get_default_config()
    assert config.formatter_type == "log4j"


def test_create_event_formatter():
    assert isinstance(create_event_formatter(FormatterConfig()), Log4netTextFormatter)
    formatter = create_event_formatter(FormatterConfig(formatter_type="log4j", invalid_xml_chars="strip"))
    assert isinstance(formatter, Log4jTextFormatter)
    assert formatter.invalid_xml_chars == "strip"


def test_create_event_formatter_uses_default_config():
    set_default_config(FormatterConfig(formatter_type="log4j"))
    assert isinstance(create_event_formatter(), Log4jTextFormatter)
