#!/usr/bin/env python3
"""
log4net UDP Example

Demonstrates shipping log4net XML events to a UDP receiver such as
Log4View or a log4net UdpAppender-compatible collector:
- Formatting structured events directly
- Plugging the formatter into the standard logging module
"""

import io
import logging
import socket

from log4net_xml import (
    FormatterConfig,
    LogEvent,
    LogEventLevel,
    Log4netTextFormatter,
    get_formatter,
)

COLLECTOR = ("localhost", 7071)


class UdpHandler(logging.Handler):
    """Sends each formatted record as one datagram"""

    def __init__(self, address):
        super().__init__()
        self.address = address
        self.sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.sock.sendto(self.format(record).encode("utf-8"), self.address)
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        self.sock.close()
        super().close()


def example_structured_event():
    """Example: format a structured event by hand"""
    print("📨 Structured Event Example")
    print("=" * 50)

    event = LogEvent.create(
        LogEventLevel.WARNING,
        "Order {OrderId} for {@Customer} is late",
        1042,
        {"name": "ACME", "tier": "gold"},
        SourceContext="shop.orders",
        Method="check_deliveries",
    )

    output = io.StringIO()
    Log4netTextFormatter().format(event, output)
    print(output.getvalue())
    print()


def example_stdlib_logging():
    """Example: stdlib logging over UDP"""
    print("🌐 UDP Logging Example")
    print("=" * 50)

    handler = UdpHandler(COLLECTOR)
    handler.setFormatter(get_formatter(FormatterConfig(formatter_type="log4net")))

    logger = logging.getLogger("udp_demo")
    logger.setLevel(logging.INFO)
    logger.addHandler(handler)

    logger.info("Service started", extra={"ctx_version": "1.0.0"})
    try:
        1 / 0
    except ZeroDivisionError:
        logger.exception("Calculation failed")

    logger.removeHandler(handler)
    handler.close()
    print(f"✅ Events sent to {COLLECTOR[0]}:{COLLECTOR[1]}")
    print()


if __name__ == "__main__":
    example_structured_event()
    example_stdlib_logging()
