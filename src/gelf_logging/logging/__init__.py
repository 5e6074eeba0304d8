"""Logging – GELF logger front-end, stdlib bridge and transport port."""
from gelf_logging.logging.handler import GelfHandler, StructuredMessage
from gelf_logging.logging.logger import GelfLogger
from gelf_logging.logging.protocol import GelfTransport
from gelf_logging.logging.provider import GelfLoggerProvider

__all__ = ["GelfHandler", "GelfLogger", "GelfLoggerProvider", "GelfTransport", "StructuredMessage"]
