"""
gelf_logging – structured logging to Graylog (GELF).

Import path convention::

    from gelf_logging.assembly import GelfLoggerOptions, LogLevel, MessageAssembler
    from gelf_logging.logging import GelfLoggerProvider, GelfHandler
    from gelf_logging.testing import InMemoryTransport
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
