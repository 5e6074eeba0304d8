"""Logging – GelfLoggerProvider."""
from __future__ import annotations

import threading
from typing import Any

import structlog

from gelf_logging.assembly.assembler import MessageAssembler
from gelf_logging.assembly.message import GelfMessage
from gelf_logging.assembly.options import GelfLoggerOptions
from gelf_logging.assembly.scope import ScopeStack
from gelf_logging.kernel.time import Clock
from gelf_logging.logging.logger import GelfLogger
from gelf_logging.logging.protocol import GelfTransport

_log = structlog.get_logger(__name__)


class GelfLoggerProvider:
    """Creates named :class:`GelfLogger` instances sharing one configuration.

    The options are frozen on construction; later edits to the object that
    was passed in do not affect this provider. All loggers from one
    provider share its scope stack, which is isolated per thread and per
    asyncio task.

    Parameters
    ----------
    options:
        Provider configuration.
    transport:
        Receives every assembled message.
    clock:
        Timestamp source (defaults to the system clock).
    """

    def __init__(
        self,
        options: GelfLoggerOptions,
        transport: GelfTransport,
        *,
        clock: Clock | None = None,
    ) -> None:
        self._options = options.freeze()
        self._transport = transport
        self._scopes = ScopeStack()
        self._assembler = MessageAssembler(clock=clock)
        self._loggers: dict[str, GelfLogger] = {}
        self._lock = threading.Lock()
        _log.debug(
            "gelf_logger_provider_created",
            log_source=self._options.log_source,
            log_level=self._options.log_level.name,
            include_scopes=self._options.include_scopes,
        )

    @property
    def options(self) -> GelfLoggerOptions:
        return self._options

    @property
    def scopes(self) -> ScopeStack:
        return self._scopes

    @property
    def assembler(self) -> MessageAssembler:
        return self._assembler

    def create_logger(self, name: str) -> GelfLogger:
        with self._lock:
            logger = self._loggers.get(name)
            if logger is None:
                logger = self._loggers[name] = GelfLogger(name, self)
            return logger

    def send(self, message: GelfMessage) -> None:
        try:
            self._transport.send(message)
        except Exception as exc:
            _log.warning(
                "gelf_transport_send_failed",
                message_id=message.id,
                logger=message.logger,
                error=repr(exc),
            )
            raise

    def close(self) -> None:
        close = getattr(self._transport, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> "GelfLoggerProvider":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()


__all__ = ["GelfLoggerProvider"]
