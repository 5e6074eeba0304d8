"""Logging – GelfHandler, a bridge from stdlib :mod:`logging` to GELF.

Typical usage::

    provider = GelfLoggerProvider(GelfLoggerOptions(log_source="api"), transport)
    logging.getLogger().addHandler(GelfHandler(provider))

    logging.getLogger("orders").info(StructuredMessage("Order {order_id} shipped", 42))
    logging.getLogger("orders").warning("Low stock for %s", "A-1", extra={"sku": "A-1"})

Templates travel as a :class:`StructuredMessage` rather than as ``%``
arguments, so every other handler on the same logger still formats the
record through ``str(record.msg)``.
"""
from __future__ import annotations

import logging
from typing import Any

from gelf_logging.assembly.event import EventId, LogEvent
from gelf_logging.assembly.scope import ScopeEntry
from gelf_logging.assembly.severity import LogLevel
from gelf_logging.assembly.template import parse_template
from gelf_logging.kernel.errors import TemplateError
from gelf_logging.logging.provider import GelfLoggerProvider

# Standard LogRecord attributes that should not be treated as extra fields
_STANDARD_LOGRECORD_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "event_id",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)


class StructuredMessage:
    """A message template with its arguments, for use as ``record.msg``.

    :class:`GelfHandler` binds the arguments to the template placeholders;
    any other handler sees the rendered text via ``str()``.
    """

    __slots__ = ("template", "args")

    def __init__(self, template: str, *args: Any) -> None:
        self.template = template
        self.args = args

    def __str__(self) -> str:
        try:
            text, _ = parse_template(self.template, self.args)
        except TemplateError:
            return self.template
        return text

    def __repr__(self) -> str:
        return f"StructuredMessage({self.template!r}, *{self.args!r})"


class GelfHandler(logging.Handler):
    """Logging handler that assembles records into GELF messages.

    A :class:`StructuredMessage` in ``record.msg`` is sent as a message
    template; anything else is sent as the ``%``-formatted ``getMessage()``
    text, with ``record.msg`` kept as the message template. Values passed
    through ``extra=`` become additional fields with the highest scope
    precedence (subject to ``include_scopes``), except ``event_id`` which
    sets the event id. Records below the provider's ``log_level`` are
    ignored.
    """

    def __init__(self, provider: GelfLoggerProvider, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._provider = provider

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = LogLevel.from_stdlib(record.levelno)
            logger = self._provider.create_logger(record.name)
            if not logger.is_enabled(level):
                return
            logger.write(self._to_event(record, level), extra_scopes=(self._extra_fields(record),))
        except Exception:  # noqa: BLE001
            self.handleError(record)

    def _to_event(self, record: logging.LogRecord, level: LogLevel) -> LogEvent:
        exception = record.exc_info[1] if record.exc_info else None
        event_id = EventId.of(getattr(record, "event_id", None))
        if isinstance(record.msg, StructuredMessage):
            return LogEvent(
                level=level,
                logger_name=record.name,
                template=record.msg.template,
                args=record.msg.args,
                exception=exception,
                event_id=event_id,
            )
        return LogEvent(
            level=level,
            logger_name=record.name,
            message=record.getMessage(),
            exception=exception,
            event_id=event_id,
            format_string=record.msg if isinstance(record.msg, str) else None,
        )

    @staticmethod
    def _extra_fields(record: logging.LogRecord) -> ScopeEntry:
        fields: list[tuple[str, Any]] = [
            (key, value)
            for key, value in record.__dict__.items()
            if key not in _STANDARD_LOGRECORD_ATTRS and not key.startswith("_")
        ]
        return ScopeEntry(fields)


__all__ = ["GelfHandler", "StructuredMessage"]
