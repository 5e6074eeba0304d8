"""Logging – GelfLogger, the structured-logging front-end."""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from gelf_logging.assembly.event import EventId, LogEvent
from gelf_logging.assembly.message import GelfMessage
from gelf_logging.assembly.scope import Scope
from gelf_logging.assembly.severity import LogLevel

if TYPE_CHECKING:
    from gelf_logging.logging.provider import GelfLoggerProvider

EventIdLike = EventId | int | tuple[int, str | None] | None


class GelfLogger:
    """Named logger bound to a :class:`GelfLoggerProvider`.

    A ``str`` message with positional arguments is a template whose
    placeholders bind to the arguments; without arguments it is sent as-is
    and still reported as the message template when those are enabled.
    Any other object is rendered with ``str()``.

    Example::

        log = provider.create_logger("orders")
        with log.begin_scope({"request_id": "r-1"}):
            log.information("Order {order_id} shipped", 42)
    """

    def __init__(self, name: str, provider: GelfLoggerProvider) -> None:
        self._name = name
        self._provider = provider

    @property
    def name(self) -> str:
        return self._name

    def is_enabled(self, level: LogLevel) -> bool:
        return level != LogLevel.NONE and level >= self._provider.options.log_level

    def begin_scope(self, state: Any, *args: Any) -> Scope:
        """Open a scope whose fields apply to every message logged inside it."""
        return self._provider.scopes.enter(state, *args)

    def log(
        self,
        level: LogLevel,
        message: Any,
        *args: Any,
        exception: BaseException | None = None,
        event_id: EventIdLike = None,
    ) -> GelfMessage | None:
        """Assemble and send one message; returns it, or ``None`` when *level* is disabled."""
        if not self.is_enabled(level):
            return None
        if isinstance(message, str) and args:
            event = LogEvent(
                level=level,
                logger_name=self._name,
                template=message,
                args=args,
                exception=exception,
                event_id=EventId.of(event_id),
            )
        else:
            event = LogEvent(
                level=level,
                logger_name=self._name,
                message=message,
                args=args,
                exception=exception,
                event_id=EventId.of(event_id),
                format_string=message if isinstance(message, str) else None,
            )
        return self.write(event)

    def write(
        self, event: LogEvent, extra_scopes: Iterable[Mapping[str, Any]] = ()
    ) -> GelfMessage:
        """Assemble *event* against the open scopes (plus *extra_scopes*, innermost) and send it."""
        scopes = (*self._provider.scopes.snapshot(), *extra_scopes)
        message = self._provider.assembler.assemble(event, self._provider.options, scopes)
        self._provider.send(message)
        return message

    def trace(self, message: Any, *args: Any, **kwargs: Any) -> GelfMessage | None:
        return self.log(LogLevel.TRACE, message, *args, **kwargs)

    def debug(self, message: Any, *args: Any, **kwargs: Any) -> GelfMessage | None:
        return self.log(LogLevel.DEBUG, message, *args, **kwargs)

    def information(self, message: Any, *args: Any, **kwargs: Any) -> GelfMessage | None:
        return self.log(LogLevel.INFORMATION, message, *args, **kwargs)

    # common alias
    info = information

    def warning(self, message: Any, *args: Any, **kwargs: Any) -> GelfMessage | None:
        return self.log(LogLevel.WARNING, message, *args, **kwargs)

    def error(self, message: Any, *args: Any, **kwargs: Any) -> GelfMessage | None:
        return self.log(LogLevel.ERROR, message, *args, **kwargs)

    def critical(self, message: Any, *args: Any, **kwargs: Any) -> GelfMessage | None:
        return self.log(LogLevel.CRITICAL, message, *args, **kwargs)

    def __repr__(self) -> str:
        return f"GelfLogger(name={self._name!r})"


__all__ = ["GelfLogger"]
