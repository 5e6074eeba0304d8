"""Assembly – the immutable input of one logging call."""
from __future__ import annotations

import dataclasses
from typing import Any

from gelf_logging.assembly.severity import LogLevel
from gelf_logging.kernel.errors import ContractViolationError


@dataclasses.dataclass(frozen=True)
class EventId:
    """Numeric event identifier with an optional name.

    ``EventId()`` (id ``0``, no name) is the "no event" default.
    """

    id: int = 0
    name: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.id == 0 and self.name is None

    @classmethod
    def of(cls, value: "EventId | int | tuple[int, str | None] | None") -> "EventId":
        """Normalise the shapes callers pass for an event id."""
        if value is None:
            return cls()
        if isinstance(value, EventId):
            return value
        if isinstance(value, tuple):
            event_id, name = value
            return cls(int(event_id), name)
        return cls(int(value))


@dataclasses.dataclass(frozen=True)
class LogEvent:
    """A single structured logging call.

    Exactly one of *template* (parsed, bound to *args*) or *message*
    (rendered with ``str()``, never parsed) is expected to carry the text.
    *format_string* records the caller's unparsed format text for a plain
    message, e.g. a ``%``-style string or a string logged without arguments.
    """

    level: LogLevel
    logger_name: str
    template: str | None = None
    args: tuple[Any, ...] = ()
    message: Any = None
    exception: BaseException | None = None
    event_id: EventId = EventId()
    format_string: str | None = None

    def __post_init__(self) -> None:
        if self.template is None and self.args:
            raise ContractViolationError(
                "Positional arguments were supplied without a message template",
                detail={"logger": self.logger_name},
            )

    @property
    def message_format(self) -> str | None:
        """Template or format text the message was produced from, if any."""
        if self.template is not None:
            return self.template
        return self.format_string


__all__ = ["EventId", "LogEvent"]
