"""Assembly – the assembled GELF message."""
from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

# Optional fixed fields, in payload order.
OPTIONAL_FIELDS: tuple[str, ...] = (
    "logger",
    "exception",
    "event_id",
    "event_name",
    "message_template",
)


@dataclasses.dataclass(frozen=True)
class GelfMessage:
    """One log document, ready for a transport.

    Absent optional fields are ``None``; use :meth:`has_field` (or ``in``)
    rather than attribute access to test for presence. ``id`` identifies
    the message to the transport (e.g. as the GELF chunk id) and is not
    part of the payload, since Graylog assigns its own ``_id``.
    """

    id: str
    version: str
    host: str
    short_message: str
    timestamp: float
    level: int
    logger: str | None = None
    exception: str | None = None
    event_id: int | None = None
    event_name: str | None = None
    message_template: str | None = None
    additional_fields: Mapping[str, str | int | float] = dataclasses.field(
        default_factory=lambda: MappingProxyType({})
    )

    @property
    def trace_id(self) -> str | None:
        value = self.additional_fields.get("trace_id")
        return None if value is None else str(value)

    @property
    def span_id(self) -> str | None:
        value = self.additional_fields.get("span_id")
        return None if value is None else str(value)

    def has_field(self, name: str) -> bool:
        return self.get_field(name) is not None

    def get_field(self, name: str, default: Any = None) -> Any:
        """Look up a fixed, optional or additional field by name."""
        if name in ("id", "version", "host", "short_message", "timestamp", "level"):
            return getattr(self, name)
        if name in OPTIONAL_FIELDS:
            value = getattr(self, name)
            if value is not None:
                return value
        return self.additional_fields.get(name, default)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has_field(name)

    def to_gelf(self) -> dict[str, Any]:
        """GELF 1.1 payload; every non-standard field gets a ``_`` prefix."""
        payload: dict[str, Any] = {
            "version": self.version,
            "host": self.host,
            "short_message": self.short_message,
            "timestamp": self.timestamp,
            "level": self.level,
        }
        for name in OPTIONAL_FIELDS:
            value = getattr(self, name)
            if value is not None:
                payload[f"_{name}"] = value
        for name, value in self.additional_fields.items():
            if name in OPTIONAL_FIELDS and getattr(self, name) is not None:
                continue
            payload[f"_{name}"] = value
        return payload

    def to_json(self) -> str:
        return json.dumps(self.to_gelf(), ensure_ascii=False, separators=(",", ":"))


__all__ = ["GelfMessage", "OPTIONAL_FIELDS"]
