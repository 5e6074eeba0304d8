"""Assembly – additional field values and the precedence merge.

Field values form a closed set: ``str``, ``int``, ``float`` or ``None``.
``None`` is an explicit "omit this field" marker and never reaches the
assembled message.

Sources, lowest to highest precedence:

1. ``options.additional_fields`` (static configuration)
2. ``options.additional_fields_factory(level, event_id, exception)``
3. tracing fields, then scope fields outermost to innermost (both only
   when ``options.include_scopes`` is set)
4. fields bound from the message template
"""
from __future__ import annotations

import math
import numbers
import re
from collections.abc import Iterable, Mapping
from decimal import Decimal
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Union

from gelf_logging.kernel.errors import InvalidFieldNameError

if TYPE_CHECKING:
    from gelf_logging.assembly.event import LogEvent
    from gelf_logging.assembly.options import GelfLoggerOptions

FieldValue = Union[str, int, float, None]

_FIELD_NAME_RE = re.compile(r"^[\w.\-]+$")
# Graylog assigns its own ``_id``; the GELF payload must never carry one.
_RESERVED_FIELD_NAMES = frozenset({"id"})


def coerce_field_value(value: Any) -> FieldValue:
    """Map an arbitrary Python value onto the closed :data:`FieldValue` set."""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, (numbers.Real, Decimal)):
        number = float(value)
        if not math.isfinite(number):
            return str(value)
        return number
    return str(value)


def validate_field_name(name: Any) -> str:
    """Return *name* if GELF accepts it as an additional field name."""
    if not isinstance(name, str) or not _FIELD_NAME_RE.fullmatch(name) or name in _RESERVED_FIELD_NAMES:
        raise InvalidFieldNameError(str(name))
    return name


class FieldCollector:
    """Stateless merge of every additional field source for one call."""

    def collect(
        self,
        event: LogEvent,
        options: GelfLoggerOptions,
        scopes: Iterable[Mapping[str, Any]],
        template_fields: Mapping[str, Any],
        tracing_fields: Mapping[str, Any] | None = None,
    ) -> Mapping[str, str | int | float]:
        merged: dict[str, FieldValue] = {}

        self._apply(merged, options.additional_fields)
        factory = options.additional_fields_factory
        if factory is not None:
            self._apply(merged, factory(event.level, event.event_id, event.exception) or {})
        if options.include_scopes:
            if tracing_fields:
                self._apply(merged, tracing_fields)
            for entry in scopes:
                self._apply(merged, entry)
        self._apply(merged, template_fields)

        result: dict[str, str | int | float] = {}
        for name, value in merged.items():
            if value is None:
                continue
            result[validate_field_name(name)] = value
        return MappingProxyType(result)

    @staticmethod
    def _apply(target: dict[str, FieldValue], source: Mapping[str, Any]) -> None:
        for name, value in source.items():
            target[name] = coerce_field_value(value)


__all__ = ["FieldCollector", "FieldValue", "coerce_field_value", "validate_field_name"]
