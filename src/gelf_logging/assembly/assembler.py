"""Assembly – MessageAssembler.

Turns one :class:`LogEvent` plus the active scopes into a
:class:`GelfMessage`. Nothing is cached or retried; a failure in any step
propagates to the caller and no message is produced.
"""
from __future__ import annotations

import traceback
import uuid
from collections.abc import Iterable, Mapping
from typing import Any

from gelf_logging.assembly.activity import ActivityEnricher
from gelf_logging.assembly.event import LogEvent
from gelf_logging.assembly.fields import FieldCollector
from gelf_logging.assembly.message import GelfMessage
from gelf_logging.assembly.options import GelfLoggerOptions
from gelf_logging.assembly.severity import to_gelf_level
from gelf_logging.assembly.template import NULL_TEXT, parse_template
from gelf_logging.kernel.time import Clock, SystemClock

GELF_VERSION = "1.1"


def format_exception(exc: BaseException) -> str:
    """Full diagnostic text: type, message, traceback and chained causes."""
    return "".join(traceback.format_exception(exc)).rstrip("\n")


class MessageAssembler:
    """Stateless and reentrant; safe to share across threads and tasks."""

    def __init__(
        self,
        *,
        clock: Clock | None = None,
        collector: FieldCollector | None = None,
        enricher: ActivityEnricher | None = None,
    ) -> None:
        self._clock = clock or SystemClock()
        self._collector = collector or FieldCollector()
        self._enricher = enricher or ActivityEnricher()

    def assemble(
        self,
        event: LogEvent,
        options: GelfLoggerOptions,
        scopes: Iterable[Mapping[str, Any]] = (),
    ) -> GelfMessage:
        if event.template is not None:
            text, template_fields = parse_template(event.template, event.args)
        else:
            text = NULL_TEXT if event.message is None else str(event.message)
            template_fields = {}

        level = to_gelf_level(event.level)
        tracing_fields = self._enricher.enrich(options.activity_tracking)
        fields = self._collector.collect(event, options, scopes, template_fields, tracing_fields)

        optional: dict[str, Any] = {}
        if not options.omit_optional_fields:
            optional = {
                "logger": event.logger_name or None,
                "exception": format_exception(event.exception) if event.exception is not None else None,
                "event_id": event.event_id.id or None,
                "event_name": event.event_id.name or None,
                "message_template": (
                    event.message_format if options.include_message_templates else None
                ),
            }

        return GelfMessage(
            id=uuid.uuid4().hex,
            version=GELF_VERSION,
            host=options.log_source,
            short_message=text,
            timestamp=self._clock.timestamp(),
            level=level,
            additional_fields=fields,
            **optional,
        )


__all__ = ["GELF_VERSION", "MessageAssembler", "format_exception"]
