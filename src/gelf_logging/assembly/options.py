"""Assembly – logger provider options."""
from __future__ import annotations

import dataclasses
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any, ClassVar

from gelf_logging.assembly.activity import ActivityTrackingOptions
from gelf_logging.assembly.event import EventId
from gelf_logging.assembly.fields import validate_field_name
from gelf_logging.assembly.severity import LogLevel
from gelf_logging.config.settings import Settings
from gelf_logging.config.validation import InvalidSettingValueError
from gelf_logging.kernel.errors import InvalidFieldNameError

AdditionalFieldsFactory = Callable[[LogLevel, EventId, BaseException | None], Mapping[str, Any]]


@dataclasses.dataclass
class GelfLoggerOptions(Settings):
    """Configuration consumed once when a logger provider is built.

    Attributes:
        log_source: Emitting host/service; becomes the GELF ``host``.
        omit_optional_fields: Drop ``logger``, ``exception``, ``event_id``,
            ``event_name`` and ``message_template`` from every message.
        include_scopes: Merge fields from open scopes.
        include_message_templates: Attach the raw template as
            ``message_template``.
        additional_fields: Static fields added to every message; ``None``
            values are dropped.
        additional_fields_factory: Called once per message with
            ``(level, event_id, exception)``; its fields override the static
            ones.
        activity_tracking: Span-context parts to attach.
        log_level: Minimum level that is logged.
    """

    _prefix: ClassVar[str] = "GELF"

    log_source: str
    omit_optional_fields: bool = False
    include_scopes: bool = True
    include_message_templates: bool = False
    additional_fields: Mapping[str, Any] = dataclasses.field(default_factory=dict)
    additional_fields_factory: AdditionalFieldsFactory | None = None
    activity_tracking: ActivityTrackingOptions = ActivityTrackingOptions.NONE
    log_level: LogLevel = LogLevel.INFORMATION

    def _validate(self) -> None:
        if not self.log_source or not self.log_source.strip():
            raise InvalidSettingValueError("log_source", self.log_source, "must not be empty")
        if self.additional_fields_factory is not None and not callable(self.additional_fields_factory):
            raise InvalidSettingValueError(
                "additional_fields_factory", self.additional_fields_factory, "must be callable"
            )
        for name in self.additional_fields:
            try:
                validate_field_name(name)
            except InvalidFieldNameError as exc:
                raise InvalidSettingValueError("additional_fields", name, exc.message) from exc

    def freeze(self) -> "GelfLoggerOptions":
        """Return a copy whose static fields can no longer be changed through it."""
        return dataclasses.replace(
            self, additional_fields=MappingProxyType(dict(self.additional_fields))
        )


__all__ = ["AdditionalFieldsFactory", "GelfLoggerOptions"]
