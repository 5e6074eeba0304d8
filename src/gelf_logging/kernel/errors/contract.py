"""Contract violations: caller mistakes that abort a single log call."""

from __future__ import annotations

from typing import Any

from gelf_logging.kernel.errors.base import GelfError


class ContractViolationError(GelfError):
    """The caller broke the logging call contract."""

    default_code = "contract_violation"


class UnknownLogLevelError(ContractViolationError):
    """A level outside the severity table was passed to the mapper."""

    default_code = "unknown_log_level"

    def __init__(self, level: Any) -> None:
        super().__init__(f"Log level {level!r} has no GELF severity", detail={"level": repr(level)})
        self.level = level


class TemplateError(ContractViolationError):
    """A message template is malformed or does not match its arguments.

    ``template`` is the offending template text.
    """

    default_code = "template_error"

    def __init__(self, message: str, *, template: str, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.template = template
        self.detail.setdefault("template", template)


class InvalidFieldNameError(ContractViolationError):
    """An additional field name is not accepted by the GELF schema."""

    default_code = "invalid_field_name"

    def __init__(self, name: str) -> None:
        super().__init__(f"Illegal additional field name {name!r}", detail={"name": name})
        self.name = name


__all__ = [
    "ContractViolationError",
    "InvalidFieldNameError",
    "TemplateError",
    "UnknownLogLevelError",
]
