"""Assembly – builds GELF messages from structured logging calls."""
from gelf_logging.assembly.activity import ActivityEnricher, ActivityTrackingOptions
from gelf_logging.assembly.assembler import GELF_VERSION, MessageAssembler, format_exception
from gelf_logging.assembly.event import EventId, LogEvent
from gelf_logging.assembly.fields import FieldCollector, FieldValue, coerce_field_value, validate_field_name
from gelf_logging.assembly.message import OPTIONAL_FIELDS, GelfMessage
from gelf_logging.assembly.options import AdditionalFieldsFactory, GelfLoggerOptions
from gelf_logging.assembly.scope import Scope, ScopeEntry, ScopeStack
from gelf_logging.assembly.severity import LogLevel, to_gelf_level
from gelf_logging.assembly.template import MessageTemplate, compile_template, parse_template

__all__ = [
    "ActivityEnricher",
    "ActivityTrackingOptions",
    "AdditionalFieldsFactory",
    "EventId",
    "FieldCollector",
    "FieldValue",
    "GELF_VERSION",
    "GelfLoggerOptions",
    "GelfMessage",
    "LogEvent",
    "LogLevel",
    "MessageAssembler",
    "MessageTemplate",
    "OPTIONAL_FIELDS",
    "Scope",
    "ScopeEntry",
    "ScopeStack",
    "coerce_field_value",
    "compile_template",
    "format_exception",
    "parse_template",
    "to_gelf_level",
    "validate_field_name",
]
