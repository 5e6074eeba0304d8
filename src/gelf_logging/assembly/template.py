"""Assembly – structured message templates.

A template such as ``"Order {order_id} shipped to {city}"`` names its
placeholders; arguments bind to them by position, left to right. Supported
placeholder forms:

* ``{name}``
* ``{name:format}`` – *format* is a Python format spec (``{total:.2f}``)
* ``{name,alignment}`` – positive pads left, negative pads right
* ``{@name}`` / ``{$name}`` – the hint prefix is dropped from the field name

``{{`` and ``}}`` render literal braces.
"""
from __future__ import annotations

import dataclasses
import functools
import re
from collections.abc import Sequence
from typing import Any

from gelf_logging.kernel.errors import TemplateError

NULL_TEXT = "(null)"

_NAME_RE = re.compile(r"^[\w.\-]+$")


@dataclasses.dataclass(frozen=True)
class Placeholder:
    name: str
    alignment: int | None = None
    format_spec: str | None = None

    def render(self, value: Any, template: str) -> str:
        if value is None:
            text = NULL_TEXT
        elif self.format_spec is not None:
            try:
                text = format(value, self.format_spec)
            except (TypeError, ValueError) as exc:
                raise TemplateError(
                    f"Cannot format {self.name!r} with {self.format_spec!r}",
                    template=template,
                    cause=exc,
                ) from exc
        else:
            text = str(value)
        if self.alignment is None:
            return text
        if self.alignment < 0:
            return text.ljust(-self.alignment)
        return text.rjust(self.alignment)


@dataclasses.dataclass(frozen=True)
class MessageTemplate:
    """A parsed template: literal text interleaved with placeholders."""

    text: str
    tokens: tuple[str | Placeholder, ...]

    @property
    def placeholders(self) -> tuple[Placeholder, ...]:
        return tuple(t for t in self.tokens if isinstance(t, Placeholder))

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(p.name for p in self.placeholders)

    def render(self, args: Sequence[Any]) -> tuple[str, dict[str, Any]]:
        placeholders = self.placeholders
        if len(placeholders) != len(args):
            raise TemplateError(
                f"Template has {len(placeholders)} placeholder(s) but {len(args)} argument(s) were given",
                template=self.text,
            )
        parts: list[str] = []
        fields: dict[str, Any] = {}
        position = 0
        for token in self.tokens:
            if isinstance(token, str):
                parts.append(token)
                continue
            value = args[position]
            position += 1
            parts.append(token.render(value, self.text))
            fields[token.name] = value
        return "".join(parts), fields


def _parse_placeholder(body: str, template: str) -> Placeholder:
    format_spec: str | None = None
    alignment: int | None = None
    if ":" in body:
        body, format_spec = body.split(":", 1)
    if "," in body:
        body, raw_alignment = body.split(",", 1)
        try:
            alignment = int(raw_alignment.strip())
        except ValueError as exc:
            raise TemplateError(
                f"Invalid alignment {raw_alignment!r}", template=template, cause=exc
            ) from exc
    name = body.strip()
    if name[:1] in ("@", "$"):
        name = name[1:]
    if not _NAME_RE.fullmatch(name):
        raise TemplateError(f"Invalid placeholder name {name!r}", template=template)
    return Placeholder(name=name, alignment=alignment, format_spec=format_spec)


@functools.lru_cache(maxsize=1024)
def compile_template(template: str) -> MessageTemplate:
    """Parse *template* once; results are cached by template text."""
    tokens: list[str | Placeholder] = []
    literal: list[str] = []
    i = 0
    length = len(template)
    while i < length:
        char = template[i]
        if char == "{":
            if template.startswith("{{", i):
                literal.append("{")
                i += 2
                continue
            end = template.find("}", i + 1)
            if end == -1:
                raise TemplateError("Unclosed '{' in message template", template=template)
            body = template[i + 1 : end]
            if "{" in body:
                raise TemplateError("Nested '{' in message template", template=template)
            if literal:
                tokens.append("".join(literal))
                literal = []
            tokens.append(_parse_placeholder(body, template))
            i = end + 1
        elif char == "}":
            if not template.startswith("}}", i):
                raise TemplateError("Unmatched '}' in message template", template=template)
            literal.append("}")
            i += 2
        else:
            literal.append(char)
            i += 1
    if literal:
        tokens.append("".join(literal))
    return MessageTemplate(text=template, tokens=tuple(tokens))


def parse_template(template: str, args: Sequence[Any] = ()) -> tuple[str, dict[str, Any]]:
    """Render *template* with *args* and return ``(text, fields)``.

    *fields* maps each placeholder name to its raw argument, in template
    order. Raises :class:`TemplateError` when the template is malformed or
    the argument count differs from the placeholder count.
    """
    return compile_template(template).render(args)


__all__ = ["MessageTemplate", "NULL_TEXT", "Placeholder", "compile_template", "parse_template"]
