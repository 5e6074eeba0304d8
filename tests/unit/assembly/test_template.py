"""Unit tests for message template parsing and rendering."""

from __future__ import annotations

import pytest

from gelf_logging.assembly import compile_template, parse_template
from gelf_logging.kernel.errors import TemplateError


# ---------------------------------------------------------------------------
# Binding and rendering
# ---------------------------------------------------------------------------


class TestParseTemplate:
    def test_binds_placeholders_positionally(self) -> None:
        text, fields = parse_template(
            "Structured log line with {first_value} and {second_value}", ("foo", 123)
        )
        assert text == "Structured log line with foo and 123"
        assert fields == {"first_value": "foo", "second_value": 123}

    def test_fields_keep_template_order(self) -> None:
        _, fields = parse_template("{b} then {a}", (1, 2))
        assert list(fields) == ["b", "a"]

    def test_no_placeholders_returns_template(self) -> None:
        text, fields = parse_template("Just a plain line", ())
        assert text == "Just a plain line"
        assert fields == {}

    def test_escaped_braces_render_literally(self) -> None:
        text, fields = parse_template("{{literal}} and {value}", ("x",))
        assert text == "{literal} and x"
        assert fields == {"value": "x"}

    def test_none_argument_renders_null_and_binds_none(self) -> None:
        text, fields = parse_template("User {user}", (None,))
        assert text == "User (null)"
        assert fields == {"user": None}

    def test_format_spec_applies_to_text_only(self) -> None:
        text, fields = parse_template("Total {total:.2f}", (3.14159,))
        assert text == "Total 3.14"
        assert fields == {"total": 3.14159}

    def test_alignment(self) -> None:
        text, _ = parse_template("[{right,5}][{left,-5}]", ("ab", "cd"))
        assert text == "[   ab][cd   ]"

    def test_hint_prefixes_are_dropped_from_names(self) -> None:
        _, fields = parse_template("{@order} {$user}", ({"id": 1}, "alice"))
        assert set(fields) == {"order", "user"}

    def test_raw_argument_is_bound(self) -> None:
        payload = {"id": 1}
        _, fields = parse_template("{order}", (payload,))
        assert fields["order"] is payload


# ---------------------------------------------------------------------------
# Malformed templates
# ---------------------------------------------------------------------------


class TestTemplateErrors:
    def test_too_few_arguments(self) -> None:
        with pytest.raises(TemplateError) as exc_info:
            parse_template("{a} {b}", ("only-one",))
        assert exc_info.value.template == "{a} {b}"

    def test_too_many_arguments(self) -> None:
        with pytest.raises(TemplateError):
            parse_template("{a}", (1, 2))

    def test_unclosed_brace(self) -> None:
        with pytest.raises(TemplateError):
            parse_template("Value {a", (1,))

    def test_unmatched_closing_brace(self) -> None:
        with pytest.raises(TemplateError):
            parse_template("Value a}", ())

    def test_empty_placeholder(self) -> None:
        with pytest.raises(TemplateError):
            parse_template("Value {}", (1,))

    def test_bad_alignment(self) -> None:
        with pytest.raises(TemplateError):
            parse_template("{a,wide}", (1,))

    def test_bad_format_spec(self) -> None:
        with pytest.raises(TemplateError) as exc_info:
            parse_template("{a:.2f}", ("not-a-number",))
        assert isinstance(exc_info.value.__cause__, ValueError)


class TestCompileTemplate:
    def test_is_cached(self) -> None:
        assert compile_template("Hello {name}") is compile_template("Hello {name}")

    def test_names(self) -> None:
        assert compile_template("{a} {b:x} {c,3}").names == ("a", "b", "c")
