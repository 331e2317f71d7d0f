"""Tests for the JSON object parser and writer."""

from __future__ import annotations

import json

import pytest

from notify_commons.errors import InvalidArgumentError, JsonParseError
from notify_commons.json_io import JsonObjectParser, JsonWriter


class TestJsonObjectParser:
    def test_fields_in_document_order(self) -> None:
        parser = JsonObjectParser.from_string('{"b":1,"a":"x","c":[1,2]}')
        assert list(parser) == ["b", "a", "c"]

    def test_text_reads_current_value(self) -> None:
        parser = JsonObjectParser.from_string('{"name":"value"}')
        for field_name in parser:
            assert parser.current_name == field_name
            assert parser.text() == "value"
        assert parser.current_name is None

    def test_text_rejects_non_string(self) -> None:
        parser = JsonObjectParser.from_string('{"n":{"nested":true}}')
        for _ in parser:
            with pytest.raises(InvalidArgumentError):
                parser.text()

    def test_skip_children_clears_current(self) -> None:
        parser = JsonObjectParser.from_string('{"obj":{"x":[1,2,3]}}')
        for _ in parser:
            parser.skip_children()
            with pytest.raises(JsonParseError):
                parser.value()

    def test_value_without_field(self) -> None:
        with pytest.raises(JsonParseError):
            JsonObjectParser({}).value()

    def test_forward_only(self) -> None:
        parser = JsonObjectParser({"a": 1})
        assert list(parser) == ["a"]
        assert list(parser) == []

    @pytest.mark.parametrize(
        "text",
        [
            "sample message",
            "",
            "{",
            '{"a":}',
            b"\xff\xfe",
            '{"a":NaN}',
            '{"a":[Infinity]}',
            '{"a":-Infinity}',
        ],
    )
    def test_malformed_input(self, text: str | bytes) -> None:
        with pytest.raises(JsonParseError):
            JsonObjectParser.from_string(text)

    def test_deep_nesting(self) -> None:
        text = '{"url":"https://domain.com/x","a":' + "[" * 100_000
        with pytest.raises(JsonParseError):
            JsonObjectParser.from_string(text)

    @pytest.mark.parametrize("text", ["[]", '"url"', "42", "null"])
    def test_top_level_must_be_object(self, text: str) -> None:
        with pytest.raises(JsonParseError, match="Expected a JSON object"):
            JsonObjectParser.from_string(text)


class TestJsonWriter:
    def test_compact_output(self) -> None:
        writer = JsonWriter().start_object().field("url", "https://x.com").end_object()
        assert writer.to_string() == '{"url":"https://x.com"}'

    def test_pretty_output(self) -> None:
        writer = JsonWriter(pretty=True).start_object().field("url", "https://x.com").end_object()
        assert writer.to_string() == '{\n  "url": "https://x.com"\n}'

    def test_nested_object(self) -> None:
        writer = (
            JsonWriter()
            .start_object()
            .start_object("inner")
            .field("k", 1)
            .end_object()
            .end_object()
        )
        assert json.loads(writer.to_string()) == {"inner": {"k": 1}}

    def test_non_ascii_kept(self) -> None:
        writer = JsonWriter().start_object().field("name", "Überweisung").end_object()
        assert "Überweisung" in writer.to_string()

    def test_field_outside_object(self) -> None:
        with pytest.raises(InvalidArgumentError):
            JsonWriter().field("a", 1)

    def test_unbalanced_end(self) -> None:
        with pytest.raises(InvalidArgumentError):
            JsonWriter().end_object()

    def test_incomplete_object(self) -> None:
        with pytest.raises(InvalidArgumentError, match="incomplete"):
            JsonWriter().start_object().to_string()

    def test_nested_needs_name(self) -> None:
        with pytest.raises(InvalidArgumentError):
            JsonWriter().start_object().start_object()

    def test_second_root_rejected(self) -> None:
        writer = JsonWriter().start_object().end_object()
        with pytest.raises(InvalidArgumentError):
            writer.start_object()
