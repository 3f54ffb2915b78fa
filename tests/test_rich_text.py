"""Tests for Quill delta → plain text extraction."""

import json

from core.rich_text import extract_plain_text


class TestExtractPlainText:

    def test_concatenates_string_inserts_and_trims(self):
        ops = [{"insert": "Hello "}, {"insert": "World"}, {"insert": "\n"}]
        assert extract_plain_text(ops) == "Hello World"

    def test_decodes_json_string(self):
        ops = [{"insert": "  Hello "}, {"insert": "World\n"}]
        assert extract_plain_text(json.dumps(ops)) == "Hello World"

    def test_skips_embeds(self):
        ops = [
            {"insert": "Before "},
            {"insert": {"image": "x"}},
            {"insert": "after"},
        ]
        assert extract_plain_text(ops) == "Before after"

    def test_skips_retain_and_delete_ops(self):
        ops = [{"retain": 5}, {"insert": "kept"}, {"delete": 2}]
        assert extract_plain_text(ops) == "kept"

    def test_accepts_delta_object_with_ops(self):
        delta = {"ops": [{"insert": "From ops\n"}]}
        assert extract_plain_text(delta) == "From ops"
        assert extract_plain_text(json.dumps(delta)) == "From ops"

    def test_none_and_empty_yield_empty_string(self):
        assert extract_plain_text(None) == ""
        assert extract_plain_text("") == ""
        assert extract_plain_text([]) == ""

    def test_only_embeds_yields_empty_string(self):
        assert extract_plain_text([{"insert": {"image": "x"}}]) == ""

    def test_malformed_string_falls_back_to_raw_text(self):
        assert extract_plain_text("not json at all") == "not json at all"

    def test_json_that_is_not_a_delta_falls_back(self):
        assert extract_plain_text('"just a string"') == '"just a string"'
        assert extract_plain_text("42") == "42"

    def test_non_list_structure_falls_back_to_str(self):
        assert extract_plain_text({"foo": "bar"}) == str({"foo": "bar"})

    def test_ignores_non_dict_operations(self):
        assert extract_plain_text([None, "stray", {"insert": "ok"}]) == "ok"

    def test_deeply_nested_json_falls_back_to_raw_text(self):
        content = "[" * 100000
        assert extract_plain_text(content) == content
