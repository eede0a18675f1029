"""Tests for building stylesheets from JSON definitions."""

import json

import pytest

from cssbuilder.definition import build_stylesheet, load_definition, parse_assignment
from cssbuilder.errors import DefinitionError


# ---------------------------------------------------------------------------
# build_stylesheet
# ---------------------------------------------------------------------------


class TestBuildStylesheet:
    def test_empty_definition(self):
        sheet = build_stylesheet({})
        assert len(sheet) == 0

    def test_rules_with_list_properties(self):
        sheet = build_stylesheet(
            {
                "rules": [
                    {"selector": ".btn", "properties": [["padding", "10px", "15px"]]},
                    {"selector": "#card", "properties": [["border", "1px", "solid", "#ccc"]]},
                ]
            }
        )
        css = sheet.generate()
        assert ".btn {\n    padding: 10px 15px;\n}\n#card {\n    border: 1px solid #ccc;\n}\n" in css

    def test_rules_with_mapping_properties(self):
        sheet = build_stylesheet(
            {"rules": [{"selector": "p", "properties": {"margin": ["0", "auto"], "color": "red"}}]}
        )
        assert [d.text for d in sheet.get_rule("p").declarations] == [
            "margin: 0 auto",
            "color: red",
        ]

    def test_repeated_selector_merges(self):
        sheet = build_stylesheet(
            {
                "rules": [
                    {"selector": "a", "properties": [["color", "red"]]},
                    {"selector": "a", "properties": [["color", "red"], ["color", "blue"]]},
                ]
            }
        )
        assert len(sheet) == 1
        assert len(sheet.get_rule("a").declarations) == 2

    def test_numbers_are_stringified(self):
        sheet = build_stylesheet({"rules": [{"selector": "p", "properties": [["z-index", 10]]}]})
        assert sheet.get_rule("p").has_property("z-index", "10")

    def test_tokens_and_variables(self):
        sheet = build_stylesheet(
            {"tokens": {"ColorPrimary": "#000000"}, "variables": {"accent": "#123456"}}
        )
        assert sheet.variables.color_primary == "#000000"
        assert sheet.variables.external == {"accent": "#123456"}

    def test_unknown_token(self):
        with pytest.raises(DefinitionError, match="Unknown token"):
            build_stylesheet({"tokens": {"ColorPurple": "#800080"}})

    def test_missing_selector(self):
        with pytest.raises(DefinitionError, match="missing 'selector'"):
            build_stylesheet({"rules": [{"properties": []}]})

    def test_empty_property_entry(self):
        with pytest.raises(DefinitionError, match="must name a property key"):
            build_stylesheet({"rules": [{"selector": "p", "properties": [[]]}]})

    def test_wrong_shapes(self):
        with pytest.raises(DefinitionError):
            build_stylesheet([])
        with pytest.raises(DefinitionError):
            build_stylesheet({"rules": {"selector": "p"}})
        with pytest.raises(DefinitionError):
            build_stylesheet({"rules": [{"selector": "p", "properties": "color: red"}]})


# ---------------------------------------------------------------------------
# load_definition
# ---------------------------------------------------------------------------


class TestLoadDefinition:
    def test_load_file(self, tmp_path):
        path = tmp_path / "styles.json"
        path.write_text(
            json.dumps({"rules": [{"selector": "body", "properties": [["margin", "0"]]}]}),
            encoding="utf-8",
        )
        sheet = load_definition(path)
        assert "body {\n    margin: 0;\n}\n" in sheet.generate()

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(DefinitionError, match="Invalid JSON"):
            load_definition(path)

    def test_non_utf8_file(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"rules": [{"selector": "\xff"}]}')
        with pytest.raises(DefinitionError, match="Cannot read") as excinfo:
            load_definition(path)
        assert isinstance(excinfo.value.cause, UnicodeDecodeError)

    def test_directory_instead_of_file(self, tmp_path):
        with pytest.raises(DefinitionError, match="Cannot read") as excinfo:
            load_definition(tmp_path)
        assert isinstance(excinfo.value.cause, OSError)


# ---------------------------------------------------------------------------
# parse_assignment
# ---------------------------------------------------------------------------


class TestParseAssignment:
    def test_simple(self):
        assert parse_assignment("accent=#123456") == ("accent", "#123456")

    def test_value_may_contain_equals(self):
        assert parse_assignment("x=a=b") == ("x", "a=b")

    def test_missing_separator(self):
        with pytest.raises(DefinitionError):
            parse_assignment("accent")

    def test_missing_name(self):
        with pytest.raises(DefinitionError):
            parse_assignment("=red")

    def test_value_passed_through_verbatim(self):
        assert parse_assignment(" gap =  4px ") == ("gap", "  4px ")
