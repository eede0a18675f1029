"""Build a StyleSheet from a plain JSON-compatible definition.

Definition shape:
    {
        "tokens": {"ColorPrimary": "#000000"},
        "variables": {"accent": "#123456"},
        "rules": [
            {"selector": ".btn", "properties": [["padding", "10px", "15px"]]}
        ]
    }

Every key is optional. Properties may also be given as a mapping
``{"padding": ["10px", "15px"], "color": "red"}``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from cssbuilder.errors import DefinitionError
from cssbuilder.model.rule import Rule
from cssbuilder.stylesheet import StyleSheet

__all__ = ["load_definition", "build_stylesheet", "parse_assignment"]


def parse_assignment(raw: str) -> tuple[str, str]:
    """Split a ``NAME=VALUE`` option into its parts."""
    name, sep, value = raw.partition("=")
    name = name.strip()
    if not sep or not name:
        raise DefinitionError(f"Expected NAME=VALUE, got {raw!r}")
    return name, value


def _expect(value: Any, kind: type, where: str) -> Any:
    if not isinstance(value, kind):
        raise DefinitionError(f"{where} must be a {kind.__name__}, got {type(value).__name__}")
    return value


def _apply_properties(rule: Rule, properties: Any, where: str) -> None:
    if isinstance(properties, dict):
        for key, values in properties.items():
            if isinstance(values, str):
                values = [values]
            _expect(values, list, f"{where}[{key!r}]")
            rule.add_property(key, *(str(v) for v in values))
        return

    _expect(properties, list, where)
    for i, entry in enumerate(properties):
        _expect(entry, list, f"{where}[{i}]")
        if not entry:
            raise DefinitionError(f"{where}[{i}] must name a property key")
        key, *values = entry
        rule.add_property(str(key), *(str(v) for v in values))


def build_stylesheet(data: Any, sheet: StyleSheet | None = None) -> StyleSheet:
    """Populate *sheet* (or a new one) from a decoded definition."""
    _expect(data, dict, "definition")
    sheet = sheet if sheet is not None else StyleSheet()

    for name, value in _expect(data.get("tokens", {}), dict, "tokens").items():
        try:
            sheet.variables.set_token(name, str(value))
        except KeyError as exc:
            raise DefinitionError(str(exc.args[0])) from None

    for name, value in _expect(data.get("variables", {}), dict, "variables").items():
        sheet.set_variable(name, str(value))

    for i, entry in enumerate(_expect(data.get("rules", []), list, "rules")):
        where = f"rules[{i}]"
        _expect(entry, dict, where)
        if "selector" not in entry:
            raise DefinitionError(f"{where} is missing 'selector'")
        rule = sheet.add_rule(str(entry["selector"]))
        _apply_properties(rule, entry.get("properties", []), f"{where}.properties")

    return sheet


def load_definition(path: str | Path) -> StyleSheet:
    """Read a JSON definition file and build a StyleSheet from it."""
    try:
        source = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DefinitionError(f"Cannot read {path}: {exc}", cause=exc) from exc
    try:
        data = json.loads(source)
    except json.JSONDecodeError as exc:
        raise DefinitionError(f"Invalid JSON in {path}: {exc}", cause=exc) from exc
    return build_stylesheet(data)
