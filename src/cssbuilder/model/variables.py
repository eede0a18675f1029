"""Variable set: design tokens emitted as CSS custom properties in ``:root``."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["VARIABLE_SCHEMA", "VariableSet", "get_variable"]


# (css name, field name). Order here is the emission order.
VARIABLE_SCHEMA: tuple[tuple[str, str], ...] = (
    # Font sizes
    ("FontSizeNormal", "font_size_normal"),
    ("FontSizeSmall", "font_size_small"),
    # Colors
    ("ColorPrimary", "color_primary"),
    ("ColorSecondary", "color_secondary"),
    ("ColorTertiary", "color_tertiary"),
    ("ColorQuaternary", "color_quaternary"),
    ("ColorGray", "color_gray"),
    ("ColorSelection", "color_selection"),
    ("ColorHover", "color_hover"),
    ("ColorSuccess", "color_success"),
    ("ColorError", "color_error"),
    # Layout sizes
    ("MenuSize", "menu_size"),
    ("ContentHeight", "content_height"),
    ("ContentWidth", "content_width"),
    # Timing
    ("TransitionWait", "transition_wait"),
)

_FIELD_BY_TOKEN = {css_name: attr for css_name, attr in VARIABLE_SCHEMA}


def get_variable(name: str) -> str:
    """Return the ``var(...)`` reference for *name*.

    The name is passed through as given; include the ``--`` prefix yourself
    (``get_variable("--ColorPrimary")`` -> ``var(--ColorPrimary)``).
    """
    return "var(" + name + ")"


@dataclass
class VariableSet:
    """Schema tokens plus caller-added external variables."""

    font_size_normal: str = "1.1rem"
    font_size_small: str = ".6rem"
    color_primary: str = "#ffffff"
    color_secondary: str = "#3f88bf"
    color_tertiary: str = "#c2c1c1"
    color_quaternary: str = "#000000"
    color_gray: str = "#e9e9e9"
    color_selection: str = "#ff9300"
    color_hover: str = "#ff95008e"
    color_success: str = "#aadaff7c"
    color_error: str = "#f20707"
    menu_size: str = "6vh"
    content_height: str = "94vh"
    content_width: str = "100vw"
    transition_wait: str = "0s"
    external: dict[str, str] = field(default_factory=dict)

    # --- mutation -------------------------------------------------------------

    def set_variable(self, name: str, value: str) -> None:
        """Add or overwrite an external variable.

        Overwriting keeps the variable's original position in the output.
        """
        self.external[name] = value

    def set_token(self, name: str, value: str) -> None:
        """Set a schema token by its CSS name, e.g. ``"ColorPrimary"``."""
        try:
            attr = _FIELD_BY_TOKEN[name]
        except KeyError:
            raise KeyError(f"Unknown token: {name!r}") from None
        setattr(self, attr, value)

    def get_token(self, name: str) -> str:
        try:
            attr = _FIELD_BY_TOKEN[name]
        except KeyError:
            raise KeyError(f"Unknown token: {name!r}") from None
        return getattr(self, attr)

    @staticmethod
    def get_variable(name: str) -> str:
        return get_variable(name)

    # --- rendering ------------------------------------------------------------

    def items(self) -> list[tuple[str, str]]:
        """Return every ``(name, value)`` pair in emission order."""
        pairs = [(css_name, getattr(self, attr)) for css_name, attr in VARIABLE_SCHEMA]
        pairs.extend(self.external.items())
        return pairs

    def render_root(self, indent: str = "    ") -> str:
        """Render the ``:root`` block: schema tokens first, then externals."""
        parts = [":root {\n"]
        for name, value in self.items():
            parts.append(f"{indent}--{name}: {value};\n")
        parts.append("}\n")
        return "".join(parts)
