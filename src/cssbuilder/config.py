from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeneratorConfig:
    required_suffix: str = ".css"
    encoding: str = "utf-8"
    indent: str = "    "  # prefix of every declaration line
