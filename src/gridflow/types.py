"""Shared type definitions for gridflow.

Enums used across parsers, IR, layout, and renderers.
"""

from __future__ import annotations

from enum import Enum, auto


class Direction(Enum):
    """Flow orientation of a diagram."""

    LR = auto()
    TD = auto()

    @classmethod
    def default(cls) -> Direction:
        return cls.LR

    @classmethod
    def from_str(cls, value: str) -> Direction:
        """Parse an orientation keyword ('LR', 'TD' or its alias 'TB')."""
        key = value.strip().upper()
        if key == "LR":
            return cls.LR
        if key in ("TD", "TB"):
            return cls.TD
        raise ValueError(f"Unknown direction '{value}'; use LR or TD")
