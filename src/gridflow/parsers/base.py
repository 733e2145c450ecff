"""Base parser protocol."""

from __future__ import annotations

from typing import Protocol

from gridflow.syntax.types import Diagram


class Parser(Protocol):
    """Protocol that all diagram parsers must implement."""

    def parse(self, src: str) -> Diagram:
        """Parse source text into a Diagram."""
        ...
