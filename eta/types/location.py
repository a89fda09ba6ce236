from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """Position of a form in its source text (1-based line and column)."""

    filename: str | None
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.filename or '<input>'}:{self.line}:{self.column}"
