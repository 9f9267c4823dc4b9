from __future__ import annotations
from typing import Any, Dict, List
from pydantic import BaseModel, Field

Coord = tuple[int, int]  # (x, y)

BOARD_SIZE = 8


class OutOfBounds(IndexError):
    """Raised when a coordinate falls outside the 8x8 grid."""

    def __init__(self, coord: Coord) -> None:
        super().__init__(f"coordinate {coord!r} is outside the board")
        self.coord = coord


def in_bounds(c: Coord) -> bool:
    x, y = c
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


def ensure_in_bounds(c: Coord) -> Coord:
    if not in_bounds(c):
        raise OutOfBounds(c)
    return c


class Explanation(BaseModel):
    """Detailed reasoning for the adapter (which rule decided, and why)."""
    ok: bool
    steps: List[Dict[str, Any]] = Field(default_factory=list)
    outcome: Dict[str, Any] = Field(default_factory=dict)

    @property
    def reason(self) -> str | None:
        return self.outcome.get("reason")
