"""Checkers move rules and board setup.

Everything here is read-only over ``BoardState``; mutation belongs to
``checkers.engine.coordinator``.
"""

from .factory import initial_layout, quickstart
from .rules import (
    captured_square,
    explain_move,
    is_legal_move,
    king_row,
    legal_destinations,
    piece_between,
    should_king,
)

__all__ = [
    "initial_layout",
    "quickstart",
    "captured_square",
    "explain_move",
    "is_legal_move",
    "king_row",
    "legal_destinations",
    "piece_between",
    "should_king",
]
