"""Checkers board and move rules.

The board is an 8x8 grid of piece ids backed by an arena of ``Piece``
records. ``rules`` decides legality without touching the board;
``engine.coordinator.MoveCoordinator`` drives one select -> release
interaction, mutates the board and publishes a snapshot on the event bus
for whatever renders it.

Quick start::

    from checkers import MoveCoordinator

    game = MoveCoordinator()
    game.select((0, 2))
    result = game.release((1, 3))
    result.outcome        # MoveOutcome.MOVED
    result.snapshot.at((1, 3)).color
"""

from .config import RulesConfig
from .core.primitives import Coord, Explanation, OutOfBounds
from .engine.coordinator import MoveCoordinator
from .models.api import BoardSnapshot, MoveResult, PieceView
from .models.board import BoardState
from .models.enums import Color, CoordinatorState, GameStatus, MoveOutcome
from .models.piece import Piece
from .rules import initial_layout, is_legal_move, piece_between, quickstart

__version__ = "0.1.0"

__all__ = [
    "RulesConfig",
    "Coord",
    "Explanation",
    "OutOfBounds",
    "MoveCoordinator",
    "BoardSnapshot",
    "MoveResult",
    "PieceView",
    "BoardState",
    "Color",
    "CoordinatorState",
    "GameStatus",
    "MoveOutcome",
    "Piece",
    "initial_layout",
    "is_legal_move",
    "piece_between",
    "quickstart",
]
