from __future__ import annotations
from typing import List, Optional, Tuple
from checkers.core.primitives import BOARD_SIZE, Coord
from checkers.models.board import BoardState
from checkers.models.enums import Color
from checkers.models.piece import Piece

LIGHT_ROWS = range(0, 3)
DARK_ROWS = range(BOARD_SIZE - 3, BOARD_SIZE)


def initial_layout() -> List[Tuple[Coord, Color]]:
    """Standard 12-per-side start: even rows from column 0, odd rows from column 1."""
    out: List[Tuple[Coord, Color]] = []
    for rows, color in ((LIGHT_ROWS, Color.LIGHT), (DARK_ROWS, Color.DARK)):
        for y in rows:
            for x in range(y % 2, BOARD_SIZE, 2):
                out.append(((x, y), color))
    return out


def quickstart(layout: Optional[List[Tuple[Coord, Color]]] = None) -> BoardState:
    """Create an initial board; pass a custom layout to override."""
    board = BoardState()
    seq = {Color.LIGHT: 0, Color.DARK: 0}
    for pos, color in initial_layout() if layout is None else layout:
        board.place(pos, Piece(id=f"{color.value}-{seq[color]}", color=color, pos=pos))
        seq[color] += 1
    return board
