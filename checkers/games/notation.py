from __future__ import annotations

from typing import List, Optional

from checkers.core.primitives import BOARD_SIZE
from checkers.models.api import BoardSnapshot
from checkers.models.board import BoardState
from checkers.models.enums import Color
from checkers.models.piece import Piece

_LETTER = {Color.LIGHT: "l", Color.DARK: "d"}
_COLOR = {v: k for k, v in _LETTER.items()}


def to_notation_from_rows(
    rows: List[List[Optional[str]]],  # row 7 first; columns 0..7 inner; pieces like "l","D", None
    turn: str,  # "l" | "d"
) -> str:
    ranks = []
    for row in rows:
        empty = 0
        parts = []
        for sq in row:
            if not sq:
                empty += 1
            else:
                if empty:
                    parts.append(str(empty)); empty = 0
                parts.append(sq)
        if empty:
            parts.append(str(empty))
        ranks.append("".join(parts))
    return f"{'/'.join(ranks)} {turn}"


def to_notation(snap: BoardSnapshot) -> str:
    """Compact text form of a snapshot: rows 7..0, men l/d, kings L/D, then side to move."""
    rows: List[List[Optional[str]]] = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
    for p in snap.pieces:
        x, y = p.pos
        letter = _LETTER[p.color]
        rows[BOARD_SIZE - 1 - y][x] = letter.upper() if p.is_king else letter
    return to_notation_from_rows(rows, _LETTER[snap.turn])


def from_notation(text: str) -> BoardState:
    """Build a board from ``to_notation`` output; ids are numbered per color in row-major order."""
    try:
        placement, turn = text.split()
    except ValueError:
        raise ValueError(f"expected '<rows> <turn>', got {text!r}") from None
    if turn not in _COLOR:
        raise ValueError(f"unknown side to move: {turn!r}")
    rows = placement.split("/")
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"expected {BOARD_SIZE} rows, got {len(rows)}")

    cells: dict[tuple[int, int], tuple[Color, bool]] = {}
    for i, row in enumerate(rows):
        y = BOARD_SIZE - 1 - i
        x = 0
        for ch in row:
            if ch.isdigit():
                x += int(ch)
            elif ch.lower() in _COLOR:
                if x >= BOARD_SIZE:
                    raise ValueError(f"row {y} is too long: {row!r}")
                cells[(x, y)] = (_COLOR[ch.lower()], ch.isupper())
                x += 1
            else:
                raise ValueError(f"unknown piece letter {ch!r}")
        if x != BOARD_SIZE:
            raise ValueError(f"row {y} covers {x} cells: {row!r}")

    board = BoardState(turn=_COLOR[turn])
    seq = {Color.LIGHT: 0, Color.DARK: 0}
    for (x, y), (color, king) in sorted(cells.items(), key=lambda kv: (kv[0][1], kv[0][0])):
        board.place((x, y), Piece(id=f"{color.value}-{seq[color]}", color=color, is_king=king))
        seq[color] += 1
    return board
