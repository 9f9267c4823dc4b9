from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...models.board import BoardState
    from ...models.piece import Piece

from ...core.primitives import Coord, in_bounds
from ...models.enums import Color
from ...rules.rules import should_king


def check_for_king(piece: Piece, release_at: Coord) -> bool:
    """Crown ``piece`` when the release cell sits on its king row.

    Uses the release coordinate rather than the cell the piece ended on, so a
    rejected release on the back row still crowns. Releases off the board
    never crown. Returns True only when the piece was promoted just now.
    """
    if not in_bounds(release_at):
        return False
    was_king = piece.is_king
    if should_king(piece, release_at[1]):
        piece.crown()
    return piece.is_king and not was_king


def end_turn(board: BoardState) -> Color:
    board.turn = board.turn.opposite
    return board.turn
