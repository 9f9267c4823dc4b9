from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...models.board import BoardState

from ...models.enums import Color, GameStatus


def check(board: BoardState) -> GameStatus:
    # Only decisive once captured pieces are actually removed
    light = board.count(Color.LIGHT)
    dark = board.count(Color.DARK)
    if light and not dark:
        return GameStatus.LIGHT_WON
    if dark and not light:
        return GameStatus.DARK_WON
    return GameStatus.IN_PROGRESS


def winner(board: BoardState) -> Color | None:
    return {
        GameStatus.LIGHT_WON: Color.LIGHT,
        GameStatus.DARK_WON: Color.DARK,
    }.get(check(board))
