from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...models.api import MoveResult
    from ...models.board import BoardState

from ...events import EventBus, MoveEvent, event_bus


def log_release(
    game_id: str,
    board: BoardState,
    result: MoveResult,
    bus: EventBus | None = None,
) -> None:
    (bus or event_bus).emit(
        MoveEvent(
            game_id=game_id,
            turn=board.turn,
            piece_id=result.piece_id,
            origin=result.origin,
            target=result.target,
            outcome=result.outcome,
            message=result.reason,
            kinged=result.kinged,
            captured=result.captured,
            snapshot=result.snapshot,
        )
    )
