from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any
from uuid import uuid4

from pydantic import TypeAdapter

from ..config import RulesConfig
from ..core.primitives import Coord, in_bounds
from ..events import EventBus, event_bus
from ..models.api import Action, MoveResult, ReleaseAction, SelectAction
from ..models.board import BoardState
from ..models.enums import Color, CoordinatorState, GameStatus, MoveOutcome
from ..models.piece import Piece
from ..rules.factory import quickstart
from ..rules.rules import explain_move, legal_destinations
from .logging.logger import log_release
from .systems import victory
from .systems.turn import check_for_king, end_turn

logger = logging.getLogger(__name__)

_action_adapter: TypeAdapter[Action] = TypeAdapter(Action)


class MoveCoordinator:
    """Turns one select -> release interaction into a board mutation.

    The coordinator is the only writer of its ``BoardState``. It holds the
    selected piece between ``select`` and ``release``; every release ends in
    ``IDLE`` whatever the outcome, and publishes a ``MoveEvent`` carrying the
    new board snapshot.
    """

    def __init__(
        self,
        board: BoardState | None = None,
        config: RulesConfig | None = None,
        *,
        game_id: str | None = None,
        bus: EventBus | None = None,
    ) -> None:
        self.board: BoardState = board if board is not None else quickstart()
        self.config: RulesConfig = config or RulesConfig.from_env()
        self.game_id: str = game_id or uuid4().hex
        self.bus: EventBus = bus or event_bus
        self._held_id: str | None = None
        self._origin: Coord | None = None
        self._handlers: dict[type, Callable[[Any], Any]] = {
            SelectAction: lambda a: self.select(a.at),
            ReleaseAction: lambda a: self.release(a.at),
        }

    @property
    def state(self) -> CoordinatorState:
        return CoordinatorState.DRAGGING if self._held_id else CoordinatorState.IDLE

    @property
    def held(self) -> Piece | None:
        return self.board.pieces.get(self._held_id) if self._held_id else None

    @property
    def origin(self) -> Coord | None:
        return self._origin

    def _clear(self) -> None:
        self._held_id = None
        self._origin = None

    def select(self, at: Coord) -> Piece | None:
        at = tuple(at)
        # A new press always drops whatever was held
        self._clear()
        if not in_bounds(at):
            return None
        piece = self.board.get(at)
        if piece is None:
            return None
        if self.config.enforce_turn and piece.color != self.board.turn:
            logger.debug("[%s] %s is not on turn (%s)", self.game_id, piece.id, self.board.turn.value)
            return None
        self._held_id = piece.id
        self._origin = at
        return piece

    def release(self, at: Coord) -> MoveResult:
        at = tuple(at)
        piece = self.held
        if piece is None or self._origin is None:
            self._clear()
            return MoveResult(
                outcome=MoveOutcome.NO_SELECTION,
                target=at,
                reason="nothing selected",
                snapshot=self.board.snapshot(),
            )

        origin = self._origin
        captured: Coord | None = None
        reason: str | None = None
        if not in_bounds(at):
            self.board.move(origin, origin)
            outcome = MoveOutcome.OUT_OF_BOUNDS
            reason = "released off the board"
        else:
            ex = explain_move(self.board, piece, origin, at)
            if ex.ok:
                self.board.move(origin, at)
                outcome = MoveOutcome.RETURNED if at == origin else MoveOutcome.MOVED
                jumped = ex.outcome.get("captured_at")
                if jumped and self.config.remove_captured:
                    self.board.remove(jumped)
                    captured = jumped
            else:
                self.board.move(origin, origin)
                outcome = MoveOutcome.ILLEGAL_MOVE
                reason = ex.reason

        kinged = check_for_king(piece, at)
        if outcome == MoveOutcome.MOVED and self.config.alternate_turns:
            end_turn(self.board)
        self._clear()

        result = MoveResult(
            outcome=outcome,
            piece_id=piece.id,
            origin=origin,
            target=at,
            captured=captured,
            kinged=kinged,
            reason=reason,
            snapshot=self.board.snapshot(),
        )
        log_release(self.game_id, self.board, result, self.bus)
        return result

    def handle(self, action: Action | dict[str, Any]) -> Piece | MoveResult | None:
        if isinstance(action, dict):
            action = _action_adapter.validate_python(action)
        return self._handlers[type(action)](action)

    def try_move(self, src: Coord, dst: Coord) -> MoveResult:
        """Select then release in one call."""
        self.select(src)
        return self.release(dst)

    def legal_targets(self) -> list[Coord]:
        if self._origin is None:
            return []
        return legal_destinations(self.board, self._origin)

    def status(self) -> GameStatus:
        return victory.check(self.board)

    def winner(self) -> Color | None:
        return victory.winner(self.board)

    def new_game(self) -> None:
        self._clear()
        self.board = quickstart()
