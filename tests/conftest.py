# Shared fixtures: fresh boards, a private event bus per test and a
# coordinator wired to it, so tests never touch the global bus.

import logging
from collections.abc import Callable

import pytest

from checkers.config import RulesConfig
from checkers.engine.coordinator import MoveCoordinator
from checkers.events import EventBus, MoveEvent
from checkers.models.board import BoardState
from checkers.models.enums import Color
from checkers.models.piece import Piece
from checkers.rules.factory import quickstart

logger = logging.getLogger(__name__)


@pytest.fixture()
def board() -> BoardState:
    return quickstart()


@pytest.fixture()
def empty_board() -> BoardState:
    return BoardState()


@pytest.fixture()
def put() -> Callable[..., Piece]:
    """Place a fresh piece: put(board, (x, y), Color.LIGHT, king=False)."""
    counter = {"n": 0}

    def _put(b: BoardState, at, color: Color, king: bool = False) -> Piece:
        counter["n"] += 1
        p = Piece(id=f"{color.value}-t{counter['n']}", color=color, is_king=king)
        b.place(at, p)
        return p

    return _put


@pytest.fixture()
def bus() -> EventBus:
    return EventBus()


@pytest.fixture()
def events(bus: EventBus) -> list[MoveEvent]:
    seen: list[MoveEvent] = []
    bus.subscribe(MoveEvent, seen.append)
    return seen


@pytest.fixture()
def make_game(bus: EventBus) -> Callable[..., MoveCoordinator]:
    def _make(board: BoardState | None = None, config: RulesConfig | None = None) -> MoveCoordinator:
        game = MoveCoordinator(board, config, game_id="test-game", bus=bus)
        logger.debug("[tests] game %s config=%s", game.game_id, game.config)
        return game

    return _make


@pytest.fixture()
def game(make_game) -> MoveCoordinator:
    return make_game()

