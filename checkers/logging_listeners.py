from __future__ import annotations

import logging

from . import storage
from .events import EventBus, MoveEvent, event_bus
from .models.api import ActionLogEntry
from .models.enums import MoveOutcome

logger = logging.getLogger(__name__)


def _on_move_event(ev: MoveEvent) -> None:
    # Convert event to ActionLogEntry JSON for the per-game log
    entry = ActionLogEntry(
        game_id=ev.game_id,
        turn=ev.turn,
        piece_id=ev.piece_id,
        origin=ev.origin,
        target=ev.target,
        outcome=ev.outcome,
        message=ev.message,
    )
    storage.logs.append(ev.game_id, entry.model_dump_json())


def _log_move_event(ev: MoveEvent) -> None:
    if ev.outcome == MoveOutcome.MOVED:
        logger.info(
            "[%s] %s %s -> %s%s%s",
            ev.game_id,
            ev.piece_id,
            ev.origin,
            ev.target,
            f" captured {ev.captured}" if ev.captured else "",
            " (kinged)" if ev.kinged else "",
        )
    else:
        logger.debug(
            "[%s] %s %s at %s: %s",
            ev.game_id,
            ev.piece_id,
            ev.outcome.value,
            ev.target,
            ev.message,
        )


def register_listeners(bus: EventBus | None = None) -> None:
    bus = bus or event_bus
    bus.subscribe(MoveEvent, _on_move_event)
    bus.subscribe(MoveEvent, _log_move_event)
