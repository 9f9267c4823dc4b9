from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar, cast

if TYPE_CHECKING:
    from collections.abc import Callable

    from checkers.core.primitives import Coord
    from checkers.models.api import BoardSnapshot
    from checkers.models.enums import Color, MoveOutcome


@dataclass
class MoveEvent:
    game_id: str
    turn: Color
    piece_id: str | None
    origin: Coord | None
    target: Coord | None
    outcome: MoveOutcome
    message: str | None = None
    kinged: bool = False
    captured: Coord | None = None
    snapshot: BoardSnapshot | None = None


T = TypeVar("T")


class EventBus:
    def __init__(self) -> None:
        self._subs: dict[type[Any], list[object]] = {}

    def subscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        lst = self._subs.setdefault(event_type, [])
        lst.append(cast("object", handler))

    def unsubscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        lst = self._subs.get(event_type, [])
        if handler in lst:
            lst.remove(handler)

    def emit(self, event: Any) -> None:
        et = type(event)
        for h in list(self._subs.get(et, [])):
            # Let exceptions propagate; callers decide how to handle them
            cast("Callable[[Any], None]", h)(event)


# Global bus instance
event_bus = EventBus()
