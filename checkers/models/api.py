from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal

from pydantic import BaseModel, Field

from ..core.primitives import Coord
from .enums import Color, MoveOutcome

# ----- Input events (discriminated union) -----


class SelectAction(BaseModel):
    kind: Literal["select"] = "select"
    at: Coord


class ReleaseAction(BaseModel):
    kind: Literal["release"] = "release"
    at: Coord


Action = Annotated[SelectAction | ReleaseAction, Field(discriminator="kind")]


# ----- Output consumed by the view adapter -----


class PieceView(BaseModel):
    id: str
    color: Color
    is_king: bool = False
    pos: Coord


class BoardSnapshot(BaseModel):
    turn: Color
    pieces: list[PieceView] = Field(default_factory=list)

    def at(self, c: Coord) -> PieceView | None:
        c = tuple(c)
        return next((p for p in self.pieces if p.pos == c), None)

    def by_id(self, pid: str) -> PieceView | None:
        return next((p for p in self.pieces if p.id == pid), None)


class MoveResult(BaseModel):
    outcome: MoveOutcome
    piece_id: str | None = None
    origin: Coord | None = None
    target: Coord | None = None
    # Set only when the jumped piece was actually taken off the board
    captured: Coord | None = None
    kinged: bool = False
    reason: str | None = None
    snapshot: BoardSnapshot | None = None

    @property
    def committed(self) -> bool:
        return self.outcome == MoveOutcome.MOVED

    @property
    def rejected(self) -> bool:
        return self.outcome in (MoveOutcome.OUT_OF_BOUNDS, MoveOutcome.ILLEGAL_MOVE)


# ----- Action Log -----


class ActionLogEntry(BaseModel):
    ts: datetime = Field(default_factory=datetime.now)
    game_id: str
    turn: Color
    piece_id: str | None = None
    origin: Coord | None = None
    target: Coord | None = None
    outcome: MoveOutcome
    message: str | None = None
