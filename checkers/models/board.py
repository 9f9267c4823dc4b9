from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, Field

from ..core.primitives import BOARD_SIZE, Coord, ensure_in_bounds, in_bounds
from .api import BoardSnapshot, PieceView
from .enums import Color
from .piece import Piece


def _empty_grid() -> list[list[str | None]]:
    return [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]


class BoardState(BaseModel):
    """Authoritative 8x8 grid of piece ids plus the arena of pieces they point to.

    Cells hold piece ids (``grid[y][x]``); the ``Piece`` records live in
    ``pieces`` and carry their own ``pos``, which always matches the cell.
    Placing onto an occupied cell overwrites it; callers check occupancy first.
    """

    grid: list[list[str | None]] = Field(default_factory=_empty_grid)
    pieces: dict[str, Piece] = Field(default_factory=dict)
    turn: Color = Color.LIGHT

    def in_bounds(self, c: Coord) -> bool:
        return in_bounds(c)

    def get(self, c: Coord) -> Piece | None:
        x, y = ensure_in_bounds(c)
        pid = self.grid[y][x]
        return self.pieces[pid] if pid is not None else None

    def place(self, c: Coord, piece: Piece) -> None:
        x, y = ensure_in_bounds(c)
        if piece.id in self.pieces:
            ox, oy = self.pieces[piece.id].pos
            if self.grid[oy][ox] == piece.id:
                self.grid[oy][ox] = None
        displaced = self.grid[y][x]
        if displaced is not None and displaced != piece.id:
            self.pieces.pop(displaced, None)
        self.grid[y][x] = piece.id
        self.pieces[piece.id] = piece
        piece.pos = (x, y)

    def remove(self, c: Coord) -> Piece | None:
        x, y = ensure_in_bounds(c)
        pid = self.grid[y][x]
        if pid is None:
            return None
        self.grid[y][x] = None
        return self.pieces.pop(pid)

    def move(self, src: Coord, dst: Coord) -> Piece:
        sx, sy = ensure_in_bounds(src)
        dx, dy = ensure_in_bounds(dst)
        pid = self.grid[sy][sx]
        if pid is None:
            raise ValueError(f"no piece at {src!r}")
        piece = self.pieces[pid]
        if (sx, sy) == (dx, dy):
            return piece
        displaced = self.grid[dy][dx]
        if displaced is not None:
            self.pieces.pop(displaced, None)
        self.grid[sy][sx] = None
        self.grid[dy][dx] = pid
        piece.pos = (dx, dy)
        return piece

    def occupied(self, c: Coord) -> bool:
        return self.get(c) is not None

    def iter_pieces(self) -> Iterator[Piece]:
        """Pieces in row-major cell order (y, then x)."""
        for row in self.grid:
            for pid in row:
                if pid is not None:
                    yield self.pieces[pid]

    def pieces_of(self, color: Color) -> list[Piece]:
        return [p for p in self.iter_pieces() if p.color == color]

    def count(self, color: Color) -> int:
        return len(self.pieces_of(color))

    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot(
            turn=self.turn,
            pieces=[
                PieceView(id=p.id, color=p.color, is_king=p.is_king, pos=p.pos)
                for p in self.iter_pieces()
            ],
        )
