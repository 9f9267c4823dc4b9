from __future__ import annotations
from typing import Any, Dict, List, Optional
from checkers.core.primitives import BOARD_SIZE, Coord, Explanation
from checkers.models.board import BoardState
from checkers.models.enums import Color
from checkers.models.piece import Piece


_NOT_DIAGONAL = 'not a diagonal move in this direction'


def king_row(c: Color) -> int: return BOARD_SIZE - 1 if c == Color.LIGHT else 0


def piece_between(src: Coord, dst: Coord) -> Optional[Coord]:
    """Midpoint cell of a two-step diagonal, None for any other geometry."""
    (x1, y1), (x2, y2) = src, dst
    if abs(x2 - x1) != 2 or abs(y2 - y1) != 2: return None
    return ((x1 + x2) // 2, (y1 + y2) // 2)


def _jump_ok(board: BoardState, piece: Piece, src: Coord, dst: Coord) -> tuple[bool, Dict[str, Any]]:
    mid = piece_between(src, dst)
    victim = board.get(mid) if mid else None
    if victim is None: return False, {'reason': 'nothing to jump'}
    if victim.color == piece.color: return False, {'reason': 'cannot jump own piece'}
    return True, {'kind': 'capture', 'captured_at': mid, 'captured_id': victim.id}


def _branch(board: BoardState, piece: Piece, src: Coord, dst: Coord, sign: int) -> tuple[bool, Dict[str, Any]]:
    dx = abs(src[0] - dst[0]); dy = dst[1] - src[1]
    if dx == 1 and dy == sign: return True, {'kind': 'step'}
    if dx == 2 and dy == 2 * sign: return _jump_ok(board, piece, src, dst)
    return False, {'reason': _NOT_DIAGONAL}


def explain_move(board: BoardState, piece: Piece, src: Coord, dst: Coord) -> Explanation:
    """Decide whether ``piece`` may go from ``src`` to ``dst``.

    Rules, in order:
      1. releasing on the origin cell is always legal;
      2. an occupied destination is illegal;
      3. light pieces and kings may step to ``dy == +1`` or jump to ``dy == +2``;
      4. dark pieces and kings may step to ``dy == -1`` or jump to ``dy == -2``.
    A jump needs an opposite-color piece on the midpoint. The jumped piece is
    left on the board; removing it is the caller's decision. Destination
    square color is not checked.
    """
    steps: List[Dict[str, Any]] = []
    src = tuple(src); dst = tuple(dst)
    if src == dst:
        steps.append({'check': 'same_cell', 'ok': True})
        return Explanation(ok=True, steps=steps, outcome={'kind': 'stay'})
    occupied = board.get(dst) is not None
    steps.append({'check': 'destination_empty', 'ok': not occupied})
    if occupied: return Explanation(ok=False, steps=steps, outcome={'reason': 'destination occupied'})

    reason: Optional[str] = None
    # A king runs through both branches
    for name, applies, sign in (
        ('forward', piece.color == Color.LIGHT or piece.is_king, 1),
        ('backward', piece.color == Color.DARK or piece.is_king, -1),
    ):
        if not applies: continue
        ok, info = _branch(board, piece, src, dst, sign)
        steps.append({'check': name, 'ok': ok, 'info': info})
        if ok: return Explanation(ok=True, steps=steps, outcome=info)
        r = info.get('reason')
        if reason is None or r != _NOT_DIAGONAL: reason = r
    return Explanation(ok=False, steps=steps, outcome={'reason': reason or _NOT_DIAGONAL})


def is_legal_move(board: BoardState, piece: Piece, src: Coord, dst: Coord) -> bool:
    return explain_move(board, piece, src, dst).ok


def captured_square(board: BoardState, piece: Piece, src: Coord, dst: Coord) -> Optional[Coord]:
    ex = explain_move(board, piece, src, dst)
    return ex.outcome.get('captured_at') if ex.ok else None


def should_king(piece: Piece, row: int) -> bool:
    # Dark skips the is_king test; harmless since crowning is idempotent
    if piece.color == Color.LIGHT: return not piece.is_king and row == king_row(Color.LIGHT)
    return row == king_row(Color.DARK)


def legal_destinations(board: BoardState, src: Coord) -> List[Coord]:
    piece = board.get(src)
    if piece is None: return []
    out: List[Coord] = []
    for y in range(BOARD_SIZE):
        for x in range(BOARD_SIZE):
            if (x, y) != tuple(src) and is_legal_move(board, piece, src, (x, y)):
                out.append((x, y))
    return out
