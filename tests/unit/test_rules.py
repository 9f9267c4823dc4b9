import pytest

from checkers.core.primitives import Explanation
from checkers.models.enums import Color
from checkers.rules.factory import initial_layout, quickstart
from checkers.rules.rules import (
    captured_square,
    explain_move,
    is_legal_move,
    king_row,
    legal_destinations,
    piece_between,
    should_king,
)


def test_initial_layout_pattern():
    layout = initial_layout()
    light = [c for c, col in layout if col == Color.LIGHT]
    dark = [c for c, col in layout if col == Color.DARK]
    assert len(light) == 12 and len(dark) == 12
    assert {y for _, y in light} == {0, 1, 2}
    assert {y for _, y in dark} == {5, 6, 7}
    for x, y in light + dark:
        assert x % 2 == y % 2
    assert ((0, 0), Color.LIGHT) in layout
    assert ((1, 1), Color.LIGHT) in layout
    assert ((1, 5), Color.DARK) in layout
    assert ((0, 6), Color.DARK) in layout


def test_quickstart_ids_and_turn():
    b = quickstart()
    assert b.turn == Color.LIGHT
    assert b.count(Color.LIGHT) == 12 and b.count(Color.DARK) == 12
    assert b.get((0, 0)).id == "light-0"
    assert b.get((1, 5)).id == "dark-0"


def test_self_move_always_legal(board):
    for p in list(board.iter_pieces()):
        assert is_legal_move(board, p, p.pos, p.pos)
        assert explain_move(board, p, p.pos, p.pos).outcome["kind"] == "stay"


def test_occupied_destination_illegal(empty_board, put):
    me = put(empty_board, (2, 2), Color.LIGHT, king=True)
    for dst in [(3, 3), (1, 3), (3, 1), (1, 1), (2, 3), (7, 7)]:
        put(empty_board, dst, Color.DARK)
        ex = explain_move(empty_board, me, (2, 2), dst)
        assert not ex.ok
        assert ex.reason == "destination occupied"


def test_light_man_moves_forward_only(empty_board, put):
    p = put(empty_board, (2, 2), Color.LIGHT)
    assert is_legal_move(empty_board, p, (2, 2), (3, 3))
    assert is_legal_move(empty_board, p, (2, 2), (1, 3))
    assert not is_legal_move(empty_board, p, (2, 2), (2, 4))
    assert not is_legal_move(empty_board, p, (2, 2), (3, 1))
    assert not is_legal_move(empty_board, p, (2, 2), (2, 3))


def test_dark_man_moves_down_only(empty_board, put):
    p = put(empty_board, (5, 5), Color.DARK)
    assert is_legal_move(empty_board, p, (5, 5), (6, 4))
    assert is_legal_move(empty_board, p, (5, 5), (4, 4))
    assert not is_legal_move(empty_board, p, (5, 5), (6, 5))
    assert not is_legal_move(empty_board, p, (5, 5), (6, 6))


@pytest.mark.parametrize("color", [Color.LIGHT, Color.DARK])
def test_king_moves_all_four_diagonals(empty_board, put, color):
    k = put(empty_board, (3, 3), color, king=True)
    for dst in [(2, 2), (2, 4), (4, 2), (4, 4)]:
        assert is_legal_move(empty_board, k, (3, 3), dst), dst
    assert not is_legal_move(empty_board, k, (3, 3), (3, 4))


def test_jump_needs_opposite_color_midpoint(empty_board, put):
    p = put(empty_board, (2, 2), Color.LIGHT)
    ex = explain_move(empty_board, p, (2, 2), (4, 4))
    assert not ex.ok and ex.reason == "nothing to jump"

    friend = put(empty_board, (3, 3), Color.LIGHT)
    ex = explain_move(empty_board, p, (2, 2), (4, 4))
    assert not ex.ok and ex.reason == "cannot jump own piece"

    empty_board.remove(friend.pos)
    foe = put(empty_board, (3, 3), Color.DARK)
    ex: Explanation = explain_move(empty_board, p, (2, 2), (4, 4))
    assert ex.ok
    assert ex.outcome["kind"] == "capture"
    assert ex.outcome["captured_at"] == (3, 3)
    assert ex.outcome["captured_id"] == foe.id
    # the rules never take the jumped piece off the board
    assert empty_board.get((3, 3)) is foe


def test_dark_jump_backward_direction(empty_board, put):
    p = put(empty_board, (5, 5), Color.DARK)
    put(empty_board, (4, 4), Color.LIGHT)
    assert is_legal_move(empty_board, p, (5, 5), (3, 3))
    assert captured_square(empty_board, p, (5, 5), (3, 3)) == (4, 4)
    # light man cannot jump downward, even over the dark piece at (5, 5)
    q = put(empty_board, (6, 6), Color.LIGHT)
    assert not is_legal_move(empty_board, q, (6, 6), (4, 4))


def test_king_jumps_backward(empty_board, put):
    k = put(empty_board, (4, 4), Color.LIGHT, king=True)
    put(empty_board, (3, 3), Color.DARK)
    assert is_legal_move(empty_board, k, (4, 4), (2, 2))
    steps = [s["check"] for s in explain_move(empty_board, k, (4, 4), (2, 2)).steps]
    assert steps == ["destination_empty", "forward", "backward"]


def test_no_dark_square_check(empty_board, put):
    # (0, 1) to (1, 2) lands on a light square; geometry alone decides
    p = put(empty_board, (0, 1), Color.LIGHT)
    assert is_legal_move(empty_board, p, (0, 1), (1, 2))


def test_explain_reports_each_branch(empty_board, put):
    p = put(empty_board, (2, 2), Color.LIGHT)
    ex = explain_move(empty_board, p, (2, 2), (2, 5))
    assert not ex.ok
    assert [s["check"] for s in ex.steps] == ["destination_empty", "forward"]
    assert ex.reason == "not a diagonal move in this direction"


def test_explain_out_of_bounds_destination_raises(empty_board, put):
    p = put(empty_board, (7, 7), Color.LIGHT)
    with pytest.raises(IndexError):
        explain_move(empty_board, p, (7, 7), (8, 8))


def test_piece_between():
    assert piece_between((2, 2), (4, 4)) == (3, 3)
    assert piece_between((4, 4), (2, 6)) == (3, 5)
    assert piece_between((2, 2), (3, 3)) is None
    assert piece_between((2, 2), (2, 4)) is None
    assert piece_between((2, 2), (5, 5)) is None


def test_kinging_rows(empty_board, put):
    assert king_row(Color.LIGHT) == 7 and king_row(Color.DARK) == 0
    light = put(empty_board, (0, 0), Color.LIGHT)
    dark = put(empty_board, (1, 1), Color.DARK)
    assert should_king(light, 7) and not should_king(light, 0)
    assert should_king(dark, 0) and not should_king(dark, 7)
    light.crown()
    assert not should_king(light, 7)
    dark.crown()
    # dark side does not look at the king flag
    assert should_king(dark, 0)


def test_legal_destinations_from_start(board):
    assert legal_destinations(board, (0, 2)) == [(1, 3)]
    assert legal_destinations(board, (1, 5)) == [(0, 4), (2, 4)]
    assert legal_destinations(board, (0, 0)) == []
    assert legal_destinations(board, (3, 3)) == []
