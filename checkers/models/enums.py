from enum import Enum


class Color(str, Enum):
    LIGHT = "light"
    DARK = "dark"

    @property
    def opposite(self) -> "Color":
        return Color.DARK if self is Color.LIGHT else Color.LIGHT


class CoordinatorState(str, Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


class MoveOutcome(str, Enum):
    """
    What a release did to the held piece:
    - MOVED: legal move committed
    - RETURNED: released on its own cell (always legal, nothing changes)
    - OUT_OF_BOUNDS: released off the board, piece snapped back
    - ILLEGAL_MOVE: rule violation, piece snapped back
    - NO_SELECTION: nothing was held
    """

    MOVED = "moved"
    RETURNED = "returned"
    OUT_OF_BOUNDS = "out_of_bounds"
    ILLEGAL_MOVE = "illegal_move"
    NO_SELECTION = "no_selection"


class GameStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    LIGHT_WON = "light_won"
    DARK_WON = "dark_won"
