from __future__ import annotations

import logging
import os

from pydantic import BaseModel


def _flag(name: str, default: bool = False) -> bool:
    return os.getenv(name, "true" if default else "false").lower() == "true"


class RulesConfig(BaseModel):
    """Toggles for the corrected rules; all off reproduces the permissive board."""

    # select() refuses pieces whose color is not board.turn
    enforce_turn: bool = False
    # a committed jump takes the jumped piece off the board
    remove_captured: bool = False
    # a committed move hands the turn to the other side
    alternate_turns: bool = False

    @classmethod
    def from_env(cls) -> RulesConfig:
        return cls(
            enforce_turn=_flag("CHECKERS_ENFORCE_TURN"),
            remove_captured=_flag("CHECKERS_REMOVE_CAPTURED"),
            alternate_turns=_flag("CHECKERS_ALTERNATE_TURNS"),
        )

    @classmethod
    def strict(cls) -> RulesConfig:
        return cls(enforce_turn=True, remove_captured=True, alternate_turns=True)


LOG_LEVEL = os.getenv("CHECKERS_LOG_LEVEL", "INFO").upper()


def configure_logging(level: str | int | None = None) -> None:
    logging.basicConfig(
        level=level or LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
