from pydantic import BaseModel

from ..core.primitives import Coord
from .enums import Color


class Piece(BaseModel):
    id: str
    color: Color
    is_king: bool = False
    pos: Coord = (0, 0)

    @property
    def is_light(self) -> bool:
        return self.color == Color.LIGHT

    def crown(self) -> None:
        # King status is never revoked
        self.is_king = True
