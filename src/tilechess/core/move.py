"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from tilechess.core.enums import MoveType
from tilechess.core.types import Coord, cell_name


@dataclass(frozen=True, slots=True)
class Move:
    """A reachable destination ``(x, y)`` and how it is reached."""

    x: int
    y: int
    move_type: MoveType = MoveType.MOVE

    def __str__(self) -> str:
        suffix = "x" if self.move_type == MoveType.CAPTURE else ""
        return f"{suffix}{cell_name(self.x, self.y)}"

    @property
    def destination(self) -> Coord:
        return self.x, self.y

    @property
    def is_capture(self) -> bool:
        return self.move_type == MoveType.CAPTURE
