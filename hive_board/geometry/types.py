"""Value types for the hex board.

Cells use cube coordinates: three integers (x, y, z) summing to zero. The
x and z components double as the axial (q, r) pair.

                 _____
           +y   /     \\   -z
               /       \\
         ,----(  0,1,-1 )----.
        /      \\       /      \\
       /        \\_____/        \\
       \\ -1,1,0 /     \\ 1,0,-1 /
        \\      /       \\      /
   -x    )----(  0,0,0  )----(    +x
        /      \\       /      \\
       /        \\_____/        \\
       \\ -1,0,1 /     \\ 1,-1,0 /
        \\      /       \\      /
         `----(  0,-1,1 )----'
               \\       /
           +z   \\_____/   -y
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from hive_board.geometry.errors import InvalidCellError

# Cube offsets of the 6 neighbours, clockwise from "north"
HEX_DIRECTIONS: list[tuple[int, int, int]] = [
    (0, 1, -1), (1, 0, -1), (1, -1, 0),
    (0, -1, 1), (-1, 0, 1), (-1, 1, 0),
]


@dataclass(frozen=True, order=True)
class Cell:
    """Address of one hex cell. Ordered lexicographically by (x, y, z)."""

    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        for value in (self.x, self.y, self.z):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidCellError(
                    f"Cell coordinates must be integers, got {(self.x, self.y, self.z)!r}",
                    (self.x, self.y, self.z),
                )
        if self.x + self.y + self.z != 0:
            raise InvalidCellError(
                f"Cell ({self.x}, {self.y}, {self.z}) does not sum to zero",
                (self.x, self.y, self.z),
            )

    @classmethod
    def from_axial(cls, q: int, r: int) -> Cell:
        return cls(q, -q - r, r)

    @classmethod
    def parse(cls, text: str) -> Cell:
        """Parse the "x,y,z" form produced by str(cell)."""
        parts = text.split(",")
        if len(parts) != 3:
            raise InvalidCellError(f"Expected 'x,y,z', got {text!r}")
        try:
            x, y, z = (int(p) for p in parts)
        except ValueError:
            raise InvalidCellError(f"Expected 'x,y,z', got {text!r}")
        return cls(x, y, z)

    @property
    def q(self) -> int:
        return self.x

    @property
    def r(self) -> int:
        return self.z

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.x, self.y, self.z)

    def neighbors(self) -> list[Cell]:
        """Return the 6 cells adjacent to this one."""
        return [Cell(self.x + dx, self.y + dy, self.z + dz) for dx, dy, dz in HEX_DIRECTIONS]

    def adjacent_to(self, other: Cell) -> bool:
        delta = (other.x - self.x, other.y - self.y, other.z - self.z)
        return delta in HEX_DIRECTIONS

    def __str__(self) -> str:
        return f"{self.x},{self.y},{self.z}"


ORIGIN = Cell(0, 0, 0)


class ScreenPoint(NamedTuple):
    x: float
    y: float


class WorldPoint(NamedTuple):
    x: float
    y: float  # vertical axis
    z: float
