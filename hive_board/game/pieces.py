"""Hive pieces, their notation and sprite names."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from hive_board.geometry.types import Cell

PIECE_SPRITE_PREFIX = "Piece-"
CELL_SPRITE_PREFIX = "Position-"

_NOTATION = re.compile(r"^([wb])(?:(Q)|([ABGLMPS])([1-9]\d*))$")


class HivePlayer(str, Enum):
    WHITE = "white"
    BLACK = "black"

    @property
    def opponent(self) -> HivePlayer:
        return HivePlayer.BLACK if self is HivePlayer.WHITE else HivePlayer.WHITE

    @property
    def notation(self) -> str:
        return self.value[0]


class PieceClass(str, Enum):
    ANT = "ant"
    BEETLE = "beetle"
    HOPPER = "hopper"
    LADY_BUG = "lady_bug"
    MOSQUITO = "mosquito"
    PILL_BUG = "pill_bug"
    QUEEN = "queen"
    SPIDER = "spider"

    @property
    def notation(self) -> str:
        return _CLASS_NOTATION[self]

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()

    @property
    def display_name_plural(self) -> str:
        if self is PieceClass.MOSQUITO:
            return "Mosquitoes"
        return f"{self.display_name}s"

    @classmethod
    def from_name(cls, name: str) -> PieceClass | None:
        """Look up a class by display name ("Lady Bug"). None if unknown."""
        for piece_class in cls:
            if piece_class.display_name == name:
                return piece_class
        return None

    @classmethod
    def from_notation(cls, letter: str) -> PieceClass | None:
        for piece_class, notation in _CLASS_NOTATION.items():
            if notation == letter:
                return piece_class
        return None


_CLASS_NOTATION: dict[PieceClass, str] = {
    PieceClass.ANT: "A",
    PieceClass.BEETLE: "B",
    PieceClass.HOPPER: "G",  # grasshopper
    PieceClass.LADY_BUG: "L",
    PieceClass.MOSQUITO: "M",
    PieceClass.PILL_BUG: "P",
    PieceClass.QUEEN: "Q",
    PieceClass.SPIDER: "S",
}


@dataclass(frozen=True, order=True)
class Piece:
    owner: HivePlayer
    piece_class: PieceClass
    index: int = 1

    @property
    def notation(self) -> str:
        base = f"{self.owner.notation}{self.piece_class.notation}"
        if self.piece_class is PieceClass.QUEEN:
            return base
        return f"{base}{self.index}"

    @classmethod
    def parse(cls, notation: str) -> Piece | None:
        """Parse notation such as "wA1" or "bQ". None if malformed."""
        match = _NOTATION.match(notation)
        if match is None:
            return None
        owner = HivePlayer.WHITE if match.group(1) == "w" else HivePlayer.BLACK
        if match.group(2):
            return cls(owner, PieceClass.QUEEN)
        return cls(owner, PieceClass.from_notation(match.group(3)), int(match.group(4)))

    def __str__(self) -> str:
        return self.notation


def piece_sprite_name(piece: Piece) -> str:
    return f"{PIECE_SPRITE_PREFIX}{piece.notation}"


def cell_sprite_name(cell: Cell) -> str:
    return f"{CELL_SPRITE_PREFIX}{cell}"


def piece_from_sprite_name(name: str | None) -> Piece | None:
    """Recover the piece a sprite was named after. None for non-piece sprites."""
    if not name or not name.startswith(PIECE_SPRITE_PREFIX):
        return None
    return Piece.parse(name[len(PIECE_SPRITE_PREFIX):])


def cell_from_sprite_name(name: str | None) -> Cell | None:
    if not name or not name.startswith(CELL_SPRITE_PREFIX):
        return None
    return Cell.parse(name[len(CELL_SPRITE_PREFIX):])
