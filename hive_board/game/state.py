"""Immutable snapshot of a Hive board as reported by the rules engine.

The snapshot never computes legality itself: placeable cells and available
moves are copied from the engine and only looked up here.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from hive_board.game.pieces import HivePlayer, Piece, PieceClass
from hive_board.geometry.placement import hive_border
from hive_board.geometry.types import Cell


@dataclass(frozen=True)
class Movement:
    piece: Piece
    target: Cell


def _freeze_stacks(stacks: Mapping[Cell, Iterable[Piece]]) -> Mapping[Cell, tuple[Piece, ...]]:
    # Empty stacks are dropped so occupancy is just the key set
    frozen = {cell: tuple(pieces) for cell, pieces in stacks.items()}
    return MappingProxyType({cell: pieces for cell, pieces in frozen.items() if pieces})


@dataclass(frozen=True)
class BoardSnapshot:
    stacks: Mapping[Cell, tuple[Piece, ...]] = field(default_factory=dict)
    hands: Mapping[HivePlayer, frozenset[Piece]] = field(default_factory=dict)
    placeable: Mapping[HivePlayer, frozenset[Cell]] = field(default_factory=dict)
    moves: frozenset[Movement] = frozenset()
    winner: HivePlayer | None = None
    is_draw: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "stacks", _freeze_stacks(self.stacks))
        object.__setattr__(
            self, "hands",
            MappingProxyType({p: frozenset(pieces) for p, pieces in self.hands.items()}),
        )
        object.__setattr__(
            self, "placeable",
            MappingProxyType({p: frozenset(cells) for p, cells in self.placeable.items()}),
        )
        object.__setattr__(self, "moves", frozenset(self.moves))

    # ── Board ──

    def occupied(self) -> frozenset[Cell]:
        return frozenset(self.stacks)

    def stack_at(self, cell: Cell) -> tuple[Piece, ...]:
        return self.stacks.get(cell, ())

    def position_of(self, piece: Piece) -> Cell | None:
        for cell, stack in self.stacks.items():
            if piece in stack:
                return cell
        return None

    def hive_border(self) -> set[Cell]:
        return hive_border(self.stacks)

    # ── Hands ──

    def hand(self, player: HivePlayer) -> frozenset[Piece]:
        return self.hands.get(player, frozenset())

    def pieces_in_hands(self) -> list[Piece]:
        return sorted(self.hand(HivePlayer.WHITE) | self.hand(HivePlayer.BLACK))

    def first_unplayed(self, piece_class: PieceClass, player: HivePlayer) -> Piece | None:
        """Lowest-indexed piece of `piece_class` still in `player`'s hand."""
        unplayed = [p for p in self.hand(player) if p.piece_class is piece_class]
        if not unplayed:
            return None
        return min(unplayed, key=lambda p: p.index)

    # ── Engine-supplied legality ──

    def placeable_for(self, player: HivePlayer) -> frozenset[Cell]:
        return self.placeable.get(player, frozenset())

    def has_moves(self, piece: Piece) -> bool:
        return any(m.piece == piece for m in self.moves)

    def is_legal(self, piece: Piece, target: Cell) -> bool:
        return Movement(piece, target) in self.moves

    # ── End state ──

    @property
    def is_over(self) -> bool:
        return self.is_draw or self.winner is not None

    @property
    def display_winner(self) -> str | None:
        if self.is_draw:
            return "It's a tie!"
        if self.winner is HivePlayer.BLACK:
            return "Black wins!"
        if self.winner is HivePlayer.WHITE:
            return "White wins!"
        return None

    # ── Serialization ──

    def to_dict(self) -> dict:
        return {
            "stacks": {
                str(cell): [p.notation for p in stack]
                for cell, stack in sorted(self.stacks.items())
            },
            "hands": {
                player.value: sorted(p.notation for p in pieces)
                for player, pieces in self.hands.items()
            },
            "placeable": {
                player.value: [str(c) for c in sorted(cells)]
                for player, cells in self.placeable.items()
            },
            "moves": sorted(
                ({"piece": m.piece.notation, "target": str(m.target)} for m in self.moves),
                key=lambda m: (m["piece"], m["target"]),
            ),
            "winner": self.winner.value if self.winner else None,
            "is_draw": self.is_draw,
        }

    @classmethod
    def from_dict(cls, data: dict) -> BoardSnapshot:
        """Build a snapshot from the engine's JSON view ("x,y,z" cell keys, piece notation)."""
        return cls(
            stacks={
                Cell.parse(key): tuple(_parse_piece(n) for n in notations)
                for key, notations in data.get("stacks", {}).items()
            },
            hands={
                HivePlayer(player): frozenset(_parse_piece(n) for n in notations)
                for player, notations in data.get("hands", {}).items()
            },
            placeable={
                HivePlayer(player): frozenset(Cell.parse(key) for key in keys)
                for player, keys in data.get("placeable", {}).items()
            },
            moves=frozenset(
                Movement(_parse_piece(m["piece"]), Cell.parse(m["target"]))
                for m in data.get("moves", [])
            ),
            winner=HivePlayer(data["winner"]) if data.get("winner") else None,
            is_draw=bool(data.get("is_draw", False)),
        )


def _parse_piece(notation: str) -> Piece:
    piece = Piece.parse(notation)
    if piece is None:
        raise ValueError(f"Invalid piece notation: {notation!r}")
    return piece
