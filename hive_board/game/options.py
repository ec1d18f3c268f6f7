from __future__ import annotations

from enum import Enum


class GameOption(str, Enum):
    ALLOW_SPECIAL_ABILITY_AFTER_YOINK = "allow_special_ability_after_yoink"
    LADY_BUG = "lady_bug"
    MOSQUITO = "mosquito"
    NO_FIRST_MOVE_QUEEN = "no_first_move_queen"
    PILL_BUG = "pill_bug"

    @property
    def is_expansion(self) -> bool:
        return self in _EXPANSIONS

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def expansions(cls) -> list[GameOption]:
        return sorted((o for o in cls if o.is_expansion), key=lambda o: o.value)

    @classmethod
    def non_expansions(cls) -> list[GameOption]:
        return sorted((o for o in cls if not o.is_expansion), key=lambda o: o.value)


_EXPANSIONS = frozenset({GameOption.LADY_BUG, GameOption.MOSQUITO, GameOption.PILL_BUG})

_DISPLAY_NAMES: dict[GameOption, str] = {
    GameOption.ALLOW_SPECIAL_ABILITY_AFTER_YOINK: "Allow special ability after yoink",
    GameOption.LADY_BUG: "Lady Bug",
    GameOption.MOSQUITO: "Mosquito",
    GameOption.NO_FIRST_MOVE_QUEEN: "Disable Queen on first move",
    GameOption.PILL_BUG: "Pill Bug",
}
