from __future__ import annotations

from hive_board.game.options import GameOption
from hive_board.game.pieces import HivePlayer, Piece, PieceClass
from hive_board.game.state import BoardSnapshot, Movement
from hive_board.game.view import (
    BoardContext,
    BoardViewState,
    PlayerMode,
    SelectedPiece,
    SpectatorMode,
    ViewerMode,
    ViewEvent,
    ViewEventKind,
)

__all__ = [
    "GameOption",
    "HivePlayer",
    "Piece",
    "PieceClass",
    "BoardSnapshot",
    "Movement",
    "BoardContext",
    "BoardViewState",
    "PlayerMode",
    "SpectatorMode",
    "ViewerMode",
    "SelectedPiece",
    "ViewEvent",
    "ViewEventKind",
]
