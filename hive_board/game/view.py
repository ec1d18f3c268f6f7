"""Board view state for one viewer of a match.

Holds the piece currently being staged or dragged and publishes every change
to registered listeners. Legality is looked up in the engine snapshot, never
computed here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from hive_board.config import Settings
from hive_board.game.pieces import HivePlayer, Piece, PieceClass
from hive_board.game.state import BoardSnapshot, Movement
from hive_board.geometry.placement import default_staging_cell
from hive_board.geometry.transform import (
    ScreenLayout,
    WorldLayout,
    from_screen_point,
    to_screen_point,
    to_world_point,
)
from hive_board.geometry.types import ORIGIN, Cell, ScreenPoint, WorldPoint

logger = logging.getLogger(__name__)


# --- Viewer modes ---
@dataclass(frozen=True)
class PlayerMode:
    player: HivePlayer


@dataclass(frozen=True)
class SpectatorMode:
    pass


ViewerMode = PlayerMode | SpectatorMode


# --- Context ---
@dataclass(frozen=True)
class BoardContext:
    """Render configuration shared by every view state of one client."""

    screen_layout: ScreenLayout = field(default_factory=ScreenLayout)
    world_layout: WorldLayout = field(default_factory=WorldLayout)

    @classmethod
    def from_settings(cls, settings: Settings) -> BoardContext:
        return cls(
            screen_layout=ScreenLayout(
                scale_x=settings.screen_scale_x,
                scale_y=settings.screen_scale_y,
                offset_x=settings.screen_offset_x,
                offset_y=settings.screen_offset_y,
            ),
            world_layout=WorldLayout(
                horizontal_scale=settings.ar_horizontal_scale,
                vertical_scale=settings.ar_vertical_scale,
            ),
        )


# --- Events ---
class ViewEventKind(str, Enum):
    SELECTION_CHANGED = "selection_changed"
    ANIMATE_TO = "animate_to"
    SNAPSHOT_UPDATED = "snapshot_updated"
    INFORMATION = "information"


@dataclass(frozen=True)
class ViewEvent:
    kind: ViewEventKind
    cell: Cell | None = None
    piece_class: PieceClass | None = None


@dataclass(frozen=True)
class SelectedPiece:
    piece: Piece
    cell: Cell


Listener = Callable[[ViewEvent], None]


class BoardViewState:
    """Selection and staging state for one viewer."""

    def __init__(
        self,
        snapshot: BoardSnapshot,
        mode: ViewerMode,
        context: BoardContext | None = None,
    ) -> None:
        self.snapshot = snapshot
        self.mode = mode
        self.context = context or BoardContext()
        self.selected: SelectedPiece | None = None
        self.deselected: SelectedPiece | None = None
        self._listeners: list[Listener] = []

    # ── Listeners ──

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener. Returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, event: ViewEvent) -> None:
        for listener in list(self._listeners):
            listener(event)

    # ── Mode ──

    @property
    def playing_as(self) -> HivePlayer | None:
        match self.mode:
            case PlayerMode(player=player):
                return player
            case SpectatorMode():
                return None

    @property
    def can_interact(self) -> bool:
        return self.playing_as is not None and not self.snapshot.is_over

    # ── Selection ──

    def _set_selected(self, selected: SelectedPiece | None) -> None:
        self.deselected = self.selected
        self.selected = selected
        self._publish(ViewEvent(ViewEventKind.SELECTION_CHANGED, cell=selected.cell if selected else None))

    def clear_selection(self) -> None:
        self._set_selected(None)

    def select_from_hand(self, player: HivePlayer, piece_class: PieceClass) -> Cell | None:
        """Stage a piece from `player`'s hand, or show information about it.

        Returns the staging cell, or None if nothing was staged.
        """
        if self.snapshot.is_over:
            return None
        match self.mode:
            case PlayerMode(player=me) if me == player:
                piece = self.snapshot.first_unplayed(piece_class, me)
                if piece is None:
                    return None
                cell = default_staging_cell(
                    self.snapshot.occupied(),
                    self.snapshot.placeable_for(me),
                )
                self._set_selected(SelectedPiece(piece, cell))
                self._publish(ViewEvent(ViewEventKind.ANIMATE_TO, cell=cell))
                return cell
            case _:
                self._publish(ViewEvent(ViewEventKind.INFORMATION, piece_class=piece_class))
                return None

    def snap_piece(self, piece: Piece, cell: Cell | None) -> bool:
        """Hover `piece` over `cell` while it is being dragged.

        No legality check; a None cell drops the selection.
        """
        if not self.can_interact:
            return False
        if cell is None:
            self.clear_selection()
            return True
        self._set_selected(SelectedPiece(piece, cell))
        return True

    def move_piece(self, piece: Piece, cell: Cell) -> Movement | None:
        """Select `piece` at `cell` if the engine lists that move as legal.

        Returns the movement awaiting confirmation, or None with the
        selection unchanged.
        """
        if not self.can_interact:
            return None
        movement = Movement(piece, cell)
        if movement not in self.snapshot.moves:
            logger.debug(f"Did not find {piece} to {cell} in available moves")
            return None
        self._set_selected(SelectedPiece(piece, cell))
        return movement

    def drop_piece(self, piece: Piece, point: ScreenPoint) -> Movement | None:
        """Drop `piece` at a 2D board point."""
        cell = from_screen_point(point, self.context.screen_layout)
        return self.move_piece(piece, cell)

    def update_snapshot(self, snapshot: BoardSnapshot) -> None:
        """Replace the board snapshot. Any selection is dropped."""
        self.snapshot = snapshot
        if self.selected is not None:
            self._set_selected(None)
        self._publish(ViewEvent(ViewEventKind.SNAPSHOT_UPDATED))

    # ── Positions ──

    def position_of(self, piece: Piece) -> Cell:
        """Staged cell if selected, else board cell, else the origin."""
        if self.selected is not None and self.selected.piece == piece:
            return self.selected.cell
        return self.snapshot.position_of(piece) or ORIGIN

    def position_in_stack(self, piece: Piece) -> tuple[int, int]:
        """Return (1-based index of `piece` in its stack, stack height).

        Accounts for a selected piece hovering on top of a stack or being
        lifted off one.
        """
        cell = self.position_of(piece)
        stack = self.snapshot.stack_at(cell)
        if not stack:
            return (1, 1)

        in_stack = on_stack = from_stack = False
        if self.selected is not None:
            in_stack = self.selected.piece in stack
            on_stack = not in_stack and self.selected.cell == cell
            from_stack = in_stack and self.selected.cell != cell

        count = len(stack) + (1 if on_stack else (-1 if from_stack else 0))
        if piece in stack:
            return (stack.index(piece) + 1, count)
        return (count, count)

    def screen_point_of(self, piece: Piece) -> ScreenPoint:
        return to_screen_point(self.position_of(piece), self.context.screen_layout)

    def world_point_of(self, piece: Piece) -> WorldPoint:
        index, _count = self.position_in_stack(piece)
        return to_world_point(self.position_of(piece), self.context.world_layout, level=index - 1)
