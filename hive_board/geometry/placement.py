"""Default staging position for a piece lifted from a player's hand.

The staged piece floats two rings out from the hive so it never overlaps
existing pieces, at the cell with the smallest total screen distance to every
legal placement. Recomputed on every call; nothing is cached.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from hive_board.geometry.transform import (
    DEFAULT_SCREEN_LAYOUT,
    ScreenLayout,
    euclidean_distance,
    to_screen_point,
)
from hive_board.geometry.types import Cell

logger = logging.getLogger(__name__)


def hive_border(occupied: Iterable[Cell]) -> set[Cell]:
    """Return the empty cells directly bordering the occupied cells."""
    occupied = set(occupied)
    border: set[Cell] = set()
    for cell in occupied:
        border.update(cell.neighbors())
    return border - occupied


def outer_ring(occupied: Iterable[Cell]) -> list[Cell]:
    """Return the empty cells one step beyond the hive border, sorted."""
    occupied = set(occupied)
    border = hive_border(occupied)
    ring: set[Cell] = set()
    for cell in border:
        ring.update(cell.neighbors())
    return sorted(ring - border - occupied)


def fallback_staging_cell(occupied: Iterable[Cell]) -> Cell:
    """Cell two columns left of the leftmost occupied cell, vertically centred.

    Only reached when there is no outer ring, i.e. the board is empty.
    """
    min_x = min((cell.x for cell in occupied), default=0)
    x = min_x - 2
    z = (-x) // 2
    return Cell(x, -x - z, z)


def _total_distance(
    candidate: Cell, targets: list[tuple[float, float]], layout: ScreenLayout
) -> float:
    origin = to_screen_point(candidate, layout)
    return sum(euclidean_distance(origin, target) for target in targets)


def default_staging_cell(
    occupied: Iterable[Cell],
    placeable: Iterable[Cell],
    layout: ScreenLayout = DEFAULT_SCREEN_LAYOUT,
) -> Cell:
    """Pick the staging cell for a piece selected from hand.

    Never raises: an empty board falls back to fallback_staging_cell(), and
    an empty placeable set picks the first outer-ring cell.
    """
    occupied = set(occupied)
    candidates = outer_ring(occupied)
    if not candidates:
        cell = fallback_staging_cell(occupied)
        logger.debug(f"No outer ring around {len(occupied)} occupied cells, staging at {cell}")
        return cell

    targets = [to_screen_point(cell, layout) for cell in sorted(set(placeable))]

    best = candidates[0]
    best_total = _total_distance(best, targets, layout)
    for candidate in candidates[1:]:
        total = _total_distance(candidate, targets, layout)
        if total < best_total:
            best, best_total = candidate, total

    logger.debug(f"Staging at {best} (total distance {best_total:.3f} to {len(targets)} targets)")
    return best
