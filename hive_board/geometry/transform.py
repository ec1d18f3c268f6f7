"""Conversions between cell addresses and rendering coordinates.

Two render targets share the same flat-top axial formula:

* the 2D board, with independent horizontal/vertical scale and an offset;
  locating a point truncates toward zero;
* the AR board, a flat plane at world y == 0 scaled by a single horizontal
  constant; locating a point rounds to the nearest cell because tracked
  positions carry sensor noise.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from hive_board.geometry.errors import InvalidLayoutError, InvalidPointError
from hive_board.geometry.types import Cell, ScreenPoint, WorldPoint

SQRT_3 = math.sqrt(3.0)

# Fractional coordinates this close to an integer are treated as exact
SNAP_TOLERANCE = 1e-9


def _check_scale(name: str, value: float) -> None:
    if not math.isfinite(value) or value <= 0:
        raise InvalidLayoutError(f"{name} must be a positive finite number, got {value!r}")


@dataclass(frozen=True)
class ScreenLayout:
    scale_x: float = 1.0
    scale_y: float = 1.0
    offset_x: float = 0.0
    offset_y: float = 0.0

    def __post_init__(self) -> None:
        _check_scale("scale_x", self.scale_x)
        _check_scale("scale_y", self.scale_y)
        if not (math.isfinite(self.offset_x) and math.isfinite(self.offset_y)):
            raise InvalidLayoutError("Screen offset must be finite")


@dataclass(frozen=True)
class WorldLayout:
    horizontal_scale: float = 0.05
    vertical_scale: float = 0.02

    def __post_init__(self) -> None:
        _check_scale("horizontal_scale", self.horizontal_scale)
        _check_scale("vertical_scale", self.vertical_scale)


DEFAULT_SCREEN_LAYOUT = ScreenLayout()
DEFAULT_WORLD_LAYOUT = WorldLayout()


def _axial_offsets(cell: Cell) -> tuple[float, float]:
    q = float(cell.x)
    r = float(cell.z)
    return 1.5 * q, SQRT_3 / 2.0 * q + SQRT_3 * r


def _fractional_axial(u: float, v: float) -> tuple[float, float]:
    q_f = (2.0 * u) / 3.0
    r_f = (v / SQRT_3) - (q_f / 2.0)
    return q_f, r_f


def _snap(value: float) -> float:
    nearest = round(value)
    if abs(value - nearest) <= SNAP_TOLERANCE:
        return float(nearest)
    return value


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _check_point(point: tuple[float, ...]) -> None:
    if not all(math.isfinite(c) for c in point):
        raise InvalidPointError(f"Point components must be finite, got {tuple(point)!r}")


def _check_fractional(point: tuple[float, ...], q_f: float, r_f: float) -> None:
    # Finite points can still overflow once divided by a small scale
    if not (math.isfinite(q_f) and math.isfinite(r_f)):
        raise InvalidPointError(f"Point {tuple(point)!r} is out of representable range for this layout")


def to_screen_point(cell: Cell, layout: ScreenLayout = DEFAULT_SCREEN_LAYOUT) -> ScreenPoint:
    """Centre of `cell` on the 2D board."""
    u, v = _axial_offsets(cell)
    return ScreenPoint(
        x=layout.offset_x + layout.scale_x * u,
        y=layout.offset_y + layout.scale_y * v,
    )


def from_screen_point(point: ScreenPoint, layout: ScreenLayout = DEFAULT_SCREEN_LAYOUT) -> Cell:
    """Locate the cell under a 2D board point.

    Fractional axial coordinates are truncated toward zero.
    """
    _check_point(point)
    u = (point[0] - layout.offset_x) / layout.scale_x
    v = (point[1] - layout.offset_y) / layout.scale_y
    q_f, r_f = _fractional_axial(u, v)
    _check_fractional(point, q_f, r_f)
    q = int(_snap(q_f))
    r = int(_snap(r_f))
    return Cell(q, -q - r, r)


def to_world_point(
    cell: Cell,
    layout: WorldLayout = DEFAULT_WORLD_LAYOUT,
    level: int = 0,
) -> WorldPoint:
    """Position of `cell` on the AR board plane.

    `level` lifts the point by whole pieces for stacked pieces; the board
    itself sits at level 0.
    """
    u, v = _axial_offsets(cell)
    return WorldPoint(
        x=layout.horizontal_scale * u,
        y=layout.vertical_scale * level,
        z=layout.horizontal_scale * v,
    )


def from_world_point(point: WorldPoint, layout: WorldLayout = DEFAULT_WORLD_LAYOUT) -> Cell:
    """Locate the cell nearest to an AR world point. Height is ignored."""
    _check_point(point)
    u = point[0] / layout.horizontal_scale
    v = point[2] / layout.horizontal_scale
    q_f, r_f = _fractional_axial(u, v)
    _check_fractional(point, q_f, r_f)
    q = _round_half_away(q_f)
    r = _round_half_away(r_f)
    return Cell(q, -q - r, r)


def euclidean_distance(a: tuple[float, ...], b: tuple[float, ...]) -> float:
    """Straight-line distance between two points of the same dimension."""
    if len(a) != len(b):
        raise InvalidPointError(f"Cannot measure between {len(a)}D and {len(b)}D points")
    return math.dist(a, b)
