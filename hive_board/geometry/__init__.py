from __future__ import annotations

from hive_board.geometry.errors import (
    GeometryError,
    InvalidCellError,
    InvalidLayoutError,
    InvalidPointError,
)
from hive_board.geometry.placement import (
    default_staging_cell,
    fallback_staging_cell,
    hive_border,
    outer_ring,
)
from hive_board.geometry.transform import (
    ScreenLayout,
    WorldLayout,
    euclidean_distance,
    from_screen_point,
    from_world_point,
    to_screen_point,
    to_world_point,
)
from hive_board.geometry.types import ORIGIN, Cell, ScreenPoint, WorldPoint

__all__ = [
    "Cell",
    "ORIGIN",
    "ScreenPoint",
    "WorldPoint",
    "ScreenLayout",
    "WorldLayout",
    "to_screen_point",
    "from_screen_point",
    "to_world_point",
    "from_world_point",
    "euclidean_distance",
    "hive_border",
    "outer_ring",
    "default_staging_cell",
    "fallback_staging_cell",
    "GeometryError",
    "InvalidCellError",
    "InvalidPointError",
    "InvalidLayoutError",
]
