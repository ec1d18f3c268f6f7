"""Tests for the axial-hex coordinate transform."""

from __future__ import annotations

import math

import pytest

from hive_board.geometry.errors import InvalidLayoutError, InvalidPointError
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

SQRT_3 = math.sqrt(3.0)


def _cells_within(radius: int) -> list[Cell]:
    return [
        Cell(x, -x - z, z)
        for x in range(-radius, radius + 1)
        for z in range(-radius, radius + 1)
        if abs(-x - z) <= radius
    ]


def _screen_point_for(q_f: float, r_f: float, layout: ScreenLayout) -> ScreenPoint:
    """Inverse of the fractional axial formula, for building test points."""
    return ScreenPoint(
        layout.offset_x + layout.scale_x * 1.5 * q_f,
        layout.offset_y + layout.scale_y * SQRT_3 * (r_f + q_f / 2),
    )


class TestToScreenPoint:
    def test_origin_maps_to_offset(self) -> None:
        layout = ScreenLayout(offset_x=10.0, offset_y=-4.0)
        assert to_screen_point(ORIGIN, layout) == ScreenPoint(10.0, -4.0)

    def test_unit_scale(self) -> None:
        point = to_screen_point(Cell(1, -1, 0))
        assert point.x == pytest.approx(1.5)
        assert point.y == pytest.approx(SQRT_3 / 2)

    def test_r_axis(self) -> None:
        point = to_screen_point(Cell(0, -1, 1))
        assert point.x == pytest.approx(0.0)
        assert point.y == pytest.approx(SQRT_3)

    def test_scale_and_offset(self) -> None:
        layout = ScreenLayout(scale_x=2.0, scale_y=3.0, offset_x=100.0, offset_y=50.0)
        point = to_screen_point(Cell(2, -3, 1), layout)
        assert point.x == pytest.approx(100.0 + 2.0 * 3.0)
        assert point.y == pytest.approx(50.0 + 3.0 * (SQRT_3 + SQRT_3))


class TestFromScreenPoint:
    @pytest.mark.parametrize(
        "layout",
        [
            ScreenLayout(),
            ScreenLayout(scale_x=64.0, scale_y=64.0, offset_x=512.0, offset_y=384.0),
            ScreenLayout(scale_x=0.5, scale_y=2.0, offset_x=-7.0, offset_y=3.0),
        ],
    )
    def test_round_trip_on_grid_points(self, layout: ScreenLayout) -> None:
        for cell in _cells_within(4):
            assert from_screen_point(to_screen_point(cell, layout), layout) == cell

    def test_truncates_toward_zero_positive(self) -> None:
        layout = ScreenLayout()
        assert from_screen_point(_screen_point_for(1.7, 2.4, layout), layout) == Cell(1, -3, 2)

    def test_truncates_toward_zero_negative(self) -> None:
        layout = ScreenLayout()
        assert from_screen_point(_screen_point_for(-1.7, -0.6, layout), layout) == Cell(-1, 1, 0)

    def test_output_is_zero_sum(self) -> None:
        layout = ScreenLayout(scale_x=3.0, scale_y=5.0)
        for px in (-40.3, -1.2, 0.0, 7.7, 31.9):
            for py in (-28.1, -0.4, 0.0, 2.2, 19.5):
                cell = from_screen_point(ScreenPoint(px, py), layout)
                assert cell.x + cell.y + cell.z == 0

    def test_non_finite_point_rejected(self) -> None:
        with pytest.raises(InvalidPointError):
            from_screen_point(ScreenPoint(math.nan, 0.0))
        with pytest.raises(InvalidPointError):
            from_screen_point(ScreenPoint(0.0, math.inf))

    def test_overflowing_point_rejected(self) -> None:
        with pytest.raises(InvalidPointError, match="representable"):
            from_screen_point(ScreenPoint(1.5e308, 0.0), ScreenLayout(scale_x=0.5))
        with pytest.raises(InvalidPointError):
            from_screen_point(ScreenPoint(0.0, -1.7e308), ScreenLayout(scale_y=0.25))


class TestWorldTransform:
    def test_flat_board(self) -> None:
        for cell in _cells_within(3):
            assert to_world_point(cell).y == 0.0

    def test_default_horizontal_scale(self) -> None:
        point = to_world_point(Cell(2, -2, 0))
        assert point.x == pytest.approx(0.05 * 3.0)
        assert point.z == pytest.approx(0.05 * SQRT_3)

    def test_level_lifts_by_vertical_scale(self) -> None:
        point = to_world_point(ORIGIN, WorldLayout(vertical_scale=0.02), level=3)
        assert point.y == pytest.approx(0.06)

    @pytest.mark.parametrize("layout", [WorldLayout(), WorldLayout(horizontal_scale=0.13)])
    def test_round_trip_all_cells(self, layout: WorldLayout) -> None:
        for cell in _cells_within(6):
            assert from_world_point(to_world_point(cell, layout), layout) == cell

    def test_rounds_noisy_points_to_nearest(self) -> None:
        layout = WorldLayout()
        cell = Cell(2, -3, 1)
        exact = to_world_point(cell, layout)
        noisy = WorldPoint(exact.x + 0.004, 0.013, exact.z - 0.006)
        assert from_world_point(noisy, layout) == cell

    def test_height_ignored(self) -> None:
        exact = to_world_point(Cell(-1, 2, -1))
        lifted = WorldPoint(exact.x, 0.5, exact.z)
        assert from_world_point(lifted) == Cell(-1, 2, -1)

    def test_output_is_zero_sum(self) -> None:
        for wx in (-0.37, -0.02, 0.0, 0.11, 0.29):
            for wz in (-0.41, -0.05, 0.0, 0.08, 0.33):
                cell = from_world_point(WorldPoint(wx, 0.0, wz))
                assert cell.x + cell.y + cell.z == 0

    def test_overflowing_point_rejected(self) -> None:
        with pytest.raises(InvalidPointError, match="representable"):
            from_world_point(WorldPoint(1e307, 0.0, 0.0))
        with pytest.raises(InvalidPointError):
            from_world_point(WorldPoint(0.0, 0.0, -1e307))

    def test_large_finite_point_located(self) -> None:
        cell = from_world_point(WorldPoint(1e300, 0.0, 0.0))
        assert cell.x + cell.y + cell.z == 0
        assert cell.x > 0


class TestLayoutValidation:
    @pytest.mark.parametrize("scale", [0.0, -1.0, math.inf, math.nan])
    def test_bad_screen_scale(self, scale: float) -> None:
        with pytest.raises(InvalidLayoutError):
            ScreenLayout(scale_x=scale)

    def test_bad_screen_offset(self) -> None:
        with pytest.raises(InvalidLayoutError):
            ScreenLayout(offset_y=math.nan)

    def test_bad_world_scale(self) -> None:
        with pytest.raises(InvalidLayoutError):
            WorldLayout(horizontal_scale=0.0)


class TestEuclideanDistance:
    def test_known_distance(self) -> None:
        assert euclidean_distance(ScreenPoint(0.0, 0.0), ScreenPoint(3.0, 4.0)) == 5.0

    def test_world_points(self) -> None:
        assert euclidean_distance(WorldPoint(1.0, 2.0, 2.0), WorldPoint(0.0, 0.0, 0.0)) == 3.0

    def test_symmetric(self) -> None:
        points = [to_screen_point(c, ScreenLayout(scale_x=1.3, offset_x=2.1)) for c in _cells_within(2)]
        for a in points:
            for b in points:
                assert euclidean_distance(a, b) == euclidean_distance(b, a)

    def test_zero_for_same_point(self) -> None:
        point = ScreenPoint(-4.2, 9.1)
        assert euclidean_distance(point, point) == 0.0

    def test_dimension_mismatch_rejected(self) -> None:
        with pytest.raises(InvalidPointError):
            euclidean_distance(ScreenPoint(0.0, 0.0), WorldPoint(0.0, 0.0, 0.0))
