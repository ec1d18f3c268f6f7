from __future__ import annotations

from enum import Enum

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, field_validator

from hive_board.game.view import BoardContext
from hive_board.geometry.errors import InvalidCellError
from hive_board.geometry.placement import default_staging_cell, outer_ring
from hive_board.geometry.transform import (
    from_screen_point,
    from_world_point,
    to_screen_point,
    to_world_point,
)
from hive_board.geometry.types import Cell, ScreenPoint, WorldPoint

router = APIRouter(prefix="/board", tags=["board"])

CellCoords = tuple[int, int, int]


class RenderTarget(str, Enum):
    SCREEN = "screen"
    WORLD = "world"


def _to_cells(value: list[CellCoords]) -> list[Cell]:
    cells = []
    for coords in value:
        try:
            cells.append(Cell(*coords))
        except InvalidCellError as e:
            raise ValueError(e.message)
    return cells


class StagingRequest(BaseModel):
    occupied: list[CellCoords] = []
    placeable: list[CellCoords] = []

    @field_validator("occupied", "placeable")
    @classmethod
    def check_cells(cls, value: list[CellCoords]) -> list[CellCoords]:
        _to_cells(value)
        return value


class StagingResponse(BaseModel):
    cell: CellCoords
    fallback: bool


class ProjectRequest(BaseModel):
    cells: list[CellCoords]
    target: RenderTarget = RenderTarget.SCREEN

    @field_validator("cells")
    @classmethod
    def check_cells(cls, value: list[CellCoords]) -> list[CellCoords]:
        _to_cells(value)
        return value


class ProjectResponse(BaseModel):
    points: list[list[float]]


class LocateRequest(BaseModel):
    points: list[list[float]]
    target: RenderTarget = RenderTarget.SCREEN

    @field_validator("points")
    @classmethod
    def check_dimensions(cls, value: list[list[float]]) -> list[list[float]]:
        for point in value:
            if len(point) not in (2, 3):
                raise ValueError(f"Points must have 2 or 3 components, got {len(point)}")
        return value


class LocateResponse(BaseModel):
    cells: list[CellCoords]


def _context(request: Request) -> BoardContext:
    return request.app.state.board_context


@router.post("/staging", response_model=StagingResponse)
async def staging(request_body: StagingRequest) -> StagingResponse:
    """Default staging cell for a piece lifted from hand."""
    occupied = _to_cells(request_body.occupied)
    placeable = _to_cells(request_body.placeable)
    cell = default_staging_cell(occupied, placeable)
    return StagingResponse(cell=cell.as_tuple(), fallback=not outer_ring(occupied))


@router.post("/project", response_model=ProjectResponse)
async def project(request_body: ProjectRequest, request: Request) -> ProjectResponse:
    """Convert cells to render coordinates."""
    context = _context(request)
    cells = _to_cells(request_body.cells)
    if request_body.target == RenderTarget.WORLD:
        points = [list(to_world_point(c, context.world_layout)) for c in cells]
    else:
        points = [list(to_screen_point(c, context.screen_layout)) for c in cells]
    return ProjectResponse(points=points)


@router.post("/locate", response_model=LocateResponse)
async def locate(request_body: LocateRequest, request: Request) -> LocateResponse:
    """Convert render coordinates back to cells."""
    context = _context(request)
    cells: list[Cell] = []
    expected = 3 if request_body.target == RenderTarget.WORLD else 2
    for point in request_body.points:
        if len(point) != expected:
            raise HTTPException(
                status_code=400,
                detail=f"{request_body.target.value} points need {expected} components, got {len(point)}",
            )
        if request_body.target == RenderTarget.WORLD:
            cells.append(from_world_point(WorldPoint(*point), context.world_layout))
        else:
            cells.append(from_screen_point(ScreenPoint(*point), context.screen_layout))
    return LocateResponse(cells=[c.as_tuple() for c in cells])
