from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from hive_board.config import Settings
from hive_board.game.pieces import HivePlayer, Piece, PieceClass
from hive_board.game.state import BoardSnapshot, Movement
from hive_board.geometry.types import Cell


@pytest.fixture
def test_settings():
    """Settings with a scaled 2D board so layouts are exercised."""
    return Settings(
        screen_scale_x=64.0,
        screen_scale_y=64.0,
        screen_offset_x=512.0,
        screen_offset_y=384.0,
        _env_file=None,
    )


@pytest.fixture
async def app(test_settings):
    """Create a test FastAPI application with test settings."""
    from hive_board.main import create_app

    return create_app(test_settings)


@pytest.fixture
async def client(app):
    """Create a test HTTP client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def opening_snapshot() -> BoardSnapshot:
    """White queen at the origin, black ant beside it, white to move."""
    white_queen = Piece(HivePlayer.WHITE, PieceClass.QUEEN)
    black_ant = Piece(HivePlayer.BLACK, PieceClass.ANT, 1)
    white_ants = [Piece(HivePlayer.WHITE, PieceClass.ANT, i) for i in (1, 2, 3)]
    placeable = {Cell(-1, 1, 0), Cell(0, 1, -1), Cell(-1, 0, 1)}
    return BoardSnapshot(
        stacks={
            Cell(0, 0, 0): (white_queen,),
            Cell(1, -1, 0): (black_ant,),
        },
        hands={
            HivePlayer.WHITE: frozenset(white_ants),
            HivePlayer.BLACK: frozenset({Piece(HivePlayer.BLACK, PieceClass.QUEEN)}),
        },
        placeable={HivePlayer.WHITE: frozenset(placeable)},
        moves=frozenset(
            {Movement(ant, cell) for ant in white_ants for cell in placeable}
            | {Movement(white_queen, Cell(0, 1, -1)), Movement(white_queen, Cell(1, 0, -1))}
        ),
    )
