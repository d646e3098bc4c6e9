"""Shared pytest fixtures for demtile tests.

Provides DictTile (a dict-backed AbstractTile test double) and ready-made
tiles. The standard 3x3 tile uses unit steps from the origin so indices
and coordinates coincide:

    latitude  0.0 -> 3.0 (rows 0..2)
    longitude 0.0 -> 3.0 (columns 0..2)
"""

import pytest

from demtile.core.array_tile import ArrayTile
from demtile.core.geometry import TileGeometry
from demtile.core.tile import AbstractTile


# =============================================================================
# DICT TILE
# =============================================================================


class DictTile(AbstractTile):
    """Minimal storage strategy keeping cells in a dict.

    Records every index pair the base class hands to the storage hooks,
    so tests can check that only validated indices reach storage.
    """

    def __init__(self) -> None:
        super().__init__()
        self.cells: dict[tuple[int, int], float] = {}
        self.storage_accesses: list[tuple[int, int]] = []
        self.geometry_calls = 0
        self.completed_calls = 0

    def _do_set_geometry(
        self,
        min_latitude: float,
        min_longitude: float,
        latitude_step: float,
        longitude_step: float,
        latitude_rows: int,
        longitude_columns: int,
    ) -> None:
        self.geometry_calls += 1
        TileGeometry(
            min_latitude, min_longitude, latitude_step, longitude_step, latitude_rows, longitude_columns
        ).validate()

    def _do_set_elevation(self, latitude_index: int, longitude_index: int, elevation: float) -> None:
        self.storage_accesses.append((latitude_index, longitude_index))
        self.cells[(latitude_index, longitude_index)] = elevation

    def _do_get_elevation_at_indices(self, latitude_index: int, longitude_index: int) -> float:
        self.storage_accesses.append((latitude_index, longitude_index))
        return self.cells[(latitude_index, longitude_index)]

    def _do_tile_update_completed(self) -> None:
        self.completed_calls += 1


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def dict_tile() -> DictTile:
    """Unconfigured DictTile."""
    return DictTile()


@pytest.fixture
def dict_tile_3x3() -> DictTile:
    """DictTile with unit-step 3x3 geometry at the origin, no samples."""
    tile = DictTile()
    tile.set_geometry(0.0, 0.0, 1.0, 1.0, 3, 3)
    return tile


@pytest.fixture
def array_tile_3x3() -> ArrayTile:
    """ArrayTile with unit-step 3x3 geometry at the origin, no samples."""
    tile = ArrayTile()
    tile.set_geometry(0.0, 0.0, 1.0, 1.0, 3, 3)
    return tile


@pytest.fixture
def populated_tile_3x3(array_tile_3x3: ArrayTile) -> ArrayTile:
    """3x3 ArrayTile with (0,0)=10, (1,1)=50, (2,2)=5 - other cells unset."""
    array_tile_3x3.set_elevation(0, 0, 10.0)
    array_tile_3x3.set_elevation(1, 1, 50.0)
    array_tile_3x3.set_elevation(2, 2, 5.0)
    return array_tile_3x3
