"""Core tile classes: contract, shared base, NumPy storage and factories.

This module provides:
- Tile / AbstractTile: Tile contract and storage-independent bookkeeping
- ArrayTile: In-memory NumPy storage
- TileFactory / ArrayTileFactory: Creation of empty tiles
- TileGeometry: Origin, spacing and dimensions of a tile grid
- TileLifecycle: Empty -> GeometryConfigured -> Populating -> Finalized
- Error hierarchy rooted at TileError
"""

from demtile.core.array_tile import ArrayTile
from demtile.core.errors import (
    AllocationFailureError,
    IndexOutOfBoundsError,
    InvalidGeometryError,
    TileError,
    TileLifecycleError,
)
from demtile.core.geometry import TileGeometry
from demtile.core.lifecycle import TileLifecycle
from demtile.core.tile import AbstractTile, Tile
from demtile.core.tile_factory import ArrayTileFactory, TileFactory

__all__ = [
    # Contract and base
    "Tile",
    "AbstractTile",
    "TileGeometry",
    "TileLifecycle",
    # Storage
    "ArrayTile",
    "TileFactory",
    "ArrayTileFactory",
    # Errors
    "TileError",
    "InvalidGeometryError",
    "IndexOutOfBoundsError",
    "AllocationFailureError",
    "TileLifecycleError",
]
