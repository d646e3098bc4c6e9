"""DEM Tile - raster elevation tiles for terrain-intersection and geolocation.

A tile is a regularly sampled grid of ground elevations over a bounded
latitude/longitude footprint. This package owns tile geometry, running
elevation bounds, index validation and the point coverage test; loaders,
caches and interpolation are built on top of it.

Modules:
    core: Tile contract, shared base, NumPy storage, factories, errors
    constants: Storage configuration

Example:
    from demtile import ArrayTileFactory

    tile = ArrayTileFactory().create_tile()
    tile.set_geometry(0.0, 0.0, 1.0, 1.0, 3, 3)
    tile.set_elevation(1, 1, 50.0)
    tile.tile_update_completed()
"""

from demtile.core import (
    AbstractTile,
    AllocationFailureError,
    ArrayTile,
    ArrayTileFactory,
    IndexOutOfBoundsError,
    InvalidGeometryError,
    Tile,
    TileError,
    TileFactory,
    TileGeometry,
    TileLifecycle,
    TileLifecycleError,
)

__all__ = [
    "Tile",
    "AbstractTile",
    "ArrayTile",
    "TileFactory",
    "ArrayTileFactory",
    "TileGeometry",
    "TileLifecycle",
    "TileError",
    "InvalidGeometryError",
    "IndexOutOfBoundsError",
    "AllocationFailureError",
    "TileLifecycleError",
]
