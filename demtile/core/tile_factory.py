"""Tile factories - how loaders and caches obtain empty tiles.

Code that fills tiles depends on a TileFactory instead of a concrete
storage class, so the storage strategy is picked in one place.
"""

from abc import ABC, abstractmethod

from demtile.constants import TileConfig
from demtile.core.array_tile import ArrayTile
from demtile.core.tile import Tile


class TileFactory(ABC):
    """Creates empty tiles, ready for set_geometry()."""

    @abstractmethod
    def create_tile(self) -> Tile:
        raise NotImplementedError


class ArrayTileFactory(TileFactory):
    """Factory for NumPy-backed ArrayTile instances.

    Example:
        factory = ArrayTileFactory(max_cells=3601 * 3601)
        tile = factory.create_tile()
    """

    def __init__(self, max_cells: int = TileConfig.MAX_CELLS) -> None:
        self.max_cells = max_cells

    def create_tile(self) -> ArrayTile:
        return ArrayTile(max_cells=self.max_cells)

    def __repr__(self) -> str:
        return f"ArrayTileFactory(max_cells={self.max_cells})"
