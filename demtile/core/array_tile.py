"""ArrayTile - elevation tile stored in an in-memory NumPy array.

Row i holds latitude min_latitude + i * latitude_step, column j holds
longitude min_longitude + j * longitude_step. Cells the loader never
writes keep TileConfig.UNSET_ELEVATION (NaN).
"""

import logging
from typing import Optional

import numpy as np

from demtile.constants import TileConfig
from demtile.core.errors import AllocationFailureError
from demtile.core.geometry import TileGeometry
from demtile.core.tile import AbstractTile

logger = logging.getLogger(__name__)


class ArrayTile(AbstractTile):
    """Tile backed by a (latitude_rows, longitude_columns) float64 array.

    Example:
        tile = ArrayTile()
        tile.set_geometry(0.0, 0.0, 1.0, 1.0, 3, 3)
        tile.set_elevation(1, 1, 50.0)
        tile.tile_update_completed()
        tile.get_elevation_at_indices(1, 1)  # 50.0
    """

    # float64 holds every Python float exactly, so reads return what was written
    DTYPE = np.dtype(np.float64)

    def __init__(self, max_cells: int = TileConfig.MAX_CELLS) -> None:
        """Create an empty tile.

        Args:
            max_cells: Largest grid this tile agrees to allocate
        """
        super().__init__()
        self._max_cells = max_cells
        self._elevations: Optional[np.ndarray] = None

    @property
    def elevations(self) -> Optional[np.ndarray]:
        """Read-only view of the elevation grid, None before geometry is set."""
        if self._elevations is None:
            return None
        view = self._elevations.view()
        view.flags.writeable = False
        return view

    def _do_set_geometry(
        self,
        min_latitude: float,
        min_longitude: float,
        latitude_step: float,
        longitude_step: float,
        latitude_rows: int,
        longitude_columns: int,
    ) -> None:
        geometry = TileGeometry(
            min_latitude=min_latitude,
            min_longitude=min_longitude,
            latitude_step=latitude_step,
            longitude_step=longitude_step,
            latitude_rows=latitude_rows,
            longitude_columns=longitude_columns,
        )
        geometry.validate()

        shape = geometry.shape
        cells = shape[0] * shape[1]
        if cells > self._max_cells:
            raise AllocationFailureError(shape=shape, reason=f"{cells} cells exceeds limit of {self._max_cells}")
        try:
            self._elevations = np.full(shape, TileConfig.UNSET_ELEVATION, dtype=self.DTYPE)
        except (MemoryError, ValueError) as e:
            raise AllocationFailureError(shape=shape, reason=str(e)) from e

        logger.debug(f"Allocated {shape[0]}x{shape[1]} {self.DTYPE} elevation grid ({self._elevations.nbytes} bytes)")

    def _do_set_elevation(self, latitude_index: int, longitude_index: int, elevation: float) -> None:
        self._elevations[latitude_index, longitude_index] = elevation

    def _do_get_elevation_at_indices(self, latitude_index: int, longitude_index: int) -> float:
        return float(self._elevations[latitude_index, longitude_index])

    def _do_tile_update_completed(self) -> None:
        """Freeze the grid and report cells the loader left unset."""
        self._elevations.flags.writeable = False

        unset = int(np.count_nonzero(np.isnan(self._elevations)))
        if unset > 0:
            logger.warning(f"Tile finalized with {unset}/{self._elevations.size} unset cells: {self.geometry!r}")
        logger.info(
            f"Tile finalized: {self.geometry!r}, elevation range [{self.min_elevation}, {self.max_elevation}] m"
        )
