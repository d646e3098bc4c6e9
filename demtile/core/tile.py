"""Tile - contract and shared bookkeeping for a raster elevation tile.

A tile is a regular grid of elevation samples over a latitude/longitude
footprint. Loaders populate it cell by cell, then terrain-intersection code
reads it:

    tile = factory.create_tile()
    tile.set_geometry(min_lat, min_lon, lat_step, lon_step, rows, columns)
    for i, j, h in samples:
        tile.set_elevation(i, j, h)
    tile.tile_update_completed()

Tile defines the public contract. AbstractTile implements everything that
does not depend on how samples are stored (geometry, running elevation
bounds, index checks, coverage test) and leaves three hooks to subclasses:
_do_set_geometry, _do_set_elevation and _do_get_elevation_at_indices.

Populating a tile is not thread-safe: the bounds update and the cell write
are not atomic, so concurrent loaders must serialize their writes. Once
finalized, a tile can be shared by any number of readers.
"""

import logging
import math
from abc import ABC, abstractmethod
from numbers import Integral

from demtile.core.errors import IndexOutOfBoundsError
from demtile.core.geometry import TileGeometry
from demtile.core.lifecycle import TileLifecycle

logger = logging.getLogger(__name__)


class Tile(ABC):
    """Interface every elevation tile provides to loaders, caches and intersection code."""

    @abstractmethod
    def set_geometry(
        self,
        min_latitude: float,
        min_longitude: float,
        latitude_step: float,
        longitude_step: float,
        latitude_rows: int,
        longitude_columns: int,
    ) -> None:
        """Set the tile global geometry (exactly once, before any elevation access).

        Args:
            min_latitude: Minimum latitude
            min_longitude: Minimum longitude
            latitude_step: Step in latitude (size of one raster element), > 0
            longitude_step: Step in longitude (size of one raster element), > 0
            latitude_rows: Number of latitude rows, > 0
            longitude_columns: Number of longitude columns, > 0

        Raises:
            InvalidGeometryError: If a step or dimension is not strictly positive.
            AllocationFailureError: If the storage cannot hold the grid.
            TileLifecycleError: If the geometry was already set.
        """
        raise NotImplementedError

    @abstractmethod
    def set_elevation(self, latitude_index: int, longitude_index: int, elevation: float) -> None:
        """Set the elevation (m) of one raster element.

        Raises:
            IndexOutOfBoundsError: If indices are outside the grid.
            TileLifecycleError: If the tile has been finalized.
        """
        raise NotImplementedError

    @abstractmethod
    def get_elevation_at_indices(self, latitude_index: int, longitude_index: int) -> float:
        """Get the elevation (m) of an exact grid point.

        Raises:
            IndexOutOfBoundsError: If indices are outside the grid.
        """
        raise NotImplementedError

    @abstractmethod
    def covers(self, latitude: float, longitude: float) -> bool:
        """Check if a ground point lies within the tile footprint."""
        raise NotImplementedError

    @abstractmethod
    def tile_update_completed(self) -> None:
        """Notify the tile that the loader has written all its samples."""
        raise NotImplementedError

    @property
    @abstractmethod
    def geometry(self) -> TileGeometry:
        raise NotImplementedError

    @property
    @abstractmethod
    def min_elevation(self) -> float:
        """Minimum elevation set so far, +inf before any sample."""
        raise NotImplementedError

    @property
    @abstractmethod
    def max_elevation(self) -> float:
        """Maximum elevation set so far, -inf before any sample."""
        raise NotImplementedError

    # Geometry accessors - plain reads of `geometry`

    @property
    def minimum_latitude(self) -> float:
        return self.geometry.min_latitude

    @property
    def minimum_longitude(self) -> float:
        return self.geometry.min_longitude

    @property
    def latitude_step(self) -> float:
        return self.geometry.latitude_step

    @property
    def longitude_step(self) -> float:
        return self.geometry.longitude_step

    @property
    def latitude_rows(self) -> int:
        return self.geometry.latitude_rows

    @property
    def longitude_columns(self) -> int:
        return self.geometry.longitude_columns


class AbstractTile(Tile):
    """Partial Tile implementation shared by all storage strategies.

    Subclasses only allocate and access cells. Every index they receive
    has already been checked against the grid.
    """

    def __init__(self) -> None:
        """Create an empty tile (no geometry, no samples)."""
        self._geometry = TileGeometry.empty()
        self._min_elevation = math.inf
        self._max_elevation = -math.inf
        self._lifecycle = TileLifecycle()

    @property
    def geometry(self) -> TileGeometry:
        return self._geometry

    @property
    def min_elevation(self) -> float:
        return self._min_elevation

    @property
    def max_elevation(self) -> float:
        return self._max_elevation

    @property
    def lifecycle(self) -> TileLifecycle:
        """Lifecycle state machine (read it, don't drive it)."""
        return self._lifecycle

    @property
    def is_finalized(self) -> bool:
        return self._lifecycle.is_finalized

    def set_geometry(
        self,
        min_latitude: float,
        min_longitude: float,
        latitude_step: float,
        longitude_step: float,
        latitude_rows: int,
        longitude_columns: int,
    ) -> None:
        if self._lifecycle.is_configured:
            # Let the state machine produce the error with the current state name
            self._lifecycle.advance("configure_geometry")

        self._geometry = TileGeometry(
            min_latitude=min_latitude,
            min_longitude=min_longitude,
            latitude_step=latitude_step,
            longitude_step=longitude_step,
            latitude_rows=latitude_rows,
            longitude_columns=longitude_columns,
        )
        self._min_elevation = math.inf
        self._max_elevation = -math.inf
        try:
            self._do_set_geometry(
                min_latitude, min_longitude, latitude_step, longitude_step, latitude_rows, longitude_columns
            )
        except Exception:
            self._geometry = TileGeometry.empty()
            raise

        self._lifecycle.advance("configure_geometry")
        logger.debug(f"Tile geometry set: {self._geometry!r}")

    @abstractmethod
    def _do_set_geometry(
        self,
        min_latitude: float,
        min_longitude: float,
        latitude_step: float,
        longitude_step: float,
        latitude_rows: int,
        longitude_columns: int,
    ) -> None:
        """Storage-specific geometry setup, called once by set_geometry().

        Implementations validate the geometry (InvalidGeometryError) and
        allocate the grid (AllocationFailureError).
        """
        raise NotImplementedError

    def tile_update_completed(self) -> None:
        already_finalized = self._lifecycle.is_finalized
        self._lifecycle.advance("complete_update")
        if not already_finalized:
            self._do_tile_update_completed()

    def _do_tile_update_completed(self) -> None:
        """Post-load finalization hook, run on the first notification only. No-op by default."""

    def set_elevation(self, latitude_index: int, longitude_index: int, elevation: float) -> None:
        self._check_indices(latitude_index, longitude_index)
        if not self._lifecycle.is_populating:
            self._lifecycle.advance("store_elevation")
        # NaN marks a no-data cell: stored, but not part of the bounds
        if not math.isnan(elevation):
            self._min_elevation = min(self._min_elevation, elevation)
            self._max_elevation = max(self._max_elevation, elevation)
        self._do_set_elevation(latitude_index, longitude_index, elevation)

    @abstractmethod
    def _do_set_elevation(self, latitude_index: int, longitude_index: int, elevation: float) -> None:
        """Write one cell; indices are already checked."""
        raise NotImplementedError

    def get_elevation_at_indices(self, latitude_index: int, longitude_index: int) -> float:
        self._check_indices(latitude_index, longitude_index)
        return self._do_get_elevation_at_indices(latitude_index, longitude_index)

    @abstractmethod
    def _do_get_elevation_at_indices(self, latitude_index: int, longitude_index: int) -> float:
        """Read one cell; indices are already checked."""
        raise NotImplementedError

    def get_latitude_index(self, latitude: float) -> int:
        """Row containing a latitude (may be outside [0, rows)).

        Raises:
            OverflowError: If the row is too far away to be represented (see covers()).
        """
        return math.floor(self._latitude_offset(latitude))

    def get_longitude_index(self, longitude: float) -> int:
        """Column containing a longitude (may be outside [0, columns))."""
        return math.floor(self._longitude_offset(longitude))

    def _latitude_offset(self, latitude: float) -> float:
        """Distance from the tile origin in rows, possibly fractional or infinite."""
        return (latitude - self._geometry.min_latitude) / self._geometry.latitude_step

    def _longitude_offset(self, longitude: float) -> float:
        return (longitude - self._geometry.min_longitude) / self._geometry.longitude_step

    def covers(self, latitude: float, longitude: float) -> bool:
        # An unconfigured tile has zero steps and no footprint
        if not self._lifecycle.is_configured:
            return False
        latitude_offset = self._latitude_offset(latitude)
        longitude_offset = self._longitude_offset(longitude)
        # NaN input, a tiny step or an overflowing difference: no cell can hold the point
        if not (math.isfinite(latitude_offset) and math.isfinite(longitude_offset)):
            return False
        latitude_index = math.floor(latitude_offset)
        longitude_index = math.floor(longitude_offset)
        return (
            0 <= latitude_index < self._geometry.latitude_rows
            and 0 <= longitude_index < self._geometry.longitude_columns
        )

    def _check_indices(self, latitude_index: int, longitude_index: int) -> None:
        """Raise IndexOutOfBoundsError unless both indices are inside the grid.

        Raises:
            TypeError: If an index is not an integer (1.5 would otherwise pass the range check).
        """
        for index in (latitude_index, longitude_index):
            if not isinstance(index, Integral):
                raise TypeError(f"Tile indices must be integers, got {index!r} ({type(index).__name__})")
        rows = self._geometry.latitude_rows
        columns = self._geometry.longitude_columns
        if latitude_index < 0 or latitude_index >= rows or longitude_index < 0 or longitude_index >= columns:
            raise IndexOutOfBoundsError(
                latitude_index=latitude_index,
                longitude_index=longitude_index,
                max_latitude_index=rows - 1,
                max_longitude_index=columns - 1,
            )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._geometry!r}, state={self._lifecycle.get_state_name()}, "
            f"elev=[{self._min_elevation}, {self._max_elevation}])"
        )
