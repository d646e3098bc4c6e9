"""TileGeometry - the regular sampling grid of one elevation tile.

A tile covers the half-open footprint
    [min_latitude, min_latitude + latitude_rows * latitude_step)
  x [min_longitude, min_longitude + longitude_columns * longitude_step)

Angles are in whatever unit the collaborators agree on (radians or degrees);
the tile never converts them.
"""

import math
from dataclasses import dataclass
from numbers import Integral, Real

from demtile.core.errors import InvalidGeometryError


@dataclass(frozen=True)
class TileGeometry:
    """Origin, spacing and dimensions of a tile grid.

    Attributes:
        min_latitude: Latitude of the lower corner
        min_longitude: Longitude of the lower corner
        latitude_step: Spacing between rows (size of one raster element)
        longitude_step: Spacing between columns (size of one raster element)
        latitude_rows: Number of latitude rows
        longitude_columns: Number of longitude columns

    Example:
        geometry = TileGeometry(0.0, 0.0, 1.0, 1.0, 3, 3)
        geometry.validate()
    """

    min_latitude: float
    min_longitude: float
    latitude_step: float
    longitude_step: float
    latitude_rows: int
    longitude_columns: int

    @staticmethod
    def empty() -> "TileGeometry":
        """Geometry of a tile that has not been configured yet."""
        return TileGeometry(
            min_latitude=0.0,
            min_longitude=0.0,
            latitude_step=0.0,
            longitude_step=0.0,
            latitude_rows=0,
            longitude_columns=0,
        )

    def validate(self) -> None:
        """Check steps and dimensions are strictly positive.

        Raises:
            InvalidGeometryError: On the first offending parameter.
        """
        for name in ("latitude_step", "longitude_step"):
            step = getattr(self, name)
            if not isinstance(step, Real) or not math.isfinite(step) or step <= 0:
                raise InvalidGeometryError(field=name, value=step)
        for name in ("latitude_rows", "longitude_columns"):
            count = getattr(self, name)
            if isinstance(count, bool) or not isinstance(count, Integral) or count <= 0:
                raise InvalidGeometryError(field=name, value=count)

    @property
    def shape(self) -> tuple[int, int]:
        """Return (latitude_rows, longitude_columns) - NumPy array order."""
        return (self.latitude_rows, self.longitude_columns)

    @property
    def max_latitude_index(self) -> int:
        return self.latitude_rows - 1

    @property
    def max_longitude_index(self) -> int:
        return self.longitude_columns - 1

    @property
    def max_latitude(self) -> float:
        """Exclusive upper latitude edge of the footprint."""
        return self.min_latitude + self.latitude_rows * self.latitude_step

    @property
    def max_longitude(self) -> float:
        """Exclusive upper longitude edge of the footprint."""
        return self.min_longitude + self.longitude_columns * self.longitude_step

    def __repr__(self) -> str:
        return (
            f"TileGeometry(lat={self.min_latitude}+{self.latitude_rows}x{self.latitude_step}, "
            f"lon={self.min_longitude}+{self.longitude_columns}x{self.longitude_step})"
        )
