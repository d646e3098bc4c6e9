"""Error hierarchy for DEM tile operations.

All errors derive from TileError so loaders and caches can catch tile
failures in one place. Each one also derives from the closest builtin
(ValueError, IndexError, MemoryError, RuntimeError) for callers that
only know the standard exceptions.
"""

from typing import Any


class TileError(Exception):
    """Base error for tile operations."""


class InvalidGeometryError(TileError, ValueError):
    """Non-positive (or non-finite) step, or non-positive dimension.

    Attributes:
        field: Name of the offending geometry parameter
        value: The rejected value
    """

    def __init__(self, field: str, value: Any) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Invalid tile geometry: {field}={value!r} must be strictly positive")


class IndexOutOfBoundsError(TileError, IndexError):
    """Elevation access with indices outside the tile grid.

    Attributes:
        latitude_index: Offending row index
        longitude_index: Offending column index
        max_latitude_index: Largest valid row index (rows - 1)
        max_longitude_index: Largest valid column index (columns - 1)
    """

    def __init__(
        self,
        latitude_index: int,
        longitude_index: int,
        max_latitude_index: int,
        max_longitude_index: int,
    ) -> None:
        self.latitude_index = latitude_index
        self.longitude_index = longitude_index
        self.max_latitude_index = max_latitude_index
        self.max_longitude_index = max_longitude_index
        super().__init__(
            f"Out of tile indices ({latitude_index}, {longitude_index}), "
            f"expected [0, {max_latitude_index}] x [0, {max_longitude_index}]"
        )

    @property
    def indices(self) -> tuple[int, int]:
        """Return the offending (latitude_index, longitude_index) pair."""
        return (self.latitude_index, self.longitude_index)

    @property
    def bound(self) -> tuple[int, int]:
        """Return the largest valid (latitude_index, longitude_index) pair."""
        return (self.max_latitude_index, self.max_longitude_index)


class AllocationFailureError(TileError, MemoryError):
    """Storage could not materialize the backing elevation grid.

    Attributes:
        shape: Requested (rows, columns)
    """

    def __init__(self, shape: tuple[int, int], reason: str) -> None:
        self.shape = shape
        super().__init__(f"Cannot allocate {shape[0]} x {shape[1]} elevation grid: {reason}")


class TileLifecycleError(TileError, RuntimeError):
    """Operation not allowed in the tile's current lifecycle state.

    Raised when geometry is configured twice or a finalized tile is written.

    Attributes:
        event: Lifecycle event that was refused
        state: Name of the state the tile was in
    """

    def __init__(self, event: str, state: str) -> None:
        self.event = event
        self.state = state
        super().__init__(f"Event '{event}' not allowed for a tile in state '{state}'")
