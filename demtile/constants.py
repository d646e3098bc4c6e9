"""Configuration constants for the DEM tile core.

All configurable parameters are centralized here for easy tuning.

Classes:
    TileConfig: Elevation grid storage settings
"""

import numpy as np


class TileConfig:
    """Elevation grid storage settings."""

    # Fill value for cells not yet written by the loader (no-data)
    UNSET_ELEVATION = np.nan

    # Largest grid ArrayTile will allocate (rows * columns)
    # A 1 arc-second 1x1 degree tile is 3601 x 3601 ≈ 13M cells
    MAX_CELLS = 100_000_000
