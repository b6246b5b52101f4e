"""Dot-matrix sizing for visualising two group sizes.

Each participant is drawn as one square cell. The largest preset cell size
whose grid holds the larger group is chosen; when even 3px cells do not fit,
each dot stands for ``scale`` participants.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from pystatsepi._logging import get_logger

logger = get_logger(__name__)

CELL_SIZES = (20, 15, 12, 10, 8, 6, 5, 4, 3)


@dataclass(frozen=True)
class GridLayout:
    """Cell size and scaling for a two-group dot matrix.

    Attributes
    ----------
    cell_size : int
        Side of one cell in pixels.
    scale : int
        Participants represented by one dot (1 when every participant fits).
    scaled_n1, scaled_n2 : int
        Dots to draw for each group, ``ceil(n / scale)``.
    columns, rows : int
        Grid shape at ``cell_size``; ``columns * rows`` is the capacity.
    """

    cell_size: int
    scale: int
    scaled_n1: int
    scaled_n2: int
    columns: int
    rows: int

    @property
    def capacity(self) -> int:
        return self.columns * self.rows


def _grid_shape(width: float, height: float, cell_size: int) -> tuple[int, int]:
    return math.floor(width / cell_size), math.floor(height / cell_size)


def pack_grid(n1: int, n2: int, width: float, height: float) -> GridLayout:
    """Choose the cell size (and, if needed, scale) for drawing two groups.

    Parameters
    ----------
    n1, n2 : int
        Group sizes (>= 0).
    width, height : float
        Drawing area in pixels (>= 0).

    Returns
    -------
    GridLayout

    Raises
    ------
    ValueError
        Negative counts, negative or non-finite dimensions, or an area too
        small to hold a single 3px cell while there is something to draw.

    Examples
    --------
    >>> pack_grid(50, 50, 400, 300).cell_size
    20
    >>> layout = pack_grid(100_000, 10, 100, 100)
    >>> layout.cell_size, layout.scale
    (3, 92)
    """
    if n1 < 0 or n2 < 0:
        raise ValueError(f"group sizes must be >= 0, got n1={n1}, n2={n2}")
    for name, value in (("width", width), ("height", height)):
        if not math.isfinite(value) or value < 0:
            raise ValueError(f"{name} must be a finite number >= 0, got {value}")

    n_max = max(n1, n2)

    for size in CELL_SIZES:
        columns, rows = _grid_shape(width, height, size)
        if columns * rows >= n_max:
            return GridLayout(
                cell_size=size,
                scale=1,
                scaled_n1=n1,
                scaled_n2=n2,
                columns=columns,
                rows=rows,
            )

    # Smallest cell still too large: one dot per `scale` participants
    size = CELL_SIZES[-1]
    columns, rows = _grid_shape(width, height, size)
    capacity = columns * rows
    if capacity == 0:
        raise ValueError(
            f"Drawing area {width}x{height} cannot hold a single {size}px cell"
        )

    scale = math.ceil(n_max / capacity)
    logger.debug(
        "grid: max(n1, n2)=%d exceeds %d cells at %dpx; scale=%d",
        n_max, capacity, size, scale,
    )
    return GridLayout(
        cell_size=size,
        scale=scale,
        scaled_n1=math.ceil(n1 / scale),
        scaled_n2=math.ceil(n2 / scale),
        columns=columns,
        rows=rows,
    )
