"""
Dot-matrix layout for visualising sample sizes.

Deterministic search over preset cell sizes; no rendering.
"""

from pystatsepi.grid._packing import CELL_SIZES, GridLayout, pack_grid

__all__ = [
    "CELL_SIZES",
    "GridLayout",
    "pack_grid",
]
