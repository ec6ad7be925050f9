# utils/axial.py
"""
Axial-coordinate helpers for the rectangular hexagon lattice.

Axial convention:
- Cell (i, j): i is the column, j is the row
- Row j is shifted right by half a hexagon for every step up, so the
  rectangle of cells 0 <= i < width, 0 <= j < height is a rhombus on the page
- Pointy-top hexagons of side 1, centre at (sqrt(3) * (i + j/2), 1.5 * j)

This means the six neighbours of (i, j) are always the same deltas,
independently of row parity (unlike offset/EVEN-R layouts):

    (1, 0) east, (0, 1) north-east, (-1, 1) north-west,
    (-1, 0) west, (0, -1) south-west, (1, -1) south-east

Reference: Red Blob Games hexagonal grid guide
https://www.redblobgames.com/grids/hexagons/
"""

from __future__ import annotations
import math
from typing import FrozenSet, Sequence, Tuple

import numpy as np

Cell = Tuple[int, int]

SQRT3 = math.sqrt(3)

# Counter-clockwise, starting east
AXIAL_DELTAS: Tuple[Tuple[int, int], ...] = (
    ( 1,  0),  # east
    ( 0,  1),  # north-east
    (-1,  1),  # north-west
    (-1,  0),  # west
    ( 0, -1),  # south-west
    ( 1, -1),  # south-east
)

# Corner k of a pointy-top hexagon sits at angle 30 + 60k degrees
CORNER_ANGLES = np.deg2rad([30, 90, 150, 210, 270, 330])


def cell_center(i: int, j: int, size: float = 1.0) -> Tuple[float, float]:
    """Centre of cell (i, j) for hexagons with the given side length."""
    return size * SQRT3 * (i + j / 2.0), size * 1.5 * j


def hex_corners(cx: float, cy: float, size: float = 1.0) -> np.ndarray:
    """
    Corners of a pointy-top hexagon, counter-clockwise.

    Returns:
        (6, 2) array; row k is the corner at angle 30 + 60k degrees
    """
    return np.column_stack((
        cx + size * np.cos(CORNER_ANGLES),
        cy + size * np.sin(CORNER_ANGLES),
    ))


def corner_cells(i: int, j: int) -> Tuple[FrozenSet[Cell], ...]:
    """
    The six honeycomb corners of cell (i, j), each named by the three
    mutually adjacent cells meeting there. Index k matches CORNER_ANGLES.
    """
    cells = []
    for k in range(6):
        # Corner k lies between edge-neighbours k and k+1
        a = AXIAL_DELTAS[k]
        b = AXIAL_DELTAS[(k + 1) % 6]
        cells.append(frozenset({(i, j), (i + a[0], j + a[1]), (i + b[0], j + b[1])}))
    return tuple(cells)


def edge_cells(i: int, j: int) -> Tuple[FrozenSet[Cell], ...]:
    """
    The six honeycomb edges of cell (i, j), named by the two cells they
    separate. Edge k joins corners k-1 and k and faces neighbour k.
    """
    return tuple(
        frozenset({(i, j), (i + di, j + dj)}) for di, dj in AXIAL_DELTAS
    )


def wrap(cell: Cell, period: int) -> Cell:
    """Reduce a cell onto a period x period torus."""
    return cell[0] % period, cell[1] % period


def wrap_all(cells: Sequence[Cell], period: int) -> FrozenSet[Cell]:
    return frozenset(wrap(c, period) for c in cells)

