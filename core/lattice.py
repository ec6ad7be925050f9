"""
Rectangular hexagon-lattice builder.

Lays out a width x height patch of pointy-top hexagonal cells (axial
coordinates, see utils.axial), replaces every cell the predicate marks with
a six-triangle rosette, then validates the resulting tiling. Failures come
back as GenerationResult values carrying a diagnostic; no partial tiling is
ever returned.
"""
import logging
import numbers
from typing import Dict, FrozenSet, Hashable, List, Tuple

import numpy as np

from core.tiling import Tiling
from core.types import CellMotif, ClassificationPredicate, GenerationResult
from utils.axial import cell_center, corner_cells, hex_corners

logger = logging.getLogger(__name__)


class _VertexPool:
    """Vertex index registry keyed by exact lattice identity, not by coordinates."""

    def __init__(self):
        self._index: Dict[Hashable, int] = {}
        self._points: List[Tuple[float, float]] = []

    def index(self, key: Hashable, x: float, y: float) -> int:
        if key not in self._index:
            self._index[key] = len(self._points)
            self._points.append((float(x), float(y)))
        return self._index[key]

    def as_array(self) -> np.ndarray:
        return np.array(self._points, dtype=float).reshape(-1, 2)


def _is_dimension(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def hexagon_rect(width: int, height: int, classify: ClassificationPredicate) -> GenerationResult:
    """
    Build and validate a tiling of width x height lattice cells.

    Args:
        width: Number of columns (must be >= 1)
        height: Number of rows (must be >= 1)
        classify: (i, j) -> True for a rosette, False for a hexagon

    Returns:
        GenerationResult with the tiling, or with a diagnostic message
    """
    if not (_is_dimension(width) and _is_dimension(height)):
        return GenerationResult.failure("width and height must be integers")
    if width < 1 or height < 1:
        return GenerationResult.failure(f"width and height must be positive, got {width}x{height}")

    pool = _VertexPool()
    polygons: List[Tuple[int, ...]] = []
    cells: Dict[Tuple[int, int], CellMotif] = {}

    for j in range(height):
        for i in range(width):
            motif = CellMotif.from_predicate(bool(classify(i, j)))
            cells[(i, j)] = motif

            cx, cy = cell_center(i, j)
            keys: Tuple[FrozenSet, ...] = corner_cells(i, j)
            corners = [pool.index(key, x, y) for key, (x, y) in zip(keys, hex_corners(cx, cy))]

            if motif == CellMotif.HEXAGON:
                polygons.append(tuple(corners))
            else:
                centre = pool.index(frozenset({(i, j)}), cx, cy)
                for k in range(6):
                    polygons.append((centre, corners[k], corners[(k + 1) % 6]))

    tiling = Tiling(pool.as_array(), polygons, cells)
    errors = [e for e in tiling.validate() if e.severity == "error"]
    if errors:
        logger.warning("Rejected %dx%d tiling: %s (%d errors)", width, height, errors[0], len(errors))
        return GenerationResult.failure(f"inconsistent tiling: {errors[0].message}")

    logger.debug("Built %dx%d tiling with %d polygons", width, height, len(polygons))
    return GenerationResult.success(tiling)
