"""
Uniformity analysis of the infinite periodic tiling a predicate describes.

The tiling is reduced to a P x P torus of lattice cells, with P a multiple of
the predicate's period. Its symmetries are the maps c -> M c + t (mod P),
with M in the 12-element point group of the triangular lattice, that leave
the classification unchanged. Vertices, tiles and edges are all named by the
lattice cells that define them, so applying a symmetry to any of them is
exact integer arithmetic.

Orbit counts:
    k (uniformity)      vertex orbits
    t (transitivity)    tile orbits
    e (edge types)      edge orbits
"""
import math
from collections import Counter
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Optional, Set, Tuple

import numpy as np

from core.predicates import classify_grid
from core.types import ClassificationPredicate
from utils.axial import AXIAL_DELTAS, corner_cells, edge_cells, wrap, wrap_all
from utils.notation import format_signature

Matrix = Tuple[Tuple[int, int], Tuple[int, int]]
Cell = Tuple[int, int]
# (kind, owner cell or None, defining cells)
Element = Tuple[str, Optional[Cell], FrozenSet[Cell]]

_IDENTITY: Matrix = ((1, 0), (0, 1))
_ROTATE_60: Matrix = ((0, -1), (1, 1))
_REFLECT_X: Matrix = ((1, 1), (0, -1))

# Configuration of a honeycomb corner by the number of rosettes meeting there
CORNER_CONFIGURATIONS = {0: "6³", 1: "3².6²", 2: "3⁴.6", 3: "3⁶"}
ROSETTE_CENTRE_CONFIGURATION = "3⁶"


def _compose(a: Matrix, b: Matrix) -> Matrix:
    return tuple(
        tuple(sum(a[r][k] * b[k][c] for k in range(2)) for c in range(2))
        for r in range(2)
    )


def _point_group() -> List[Matrix]:
    group = [_IDENTITY]
    rotation = _IDENTITY
    for _ in range(5):
        rotation = _compose(_ROTATE_60, rotation)
        group.append(rotation)
    group.extend(_compose(m, _REFLECT_X) for m in list(group))
    return group


POINT_GROUP: List[Matrix] = _point_group()


@dataclass(frozen=True)
class Symmetry:
    """Lattice isometry c -> matrix . c + shift on a period x period torus."""
    matrix: Matrix
    shift: Cell
    period: int

    def apply(self, cell: Cell) -> Cell:
        (a, b), (c, d) = self.matrix
        i, j = cell
        return ((a * i + b * j + self.shift[0]) % self.period,
                (c * i + d * j + self.shift[1]) % self.period)

    def apply_element(self, element: Element) -> Element:
        kind, owner, cells = element
        return (kind,
                None if owner is None else self.apply(owner),
                frozenset(self.apply(c) for c in cells))

    @property
    def is_translation(self) -> bool:
        return self.matrix == _IDENTITY


@dataclass
class UniformityReport:
    """Orbit counts of a periodic tiling."""
    vertex_orbits: Counter = field(default_factory=Counter)
    transitivity: int = 0
    edge_types: int = 0
    symmetry_order: int = 0
    period: int = 0

    @property
    def uniformity(self) -> int:
        return sum(self.vertex_orbits.values())

    @property
    def signature(self) -> str:
        return format_signature(self.vertex_orbits)

    def __str__(self):
        return (f"{self.uniformity}-uniform {self.signature} "
                f"(t={self.transitivity}, e={self.edge_types})")


def torus_size(period: int) -> int:
    """Smallest multiple of period large enough that no two elements coincide."""
    return period * 6 // math.gcd(period, 6)


def find_symmetries(table: np.ndarray) -> List[Symmetry]:
    """All lattice isometries of a square periodic table indexed [j, i]."""
    period = table.shape[0]
    jj, ii = np.indices(table.shape)
    found: List[Symmetry] = []
    for matrix in POINT_GROUP:
        (a, b), (c, d) = matrix
        mi = a * ii + b * jj
        mj = c * ii + d * jj
        for ti in range(period):
            for tj in range(period):
                moved = table[(mj + tj) % period, (mi + ti) % period]
                if np.array_equal(moved, table):
                    found.append(Symmetry(matrix, (ti, tj), period))
    return found


def _count_orbits(elements: Iterable[Element], group: List[Symmetry]) -> Counter:
    """Number of orbits per element kind."""
    remaining: Set[Element] = set(elements)
    counts: Counter = Counter()
    while remaining:
        seed = remaining.pop()
        remaining -= {g.apply_element(seed) for g in group}
        counts[seed[0]] += 1
    return counts


def analyze_table(table: np.ndarray) -> UniformityReport:
    """
    Count vertex, tile and edge orbits for a periodic rosette table.

    Args:
        table: Square boolean array [j, i], periodic in both directions

    Raises:
        ValueError: If the table has no hexagon cell; the lattice symmetries
            alone do not describe the plain triangular tiling
    """
    period = table.shape[0]
    if table.shape != (period, period):
        raise ValueError(f"Table must be square, got {table.shape}")
    if table.all():
        raise ValueError("Uniformity analysis needs at least one hexagon cell")

    group = find_symmetries(table)

    def is_rosette(cell: Cell) -> bool:
        i, j = wrap(cell, period)
        return bool(table[j, i])

    vertices: Set[Element] = set()
    tiles: Set[Element] = set()
    edges: Set[Element] = set()

    for j in range(period):
        for i in range(period):
            cell = (i, j)
            corners = corner_cells(i, j)
            for corner in corners:
                rosettes = sum(1 for c in corner if is_rosette(c))
                vertices.add((CORNER_CONFIGURATIONS[rosettes], None, wrap_all(corner, period)))
            for edge in edge_cells(i, j):
                edges.add(("edge", None, wrap_all(edge, period)))

            if is_rosette(cell):
                vertices.add((ROSETTE_CENTRE_CONFIGURATION, cell, frozenset({cell})))
                for di, dj in AXIAL_DELTAS:
                    tiles.add(("triangle", cell, wrap_all([cell, (i + di, j + dj)], period)))
                for corner in corners:
                    edges.add(("spoke", cell, wrap_all(corner, period)))
            else:
                tiles.add(("hexagon", cell, frozenset({cell})))

    translations = sum(1 for g in group if g.is_translation)
    return UniformityReport(
        vertex_orbits=_count_orbits(vertices, group),
        transitivity=sum(_count_orbits(tiles, group).values()),
        edge_types=sum(_count_orbits(edges, group).values()),
        symmetry_order=len(group) // translations,
        period=period,
    )


def analyze_uniformity(predicate: ClassificationPredicate, period: int) -> UniformityReport:
    """Orbit counts of the infinite tiling drawn by a predicate of the given period."""
    size = torus_size(period)
    return analyze_table(classify_grid(predicate, size, size))
