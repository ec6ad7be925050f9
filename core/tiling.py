"""
Tiling - finite patch of an edge-to-edge tiling by regular polygons.

Polygons are tuples of vertex indices in counter-clockwise order over a
shared vertex array. Every query below is derived from those two pieces
plus the lattice classification the tiling was built from.
"""
import math
from collections import Counter, defaultdict
from typing import Dict, List, Optional, Sequence, Set, Tuple

import numpy as np

from core.types import CellMotif, ValidationError
from utils.notation import format_configuration

Edge = Tuple[int, int]

# Degrees of slack when summing angles around a vertex
ANGLE_TOLERANCE = 1e-6


class Tiling:
    """
    Validated output geometry of the lattice builder.

    Attributes:
        vertices: (n, 2) float array of vertex coordinates
        polygons: List of vertex-index tuples, counter-clockwise
        cells: Mapping of lattice cell (i, j) to the motif placed there
    """

    def __init__(self, vertices: np.ndarray, polygons: Sequence[Tuple[int, ...]],
                 cells: Optional[Dict[Tuple[int, int], CellMotif]] = None):
        self.vertices: np.ndarray = np.asarray(vertices, dtype=float).reshape(-1, 2)
        self.polygons: List[Tuple[int, ...]] = [tuple(p) for p in polygons]
        self.cells: Dict[Tuple[int, int], CellMotif] = dict(cells or {})

        # Undirected edge -> indices of polygons using it
        self._edge_polygons: Dict[Edge, List[int]] = defaultdict(list)
        # Directed edge -> indices of polygons traversing it that way
        self._directed: Dict[Edge, List[int]] = defaultdict(list)
        # Vertex -> indices of polygons touching it
        self._vertex_polygons: Dict[int, List[int]] = defaultdict(list)

        for idx, poly in enumerate(self.polygons):
            for a, b in self._polygon_edges(poly):
                self._directed[(a, b)].append(idx)
                self._edge_polygons[(min(a, b), max(a, b))].append(idx)
            for v in poly:
                self._vertex_polygons[v].append(idx)

        # The tiling never changes after construction
        self._boundary_edges: List[Edge] = sorted(
            e for e, polys in self._edge_polygons.items() if len(polys) == 1)
        self._boundary_vertices: Set[int] = {v for edge in self._boundary_edges for v in edge}

    @staticmethod
    def _polygon_edges(poly: Tuple[int, ...]) -> List[Edge]:
        return [(poly[k], poly[(k + 1) % len(poly)]) for k in range(len(poly))]

    # =============================================================================
    # STRUCTURE QUERIES
    # =============================================================================

    @property
    def edges(self) -> List[Edge]:
        """All undirected edges as sorted (low, high) pairs."""
        return sorted(self._edge_polygons)

    @property
    def boundary_edges(self) -> List[Edge]:
        """Edges used by exactly one polygon."""
        return list(self._boundary_edges)

    @property
    def boundary_vertices(self) -> Set[int]:
        return set(self._boundary_vertices)

    @property
    def interior_vertices(self) -> List[int]:
        """Vertices fully surrounded by polygons."""
        return sorted(v for v in self._vertex_polygons if v not in self._boundary_vertices)

    def polygons_at(self, v: int) -> List[int]:
        return list(self._vertex_polygons.get(v, []))

    def polygons_of_size(self, n: int) -> List[int]:
        return [idx for idx, poly in enumerate(self.polygons) if len(poly) == n]

    @property
    def hexagons(self) -> List[int]:
        return self.polygons_of_size(6)

    @property
    def triangles(self) -> List[int]:
        return self.polygons_of_size(3)

    def polygon_points(self, idx: int) -> np.ndarray:
        """(n, 2) coordinates of polygon idx."""
        return self.vertices[list(self.polygons[idx])]

    def polygon_centroid(self, idx: int) -> np.ndarray:
        return self.polygon_points(idx).mean(axis=0)

    def bounding_box(self) -> Tuple[float, float, float, float]:
        """(min_x, min_y, max_x, max_y) over all vertices."""
        if len(self.vertices) == 0:
            return 0.0, 0.0, 0.0, 0.0
        min_x, min_y = self.vertices.min(axis=0)
        max_x, max_y = self.vertices.max(axis=0)
        return float(min_x), float(min_y), float(max_x), float(max_y)

    # =============================================================================
    # VERTEX CONFIGURATIONS
    # =============================================================================

    def interior_angle(self, idx: int, v: int) -> float:
        """Angle in degrees of polygon idx at its vertex v."""
        poly = self.polygons[idx]
        k = poly.index(v)
        here = self.vertices[v]
        nxt = self.vertices[poly[(k + 1) % len(poly)]] - here
        prv = self.vertices[poly[k - 1]] - here
        cross = nxt[0] * prv[1] - nxt[1] * prv[0]
        dot = nxt[0] * prv[0] + nxt[1] * prv[1]
        return math.degrees(math.atan2(cross, dot)) % 360.0

    def angle_sum(self, v: int) -> float:
        return sum(self.interior_angle(idx, v) for idx in self._vertex_polygons.get(v, []))

    def vertex_configuration(self, v: int) -> Optional[str]:
        """
        Canonical configuration of an interior vertex, e.g. "3².6²".

        Returns:
            None for boundary vertices, whose surrounding is incomplete
        """
        if v in self._boundary_vertices:
            return None
        here = self.vertices[v]

        def bearing(idx: int) -> float:
            dx, dy = self.polygon_centroid(idx) - here
            return math.atan2(dy, dx)

        ordered = sorted(self._vertex_polygons[v], key=bearing)
        return format_configuration([len(self.polygons[idx]) for idx in ordered])

    def configuration_counts(self) -> Counter:
        """Interior vertex count per configuration."""
        counts: Counter = Counter()
        for v in self._vertex_polygons:
            if v not in self._boundary_vertices:
                counts[self.vertex_configuration(v)] += 1
        return counts

    def distinct_configurations(self) -> Set[str]:
        return set(self.configuration_counts())

    # =============================================================================
    # VALIDATION
    # =============================================================================

    def _boundary_loops(self) -> Tuple[int, List[ValidationError]]:
        """Count closed boundary loops; report pinched boundary vertices."""
        errors: List[ValidationError] = []
        successor: Dict[int, int] = {}
        for (a, b), polys in self._directed.items():
            if len(self._edge_polygons[(min(a, b), max(a, b))]) != 1:
                continue
            if a in successor:
                errors.append(ValidationError("error", "Boundary passes twice through vertex", location=a))
            successor[a] = b

        loops = 0
        unvisited = set(successor)
        while unvisited:
            start = unvisited.pop()
            current = successor[start]
            while current != start:
                if current not in unvisited:
                    errors.append(ValidationError("error", "Boundary is not a closed loop", location=current))
                    break
                unvisited.discard(current)
                current = successor[current]
            loops += 1
        return loops, errors

    def validate(self) -> List[ValidationError]:
        """
        Return a list[ValidationError]. Empty list == VALID.
        Rules (hard errors):
        - At least one polygon
        - Every edge shared by at most two polygons, in opposite directions
        - Angles around an interior vertex sum to 360 degrees
        - Angles around a boundary vertex sum to less than 360 degrees
        - The boundary is one closed loop (connected, no holes)
        """
        errors: List[ValidationError] = []

        if not self.polygons:
            errors.append(ValidationError("error", "Tiling has no polygons"))
            return errors

        # A) Edge matching
        for edge, polys in self._edge_polygons.items():
            if len(polys) > 2:
                errors.append(ValidationError("error", f"Edge shared by {len(polys)} polygons", location=edge))
        for edge, polys in self._directed.items():
            if len(polys) > 1:
                errors.append(ValidationError("error", "Overlapping polygons along edge", location=edge))

        # B) Angles
        boundary = self.boundary_vertices
        for v in self._vertex_polygons:
            total = self.angle_sum(v)
            if v in boundary:
                if total > 360.0 - ANGLE_TOLERANCE:
                    errors.append(ValidationError("error", f"Boundary vertex closes at {total:.3f} degrees", location=v))
            elif abs(total - 360.0) > ANGLE_TOLERANCE:
                errors.append(ValidationError("error", f"Vertex angles sum to {total:.3f} degrees", location=v))

        # C) Boundary
        loops, loop_errors = self._boundary_loops()
        errors.extend(loop_errors)
        if loops != 1:
            errors.append(ValidationError("error", f"Boundary has {loops} loops, expected 1"))

        return errors

    def is_valid(self) -> bool:
        return not any(e.severity == "error" for e in self.validate())

    def get_statistics(self) -> Dict:
        """
        Get tiling statistics.

        Returns:
            Dict with polygon, vertex and edge counts plus configurations
        """
        boundary = self.boundary_vertices
        stats = {
            "hexagons": len(self.hexagons),
            "triangles": len(self.triangles),
            "polygons": len(self.polygons),
            "vertices": len(self._vertex_polygons),
            "boundary_vertices": len(boundary),
            "interior_vertices": len(self._vertex_polygons) - len(boundary),
            "edges": len(self._edge_polygons),
            "boundary_edges": len(self.boundary_edges),
            "rosette_cells": sum(1 for m in self.cells.values() if m == CellMotif.ROSETTE),
            "hexagon_cells": sum(1 for m in self.cells.values() if m == CellMotif.HEXAGON),
        }
        stats["configurations"] = dict(self.configuration_counts())
        stats["errors"] = len([e for e in self.validate() if e.severity == "error"])
        return stats

    # =============================================================================
    # EQUALITY
    # =============================================================================

    def __eq__(self, other):
        if not isinstance(other, Tiling):
            return NotImplemented
        return (self.polygons == other.polygons
                and self.cells == other.cells
                and self.vertices.shape == other.vertices.shape
                and bool(np.array_equal(self.vertices, other.vertices)))

    __hash__ = None

    def __repr__(self):
        return f"Tiling({len(self.polygons)} polygons, {len(self.vertices)} vertices)"
