"""
Lattice builder:
- Dimension checks fail with a diagnostic, never an exception
- Minimal 1x1 tilings for both motifs
- Pure honeycomb and pure triangular patches
- Deterministic output
"""

import pytest

from core.lattice import hexagon_rect
from core.types import CellMotif, GenerationFailure

HEXAGONS = lambda i, j: False
ROSETTES = lambda i, j: True


@pytest.mark.parametrize("width, height", [(0, 3), (3, 0), (0, 0), (-2, 4)])
def test_non_positive_dimensions_fail(width, height):
    result = hexagon_rect(width, height, HEXAGONS)
    assert not result.is_success
    assert result.tiling is None
    assert result.error == f"width and height must be positive, got {width}x{height}"


@pytest.mark.parametrize("width, height", [(2.5, 3), (3, "4"), (True, 2)])
def test_non_integer_dimensions_fail(width, height):
    result = hexagon_rect(width, height, HEXAGONS)
    assert result.error == "width and height must be integers"


def test_unwrap_raises_with_message():
    result = hexagon_rect(0, 1, HEXAGONS)
    with pytest.raises(GenerationFailure) as excinfo:
        result.unwrap()
    assert excinfo.value.message == result.error


def test_single_hexagon():
    tiling = hexagon_rect(1, 1, HEXAGONS).unwrap()
    assert len(tiling.polygons) == 1
    assert len(tiling.vertices) == 6
    assert tiling.interior_vertices == []
    assert tiling.cells == {(0, 0): CellMotif.HEXAGON}
    assert tiling.validate() == []


def test_single_rosette():
    tiling = hexagon_rect(1, 1, ROSETTES).unwrap()
    assert len(tiling.triangles) == 6
    assert len(tiling.vertices) == 7
    assert len(tiling.interior_vertices) == 1
    assert tiling.configuration_counts() == {"3⁶": 1}
    assert tiling.validate() == []


def test_adjacent_hexagons_share_an_edge():
    tiling = hexagon_rect(2, 1, HEXAGONS).unwrap()
    assert len(tiling.vertices) == 10
    assert len(tiling.edges) == 11


def test_honeycomb_patch():
    tiling = hexagon_rect(5, 5, HEXAGONS).unwrap()
    assert len(tiling.hexagons) == 25
    assert tiling.distinct_configurations() == {"6³"}


def test_triangular_patch():
    tiling = hexagon_rect(4, 3, ROSETTES).unwrap()
    assert len(tiling.triangles) == 6 * 12
    assert tiling.distinct_configurations() == {"3⁶"}


def test_cells_record_the_predicate():
    tiling = hexagon_rect(3, 2, lambda i, j: i == 1).unwrap()
    assert tiling.cells[(1, 0)] == CellMotif.ROSETTE
    assert tiling.cells[(1, 1)] == CellMotif.ROSETTE
    assert tiling.cells[(0, 1)] == CellMotif.HEXAGON
    assert len(tiling.cells) == 6


def test_predicate_errors_propagate():
    with pytest.raises(ZeroDivisionError):
        hexagon_rect(2, 2, lambda i, j: 1 // (i - 1) > 0)


def test_deterministic():
    predicate = lambda i, j: (i + j) % 3 == 0
    first = hexagon_rect(6, 4, predicate)
    second = hexagon_rect(6, 4, predicate)
    assert first.tiling == second.tiling
    assert first == second


def test_results_are_unhashable():
    with pytest.raises(TypeError):
        hash(hexagon_rect(1, 1, HEXAGONS))
    with pytest.raises(TypeError):
        hash(hexagon_rect(0, 1, HEXAGONS))
