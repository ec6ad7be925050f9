"""
Vertex-configuration strings, tiling signatures and the axial cell naming
they rest on.
"""

from collections import Counter

import numpy as np
import pytest

from utils.axial import SQRT3, cell_center, corner_cells, edge_cells, hex_corners, wrap_all
from utils.notation import (
    canonical_cycle, format_configuration, format_signature,
    parse_configuration, parse_signature, superscript,
)


def test_superscript():
    assert superscript(6) == "⁶"
    assert superscript(12) == "¹²"


def test_canonical_cycle():
    assert canonical_cycle([6, 3, 3, 6]) == (3, 3, 6, 6)
    assert canonical_cycle([6, 3, 6, 3]) == (3, 6, 3, 6)
    assert canonical_cycle([6, 3, 3, 3, 3]) == (3, 3, 3, 3, 6)
    assert canonical_cycle([]) == ()


@pytest.mark.parametrize("sizes, expected", [
    ([3] * 6, "3⁶"),
    ([6, 6, 6], "6³"),
    ([3, 6, 3, 3, 3], "3⁴.6"),
    ([6, 3, 3, 6], "3².6²"),
    ([3, 6, 3, 6], "3.6.3.6"),
])
def test_format_configuration(sizes, expected):
    assert format_configuration(sizes) == expected


def test_parse_configuration():
    assert parse_configuration("3².6²") == (3, 3, 6, 6)
    assert parse_configuration("3.12²") == (3, 12, 12)
    assert parse_configuration("6³") == (6, 6, 6)


@pytest.mark.parametrize("text", ["3^2", "", "3..6", "²"])
def test_parse_configuration_rejects_malformed(text):
    with pytest.raises(ValueError):
        parse_configuration(text)


def test_parse_signature():
    assert parse_signature("[2×(3⁶);(3⁴.6)]") == Counter({"3⁶": 2, "3⁴.6": 1})
    assert parse_signature("[2x(3⁶)]") == Counter({"3⁶": 2})
    # Non-canonical spellings collapse to the canonical string
    assert parse_signature("[(3.3.3.3.3.3);(6.3.3.6)]") == Counter({"3⁶": 1, "3².6²": 1})


@pytest.mark.parametrize("text", ["2×(3⁶)", "[(3⁶);]", "[3⁶]", "[(3⁶);(3^4.6)]"])
def test_parse_signature_rejects_malformed(text):
    with pytest.raises(ValueError):
        parse_signature(text)


def test_format_signature_orders_configurations():
    orbits = Counter({"6³": 4, "3⁶": 1, "3².6²": 2})
    assert format_signature(orbits) == "[(3⁶);2×(3².6²);4×(6³)]"
    assert parse_signature(format_signature(orbits)) == orbits


def test_cell_centres():
    assert cell_center(0, 0) == (0.0, 0.0)
    assert cell_center(1, 0) == pytest.approx((SQRT3, 0.0))
    assert cell_center(0, 1) == pytest.approx((SQRT3 / 2, 1.5))


def test_neighbouring_cells_share_corner_positions():
    # Corner k of (0, 0) is one of the corners of both cells it is named after
    for key, point in zip(corner_cells(0, 0), hex_corners(0.0, 0.0)):
        assert len(key) == 3
        for other in key - {(0, 0)}:
            corners = hex_corners(*cell_center(*other))
            assert np.isclose(corners, point).all(axis=1).any()


def test_edges_are_shared_by_two_cells():
    assert edge_cells(0, 0)[0] == frozenset({(0, 0), (1, 0)})
    assert edge_cells(1, 0)[3] == edge_cells(0, 0)[0]


def test_wrap_all():
    assert wrap_all([(6, -1), (0, 5)], 6) == frozenset({(0, 5)})
