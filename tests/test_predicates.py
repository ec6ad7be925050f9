"""
Predicate tables checked against hand-computed values over one full period.
"""

import pytest

from core import predicates as P
from core.predicates import classify_grid, predicate_period, truth_table

T, F = True, False


def test_two_uniform_table():
    assert truth_table(P.two_uniform, 3) == (
        (T, F, F),
        (F, T, F),
        (F, F, T),
    )


def test_two_uniform2_is_complement():
    assert truth_table(P.two_uniform2, 3) == (
        (F, T, T),
        (T, F, T),
        (T, T, F),
    )


def test_three_uniform_one_one_one_table():
    assert truth_table(P.three_uniform_one_one_one, 2) == ((T, F), (F, F))


def test_three_uniform_one_one_one2_table():
    assert truth_table(P.three_uniform_one_one_one2, 4) == (
        (T, T, F, F),
        (F, F, T, T),
        (T, T, F, F),
        (F, F, T, T),
    )


def test_three_uniform_one_one_one3_table():
    assert truth_table(P.three_uniform_one_one_one3, 2) == ((T, T), (F, F))


def test_three_uniform_two_one_table():
    assert truth_table(P.three_uniform_two_one, 2) == ((T, T), (T, F))


def test_seven_uniform_one_rosette_per_row():
    # Row j holds its single rosette at i = (8j) % 10
    expected_columns = [0, 8, 6, 4, 2, 0, 8, 6, 4, 2]
    table = classify_grid(P.seven_uniform_four_two_one, 10, 10)
    for j, col in enumerate(expected_columns):
        assert list(table[j].nonzero()[0]) == [col], f"row {j}"


def test_sample_cells():
    assert P.two_uniform(1, 2) is False
    assert P.two_uniform(2, 2) is True
    assert P.three_uniform_one_one_one2(3, 1) is True


def test_classify_grid_shape_and_indexing():
    table = classify_grid(lambda i, j: i == 4 and j == 1, width=5, height=2)
    assert table.shape == (2, 5)
    assert table[1, 4]
    assert table.sum() == 1


@pytest.mark.parametrize("predicate, period", [
    (P.two_uniform, 3),
    (P.two_uniform2, 3),
    (P.three_uniform_one_one_one, 2),
    (P.three_uniform_one_one_one2, 4),
    (P.three_uniform_one_one_one3, 2),
    (P.three_uniform_two_one, 2),
    (P.seven_uniform_four_two_one, 10),
])
def test_predicate_period(predicate, period):
    assert predicate_period(predicate) == period


def test_predicate_period_rejects_aperiodic():
    with pytest.raises(ValueError):
        predicate_period(lambda i, j: i == j == 0, max_period=8)


def test_combinators():
    even_col = P.column_mod(2)
    even_row = P.row_mod(2)
    assert P.both(even_col, even_row)(2, 4)
    assert not P.both(even_col, even_row)(2, 3)
    assert P.either(even_col, even_row)(1, 2)
    assert not P.either(even_col, even_row)(1, 3)
    assert P.negate(even_col)(1, 0)
    assert P.row_mod(3, residue=1)(0, 4)
    assert P.residues_equal(10, mul_j=8)(8, 1)
    assert not P.residues_equal(10, mul_j=8)(1, 8)


def test_combinators_reproduce_named_predicates():
    composed = P.negate(P.both(P.negate(P.column_mod(2)), P.negate(P.row_mod(2))))
    assert truth_table(composed, 4) == truth_table(P.three_uniform_two_one, 4)
    assert truth_table(P.residues_equal(3), 6) == truth_table(P.two_uniform, 6)
