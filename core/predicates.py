"""
Classification predicates over lattice cells.

A predicate maps a cell (i, j) to True for a triangulated rosette and False
for a whole hexagon. Every named predicate here encodes one known uniform
tiling; the moduli and multipliers are fixed facts about that tiling's
periodic structure and must be reproduced exactly.
"""
from typing import Tuple

import numpy as np

from core.types import ClassificationPredicate


# =============================================================================
# COMBINATORS
# =============================================================================

def both(p: ClassificationPredicate, q: ClassificationPredicate) -> ClassificationPredicate:
    """Cell-wise AND of two predicates."""
    return lambda i, j: p(i, j) and q(i, j)


def either(p: ClassificationPredicate, q: ClassificationPredicate) -> ClassificationPredicate:
    """Cell-wise OR of two predicates."""
    return lambda i, j: p(i, j) or q(i, j)


def negate(p: ClassificationPredicate) -> ClassificationPredicate:
    """Swap rosettes and hexagons."""
    return lambda i, j: not p(i, j)


def column_mod(modulus: int, residue: int = 0) -> ClassificationPredicate:
    """True where i % modulus == residue."""
    return lambda i, j: i % modulus == residue


def row_mod(modulus: int, residue: int = 0) -> ClassificationPredicate:
    """True where j % modulus == residue."""
    return lambda i, j: j % modulus == residue


def residues_equal(modulus: int, mul_i: int = 1, mul_j: int = 1) -> ClassificationPredicate:
    """True where (mul_i * i) % modulus == (mul_j * j) % modulus."""
    return lambda i, j: (i * mul_i) % modulus == (j * mul_j) % modulus


def classify_grid(predicate: ClassificationPredicate, width: int, height: int) -> np.ndarray:
    """
    Evaluate a predicate over every cell of a width x height patch.

    Returns:
        Boolean array of shape (height, width), indexed [j, i]
    """
    table = np.zeros((height, width), dtype=bool)
    for j in range(height):
        for i in range(width):
            table[j, i] = bool(predicate(i, j))
    return table


# =============================================================================
# NAMED TILINGS
# =============================================================================

def two_uniform(i: int, j: int) -> bool:
    """[(3⁶);(3².6²)]: rosettes on the diagonal residue class mod 3."""
    return i % 3 == j % 3


def two_uniform2(i: int, j: int) -> bool:
    """[(3⁶);(3⁴.6)]: hexagons on the diagonal residue class mod 3."""
    return i % 3 != j % 3


three_uniform_one_one_one = both(column_mod(2), row_mod(2))
three_uniform_one_one_one.__doc__ = "[(3⁶);(3².6²);(6³)]: rosettes where i and j are both even."


def three_uniform_one_one_one2(i: int, j: int) -> bool:
    """[(3⁶);(3⁴.6);(3².6²)] with t=5: two of every four diagonal bands."""
    return (i + 2 * j) % 4 < 2


three_uniform_one_one_one3 = row_mod(2)
three_uniform_one_one_one3.__doc__ = "[(3⁶);(3⁴.6);(3².6²)] with t=3: rosettes on even rows."

three_uniform_two_one = either(column_mod(2), row_mod(2))
three_uniform_two_one.__doc__ = "[2×(3⁶);(3⁴.6)]: hexagons where i and j are both odd."

seven_uniform_four_two_one = residues_equal(10, mul_i=1, mul_j=8)
seven_uniform_four_two_one.__doc__ = "[(3⁶);2×(3².6²);4×(6³)]: rosettes where i % 10 == (8j) % 10."


def predicate_period(predicate: ClassificationPredicate, max_period: int = 60) -> int:
    """
    Smallest p such that the predicate repeats with period p along i and j,
    checked over a max_period x max_period window.

    Raises:
        ValueError: If no period up to max_period fits
    """
    table = classify_grid(predicate, 2 * max_period, 2 * max_period)
    for p in range(1, max_period + 1):
        if np.array_equal(table[:, p:p + max_period], table[:, :max_period]) and \
           np.array_equal(table[p:p + max_period, :], table[:max_period, :]):
            return p
    raise ValueError(f"Predicate has no period up to {max_period}")


def truth_table(predicate: ClassificationPredicate, size: int) -> Tuple[Tuple[bool, ...], ...]:
    """Rows j = 0..size-1 of the predicate, as nested tuples."""
    return tuple(tuple(bool(v) for v in row) for row in classify_grid(predicate, size, size))
