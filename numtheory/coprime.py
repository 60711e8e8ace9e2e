"""
Coprime pair enumeration.

Responsibility: generating every pair (x, y) with limit >= x >= y >= 0
and gcd(x, y) = 1, using the ternary tree of coprime pairs.

Every coprime pair with x > y >= 1 is reached exactly once from the
roots (2, 1) and (3, 1) by the three maps

    (x, y) -> (2x - y, x)
    (x, y) -> (2x + y, x)
    (x, y) -> (x + 2y, y)

Each map strictly increases x, so a child past the limit ends its branch.
"""

from typing import List, Tuple

import numpy as np

from .numeric import integer_dtype, numeric_cast

# Pairs outside the tree, appended after the traversal.
BOUNDARY_PAIRS = [(1, 0), (1, 1)]
ROOTS = [(2, 1), (3, 1)]


def children(x: int, y: int) -> Tuple[Tuple[int, int], ...]:
    """Return the three children of (x, y) in the coprime tree."""
    return (2 * x - y, x), (2 * x + y, x), (x + 2 * y, y)


def coprime_pairs(limit, dtype=np.int64) -> np.ndarray:
    """
    Generate all coprime pairs of integers up to limit (inclusive).

    Parameters
    ----------
    limit : int
        Upper bound for both members of each pair.
    dtype : dtype-like
        Integer type of the returned array. limit must fit in it.

    Returns
    -------
    np.ndarray
        Array of shape (k, 2). Row (x, y) satisfies limit >= x >= y >= 0
        and gcd(x, y) = 1. Rows are in discovery order of the tree walk,
        followed by (1, 0) and (1, 1). Empty if limit <= 0.
    """
    dtype = integer_dtype(dtype)
    L = int(numeric_cast(limit, dtype))
    if L <= 0:
        return np.empty((0, 2), dtype=dtype)

    pairs: List[Tuple[int, int]] = [p for p in ROOTS if p[0] <= L]

    # pairs doubles as the work queue; visited only moves forward
    visited = 0
    while visited < len(pairs):
        x, y = pairs[visited]
        visited += 1
        for child in children(x, y):
            if child[0] <= L:
                pairs.append(child)

    pairs.extend(BOUNDARY_PAIRS)
    return np.array(pairs, dtype=dtype)


def count_coprime_pairs(limit: int) -> int:
    """
    Count pairs limit >= x >= y >= 0 with gcd(x, y) = 1 by brute force.

    Used to cross-check coprime_pairs. O(limit^2) memory; small limits only.
    Follows the same convention as coprime_pairs for limit <= 0.
    """
    if limit <= 0:
        return 0
    x, y = np.tril_indices(limit + 1)
    return int(np.count_nonzero(np.gcd(x, y) == 1))
