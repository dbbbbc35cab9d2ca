"""Pairwise compatibility between every expected and every actual item"""


from itertools import product
from typing import Any, Callable, Dict, List, NamedTuple, Sequence

from .matchers import values_match


# Mapping from an index on one side to the compatible indexes on the other
IndexMapping = Dict[int, List[int]]


class CompatibilityGrid(NamedTuple):
    """The bipartite compatibility relation, viewed from both sides"""

    # For each expected index, the actual indexes it is compatible with
    expected_to_actual: IndexMapping

    # For each actual index, the expected indexes it is compatible with
    actual_to_expected: IndexMapping


def build_compatibility_grid(
        expected: Sequence[Any],
        actual: Sequence[Any],
        compatible: Callable[[Any, Any], bool] = values_match
) -> CompatibilityGrid:
    """Evaluate the compatibility predicate for every expected/actual pair

    The predicate is called exactly len(expected) * len(actual) times, with
    the expected item first. Every index on both sides gets an entry in its
    mapping, even if the other side is empty, so that items without any
    compatible counterpart are reported rather than silently dropped. The
    candidate lists are in ascending index order.
    """

    expected_to_actual: IndexMapping = {ei: [] for ei in range(len(expected))}
    actual_to_expected: IndexMapping = {ai: [] for ai in range(len(actual))}

    for (ei, e), (ai, a) in product(enumerate(expected), enumerate(actual)):
        if compatible(e, a):
            expected_to_actual[ei].append(ai)
            actual_to_expected[ai].append(ei)

    return CompatibilityGrid(expected_to_actual=expected_to_actual,
                             actual_to_expected=actual_to_expected)
