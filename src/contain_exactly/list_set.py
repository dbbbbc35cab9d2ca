"""Set arithmetic on an unhashable List object"""


from operator import eq
from typing import Any, Callable, List, Tuple

from .grid import build_compatibility_grid
from .maximizer import find_best_solution
from .model import Solution


def _pair_up(list_a: List[Any],
             list_b: List[Any],
             compatible: Callable[[Any, Any], bool]) -> Solution:
    grid = build_compatibility_grid(list_a, list_b, compatible)
    return find_best_solution(grid.expected_to_actual, grid.actual_to_expected)


def compare_list_sets(list_a: List[Any],
                      list_b: List[Any],
                      compatible: Callable[[Any, Any], bool] = eq) -> bool:
    """Compare two "sets" which are actually just Lists of unhashable objects

    A frequent pattern, both in test suites and in the code under test, is to
    have two "sets" of elements which are actually just Lists. We want to
    compare the two "sets" to check whether they are equivalent. The elements
    inside of the sets are comparable (e.g., they implement __eq__) but they
    are either mutable or otherwise not hashable, and so they cannot be
    thrown into a native set() and compared that way.

    Duplicates count: [1, 1, 2] and [1, 2, 2] are not equivalent.
    """

    if len(list_a) != len(list_b):
        return False

    return _pair_up(list_a, list_b, compatible).unmatched_item_count == 0


def matchup_list_sets(
        list_a: List[Any],
        list_b: List[Any],
        compatible: Callable[[Any, Any], bool] = eq
) -> List[Tuple[Any, Any]]:
    """Pair up the elements of two "sets" which are actually just Lists

    Each element of list_a is paired with at most one compatible element of
    list_b, and vice versa, such that as many elements as possible are
    paired. The pairs come back in list_a order. Comparing the number of
    pairs with the lengths of the two lists tells whether the "sets" are
    equivalent; the pairs themselves allow a closer inspection.
    """

    solution = _pair_up(list_a, list_b, compatible)
    return [(list_a[index_a], list_b[index_b])
            for index_a, index_b in sorted(solution.pairings)]


def list_set_difference(
        list_a: List[Any],
        list_b: List[Any],
        compatible: Callable[[Any, Any], bool] = eq
) -> Tuple[List[Any], List[Any]]:
    """Find the elements left over after pairing up two "sets" of Lists

    Returns the elements of list_a without a partner in list_b, and the
    elements of list_b without a partner in list_a, each in original order.
    """

    solution = _pair_up(list_a, list_b, compatible)
    return ([list_a[index] for index in sorted(solution.unmatched_expected_indexes)],
            [list_b[index] for index in sorted(solution.unmatched_actual_indexes)])
