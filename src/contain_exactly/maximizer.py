"""Maximize the pairings between expected and actual items

Once expected items are allowed to be patterns, the first compatible actual
item is not necessarily the right partner. Consider the expected items
[/foo/, /fool/] against the actual items ["fool", "food"]: pairing /foo/
with "fool" (the first item it accepts) leaves /fool/ and "food" unmatched,
even though /fool/ <-> "fool" and /foo/ <-> "food" pairs everything. When one
expected pattern accepts a superset of what another accepts, every possible
pairing has to be considered.

The search here is brute force, but the problem is reduced before any
branching happens:

  * Items which are compatible with nothing on the other side are
    immediately recorded as unmatched.
  * Items which are reciprocally compatible only with each other are paired
    and not considered further.

Only the remaining "indeterminate" items are searched, depth-first, looking
for a pairing which leaves nothing unmatched on at least one side or, failing
that, the pairing which leaves the fewest items unmatched.
"""


import logging
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from .model import Solution


logger = logging.getLogger(__name__)


class PairingsMaximizer:
    """Depth-first search over the indeterminate part of one (sub)problem

    Each instance owns the candidate mappings for one branch of the search.
    Subproblems are solved by new instances built from freshly derived
    mappings, so sibling branches never see each other's changes.
    """

    def __init__(self,
                 expected_to_actual: Mapping[int, Sequence[int]],
                 actual_to_expected: Mapping[int, Sequence[int]]):
        self._expected_to_actual = expected_to_actual
        self._actual_to_expected = actual_to_expected

        unmatched_expected, indeterminate_expected, pairings = \
            categorize_indexes(expected_to_actual, actual_to_expected)

        # The resolved pairs are the same when seen from the actual side, so
        # only the ones found from the expected side are kept
        unmatched_actual, indeterminate_actual, _ = \
            categorize_indexes(actual_to_expected, expected_to_actual)

        self.solution = Solution(
            unmatched_expected_indexes=tuple(unmatched_expected),
            unmatched_actual_indexes=tuple(unmatched_actual),
            indeterminate_expected_indexes=tuple(indeterminate_expected),
            indeterminate_actual_indexes=tuple(indeterminate_actual),
            pairings=tuple(pairings)
        )

    def find_best_solution(self) -> Solution:
        """Return the candidate Solution with the fewest unmatched items"""

        if self.solution.candidate:
            return self.solution

        if len(self.solution.indeterminate_expected_indexes) == 0:
            return self._exhausted_solution()

        best_solution_so_far: Optional[Solution] = None

        # Some best pairing always pairs this index with one of its candidates
        expected_index = self.solution.indeterminate_expected_indexes[0]
        for actual_index in self._expected_to_actual[expected_index]:
            solution = self._best_solution_for_pairing(expected_index,
                                                       actual_index)
            if solution.ideal:
                return solution
            if best_solution_so_far is None or \
                    best_solution_so_far.worse_than(solution):
                best_solution_so_far = solution

        if best_solution_so_far is None:
            return self._exhausted_solution()
        return best_solution_so_far

    def _best_solution_for_pairing(self,
                                   expected_index: int,
                                   actual_index: int) -> Solution:
        """Solve the subproblem in which the two indexes are paired up"""

        modified_expecteds = apply_pairing_to(
                self.solution.indeterminate_expected_indexes,
                self._expected_to_actual,
                actual_index
        )
        modified_expecteds.pop(expected_index, None)

        modified_actuals = apply_pairing_to(
                self.solution.indeterminate_actual_indexes,
                self._actual_to_expected,
                expected_index
        )
        modified_actuals.pop(actual_index, None)

        derived = PairingsMaximizer(modified_expecteds,
                                    modified_actuals).find_best_solution()
        return self.solution.combine(derived, (expected_index, actual_index))

    def _exhausted_solution(self) -> Solution:
        """Give up on indeterminate indexes which have nothing to branch on

        This cannot happen when the two mappings mirror each other, because
        an indeterminate actual index always has an indeterminate expected
        index among its candidates.
        """
        return Solution(
            self.solution.unmatched_expected_indexes +
            self.solution.indeterminate_expected_indexes,
            self.solution.unmatched_actual_indexes +
            self.solution.indeterminate_actual_indexes,
            (),
            (),
            self.solution.pairings
        )


def categorize_indexes(
        indexes_to_categorize: Mapping[int, Sequence[int]],
        other_indexes: Mapping[int, Sequence[int]]
) -> Tuple[List[int], List[int], List[Tuple[int, int]]]:
    """Split one side's indexes into unmatched, indeterminate and resolved

    Returns the unmatched indexes, the indeterminate indexes, and the
    resolved (index, partner) pairs, each in the iteration order of
    indexes_to_categorize.
    """

    unmatched: List[int] = []
    indeterminate: List[int] = []
    resolved: List[Tuple[int, int]] = []

    for index, matches in indexes_to_categorize.items():
        if len(matches) == 0:
            unmatched.append(index)
        elif reciprocal_single_match(matches, index, other_indexes):
            resolved.append((index, matches[0]))
        else:
            indeterminate.append(index)

    return unmatched, indeterminate, resolved


def reciprocal_single_match(matches: Sequence[int],
                            index: int,
                            other_indexes: Mapping[int, Sequence[int]]) -> bool:
    """Whether the index and its only match are each other's only match"""

    if len(matches) != 1:
        return False
    return list(other_indexes.get(matches[0], ())) == [index]


def apply_pairing_to(indeterminates: Sequence[int],
                     original_matches: Mapping[int, Sequence[int]],
                     other_list_index: int) -> Dict[int, List[int]]:
    """Copy the candidate lists of the indeterminates without one partner"""

    return {
        index: [match for match in original_matches[index]
                if match != other_list_index]
        for index in indeterminates
    }


def find_best_solution(
        expected_to_actual: Mapping[int, Sequence[int]],
        actual_to_expected: Mapping[int, Sequence[int]]
) -> Solution:
    """Pair up as many expected and actual indexes as possible

    The two mappings must mirror each other: actual index a appears in
    expected_to_actual[e] exactly when e appears in actual_to_expected[a].
    The returned Solution has nothing indeterminate left in it; its
    unmatched indexes are the missing (expected) and extra (actual) items.
    """

    maximizer = PairingsMaximizer(expected_to_actual, actual_to_expected)
    logger.debug('Categorized %d expected and %d actual indexes: '
                 '%d resolved pairs, %d/%d unmatched, %d/%d indeterminate',
                 len(expected_to_actual),
                 len(actual_to_expected),
                 len(maximizer.solution.pairings),
                 len(maximizer.solution.unmatched_expected_indexes),
                 len(maximizer.solution.unmatched_actual_indexes),
                 len(maximizer.solution.indeterminate_expected_indexes),
                 len(maximizer.solution.indeterminate_actual_indexes))
    return maximizer.find_best_solution()
