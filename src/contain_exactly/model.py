"""Result types which are shared by the different components

The NamedTuple class instances defined here are immutable: every field is a
tuple (or an immutable scalar), and a "better" Solution replaces a worse one
by being returned, never by modifying the worse one in place. The lists
inside of a ContainmentResult are fresh copies made for that result.
"""


from typing import Any, List, NamedTuple, Optional, Tuple


class Solution(NamedTuple):
    """Outcome of categorizing and pairing the expected and actual indexes"""

    # Expected indexes for which no compatible actual item remains
    unmatched_expected_indexes: Tuple[int, ...]

    # Actual indexes for which no compatible expected item remains
    unmatched_actual_indexes: Tuple[int, ...]

    # Expected indexes whose pairing can only be decided by searching
    indeterminate_expected_indexes: Tuple[int, ...]

    # Actual indexes whose pairing can only be decided by searching
    indeterminate_actual_indexes: Tuple[int, ...]

    # Every (expected index, actual index) pair made so far, either because
    # the two items reciprocally matched only each other or because the
    # search decided to pair them
    pairings: Tuple[Tuple[int, int], ...] = ()

    @property
    def candidate(self) -> bool:
        """Whether every index has been decided (nothing is indeterminate)"""
        return (len(self.indeterminate_expected_indexes) == 0 and
                len(self.indeterminate_actual_indexes) == 0)

    @property
    def ideal(self) -> bool:
        """Whether this candidate left nothing unmatched on at least one side

        No other pairing can do better than an ideal Solution, because every
        item on the smaller side has already been paired.
        """
        return self.candidate and (
            len(self.unmatched_expected_indexes) == 0 or
            len(self.unmatched_actual_indexes) == 0
        )

    @property
    def unmatched_item_count(self) -> int:
        """Total number of missing and extra items"""
        return (len(self.unmatched_expected_indexes) +
                len(self.unmatched_actual_indexes))

    def worse_than(self, other: 'Solution') -> bool:
        """Returns true if this Solution leaves more items unmatched"""
        return self.unmatched_item_count > other.unmatched_item_count

    def combine(self,
                derived: 'Solution',
                pairing: Tuple[int, int]) -> 'Solution':
        """Merge the Solution of a subproblem into this one

        The subproblem was derived from this Solution by pairing up one
        indeterminate expected index with one indeterminate actual index. By
        the time the subproblem has been solved, every indeterminate index
        has been dealt with, so the indeterminate tuples are left empty.
        """
        return Solution(
            self.unmatched_expected_indexes + derived.unmatched_expected_indexes,
            self.unmatched_actual_indexes + derived.unmatched_actual_indexes,
            (),
            (),
            self.pairings + (pairing,) + derived.pairings
        )


class ContainmentResult(NamedTuple):
    """Representation of one order-insensitive comparison of two collections"""

    # Whether every expected item was paired with a compatible actual item
    # and vice versa
    matched: bool

    # The expected collection viewed as a list (or None if that failed)
    expected: Optional[List[Any]]

    # The actual collection viewed as a list (or None if that failed)
    actual: Optional[List[Any]]

    # Expected items which could not be paired with any actual item
    missing_items: List[Any]

    # Actual items which could not be paired with any expected item
    extra_items: List[Any]

    # The best pairing found by the search, or None if the search was not
    # needed (sorted comparison succeeded) or not possible (bad input)
    solution: Optional[Solution] = None

    # Explanation of why an input could not be viewed as a list (or None)
    conversion_error: Optional[str] = None
