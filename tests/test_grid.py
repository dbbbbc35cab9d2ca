"""Unit testing for the compatibility grid builder"""


import re
from unittest import TestCase
from unittest.mock import Mock

import contain_exactly.grid


class BuildCompatibilityGridTestCase(TestCase):
    """Ensure that both mappings describe the same compatibility relation"""

    def test_equality_grid(self):
        """Plain values are compatible with their equals"""

        grid = contain_exactly.grid.build_compatibility_grid([1, 2, 2],
                                                             [2, 3, 1])

        self.assertEqual({0: [2], 1: [0], 2: [0]}, grid.expected_to_actual)
        self.assertEqual({0: [1, 2], 1: [], 2: [0]}, grid.actual_to_expected)

    def test_pattern_grid(self):
        """Patterns among the expected items may match several actuals"""

        grid = contain_exactly.grid.build_compatibility_grid(
                [re.compile('foo'), re.compile('fool')],
                ['fool', 'food']
        )

        self.assertEqual({0: [0, 1], 1: [0]}, grid.expected_to_actual)
        self.assertEqual({0: [0, 1], 1: [0]}, grid.actual_to_expected)

    def test_empty_expected(self):
        """Actual items still get (empty) entries when nothing is expected"""

        grid = contain_exactly.grid.build_compatibility_grid([], ['a', 'b'])

        self.assertEqual({}, grid.expected_to_actual)
        self.assertEqual({0: [], 1: []}, grid.actual_to_expected)

    def test_empty_actual(self):
        """Expected items still get (empty) entries when nothing is actual"""

        grid = contain_exactly.grid.build_compatibility_grid(['a'], [])

        self.assertEqual({0: []}, grid.expected_to_actual)
        self.assertEqual({}, grid.actual_to_expected)

    def test_predicate_called_for_every_pair(self):
        """The predicate is a black box consulted n*m times, expected first"""

        compatible = Mock(side_effect=lambda e, a: e == a.upper())
        grid = contain_exactly.grid.build_compatibility_grid(['A', 'B'],
                                                             ['b', 'a', 'c'],
                                                             compatible)

        self.assertEqual(6, compatible.call_count)
        self.assertEqual(('A', 'b'), compatible.call_args_list[0][0])
        self.assertEqual(('B', 'c'), compatible.call_args_list[-1][0])
        self.assertEqual({0: [1], 1: [0]}, grid.expected_to_actual)
        self.assertEqual({0: [1], 1: [0], 2: []}, grid.actual_to_expected)

    def test_predicate_errors_propagate(self):
        """Problems inside of the predicate are not hidden"""

        compatible = Mock(side_effect=KeyError('boom'))
        with self.assertRaises(KeyError):
            contain_exactly.grid.build_compatibility_grid([1], [1], compatible)
