"""Main logic for the contain-exactly check and its command line"""


import argparse
from collections.abc import Iterable, Mapping
import json
import logging
import re
import sys
from typing import Any, Callable, List, Optional

from contain_exactly.exception import (ContainExactlyError, InputFileError,
                                       SequenceConversionError)
import contain_exactly.config
import contain_exactly.grid
import contain_exactly.matchers
import contain_exactly.maximizer
from contain_exactly.model import ContainmentResult
import contain_exactly.report


logger = logging.getLogger(__name__)


# Expected strings which look like /this/ are patterns when enabled
PATTERN_STRING = re.compile(r'^/(.+)/$', re.DOTALL)


def convert_to_sequence(value: Any, side: str = "input") -> List[Any]:
    """View a collection as an ordered, indexable list

    Mappings become a list of their (key, value) items. Strings and bytes
    are iterable but are single values rather than collections of
    characters, so they are rejected along with anything not iterable. The
    side names the rejected value (e.g., "expected") in the error message.
    """

    if isinstance(value, (str, bytes, bytearray)):
        raise SequenceConversionError(f"expected the {side} value to be a "
                                      f"collection that can be converted to "
                                      f"a list, but got {value!r}")
    if isinstance(value, Mapping):
        return list(value.items())
    if isinstance(value, Iterable):
        return list(value)
    raise SequenceConversionError(f"expected the {side} value to be a "
                                  f"collection that can be converted to a "
                                  f"list, but got {value!r}")


def match_when_sorted(expected: List[Any],
                      actual: List[Any],
                      compatible: Callable[[Any, Any], bool]) -> bool:
    """Cheap check for a perfect pairing between the sorted collections

    This cannot always work (e.g., when the items are unsortable, or when
    the expected items are patterns), but it's practically free compared to
    searching for the best pairing and it works in the common cases. A
    True result is definitive; a False result means nothing.
    """

    if len(expected) != len(actual):
        return False

    sorted_expected = contain_exactly.report.safe_sort(expected)
    sorted_actual = contain_exactly.report.safe_sort(actual)
    return all(compatible(e, a) for e, a in zip(sorted_expected, sorted_actual))


def check_contains_exactly(
        expected: Any,
        actual: Any,
        compatible: Callable[[Any, Any], bool] = contain_exactly.matchers.values_match,
        sorted_shortcut: bool = True
) -> ContainmentResult:
    """Check whether two collections contain the same items in any order

    Each expected item must be paired with exactly one compatible actual
    item, and vice versa. If that's not possible, the result reports the
    missing (expected) and extra (actual) items of the pairing which leaves
    the fewest items unpaired. An input which is not a collection makes the
    check fail rather than raise.
    """

    try:
        expected_list = convert_to_sequence(expected, "expected")
    except SequenceConversionError as err:
        logger.debug('Expected value is unusable: %s', err.message)
        return ContainmentResult(matched=False,
                                 expected=None,
                                 actual=None,
                                 missing_items=[],
                                 extra_items=[],
                                 conversion_error=err.message)

    try:
        actual_list = convert_to_sequence(actual, "actual")
    except SequenceConversionError as err:
        logger.debug('Actual value is unusable: %s', err.message)
        return ContainmentResult(matched=False,
                                 expected=expected_list,
                                 actual=None,
                                 missing_items=[],
                                 extra_items=[],
                                 conversion_error=err.message)

    if sorted_shortcut and match_when_sorted(expected_list,
                                             actual_list,
                                             compatible):
        logger.debug('Sorted comparison paired all %d items',
                     len(expected_list))
        return ContainmentResult(matched=True,
                                 expected=expected_list,
                                 actual=actual_list,
                                 missing_items=[],
                                 extra_items=[])

    grid = contain_exactly.grid.build_compatibility_grid(expected_list,
                                                         actual_list,
                                                         compatible)
    solution = contain_exactly.maximizer.find_best_solution(
            grid.expected_to_actual,
            grid.actual_to_expected
    )

    return ContainmentResult(
            matched=(solution.unmatched_item_count == 0),
            expected=expected_list,
            actual=actual_list,
            missing_items=[expected_list[index]
                           for index in solution.unmatched_expected_indexes],
            extra_items=[actual_list[index]
                         for index in solution.unmatched_actual_indexes],
            solution=solution
    )


def compile_patterns(expected: List[Any]) -> List[Any]:
    """Replace the /regex/ strings among the expected items with Patterns"""

    compiled: List[Any] = []
    for item in expected:
        pattern_match = None
        if isinstance(item, str):
            pattern_match = PATTERN_STRING.match(item)
        if pattern_match is None:
            compiled.append(item)
            continue
        try:
            compiled.append(contain_exactly.matchers.Pattern(
                    pattern_match.group(1)
            ))
        except re.error as err:
            raise InputFileError(f'invalid pattern {item}: {err}') from err
    return compiled


def load_json_file(path: str, open_func: Callable = open) -> Any:
    """Read one JSON document from the file at path"""

    try:
        with open_func(path, "r") as json_f:
            return json.load(json_f)
    except OSError as err:
        raise InputFileError(f'Could not read {path}: {err}') from err
    except ValueError as err:
        raise InputFileError(f'Could not parse JSON from {path}: '
                             f'{err}') from err


def main(argv: Optional[List[str]] = None) -> int:
    """Compare two JSON documents as unordered collections

    Returns the exit status: 0 when the collections contain exactly the same
    items, 1 when they don't, and 2 when the inputs couldn't be prepared.
    """

    parser = argparse.ArgumentParser(
            prog='contain-exactly',
            description=("Check that two JSON documents hold the same "
                         "collection of items, in any order, and report "
                         "the missing and extra items if they don't.")
    )
    parser.add_argument('expected',
                        help="JSON file holding the expected collection")
    parser.add_argument('actual',
                        help="JSON file holding the actual collection")
    parser.add_argument('-v', '--verbose', action='store_true',
                        help="Increase verbosity to incorporate debug logs")
    parser.add_argument('-c', '--config-file', action='store',
                        default=None,
                        help="Override the location of the configuration INI "
                             "format file (default: "
                             f"{contain_exactly.config.DEFAULT_CONFIG_FILE})")
    parser.add_argument('-p', '--patterns', action='store_true',
                        default=None,
                        help="Treat expected strings like /regex/ as "
                             "patterns rather than literal strings")
    parser.add_argument('--no-sorted-shortcut', action='store_false',
                        dest='sorted_shortcut', default=None,
                        help="Always search for the best pairing, without "
                             "first trying a sorted comparison")

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.WARNING)

    try:
        if args.config_file is None:
            settings = contain_exactly.config.load_settings(
                    contain_exactly.config.DEFAULT_CONFIG_FILE
            )
        else:
            settings = contain_exactly.config.load_settings(args.config_file,
                                                            required=True)
        if args.patterns is not None:
            settings = settings._replace(patterns=args.patterns)
        if args.sorted_shortcut is not None:
            settings = settings._replace(sorted_shortcut=args.sorted_shortcut)

        expected = load_json_file(args.expected)
        actual = load_json_file(args.actual)
        if settings.patterns and isinstance(expected, list):
            expected = compile_patterns(expected)
    except ContainExactlyError as err:
        logger.error('Problem while preparing the comparison: %s',
                     err.message)
        return 2

    result = check_contains_exactly(expected,
                                    actual,
                                    sorted_shortcut=settings.sorted_shortcut)
    if result.matched:
        logger.debug('Collections matched: %s',
                     contain_exactly.report.description(result.expected or []))
        return 0

    print(contain_exactly.report.failure_message(result), end='')
    return 1


if __name__ == "__main__":
    sys.exit(main())
