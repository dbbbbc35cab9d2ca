"""Assertion helpers built on the contain-exactly check"""


from typing import Any, Callable, Optional

from contain_exactly.main import check_contains_exactly
from contain_exactly.matchers import values_match
from contain_exactly.model import ContainmentResult
import contain_exactly.report


def assert_contains_exactly(expected: Any,
                            actual: Any,
                            compatible: Callable[[Any, Any], bool] = values_match,
                            msg: Optional[str] = None,
                            sorted_shortcut: bool = True) -> ContainmentResult:
    """Raise AssertionError unless both collections hold the same items

    The failure message lists the missing and extra items. On success, the
    ContainmentResult is returned; its solution (and so its pairings) is only
    filled in when sorted_shortcut is False or the sorted comparison failed.
    """

    result = check_contains_exactly(expected,
                                    actual,
                                    compatible,
                                    sorted_shortcut=sorted_shortcut)
    if not result.matched:
        message = contain_exactly.report.failure_message(result)
        if msg is not None:
            message = f"{msg}\n{message}"
        raise AssertionError(message)
    return result


class ContainExactlyMixin:
    """Mix into a unittest.TestCase to gain assertContainsExactly

    Unlike assertCountEqual, the expected items may be patterns (Matchers,
    regular expressions, types or ranges) and the failure message reports
    the missing and extra items of the best possible pairing.
    """

    # Set to False on a TestCase to always search for the best pairing
    sorted_shortcut: bool = True

    def assertContainsExactly(self,
                              expected: Any,
                              actual: Any,
                              msg: Optional[str] = None,
                              compatible: Callable[[Any, Any], bool] = values_match):
        """Fail unless actual holds exactly the expected items, in any order"""

        result = check_contains_exactly(expected,
                                        actual,
                                        compatible,
                                        sorted_shortcut=self.sorted_shortcut)
        if not result.matched:
            standard_msg = contain_exactly.report.failure_message(result)
            # pylint: disable-next=no-member
            self.fail(self._formatMessage(msg, standard_msg))

    def assertNotContainsExactly(self,
                                 expected: Any,
                                 actual: Any,
                                 msg: Optional[str] = None,
                                 compatible: Callable[[Any, Any], bool] = values_match):
        """Fail if actual holds exactly the expected items, in any order

        There is no meaningful report of what "should not" have matched, so
        the failure message only says that negation isn't supported.
        """

        result = check_contains_exactly(expected,
                                        actual,
                                        compatible,
                                        sorted_shortcut=self.sorted_shortcut)
        if result.matched:
            standard_msg = contain_exactly.report.failure_message_when_negated()
            # pylint: disable-next=no-member
            self.fail(self._formatMessage(msg, standard_msg))
