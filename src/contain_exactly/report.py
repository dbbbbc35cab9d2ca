"""Human-readable rendering of containment results"""


from typing import Any, Iterable, List

from .matchers import Matcher
from .model import ContainmentResult


def safe_sort(items: Iterable[Any]) -> List[Any]:
    """Sort a copy of the items, or keep their order if they can't be sorted"""
    items = list(items)
    try:
        return sorted(items)
    # Ordering may fail in any way (e.g., Decimal NaN raises InvalidOperation)
    # pylint: disable-next=broad-exception-caught
    except Exception:
        return items


def describe(item: Any) -> str:
    """Matchers are shown by their description and everything else by repr"""
    if isinstance(item, Matcher):
        return item.description
    return repr(item)


def to_sentence(items: Iterable[Any]) -> str:
    """Render items as " a", " a and b" or " a, b, and c" (or "")"""

    words = [describe(item) for item in items]
    if len(words) == 0:
        return ""
    if len(words) == 1:
        return " " + words[0]
    if len(words) == 2:
        return f" {words[0]} and {words[1]}"
    return " " + ", ".join(words[:-1]) + ", and " + words[-1]


def description(expected: Iterable[Any]) -> str:
    """Describe the expectation itself (e.g., contain exactly 1 and 2)"""
    return "contain exactly" + to_sentence(expected)


def _render(items: Iterable[Any]) -> str:
    return "[" + ", ".join(describe(item) for item in safe_sort(items)) + "]"


def failure_message(result: ContainmentResult) -> str:
    """Explain why a ContainmentResult did not match

    Each collection is shown sorted (when its items can be sorted) so that
    the missing and extra items are easy to spot. Empty missing or extra
    sections are left out entirely.
    """

    if result.conversion_error is not None:
        return result.conversion_error

    message = f"expected collection contained:  {_render(result.expected or [])}\n"
    message += f"actual collection contained:    {_render(result.actual or [])}\n"
    if len(result.missing_items) > 0:
        message += f"the missing elements were:      {_render(result.missing_items)}\n"
    if len(result.extra_items) > 0:
        message += f"the extra elements were:        {_render(result.extra_items)}\n"
    return message


def failure_message_when_negated() -> str:
    """There is no sensible negation of "contain exactly" to report on"""
    return "`contain_exactly` does not support negation"
