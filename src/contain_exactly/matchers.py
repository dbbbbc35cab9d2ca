"""Compatibility predicates between expected and actual items"""


import abc
import re
from typing import Any, Callable, Optional, Tuple, Type


# The type of a compiled regular expression
_REGEX_TYPE = type(re.compile(''))


class Matcher(abc.ABC):
    """Pattern which decides whether an actual item is acceptable

    A Matcher may be placed among the expected items in place of a concrete
    value. The expected item is then compatible with any actual item which
    the Matcher accepts, rather than only with an equal value.
    """

    @abc.abstractmethod
    def match(self, item: Any) -> bool:
        """Returns true if the item is accepted by this Matcher false if not"""

    @property
    @abc.abstractmethod
    def description(self) -> str:
        """Short text used to show this Matcher in failure messages"""

    def __repr__(self) -> str:
        return self.description


class Pattern(Matcher):
    """Accept strings in which the regular expression can be found"""

    def __init__(self, regex: Any):
        if isinstance(regex, _REGEX_TYPE):
            self._regex = regex
        else:
            self._regex = re.compile(regex)

    def match(self, item: Any) -> bool:
        if not isinstance(item, str):
            return False
        return self._regex.search(item) is not None

    @property
    def description(self) -> str:
        return f'/{self._regex.pattern}/'


class InstanceOf(Matcher):
    """Accept any instance of one of the given types"""

    def __init__(self, *types: Type):
        if len(types) == 0:
            raise ValueError('InstanceOf needs at least one type')
        self._types: Tuple[Type, ...] = types

    def match(self, item: Any) -> bool:
        return isinstance(item, self._types)

    @property
    def description(self) -> str:
        names = ' or '.join(t.__name__ for t in self._types)
        return f'an instance of {names}'


class Satisfies(Matcher):
    """Accept any item for which the predicate returns a true value"""

    def __init__(self,
                 predicate: Callable[[Any], Any],
                 description: Optional[str] = None):
        self._predicate = predicate
        if description is None:
            description = 'satisfying ' + getattr(predicate,
                                                  '__name__',
                                                  repr(predicate))
        self._description = description

    def match(self, item: Any) -> bool:
        return bool(self._predicate(item))

    @property
    def description(self) -> str:
        return self._description


class AnyOf(Matcher):
    """Accept an item compatible with any of several expected values"""

    def __init__(self, *alternatives: Any):
        self._alternatives = alternatives

    def match(self, item: Any) -> bool:
        return any(values_match(alt, item) for alt in self._alternatives)

    @property
    def description(self) -> str:
        return 'any of ' + ', '.join(map(repr, self._alternatives))


def values_match(expected: Any, actual: Any) -> bool:
    """Decide whether an expected item is compatible with an actual item

    The expected item is first given the chance to act as a pattern: a
    Matcher, a compiled regular expression, a type or a range. Whatever the
    outcome of that, plain equality is the fallback, so that two identical
    regular expressions (or two identical types) are still compatible.

    This is called once per pairing of expected and actual items, so it
    avoids anything more elaborate than these checks.
    """

    if isinstance(expected, Matcher):
        if expected.match(actual):
            return True
    elif isinstance(expected, _REGEX_TYPE):
        if isinstance(actual, str) and expected.search(actual) is not None:
            return True
    elif isinstance(expected, type):
        if isinstance(actual, expected):
            return True
    elif isinstance(expected, range):
        if actual in expected:
            return True

    return bool(actual == expected)
