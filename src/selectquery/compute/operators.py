"""Comparison operators supported when filtering records.

Filtering compares the value of a field of each record
with a value provided by the user. How the two values are
compared is decided by the operator, which is one of
a closed set of tokens:

========= ================================================
Operator  Meaning
========= ================================================
``===``   Equal, both in value and type.
``!==``   Not equal, the negation of ``===``.
``<``     Less than.
``<=``    Less than or equal.
``>``     Greater than.
``>=``    Greater than or equal.
``like``  Case insensitive "contains".
``^like`` Case insensitive "starts with".
``like$`` Case insensitive "ends with".
========= ================================================

``=`` is also accepted as an alias of ``===``,
but it is not listed by :func:`get_operators`.

Each operator is implemented by a predicate function
receiving the value of the record field first and
the value provided by the user second:

>>> get_predicate("like")("Hello World", "WORLD")
True
>>> get_predicate("<")(None, 5)
False
"""

import numbers
from decimal import Decimal
from typing import Any, Callable

from ..errors import UnknownOperatorError

__all__ = ("OPERATORS", "MISSING", "get_operators", "get_predicate")


class _Missing:
    """Value of a field that the record doesn't have."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


def is_missing(value: Any) -> bool:
    """If the value is absent, either a missing field or ``None``."""
    return value is None or value is MISSING


def is_number(value: Any) -> bool:
    """If the value is a real number.

    ``bool`` is a subclass of ``int`` in Python,
    but a boolean is never considered a number here.
    """
    return isinstance(value, (numbers.Real, Decimal)) and not isinstance(value, bool)


def equal(left: Any, right: Any) -> bool:
    """Strict equality, values must be of the same type to be equal.

    Numbers are the exception, as ``1`` and ``1.0`` are the same number.
    A missing field is never equal to anything, not even ``None``.

    >>> equal(1, 1.0)
    True
    >>> equal(1, True)
    False
    >>> equal("1", 1)
    False
    >>> equal(MISSING, None)
    False
    """
    if is_number(left) and is_number(right):
        return left == right
    return type(left) is type(right) and left == right


def not_equal(left: Any, right: Any) -> bool:
    return not equal(left, right)


# Absent values can't be ordered, so they never match
# an ordering comparison.
def less_than(left: Any, right: Any) -> bool:
    return not is_missing(left) and left < right


def less_equal(left: Any, right: Any) -> bool:
    return not is_missing(left) and left <= right


def greater_than(left: Any, right: Any) -> bool:
    return not is_missing(left) and left > right


def greater_equal(left: Any, right: Any) -> bool:
    return not is_missing(left) and left >= right


def to_text(value: Any) -> str:
    """Lowercase text representation of a value for the ``like`` operators."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value).lower()


def contains(left: Any, right: Any) -> bool:
    if is_missing(left) or right is None:
        return False
    return to_text(right) in to_text(left)


def starts_with(left: Any, right: Any) -> bool:
    if is_missing(left) or right is None:
        return False
    return to_text(left).startswith(to_text(right))


def ends_with(left: Any, right: Any) -> bool:
    if is_missing(left) or right is None:
        return False
    return to_text(left).endswith(to_text(right))


OPERATORS_MAP: dict[str, Callable[[Any, Any], bool]] = {
    "===": equal,
    "!==": not_equal,
    "<": less_than,
    "<=": less_equal,
    ">": greater_than,
    ">=": greater_equal,
    "like": contains,
    "^like": starts_with,
    "like$": ends_with,
}

ALIASES = {"=": "==="}

OPERATORS = tuple(OPERATORS_MAP)


def get_operators() -> tuple[str, ...]:
    """The operators that can be used to filter records, in canonical order.

    >>> get_operators()
    ('===', '!==', '<', '<=', '>', '>=', 'like', '^like', 'like$')
    """
    return OPERATORS


def get_predicate(operator: str) -> Callable[[Any, Any], bool]:
    """Get the predicate function implementing an operator.

    :param operator: One of the tokens returned by :func:`get_operators`.
    :raises UnknownOperatorError: if the operator is not supported.
    """
    try:
        return OPERATORS_MAP[ALIASES.get(operator, operator)]
    except (KeyError, TypeError):
        raise UnknownOperatorError(f"Unknown operator: {operator}") from None
