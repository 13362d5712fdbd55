"""Base classes and interfaces for the compute nodes

This module defines the base components that are
necessary to represent an operation over a list of records
and execute it.
"""

import abc
from collections.abc import Mapping, Sequence
from typing import Any

Record = Mapping[str, Any]
"""A record is any mapping of field names to values, usually a ``dict``."""


class QueryNode(abc.ABC):
    """An operation that transforms a list of records.

    Every transformation that a :class:`selectquery.Query`
    supports is implemented by a node: the node is created
    with the arguments of the operation and then applied
    to the records the query wraps, producing the records
    of the next query in the chain::

        Query(records) -> FilterNode -> ProjectNode -> ...

    Nodes never modify the records they receive,
    they always return a new list.

    For example a node that just forwards the records
    after printing them can be implemented as::

        class DebugNode(QueryNode):
            def apply(self, records):
                for r in records:
                    print(r)
                return list(records)

            def __str__(self):
                return "DebugNode()"
    """

    @abc.abstractmethod
    def apply(self, records: Sequence[Record]) -> list[Record]:
        """Apply the operation to the records and return the result.

        Any validation that depends on the records themselves
        (like checking an offset against their number) happens
        here, before any record is read.
        """
        ...

    @abc.abstractmethod
    def __str__(self) -> str:
        """Human readable representation of the node."""
        ...


class Aggregation(abc.ABC):
    """Base class for operations reducing records to a single value.

    Contrary to :class:`QueryNode`, the result of an aggregation
    is not a list of records, so it ends the chain of operations.
    """

    def __init__(self, key: str) -> None:
        """
        :param key: The name of the field being aggregated.
        """
        self.key = check_field_name(key)

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.key})"

    __repr__ = __str__

    @abc.abstractmethod
    def compute(self, records: Sequence[Record]) -> Any: ...


def check_field_name(key: Any) -> str:
    """Ensure that the given field name can be used to access record fields.

    >>> check_field_name("age")
    'age'
    >>> check_field_name(3)
    Traceback (most recent call last):
        ...
    TypeError: Field name must be a string, got int
    """
    if not isinstance(key, str):
        raise TypeError(f"Field name must be a string, got {type(key).__name__}")
    return key


def check_integer(value: Any, name: str) -> int:
    """Ensure that a count provided by the user is an integer.

    Booleans are rejected even though they are integers in Python,
    as they are never meant to be a number of records.
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return value
