"""Query nodes that implement filtering of records.

A common request in queries is to filter the data to
pick only the records that respect a specific condition.
An example is the ``WHERE`` condition in SQL queries.

This module implements the basic filtering capabilities.
"""

from collections.abc import Sequence
from typing import Any

from .base import QueryNode, Record, check_field_name
from .operators import MISSING, get_predicate


class FilterNode(QueryNode):
    """Filter records comparing one of their fields with a value.

    The filter expects the name of the field to compare,
    the operator used for the comparison (see :mod:`selectquery.compute.operators`)
    and the value to compare against.
    Only the records for which the comparison is true are preserved,
    in the same order they were received.

    >>> records = [{"name": "Bob", "age": 30}, {"name": "Tom", "age": 18}]
    >>> FilterNode("age", ">=", 21).apply(records)
    [{'name': 'Bob', 'age': 30}]
    >>> FilterNode("name", "like", "O").apply(records)
    [{'name': 'Bob', 'age': 30}, {'name': 'Tom', 'age': 18}]
    """

    def __init__(self, key: str, operator: str, value: Any) -> None:
        """
        :param key: The name of the field to compare.
        :param operator: The comparison operator.
        :param value: The value to compare the field against.
        """
        self.key = check_field_name(key)
        self.operator = operator
        self.value = value
        # Unknown operators must fail even when there are no records.
        self.predicate = get_predicate(operator)

    def __str__(self) -> str:
        return f"FilterNode({self.key} {self.operator} {self.value!r})"

    def apply(self, records: Sequence[Record]) -> list[Record]:
        """Keep only the records whose field satisfies the comparison.

        A missing field is not the same as a ``None`` value:
        it is never equal to anything, so ``!==`` always
        keeps the record, while all other operators drop it.

        >>> FilterNode("age", "===", None).apply([{"age": None}, {}])
        [{'age': None}]
        """
        return [
            record
            for record in records
            if self.predicate(record.get(self.key, MISSING), self.value)
        ]
