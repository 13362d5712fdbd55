"""Support limiting or skipping records in a query.

Implements nodes whose purpose is to slice the records
of a query, discarding the ones that are not part of
the selected slice.

Paginating is the combination of the two::

    OffsetNode((page - 1) * size) -> LimitNode(size)
"""

from collections.abc import Sequence

from ..errors import RangeError
from .base import QueryNode, Record, check_integer


class LimitNode(QueryNode):
    """Keep only the first records.

    When there are fewer records than the limit,
    all of them are kept.

    >>> LimitNode(2).apply([{"id": 1}, {"id": 2}, {"id": 3}])
    [{'id': 1}, {'id': 2}]
    >>> LimitNode(0)
    Traceback (most recent call last):
        ...
    selectquery.errors.RangeError: Limit must be a positive number.
    """

    def __init__(self, limit: int) -> None:
        """
        :param limit: The maximum number of records to keep, must be positive.
        """
        self.limit = check_integer(limit, "Limit")
        if self.limit <= 0:
            raise RangeError("Limit must be a positive number.")

    def __str__(self) -> str:
        return f"LimitNode({self.limit})"

    def apply(self, records: Sequence[Record]) -> list[Record]:
        return list(records[: self.limit])


class OffsetNode(QueryNode):
    """Skip the first records.

    The offset must point to an existing record,
    so skipping all the records is not allowed and
    any offset on an empty list of records is out of range.

    For example with 3 records::

        offset=0: keep all records
        offset=2: keep only the last record
        offset=3: out of range

    >>> OffsetNode(1).apply([{"id": 1}, {"id": 2}, {"id": 3}])
    [{'id': 2}, {'id': 3}]
    >>> OffsetNode(3).apply([{"id": 1}, {"id": 2}, {"id": 3}])
    Traceback (most recent call last):
        ...
    selectquery.errors.RangeError: Offset is out of range.
    """

    def __init__(self, offset: int) -> None:
        """
        :param offset: How many records to skip, first record is 0.
        """
        self.offset = check_integer(offset, "Offset")

    def __str__(self) -> str:
        return f"OffsetNode({self.offset})"

    def apply(self, records: Sequence[Record]) -> list[Record]:
        if self.offset < 0 or self.offset >= len(records):
            raise RangeError("Offset is out of range.")
        return list(records[self.offset :])
