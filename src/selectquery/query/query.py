"""The Query object itself."""

import logging
from collections.abc import Iterator, Mapping, Sequence
from typing import Any, Self

import pyarrow as pa

from ..compute import (
    FilterNode,
    KeyByAggregation,
    LimitNode,
    OffsetNode,
    ProjectNode,
    SumAggregation,
)
from ..compute.base import QueryNode, Record
from ..compute.operators import get_operators
from ..errors import ValidationError
from ..utils.tabulate import DEFAULT_MAX_ROWS, tabulate, tabulate_records

log = logging.getLogger(__name__)


class Query:
    """Immutable sequence of records with chainable operations.

    The Query object wraps an ordered sequence of records
    and allows to filter, paginate, project and aggregate them.

    Operations like :meth:`where` or :meth:`limit` never modify
    the query, they return a new Query with the resulting records.
    Operations like :meth:`sum` or :meth:`key_by` return a plain value
    and end the chain.

    >>> users = [
    ...     {"id": 1, "name": "Bob", "age": 30},
    ...     {"id": 2, "name": "Tom", "age": 20},
    ...     {"id": 3, "name": "Sam", "age": 20},
    ... ]
    >>> Query(users).where("age", "===", 20).sum("age")
    40
    >>> Query(users).where("age", "===", 20).select("id").get()
    [{'id': 2}, {'id': 3}]
    >>> print(Query(users).where("name", "^like", "b"))
    id | name | age
    -- | ---- | ---
    1  | Bob  | 30
    """

    __slots__ = ("_records",)

    def __init__(self, collection: Sequence[Record]) -> None:
        """
        :param collection: A sequence (like a ``list``) of records,
                           each record being a mapping (like a ``dict``).
                           The sequence is copied, so changing it
                           afterwards doesn't affect the query.
        :raises ValidationError: when the collection is not a sequence of records.
        """
        if not is_record_sequence(collection):
            log.debug("Rejected collection of type %s", type(collection).__name__)
            raise ValidationError("The collection should be a sequence of records.")

        self._records: tuple[Record, ...] = tuple(collection)

    @classmethod
    def _from_records(cls, records: Sequence[Record]) -> Self:
        # Records emitted by the compute nodes are already known to be valid.
        query = cls.__new__(cls)
        query._records = tuple(records)
        return query

    @classmethod
    def from_arrow(cls, data: pa.Table | pa.RecordBatch) -> Self:
        """Create a Query out of the rows of a pyarrow Table or RecordBatch.

        Each row becomes a ``dict`` record, null values become ``None``.

        :param data: The table or recordbatch with the data to query.
        """
        if not isinstance(data, (pa.Table, pa.RecordBatch)):
            raise ValidationError(
                "Invalid input, expected a PyArrow Table or RecordBatch"
            )
        return cls(data.to_pylist())

    @staticmethod
    def get_operators() -> tuple[str, ...]:
        """Operators that can be used by :meth:`where`.

        See :mod:`selectquery.compute.operators` for their meaning.
        """
        return get_operators()

    def __repr__(self) -> str:
        return f"Query(count={len(self._records)})"

    def __str__(self) -> str:
        return self.tabulate()

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def first(self) -> Record | None:
        """The first record, or ``None`` if there are no records."""
        return self._records[0] if self._records else None

    def last(self) -> Record | None:
        """The last record, or ``None`` if there are no records."""
        return self._records[-1] if self._records else None

    def get(self) -> list[Record]:
        """All the records, in order.

        A new list is returned on every call,
        so it is safe to modify it.
        """
        return list(self._records)

    def count(self) -> int:
        """The number of records."""
        return len(self._records)

    def limit(self, limit: int) -> Self:
        """Keep at most ``limit`` records.

        :param limit: The maximum number of records, must be positive.
        :raises RangeError: when the limit is zero or negative.
        """
        return self._apply(LimitNode(limit))

    def offset(self, offset: int) -> Self:
        """Skip the first ``offset`` records.

        :param offset: How many records to skip.
        :raises RangeError: when the offset is negative or
                            there is no record at that offset.
        """
        return self._apply(OffsetNode(offset))

    def paginate(self, page_number: int, page_size: int) -> Self:
        """Keep only the records of a page.

        Pages start from 1, any page number lower than 1
        is the first page. Asking for a page that starts after
        the last record is an error, like it is for :meth:`offset`.

        >>> Query([{"id": i} for i in range(5)]).paginate(2, 2).get()
        [{'id': 2}, {'id': 3}]

        :param page_number: The number of the page, starting from 1.
        :param page_size: How many records each page contains.
        """
        return self.offset((max(page_number, 1) - 1) * page_size).limit(page_size)

    def where(self, key: str, operator: str, value: Any) -> Self:
        """Keep only the records whose field compares true with ``value``.

        A missing field is never equal to anything, not even ``None``,
        and never matches the ordering or ``like`` operators.

        :param key: The name of the field to compare.
        :param operator: One of the operators returned by :meth:`get_operators`.
        :param value: The value to compare against.
        :raises UnknownOperatorError: when the operator is not supported.
        """
        return self._apply(FilterNode(key, operator, value))

    def select(self, *keys: str) -> Self:
        """Reduce each record to only the given fields.

        Records that lack some of the fields simply
        won't have them in the result.

        :param keys: The names of the fields to keep.
        """
        return self._apply(ProjectNode(keys))

    def sum(self, key: str) -> int | float:
        """Sum the values of a numeric field across all records.

        Missing and ``None`` values are skipped.

        :param key: The name of the field to sum.
        :raises AggregationTypeError: when a value is not a number.
        """
        return SumAggregation(key).compute(self._records)

    def key_by(self, key: str) -> dict[Any, Record]:
        """Index the records by the value of a field.

        Records without the field are left out,
        for duplicated values the last record wins.
        Values that are the same ``dict`` key, like ``1``
        and ``True``, count as duplicated values.

        >>> Query([{"id": "a", "n": 1}, {"id": "b"}, {"id": "a", "n": 2}]).key_by("id")
        {'a': {'id': 'a', 'n': 2}, 'b': {'id': 'b'}}

        :param key: The name of the field to index by.
        """
        return KeyByAggregation(key).compute(self._records)

    def to_arrow(self) -> pa.Table:
        """Convert the records to a pyarrow.Table.

        The columns are all the fields found in the records,
        in the order they are first seen. Fields missing
        in a record become null values.

        Records must hold values that pyarrow can convert,
        with the same type for each field, otherwise
        :class:`pyarrow.ArrowInvalid` or :class:`pyarrow.ArrowTypeError`
        are raised.
        """
        names = dict.fromkeys(name for record in self._records for name in record)
        return pa.table(
            {name: [record.get(name) for record in self._records] for name in names}
        )

    def tabulate(self, max_rows: int = DEFAULT_MAX_ROWS) -> str:
        """Format the records as a text table.

        Records that pyarrow can't convert, like those mixing
        different types in the same field, are formatted as they are.

        :param max_rows: How many records to include in the table at most.
        """
        try:
            table = self.to_arrow()
        except (pa.ArrowInvalid, pa.ArrowTypeError) as e:
            log.debug("Formatting records without pyarrow: %s", e)
            return tabulate_records(self._records, max_rows=max_rows)
        return tabulate(table, max_rows=max_rows)

    def _apply(self, node: QueryNode) -> Self:
        """Create a new query with the records emitted by a node."""
        records = node.apply(self._records)
        log.debug("%s: %d -> %d records", node, len(self._records), len(records))
        return self._from_records(records)


def is_record_sequence(collection: Any) -> bool:
    """If the collection is an ordered sequence of records.

    Strings are sequences too, but never of records.

    >>> is_record_sequence([{"id": 1}])
    True
    >>> is_record_sequence([{"id": 1}, None])
    False
    >>> is_record_sequence({"id": 1})
    False
    """
    if not isinstance(collection, Sequence) or isinstance(
        collection, (str, bytes, bytearray)
    ):
        return False
    return all(isinstance(record, Mapping) for record in collection)
