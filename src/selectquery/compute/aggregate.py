"""Aggregations that reduce records to a single value.

Frequently when analysing data it is necessary to compute
statistics of the data, or to reorganize it in a way
that makes it easier to lookup.

Aggregations consume all the records of a query and
return a plain value, thus they end the chain of operations.

For example, given the following data::

    id, name, stars
    1, Bob, 3
    2, Tom, 0
    3, Sam, 10

Summing the stars would give ``13``, while keying
the records by ``id`` would give a lookup table::

    {1: {id: 1, ...}, 2: {id: 2, ...}, 3: {id: 3, ...}}
"""

from collections.abc import Sequence
from typing import Any

from ..errors import AggregationTypeError
from .base import Aggregation, Record
from .operators import is_number

__all__ = ("SumAggregation", "KeyByAggregation")


class SumAggregation(Aggregation):
    """Compute the sum of a numeric field.

    Missing fields and ``None`` values are ignored,
    any other value that is not a number is an error.
    So is mixing ``Decimal`` values with ``float`` or
    ``Fraction`` values, as Python can't add them together.

    >>> SumAggregation("stars").compute([{"stars": 3}, {"stars": None}, {}, {"stars": 10}])
    13
    >>> SumAggregation("name").compute([{"name": "Bob"}])
    Traceback (most recent call last):
        ...
    selectquery.errors.AggregationTypeError: Sum operation failed: the property 'name' must be a number in every item of the collection.
    """

    def compute(self, records: Sequence[Record]) -> int | float:
        total = 0
        for record in records:
            value = record.get(self.key)
            if value is None:
                continue
            if not is_number(value):
                raise AggregationTypeError(
                    f"Sum operation failed: the property '{self.key}' "
                    "must be a number in every item of the collection."
                )
            try:
                total += value
            except TypeError:
                # Decimal can't be added to float or Fraction.
                raise AggregationTypeError(
                    f"Sum operation failed: the property '{self.key}' mixes "
                    f"{type(total).__name__} and {type(value).__name__} values "
                    "that can't be added together."
                ) from None
        return total


class KeyByAggregation(Aggregation):
    """Index records by the value of one of their fields.

    Records that don't have the field are left out.
    When more records share the same value, the last
    one wins.

    Values that can't be used as ``dict`` keys,
    like lists, are converted to their string representation.

    >>> records = [{"id": 1, "v": "a"}, {"v": "b"}, {"id": 1, "v": "c"}, {"id": 2, "v": "d"}]
    >>> KeyByAggregation("id").compute(records)
    {1: {'id': 1, 'v': 'c'}, 2: {'id': 2, 'v': 'd'}}

    Values are used as keys as they are, so values that are
    the same ``dict`` key in Python, like ``1``, ``1.0`` and ``True``,
    are the same key here too and the last record wins:

    >>> KeyByAggregation("id").compute([{"id": 1, "v": "a"}, {"id": True, "v": "b"}])
    {1: {'id': True, 'v': 'b'}}
    """

    def compute(self, records: Sequence[Record]) -> dict[Any, Record]:
        result: dict[Any, Record] = {}
        for record in records:
            if self.key not in record:
                continue

            keyvalue = record[self.key]
            try:
                hash(keyvalue)
            except TypeError:
                keyvalue = str(keyvalue)
            result[keyvalue] = record
        return result
