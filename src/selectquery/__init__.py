"""SelectQuery

Flexible querying and manipulation of in-memory collections of records.

SelectQuery works on sequences of records (``dict`` or any other mapping)
that are already loaded in memory, and allows to chain filtering,
pagination, projection and aggregation over them without ever
modifying the original collection.

The package is constituted by multiple components, each isolated within
its own module and each self documented:

* The Query API (:mod:`selectquery.query`), the fluent interface most users need.
* The Compute nodes (:mod:`selectquery.compute`), implementing each operation.
* The Errors (:mod:`selectquery.errors`) raised when an operation can't be performed.

>>> from selectquery import Query
>>> users = [
...     {"id": 1, "name": "Bob", "age": 30},
...     {"id": 2, "name": "Tom", "age": 20},
...     {"id": 3, "name": "Sam", "age": 20},
... ]
>>> Query(users).key_by("id")[2]
{'id': 2, 'name': 'Tom', 'age': 20}
>>> Query(users).where("name", "like$", "M").select("name").get()
[{'name': 'Tom'}, {'name': 'Sam'}]

SelectQuery logs the operations it applies at ``DEBUG`` level
through the ``selectquery`` logger, but never configures logging
by itself.
"""

import logging

from . import compute
from .compute.operators import get_operators
from .errors import (
    AggregationTypeError,
    QueryError,
    RangeError,
    UnknownOperatorError,
    ValidationError,
)
from .query import Query

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    "compute",
    "Query",
    "get_operators",
    "QueryError",
    "ValidationError",
    "RangeError",
    "UnknownOperatorError",
    "AggregationTypeError",
)
