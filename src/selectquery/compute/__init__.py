"""The SelectQuery compute nodes

The compute nodes implement the operations that
a :class:`selectquery.Query` supports over its records.

Each node is created with the arguments of the
operation and is then applied to a list of records,
emitting a new list of records for the next node::

    (records)-->Node1--(records)-->Node2--(records)-->...

The nodes themselves are in charge of their execution,
this keeps the behavior near to the node and thus makes easy to
know how an operation is actually executed without having to look around too much.

Chaining nodes by hand is possible, but usually
they are used through the :class:`selectquery.Query` fluent API:

>>> from selectquery.compute import FilterNode, ProjectNode
>>> records = [
...    {"animal": "Flamingo", "n_legs": 2},
...    {"animal": "Horse", "n_legs": 4},
...    {"animal": "Centipede", "n_legs": 100},
... ]
>>> # SELECT animal FROM records WHERE n_legs >= 4
>>> ProjectNode(["animal"]).apply(FilterNode("n_legs", ">=", 4).apply(records))
[{'animal': 'Horse'}, {'animal': 'Centipede'}]
"""

from .aggregate import KeyByAggregation, SumAggregation
from .base import Aggregation, QueryNode, Record
from .filtering import FilterNode
from .operators import OPERATORS, get_operators
from .pagination import LimitNode, OffsetNode
from .selection import ProjectNode

__all__ = (
    "QueryNode",
    "Aggregation",
    "Record",
    "FilterNode",
    "LimitNode",
    "OffsetNode",
    "ProjectNode",
    "SumAggregation",
    "KeyByAggregation",
    "OPERATORS",
    "get_operators",
)
