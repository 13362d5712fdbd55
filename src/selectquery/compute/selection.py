"""Query nodes that implement projection of fields.

A common request in queries is to select only
specific fields of the records.
An example is the ``SELECT`` clause in SQL queries.

This module implements the basic projection capabilities.
"""

from collections.abc import Sequence

from .base import QueryNode, Record, check_field_name


class ProjectNode(QueryNode):
    """Project records by selecting specific fields.

    Each record is replaced by a new ``dict`` containing
    only the selected fields, the number and order of records
    is preserved. Fields that a record doesn't have are
    not added to the projected record.

    >>> records = [{"id": 1, "name": "Bob", "age": 30}, {"id": 2, "age": 28}]
    >>> ProjectNode(["id", "name"]).apply(records)
    [{'id': 1, 'name': 'Bob'}, {'id': 2}]
    """

    def __init__(self, select: Sequence[str]) -> None:
        """
        :param select: The names of the fields to keep, in the order
                       they should appear in the projected records.
        """
        self.select = [check_field_name(key) for key in select]

    def __str__(self) -> str:
        return f"ProjectNode(select={self.select})"

    def apply(self, records: Sequence[Record]) -> list[Record]:
        return [
            {key: record[key] for key in self.select if key in record}
            for record in records
        ]
