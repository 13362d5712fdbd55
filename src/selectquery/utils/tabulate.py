"""Format tabular data into a text table for print.

The `tabulate` function takes a `pyarrow.Table` or `pyarrow.RecordBatch`
and formats it into a text table.
It will truncate long strings, format floats to 2 decimal places,
show missing values as ``null`` and limit the number of rows to display.
It is used to display the records of a :class:`selectquery.Query`.

Example:

    >>> import pyarrow as pa
    >>> data = [
    ...     {"name": "Bob", "role": "User", "rating": 4.5},
    ...     {"name": "Max", "role": "Admin", "rating": None},
    ...     {"name": "Nox", "role": "Admin", "rating": 3.25},
    ... ]
    >>> print(tabulate(pa.Table.from_pylist(data)))
    name | role  | rating
    ---- | ----- | ------
    Bob  | User  | 4.50
    Max  | Admin | null
    Nox  | Admin | 3.25
"""

from collections.abc import Mapping, Sequence
from typing import Any

from pyarrow import RecordBatch, Table

DEFAULT_MAX_ROWS = 20
MAX_TEXT_LENGTH = 30


def tabulate(data: Table | RecordBatch, max_rows: int = DEFAULT_MAX_ROWS) -> str:
    """Format a Table or RecordBatch into a text table.

    Will produce a string like::

        name | role  | rating
        ---- | ----- | ------
        Bob  | User  | 4.50
        Max  | Admin | null

    Rows after ``max_rows`` are not printed, but
    a final line reports how many were left out.
    """
    return maketable(
        data.column_names,
        data.slice(length=max_rows).to_pylist(),
        num_rows=data.num_rows,
        max_rows=max_rows,
    )


def tabulate_records(
    records: Sequence[Mapping[str, Any]], max_rows: int = DEFAULT_MAX_ROWS
) -> str:
    """Format a sequence of records into a text table.

    Used for records that can't be converted to a pyarrow Table,
    like those having values of different types in the same field.
    Columns are all the fields found in the records, in the order
    they are first seen, and missing fields are shown as ``null``.

    >>> print(tabulate_records([{"id": 1}, {"id": "two", "ok": True}]))
    id  | ok
    --- | ----
    1   | null
    two | true
    """
    cols = list(dict.fromkeys(name for record in records for name in record))
    return maketable(
        cols,
        [dict(record) for record in records[:max_rows]],
        num_rows=len(records),
        max_rows=max_rows,
    )


def maketable(
    cols: list[str], rows: list[dict[str, Any]], num_rows: int, max_rows: int
) -> str:
    """Make the text table out of the rows that have to be displayed.

    :param cols: The names of the columns.
    :param rows: The rows to display, at most ``max_rows``.
    :param num_rows: How many rows there are in total.
    :param max_rows: How many rows were picked for display.
    """
    textcells = [[format_value(row.get(c)) for c in cols] for row in rows]

    colsizes = compute_max_colsize(cols, textcells)
    header = [maketablerow(cols, colsizes=colsizes)]
    separator = [maketablerow(["-"] * len(cols), colsizes=colsizes, fillvalue="-")]
    textrows = [maketablerow(row, colsizes=colsizes) for row in textcells]

    table = "\n".join(header + separator + textrows)
    if num_rows > max_rows:
        table += f"\n... and {num_rows - max_rows} more rows"
    return table


def compute_max_colsize(cols: list[str], rows: list[list[str]]) -> list[int]:
    """Compute the maximum size of each column in a table."""
    return [
        max([len(row[colidx]) for row in rows] + [len(cols[colidx])])
        for colidx, _ in enumerate(cols)
    ]


def maketablerow(cols: list[str], colsizes: list[int], fillvalue: str = " ") -> str:
    """Make a table row with the given column sizes."""
    return " | ".join(
        [col.ljust(colsizes[idx], fillvalue) for idx, col in enumerate(cols)]
    )


def format_value(v: Any) -> str:
    """Format a value to be printed in the table.

    This function will format floats to 2 decimal places,
    and truncate long strings.

    >>> format_value("A very long product description that goes on")
    'A very long product descrip...'
    """
    if v is None:
        return "null"
    elif isinstance(v, bool):
        return "true" if v else "false"
    elif isinstance(v, float):
        return f"{v:.2f}"

    v = str(v)
    if len(v) > MAX_TEXT_LENGTH:
        v = v[: MAX_TEXT_LENGTH - 3] + "..."
    return v
