import pyarrow as pa
import pytest

from selectquery import Query, ValidationError
from selectquery.utils.tabulate import format_value, tabulate

MOCK_PYARROW_TABLE = pa.table(
    {"id": [1, 2, 3], "name": ["Bob", "Tom", None], "stars": [3.0, 0.5, 10.0]}
)


@pytest.mark.parametrize(
    "data",
    [MOCK_PYARROW_TABLE, MOCK_PYARROW_TABLE.to_batches()[0]],
)
def test_from_arrow(data):
    query = Query.from_arrow(data)
    assert query.get() == [
        {"id": 1, "name": "Bob", "stars": 3.0},
        {"id": 2, "name": "Tom", "stars": 0.5},
        {"id": 3, "name": None, "stars": 10.0},
    ]
    assert query.sum("stars") == 13.5


def test_from_arrow_invalid():
    with pytest.raises(ValidationError, match="expected a PyArrow Table or RecordBatch"):
        Query.from_arrow([{"id": 1}])


def test_to_arrow_roundtrip():
    assert Query.from_arrow(MOCK_PYARROW_TABLE).to_arrow().equals(MOCK_PYARROW_TABLE)


def test_to_arrow_missing_fields():
    table = Query([{"id": 1}, {"id": 2, "name": "Tom"}, {"name": "Sam"}]).to_arrow()
    assert table.column_names == ["id", "name"]
    assert table.column("id").to_pylist() == [1, 2, None]
    assert table.column("name").to_pylist() == [None, "Tom", "Sam"]


def test_to_arrow_empty():
    table = Query([]).to_arrow()
    assert table.num_rows == 0
    assert table.column_names == []


def test_tabulate():
    query = Query.from_arrow(MOCK_PYARROW_TABLE).where("stars", ">", 1)
    assert query.tabulate() == (
        "id | name | stars\n"
        "-- | ---- | -----\n"
        "1  | Bob  | 3.00 \n"
        "3  | null | 10.00"
    )
    assert str(query) == query.tabulate()


def test_tabulate_max_rows():
    query = Query([{"n": i} for i in range(25)])
    lines = query.tabulate(max_rows=10).splitlines()
    assert len(lines) == 2 + 10 + 1
    assert lines[-1] == "... and 15 more rows"
    assert len(str(query).splitlines()) == 2 + 20 + 1


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, "null"),
        (True, "true"),
        (False, "false"),
        (1.5, "1.50"),
        (7, "7"),
        ("x" * 40, "x" * 27 + "..."),
    ],
)
def test_format_value(value, expected):
    assert format_value(value) == expected


def test_tabulate_recordbatch():
    batch = pa.record_batch({"a": [1], "b": ["x"]})
    assert tabulate(batch) == "a | b\n- | -\n1 | x"


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y

    def __str__(self):
        return f"Point({self.x}, {self.y})"


def test_tabulate_mixed_types():
    query = Query([{"a": 1}, {"a": "x"}])
    assert str(query) == "a\n-\n1\nx"


def test_tabulate_mixed_types_missing_fields():
    query = Query([{"a": 1}, {"b": "x"}, {"a": "y"}])
    assert query.tabulate() == (
        "a    | b   \n"
        "---- | ----\n"
        "1    | null\n"
        "null | x   \n"
        "y    | null"
    )


def test_tabulate_custom_objects():
    query = Query([{"name": "A", "pos": Point(1, 2)}])
    assert str(query) == (
        "name | pos        \n"
        "---- | -----------\n"
        "A    | Point(1, 2)"
    )


def test_tabulate_mixed_types_max_rows():
    query = Query([{"n": i if i % 2 else str(i)} for i in range(25)])
    lines = query.tabulate(max_rows=5).splitlines()
    assert lines[:4] == ["n", "-", "0", "1"]
    assert len(lines) == 2 + 5 + 1
    assert lines[-1] == "... and 20 more rows"
