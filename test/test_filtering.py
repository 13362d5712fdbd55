import datetime

import pytest

from selectquery.compute.filtering import FilterNode
from selectquery.compute.operators import OPERATORS, get_operators, get_predicate
from selectquery.errors import UnknownOperatorError

RECORDS = [
    {"name": "Flamingo", "n_legs": 2, "seen": datetime.date(2024, 1, 10)},
    {"name": "Horse", "n_legs": 4, "seen": datetime.date(2024, 3, 1)},
    {"name": "Brittle stars", "n_legs": 5.0},
    {"name": "Centipede", "n_legs": None, "seen": datetime.date(2023, 12, 24)},
    {"n_legs": 4},
]


def test_init_and_str():
    node = FilterNode("name", "like", "Horse")
    assert str(node) == "FilterNode(name like 'Horse')"
    assert node.key == "name"
    assert node.operator == "like"
    assert node.value == "Horse"


def test_unknown_operator():
    with pytest.raises(UnknownOperatorError, match="Unknown operator: ~="):
        FilterNode("name", "~=", "Horse")


def test_unhashable_operator():
    with pytest.raises(UnknownOperatorError, match=r"Unknown operator: \['==='\]"):
        get_predicate(["==="])


def test_operators_catalog():
    assert get_operators() == OPERATORS
    assert len(OPERATORS) == 9
    assert "=" not in OPERATORS


@pytest.mark.parametrize(
    "operator, value, expected",
    [
        ("===", 4, [1, 4]),
        ("===", 5, [2]),
        ("===", None, [3]),
        ("!==", 4, [0, 2, 3]),
        ("<", 4, [0]),
        ("<=", 4, [0, 1, 4]),
        (">", 4, [2]),
        (">=", 4, [1, 2, 4]),
    ],
)
def test_numeric_comparisons(operator, value, expected):
    result = FilterNode("n_legs", operator, value).apply(RECORDS)
    assert result == [RECORDS[i] for i in expected]


def test_equal_is_strict():
    records = [{"v": 1}, {"v": "1"}, {"v": True}, {"v": 1.0}]
    assert FilterNode("v", "===", 1).apply(records) == [records[0], records[3]]
    assert FilterNode("v", "===", True).apply(records) == [records[2]]
    assert FilterNode("v", "!==", 1).apply(records) == [records[1], records[2]]


def test_dates_comparison():
    result = FilterNode("seen", ">=", datetime.date(2024, 1, 1)).apply(RECORDS)
    assert result == [RECORDS[0], RECORDS[1]]


def test_incomparable_types():
    with pytest.raises(TypeError):
        FilterNode("name", "<", 3).apply(RECORDS)


@pytest.mark.parametrize(
    "operator, value, expected",
    [
        ("like", "OR", [1]),
        ("like", "s", [1, 2]),
        ("^like", "c", [3]),
        ("^like", "BRITTLE", [2]),
        ("like$", "E", [1, 3]),
        ("like$", "stars", [2]),
        ("like", None, []),
    ],
)
def test_like_comparisons(operator, value, expected):
    result = FilterNode("name", operator, value).apply(RECORDS)
    assert result == [RECORDS[i] for i in expected]


def test_like_converts_to_text():
    records = [{"v": 150}, {"v": True}, {"v": False}, {"v": None}]
    assert FilterNode("v", "like", 5).apply(records) == [records[0]]
    assert FilterNode("v", "^like", "TR").apply(records) == [records[1]]
    assert FilterNode("v", "like$", "se").apply(records) == [records[2]]


def test_filter_preserves_records():
    result = FilterNode("n_legs", ">", 0).apply(RECORDS)
    assert all(a is b for a, b in zip(result, [RECORDS[0], RECORDS[1], RECORDS[2], RECORDS[4]]))


@pytest.mark.parametrize(
    "operator, value, expected",
    [
        ("===", None, [0]),
        ("!==", None, [1, 2]),
        ("===", 0, [2]),
        ("!==", 0, [0, 1]),
        ("<", 1, [2]),
        (">=", 0, [2]),
        ("like", "", [2]),
        ("^like", "", [2]),
        ("like$", "", [2]),
    ],
)
def test_missing_field_is_not_none(operator, value, expected):
    records = [{"x": None}, {}, {"x": 0}]
    result = FilterNode("x", operator, value).apply(records)
    assert result == [records[i] for i in expected]
