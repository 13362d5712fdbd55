import pytest

from selectquery.compute.selection import ProjectNode


@pytest.fixture
def mock_data():
    """Create mock records for testing."""
    return [
        {"a": 1, "b": 4, "c": 7},
        {"a": 2, "b": 5, "c": 8},
        {"a": 3, "c": 9},
    ]


def test_init_and_str():
    """Test the initialization and string representation of ProjectNode."""
    project_node = ProjectNode(("a", "b"))
    assert str(project_node) == "ProjectNode(select=['a', 'b'])"


def test_select_fields(mock_data):
    """Test selecting specific fields."""
    result = ProjectNode(["a", "c"]).apply(mock_data)
    assert result == [{"a": 1, "c": 7}, {"a": 2, "c": 8}, {"a": 3, "c": 9}]


def test_select_missing_field(mock_data):
    """Test selecting a field that some records don't have."""
    result = ProjectNode(["b"]).apply(mock_data)
    assert result == [{"b": 4}, {"b": 5}, {}]


def test_select_follows_requested_order(mock_data):
    """Test that the projected fields are in the order they were requested."""
    result = ProjectNode(["c", "a"]).apply(mock_data)
    assert [list(r) for r in result] == [["c", "a"]] * 3


def test_select_with_no_fields(mock_data):
    """Test projecting with no fields selected."""
    assert ProjectNode([]).apply(mock_data) == [{}, {}, {}]


def test_select_does_not_modify_records(mock_data):
    """Test that the projected records are new records."""
    result = ProjectNode(["a"]).apply(mock_data)
    result[0]["a"] = 100
    assert mock_data[0] == {"a": 1, "b": 4, "c": 7}


def test_select_invalid_field_name():
    with pytest.raises(TypeError, match="Field name must be a string, got int"):
        ProjectNode(["a", 1])
