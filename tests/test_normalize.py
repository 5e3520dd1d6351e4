import pytest

from common.errors import ResponseShapeError
from common.normalize import as_list, extract_list


@pytest.mark.parametrize("empty", [None, "null", "NULL", "", {}, []])
def test_as_list_empty_shapes(empty):
    assert as_list(empty) == []


def test_as_list_single_and_many_preserve_order():
    assert as_list({"id": 1}) == [{"id": 1}]
    items = [{"id": 3}, {"id": 1}, {"id": 2}]
    out = as_list(items)
    assert out == items
    assert out is not items


def test_extract_list_all_three_shapes():
    one = {"positions": {"position": {"symbol": "AAPL"}}}
    many = {"positions": {"position": [{"symbol": "AAPL"}, {"symbol": "SPY"}]}}
    assert [p["symbol"] for p in extract_list(one, "positions", "position")] == ["AAPL"]
    assert [p["symbol"] for p in extract_list(many, "positions", "position")] == ["AAPL", "SPY"]

    assert extract_list({"positions": "null"}, "positions", "position") == []
    assert extract_list({"positions": None}, "positions", "position") == []
    assert extract_list({"positions": {}}, "positions", "position") == []
    assert extract_list({}, "positions", "position") == []
    assert extract_list({"positions": {"position": "null"}}, "positions", "position") == []


def test_extract_list_empty_array_container():
    assert extract_list({"orders": []}, "orders", "order") == []
    assert extract_list({"orders": {"order": []}}, "orders", "order") == []


def test_extract_list_rejects_non_objects():
    with pytest.raises(ResponseShapeError):
        extract_list([1, 2], "positions", "position")
    with pytest.raises(ResponseShapeError) as e:
        extract_list({"positions": 5}, "positions", "position")
    assert e.value.code == "bad_response"
