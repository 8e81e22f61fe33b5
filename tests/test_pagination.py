import pytest

from gdax_client.rest.pagination import After, Before, Pagination


def test_after_without_limit() -> None:
    assert Pagination(After(100)).to_query_string() == "?after=100"


def test_before_with_limit() -> None:
    assert Pagination(Before(50), limit=20).to_query_string() == "?before=50&limit=20"


def test_query_params_cursor_first() -> None:
    assert Pagination(After(7), limit=3).query_params() == [("after", "7"), ("limit", "3")]


def test_pagination_is_a_value() -> None:
    assert Pagination(After(1), limit=5) == Pagination(After(1), limit=5)
    assert Pagination(After(1)) != Pagination(Before(1))


@pytest.mark.parametrize("bad_id", [0, -1, True, "10"])
def test_cursor_rejects_non_positive_ids(bad_id: object) -> None:
    with pytest.raises(ValueError):
        After(bad_id)  # type: ignore[arg-type]


def test_limit_must_be_positive() -> None:
    with pytest.raises(ValueError):
        Pagination(Before(10), limit=0)


def test_page_must_be_a_cursor() -> None:
    with pytest.raises(TypeError):
        Pagination(10)  # type: ignore[arg-type]
