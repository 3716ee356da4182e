import uuid
from datetime import datetime, timedelta

import pytest

from app.domains.thoughts.entities import Thought
from app.domains.thoughts.services import ThoughtListQuery, apply_list_query

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def make_thoughts():
    categories = ["Fun", "work", "FUN", "Food", "fun", "General", "Fun"]
    return [
        Thought(
            uuid=uuid.uuid4(),
            message=f"thought {i}",
            category=category,
            created_at=BASE_TIME + timedelta(minutes=i),
        )
        for i, category in enumerate(categories)
    ]


def test_defaults_return_first_page_in_storage_order():
    thoughts = make_thoughts()
    page, total = apply_list_query(thoughts, ThoughtListQuery())
    assert total == 7
    assert page == thoughts


@pytest.mark.parametrize("page,limit", [(1, 1), (1, 3), (2, 3), (3, 3), (4, 3), (1, 10), (2, 2)])
def test_window_size_and_total(page, limit):
    thoughts = make_thoughts()
    result, total = apply_list_query(thoughts, ThoughtListQuery(page=page, limit=limit))
    assert len(result) <= limit
    assert total == len(thoughts)
    assert result == thoughts[(page - 1) * limit:(page - 1) * limit + limit]


def test_category_filter_counts_filtered_set():
    result, total = apply_list_query(make_thoughts(), ThoughtListQuery(category="fun", limit=2))
    assert total == 4
    assert len(result) == 2
    assert all(t.category.lower() == "fun" for t in result)


def test_unknown_category_is_empty():
    result, total = apply_list_query(make_thoughts(), ThoughtListQuery(category="sports"))
    assert result == []
    assert total == 0


def test_sort_by_date_is_descending_independent_of_paging():
    thoughts = make_thoughts()
    collected = []
    for page in range(1, 5):
        result, _ = apply_list_query(thoughts, ThoughtListQuery(sort_by="date", page=page, limit=2))
        collected.extend(result)

    dates = [t.created_at for t in collected]
    assert dates == sorted(dates, reverse=True)
    assert len(collected) == len(thoughts)


def test_unknown_sort_keeps_storage_order():
    thoughts = make_thoughts()
    result, _ = apply_list_query(thoughts, ThoughtListQuery(sort_by="hearts"))
    assert result == thoughts


def test_filter_then_sort():
    result, total = apply_list_query(
        make_thoughts(), ThoughtListQuery(category="FUN", sort_by="date", limit=10)
    )
    assert total == 4
    assert [t.message for t in result] == ["thought 6", "thought 4", "thought 2", "thought 0"]
