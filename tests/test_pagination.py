"""
Paginator tests
===============

Run with: pytest tests/test_pagination.py -v
"""

import pytest

from quillboard.core.pagination import Paginator


@pytest.fixture
def paginator():
    return Paginator(items_per_page=10)


ITEMS = list(range(25))


# ---------------------------------------------------------------------------
# 1. Metadata
# ---------------------------------------------------------------------------

def test_pagination_state_for_25_items(paginator):
    state = paginator.pagination_state(25)

    assert state == {
        'current_page': 1,
        'items_per_page': 10,
        'total_items': 25,
        'total_pages': 3,
    }


def test_empty_list_has_zero_pages(paginator):
    state = paginator.pagination_state(0)

    assert state['total_pages'] == 0
    assert state['current_page'] == 1
    assert paginator.get_paginated_items([]) == []


def test_page_size_must_be_positive():
    with pytest.raises(ValueError):
        Paginator(items_per_page=0)


# ---------------------------------------------------------------------------
# 2. Slicing
# ---------------------------------------------------------------------------

def test_last_page_slice(paginator):
    paginator.go_to_page(3, 3)

    assert paginator.get_paginated_items(ITEMS) == ITEMS[20:25]


def test_out_of_range_page_gives_empty_slice(paginator):
    paginator.current_page = 4

    assert paginator.get_paginated_items(ITEMS) == []


# ---------------------------------------------------------------------------
# 3. Navigation
# ---------------------------------------------------------------------------

def test_next_and_previous_stop_at_boundaries(paginator):
    paginator.previous_page()
    assert paginator.current_page == 1

    for _ in range(5):
        paginator.next_page(3)
    assert paginator.current_page == 3

    paginator.previous_page()
    assert paginator.current_page == 2


def test_go_to_page_ignores_out_of_range(paginator):
    paginator.go_to_page(2, 3)
    paginator.go_to_page(0, 3)
    paginator.go_to_page(4, 3)

    assert paginator.current_page == 2


def test_reset_returns_to_first_page(paginator):
    paginator.go_to_page(3, 3)
    paginator.reset_pagination()

    assert paginator.current_page == 1


def test_current_page_clamped_when_total_shrinks(paginator):
    paginator.pagination_state(25)
    paginator.go_to_page(3, 3)

    state = paginator.pagination_state(5)

    assert state['current_page'] == 1
    assert paginator.get_paginated_items(ITEMS[:5]) == ITEMS[:5]


def test_current_page_kept_when_total_unchanged(paginator):
    paginator.pagination_state(25)
    paginator.go_to_page(3, 3)

    assert paginator.pagination_state(25)['current_page'] == 3


# ---------------------------------------------------------------------------
# 4. Visible page window
# ---------------------------------------------------------------------------

@pytest.mark.parametrize('current, expected', [
    (1, [1, 2, 3, 4, 5]),
    (10, [6, 7, 8, 9, 10]),
    (5, [3, 4, 5, 6, 7]),
])
def test_visible_pages_window(paginator, current, expected):
    paginator.current_page = current

    assert paginator.get_visible_pages(10, 5) == expected


def test_visible_pages_when_fewer_than_window(paginator):
    assert paginator.get_visible_pages(3) == [1, 2, 3]
    assert paginator.get_visible_pages(0) == []
