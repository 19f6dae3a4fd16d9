import pytest

from chatpages.paging import get_page_bounds, get_total_pages, is_valid_page


def slice_page(items, page, per_page):
    start, end = get_page_bounds(len(items), page, per_page)
    return items[start:end]


@pytest.mark.parametrize(
    "total, per_page, pages",
    [
        (0, 6, 1),
        (1, 6, 1),
        (6, 6, 1),
        (7, 6, 2),
        (13, 6, 3),
        (18, 6, 3),
        (19, 6, 4),
        (100, 1, 100),
        (5, 100, 1),
    ],
)
def test_total_pages(total, per_page, pages):
    assert get_total_pages(total, per_page) == pages


@pytest.mark.parametrize("total", [0, 1, 10000])
def test_zero_per_page_is_one_page(total):
    assert get_total_pages(total, 0) == 1


def test_bounds_of_worked_example():
    # 13 items at 6 per page: 6 + 6 + 1
    assert get_page_bounds(13, 1, 6) == (0, 6)
    assert get_page_bounds(13, 2, 6) == (6, 12)
    assert get_page_bounds(13, 3, 6) == (12, 13)


def test_bounds_outside_the_collection_are_empty():
    for page in (-1, 0, 4, 999):
        start, end = get_page_bounds(13, page, 6)
        assert start == end


def test_bounds_without_a_page_size():
    assert get_page_bounds(13, 1, 0) == (0, 13)
    assert get_page_bounds(13, 2, 0) == (0, 0)
    assert get_page_bounds(0, 1, 0) == (0, 0)


@pytest.mark.parametrize("total", [1, 12, 13, 23, 100])
@pytest.mark.parametrize("per_page", [1, 5, 6, 7, 99, 100, 101])
def test_pages_cover_every_item_once(total, per_page):
    items = list(range(total))
    pages = get_total_pages(total, per_page)

    seen = []
    for page in range(1, pages + 1):
        on_page = slice_page(items, page, per_page)
        # only the last page may be short, and no page is empty
        if page < pages:
            assert len(on_page) == per_page
        else:
            assert 1 <= len(on_page) <= per_page
        seen.extend(on_page)

    assert seen == items


def test_is_valid_page():
    assert is_valid_page(1, 1)
    assert is_valid_page(3, 3)
    assert not is_valid_page(0, 3)
    assert not is_valid_page(-5, 3)
    assert not is_valid_page(4, 3)


def test_valid_pages_agree_with_bounds():
    total, per_page = 13, 6
    pages = get_total_pages(total, per_page)
    for page in range(-2, pages + 3):
        start, end = get_page_bounds(total, page, per_page)
        assert is_valid_page(page, pages) == (end > start)
