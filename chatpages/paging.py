"""
Page arithmetic for paginated interfaces.

Pages are 1-indexed. A page size of 0 disables pagination: everything lands on page 1.
"""

from typing import Tuple


def get_total_pages(total: int, per_page: int) -> int:
    """Calculate total pages needed for *total* items. There is always at least one page."""
    if per_page <= 0:
        return 1
    return max(1, (total + per_page - 1) // per_page)


def get_page_bounds(total: int, page: int, per_page: int) -> Tuple[int, int]:
    """Returns the half-open index range ``[start, end)`` covered by a page."""
    if per_page <= 0:
        return (0, total) if page == 1 else (0, 0)
    start = max(0, (page - 1) * per_page)
    end = min(total, page * per_page)
    return start, max(start, end)


def is_valid_page(page: int, total_pages: int) -> bool:
    return 1 <= page <= total_pages
