"""Client-side pagination of activity lists."""

import math
from dataclasses import dataclass
from typing import Generic, List, Sequence, TypeVar

T = TypeVar('T')


@dataclass(frozen=True)
class PageSlice(Generic[T]):
    """Items for one page together with the total page count."""
    page_items: List[T]
    total_pages: int
    page: int

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def show_pager(self) -> bool:
        return self.total_pages > 1


def total_pages(item_count: int, page_size: int) -> int:
    """Number of pages needed for item_count items, never less than one."""
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    return max(1, math.ceil(item_count / page_size))


def slice_page(items: Sequence[T], page: int, page_size: int) -> PageSlice[T]:
    """Return the items on a 1-indexed page.

    A page past the end yields an empty slice instead of being clamped.
    """
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    pages = total_pages(len(items), page_size)
    start = (page - 1) * page_size
    return PageSlice(list(items[start:start + page_size]), pages, page)
