"""Fixed-size pagination of filtered postings."""

import math
from dataclasses import dataclass
from typing import Generic, List, Sequence, TypeVar

T = TypeVar("T")


class InvalidPageSizeError(ValueError):
    """Page size must be a positive integer."""


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results."""
    items: List[T]
    page_number: int
    total_pages: int
    total_items: int
    page_size: int

    @property
    def has_previous(self) -> bool:
        return self.page_number > 1

    @property
    def has_next(self) -> bool:
        return self.page_number < self.total_pages

    @property
    def is_empty(self) -> bool:
        return not self.items


def total_pages_for(count: int, page_size: int) -> int:
    """Number of pages needed for ``count`` items; never less than one."""
    if page_size <= 0:
        raise InvalidPageSizeError(f"page_size must be positive, got {page_size}")
    return max(1, math.ceil(count / page_size))


def clamp_page(page_number: int, total_pages: int) -> int:
    """Keep a requested page inside ``[1, total_pages]``."""
    return min(max(1, page_number), max(1, total_pages))


def paginate(items: Sequence[T], page_size: int, page_number: int) -> Page[T]:
    """
    Slice ``items`` into the requested page.

    Out-of-range page numbers are not an error here: they yield an empty
    page and callers are expected to clamp navigation.

    Raises:
        InvalidPageSizeError: if ``page_size`` is zero or negative.
    """
    total_pages = total_pages_for(len(items), page_size)
    if page_number < 1:
        page_items: List[T] = []
    else:
        start = (page_number - 1) * page_size
        page_items = list(items[start:start + page_size])
    return Page(
        items=page_items,
        page_number=page_number,
        total_pages=total_pages,
        total_items=len(items),
        page_size=page_size,
    )
