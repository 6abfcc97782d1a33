"""Generic pagination of pre-sorted sequences."""

import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, List, Optional, Sequence, TypeVar

from .config.constants import DEFAULT_PAGE_SIZE

T = TypeVar('T')


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    """
    One page of a sequence.

    Fields:
        items: Items on this page
        total: Number of items in the whole sequence
        page: Page number actually served (1-indexed, after clamping)
        page_size: Maximum number of items per page
        total_pages: Number of pages, at least 1
        has_more: Whether a later page exists
    """
    items: List[T]
    total: int
    page: int
    page_size: int
    total_pages: int
    has_more: bool

    def to_dict(self, serialize: Optional[Callable[[T], Any]] = None) -> Dict[str, Any]:
        """Convert to a dictionary, serializing each item if a function is given."""
        return {
            'items': [serialize(item) for item in self.items] if serialize else list(self.items),
            'total': self.total,
            'page': self.page,
            'page_size': self.page_size,
            'total_pages': self.total_pages,
            'has_more': self.has_more,
        }


def paginate(items: Sequence[T], page: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> PaginatedResult[T]:
    """
    Slice a sequence into a page.

    The requested page is clamped into [1, total_pages], so an out-of-range
    page returns the nearest existing page instead of an empty slice. The
    input is not modified and is expected to be sorted by the caller.

    Args:
        items: Items to paginate
        page: Page number (1-indexed)
        page_size: Items per page

    Returns:
        PaginatedResult: The requested page

    Raises:
        ValueError: If page_size is smaller than 1
    """
    if page_size < 1:
        raise ValueError(f"page_size must be at least 1, got {page_size}")

    total = len(items)
    total_pages = max(1, math.ceil(total / page_size))
    normalized_page = max(1, min(page, total_pages))
    start_index = (normalized_page - 1) * page_size

    return PaginatedResult(
        items=list(items[start_index:start_index + page_size]),
        total=total,
        page=normalized_page,
        page_size=page_size,
        total_pages=total_pages,
        has_more=normalized_page < total_pages,
    )
