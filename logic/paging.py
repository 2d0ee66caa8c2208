"""Pagination math for public listing pages (development projects, galleries)."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional

DEFAULT_PER_PAGE = 10
DEFAULT_PAGING_RANGE = 3


@dataclass
class Paging:
    page: int
    per_page: int = DEFAULT_PER_PAGE
    total_rows: int = 0
    num_pages: int = field(init=False)

    def __post_init__(self) -> None:
        if self.per_page <= 0:
            raise ValueError("per_page must be positive")
        self.total_rows = max(int(self.total_rows), 0)
        self.num_pages = max(math.ceil(self.total_rows / self.per_page), 1)
        self.page = min(max(int(self.page), 1), self.num_pages)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page

    @property
    def start_link(self) -> int:
        return 1

    @property
    def end_link(self) -> int:
        return self.num_pages

    @property
    def prev_page(self) -> Optional[int]:
        return self.page - 1 if self.page > 1 else None

    @property
    def next_page(self) -> Optional[int]:
        return self.page + 1 if self.page < self.num_pages else None


def page_window(paging: Paging, page: int, paging_range: int = DEFAULT_PAGING_RANGE) -> List[int]:
    """Page numbers to link around ``page``, ``paging_range`` on each side."""

    start = max(paging.start_link, page - paging_range)
    end = min(paging.end_link, page + paging_range)
    return list(range(start, end + 1))


__all__ = ["Paging", "page_window", "DEFAULT_PER_PAGE", "DEFAULT_PAGING_RANGE"]
