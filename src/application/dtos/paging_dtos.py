"""Paging DTOs shared by list queries."""

from dataclasses import dataclass, field
from math import ceil


@dataclass(frozen=True, kw_only=True)
class PagedResult[T]:
    """One page of query results.

    Attributes:
        items: Entries on this page.
        total_count: Entries matching the query across all pages.
        page: 1-based page number.
        page_size: Requested page size.
    """

    items: list[T] = field(default_factory=list)
    total_count: int = 0
    page: int = 1
    page_size: int = 50

    @property
    def total_pages(self) -> int:
        return ceil(self.total_count / self.page_size) if self.page_size else 0

    @property
    def has_next_page(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous_page(self) -> bool:
        return self.page > 1
