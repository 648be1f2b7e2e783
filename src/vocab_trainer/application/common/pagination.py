"""
Pagination over store-backed lists.

Pages are 1-indexed and always clamped to [1, total_pages], where an empty
result still counts as one page.
"""

from dataclasses import dataclass, replace

from vocab_trainer.constants import VOCAB_PAGE_SIZE


def total_pages_for(count: int, page_size: int) -> int:
    """Number of pages for count items; never less than 1."""
    if count < 0:
        raise ValueError("Count cannot be negative")
    return max((count + page_size - 1) // page_size, 1)


@dataclass(frozen=True)
class Pagination:
    """
    Pagination state of a list view.

    Attributes:
        page: Current page number (1-indexed)
        total_pages: Number of pages from the last response
        page_size: Number of items per page
    """

    page: int = 1
    total_pages: int = 1
    page_size: int = VOCAB_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValueError("Page size must be at least 1")
        if self.total_pages < 1:
            raise ValueError("Total pages must be at least 1")
        if not 1 <= self.page <= self.total_pages:
            raise ValueError(f"Page must be between 1 and {self.total_pages}")

    @property
    def offset(self) -> int:
        """Number of items before the current page."""
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    def go_to(self, page: int) -> "Pagination":
        """Move to page, clamped to the known page range."""
        return replace(self, page=min(max(page, 1), self.total_pages))

    def with_count(self, count: int) -> "Pagination":
        """Apply the total match count of a response, clamping the page."""
        total_pages = total_pages_for(count, self.page_size)
        return Pagination(
            page=min(self.page, total_pages),
            total_pages=total_pages,
            page_size=self.page_size,
        )

    def first(self) -> "Pagination":
        return replace(self, page=1)
