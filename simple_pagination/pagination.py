"""
Pagination result container.

A PaginationResult is what Paginator.paginate() hands back: the items of the
requested page together with the page numbers needed to render navigation.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field, fields
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass
class PaginationResult(Generic[T]):
    """
    Represents a single page of a collection with its navigation metadata.

    Attributes:
        items: Items of the current page, as returned by the slice callback
        pages: Page numbers visible in the navigation window
        total_number_of_pages: Number of pages in the whole collection
        current_page_number: The page that was requested
        first_page_number: Always 1
        last_page_number: Same as total_number_of_pages
        previous_page_number: Page before the current one (None on the first page)
        next_page_number: Page after the current one (None on the last page)
        items_per_page: Page size used for this result
        total_number_of_items: Item count reported by the item total callback
        first_page_number_in_range: Smallest number in pages
        last_page_number_in_range: Largest number in pages
        meta: Free-form data attached by the callbacks
    """

    items: Sequence[T] = field(default_factory=list)
    pages: list[int] = field(default_factory=list)
    total_number_of_pages: int = 0
    current_page_number: int = 1
    first_page_number: int = 1
    last_page_number: int = 0
    previous_page_number: int | None = None
    next_page_number: int | None = None
    items_per_page: int = 0
    total_number_of_items: int = 0
    first_page_number_in_range: int = 0
    last_page_number_in_range: int = 0
    meta: dict[str, Any] = field(default_factory=dict)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    @property
    def count(self) -> int:
        """Number of items on this page."""
        return len(self.items)

    @property
    def has_previous_page(self) -> bool:
        return self.previous_page_number is not None

    @property
    def has_next_page(self) -> bool:
        return self.next_page_number is not None

    def to_dict(self, include_items: bool = True) -> dict[str, Any]:
        """
        Converts the result to a plain dict, e.g. for a JSON response body.

        Args:
            include_items: Set to False to return navigation metadata only
        """
        data: dict[str, Any] = {}
        for f in fields(self):
            if f.name == "items" and not include_items:
                continue
            value = getattr(self, f.name)
            if f.name == "items" and isinstance(value, (str, bytes)):
                pass
            elif f.name in ("items", "pages"):
                value = list(value)
            elif f.name == "meta":
                value = dict(value)
            data[f.name] = value
        return data
