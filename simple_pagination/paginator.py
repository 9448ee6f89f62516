"""
The Paginator.

Paginator knows nothing about where items live. It asks an item total
callback how many items exist and a slice callback for the items of one
page, then works out the page numbers around the requested page.

Usage:
    items = list(range(28))
    paginator = Paginator({
        "item_total_callback": lambda result: len(items),
        "slice_callback": lambda offset, length, result: items[offset : offset + length],
        "items_per_page": 10,
        "pages_in_range": 5,
    })
    result = paginator.paginate(2)
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

from ._logging import describe_callback, logger
from .config import filter_config
from .exceptions import CallbackNotFoundError, InvalidPageNumberError
from .pagination import PaginationResult

ItemTotalCallback = Callable[[PaginationResult[Any]], int]
SliceCallback = Callable[[int, int, PaginationResult[Any]], Iterable[Any]]

# items_per_page value meaning "everything on one page"
UNBOUNDED_ITEMS_PER_PAGE = -1

# Length passed to the slice callback when items_per_page is unbounded
UNBOUNDED_SLICE_LENGTH = 999_999_999


def _noop_query_callback(paginator: Paginator, result: PaginationResult[Any]) -> None:
    return None


def _ceil_div(numerator: int, denominator: int) -> int:
    """Ceiling of numerator / denominator, exact for any sign."""
    return -(-numerator // denominator)


def _inclusive_range(start: int, stop: int) -> list[int]:
    """Integers from start to stop inclusive, counting down if start > stop."""
    step = 1 if start <= stop else -1
    return list(range(start, stop + step, step))


class Paginator:
    """
    Paginates any collection through two callbacks.

    Attributes:
        item_total_callback: Returns the total number of items. Receives the
            in-progress PaginationResult so it may write to its meta.
        slice_callback: Returns the items for (offset, length). Receives the
            in-progress PaginationResult as third argument.
        before_query_callback: Optional, called with (paginator, result)
            before the count and before the slice query.
        after_query_callback: Optional, called with (paginator, result)
            after the count and after the slice query.
        items_per_page: Page size. -1 returns all items on a single page.
        pages_in_range: Width of the page number window.
    """

    def __init__(self, config: Mapping[str, Any] | None = None) -> None:
        self.item_total_callback: ItemTotalCallback | None = None
        self.slice_callback: SliceCallback | None = None
        self.before_query_callback: QueryCallback | None = None
        self.after_query_callback: QueryCallback | None = None
        self.items_per_page: int = 10
        self.pages_in_range: int = 5

        if config:
            for key, value in filter_config(config).items():
                setattr(self, key, value)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(items_per_page={self.items_per_page}, "
            f"pages_in_range={self.pages_in_range})"
        )

    def paginate(self, current_page_number: int = 1) -> PaginationResult[Any]:
        """
        Runs the pagination for the given page.

        Args:
            current_page_number: Page number, usually taken from the current request

        Returns:
            PaginationResult holding the items of the page and navigation metadata

        Raises:
            CallbackNotFoundError: If the item total or slice callback is not set
            InvalidPageNumberError: If current_page_number is below 1
        """
        if self.item_total_callback is None:
            raise CallbackNotFoundError("item_total_callback")

        if self.slice_callback is None:
            raise CallbackNotFoundError("slice_callback")

        if current_page_number <= 0:
            raise InvalidPageNumberError(current_page_number)

        item_total_callback = self.item_total_callback
        slice_callback = self.slice_callback
        before_query_callback = self._prepare_before_query_callback()
        after_query_callback = self._prepare_after_query_callback()

        logger.debug(
            "Starting pagination",
            extra={
                "operation": "paginate",
                "page": current_page_number,
                "items_per_page": self.items_per_page,
                "pages_in_range": self.pages_in_range,
            },
        )

        result: PaginationResult[Any] = PaginationResult()

        # 1. Count
        before_query_callback(self, result)
        total_number_of_items = int(item_total_callback(result))
        after_query_callback(self, result)

        logger.debug(
            "Counted items",
            extra={
                "operation": "count",
                "callback": describe_callback(item_total_callback),
                "total_items": total_number_of_items,
            },
        )

        # 2. Work out the page window
        number_of_pages = _ceil_div(total_number_of_items, self.items_per_page)
        pages_in_range = min(self.pages_in_range, number_of_pages)
        pages = self.determine_page_range(current_page_number, pages_in_range, number_of_pages)
        offset = (current_page_number - 1) * self.items_per_page

        # 3. Slice
        before_query_callback(self, result)

        if self.items_per_page == UNBOUNDED_ITEMS_PER_PAGE:
            items = slice_callback(0, UNBOUNDED_SLICE_LENGTH, result)
        else:
            items = slice_callback(offset, self.items_per_page, result)

        if isinstance(items, Mapping):
            # Keyed rows keep their values, in insertion order
            items = list(items.values())
        elif not isinstance(items, Sequence):
            # Generators, iterators and other one-shot iterables
            items = list(items)

        after_query_callback(self, result)

        logger.debug(
            "Sliced items",
            extra={
                "operation": "slice",
                "callback": describe_callback(slice_callback),
                "offset": offset,
                "item_count": len(items),
            },
        )

        result.items = items
        result.pages = pages
        result.total_number_of_pages = number_of_pages
        result.current_page_number = current_page_number
        result.first_page_number = 1
        result.last_page_number = number_of_pages
        result.previous_page_number = self.determine_previous_page_number(current_page_number)
        result.next_page_number = self.determine_next_page_number(
            current_page_number, number_of_pages
        )
        result.items_per_page = self.items_per_page
        result.total_number_of_items = total_number_of_items
        result.first_page_number_in_range = min(pages)
        result.last_page_number_in_range = max(pages)

        logger.info(
            "Pagination complete",
            extra={
                "operation": "paginate",
                "page": current_page_number,
                "total_pages": number_of_pages,
                "total_items": total_number_of_items,
            },
        )

        return result

    # --- Helpers (overridable) ---

    def _prepare_before_query_callback(self) -> QueryCallback:
        if self.before_query_callback is not None:
            return self.before_query_callback
        return _noop_query_callback

    def _prepare_after_query_callback(self) -> QueryCallback:
        if self.after_query_callback is not None:
            return self.after_query_callback
        return _noop_query_callback

    def determine_page_range(
        self, current_page_number: int, pages_in_range: int, number_of_pages: int
    ) -> list[int]:
        """
        Returns the window of page numbers shown around the current page.

        The window is pinned to the end once the current page gets close to
        the last page, and starts at page 1 near the beginning.
        """
        change = _ceil_div(pages_in_range, 2)

        if (current_page_number - change) > (number_of_pages - pages_in_range):
            return _inclusive_range(number_of_pages - pages_in_range + 1, number_of_pages)

        if (current_page_number - change) < 0:
            change = current_page_number

        offset = current_page_number - change
        return _inclusive_range(offset + 1, offset + pages_in_range)

    def determine_previous_page_number(self, current_page_number: int) -> int | None:
        if (current_page_number - 1) > 0:
            return current_page_number - 1
        return None

    def determine_next_page_number(
        self, current_page_number: int, number_of_pages: int
    ) -> int | None:
        if (current_page_number + 1) <= number_of_pages:
            return current_page_number + 1
        return None


QueryCallback = Callable[[Paginator, PaginationResult[Any]], None]
