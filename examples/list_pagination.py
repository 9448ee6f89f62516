"""
Paginating an in-memory list

Shows the basic callbacks, the before/after query hooks and how the
result is meant to be used when rendering page links.
"""

import time

from simple_pagination import PaginationResult, Paginator

fruits = [f"fruit-{i}" for i in range(1, 48)]

paginator = Paginator(
    {
        "item_total_callback": lambda result: len(fruits),
        "slice_callback": lambda offset, length, result: fruits[offset : offset + length],
        "items_per_page": 6,
        "pages_in_range": 5,
    }
)


# Time each query and keep the durations in the result meta
def start_timer(paginator: Paginator, result: PaginationResult) -> None:
    result.meta["_started"] = time.perf_counter()


def stop_timer(paginator: Paginator, result: PaginationResult) -> None:
    started = result.meta.pop("_started")
    result.meta.setdefault("query_seconds", []).append(time.perf_counter() - started)


paginator.before_query_callback = start_timer
paginator.after_query_callback = stop_timer

for page_number in (1, 4, 8):
    page = paginator.paginate(page_number)

    links = " ".join(f"[{n}]" if n == page.current_page_number else str(n) for n in page.pages)
    print(f"Page {page.current_page_number}/{page.total_number_of_pages}: {links}")
    print(f"  previous={page.previous_page_number} next={page.next_page_number}")
    for fruit in page:
        print(f"  - {fruit}")
    print(f"  queries took {sum(page.meta['query_seconds']):.6f}s")

# Everything on a single page
paginator.items_per_page = -1
print(f"All items: {len(paginator.paginate())}")
