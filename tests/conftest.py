"""
Shared pytest fixtures and configuration for simple_pagination tests.

This module provides list-backed callbacks, a paginator factory and an
in-memory SQLite database used by the integration tests.
"""

import sqlite3
from collections.abc import Callable, Generator
from typing import Any

import pytest

from simple_pagination import Paginator


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests with in-memory callbacks")
    config.addinivalue_line("markers", "integration: Integration tests against SQLite")


@pytest.fixture
def make_paginator() -> Callable[..., Paginator]:
    """
    Returns a factory building a Paginator over a list of items.

    Usage:
        paginator = make_paginator(list(range(28)), items_per_page=10)
    """

    def factory(items: list[Any], items_per_page: int = 10, pages_in_range: int = 5) -> Paginator:
        return Paginator(
            {
                "item_total_callback": lambda result: len(items),
                "slice_callback": lambda offset, length, result: items[offset : offset + length],
                "items_per_page": items_per_page,
                "pages_in_range": pages_in_range,
            }
        )

    return factory


@pytest.fixture
def small_paginator(make_paginator) -> Paginator:
    """28 items, 10 per page, window of 5: three pages."""
    return make_paginator(list(range(28)))


@pytest.fixture
def large_paginator(make_paginator) -> Paginator:
    """293833 items, 10 per page, window of 5."""
    return make_paginator(list(range(293833)))


@pytest.fixture
def country_rows() -> list[tuple[str, int]]:
    """53 rows with strictly decreasing areas."""
    return [(f"country-{i:02d}", 1_000_000 - i * 1000) for i in range(53)]


@pytest.fixture
def sqlite_connection(country_rows) -> Generator[sqlite3.Connection, None, None]:
    """In-memory database with a populated 'facts' table."""
    connection = sqlite3.connect(":memory:")
    connection.execute("CREATE TABLE facts (name TEXT NOT NULL, area INTEGER NOT NULL)")
    connection.executemany("INSERT INTO facts (name, area) VALUES (?, ?)", country_rows)
    connection.commit()

    yield connection

    connection.close()
