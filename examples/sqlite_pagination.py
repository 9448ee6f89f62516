"""
Paginating rows of a SQLite table

The callbacks translate the offset/length pair into LIMIT/OFFSET, so only
one page of rows is ever loaded. The slice callback yields rows lazily;
the paginator turns them into a list.
"""

import sqlite3

from simple_pagination import Paginator

connection = sqlite3.connect(":memory:")
connection.execute("CREATE TABLE countries (name TEXT, area INTEGER)")
connection.executemany(
    "INSERT INTO countries VALUES (?, ?)",
    [
        ("Russia", 17098242),
        ("Canada", 9984670),
        ("United States", 9826675),
        ("China", 9596960),
        ("Brazil", 8515770),
        ("Australia", 7741220),
        ("India", 3287263),
        ("Argentina", 2780400),
        ("Kazakhstan", 2724900),
        ("Algeria", 2381741),
        ("Congo", 2344858),
        ("Greenland", 2166086),
    ],
)


def count_countries(result):
    (total,) = connection.execute("SELECT COUNT(*) FROM countries").fetchone()
    return total


def slice_countries(offset, length, result):
    result.meta["sql"] = "SELECT name, area FROM countries ORDER BY area DESC LIMIT ? OFFSET ?"
    cursor = connection.execute(result.meta["sql"], (length, offset))
    return (dict(name=name, area=area) for name, area in cursor)


paginator = Paginator(
    {
        "item_total_callback": count_countries,
        "slice_callback": slice_countries,
        "items_per_page": 5,
        "pages_in_range": 3,
    }
)

page = paginator.paginate(2)
print(page.to_dict(include_items=False))
for row in page:
    print(f"{row['name']:<15} {row['area']:>10}")
