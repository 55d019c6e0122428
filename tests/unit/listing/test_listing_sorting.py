"""Tests for listing sort order, directory partitioning, and header toggles."""

from __future__ import annotations

import unittest

from indexof.content_model import DirectoryEntry
from indexof.listing import SORT_COLUMNS, next_sort_state, sort_entries


def make_entry(
    name: str,
    *,
    is_directory: bool = False,
    date: str = "2026-01-01",
    size: int = 0,
    description: str = "",
) -> DirectoryEntry:
    return DirectoryEntry(
        name=name + ("/" if is_directory else ""),
        is_directory=is_directory,
        extension="" if is_directory else ".mdx",
        date=date,
        size=0 if is_directory else size,
        description=description,
        href="/" + name,
    )


def names(entries: list[DirectoryEntry]) -> list[str]:
    return [entry.name for entry in entries]


class SortEntriesTests(unittest.TestCase):
    def setUp(self) -> None:
        self.entries = [
            make_entry("zeta.mdx", date="2024-01-01", size=900, description="last"),
            make_entry("archives", is_directory=True, date="2025-06-15", description="old"),
            make_entry("alpha.mdx", date="2026-02-23", size=100, description="first"),
            make_entry("drafts", is_directory=True, date="2023-01-01", description="wip"),
        ]

    def test_directories_precede_files_for_every_column_and_order(self) -> None:
        for column in SORT_COLUMNS:
            for order in ("asc", "desc"):
                with self.subTest(column=column, order=order):
                    ordered = sort_entries(self.entries, column, order)
                    kinds = [entry.is_directory for entry in ordered]
                    self.assertEqual(kinds, [True, True, False, False])

    def test_name_ascending_and_descending(self) -> None:
        self.assertEqual(
            names(sort_entries(self.entries, "name", "asc")),
            ["archives/", "drafts/", "alpha.mdx", "zeta.mdx"],
        )
        self.assertEqual(
            names(sort_entries(self.entries, "name", "desc")),
            ["drafts/", "archives/", "zeta.mdx", "alpha.mdx"],
        )

    def test_size_is_numeric(self) -> None:
        entries = [
            make_entry("big.mdx", size=10_000),
            make_entry("small.mdx", size=9),
            make_entry("medium.mdx", size=100),
        ]
        self.assertEqual(
            names(sort_entries(entries, "size", "asc")),
            ["small.mdx", "medium.mdx", "big.mdx"],
        )

    def test_name_comparison_is_case_insensitive_with_lowercase_first(self) -> None:
        entries = [make_entry("Beta.mdx"), make_entry("alpha.mdx"), make_entry("beta.mdx")]
        self.assertEqual(
            names(sort_entries(entries, "name", "asc")),
            ["alpha.mdx", "beta.mdx", "Beta.mdx"],
        )

    def test_punctuation_sorts_before_digits_and_letters(self) -> None:
        entries = [
            make_entry("archives", is_directory=True),
            make_entry("2024", is_directory=True),
            make_entry("_drafts", is_directory=True),
            make_entry("Zeta", is_directory=True),
        ]
        self.assertEqual(
            names(sort_entries(entries, "name", "asc")),
            ["_drafts/", "2024/", "archives/", "Zeta/"],
        )

    def test_equal_keys_keep_input_order_in_both_directions(self) -> None:
        entries = [
            make_entry("c.mdx", date="2025-01-01"),
            make_entry("a.mdx", date="2025-01-01"),
            make_entry("b.mdx", date="2024-01-01"),
            make_entry("d.mdx", date="2025-01-01"),
        ]
        self.assertEqual(
            names(sort_entries(entries, "date", "asc")),
            ["b.mdx", "c.mdx", "a.mdx", "d.mdx"],
        )
        self.assertEqual(
            names(sort_entries(entries, "date", "desc")),
            ["c.mdx", "a.mdx", "d.mdx", "b.mdx"],
        )

    def test_root_listing_by_date_descending_keeps_directory_first(self) -> None:
        entries = [
            make_entry("hello.mdx", date="2026-02-23"),
            make_entry("archives", is_directory=True, date="2025-06-15"),
        ]
        self.assertEqual(names(sort_entries(entries, "date", "desc")), ["archives/", "hello.mdx"])

    def test_input_is_not_mutated(self) -> None:
        before = list(self.entries)
        sort_entries(self.entries, "description", "desc")
        self.assertEqual(self.entries, before)

    def test_unknown_column_or_order_raises(self) -> None:
        with self.assertRaises(ValueError):
            sort_entries(self.entries, "owner", "asc")
        with self.assertRaises(ValueError):
            sort_entries(self.entries, "name", "sideways")


class NextSortStateTests(unittest.TestCase):
    def test_clicking_active_column_toggles_order(self) -> None:
        self.assertEqual(next_sort_state("name", "asc", "name"), ("name", "desc"))
        self.assertEqual(next_sort_state("name", "desc", "name"), ("name", "asc"))

    def test_clicking_new_column_starts_ascending(self) -> None:
        self.assertEqual(next_sort_state("name", "desc", "size"), ("size", "asc"))


if __name__ == "__main__":
    unittest.main()
