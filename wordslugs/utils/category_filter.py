"""Category based selection of catalog entries.

Both slug generation and slug counting go through these functions, so the
number of candidates reported for a position is always the number that can
actually be drawn.
"""

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from wordslugs.core.types import Category

if TYPE_CHECKING:
    from wordslugs.models.word import WordEntry


def normalize(targets: Iterable[Category] | None) -> frozenset[Category]:
    """Turn an optional category collection into a set; empty means no restriction."""
    if not targets:
        return frozenset()
    return frozenset(targets)


def matches(
    entry_categories: Iterable[Category], targets: Iterable[Category] | None
) -> bool:
    """Return True if an entry with ``entry_categories`` passes the filter.

    An empty or missing target set accepts everything, otherwise a single
    shared category is enough (OR semantics).
    """
    wanted = normalize(targets)
    if not wanted:
        return True
    return not wanted.isdisjoint(entry_categories)


def select(
    entries: Sequence["WordEntry"], targets: Iterable[Category] | None
) -> list["WordEntry"]:
    """Return the entries matching ``targets``, in their original order."""
    wanted = normalize(targets)
    if not wanted:
        return list(entries)
    return [entry for entry in entries if matches(entry.categories, wanted)]


def count(entries: Iterable["WordEntry"], targets: Iterable[Category] | None) -> int:
    """Number of entries ``select`` would return, without building the list."""
    wanted = normalize(targets)
    return sum(1 for entry in entries if matches(entry.categories, wanted))
