"""Pagination helpers for the over-fetch-by-one record search."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

from procurement_search.core.exceptions import InvalidLimitError

T = TypeVar("T")


@dataclass(frozen=True)
class PageWindow:
    """A validated `offset` / `limit` pair.

    The store is asked for `fetch_size` rows (one more than the page) so the
    caller can tell whether anything exists past this page without counting.
    """

    offset: int
    limit: int

    @classmethod
    def checked(cls, offset: int, limit: int, max_limit: int) -> PageWindow:
        if limit < 1 or limit > max_limit:
            raise InvalidLimitError(limit, max_limit)
        return cls(offset=offset, limit=limit)

    @property
    def fetch_size(self) -> int:
        return self.limit + 1

    def split(self, rows: Sequence[T]) -> tuple[list[T], bool]:
        """Return (first `limit` rows, end_of_results)."""
        return list(rows[: self.limit]), len(rows) <= self.limit
