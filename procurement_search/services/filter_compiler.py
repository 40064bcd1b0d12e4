"""Record search filter → parameterized SQL.

User-supplied values only ever travel as bound parameters; the SQL text is
assembled from fixed fragments. The buyer id list is bound as an expanding
parameter so the store receives one placeholder per id.

Pages are ordered by ``id``: over-fetch-by-one pagination needs a stable
row order across calls.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import bindparam, text
from sqlalchemy.sql.expression import TextClause

RECORD_COLUMNS = (
    "id",
    "title",
    "description",
    "publish_date",
    "buyer_id",
    "value",
    "currency",
    "stage",
    "close_date",
    "award_date",
)

_SELECT = f"SELECT {', '.join(RECORD_COLUMNS)} FROM procurement_records"
_TEXT_PREDICATE = (
    r"(lower(title) LIKE lower(:text_search) ESCAPE '\' "
    r"OR lower(description) LIKE lower(:text_search) ESCAPE '\')"
)
_BUYER_PREDICATE = "buyer_id IN :buyer_ids"
_PAGE_CLAUSE = "ORDER BY id LIMIT :limit OFFSET :offset"


@dataclass(frozen=True)
class SearchFilter:
    text_search: str | None = None
    buyer_ids: tuple[str, ...] = ()

    @classmethod
    def build(cls, text_search: str | None = None, buyer_ids: Iterable[str] | None = None) -> SearchFilter:
        # Duplicate ids add nothing to an IN list; keep first-seen order
        return cls(text_search=text_search, buyer_ids=tuple(dict.fromkeys(buyer_ids or ())))

    @property
    def search_term(self) -> str | None:
        term = (self.text_search or "").strip()
        return term or None


@dataclass(frozen=True)
class Predicate:
    """A WHERE-clause body (empty when every record is eligible) and its binds."""

    text: str = ""
    params: dict[str, Any] = field(default_factory=dict)
    expanding: tuple[str, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.text)


@dataclass(frozen=True)
class CompiledQuery:
    sql: str
    params: dict[str, Any]
    expanding: tuple[str, ...] = ()

    def statement(self) -> TextClause:
        stmt = text(self.sql)
        if self.expanding:
            stmt = stmt.bindparams(*(bindparam(name, expanding=True) for name in self.expanding))
        return stmt


def like_pattern(term: str) -> str:
    """`%term%` with LIKE wildcards in `term` matched literally.

    Case folding happens in SQL, on both sides, so the store's `lower()`
    decides what counts as the same letter.
    """
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def compile_predicate(search: SearchFilter) -> Predicate:
    clauses: list[str] = []
    params: dict[str, Any] = {}
    expanding: tuple[str, ...] = ()

    term = search.search_term
    if term:
        clauses.append(_TEXT_PREDICATE)
        params["text_search"] = like_pattern(term)

    if search.buyer_ids:
        clauses.append(_BUYER_PREDICATE)
        params["buyer_ids"] = list(search.buyer_ids)
        expanding = ("buyer_ids",)

    return Predicate(text=" AND ".join(clauses), params=params, expanding=expanding)


def build_page_query(search: SearchFilter, offset: int, limit: int) -> CompiledQuery:
    """Full SELECT for one window of matching records.

    `limit` is the number of rows to ask the store for; callers doing
    over-fetch pass the page size plus one.
    """
    predicate = compile_predicate(search)
    parts = [_SELECT]
    if predicate:
        parts.append(f"WHERE {predicate.text}")
    parts.append(_PAGE_CLAUSE)
    return CompiledQuery(
        sql=" ".join(parts),
        params={**predicate.params, "limit": limit, "offset": offset},
        expanding=predicate.expanding,
    )
