"""Tests for search filter → SQL compilation."""

from procurement_search.services.filter_compiler import (
    SearchFilter,
    build_page_query,
    compile_predicate,
    like_pattern,
)


def test_empty_filter_imposes_no_predicate():
    """No text and no buyers: every record is eligible, only paging is bound."""
    assert not compile_predicate(SearchFilter())

    query = build_page_query(SearchFilter(), offset=0, limit=11)
    assert "WHERE" not in query.sql
    assert query.sql.endswith("ORDER BY id LIMIT :limit OFFSET :offset")
    assert query.params == {"limit": 11, "offset": 0}
    assert query.expanding == ()


def test_text_and_buyers_are_conjoined():
    search = SearchFilter.build("road", ["b1", "b2"])
    predicate = compile_predicate(search)

    assert " AND " in predicate.text
    assert "lower(title) LIKE lower(:text_search)" in predicate.text
    assert "lower(description) LIKE lower(:text_search)" in predicate.text
    assert "buyer_id IN :buyer_ids" in predicate.text
    assert predicate.params == {"text_search": "%road%", "buyer_ids": ["b1", "b2"]}
    assert predicate.expanding == ("buyer_ids",)

    query = build_page_query(search, offset=20, limit=11)
    assert f"WHERE {predicate.text} ORDER BY id" in query.sql
    assert query.params["offset"] == 20
    assert query.params["limit"] == 11


def test_text_only_filter():
    predicate = compile_predicate(SearchFilter.build("Road"))
    assert "buyer_id" not in predicate.text
    assert predicate.params == {"text_search": "%Road%"}
    assert predicate.expanding == ()


def test_buyers_only_filter():
    predicate = compile_predicate(SearchFilter.build(None, ["b3"]))
    assert predicate.text == "buyer_id IN :buyer_ids"
    assert predicate.params == {"buyer_ids": ["b3"]}


def test_blank_text_and_empty_buyers_are_ignored():
    assert not compile_predicate(SearchFilter.build("   ", []))
    assert not compile_predicate(SearchFilter.build("", None))


def test_search_text_is_bound_not_interpolated():
    hostile = "x' OR 1=1 --"
    query = build_page_query(SearchFilter.build(hostile), offset=0, limit=5)

    assert hostile not in query.sql
    assert "1=1" not in query.sql
    assert query.params["text_search"] == "%x' OR 1=1 --%"


def test_like_pattern_matches_wildcards_literally():
    assert like_pattern("100%") == "%100\\%%"
    assert like_pattern("a_b") == "%a\\_b%"
    assert like_pattern("back\\slash") == "%back\\\\slash%"


def test_duplicate_buyer_ids_collapse_in_order():
    search = SearchFilter.build(None, ["b2", "b1", "b2"])
    assert search.buyer_ids == ("b2", "b1")

