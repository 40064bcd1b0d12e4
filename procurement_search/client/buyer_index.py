"""Buyer name → buyer ids index.

Several buyers can share a display name (same organisation registered in
different countries, for instance). The filter UI offers names, the search
API filters on ids, so a selected name stands for every id carrying it.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable, Mapping

from procurement_search.schemas.buyer import BuyerOut

logger = logging.getLogger(__name__)

BuyerNameIndex = Mapping[str, frozenset[str]]


def build_index(buyers: Iterable[BuyerOut]) -> dict[str, frozenset[str]]:
    grouped: dict[str, set[str]] = defaultdict(set)
    for buyer in buyers:
        grouped[buyer.name].add(buyer.id)
    return {name: frozenset(ids) for name, ids in grouped.items()}


def resolve(index: BuyerNameIndex, selected_names: Iterable[str]) -> frozenset[str]:
    """Union of the ids behind each selected name.

    A name missing from the index (buyer list older than the records)
    contributes nothing.
    """
    ids: set[str] = set()
    for name in selected_names:
        matched = index.get(name)
        if not matched:
            logger.warning("Buyer name %r is not in the buyer index", name)
            continue
        ids |= matched
    return frozenset(ids)
