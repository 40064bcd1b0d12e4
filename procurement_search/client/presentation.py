"""Display helpers for search results: value formatting and stage labels."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum

from babel.numbers import format_currency

from procurement_search.core.config import settings
from procurement_search.schemas.record import StageInfoOut, ValueOut

logger = logging.getLogger(__name__)


class StageKind(str, Enum):
    TENDER = "TENDER"
    CONTRACT = "CONTRACT"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class Stage:
    """Record stage as a closed set of kinds; `raw` keeps the original string."""

    kind: StageKind
    raw: str

    @classmethod
    def parse(cls, raw: str) -> Stage:
        try:
            kind = StageKind(raw)
        except ValueError:
            kind = StageKind.UNKNOWN
        return cls(kind=kind, raw=raw)


def format_value(value: ValueOut, locale: str | None = None) -> str:
    """Locale-aware money string, e.g. "$100.00" or "£450.00 / day".

    A currency of the form "CODE/unit" is a rate: the unit is appended after
    the formatted amount.
    """
    if value.amount is None or not value.currency:
        return ""

    code, sep, unit = value.currency.partition("/")
    formatted = format_currency(value.amount, code, locale=locale or settings.display_locale)
    return f"{formatted} / {unit}" if sep else formatted


def stage_label(stage_info: StageInfoOut, today: date | None = None) -> str:
    today = today or date.today()
    stage = Stage.parse(stage_info.stage)

    if stage.kind is StageKind.TENDER:
        if stage_info.close_date is not None and stage_info.close_date > today:
            return f"Open until {stage_info.close_date.isoformat()}"
        return "Closed"

    if stage.kind is StageKind.CONTRACT:
        if stage_info.award_date is not None:
            return f"Awarded on {stage_info.award_date.isoformat()}"
        return ""

    logger.warning("Unknown procurement stage %r; rendering empty label", stage.raw)
    return ""
