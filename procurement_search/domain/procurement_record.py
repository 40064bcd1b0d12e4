"""SQLAlchemy ORM model for Procurement Records."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy import Date, ForeignKey, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from procurement_search.db.base import Base


class ProcurementRecord(Base):
    """One published notice. Read-only as far as the search API is concerned."""

    __tablename__ = "procurement_records"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    publish_date: Mapped[date] = mapped_column(Date, nullable=False)

    buyer_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("buyers.id"), nullable=False, index=True
    )

    # e.g. 1200.00 "GBP" or 450.00 "GBP/day"
    value: Mapped[Optional[Decimal]] = mapped_column(Numeric(18, 2), nullable=True)
    currency: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)

    # "TENDER" | "CONTRACT" (other values are passed through untouched)
    stage: Mapped[str] = mapped_column(String(50), nullable=False)
    close_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    award_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
