"""SQLAlchemy ORM model for Buyers.

Buyer names are display names only: several buyers (e.g. the same
organisation in different countries) can share one name, so lookups and
filtering always go through ``id``.
"""

from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from procurement_search.db.base import Base


class Buyer(Base):
    __tablename__ = "buyers"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
