"""Database package — async SQLAlchemy engine/session builders, Base, get_db."""
from procurement_search.db.base import (
    Base,
    build_engine,
    build_session_factory,
    get_db,
    init_db,
)

__all__ = ["Base", "build_engine", "build_session_factory", "get_db", "init_db"]
