"""Pytest configuration and fixtures."""

from datetime import date
from decimal import Decimal

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from procurement_search.db.base import build_session_factory, init_db
from procurement_search.domain import Buyer, ProcurementRecord
from procurement_search.main import create_app

# Two buyers share a display name on purpose
BUYERS = [
    ("b1", "Acme Council"),
    ("b2", "Acme Council"),
    ("b3", "Beta Health Trust"),
]

ROAD_RECORDS = 25
CATERING_RECORDS = 5


def make_record(record_id: str, buyer_id: str, **overrides) -> ProcurementRecord:
    fields = dict(
        id=record_id,
        title="Untitled notice",
        description="",
        publish_date=date(2024, 3, 1),
        buyer_id=buyer_id,
        value=Decimal("1000.00"),
        currency="GBP",
        stage="TENDER",
        close_date=date(2024, 6, 30),
        award_date=None,
    )
    fields.update(overrides)
    return ProcurementRecord(**fields)


def seed_records() -> list[ProcurementRecord]:
    """25 road records alternating b1/b2, then 5 catering records for b3."""
    records = []
    for n in range(1, ROAD_RECORDS + 1):
        records.append(
            make_record(
                f"rec-{n:03d}",
                "b1" if n % 2 else "b2",
                title=f"Road resurfacing lot {n}",
                description="Highways maintenance framework",
            )
        )
    for n in range(ROAD_RECORDS + 1, ROAD_RECORDS + CATERING_RECORDS + 1):
        records.append(
            make_record(
                f"rec-{n:03d}",
                "b3",
                title="School catering" if n != ROAD_RECORDS + 1 else "School catering 100% organic",
                description="Hot meals for primary schools",
                stage="CONTRACT",
                close_date=None,
                award_date=date(2024, 2, 14),
                value=Decimal("450.00"),
                currency="GBP/day",
            )
        )
    return records


@pytest_asyncio.fixture
async def engine():
    """Create a temporary in-memory database with all tables."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await init_db(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest_asyncio.fixture
async def seeded(session_factory):
    async with session_factory() as session:
        session.add_all([Buyer(id=i, name=n) for i, n in BUYERS])
        await session.flush()
        session.add_all(seed_records())
        await session.commit()
    return session_factory


@pytest_asyncio.fixture
async def session(seeded):
    async with seeded() as session:
        yield session


@pytest.fixture
def app(seeded):
    return create_app(session_factory=seeded)


@pytest_asyncio.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
