import os

# app 모듈 import 전에 테스트용 DB URL 지정
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

from typing import Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from app.api.v1.deps import get_db
from app.db.base import Base
from app.db.seed import DEFAULT_SEED_COUNT, seed_properties
from app.db.session import build_session_factory
from app.main import app
from app.models.property import Property


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    factory = build_session_factory(engine)
    async with factory() as db:
        await seed_properties(db, DEFAULT_SEED_COUNT)
    return factory


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def fetch_property(session_factory):
    """요청 이후 DB 상태를 새 세션으로 확인"""
    async def _fetch(property_id: int) -> Optional[Property]:
        async with session_factory() as session:
            return await session.get(Property, property_id)
    return _fetch


@pytest.fixture
def property_payload():
    return {
        "address": "123 Fake St",
        "price": 200000.0,
        "bedrooms": 3,
        "bathrooms": 3,
        "type": "Condominium",
    }
