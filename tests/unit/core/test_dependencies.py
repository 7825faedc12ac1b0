"""Unit tests for service wiring and table creation."""

import pytest
from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from dependencies import get_member_service, get_uow_factory
from domain.services.member_service import MemberService
from infrastructure.database.session import init_models
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


def test_member_service_is_cached():
    service = get_member_service()

    assert isinstance(service, MemberService)
    assert get_member_service() is service


def test_uow_factory_builds_fresh_units():
    factory = get_uow_factory()

    first, second = factory(), factory()

    assert isinstance(first, SQLAlchemyUnitOfWork)
    assert first is not second


@pytest.mark.asyncio
async def test_init_models_creates_tables():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)

    await init_models(engine)
    await init_models(engine)

    async with engine.connect() as conn:
        tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
    await engine.dispose()

    assert {"members", "profiles"} <= set(tables)
