# File: tests/conftest.py

"""
Shared fixtures. Each test gets its own SQLite file, so schema tests can
trigger constraint violations without leaking state.
"""

import pytest_asyncio
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from accounthub.db.session import init_db
from accounthub.repositories import UserRepository
from accounthub.services import UserService


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine):
    maker = async_sessionmaker(bind=engine, expire_on_commit=False)
    async with maker() as session:
        yield session


@pytest_asyncio.fixture
async def user_repo(session):
    return UserRepository(session)


@pytest_asyncio.fixture
async def user_service(session, user_repo):
    return UserService(session, user_repo)
