from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from accounthub.core.config import settings
from accounthub.models.base import Base

engine: AsyncEngine = create_async_engine(settings.database_url, echo=settings.debug)

# Objects stay usable after commit; async sessions cannot lazy-load expired attributes.
SessionLocal = async_sessionmaker(bind=engine, expire_on_commit=False)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency that provides an AsyncSession and closes it afterwards.

    Usage in route functions:
        session: AsyncSession = Depends(get_session)
    """
    async with SessionLocal() as session:
        yield session


async def init_db(bind: AsyncEngine | None = None) -> None:
    """
    Create all tables (and native enum types on PostgreSQL) from the models.
    """
    # Registers User on Base.metadata
    from accounthub.models import definitions  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
