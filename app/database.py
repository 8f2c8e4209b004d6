"""데이터베이스 엔진 및 세션 설정 모듈.

Database engine and session configuration module.
The store talks to the hosted PostgreSQL (Supabase) through asyncpg; a
``sqlite+aiosqlite`` URL is accepted for local development and tests.
"""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, AsyncEngine, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from app.config import settings


def engine_options(database_url: str) -> dict[str, Any]:
    """드라이버별 엔진 옵션을 반환합니다.

    Return ``create_async_engine`` keyword arguments for the given URL.
    Pool sizing and the asyncpg statement cache flag only apply to PostgreSQL.
    """
    options: dict[str, Any] = {"echo": settings.DEBUG}
    if database_url.startswith("sqlite"):
        return options
    options.update(
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=10,
        # Supavisor(트랜잭션 모드 풀러)에서 prepared statement 비활성화
        # Disable prepared statement caches for Supavisor transaction-mode pooling
        connect_args={"statement_cache_size": 0},
    )
    return options


# 비동기 데이터베이스 엔진 — Async database engine
engine: AsyncEngine = create_async_engine(settings.DATABASE_URL, **engine_options(settings.DATABASE_URL))

# 비동기 세션 팩토리 — expire_on_commit=False: 커밋 후에도 속성 접근 가능
async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """SQLAlchemy 선언적 베이스 클래스 — All ORM models inherit from this class."""

    pass


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """요청 단위 비동기 DB 세션을 제공합니다.

    FastAPI dependency that yields an async database session and closes it
    once the request completes. Routers own the commit.

    Yields:
        AsyncSession: SQLAlchemy 비동기 세션 인스턴스 (Async session instance)
    """
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()
