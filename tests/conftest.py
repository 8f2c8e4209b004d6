"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite (aiosqlite) database, session, and
httpx client fixtures. Each test gets a fresh schema on its own engine.
"""

from collections.abc import AsyncGenerator
from datetime import datetime, timezone
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.config import settings
from app.database import Base, get_db
from app.main import app
from app.models import *  # noqa: F401,F403 — register all models with metadata
from app.models.admin import Admin
from app.models.order import Order
from app.models.product import Product
from app.services.realtime_service import order_event_broker
from app.utils.jwt import create_session_token
from app.utils.password import hash_password

# ---------------------------------------------------------------------------
# 테스트 DB 설정
# ---------------------------------------------------------------------------
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

ADMIN_PASSWORD = "admin12345"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 테스트마다 스키마를 새로 생성합니다."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def reset_order_events():
    """브로커 싱글턴의 알림 상태를 테스트마다 초기화합니다."""
    order_event_broker.clear()
    yield
    order_event_broker.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def admin(db: AsyncSession) -> Admin:
    """관리자 계정을 생성합니다."""
    a = Admin(username="admin", password_hash=hash_password(ADMIN_PASSWORD))
    db.add(a)
    await db.flush()
    await db.refresh(a)
    return a


@pytest.fixture
def admin_token(admin: Admin) -> str:
    return create_session_token(admin.username)


async def make_product(db: AsyncSession, **overrides: Any) -> Product:
    """테스트 상품을 생성합니다."""
    data: dict[str, Any] = {
        "title": "Classic Loafer",
        "price": 320.0,
        "description": "Hand-stitched leather loafer.",
        "image_url": "https://example.com/loafer.jpg",
        "sizes": [40, 41, 42],
        "color": "Black",
        "category": "men",
    }
    data.update(overrides)
    p = Product(**data)
    db.add(p)
    await db.flush()
    await db.refresh(p)
    return p


async def make_order(db: AsyncSession, **overrides: Any) -> Order:
    """테스트 주문을 생성합니다."""
    data: dict[str, Any] = {
        "customer_name": "Amira Ben Salah",
        "phone": "22123456",
        "address": "12 Rue de Marseille, Tunis, Tunis",
        "total_price": 100.0,
        "items": [],
        "status": "pending",
        "payment_status": "unpaid",
        "created_at": datetime.now(timezone.utc),
    }
    data.update(overrides)
    o = Order(**data)
    db.add(o)
    await db.flush()
    await db.refresh(o)
    return o


@pytest_asyncio.fixture
async def product(db: AsyncSession) -> Product:
    return await make_product(db)


def session_header(token: str) -> dict[str, str]:
    return {"Cookie": f"{settings.ADMIN_SESSION_COOKIE}={token}"}


def cart_header(cart_id: str) -> dict[str, str]:
    return {"Cookie": f"{settings.CART_COOKIE}={cart_id}"}
