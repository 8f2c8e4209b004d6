"""초기 데이터 시드 스크립트 — 테이블, 관리자 계정, 예시 상품 생성.

Seed script — Creates the tables, the admin account and the example
products. Run once to bootstrap a fresh database.

Usage:
    python -m app.seed

Creates:
    - 1개 관리자 계정: SEED_ADMIN_USERNAME / SEED_ADMIN_PASSWORD (1 admin)
    - 2개 예시 상품 (상품 테이블이 비어있을 때만) (2 example products, empty table only)
"""

import asyncio

import app.models  # noqa: F401  모든 모델을 metadata에 등록 (Register every model on the metadata)
from app.config import settings
from app.database import Base, async_session, engine
from app.services.auth_service import auth_service
from app.services.product_service import product_service


async def seed() -> None:
    """데이터베이스를 초기 데이터로 시드합니다.

    Seed the database with initial data.
    Idempotent: 이미 있는 관리자/상품은 건너뜁니다 (Existing admin and products are kept).
    """
    # 테이블 생성 — DDL 실행 (Create all tables from ORM metadata)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        admin, created = await auth_service.ensure_admin(
            db, settings.SEED_ADMIN_USERNAME, settings.SEED_ADMIN_PASSWORD
        )
        result = await product_service.seed_example_products(db)
        await db.commit()

    if created:
        print(f"Seeded admin user={admin.username}")
    else:
        print(f"Admin user={admin.username} already exists. Skipping.")
    print(result["message"])


if __name__ == "__main__":
    asyncio.run(seed())
