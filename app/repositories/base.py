"""기본 레포지토리 — 상품/주문/장바구니/문의/관리자 레포지토리의 공통 부모.

Base Repository — Shared parent of the product, order, cart, contact and
admin repositories. Every method flushes and never commits; the router that
owns the request commits the transaction.

Usage:
    class ContactRepository(BaseRepository[Contact]):
        def __init__(self) -> None:
            super().__init__(Contact)
"""

from typing import Any, Generic, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base
from app.utils.pagination import paginate

# UUID 기본 키를 가진 스토어 테이블 모델 — Store table model with a UUID primary key
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """UUID 키 테이블용 공통 쿼리.

    Attributes:
        model: 대상 ORM 모델 (Mapped store table)
    """

    def __init__(self, model: type[ModelType]) -> None:
        self.model: type[ModelType] = model

    async def get_by_id(
        self,
        db: AsyncSession,
        record_id: UUID,
    ) -> ModelType | None:
        """UUID로 행을 조회합니다 — None when the row does not exist.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 행의 UUID (Row UUID)
        """
        result = await db.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def get_paginated(
        self,
        db: AsyncSession,
        query: Select,
        page: int = 1,
        per_page: int = 20,
    ) -> tuple[Sequence[ModelType], int]:
        """목록 쿼리의 한 페이지와 전체 개수 (Page of rows plus total count)."""
        return await paginate(db, query, page, per_page)

    async def count(self, db: AsyncSession) -> int:
        """테이블 전체 행 수 — used for the product count and the seed guard."""
        query: Select = select(func.count()).select_from(self.model)
        return (await db.execute(query)).scalar() or 0

    async def create(
        self,
        db: AsyncSession,
        obj_data: dict[str, Any],
    ) -> ModelType:
        """행을 추가하고 서버 기본값(id, created_at)을 읽어 반환합니다.

        Insert a row, flush, and refresh it so generated ids and timestamps
        are available before commit.
        """
        db_obj: ModelType = self.model(**obj_data)
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def create_many(
        self,
        db: AsyncSession,
        rows: list[dict[str, Any]],
    ) -> list[ModelType]:
        """여러 행을 한 번의 flush로 추가합니다 (시드용)."""
        objs: list[ModelType] = [self.model(**row) for row in rows]
        db.add_all(objs)
        await db.flush()
        return objs

    async def update(
        self,
        db: AsyncSession,
        record_id: UUID,
        update_data: dict[str, Any],
    ) -> ModelType | None:
        """주어진 컬럼만 갱신합니다.

        Write the keys of ``update_data`` onto the row; unknown keys are
        ignored.

        Returns:
            ModelType | None: 갱신된 행, 없으면 None (Updated row or None)
        """
        db_obj: ModelType | None = await self.get_by_id(db, record_id)
        if db_obj is None:
            return None

        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def delete(
        self,
        db: AsyncSession,
        record_id: UUID,
    ) -> bool:
        """행 삭제 — False when nothing matched."""
        db_obj: ModelType | None = await self.get_by_id(db, record_id)
        if db_obj is None:
            return False

        await db.delete(db_obj)
        await db.flush()
        return True
