"""주문 레포지토리 — 주문 관련 DB 쿼리 담당.

Order Repository — Handles all order-related database queries.
Extends BaseRepository with listing, status updates, and the pending
counter used by the admin notification bell.
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import Select, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.order import Order
from app.repositories.base import BaseRepository


class OrderRepository(BaseRepository[Order]):
    """주문 레포지토리.

    Extends:
        BaseRepository[Order]
    """

    def __init__(self) -> None:
        super().__init__(Order)

    def list_query(self, status: str | None = None) -> Select:
        """최신순 주문 목록 쿼리를 만듭니다.

        Build the newest-first order listing query, optionally filtered by status.
        """
        query: Select = select(Order).order_by(Order.created_at.desc())
        if status is not None:
            query = query.where(Order.status == status)
        return query

    async def get_all_newest_first(self, db: AsyncSession) -> Sequence[Order]:
        """모든 주문을 최신순으로 조회합니다 — All orders, newest first."""
        result = await db.execute(self.list_query())
        return result.scalars().all()

    async def get_latest(self, db: AsyncSession, limit: int = 5) -> Sequence[Order]:
        """최근 주문 N건을 조회합니다.

        Retrieve the ``limit`` most recent orders.
        """
        result = await db.execute(self.list_query().limit(limit))
        return result.scalars().all()

    async def get_pending_count(self, db: AsyncSession) -> int:
        """대기(pending) 상태 주문 수를 조회합니다.

        Count orders whose status is still ``pending``.
        """
        query: Select = select(func.count()).select_from(Order).where(Order.status == "pending")
        return (await db.execute(query)).scalar() or 0

    async def set_field(
        self,
        db: AsyncSession,
        order_id: UUID,
        **values: str,
    ) -> Order | None:
        """단일 주문의 필드를 갱신하고 갱신된 주문을 반환합니다.

        Update columns of one order with a single UPDATE statement.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            order_id: 주문 UUID (Order UUID)
            **values: 갱신할 컬럼 값 (Column values to write)

        Returns:
            Order | None: 갱신된 주문, 해당 주문이 없으면 None
                          (Updated order, or None when no row matched)
        """
        result = await db.execute(
            update(Order).where(Order.id == order_id).values(**values)
        )
        await db.flush()
        if result.rowcount == 0:
            return None

        order: Order | None = await self.get_by_id(db, order_id)
        if order is not None:
            await db.refresh(order)
        return order


# 싱글턴 인스턴스 — Singleton instance
order_repository: OrderRepository = OrderRepository()
