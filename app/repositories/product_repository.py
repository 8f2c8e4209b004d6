"""상품 레포지토리 — 상품 관련 DB 쿼리 담당.

Product Repository — Handles all product-related database queries.
"""

from typing import Sequence

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.product import Product
from app.repositories.base import BaseRepository


class ProductRepository(BaseRepository[Product]):
    """상품 레포지토리.

    Extends:
        BaseRepository[Product]
    """

    def __init__(self) -> None:
        super().__init__(Product)

    async def get_catalog(
        self,
        db: AsyncSession,
        category: str | None = None,
    ) -> Sequence[Product]:
        """카탈로그를 등록순으로 조회합니다.

        Retrieve the catalog ordered by creation time (oldest first),
        optionally restricted to one category.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            category: 카테고리 필터, None이면 전체 (Category filter; None for all)

        Returns:
            Sequence[Product]: 상품 목록 (Products)
        """
        query: Select = select(Product).order_by(Product.created_at.asc())
        if category is not None:
            query = query.where(Product.category == category)
        result = await db.execute(query)
        return result.scalars().all()


# 싱글턴 인스턴스 — Singleton instance
product_repository: ProductRepository = ProductRepository()
