"""장바구니 레포지토리 — Cart persistence queries."""

from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.cart import Cart
from app.repositories.base import BaseRepository


class CartRepository(BaseRepository[Cart]):
    """장바구니 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Cart)

    async def get_or_create(self, db: AsyncSession, cart_id: UUID | None) -> Cart:
        """쿠키의 장바구니를 조회하고, 없으면 새로 만듭니다.

        Return the cart referenced by the cookie, creating an empty one when
        the cookie is missing or points to a cart that no longer exists.
        """
        if cart_id is not None:
            cart: Cart | None = await self.get_by_id(db, cart_id)
            if cart is not None:
                return cart
        return await self.create(db, {"items": []})

    async def save_items(self, db: AsyncSession, cart: Cart, items: list[dict[str, Any]]) -> Cart:
        """장바구니 라인 전체를 교체합니다.

        Replace the cart lines. The JSON column is reassigned, never mutated
        in place, so the ORM sees the change.
        """
        cart.items = items
        await db.flush()
        await db.refresh(cart)
        return cart


# 싱글턴 인스턴스 — Singleton instance
cart_repository: CartRepository = CartRepository()
