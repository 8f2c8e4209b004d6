"""장바구니 서비스 — 장바구니 라인 병합, 수량 변경, 합계 계산.

Cart Service — Line merging, quantity changes and totals for the
server-side cart identified by the ``luxeshopy_cart`` cookie.

The line operations are pure functions over a list of line dicts; the
CartService methods load the cart row, apply one of them and save the
new list.
"""

from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.cart import Cart
from app.models.product import Product
from app.repositories.cart_repository import cart_repository
from app.repositories.product_repository import product_repository
from app.schemas.cart import CartAddRequest
from app.utils.exceptions import BadRequestError, NotFoundError

CartItems = list[dict[str, Any]]


def make_line_id(product_id: str, size: int | None, color: str | None) -> str:
    """라인 식별자 "<product_id>::<size>::<color>" 를 만듭니다."""
    return f"{product_id}::{size if size is not None else ''}::{color or ''}"


def add_line(
    items: CartItems,
    product: dict[str, Any],
    size: int | None = None,
    color: str | None = None,
) -> CartItems:
    """상품을 장바구니에 담습니다.

    Add one unit of a product variant. A line with the same line id gets
    its quantity bumped by one; otherwise a new line with quantity 1 is
    appended.

    Args:
        items: 현재 라인 목록 (Current lines)
        product: {"id", "title", "price"} 를 가진 상품 (Product fields)
        size: 선택 사이즈 (Selected size)
        color: 선택 색상 (Selected color)

    Returns:
        CartItems: 새 라인 목록 (New list of lines)
    """
    product_id = str(product["id"])
    line_id = make_line_id(product_id, size, color)

    if any(line["line_id"] == line_id for line in items):
        return [
            {**line, "quantity": line["quantity"] + 1} if line["line_id"] == line_id else line
            for line in items
        ]

    return [
        *items,
        {
            "line_id": line_id,
            "product_id": product_id,
            "name": product["title"],
            "price": float(product["price"] or 0),
            "quantity": 1,
            "size": size,
            "color": color,
        },
    ]


def remove_line(items: CartItems, line_id: str) -> CartItems:
    return [line for line in items if line["line_id"] != line_id]


def update_quantity(items: CartItems, line_id: str, quantity: int) -> CartItems:
    """라인 수량을 변경합니다. 0 이하이면 라인을 제거합니다."""
    if quantity <= 0:
        return remove_line(items, line_id)
    return [
        {**line, "quantity": quantity} if line["line_id"] == line_id else line
        for line in items
    ]


def total_items(items: CartItems) -> int:
    return sum(line["quantity"] for line in items)


def total_price(items: CartItems) -> float:
    """합계 = Σ 단가 × 수량 — Sum of price × quantity."""
    return sum(float(line["price"]) * line["quantity"] for line in items)


class CartService:
    """장바구니 관련 비즈니스 로직을 처리하는 서비스.

    Service wrapping the pure line functions around the persisted cart row.
    """

    async def get_cart(self, db: AsyncSession, cart_id: UUID | None) -> Cart:
        """쿠키의 장바구니를 조회하거나 새로 만듭니다."""
        return await cart_repository.get_or_create(db, cart_id)

    async def add_item(
        self,
        db: AsyncSession,
        cart_id: UUID | None,
        data: CartAddRequest,
    ) -> Cart:
        """장바구니에 상품을 담습니다.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            cart_id: 쿠키의 장바구니 ID (Cart id from the cookie, may be None)
            data: 담을 상품 및 옵션 (Product id, size, color)

        Returns:
            Cart: 갱신된 장바구니 (Updated cart)

        Raises:
            BadRequestError: 잘못된 상품 ID 또는 없는 사이즈 (Malformed id or unknown size)
            NotFoundError: 상품 없음 (Product does not exist)
        """
        try:
            product_id = UUID(data.product_id)
        except ValueError:
            raise BadRequestError("Invalid product id")

        product: Product | None = await product_repository.get_by_id(db, product_id)
        if product is None:
            raise NotFoundError("Product not found")

        if data.size is not None and product.sizes and data.size not in product.sizes:
            raise BadRequestError("Size not available")

        cart: Cart = await self.get_cart(db, cart_id)
        items = add_line(
            cart.items or [],
            {"id": product.id, "title": product.title, "price": product.price},
            size=data.size,
            color=data.color if data.color is not None else product.color,
        )
        return await cart_repository.save_items(db, cart, items)

    async def remove_item(self, db: AsyncSession, cart_id: UUID | None, line_id: str) -> Cart:
        cart: Cart = await self.get_cart(db, cart_id)
        return await cart_repository.save_items(db, cart, remove_line(cart.items or [], line_id))

    async def set_quantity(
        self,
        db: AsyncSession,
        cart_id: UUID | None,
        line_id: str,
        quantity: int,
    ) -> Cart:
        """라인 수량 변경 — quantity <= 0 removes the line."""
        cart: Cart = await self.get_cart(db, cart_id)
        items: CartItems = cart.items or []
        if not any(line["line_id"] == line_id for line in items):
            raise NotFoundError("Cart line not found")
        return await cart_repository.save_items(db, cart, update_quantity(items, line_id, quantity))

    async def clear(self, db: AsyncSession, cart: Cart) -> Cart:
        return await cart_repository.save_items(db, cart, [])

    def to_response(self, cart: Cart) -> dict[str, Any]:
        """장바구니 ORM 객체를 응답 딕셔너리로 변환합니다."""
        items: CartItems = cart.items or []
        return {
            "id": str(cart.id),
            "items": items,
            "total_items": total_items(items),
            "total_price": round(total_price(items), 2),
        }


# 싱글턴 인스턴스 — Singleton instance
cart_service: CartService = CartService()
