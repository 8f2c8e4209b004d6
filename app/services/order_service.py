"""주문 서비스 — 주문 생성, 체크아웃, 관리자 주문 관리.

Order Service — Order creation, storefront checkout from the cart, and the
admin status / payment-status / delete operations.

Order events (INSERT / UPDATE / DELETE) are published by the routers after
the transaction commits.
"""

import logging
from typing import Any, Sequence
from uuid import UUID

from sqlalchemy import Select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.cart import Cart
from app.models.order import ORDER_STATUSES, PAYMENT_STATUSES, Order
from app.repositories.order_repository import order_repository
from app.schemas.order import CheckoutRequest, OrderCreate
from app.services.cart_service import cart_service, total_price
from app.utils.exceptions import BadRequestError, NotFoundError
from app.utils.revenue import normalize_order

logger = logging.getLogger(__name__)

# 튀니지 24개 주(州) — The 24 Tunisian governorates accepted at checkout
GOVERNORATES: tuple[str, ...] = (
    "Ariana", "Béja", "Ben Arous", "Bizerte", "Gabès", "Gafsa",
    "Jendouba", "Kairouan", "Kasserine", "Kebili", "Kef", "Mahdia",
    "Manouba", "Medenine", "Monastir", "Nabeul", "Sfax", "Sidi Bouzid",
    "Siliana", "Sousse", "Tataouine", "Tozeur", "Tunis", "Zaghouan",
)


def validate_checkout(data: CheckoutRequest) -> dict[str, str]:
    """체크아웃 양식을 검증하고 공백을 제거한 값을 반환합니다.

    Validate the checkout form and return the stripped values.

    Raises:
        BadRequestError: 첫 번째 검증 실패 항목의 메시지 (Message of the first failing field)
    """
    name = data.name.strip()
    phone = data.phone.strip()
    street = data.street.strip()
    city = data.city.strip()
    governorate = data.governorate.strip()

    if len(name) < 2:
        raise BadRequestError("Name must be at least 2 characters")
    if len(phone) < 8:
        raise BadRequestError("Phone number must be at least 8 characters")
    if len(street) < 5:
        raise BadRequestError("Street address must be at least 5 characters")
    if len(city) < 2:
        raise BadRequestError("City must be at least 2 characters")
    if governorate not in GOVERNORATES:
        raise BadRequestError("Please select a valid governorate")

    return {"name": name, "phone": phone, "street": street, "city": city, "governorate": governorate}


class OrderService:
    """주문 관련 비즈니스 로직을 처리하는 서비스."""

    async def create_order(
        self,
        db: AsyncSession,
        data: OrderCreate,
    ) -> Order:
        """주문을 생성합니다 (status=pending, payment_status=unpaid).

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 주문 데이터 (Customer, address, total, items)

        Returns:
            Order: 생성된 주문 (Created order)

        Raises:
            BadRequestError: 음수 총액 (Negative total)
        """
        if data.total_price < 0:
            raise BadRequestError("Total price cannot be negative")

        order: Order = await order_repository.create(
            db,
            {
                "customer_name": data.customer_name,
                "phone": data.phone,
                "address": data.address,
                "total_price": data.total_price,
                "items": [line.model_dump() for line in data.items],
                "status": "pending",
                "payment_status": "unpaid",
            },
        )
        logger.info(f"Order {order.id} created for {data.customer_name!r} ({data.total_price:.2f})")
        return order

    async def checkout(
        self,
        db: AsyncSession,
        cart: Cart,
        data: CheckoutRequest,
    ) -> Order:
        """장바구니로 주문을 생성하고 장바구니를 비웁니다.

        Validate the form, build ``"street, city, governorate"`` as the
        address, create the order from the cart lines and clear the cart.

        Raises:
            BadRequestError: 빈 장바구니 또는 양식 오류 (Empty cart or invalid form)
        """
        items: list[dict[str, Any]] = list(cart.items or [])
        if not items:
            raise BadRequestError("Your cart is empty")

        form = validate_checkout(data)
        order: Order = await self.create_order(
            db,
            OrderCreate(
                customer_name=form["name"],
                phone=form["phone"],
                address=f"{form['street']}, {form['city']}, {form['governorate']}",
                total_price=round(total_price(items), 2),
                items=items,
            ),
        )
        await cart_service.clear(db, cart)
        return order

    async def get_order(self, db: AsyncSession, order_id: UUID) -> Order:
        """단일 주문 조회.

        Raises:
            NotFoundError: 주문 없음 (Order not found)
        """
        order: Order | None = await order_repository.get_by_id(db, order_id)
        if order is None:
            raise NotFoundError("Order not found")
        return order

    async def list_orders(
        self,
        db: AsyncSession,
        status: str | None = None,
        page: int = 1,
        per_page: int = 20,
    ) -> tuple[Sequence[Order], int]:
        """주문 목록을 최신순으로 페이지 조회합니다.

        Args:
            status: 상태 필터 (Status filter, validated when given)

        Returns:
            tuple[Sequence[Order], int]: (주문 목록, 전체 개수) (Orders, total count)
        """
        if status is not None:
            status = self._validate_status(status)
        query: Select = order_repository.list_query(status)
        return await order_repository.get_paginated(db, query, page, per_page)

    async def get_all_orders(self, db: AsyncSession) -> list[dict[str, Any]]:
        """모든 주문을 정규화하여 최신순으로 반환합니다."""
        orders: Sequence[Order] = await order_repository.get_all_newest_first(db)
        return [normalize_order(o) for o in orders]

    async def update_status(self, db: AsyncSession, order_id: UUID, status: str) -> Order:
        """주문 상태 변경.

        Raises:
            BadRequestError: 허용되지 않은 상태 (Invalid status)
            NotFoundError: 주문 없음 (Order not found)
        """
        value = self._validate_status(status)
        order: Order | None = await order_repository.set_field(db, order_id, status=value)
        if order is None:
            raise NotFoundError("Order not found")
        return order

    async def update_payment_status(
        self,
        db: AsyncSession,
        order_id: UUID,
        payment_status: str,
    ) -> Order:
        """결제 상태 변경 (paid | unpaid).

        Raises:
            BadRequestError: 허용되지 않은 결제 상태 (Invalid payment status)
            NotFoundError: 주문 없음 (Order not found)
        """
        value = payment_status.strip().lower()
        if value not in PAYMENT_STATUSES:
            raise BadRequestError("Invalid payment status")
        order: Order | None = await order_repository.set_field(db, order_id, payment_status=value)
        if order is None:
            raise NotFoundError("Order not found")
        return order

    async def delete_order(self, db: AsyncSession, order_id: UUID) -> Order:
        """주문 삭제 — returns the deleted order for the DELETE event payload."""
        order: Order = await self.get_order(db, order_id)
        await order_repository.delete(db, order_id)
        logger.info(f"Order {order_id} deleted")
        return order

    def to_response(self, order: Order) -> dict[str, Any]:
        """주문 ORM 객체를 정규화된 응답 딕셔너리로 변환합니다."""
        return normalize_order(order)

    def _validate_status(self, status: str) -> str:
        value = status.strip().lower()
        if value not in ORDER_STATUSES:
            raise BadRequestError("Invalid status")
        return value


# 싱글턴 인스턴스 — Singleton instance
order_service: OrderService = OrderService()
