"""주문 관련 SQLAlchemy ORM 모델 정의.

Order SQLAlchemy ORM model definitions.
Orders are created by the storefront checkout and mutated only by admin
status / payment-status updates. Customers are not persisted; they are
derived from orders (see app.services.customer_service).

Tables:
    - orders: 고객 주문 (Customer orders with a JSON snapshot of the cart lines)
"""

import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, DateTime, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base

# 주문 상태 — Fulfilment statuses
ORDER_STATUSES: tuple[str, ...] = ("pending", "shipped", "delivered", "cancelled")

# 결제 상태 — Payment statuses
PAYMENT_STATUSES: tuple[str, ...] = ("paid", "unpaid")


class Order(Base):
    """주문 모델 — 체크아웃으로 생성된 고객 주문.

    Order model — A customer order placed through checkout.

    Status Values (status 필드 값):
        - "pending": 접수됨 (Placed, awaiting shipment)
        - "shipped": 배송 중 (Handed to the carrier)
        - "delivered": 배송 완료 (Delivered to the customer)
        - "cancelled": 취소됨 (Cancelled, never counts as revenue)

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        customer_name: 고객 이름 (Customer full name)
        phone: 연락처 (Phone number, also the customer grouping key)
        address: 배송 주소 (Shipping address "street, city, governorate")
        total_price: 주문 총액 (Order total)
        items: 주문 항목 스냅샷 (JSON snapshot of cart lines)
        status: 주문 상태 (Fulfilment status, see above)
        payment_status: 결제 상태 (paid | unpaid)
        created_at: 생성 일시 UTC (Creation timestamp)
    """

    __tablename__ = "orders"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    customer_name: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True, index=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    total_price: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), default=0, nullable=False)
    # 주문 항목 — 체크아웃 시점 장바구니 라인 스냅샷 (Cart lines at checkout time)
    items: Mapped[list[dict[str, Any]] | None] = mapped_column(JSON, nullable=True)
    status: Mapped[str] = mapped_column(String(20), default="pending", nullable=False, index=True)
    payment_status: Mapped[str] = mapped_column(String(20), default="unpaid", nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), index=True
    )
