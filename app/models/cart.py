"""장바구니 ORM 모델.

Shopper cart model. A cart is identified by the cart cookie and holds its
lines as a JSON array; line merging rules live in app.services.cart_service.

Tables:
    - carts: 쇼핑 장바구니 (Anonymous shopper carts)
"""

import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Cart(Base):
    """장바구니 모델.

    Attributes:
        id: 장바구니 UUID — 쿠키 값 (Cart UUID, stored in the cart cookie)
        items: 장바구니 라인 목록 (Cart lines: line_id, product_id, name, price, quantity, size, color)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last modification timestamp)
    """

    __tablename__ = "carts"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    items: Mapped[list[dict[str, Any]]] = mapped_column(JSON, default=list, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
