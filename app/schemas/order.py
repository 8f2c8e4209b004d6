"""주문 및 체크아웃 관련 Pydantic 스키마 정의.

Order and checkout request/response schema definitions.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel

from app.schemas.cart import CartLine


class OrderCreate(BaseModel):
    """주문 생성 요청 스키마.

    Direct order creation request (the storefront checkout builds the same
    payload from the cart).

    Attributes:
        customer_name: 고객 이름 (Customer full name)
        phone: 연락처 (Phone number)
        address: 배송 주소 (Shipping address)
        total_price: 주문 총액 (Order total)
        items: 주문 항목 (Cart lines snapshot)
    """

    customer_name: str
    phone: str
    address: str
    total_price: float
    items: list[CartLine] = []


class CheckoutRequest(BaseModel):
    """체크아웃 양식 스키마.

    Checkout form submitted with the shopper's cart cookie.

    Attributes:
        name: 고객 이름, 2자 이상 (Full name, at least 2 characters)
        phone: 연락처, 8자 이상 (Phone, at least 8 characters)
        street: 도로명/번지, 5자 이상 (Street address, at least 5 characters)
        city: 도시, 2자 이상 (City, at least 2 characters)
        governorate: 튀니지 주(州) (One of the 24 Tunisian governorates)
    """

    name: str
    phone: str
    street: str
    city: str
    governorate: str


class OrderCreated(BaseModel):
    """주문 생성 결과 — Identifier of the created order."""

    order_id: str


class OrderStatusUpdate(BaseModel):
    """주문 상태 변경 요청 (pending | shipped | delivered | cancelled)."""

    status: str


class PaymentStatusUpdate(BaseModel):
    """결제 상태 변경 요청 (paid | unpaid)."""

    payment_status: str


class OrderResponse(BaseModel):
    """주문 응답 스키마."""

    id: str
    customer_name: str
    phone: str | None = None
    address: str | None = None
    total_price: float
    items: list[dict[str, Any]] = []
    status: str
    payment_status: str
    created_at: datetime | None = None
