"""장바구니 Pydantic 스키마 정의.

Cart request/response schema definitions.
"""

from pydantic import BaseModel


class CartLine(BaseModel):
    """장바구니 라인.

    Attributes:
        line_id: 라인 식별자 "<product_id>::<size>::<color>" (Line identifier)
        product_id: 상품 UUID 문자열 (Product identifier)
        name: 상품명 (Product title at the time it was added)
        price: 단가 (Unit price at the time it was added)
        quantity: 수량 (Quantity, >= 1)
        size: 선택 사이즈 (Selected size, optional)
        color: 선택 색상 (Selected color, optional)
    """

    line_id: str
    product_id: str
    name: str
    price: float
    quantity: int
    size: int | None = None
    color: str | None = None


class CartAddRequest(BaseModel):
    """장바구니 담기 요청 — Add one unit of a product variant."""

    product_id: str
    size: int | None = None
    color: str | None = None


class CartQuantityUpdate(BaseModel):
    """수량 변경 요청 — quantity <= 0 removes the line."""

    quantity: int


class CartResponse(BaseModel):
    """장바구니 응답 스키마."""

    id: str
    items: list[CartLine]
    total_items: int
    total_price: float
