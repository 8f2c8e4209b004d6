"""상품 관련 Pydantic 요청/응답 스키마 정의.

Product request/response schema definitions for the storefront catalog
and the admin product form.
"""

from datetime import datetime

from pydantic import BaseModel


class ProductCreate(BaseModel):
    """상품 생성 요청 스키마 (관리자 상품 양식).

    Product creation request schema, mirrors the admin product form.
    Business validation (title, price > 0, at least one size, image URL)
    happens in ProductService.

    Attributes:
        title: 상품명 (Display title)
        price: 판매가 (Selling price, must be > 0)
        description: 상품 설명 (Description)
        category: 카테고리 (men | women, lower-cased on save)
        sizes: 사이즈 목록 (Available sizes, at least one)
        image_url: 이미지 URL (External URL or uploaded file URL)
        color: 색상 (Color label, optional)
        cost_price: 원가 (Unit cost, default 0)
        compare_at_price: 비교 가격 (Strike-through price, default 0)
        image_type: 이미지 출처 (url | upload)
    """

    title: str
    price: float
    description: str = ""
    category: str
    sizes: list[int]
    image_url: str = ""
    color: str | None = None
    cost_price: float = 0
    compare_at_price: float = 0
    image_type: str = "url"


class ProductUpdate(BaseModel):
    """상품 수정 요청 스키마 (부분 업데이트) — only provided fields change."""

    title: str | None = None
    price: float | None = None
    description: str | None = None
    category: str | None = None
    sizes: list[int] | None = None
    image_url: str | None = None
    color: str | None = None
    cost_price: float | None = None
    compare_at_price: float | None = None
    image_type: str | None = None


class ProductResponse(BaseModel):
    """상품 응답 스키마."""

    id: str
    title: str
    price: float
    description: str | None = None
    image_url: str | None = None
    image_type: str = "url"
    sizes: list[int] | None = None
    color: str | None = None
    category: str | None = None
    cost_price: float = 0
    compare_at_price: float = 0
    created_at: datetime | None = None


class SeedResult(BaseModel):
    """예시 상품 시드 결과 — Result of seeding the example products."""

    ok: bool
    message: str
