"""상품 관련 SQLAlchemy ORM 모델 정의.

Product SQLAlchemy ORM model definitions.

Tables:
    - products: 판매 상품 카탈로그 (Footwear catalog, read publicly, managed by admin)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base

# 상품 카테고리 필터 허용 값 — Category values the storefront filter understands
PRODUCT_CATEGORIES: tuple[str, ...] = ("men", "women")

# 이미지 출처 유형 — Where image_url comes from
IMAGE_TYPES: tuple[str, ...] = ("url", "upload")


class Product(Base):
    """상품 모델 — 스토어프론트에 노출되는 신발 상품.

    Product model — A footwear item listed on the storefront.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        title: 상품명 (Display title)
        price: 판매가 (Selling price)
        description: 상품 설명 (Long description, optional)
        image_url: 대표 이미지 URL (Main image URL, external or uploaded)
        image_type: 이미지 출처 (url | upload)
        sizes: 구매 가능 사이즈 목록 (Available EU sizes, e.g. [39, 40, 41])
        color: 색상 표기 (Color label, e.g. "Red/White")
        category: 카테고리 (men | women, stored lower-cased)
        cost_price: 원가 (Unit cost, 0 when unknown)
        compare_at_price: 정가/할인 전 가격 (Strike-through price, 0 when unused)
        created_at: 생성 일시 UTC (Creation timestamp)
    """

    __tablename__ = "products"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    # 이미지 출처 — "upload"이면 스토리지 버킷의 파일 (Uploaded file in the storage bucket)
    image_type: Mapped[str] = mapped_column(String(20), default="url", nullable=False)
    # 사이즈 목록 — JSON 배열 (JSON array of ints)
    sizes: Mapped[list[int] | None] = mapped_column(JSON, nullable=True)
    color: Mapped[str | None] = mapped_column(String(100), nullable=True)
    category: Mapped[str | None] = mapped_column(String(50), nullable=True, index=True)
    cost_price: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), default=0, nullable=False)
    compare_at_price: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), default=0, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
