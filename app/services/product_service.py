"""상품 서비스 — 카탈로그 조회, 관리자 상품 CRUD, 예시 상품 시드.

Product Service — Catalog reads for the storefront plus the admin product
CRUD and the example-product seed.
"""

import logging
from typing import Any, Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.product import IMAGE_TYPES, PRODUCT_CATEGORIES, Product
from app.repositories.product_repository import product_repository
from app.schemas.product import ProductCreate, ProductUpdate
from app.services.storage_service import storage_service
from app.utils.exceptions import BadRequestError, NotFoundError

logger = logging.getLogger(__name__)

# 관리자 상품 양식의 사이즈 선택지 — Size choices offered by the admin product form
SIZE_OPTIONS: tuple[int, ...] = (39, 40, 41, 42, 43, 44)

EXAMPLE_PRODUCTS: list[dict[str, Any]] = [
    {
        "title": "Nike Air Max (Red)",
        "price": 549.0,
        "description": "Iconic cushioning and bold style.",
        "image_url": "https://images.unsplash.com/photo-1542291026-7eec264c27ff",
        "sizes": [39, 40, 41, 42],
        "color": "Red/White",
        "category": "men",
    },
    {
        "title": "Adidas UltraBOOST",
        "price": 599.0,
        "description": "Premium cushioned sneaker.",
        "image_url": "https://images.unsplash.com/photo-1519861297062-a1eec154f81a",
        "sizes": [39, 40, 41, 42],
        "color": "White/Black",
        "category": "women",
    },
]


def normalize_category(category: str | None) -> str | None:
    """카테고리 필터 정규화 — "men"/"women" 외의 값은 None (필터 없음)."""
    if category is None:
        return None
    value = category.strip().lower()
    return value if value in PRODUCT_CATEGORIES else None


class ProductService:
    """상품 관련 비즈니스 로직을 처리하는 서비스."""

    async def list_products(
        self,
        db: AsyncSession,
        category: str | None = None,
    ) -> Sequence[Product]:
        """카탈로그를 등록순으로 조회합니다.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            category: 카테고리 필터, men/women 외 값은 무시
                      (Category filter; values other than men/women are ignored)

        Returns:
            Sequence[Product]: 상품 목록 (Products, oldest first)
        """
        return await product_repository.get_catalog(db, normalize_category(category))

    async def get_product(self, db: AsyncSession, product_id: UUID) -> Product:
        """단일 상품을 조회합니다.

        Raises:
            NotFoundError: 상품 없음 (Product not found)
        """
        product: Product | None = await product_repository.get_by_id(db, product_id)
        if product is None:
            raise NotFoundError("Product not found")
        return product

    async def create_product(
        self,
        db: AsyncSession,
        data: ProductCreate,
    ) -> Product:
        """상품을 생성합니다.

        Create a product from the admin form. Uploaded images still in the
        temp/ area are moved to their permanent key first.

        Raises:
            BadRequestError: 상품명 누락, 가격 <= 0, 사이즈 없음, 이미지 오류
                             (Missing title, non-positive price, no sizes, bad image)
        """
        title = data.title.strip()
        if not title:
            raise BadRequestError("Title is required")
        if data.price <= 0:
            raise BadRequestError("Price must be greater than 0")
        if not data.sizes:
            raise BadRequestError("Select at least one size")

        image_type, image_url = self._resolve_image(data.image_type, data.image_url)

        product: Product = await product_repository.create(
            db,
            {
                "title": title,
                "price": data.price,
                "description": data.description,
                "image_url": image_url,
                "image_type": image_type,
                "sizes": sorted(set(data.sizes)),
                "color": data.color,
                "category": data.category.strip().lower(),
                "cost_price": data.cost_price or 0,
                "compare_at_price": data.compare_at_price or 0,
            },
        )
        logger.info(f"Created product {product.id} ({title!r})")
        return product

    async def update_product(
        self,
        db: AsyncSession,
        product_id: UUID,
        data: ProductUpdate,
    ) -> Product:
        """상품을 부분 수정합니다 — only provided fields change.

        Raises:
            NotFoundError: 상품 없음 (Product not found)
            BadRequestError: 잘못된 가격/사이즈 (Invalid price or sizes)
        """
        update_data: dict[str, Any] = data.model_dump(exclude_unset=True)

        if "price" in update_data and (update_data["price"] is None or update_data["price"] <= 0):
            raise BadRequestError("Price must be greater than 0")
        if "sizes" in update_data:
            if not update_data["sizes"]:
                raise BadRequestError("Select at least one size")
            update_data["sizes"] = sorted(set(update_data["sizes"]))
        if "title" in update_data:
            if not (update_data["title"] or "").strip():
                raise BadRequestError("Title is required")
            update_data["title"] = update_data["title"].strip()
        if update_data.get("category") is not None:
            update_data["category"] = update_data["category"].strip().lower()
        if "image_url" in update_data or "image_type" in update_data:
            current: Product = await self.get_product(db, product_id)
            image_type, image_url = self._resolve_image(
                update_data.get("image_type") or current.image_type,
                update_data.get("image_url", current.image_url) or "",
            )
            update_data["image_type"] = image_type
            update_data["image_url"] = image_url

        product: Product | None = await product_repository.update(db, product_id, update_data)
        if product is None:
            raise NotFoundError("Product not found")
        return product

    async def delete_product(self, db: AsyncSession, product_id: UUID) -> None:
        deleted: bool = await product_repository.delete(db, product_id)
        if not deleted:
            raise NotFoundError("Product not found")
        logger.info(f"Deleted product {product_id}")

    async def seed_example_products(self, db: AsyncSession) -> dict[str, Any]:
        """상품 테이블이 비어있으면 예시 상품 2개를 등록합니다.

        Insert the two example products when the table is empty.

        Returns:
            dict: {"ok": bool, "message": str}
        """
        existing: int = await product_repository.count(db)
        if existing > 0:
            return {"ok": True, "message": f"Already seeded ({existing} products)."}

        await product_repository.create_many(db, [dict(row) for row in EXAMPLE_PRODUCTS])
        logger.info("Seeded example products")
        return {"ok": True, "message": "Seeded products."}

    def to_response(self, product: Product) -> dict[str, Any]:
        """상품 ORM 객체를 응답 딕셔너리로 변환합니다."""
        return {
            "id": str(product.id),
            "title": product.title,
            "price": float(product.price or 0),
            "description": product.description,
            "image_url": product.image_url,
            "image_type": product.image_type or "url",
            "sizes": product.sizes or [],
            "color": product.color,
            "category": product.category,
            "cost_price": float(product.cost_price or 0),
            "compare_at_price": float(product.compare_at_price or 0),
            "created_at": product.created_at,
        }

    def _resolve_image(self, image_type: str | None, image_url: str) -> tuple[str, str]:
        # 이미지 출처 검증 + 업로드 확정 — Validate image source, finalize temp uploads
        image_type = (image_type or "url").lower()
        if image_type not in IMAGE_TYPES:
            raise BadRequestError("Invalid image type")
        image_url = (image_url or "").strip()
        if image_type == "url" and not image_url:
            raise BadRequestError("Image URL is required")
        if image_type == "upload" and image_url:
            image_url = storage_service.finalize_upload(image_url)
        return image_type, image_url


# 싱글턴 인스턴스 — Singleton instance
product_service: ProductService = ProductService()
