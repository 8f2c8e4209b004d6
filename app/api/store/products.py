"""스토어프론트 상품 라우터 — 공개 카탈로그 조회.

Storefront Product Router — Public catalog reads.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.product import ProductResponse
from app.services.product_service import product_service

router: APIRouter = APIRouter()


@router.get("", response_model=list[ProductResponse])
async def list_products(
    db: Annotated[AsyncSession, Depends(get_db)],
    category: Annotated[str | None, Query()] = None,
) -> list[dict]:
    """카탈로그를 등록순으로 조회합니다.

    Args:
        db: 비동기 데이터베이스 세션 (Async database session)
        category: men | women, 그 외 값은 무시 (Other values are ignored)

    Returns:
        list[dict]: 상품 목록 (Products, oldest first)
    """
    products = await product_service.list_products(db, category)
    return [product_service.to_response(p) for p in products]


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> dict:
    product = await product_service.get_product(db, product_id)
    return product_service.to_response(product)
