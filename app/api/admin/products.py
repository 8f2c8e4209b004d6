"""관리자 상품 라우터 — 상품 CRUD 및 예시 상품 시드.

Admin Product Router — Create, update, delete products and seed the
example catalog.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import CurrentAdmin
from app.database import get_db
from app.schemas.common import ApiResponse
from app.schemas.product import ProductCreate, ProductResponse, ProductUpdate, SeedResult
from app.services.product_service import SIZE_OPTIONS, product_service

router: APIRouter = APIRouter()


@router.get("", response_model=list[ProductResponse])
async def list_products(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: CurrentAdmin,
    category: Annotated[str | None, Query()] = None,
) -> list[dict]:
    """관리자 상품 목록 — same ordering and filter as the storefront."""
    products = await product_service.list_products(db, category)
    return [product_service.to_response(p) for p in products]


@router.get("/size-options")
async def get_size_options(current_admin: CurrentAdmin) -> dict:
    """상품 양식의 사이즈 선택지."""
    return {"sizes": list(SIZE_OPTIONS)}


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: CurrentAdmin,
) -> dict:
    product = await product_service.get_product(db, product_id)
    return product_service.to_response(product)


@router.post("", response_model=ApiResponse, status_code=201)
async def create_product(
    data: ProductCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: CurrentAdmin,
) -> ApiResponse:
    """상품을 생성합니다.

    Create a product. Uploaded images are moved out of the temp/ area.

    Args:
        data: 상품 양식 (Admin product form)
        db: 비동기 데이터베이스 세션 (Async database session)
        current_admin: 인증된 관리자 (Authenticated admin)

    Returns:
        ApiResponse: {"success": true, "data": <product>}
    """
    product = await product_service.create_product(db, data)
    await db.commit()
    return ApiResponse(success=True, data=product_service.to_response(product))


@router.put("/{product_id}", response_model=ApiResponse)
async def update_product(
    product_id: UUID,
    data: ProductUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: CurrentAdmin,
) -> ApiResponse:
    """상품 부분 수정 — only provided fields change."""
    product = await product_service.update_product(db, product_id, data)
    await db.commit()
    return ApiResponse(success=True, data=product_service.to_response(product))


@router.delete("/{product_id}", response_model=ApiResponse)
async def delete_product(
    product_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: CurrentAdmin,
) -> ApiResponse:
    await product_service.delete_product(db, product_id)
    await db.commit()
    return ApiResponse(success=True)


@router.post("/seed", response_model=SeedResult)
async def seed_example_products(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: CurrentAdmin,
) -> dict:
    """상품 테이블이 비어있을 때 예시 상품 2개를 등록합니다."""
    result = await product_service.seed_example_products(db)
    await db.commit()
    return result
