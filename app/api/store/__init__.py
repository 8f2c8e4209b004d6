"""스토어프론트 API 라우터 패키지 — 모든 공개 엔드포인트 통합.

Storefront API Router package — Aggregates the public, unauthenticated
endpoints into a single router.

Included routers:
    - products: 카탈로그 (Catalog)
    - cart: 장바구니 (Cookie-identified cart)
    - orders: 주문 생성, 체크아웃, 주문 조회 (Order placement and lookup)
    - contact: 문의 양식 (Contact form)
"""

from fastapi import APIRouter

from app.api.store.cart import router as cart_router
from app.api.store.contact import router as contact_router
from app.api.store.orders import router as orders_router
from app.api.store.products import router as products_router

store_router: APIRouter = APIRouter()

store_router.include_router(products_router, prefix="/products", tags=["Store Products"])
store_router.include_router(cart_router, prefix="/cart", tags=["Store Cart"])
# 주문: /orders, /orders/{id}, /checkout
store_router.include_router(orders_router, tags=["Store Orders"])
store_router.include_router(contact_router, prefix="/contact", tags=["Store Contact"])
