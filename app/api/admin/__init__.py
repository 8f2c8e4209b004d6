"""관리자 API 라우터 패키지 — 모든 관리자 엔드포인트 통합.

Admin API Router package — Aggregates all admin-facing endpoints
into a single router for inclusion in the FastAPI application.
Every path except /auth/login sits behind the admin session gate.

Included routers:
    - auth: 로그인/로그아웃/현재 세션 (Login, logout, current session)
    - settings: 비밀번호 변경 (Password change)
    - dashboard: 통계, 매출 차트, 인사이트, 내보내기 (Stats, chart, insights, export)
    - products: 상품 CRUD, 예시 상품 시드 (Product CRUD and seed)
    - orders: 주문 관리 및 내보내기 (Order management and export)
    - customers: 주문에서 파생된 고객 (Customers derived from orders)
    - invoices: 주문 인보이스 PDF (Order invoice PDFs)
    - notifications: 알림 피드, SSE 스트림 (Notification feed, SSE stream)
    - storage: 이미지 업로드 (Image uploads)
    - contacts: 문의 메시지 (Contact messages)
"""

from fastapi import APIRouter

from app.api.admin.auth import router as auth_router
from app.api.admin.contacts import router as contacts_router
from app.api.admin.customers import router as customers_router
from app.api.admin.dashboard import router as dashboard_router
from app.api.admin.invoices import router as invoices_router
from app.api.admin.notifications import router as notifications_router
from app.api.admin.orders import router as orders_router
from app.api.admin.products import router as products_router
from app.api.admin.settings import router as settings_router
from app.api.admin.storage import router as storage_router

admin_router: APIRouter = APIRouter()

# ---------------------------------------------------------------------------
# 세션 — Session
# ---------------------------------------------------------------------------
admin_router.include_router(auth_router, prefix="/auth", tags=["Admin Auth"])
admin_router.include_router(settings_router, prefix="/settings", tags=["Admin Settings"])

# ---------------------------------------------------------------------------
# 매장 운영 — Store operations
# ---------------------------------------------------------------------------
admin_router.include_router(dashboard_router, prefix="/dashboard", tags=["Admin Dashboard"])
admin_router.include_router(products_router, prefix="/products", tags=["Admin Products"])
admin_router.include_router(orders_router, prefix="/orders", tags=["Admin Orders"])
admin_router.include_router(customers_router, prefix="/customers", tags=["Admin Customers"])
admin_router.include_router(invoices_router, prefix="/invoices", tags=["Admin Invoices"])

# ---------------------------------------------------------------------------
# 알림 및 기타 — Notifications and misc
# ---------------------------------------------------------------------------
admin_router.include_router(notifications_router, prefix="/notifications", tags=["Admin Notifications"])
admin_router.include_router(storage_router, prefix="/storage", tags=["Admin Storage"])
admin_router.include_router(contacts_router, prefix="/contacts", tags=["Admin Contacts"])
