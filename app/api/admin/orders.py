"""관리자 주문 라우터 — 주문 목록, 상태/결제 상태 변경, 삭제, Excel 내보내기.

Admin Order Router — Order listing, status and payment-status updates,
deletion, and the Excel export. Every mutation publishes an order event
after commit.
"""

from io import BytesIO
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from fastapi.responses import StreamingResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import CurrentAdmin
from app.database import get_db
from app.schemas.common import ApiResponse
from app.schemas.order import OrderResponse, OrderStatusUpdate, PaymentStatusUpdate
from app.services.order_service import order_service
from app.services.realtime_service import order_event_broker
from app.services.report_service import report_service
from app.utils.pagination import Page

router: APIRouter = APIRouter()

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@router.get("", response_model=Page)
async def list_orders(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: CurrentAdmin,
    status: Annotated[str | None, Query()] = None,
    page: Annotated[int, Query(ge=1)] = 1,
    per_page: Annotated[int, Query(ge=1, le=200)] = 20,
) -> Page:
    """주문 목록을 최신순으로 조회합니다.

    Args:
        db: 비동기 데이터베이스 세션 (Async database session)
        current_admin: 인증된 관리자 (Authenticated admin)
        status: 상태 필터 (Optional status filter)
        page: 페이지 번호 (Page number)
        per_page: 페이지당 항목 수 (Items per page)

    Returns:
        Page: 페이지네이션된 주문 목록 (Paginated orders)
    """
    orders, total = await order_service.list_orders(db, status=status, page=page, per_page=per_page)
    items = [order_service.to_response(o) for o in orders]
    return Page.build(items, total, page, per_page)


@router.get("/export")
async def export_orders(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: CurrentAdmin,
) -> StreamingResponse:
    """전체 주문을 Excel 파일로 내보내기."""
    orders = await order_service.get_all_orders(db)
    content: bytes = report_service.export_orders(orders)
    return StreamingResponse(
        BytesIO(content),
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": "attachment; filename=LuxeShopy_Orders.xlsx"},
    )


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: CurrentAdmin,
) -> dict:
    order = await order_service.get_order(db, order_id)
    return order_service.to_response(order)


@router.patch("/{order_id}/status", response_model=ApiResponse)
async def update_order_status(
    order_id: UUID,
    data: OrderStatusUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: CurrentAdmin,
) -> ApiResponse:
    """주문 상태 변경 (pending | shipped | delivered | cancelled)."""
    order = await order_service.update_status(db, order_id, data.status)
    payload = order_service.to_response(order)
    await db.commit()
    order_event_broker.publish("UPDATE", payload)
    return ApiResponse(success=True, data=payload)


@router.patch("/{order_id}/payment-status", response_model=ApiResponse)
async def update_payment_status(
    order_id: UUID,
    data: PaymentStatusUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: CurrentAdmin,
) -> ApiResponse:
    """결제 상태 변경 (paid | unpaid)."""
    order = await order_service.update_payment_status(db, order_id, data.payment_status)
    payload = order_service.to_response(order)
    await db.commit()
    order_event_broker.publish("UPDATE", payload)
    return ApiResponse(success=True, data=payload)


@router.delete("/{order_id}", response_model=ApiResponse)
async def delete_order(
    order_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: CurrentAdmin,
) -> ApiResponse:
    order = await order_service.delete_order(db, order_id)
    payload = order_service.to_response(order)
    await db.commit()
    order_event_broker.publish("DELETE", payload)
    return ApiResponse(success=True)
