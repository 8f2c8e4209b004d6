"""관리자 알림 라우터 — 알림 벨 피드와 실시간 주문 이벤트 스트림.

Admin Notification Router — Notification bell feed, read/unread counters,
and the Server-Sent Events stream of order events.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import StreamingResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import CurrentAdmin
from app.database import get_db
from app.schemas.common import MessageResponse
from app.schemas.dashboard import NotificationFeed
from app.services.realtime_service import notification_service, order_event_broker

router: APIRouter = APIRouter()


@router.get("", response_model=NotificationFeed)
async def get_notification_feed(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: CurrentAdmin,
) -> dict:
    """알림 피드를 조회합니다.

    Pending-order count plus the live "New Order" notifications and the
    latest orders.

    Args:
        db: 비동기 데이터베이스 세션 (Async database session)
        current_admin: 인증된 관리자 (Authenticated admin)

    Returns:
        dict: pending_count, unread_count, unread_notification_count, notifications
    """
    return await notification_service.get_feed(db)


@router.patch("/read-all", response_model=MessageResponse)
async def mark_all_read(current_admin: CurrentAdmin) -> dict:
    """모든 알림을 읽음 처리합니다."""
    order_event_broker.mark_all_read()
    return {"message": "All notifications marked as read"}


@router.post("/reset-count", response_model=MessageResponse)
async def reset_unread_count(current_admin: CurrentAdmin) -> dict:
    """알림 벨의 읽지 않은 카운터를 초기화합니다 (벨을 열 때)."""
    order_event_broker.reset_unread_count()
    return {"message": "Unread count reset"}


@router.get("/stream")
async def stream_order_events(request: Request) -> StreamingResponse:
    """주문 이벤트 SSE 스트림.

    Stream INSERT / UPDATE / DELETE order events as Server-Sent Events.
    The session gate has already checked the cookie; a DB-backed admin
    lookup is skipped so the stream holds no database session.
    """
    return StreamingResponse(
        order_event_broker.listen(request.is_disconnected),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache", "X-Accel-Buffering": "no"},
    )
