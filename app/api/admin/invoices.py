"""관리자 인보이스 라우터 — 주문 인보이스 PDF.

Admin Invoice Router — One PDF invoice per order.
"""

from io import BytesIO
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import CurrentAdmin
from app.database import get_db
from app.services.invoice_service import invoice_service
from app.services.order_service import order_service

router: APIRouter = APIRouter()


@router.get("/{order_id}")
async def download_invoice(
    order_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: CurrentAdmin,
) -> StreamingResponse:
    """주문 인보이스 PDF를 내려받습니다.

    Args:
        order_id: 주문 UUID (Order UUID)
        db: 비동기 데이터베이스 세션 (Async database session)
        current_admin: 인증된 관리자 (Authenticated admin)

    Returns:
        StreamingResponse: application/pdf, Invoice_<first 8 chars>.pdf
    """
    order = order_service.to_response(await order_service.get_order(db, order_id))
    content: bytes = invoice_service.build_invoice(order)
    return StreamingResponse(
        BytesIO(content),
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename=Invoice_{order['id'][:8]}.pdf"},
    )
