"""관리자 고객 라우터 — 주문에서 파생된 고객 목록, 상세, 내보내기.

Admin Customer Router — Customers derived from orders: list with search,
detail with the customer's orders, Excel export and PDF transaction report.
"""

import re
from io import BytesIO
from typing import Annotated
from urllib.parse import quote

from fastapi import APIRouter, Depends, Query
from fastapi.responses import StreamingResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.admin.orders import XLSX_MEDIA_TYPE
from app.api.deps import CurrentAdmin
from app.database import get_db
from app.schemas.dashboard import CustomerResponse
from app.services.customer_service import customer_service
from app.services.invoice_service import invoice_service
from app.services.report_service import report_service

router: APIRouter = APIRouter()


@router.get("", response_model=list[CustomerResponse])
async def list_customers(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: CurrentAdmin,
    search: Annotated[str | None, Query()] = None,
) -> list[dict]:
    """고객 목록 — 총 구매액 내림차순, 이름/연락처 검색.

    Args:
        db: 비동기 데이터베이스 세션 (Async database session)
        current_admin: 인증된 관리자 (Authenticated admin)
        search: 이름(대소문자 무시) 또는 연락처 부분 일치 검색어
                (Case-insensitive name or phone substring)

    Returns:
        list[dict]: 고객 목록 (Customers)
    """
    return await customer_service.list_customers(db, search)


@router.get("/export")
async def export_customers(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: CurrentAdmin,
    search: Annotated[str | None, Query()] = None,
) -> StreamingResponse:
    """고객 목록을 Excel 파일로 내보내기."""
    customers = await customer_service.list_customers(db, search)
    return StreamingResponse(
        BytesIO(report_service.export_customers(customers)),
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": "attachment; filename=LuxeShopy_Customers.xlsx"},
    )


@router.get("/{key}")
async def get_customer(
    key: str,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: CurrentAdmin,
) -> dict:
    """고객 상세 — the aggregated customer plus their orders, newest first."""
    return await customer_service.get_customer(db, key)


@router.get("/{key}/report")
async def export_customer_report(
    key: str,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: CurrentAdmin,
) -> StreamingResponse:
    """고객 거래 내역 PDF."""
    customer = await customer_service.get_customer(db, key)
    content: bytes = invoice_service.build_customer_report(customer, customer["orders"])
    filename = "_".join(customer["name"].split()) or "Customer"
    return StreamingResponse(
        BytesIO(content),
        media_type="application/pdf",
        headers={"Content-Disposition": report_disposition(filename)},
    )


def report_disposition(filename: str) -> str:
    """첨부 헤더 — latin-1 헤더에 안전한 ASCII 이름과 RFC 5987 UTF-8 이름."""
    fallback = re.sub(r"[^A-Za-z0-9_.-]", "", filename).strip("_") or "Customer"
    return (
        f'attachment; filename="{fallback}_Report.pdf"; '
        f"filename*=UTF-8''{quote(filename + '_Report.pdf')}"
    )
