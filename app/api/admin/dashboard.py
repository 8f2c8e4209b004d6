"""관리자 대시보드 라우터 — 대시보드 통계, 매출 차트, 인사이트 API.

Admin Dashboard Router — Dashboard stats, the daily sales chart, the
insights KPIs, and the dashboard Excel export.
"""

from io import BytesIO
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.responses import StreamingResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.admin.orders import XLSX_MEDIA_TYPE
from app.api.deps import CurrentAdmin
from app.database import get_db
from app.schemas.dashboard import DashboardStats, InsightsResponse, SalesPoint
from app.services.dashboard_service import dashboard_service
from app.services.report_service import report_service

router: APIRouter = APIRouter()


@router.get("/stats", response_model=DashboardStats)
async def get_dashboard_stats(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: CurrentAdmin,
) -> dict:
    """대시보드 통계 조회 — 조회 실패 시 0으로 채운 통계."""
    return await dashboard_service.get_dashboard_stats(db)


@router.get("/sales-chart", response_model=list[SalesPoint])
async def get_sales_chart(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: CurrentAdmin,
    days: Annotated[int, Query(ge=1, le=90)] = 7,
) -> list[dict]:
    """일자별 매출 차트 — 매출이 있는 최근 N일."""
    return await dashboard_service.get_sales_chart_data(db, days)


@router.get("/insights", response_model=InsightsResponse)
async def get_insights(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: CurrentAdmin,
    days: Annotated[int, Query(ge=1, le=90)] = 7,
) -> dict:
    """인사이트 KPI — revenue, profit, trend, status breakdown."""
    return await dashboard_service.get_insights(db, days=days)


@router.get("/export")
async def export_dashboard(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: CurrentAdmin,
) -> StreamingResponse:
    """대시보드 데이터를 Excel 파일로 내보내기.

    Export the dashboard as an Excel workbook (Summary, Daily Sales, Orders).
    """
    stats = await dashboard_service.get_dashboard_stats(db)
    sales = await dashboard_service.get_sales_chart_data(db)
    content: bytes = report_service.export_dashboard(stats, sales)
    return StreamingResponse(
        BytesIO(content),
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": "attachment; filename=LuxeShopy_Dashboard.xlsx"},
    )
