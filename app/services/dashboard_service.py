"""대시보드 서비스 — 관리자 대시보드 집계 비즈니스 로직.

Dashboard Service — Aggregation logic for the admin dashboard and the
insights page. All figures are derived in memory from the order list with
the revenue policy of app.utils.revenue.
"""

import logging
from datetime import date, datetime, timezone
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.repositories.product_repository import product_repository
from app.services.order_service import order_service
from app.utils.revenue import (
    estimated_profit,
    sales_by_day,
    sales_trend,
    status_breakdown,
    total_revenue,
)

logger = logging.getLogger(__name__)


def empty_stats(total_products: int = 0) -> dict[str, Any]:
    return {
        "total_sales": 0.0,
        "total_orders": 0,
        "total_products": total_products,
        "pending_orders": 0,
        "total_profit": 0.0,
        "orders": [],
    }


class DashboardService:
    """대시보드 서비스.

    Dashboard aggregation service for admin dashboard views.
    Read failures are logged and answered with default values so the
    dashboard still renders.
    """

    async def get_dashboard_stats(self, db: AsyncSession) -> dict[str, Any]:
        """대시보드 통계 조회.

        Returns:
            dict: total_sales, total_orders, total_products, pending_orders,
                  total_profit, orders (newest first)
        """
        total_products = 0
        try:
            total_products = await product_repository.count(db)
        except SQLAlchemyError:
            logger.exception("Failed to count products")
            await db.rollback()

        try:
            orders = await order_service.get_all_orders(db)
        except SQLAlchemyError:
            logger.exception("Failed to load dashboard stats")
            await db.rollback()
            return empty_stats(total_products)

        revenue = total_revenue(orders)
        return {
            "total_sales": revenue,
            "total_orders": len(orders),
            "total_products": total_products,
            "pending_orders": sum(1 for o in orders if o["status"] == "pending"),
            "total_profit": estimated_profit(revenue, settings.PROFIT_MARGIN),
            "orders": orders,
        }

    async def get_sales_chart_data(self, db: AsyncSession, days: int = 7) -> list[dict[str, Any]]:
        """일자별 매출 차트 데이터 — 실패 시 빈 목록."""
        try:
            orders = await order_service.get_all_orders(db)
        except SQLAlchemyError:
            logger.exception("Failed to load sales chart data")
            await db.rollback()
            return []
        return sales_by_day(orders, days)

    async def get_insights(
        self,
        db: AsyncSession,
        today: date | None = None,
        days: int = 7,
    ) -> dict[str, Any]:
        """인사이트 페이지 KPI 조회.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            today: 추이 기준일, 기본값 오늘 UTC (Last day of the trend window)
            days: 추이 기간 일수 (Trend window length)

        Returns:
            dict: total_revenue, total_orders (non-cancelled), estimated_profit,
                  profit_margin (percent), sales_trend, status_breakdown
        """
        if today is None:
            today = datetime.now(timezone.utc).date()

        orders = await order_service.get_all_orders(db)
        revenue = total_revenue(orders)
        return {
            "total_revenue": revenue,
            "total_orders": sum(1 for o in orders if o["status"] != "cancelled"),
            "estimated_profit": estimated_profit(revenue, settings.PROFIT_MARGIN),
            "profit_margin": round(settings.PROFIT_MARGIN * 100, 2) if revenue > 0 else 0,
            "sales_trend": sales_trend(orders, today, days),
            "status_breakdown": status_breakdown(orders),
        }


# 싱글턴 인스턴스
dashboard_service: DashboardService = DashboardService()
