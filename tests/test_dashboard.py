"""대시보드 API 테스트 — 통계, 매출 차트, 인사이트, 실패 시 기본값.

Dashboard API tests — Stats, the sales chart, insights, and the zeroed
fallback when the order read fails.
"""

from datetime import date, datetime, timedelta, timezone
from unittest.mock import AsyncMock, patch

from httpx import AsyncClient
from sqlalchemy.exc import SQLAlchemyError

from app.repositories.product_repository import product_repository
from app.services.dashboard_service import dashboard_service
from app.services.order_service import order_service
from tests.conftest import make_order, make_product, session_header

DASHBOARD = "/api/v1/admin/dashboard"


class TestDashboardStats:
    """대시보드 통계."""

    async def test_stats_unpaid_store(self, client: AsyncClient, db, admin_token):
        """paid 주문이 없으면 취소 제외 전체가 매출."""
        await make_product(db)
        await make_order(db, total_price=100)
        await make_order(db, total_price=50, status="shipped")
        await make_order(db, total_price=70, status="cancelled")

        res = await client.get(f"{DASHBOARD}/stats", headers=session_header(admin_token))
        assert res.status_code == 200
        data = res.json()
        assert data["total_sales"] == 150.0
        assert data["total_orders"] == 3
        assert data["total_products"] == 1
        assert data["pending_orders"] == 1
        assert data["total_profit"] == 45.0
        assert len(data["orders"]) == 3

    async def test_stats_paid_orders_only(self, client: AsyncClient, db, admin_token):
        """paid 주문이 있으면 paid만 집계."""
        await make_order(db, total_price=100, payment_status="paid")
        await make_order(db, total_price=900)

        data = (await client.get(f"{DASHBOARD}/stats", headers=session_header(admin_token))).json()
        assert data["total_sales"] == 100.0
        assert data["total_profit"] == 30.0

    async def test_stats_orders_newest_first(self, client: AsyncClient, db, admin_token):
        now = datetime.now(timezone.utc)
        await make_order(db, customer_name="Old", created_at=now - timedelta(days=2))
        await make_order(db, customer_name="New", created_at=now)

        data = (await client.get(f"{DASHBOARD}/stats", headers=session_header(admin_token))).json()
        assert [o["customer_name"] for o in data["orders"]] == ["New", "Old"]

    async def test_stats_read_failure_returns_zeroes(self, client: AsyncClient, db, admin_token):
        """주문 조회 실패 시 0 값으로 응답."""
        await make_product(db)
        failing = AsyncMock(side_effect=SQLAlchemyError("boom"))
        with patch.object(order_service, "get_all_orders", failing):
            res = await client.get(f"{DASHBOARD}/stats", headers=session_header(admin_token))

        assert res.status_code == 200
        data = res.json()
        assert data["total_sales"] == 0
        assert data["total_orders"] == 0
        assert data["orders"] == []
        assert data["total_products"] == 1

    async def test_product_count_failure_keeps_order_stats(self, client: AsyncClient, db, admin_token):
        """상품 수 조회 실패 시 상품 수만 0, 주문 통계는 유지."""
        await make_order(db, total_price=100)
        await make_order(db, total_price=50, status="shipped")
        await db.commit()

        failing = AsyncMock(side_effect=SQLAlchemyError("boom"))
        with patch.object(product_repository, "count", failing):
            res = await client.get(f"{DASHBOARD}/stats", headers=session_header(admin_token))

        assert res.status_code == 200
        data = res.json()
        assert data["total_products"] == 0
        assert data["total_orders"] == 2
        assert data["total_sales"] == 150.0
        assert data["pending_orders"] == 1


class TestSalesChart:
    """매출 차트."""

    async def test_sales_by_day(self, client: AsyncClient, db, admin_token):
        await make_order(db, total_price=10, created_at=datetime(2026, 3, 1, 9, tzinfo=timezone.utc))
        await make_order(db, total_price=15, created_at=datetime(2026, 3, 1, 17, tzinfo=timezone.utc))
        await make_order(db, total_price=40, created_at=datetime(2026, 3, 3, 9, tzinfo=timezone.utc))

        res = await client.get(f"{DASHBOARD}/sales-chart", headers=session_header(admin_token))
        assert res.json() == [{"date": "Mar 1", "sales": 25.0}, {"date": "Mar 3", "sales": 40.0}]

    async def test_chart_read_failure_is_empty(self, client: AsyncClient, admin_token):
        failing = AsyncMock(side_effect=SQLAlchemyError("boom"))
        with patch.object(order_service, "get_all_orders", failing):
            res = await client.get(f"{DASHBOARD}/sales-chart", headers=session_header(admin_token))
        assert res.json() == []


class TestInsights:
    """인사이트 KPI."""

    async def test_insights(self, db):
        """최근 7일 추이와 상태 분포."""
        today = date(2026, 3, 7)
        await make_order(db, total_price=200, payment_status="paid", created_at=datetime(2026, 3, 6, 12))
        await make_order(db, total_price=80, status="cancelled", created_at=datetime(2026, 3, 5, 12))
        await make_order(db, total_price=30, status="delivered", created_at=datetime(2026, 2, 1, 12))

        data = await dashboard_service.get_insights(db, today=today)
        assert data["total_revenue"] == 200.0
        assert data["total_orders"] == 2
        assert data["estimated_profit"] == 60.0
        assert data["profit_margin"] == 30.0
        assert len(data["sales_trend"]) == 7
        assert data["sales_trend"][-1] == {"date": "Mar 7", "sales": 0}
        assert data["sales_trend"][-2] == {"date": "Mar 6", "sales": 200.0}
        assert data["status_breakdown"] == {"pending": 1, "shipped": 0, "delivered": 1, "cancelled": 1}

    async def test_no_revenue_zero_margin(self, db):
        data = await dashboard_service.get_insights(db, today=date(2026, 3, 7))
        assert data["total_revenue"] == 0
        assert data["profit_margin"] == 0

    async def test_insights_endpoint(self, client: AsyncClient, db, admin_token):
        await make_order(db, total_price=10)
        res = await client.get(f"{DASHBOARD}/insights", headers=session_header(admin_token))
        assert res.status_code == 200
        assert len(res.json()["sales_trend"]) == 7
