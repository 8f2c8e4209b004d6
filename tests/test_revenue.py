"""매출 파생 통계 유닛 테스트 — 정규화, 매출 정책, 일자별 집계.

Revenue derivation unit tests — normalization, the paid/non-cancelled
revenue rule, day bucketing and the zero-filled trend.
"""

from datetime import date, datetime

from app.utils.revenue import (
    day_label,
    estimated_profit,
    normalize_order,
    revenue_orders,
    sales_by_day,
    sales_trend,
    status_breakdown,
    total_revenue,
)


def order(total: float, status: str = "pending", payment: str = "unpaid", created: datetime | None = None) -> dict:
    return normalize_order({
        "id": "o",
        "customer_name": "A",
        "total_price": total,
        "status": status,
        "payment_status": payment,
        "created_at": created or datetime(2026, 1, 5, 10, 0),
    })


class TestNormalizeOrder:
    """주문 정규화."""

    def test_defaults(self):
        """상태/결제 상태/총액 기본값."""
        row = normalize_order({"id": 1, "customer_name": "A"})
        assert row["status"] == "pending"
        assert row["payment_status"] == "unpaid"
        assert row["total_price"] == 0.0
        assert row["items"] == []
        assert row["id"] == "1"

    def test_lowercases_statuses(self):
        """상태 값 소문자 변환."""
        row = normalize_order({"status": "SHIPPED", "payment_status": "Paid", "total_price": "12.5"})
        assert row["status"] == "shipped"
        assert row["payment_status"] == "paid"
        assert row["total_price"] == 12.5

    def test_parses_iso_timestamp(self):
        """ISO 문자열 created_at 파싱."""
        row = normalize_order({"created_at": "2026-01-05T10:00:00Z"})
        assert row["created_at"].year == 2026
        assert row["created_at"].day == 5

    def test_invalid_total_becomes_zero(self):
        row = normalize_order({"total_price": "abc"})
        assert row["total_price"] == 0.0


class TestRevenuePolicy:
    """매출 정책 — paid 우선, 없으면 취소 제외 전체."""

    def test_paid_orders_only_when_any_paid(self):
        """paid 주문이 있으면 paid만 집계."""
        orders = [order(100, payment="paid"), order(50), order(70, status="cancelled", payment="paid")]
        assert total_revenue(orders) == 170.0
        assert len(revenue_orders(orders)) == 2

    def test_fallback_excludes_cancelled(self):
        """paid 주문이 없으면 취소되지 않은 주문 집계."""
        orders = [order(100), order(50, status="cancelled"), order(25.555, status="delivered")]
        assert total_revenue(orders) == 125.56

    def test_empty(self):
        assert total_revenue([]) == 0

    def test_estimated_profit(self):
        assert estimated_profit(200.0, 0.3) == 60.0
        assert estimated_profit(0, 0.3) == 0


class TestSalesByDay:
    """일자별 매출 차트."""

    def test_label_format(self):
        assert day_label(date(2026, 1, 5)) == "Jan 5"
        assert day_label(date(2026, 12, 25)) == "Dec 25"

    def test_buckets_ascending(self):
        """같은 날 합산, 오래된 순 정렬."""
        orders = [
            order(30, created=datetime(2026, 1, 6, 9)),
            order(10, created=datetime(2026, 1, 5, 9)),
            order(20, created=datetime(2026, 1, 5, 18)),
        ]
        assert sales_by_day(orders) == [
            {"date": "Jan 5", "sales": 30.0},
            {"date": "Jan 6", "sales": 30.0},
        ]

    def test_keeps_last_n_days_with_sales(self):
        """매출이 있는 마지막 N일만 유지."""
        orders = [order(1, created=datetime(2026, 1, d)) for d in range(1, 11)]
        points = sales_by_day(orders, days=7)
        assert len(points) == 7
        assert points[0]["date"] == "Jan 4"
        assert points[-1]["date"] == "Jan 10"

    def test_skips_orders_without_timestamp(self):
        row = order(10)
        row["created_at"] = None
        assert sales_by_day([row]) == []


class TestSalesTrend:
    """최근 N일 추이 (0 채움)."""

    def test_zero_filled_window(self):
        orders = [order(40, created=datetime(2026, 1, 5, 12)), order(99, created=datetime(2025, 12, 1))]
        trend = sales_trend(orders, today=date(2026, 1, 7), days=7)
        assert len(trend) == 7
        assert trend[0]["date"] == "Jan 1"
        assert trend[-1]["date"] == "Jan 7"
        assert [p["sales"] for p in trend] == [0, 0, 0, 0, 40.0, 0, 0]


class TestStatusBreakdown:
    def test_all_statuses_present(self):
        """모든 상태 키가 존재."""
        counts = status_breakdown([order(1), order(1, status="shipped"), order(1)])
        assert counts == {"pending": 2, "shipped": 1, "delivered": 0, "cancelled": 0}
