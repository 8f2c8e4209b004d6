"""매출 파생 통계 유틸리티 — 주문 목록 기반 순수 계산.

Revenue derivation utilities — pure, synchronous arithmetic over an
in-memory order list. Used by the dashboard, insights, and report exports.

Revenue Policy:
    1. 결제 완료(paid) 주문이 하나라도 있으면 paid 주문만 매출로 집계
       (If any order is paid, only paid orders count as revenue)
    2. 없으면 취소되지 않은 모든 주문을 매출로 집계
       (Otherwise every non-cancelled order counts, so a store that does not
       track payments yet still sees its sales)
"""

from collections import defaultdict
from collections.abc import Iterable, Mapping
from datetime import date, datetime, timedelta
from typing import Any

from app.models.order import ORDER_STATUSES

# 정규화된 주문 딕셔너리 — Normalized order dictionary
OrderRow = dict[str, Any]


def _field(row: Any, name: str) -> Any:
    if isinstance(row, Mapping):
        return row.get(name)
    return getattr(row, name, None)


def _to_datetime(value: Any) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return None


def _to_float(value: Any) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


def normalize_order(row: Any) -> OrderRow:
    """DB 주문 행을 정규화된 딕셔너리로 변환합니다.

    Coerce a raw order (ORM object or mapping) into a plain dict:
    ``status`` lower-cased defaulting to "pending", ``payment_status``
    lower-cased defaulting to "unpaid", ``total_price`` as float defaulting
    to 0, ``created_at`` parsed to a datetime.

    Args:
        row: Order ORM 인스턴스 또는 매핑 (Order ORM instance or mapping)

    Returns:
        OrderRow: 정규화된 주문 (Normalized order dict)
    """
    order_id = _field(row, "id")
    return {
        "id": str(order_id) if order_id is not None else None,
        "customer_name": _field(row, "customer_name") or "",
        "phone": _field(row, "phone"),
        "address": _field(row, "address"),
        "total_price": _to_float(_field(row, "total_price")),
        "items": _field(row, "items") or [],
        "status": str(_field(row, "status") or "pending").lower(),
        "payment_status": str(_field(row, "payment_status") or "unpaid").lower(),
        "created_at": _to_datetime(_field(row, "created_at")),
    }


def revenue_orders(orders: Iterable[OrderRow]) -> list[OrderRow]:
    """매출로 집계되는 주문 목록을 반환합니다 (모듈 docstring의 Revenue Policy).

    Return the orders that count toward revenue under the store policy.
    """
    orders = list(orders)
    paid: list[OrderRow] = [o for o in orders if o["payment_status"] == "paid"]
    if paid:
        return paid
    return [o for o in orders if o["status"] != "cancelled"]


def total_revenue(orders: Iterable[OrderRow]) -> float:
    """총 매출 (소수점 2자리) — Total revenue rounded to 2 decimals."""
    return round(sum(o["total_price"] for o in revenue_orders(orders)), 2)


def estimated_profit(revenue: float, margin: float) -> float:
    """추정 이익 = 매출 × 마진 — Estimated profit, rounded to 2 decimals."""
    return round(revenue * margin, 2)


def day_label(day: date) -> str:
    """차트 라벨 "Jan 5" 형식 — Short month name followed by the day number."""
    return f"{day:%b} {day.day}"


def sales_by_day(orders: Iterable[OrderRow], days: int = 7) -> list[dict[str, Any]]:
    """일자별 매출을 집계합니다.

    Bucket revenue orders by calendar day of ``created_at`` and keep the
    last ``days`` buckets that have sales, oldest first.

    Returns:
        list[dict]: [{"date": "Jan 5", "sales": 120.0}, ...]
    """
    buckets: dict[date, float] = defaultdict(float)
    for order in revenue_orders(orders):
        created_at: datetime | None = order["created_at"]
        if created_at is None:
            continue
        buckets[created_at.date()] += order["total_price"]

    ordered_days: list[date] = sorted(buckets)[-days:] if days > 0 else []
    return [{"date": day_label(d), "sales": round(buckets[d], 2)} for d in ordered_days]


def sales_trend(orders: Iterable[OrderRow], today: date, days: int = 7) -> list[dict[str, Any]]:
    """최근 N일 매출 추이 (매출 없는 날은 0).

    Zero-filled revenue series for the ``days`` calendar days ending
    ``today``, oldest first.
    """
    window: list[date] = [today - timedelta(days=offset) for offset in range(days - 1, -1, -1)]
    totals: dict[date, float] = {d: 0.0 for d in window}
    for order in revenue_orders(orders):
        created_at: datetime | None = order["created_at"]
        if created_at is not None and created_at.date() in totals:
            totals[created_at.date()] += order["total_price"]
    return [{"date": day_label(d), "sales": round(totals[d], 2)} for d in window]


def status_breakdown(orders: Iterable[OrderRow]) -> dict[str, int]:
    """상태별 주문 수 — Order count per status; every status key is present."""
    counts: dict[str, int] = {status: 0 for status in ORDER_STATUSES}
    for order in orders:
        if order["status"] in counts:
            counts[order["status"]] += 1
    return counts
