"""대시보드/인사이트/고객 Pydantic 응답 스키마 정의.

Dashboard, insights, customer, and notification response schemas for the
admin panel.
"""

from datetime import datetime

from pydantic import BaseModel

from app.schemas.order import OrderResponse


class DashboardStats(BaseModel):
    """대시보드 통계 응답.

    Attributes:
        total_sales: 총 매출 (Revenue under the store revenue policy)
        total_orders: 전체 주문 수 (All orders)
        total_products: 상품 수 (Catalog size)
        pending_orders: 대기 주문 수 (Orders still pending)
        total_profit: 추정 이익 (Revenue × profit margin)
        orders: 최신순 주문 목록 (Normalized orders, newest first)
    """

    total_sales: float = 0
    total_orders: int = 0
    total_products: int = 0
    pending_orders: int = 0
    total_profit: float = 0
    orders: list[OrderResponse] = []


class SalesPoint(BaseModel):
    """매출 차트 데이터 포인트 — {"date": "Jan 5", "sales": 120.0}."""

    date: str
    sales: float


class InsightsResponse(BaseModel):
    """인사이트 페이지 KPI 응답."""

    total_revenue: float
    total_orders: int
    estimated_profit: float
    profit_margin: float
    sales_trend: list[SalesPoint]
    status_breakdown: dict[str, int]


class CustomerResponse(BaseModel):
    """주문에서 파생된 고객 응답.

    Attributes:
        key: 그룹 키 — 연락처 또는 이름 (Grouping key: phone, else name)
        name: 고객 이름 (Customer name, "Unknown" when missing)
        phone: 연락처 (Phone number, "" when missing)
        address: 최근 배송 주소 (Latest known address)
        total_orders: 주문 수 (Number of orders)
        total_spent: 총 구매액 (Sum of order totals)
        last_order: 최근 주문 일시 (Latest order timestamp)
        is_paid: 모든 주문 결제 여부 (True only when every order is paid)
    """

    key: str
    name: str
    phone: str
    address: str
    total_orders: int
    total_spent: float
    last_order: datetime | None = None
    is_paid: bool


class NotificationItem(BaseModel):
    """알림 항목."""

    id: str
    title: str
    message: str
    read: bool
    time: datetime


class NotificationFeed(BaseModel):
    """알림 벨 응답 — pending counter plus recent notifications."""

    pending_count: int
    unread_count: int
    unread_notification_count: int
    notifications: list[NotificationItem]
