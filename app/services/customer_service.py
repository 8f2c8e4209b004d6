"""고객 서비스 — 주문 목록에서 고객을 파생합니다.

Customer Service — Customers are not stored; they are aggregated in memory
from the order list by grouping on phone, falling back to the name.
"""

from datetime import datetime
from typing import Any, Iterable

from sqlalchemy.ext.asyncio import AsyncSession

from app.services.order_service import order_service
from app.utils.exceptions import NotFoundError
from app.utils.revenue import OrderRow


def customer_key(order: OrderRow) -> str | None:
    """그룹 키 — phone, else customer_name, else None (order skipped)."""
    return order.get("phone") or order.get("customer_name") or None


def aggregate_customers(orders: Iterable[OrderRow]) -> list[dict[str, Any]]:
    """주문 목록을 고객별로 집계합니다.

    Group normalized orders by phone-or-name. Per customer: the name and
    phone of the first order seen, the address of the latest order that has
    one, order count, total spent, latest order time, and ``is_paid`` which
    stays true only while every order is paid.

    Args:
        orders: 정규화된 주문 목록 (Normalized orders, any order)

    Returns:
        list[dict]: 총 구매액 내림차순 고객 목록 (Customers by total_spent, descending)
    """
    customers: dict[str, dict[str, Any]] = {}

    for order in orders:
        key = customer_key(order)
        if key is None:
            continue

        created_at: datetime | None = order.get("created_at")
        paid = order.get("payment_status") == "paid"
        existing = customers.get(key)

        if existing is None:
            customers[key] = {
                "key": key,
                "name": order.get("customer_name") or "Unknown",
                "phone": order.get("phone") or "",
                "address": order.get("address") or "",
                "total_orders": 1,
                "total_spent": order.get("total_price") or 0.0,
                "last_order": created_at,
                "is_paid": paid,
            }
            continue

        existing["total_orders"] += 1
        existing["total_spent"] += order.get("total_price") or 0.0
        existing["is_paid"] = existing["is_paid"] and paid
        if created_at is not None and (existing["last_order"] is None or created_at > existing["last_order"]):
            existing["last_order"] = created_at
            existing["address"] = order.get("address") or existing["address"]
        elif not existing["address"]:
            existing["address"] = order.get("address") or ""

    for customer in customers.values():
        customer["total_spent"] = round(customer["total_spent"], 2)

    return sorted(customers.values(), key=lambda c: c["total_spent"], reverse=True)


def search_customers(customers: Iterable[dict[str, Any]], term: str | None) -> list[dict[str, Any]]:
    """이름(대소문자 무시) 또는 연락처 부분 일치로 검색합니다."""
    customers = list(customers)
    if not term:
        return customers
    needle = term.strip().lower()
    return [
        c for c in customers
        if needle in c["name"].lower() or term.strip() in (c["phone"] or "")
    ]


class CustomerService:
    """고객 목록/상세 조회 서비스."""

    async def list_customers(self, db: AsyncSession, search: str | None = None) -> list[dict[str, Any]]:
        orders = await order_service.get_all_orders(db)
        return search_customers(aggregate_customers(orders), search)

    async def get_customer(self, db: AsyncSession, key: str) -> dict[str, Any]:
        """단일 고객과 해당 고객의 주문 목록을 조회합니다.

        Return one customer together with their orders, newest first.

        Raises:
            NotFoundError: 고객 없음 (No order carries this key)
        """
        orders = await order_service.get_all_orders(db)
        own_orders: list[OrderRow] = [o for o in orders if customer_key(o) == key]
        if not own_orders:
            raise NotFoundError("Customer not found")
        customer = aggregate_customers(own_orders)[0]
        return {**customer, "orders": own_orders}


# 싱글턴 인스턴스 — Singleton instance
customer_service: CustomerService = CustomerService()
