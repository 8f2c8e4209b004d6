"""실시간 알림 서비스 — 주문 이벤트 브로커와 관리자 알림 피드.

Realtime Service — In-process order event broker and the admin
notification feed.

Routers publish INSERT / UPDATE / DELETE events after commit. Every SSE
subscriber owns one asyncio.Queue registered with the broker; the admin
client refetches its data on each event.
"""

import asyncio
import json
import logging
from collections import deque
from collections.abc import AsyncIterator, Awaitable, Callable
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from sqlalchemy.ext.asyncio import AsyncSession

from app.repositories.order_repository import order_repository
from app.utils.revenue import normalize_order

logger = logging.getLogger(__name__)

ORDER_EVENT_TYPES: tuple[str, ...] = ("INSERT", "UPDATE", "DELETE")


def format_sse(event: dict[str, Any]) -> str:
    """이벤트를 SSE 프레임으로 직렬화합니다 — "event: <type>\\ndata: <json>\\n\\n"."""
    return f"event: {event['type']}\ndata: {json.dumps(event, default=str)}\n\n"


class OrderEventBroker:
    """주문 이벤트 브로커.

    Fans order events out to SSE subscribers and keeps the unread
    "New Order" notifications pushed by INSERT events.

    Attributes:
        max_notifications: 보관할 알림 수 (Notifications kept, newest first)
        queue_size: 구독자 큐 크기 (Per-subscriber queue bound)
    """

    def __init__(self, max_notifications: int = 10, queue_size: int = 100) -> None:
        self.max_notifications = max_notifications
        self.queue_size = queue_size
        self._subscribers: set[asyncio.Queue] = set()
        self._notifications: deque[dict[str, Any]] = deque(maxlen=max_notifications)
        self._unread_notification_count = 0

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    @property
    def unread_notification_count(self) -> int:
        return self._unread_notification_count

    def subscribe(self) -> asyncio.Queue:
        queue: asyncio.Queue = asyncio.Queue(maxsize=self.queue_size)
        self._subscribers.add(queue)
        return queue

    def unsubscribe(self, queue: asyncio.Queue) -> None:
        self._subscribers.discard(queue)

    def publish(self, event_type: str, order: dict[str, Any]) -> dict[str, Any]:
        """주문 이벤트를 모든 구독자에게 전달합니다.

        INSERT 이벤트는 읽지 않은 "New Order" 알림을 추가하고 카운터를 올립니다.

        Args:
            event_type: INSERT | UPDATE | DELETE
            order: 정규화된 주문 (Normalized order payload)

        Returns:
            dict: 전달된 이벤트 (The published event)
        """
        if event_type not in ORDER_EVENT_TYPES:
            raise ValueError(f"Unknown order event type: {event_type}")

        now = datetime.now(timezone.utc)
        event: dict[str, Any] = {"type": event_type, "order": order, "time": now.isoformat()}

        if event_type == "INSERT":
            self._notifications.appendleft({
                "id": order.get("id") or uuid4().hex,
                "title": "New Order",
                "message": f"Order received from {order.get('customer_name') or 'Guest'}",
                "read": False,
                "time": now,
            })
            self._unread_notification_count += 1

        for queue in list(self._subscribers):
            try:
                queue.put_nowait(event)
            except asyncio.QueueFull:
                logger.warning("Dropping order event for a slow SSE subscriber")
        return event

    def live_notifications(self) -> list[dict[str, Any]]:
        return list(self._notifications)

    def mark_all_read(self) -> None:
        for notification in self._notifications:
            notification["read"] = True

    def reset_unread_count(self) -> None:
        self._unread_notification_count = 0

    def clear(self) -> None:
        self._notifications.clear()
        self._unread_notification_count = 0

    async def listen(
        self,
        is_disconnected: Callable[[], Awaitable[bool]],
        heartbeat: float = 15.0,
    ) -> AsyncIterator[str]:
        """SSE 스트림 — yields frames until the client disconnects.

        A comment frame is sent every ``heartbeat`` seconds without events
        so proxies keep the connection open.
        """
        queue = self.subscribe()
        try:
            yield ": connected\n\n"
            while not await is_disconnected():
                try:
                    event = await asyncio.wait_for(queue.get(), timeout=heartbeat)
                except asyncio.TimeoutError:
                    yield ": keep-alive\n\n"
                    continue
                yield format_sse(event)
        finally:
            self.unsubscribe(queue)


class NotificationService:
    """관리자 알림 벨 서비스."""

    def __init__(self, broker: OrderEventBroker) -> None:
        self.broker = broker

    async def get_feed(self, db: AsyncSession, latest: int = 5) -> dict[str, Any]:
        """알림 피드 조회.

        Pending-order count plus notifications: the live "New Order" entries
        first, then the latest orders as read "Order Tracking" entries.

        Returns:
            dict: pending_count, unread_count, unread_notification_count, notifications
        """
        pending_count: int = await order_repository.get_pending_count(db)
        latest_orders = [normalize_order(o) for o in await order_repository.get_latest(db, latest)]

        notifications: list[dict[str, Any]] = self.broker.live_notifications()
        seen: set[str] = {n["id"] for n in notifications}
        for order in latest_orders:
            if order["id"] in seen:
                continue
            notifications.append({
                "id": order["id"],
                "title": "Order Tracking",
                "message": f"Order from {order['customer_name'] or 'Guest'} - {order['total_price']:.2f} TND",
                "read": True,
                "time": order["created_at"] or datetime.now(timezone.utc),
            })

        notifications = notifications[: self.broker.max_notifications]
        return {
            "pending_count": pending_count,
            "unread_count": sum(1 for n in notifications if not n["read"]),
            "unread_notification_count": self.broker.unread_notification_count,
            "notifications": notifications,
        }


# 싱글턴 인스턴스 — Singleton instances
order_event_broker: OrderEventBroker = OrderEventBroker()
notification_service: NotificationService = NotificationService(order_event_broker)
