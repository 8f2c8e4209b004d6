"""알림 테스트 — 주문 이벤트 브로커, SSE 스트림, 관리자 알림 피드.

Notification tests — Order event broker, the SSE listener, and the admin
notification bell endpoints.
"""

import json
from datetime import datetime, timedelta, timezone

import pytest
from httpx import AsyncClient

from app.services.realtime_service import OrderEventBroker, format_sse, order_event_broker
from tests.conftest import make_order, session_header

NOTIFICATIONS = "/api/v1/admin/notifications"


def order_payload(name: str | None = "Amira", order_id: str = "o-1") -> dict:
    return {"id": order_id, "customer_name": name, "total_price": 120.0, "status": "pending"}


class TestOrderEventBroker:
    """주문 이벤트 브로커."""

    def test_insert_adds_unread_notification(self):
        broker = OrderEventBroker()
        broker.publish("INSERT", order_payload())
        notifications = broker.live_notifications()
        assert len(notifications) == 1
        assert notifications[0]["title"] == "New Order"
        assert notifications[0]["message"] == "Order received from Amira"
        assert notifications[0]["read"] is False
        assert broker.unread_notification_count == 1

    def test_guest_name_fallback(self):
        broker = OrderEventBroker()
        broker.publish("INSERT", order_payload(name=None))
        assert broker.live_notifications()[0]["message"] == "Order received from Guest"

    def test_update_and_delete_do_not_notify(self):
        """UPDATE/DELETE는 알림 없이 구독자에게만 전달."""
        broker = OrderEventBroker()
        queue = broker.subscribe()
        broker.publish("UPDATE", order_payload())
        broker.publish("DELETE", order_payload())
        assert broker.live_notifications() == []
        assert [queue.get_nowait()["type"] for _ in range(2)] == ["UPDATE", "DELETE"]

    def test_unknown_event_type(self):
        with pytest.raises(ValueError):
            OrderEventBroker().publish("UPSERT", order_payload())

    def test_keeps_newest_notifications(self):
        """최대 보관 수 초과 시 오래된 알림 제거."""
        broker = OrderEventBroker(max_notifications=3)
        for i in range(5):
            broker.publish("INSERT", order_payload(name=f"C{i}", order_id=f"o-{i}"))
        assert [n["id"] for n in broker.live_notifications()] == ["o-4", "o-3", "o-2"]
        assert broker.unread_notification_count == 5

    def test_full_queue_drops_event(self):
        broker = OrderEventBroker(queue_size=1)
        queue = broker.subscribe()
        broker.publish("UPDATE", order_payload())
        broker.publish("UPDATE", order_payload())
        assert queue.qsize() == 1

    def test_mark_read_and_reset(self):
        broker = OrderEventBroker()
        broker.publish("INSERT", order_payload())
        broker.mark_all_read()
        assert broker.live_notifications()[0]["read"] is True
        assert broker.unread_notification_count == 1
        broker.reset_unread_count()
        assert broker.unread_notification_count == 0

    def test_format_sse(self):
        frame = format_sse({"type": "INSERT", "order": {"id": "o-1"}})
        assert frame.startswith("event: INSERT\ndata: ")
        assert frame.endswith("\n\n")
        assert json.loads(frame.split("data: ", 1)[1])["order"]["id"] == "o-1"


class TestEventStream:
    """SSE 리스너."""

    async def test_listen_yields_events_and_heartbeats(self):
        """연결 → 이벤트 → keep-alive → 연결 종료 시 구독 해제."""
        broker = OrderEventBroker()
        states = iter([False, False, True])

        async def is_disconnected() -> bool:
            return next(states)

        stream = broker.listen(is_disconnected, heartbeat=0.01)
        assert await stream.__anext__() == ": connected\n\n"
        assert broker.subscriber_count == 1

        broker.publish("UPDATE", order_payload())
        assert (await stream.__anext__()).startswith("event: UPDATE\n")
        assert await stream.__anext__() == ": keep-alive\n\n"

        with pytest.raises(StopAsyncIteration):
            await stream.__anext__()
        assert broker.subscriber_count == 0

    async def test_stream_requires_session(self, client: AsyncClient):
        res = await client.get(f"{NOTIFICATIONS}/stream")
        assert res.status_code == 401


class TestNotificationFeed:
    """알림 벨 피드 API."""

    async def test_feed_lists_latest_orders(self, client: AsyncClient, db, admin_token):
        """실시간 알림이 없으면 최근 주문이 읽음 상태로 표시."""
        now = datetime.now(timezone.utc)
        await make_order(db, customer_name="Old", total_price=12, created_at=now - timedelta(hours=1))
        await make_order(db, customer_name="Recent", status="shipped", created_at=now)

        res = await client.get(NOTIFICATIONS, headers=session_header(admin_token))
        assert res.status_code == 200
        data = res.json()
        assert data["pending_count"] == 1
        assert data["unread_count"] == 0
        assert data["unread_notification_count"] == 0
        assert [n["title"] for n in data["notifications"]] == ["Order Tracking", "Order Tracking"]
        assert data["notifications"][1]["message"] == "Order from Old - 12.00 TND"

    async def test_new_order_appears_first(self, client: AsyncClient, db, admin_token):
        """새 주문 알림이 맨 앞, 같은 주문은 중복 표시하지 않음."""
        await make_order(db, customer_name="Earlier")
        await client.post("/api/v1/store/orders", json={
            "customer_name": "Nour",
            "phone": "20111222",
            "address": "3 Rue Ibn Khaldoun, Sfax, Sfax",
            "total_price": 210,
        })

        data = (await client.get(NOTIFICATIONS, headers=session_header(admin_token))).json()
        titles = [n["title"] for n in data["notifications"]]
        assert titles == ["New Order", "Order Tracking"]
        assert data["unread_count"] == 1
        assert data["unread_notification_count"] == 1

    async def test_read_all_and_reset_count(self, client: AsyncClient, admin_token):
        order_event_broker.publish("INSERT", order_payload())

        res = await client.patch(f"{NOTIFICATIONS}/read-all", headers=session_header(admin_token))
        assert res.status_code == 200
        data = (await client.get(NOTIFICATIONS, headers=session_header(admin_token))).json()
        assert data["unread_count"] == 0
        assert data["unread_notification_count"] == 1

        res = await client.post(f"{NOTIFICATIONS}/reset-count", headers=session_header(admin_token))
        assert res.status_code == 200
        data = (await client.get(NOTIFICATIONS, headers=session_header(admin_token))).json()
        assert data["unread_notification_count"] == 0
