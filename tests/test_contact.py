"""문의 양식 테스트 — 스토어프론트 제출과 관리자 목록.

Contact form tests — Storefront submission and the admin message list.
"""

from httpx import AsyncClient

from tests.conftest import session_header

CONTACT = "/api/v1/store/contact"
ADMIN = "/api/v1/admin/contacts"

MESSAGE = {"name": "Leila", "email": "leila@example.tn", "message": "Do you ship to Djerba?"}


class TestContactForm:
    """문의 제출."""

    async def test_submit(self, client: AsyncClient):
        res = await client.post(CONTACT, json=MESSAGE)
        assert res.status_code == 201
        assert res.json()["success"] is True
        assert res.json()["data"]["id"]

    async def test_blank_field_rejected(self, client: AsyncClient):
        res = await client.post(CONTACT, json={**MESSAGE, "message": "   "})
        assert res.status_code == 400
        assert res.json() == {"success": False, "error": "Name, email and message are required"}

    async def test_invalid_email(self, client: AsyncClient):
        """형식이 잘못된 이메일은 422."""
        for email in ("leila@", "john@example..com", "<script>@x.y"):
            res = await client.post(CONTACT, json={**MESSAGE, "email": email})
            assert res.status_code == 422, email
            body = res.json()
            assert body["success"] is False
            assert body["error"].startswith("email:")


class TestAdminContacts:
    """관리자 문의 목록."""

    async def test_list_paginated(self, client: AsyncClient, admin_token):
        for i in range(3):
            await client.post(CONTACT, json={**MESSAGE, "name": f"Guest {i}"})

        res = await client.get(ADMIN, params={"per_page": 2}, headers=session_header(admin_token))
        assert res.status_code == 200
        data = res.json()
        assert data["total"] == 3
        assert data["pages"] == 2
        assert len(data["items"]) == 2
        assert data["items"][0]["email"] == "leila@example.tn"

    async def test_requires_session(self, client: AsyncClient):
        res = await client.get(ADMIN)
        assert res.status_code == 401
