"""관리자 인증 테스트 — 로그인, 로그아웃, /me, 세션 게이트, 비밀번호 변경.

Admin auth tests — Login cookie, logout, /me, the /api/v1/admin/* session
gate, and the password change rules.
"""

from httpx import AsyncClient

from app.middleware.admin_session import requires_session
from app.utils.jwt import create_session_token, verify_session_token
from app.utils.password import verify_password
from tests.conftest import ADMIN_PASSWORD, session_header

ADMIN_AUTH = "/api/v1/admin/auth"
SETTINGS = "/api/v1/admin/settings"


# ===== Login / Logout =====

class TestAdminLogin:
    """관리자 로그인 테스트."""

    async def test_login_success_sets_cookie(self, client: AsyncClient, admin):
        """로그인 성공 시 httpOnly 세션 쿠키 설정."""
        res = await client.post(f"{ADMIN_AUTH}/login", json={"username": "admin", "password": ADMIN_PASSWORD})
        assert res.status_code == 200
        assert res.json()["ok"] is True

        cookie = res.headers["set-cookie"]
        assert "luxeshopy_admin=" in cookie
        assert "HttpOnly" in cookie
        assert "Max-Age=604800" in cookie
        assert "samesite=lax" in cookie.lower()

    async def test_login_wrong_password(self, client: AsyncClient, admin):
        """잘못된 비밀번호 → 401 envelope."""
        res = await client.post(f"{ADMIN_AUTH}/login", json={"username": "admin", "password": "nope"})
        assert res.status_code == 401
        assert res.json() == {"success": False, "error": "Invalid username or password"}

    async def test_login_unknown_user(self, client: AsyncClient):
        res = await client.post(f"{ADMIN_AUTH}/login", json={"username": "ghost", "password": "x"})
        assert res.status_code == 401

    async def test_login_missing_field_422(self, client: AsyncClient):
        res = await client.post(f"{ADMIN_AUTH}/login", json={"username": "admin"})
        assert res.status_code == 422
        assert res.json()["success"] is False

    async def test_logout_clears_cookie(self, client: AsyncClient, admin_token):
        """로그아웃 시 쿠키 max-age 0."""
        res = await client.post(f"{ADMIN_AUTH}/logout", headers=session_header(admin_token))
        assert res.status_code == 200
        assert "Max-Age=0" in res.headers["set-cookie"]

    async def test_me(self, client: AsyncClient, admin_token):
        res = await client.get(f"{ADMIN_AUTH}/me", headers=session_header(admin_token))
        assert res.status_code == 200
        assert res.json() == {"username": "admin"}


# ===== Session gate =====

class TestSessionGate:
    """/api/v1/admin/* 세션 게이트."""

    def test_path_matching(self):
        assert requires_session("/api/v1/admin/orders")
        assert requires_session("/api/v1/admin")
        assert not requires_session("/api/v1/admin/auth/login")
        assert not requires_session("/api/v1/administrator")
        assert not requires_session("/api/v1/store/products")

    async def test_missing_cookie_401(self, client: AsyncClient):
        """쿠키 없이 관리자 경로 접근 → 401."""
        res = await client.get("/api/v1/admin/dashboard/stats")
        assert res.status_code == 401
        assert res.json() == {"success": False, "error": "Not authenticated"}

    async def test_tampered_token_401(self, client: AsyncClient, admin_token):
        res = await client.get("/api/v1/admin/orders", headers=session_header(admin_token + "x"))
        assert res.status_code == 401

    async def test_valid_token_for_deleted_admin_401(self, client: AsyncClient, admin):
        """토큰은 유효하지만 관리자 행이 없으면 401."""
        token = create_session_token("someone-else")
        res = await client.get(f"{ADMIN_AUTH}/me", headers=session_header(token))
        assert res.status_code == 401

    async def test_storefront_is_public(self, client: AsyncClient):
        res = await client.get("/api/v1/store/products")
        assert res.status_code == 200

    def test_verify_session_token(self):
        assert verify_session_token(create_session_token("admin")) == "admin"
        assert verify_session_token(None) is None
        assert verify_session_token("garbage") is None


# ===== Password change =====

class TestPasswordChange:
    """비밀번호 변경."""

    async def test_change_password(self, client: AsyncClient, db, admin, admin_token):
        res = await client.put(
            f"{SETTINGS}/password",
            json={"current_password": ADMIN_PASSWORD, "new_password": "new-secret-1"},
            headers=session_header(admin_token),
        )
        assert res.status_code == 200
        assert res.json()["success"] is True

        await db.refresh(admin)
        assert verify_password("new-secret-1", admin.password_hash)

    async def test_wrong_current_password(self, client: AsyncClient, admin_token):
        res = await client.put(
            f"{SETTINGS}/password",
            json={"current_password": "wrong", "new_password": "new-secret-1"},
            headers=session_header(admin_token),
        )
        assert res.status_code == 400
        assert res.json()["error"] == "Current password is incorrect"

    async def test_short_new_password(self, client: AsyncClient, admin_token):
        """새 비밀번호 8자 미만 거부."""
        res = await client.put(
            f"{SETTINGS}/password",
            json={"current_password": ADMIN_PASSWORD, "new_password": "short"},
            headers=session_header(admin_token),
        )
        assert res.status_code == 400
        assert res.json()["error"] == "Password must be at least 8 characters"

    async def test_requires_session(self, client: AsyncClient):
        res = await client.put(
            f"{SETTINGS}/password",
            json={"current_password": "a", "new_password": "abcdefgh"},
        )
        assert res.status_code == 401
