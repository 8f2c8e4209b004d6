"""관리자 세션 게이트 미들웨어.

Admin session gate middleware.
Every request under /api/v1/admin/ except the login endpoint must carry a
valid admin session cookie; otherwise the request is answered with 401 and
the standard error envelope before reaching a router.

The per-route ``get_current_admin`` dependency still loads the admin row;
this gate only checks the cookie token.
"""

from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from app.config import settings
from app.utils.jwt import verify_session_token

ADMIN_PREFIX = "/api/v1/admin"

# 세션 없이 접근 가능한 관리자 경로 — Admin paths reachable without a session
PUBLIC_ADMIN_PATHS: frozenset[str] = frozenset({f"{ADMIN_PREFIX}/auth/login"})


def requires_session(path: str) -> bool:
    if path in PUBLIC_ADMIN_PATHS:
        return False
    return path == ADMIN_PREFIX or path.startswith(f"{ADMIN_PREFIX}/")


class AdminSessionMiddleware(BaseHTTPMiddleware):
    """관리자 경로 세션 쿠키 검사 미들웨어."""

    def __init__(self, app: Any) -> None:
        super().__init__(app)
        self.cookie_name: str = settings.ADMIN_SESSION_COOKIE

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # CORS preflight는 통과 — Let preflight requests through
        if request.method == "OPTIONS" or not requires_session(request.url.path):
            return await call_next(request)

        if verify_session_token(request.cookies.get(self.cookie_name)) is None:
            return JSONResponse(
                status_code=401,
                content={"success": False, "error": "Not authenticated"},
            )
        return await call_next(request)
