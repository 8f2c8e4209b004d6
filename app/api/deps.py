"""FastAPI 의존성 주입 모듈 — 관리자 세션 및 장바구니 쿠키.

FastAPI dependency injection module — Admin session and cart cookie.

Authentication Flow:
    1. 로그인 시 서버가 관리자 세션 쿠키를 설정
       (Login sets the admin session cookie)
    2. AdminSessionMiddleware가 /api/v1/admin/* 요청의 쿠키 토큰을 검사
       (The middleware gate checks the cookie token on every admin path)
    3. get_current_admin()이 토큰의 아이디로 DB에서 관리자를 조회
       (get_current_admin loads the admin row named by the token)
"""

from typing import Annotated
from uuid import UUID

from fastapi import Cookie, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db
from app.models.admin import Admin
from app.services.auth_service import auth_service

SECONDS_PER_DAY = 24 * 60 * 60


async def get_current_admin(
    db: Annotated[AsyncSession, Depends(get_db)],
    session_token: Annotated[str | None, Cookie(alias=settings.ADMIN_SESSION_COOKIE)] = None,
) -> Admin:
    """세션 쿠키에서 현재 관리자를 조회합니다.

    Resolve the admin behind the session cookie.

    Raises:
        UnauthorizedError: 쿠키 없음, 토큰 무효, 관리자 없음
                           (Missing cookie, invalid token, unknown admin)
    """
    return await auth_service.get_session_admin(db, session_token)


def get_cart_id(
    cart_cookie: Annotated[str | None, Cookie(alias=settings.CART_COOKIE)] = None,
) -> UUID | None:
    """장바구니 쿠키의 UUID — None when missing or malformed (a new cart is created)."""
    if not cart_cookie:
        return None
    try:
        return UUID(cart_cookie)
    except ValueError:
        return None


def set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.ADMIN_SESSION_COOKIE,
        value=token,
        max_age=settings.ADMIN_SESSION_EXPIRE_DAYS * SECONDS_PER_DAY,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )


def clear_session_cookie(response: Response) -> None:
    response.set_cookie(
        key=settings.ADMIN_SESSION_COOKIE,
        value="",
        max_age=0,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )


def set_cart_cookie(response: Response, cart_id: UUID) -> None:
    response.set_cookie(
        key=settings.CART_COOKIE,
        value=str(cart_id),
        max_age=settings.CART_COOKIE_MAX_AGE_DAYS * SECONDS_PER_DAY,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )


CurrentAdmin = Annotated[Admin, Depends(get_current_admin)]
CartId = Annotated[UUID | None, Depends(get_cart_id)]
