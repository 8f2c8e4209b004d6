"""관리자 인증 라우터 — 로그인, 로그아웃, 현재 세션.

Admin Auth Router — Login sets the session cookie, logout clears it.
The login path is the only admin path the session gate lets through.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import CurrentAdmin, clear_session_cookie, set_session_cookie
from app.database import get_db
from app.schemas.auth import AdminMeResponse, LoginRequest, LoginResponse
from app.services.auth_service import auth_service

router: APIRouter = APIRouter()


@router.post("/login", response_model=LoginResponse)
async def admin_login(
    data: LoginRequest,
    response: Response,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> dict:
    """관리자 로그인 — 성공 시 세션 쿠키를 설정합니다.

    Validate credentials and set the httpOnly admin session cookie.

    Args:
        data: 아이디/비밀번호 (Username and password)
        response: 쿠키를 설정할 응답 (Response the cookie is set on)
        db: 비동기 데이터베이스 세션 (Async database session)

    Returns:
        dict: {"ok": true, "message": "Logged in"}
    """
    token: str = await auth_service.login(db, data)
    set_session_cookie(response, token)
    return {"ok": True, "message": "Logged in"}


@router.post("/logout", response_model=LoginResponse)
async def admin_logout(response: Response) -> dict:
    """관리자 로그아웃 — 세션 쿠키 삭제 (max-age 0)."""
    clear_session_cookie(response)
    return {"ok": True, "message": "Logged out"}


@router.get("/me", response_model=AdminMeResponse)
async def get_me(current_admin: CurrentAdmin) -> dict:
    """현재 세션의 관리자 정보."""
    return {"username": current_admin.username}
