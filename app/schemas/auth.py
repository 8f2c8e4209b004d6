"""관리자 인증 관련 Pydantic 요청/응답 스키마 정의.

Admin authentication request/response schema definitions.
Covers login, the current session, and the password change form.
"""

from pydantic import BaseModel


class LoginRequest(BaseModel):
    """관리자 로그인 요청 스키마.

    Attributes:
        username: 관리자 아이디 (Admin username)
        password: 비밀번호 (Plain text, compared against the bcrypt hash)
    """

    username: str
    password: str


class LoginResponse(BaseModel):
    """로그인 결과 — the session token itself travels in the cookie."""

    ok: bool
    message: str


class AdminMeResponse(BaseModel):
    """현재 세션의 관리자 정보."""

    username: str


class PasswordChangeRequest(BaseModel):
    """관리자 비밀번호 변경 요청 스키마.

    Attributes:
        current_password: 현재 비밀번호 (Current password)
        new_password: 새 비밀번호, 8자 이상 (New password, at least 8 characters)
    """

    current_password: str
    new_password: str
