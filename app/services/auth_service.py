"""인증 서비스 — 관리자 로그인, 세션 확인, 비밀번호 변경 비즈니스 로직.

Auth Service — Business logic for the single admin account: login,
session resolution from the cookie token, and password change.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.admin import Admin
from app.repositories.admin_repository import admin_repository
from app.schemas.auth import LoginRequest, PasswordChangeRequest
from app.utils.exceptions import BadRequestError, UnauthorizedError
from app.utils.jwt import create_session_token, verify_session_token
from app.utils.password import MIN_PASSWORD_LENGTH, hash_password, verify_password

logger = logging.getLogger(__name__)


class AuthService:
    """관리자 인증 관련 비즈니스 로직을 처리하는 서비스.

    Service handling admin authentication.
    The session token is issued here and set as a cookie by the router.
    """

    async def login(
        self,
        db: AsyncSession,
        data: LoginRequest,
    ) -> str:
        """관리자 로그인 — 자격 증명을 확인하고 세션 토큰을 발급합니다.

        Validate admin credentials and issue a session token.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 로그인 요청 (Username and password)

        Returns:
            str: 세션 토큰 (Session token for the admin cookie)

        Raises:
            UnauthorizedError: 아이디 또는 비밀번호 불일치 (Unknown user or wrong password)
        """
        admin: Admin | None = await admin_repository.get_by_username(db, data.username)
        if admin is None or not verify_password(data.password, admin.password_hash):
            logger.warning(f"Admin login failed for username={data.username!r}")
            raise UnauthorizedError("Invalid username or password")

        logger.info(f"Admin {admin.username!r} logged in")
        return create_session_token(admin.username)

    async def get_session_admin(
        self,
        db: AsyncSession,
        token: str | None,
    ) -> Admin:
        """세션 토큰으로 현재 관리자를 조회합니다.

        Resolve the admin row behind a session token.

        Raises:
            UnauthorizedError: 토큰이 없거나 유효하지 않음, 또는 관리자 없음
                               (Missing/invalid token, or the admin no longer exists)
        """
        username: str | None = verify_session_token(token)
        if username is None:
            raise UnauthorizedError("Not authenticated")

        admin: Admin | None = await admin_repository.get_by_username(db, username)
        if admin is None:
            raise UnauthorizedError("Not authenticated")
        return admin

    async def update_password(
        self,
        db: AsyncSession,
        admin: Admin,
        data: PasswordChangeRequest,
    ) -> None:
        """관리자 비밀번호를 변경합니다.

        Change the admin password after checking the current one.

        Raises:
            BadRequestError: 현재 비밀번호 불일치 또는 새 비밀번호가 너무 짧음
                             (Wrong current password, or new password too short)
        """
        if not verify_password(data.current_password, admin.password_hash):
            raise BadRequestError("Current password is incorrect")

        if len(data.new_password) < MIN_PASSWORD_LENGTH:
            raise BadRequestError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

        await admin_repository.update(db, admin.id, {"password_hash": hash_password(data.new_password)})
        logger.info(f"Admin {admin.username!r} changed password")

    async def ensure_admin(
        self,
        db: AsyncSession,
        username: str,
        password: str,
    ) -> tuple[Admin, bool]:
        """관리자 계정이 없으면 생성합니다 (시드 스크립트용).

        Create the admin row when it does not exist yet.

        Returns:
            tuple[Admin, bool]: (관리자, 새로 생성 여부) (Admin, whether it was created)
        """
        existing: Admin | None = await admin_repository.get_by_username(db, username)
        if existing is not None:
            return existing, False
        admin: Admin = await admin_repository.create(
            db, {"username": username, "password_hash": hash_password(password)}
        )
        return admin, True


# 싱글턴 인스턴스 — Singleton instance
auth_service: AuthService = AuthService()
