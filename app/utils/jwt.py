"""관리자 세션 토큰 생성 및 검증 유틸리티 모듈.

Admin session token creation and verification utility module.
The token travels in the admin session cookie and carries only the admin
username and its expiry.

JWT Payload Structure:
    {
        "sub": "admin",             # 관리자 아이디 (Admin username)
        "iat": 1234567890,          # 발급 시각 UNIX timestamp (Issued at)
        "exp": 1234567890,          # 만료 시각 UNIX timestamp (Expiration)
        "type": "admin_session"     # 토큰 유형 (Token type discriminator)
    }
"""

from datetime import datetime, timedelta, timezone
from typing import Any
import jwt

from app.config import settings

# 토큰 유형 식별자 — Token type discriminator
SESSION_TOKEN_TYPE: str = "admin_session"


def create_session_token(username: str) -> str:
    """관리자 세션 토큰을 생성합니다.

    Generate a signed session token for the admin ``username``.
    Token expires after ADMIN_SESSION_EXPIRE_DAYS (default: 7 days),
    matching the cookie max-age.

    Args:
        username: 관리자 아이디 (Admin username)

    Returns:
        str: 인코딩된 JWT 문자열 (Encoded JWT token string)
    """
    now: datetime = datetime.now(timezone.utc)
    payload: dict[str, Any] = {
        "sub": username,
        "iat": now,
        "exp": now + timedelta(days=settings.ADMIN_SESSION_EXPIRE_DAYS),
        "type": SESSION_TOKEN_TYPE,
    }
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> dict[str, Any]:
    """JWT 토큰을 디코딩하고 검증합니다.

    Decode and verify a JWT token string.

    Raises:
        jwt.ExpiredSignatureError: 토큰 만료 시 (When token has expired)
        jwt.InvalidTokenError: 유효하지 않은 토큰 (When token is invalid)
    """
    return jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])


def verify_session_token(token: str | None) -> str | None:
    """세션 토큰이 유효하면 관리자 아이디를 반환합니다.

    Return the username carried by a valid session token, otherwise None.
    Expired, tampered, or wrongly typed tokens all yield None.
    """
    if not token:
        return None
    try:
        payload: dict[str, Any] = decode_token(token)
    except jwt.InvalidTokenError:
        return None
    if payload.get("type") != SESSION_TOKEN_TYPE:
        return None
    username = payload.get("sub")
    return username if isinstance(username, str) and username else None
