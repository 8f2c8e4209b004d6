"""공통 Pydantic 요청/응답 스키마 정의.

Common Pydantic request/response schema definitions.
Holds the uniform success/error envelope every mutation returns and the
generic message response.
"""

from typing import Any

from pydantic import BaseModel


class ApiResponse(BaseModel):
    """공통 응답 봉투 스키마.

    Uniform response envelope.
    Successful mutations return ``{"success": true, "data": ...}``; failures
    are rendered by the exception handlers in app.main as
    ``{"success": false, "error": "..."}``.

    Attributes:
        success: 처리 성공 여부 (Whether the operation succeeded)
        data: 결과 데이터 (Operation result payload, optional)
        error: 오류 메시지 (Error message when success is false)
    """

    success: bool = True
    data: Any = None
    error: str | None = None


class MessageResponse(BaseModel):
    """단순 메시지 응답 스키마 — Plain message response."""

    message: str
