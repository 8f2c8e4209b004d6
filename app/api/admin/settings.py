"""관리자 설정 라우터 — 비밀번호 변경.

Admin Settings Router — Password change for the logged-in admin.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import CurrentAdmin
from app.database import get_db
from app.schemas.auth import PasswordChangeRequest
from app.schemas.common import ApiResponse
from app.services.auth_service import auth_service

router: APIRouter = APIRouter()


@router.put("/password", response_model=ApiResponse)
async def update_password(
    data: PasswordChangeRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: CurrentAdmin,
) -> ApiResponse:
    """관리자 비밀번호를 변경합니다.

    Change the admin password. The current password must match and the new
    one must be at least 8 characters long.

    Returns:
        ApiResponse: {"success": true}
    """
    await auth_service.update_password(db, current_admin, data)
    await db.commit()
    return ApiResponse(success=True)
