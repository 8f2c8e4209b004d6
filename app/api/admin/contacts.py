"""관리자 문의 라우터 — 스토어프론트 문의 메시지 조회.

Admin Contact Router — Paginated list of contact form messages.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import CurrentAdmin
from app.database import get_db
from app.services.contact_service import contact_service
from app.utils.pagination import Page

router: APIRouter = APIRouter()


@router.get("", response_model=Page)
async def list_contacts(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_admin: CurrentAdmin,
    page: Annotated[int, Query(ge=1)] = 1,
    per_page: Annotated[int, Query(ge=1, le=200)] = 20,
) -> Page:
    """문의 목록을 최신순으로 조회합니다."""
    contacts, total = await contact_service.list_contacts(db, page, per_page)
    return Page.build([contact_service.to_response(c) for c in contacts], total, page, per_page)
