"""스토어프론트 문의 라우터 — 문의 양식 제출.

Storefront Contact Router — Contact form submission.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.common import ApiResponse
from app.schemas.contact import ContactCreate
from app.services.contact_service import contact_service

router: APIRouter = APIRouter()


@router.post("", response_model=ApiResponse, status_code=201)
async def submit_contact_form(
    data: ContactCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse:
    """문의 양식을 제출합니다."""
    contact = await contact_service.submit(db, data)
    await db.commit()
    return ApiResponse(success=True, data={"id": str(contact.id)})
