"""문의 양식 Pydantic 스키마 정의."""

from datetime import datetime

from pydantic import BaseModel, EmailStr


class ContactCreate(BaseModel):
    """문의 양식 제출 스키마 — Storefront contact form."""

    name: str
    email: EmailStr
    message: str


class ContactResponse(BaseModel):
    """문의 응답 스키마."""

    id: str
    name: str
    email: str
    message: str
    created_at: datetime | None = None
