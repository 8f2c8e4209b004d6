"""문의 서비스 — 스토어프론트 문의 양식 저장 및 관리자 조회.

Contact Service — Stores storefront contact messages for the admin.
"""

import logging
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.contact import Contact
from app.repositories.contact_repository import contact_repository
from app.schemas.contact import ContactCreate
from app.utils.exceptions import BadRequestError

logger = logging.getLogger(__name__)


class ContactService:
    """문의 양식 서비스."""

    async def submit(self, db: AsyncSession, data: ContactCreate) -> Contact:
        """문의를 저장합니다.

        Raises:
            BadRequestError: 빈 항목 (Empty name or message)
        """
        name = data.name.strip()
        email = data.email.strip()
        message = data.message.strip()
        if not name or not email or not message:
            raise BadRequestError("Name, email and message are required")

        contact: Contact = await contact_repository.create(
            db, {"name": name, "email": email, "message": message}
        )
        logger.info(f"Contact message {contact.id} received")
        return contact

    async def list_contacts(
        self,
        db: AsyncSession,
        page: int = 1,
        per_page: int = 20,
    ) -> tuple[Sequence[Contact], int]:
        return await contact_repository.get_page(db, page, per_page)

    def to_response(self, contact: Contact) -> dict:
        return {
            "id": str(contact.id),
            "name": contact.name,
            "email": contact.email,
            "message": contact.message,
            "created_at": contact.created_at,
        }


# 싱글턴 인스턴스 — Singleton instance
contact_service: ContactService = ContactService()
