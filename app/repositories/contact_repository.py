"""문의 레포지토리 — Contact message queries."""

from typing import Sequence

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.contact import Contact
from app.repositories.base import BaseRepository


class ContactRepository(BaseRepository[Contact]):
    """문의 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Contact)

    async def get_page(
        self,
        db: AsyncSession,
        page: int = 1,
        per_page: int = 20,
    ) -> tuple[Sequence[Contact], int]:
        """최신순 문의 목록 페이지를 조회합니다 — Newest-first page of messages."""
        query: Select = select(Contact).order_by(Contact.created_at.desc())
        return await self.get_paginated(db, query, page, per_page)


# 싱글턴 인스턴스 — Singleton instance
contact_repository: ContactRepository = ContactRepository()
