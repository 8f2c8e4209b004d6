"""관리자 레포지토리 — Admin account queries."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.admin import Admin
from app.repositories.base import BaseRepository


class AdminRepository(BaseRepository[Admin]):
    """관리자 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Admin)

    async def get_by_username(self, db: AsyncSession, username: str) -> Admin | None:
        """아이디로 관리자를 조회합니다 — Look up the admin row by username."""
        result = await db.execute(select(Admin).where(Admin.username == username))
        return result.scalar_one_or_none()


# 싱글턴 인스턴스 — Singleton instance
admin_repository: AdminRepository = AdminRepository()
