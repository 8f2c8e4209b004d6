"""관리자 계정 SQLAlchemy ORM 모델.

Admin account model. The store has a single administrator row.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Admin(Base):
    """관리자 모델 — 관리자 대시보드 로그인 계정.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        username: 로그인 아이디 (Login username, unique)
        password_hash: bcrypt 해시 (Bcrypt password hash)
        created_at: 생성 일시 UTC (Creation timestamp)
    """

    __tablename__ = "admins"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    username: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
