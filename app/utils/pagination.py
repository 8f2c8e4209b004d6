"""관리자 목록 페이지네이션.

Pagination for the admin order and contact lists.
"""

import math
from typing import Any, Sequence

from pydantic import BaseModel
from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession


class Page(BaseModel):
    """페이지 응답 — {"items", "total", "page", "per_page", "pages"}.

    Attributes:
        items: 현재 페이지 항목 (Normalized rows of this page)
        total: 필터 적용 후 전체 개수 (Total rows after filtering)
        page: 1부터 시작하는 페이지 번호 (1-based page number)
        per_page: 페이지 크기 (Page size)
        pages: 전체 페이지 수 (Page count, 0 for an empty list)
    """

    items: list[Any]
    total: int
    page: int
    per_page: int
    pages: int

    @classmethod
    def build(cls, items: list[Any], total: int, page: int, per_page: int) -> "Page":
        pages: int = math.ceil(total / per_page) if per_page > 0 else 0
        return cls(items=items, total=total, page=page, per_page=per_page, pages=pages)


async def paginate(
    db: AsyncSession,
    query: Select[Any],
    page: int = 1,
    per_page: int = 20,
) -> tuple[Sequence[Any], int]:
    """정렬된 목록 쿼리에서 한 페이지를 가져옵니다.

    Count the rows of ``query`` and fetch one OFFSET/LIMIT slice of it.
    The ordering of ``query`` is kept, so newest-first lists stay that way.

    Args:
        db: 비동기 DB 세션 (Async database session)
        query: 정렬/필터가 적용된 Select (Ordered, filtered select)
        page: 페이지 번호, 1 미만은 1로 처리 (Page number; values below 1 mean 1)
        per_page: 페이지 크기 (Page size)

    Returns:
        tuple[Sequence[Any], int]: (페이지 행, 전체 개수) (Rows, total count)
    """
    total: int = (await db.execute(select(func.count()).select_from(query.subquery()))).scalar() or 0

    offset: int = (max(page, 1) - 1) * per_page
    result = await db.execute(query.offset(offset).limit(per_page))
    return result.scalars().all(), total
