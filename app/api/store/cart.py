"""스토어프론트 장바구니 라우터.

Storefront Cart Router — The cart is identified by the ``luxeshopy_cart``
cookie, which every response (re)sets.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import CartId, set_cart_cookie
from app.database import get_db
from app.schemas.cart import CartAddRequest, CartQuantityUpdate, CartResponse
from app.services.cart_service import cart_service

router: APIRouter = APIRouter()


@router.get("", response_model=CartResponse)
async def get_cart(
    response: Response,
    db: Annotated[AsyncSession, Depends(get_db)],
    cart_id: CartId,
) -> dict:
    """현재 장바구니 — 쿠키가 없으면 빈 장바구니를 만듭니다."""
    cart = await cart_service.get_cart(db, cart_id)
    await db.commit()
    set_cart_cookie(response, cart.id)
    return cart_service.to_response(cart)


@router.post("/items", response_model=CartResponse)
async def add_item(
    data: CartAddRequest,
    response: Response,
    db: Annotated[AsyncSession, Depends(get_db)],
    cart_id: CartId,
) -> dict:
    """장바구니에 상품을 담습니다.

    Same product, size and color bump the existing line by one; anything
    else becomes a new line with quantity 1.
    """
    cart = await cart_service.add_item(db, cart_id, data)
    await db.commit()
    set_cart_cookie(response, cart.id)
    return cart_service.to_response(cart)


@router.patch("/items/{line_id:path}", response_model=CartResponse)
async def update_quantity(
    line_id: str,
    data: CartQuantityUpdate,
    response: Response,
    db: Annotated[AsyncSession, Depends(get_db)],
    cart_id: CartId,
) -> dict:
    """라인 수량 변경 — quantity <= 0 removes the line."""
    cart = await cart_service.set_quantity(db, cart_id, line_id, data.quantity)
    await db.commit()
    set_cart_cookie(response, cart.id)
    return cart_service.to_response(cart)


@router.delete("/items/{line_id:path}", response_model=CartResponse)
async def remove_item(
    line_id: str,
    response: Response,
    db: Annotated[AsyncSession, Depends(get_db)],
    cart_id: CartId,
) -> dict:
    cart = await cart_service.remove_item(db, cart_id, line_id)
    await db.commit()
    set_cart_cookie(response, cart.id)
    return cart_service.to_response(cart)


@router.delete("", response_model=CartResponse)
async def clear_cart(
    response: Response,
    db: Annotated[AsyncSession, Depends(get_db)],
    cart_id: CartId,
) -> dict:
    """장바구니 비우기."""
    cart = await cart_service.clear(db, await cart_service.get_cart(db, cart_id))
    await db.commit()
    set_cart_cookie(response, cart.id)
    return cart_service.to_response(cart)
