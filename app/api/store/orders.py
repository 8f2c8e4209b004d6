"""스토어프론트 주문 라우터 — 주문 생성, 체크아웃, 주문 조회.

Storefront Order Router — Direct order creation, checkout from the cart,
and the order lookup used by the checkout success page. New orders are
published to the admin event stream after commit.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import CartId, set_cart_cookie
from app.database import get_db
from app.schemas.common import ApiResponse
from app.schemas.order import CheckoutRequest, OrderCreate, OrderResponse
from app.services.cart_service import cart_service
from app.services.order_service import order_service
from app.services.realtime_service import order_event_broker

router: APIRouter = APIRouter()


@router.post("/orders", response_model=ApiResponse, status_code=201)
async def create_order(
    data: OrderCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ApiResponse:
    """주문을 생성합니다.

    Returns:
        ApiResponse: {"success": true, "data": {"order_id": "..."}}
    """
    order = await order_service.create_order(db, data)
    payload = order_service.to_response(order)
    await db.commit()
    order_event_broker.publish("INSERT", payload)
    return ApiResponse(success=True, data={"order_id": payload["id"]})


@router.post("/checkout", response_model=ApiResponse, status_code=201)
async def checkout(
    data: CheckoutRequest,
    response: Response,
    db: Annotated[AsyncSession, Depends(get_db)],
    cart_id: CartId,
) -> ApiResponse:
    """장바구니로 주문합니다.

    Validate the checkout form, place the order from the cart lines and
    clear the cart.

    Args:
        data: 체크아웃 양식 (Name, phone, street, city, governorate)
        response: 장바구니 쿠키를 설정할 응답 (Response carrying the cart cookie)
        db: 비동기 데이터베이스 세션 (Async database session)
        cart_id: 장바구니 쿠키 (Cart cookie)

    Returns:
        ApiResponse: {"success": true, "data": {"order_id": "..."}}
    """
    cart = await cart_service.get_cart(db, cart_id)
    order = await order_service.checkout(db, cart, data)
    payload = order_service.to_response(order)
    await db.commit()
    set_cart_cookie(response, cart.id)
    order_event_broker.publish("INSERT", payload)
    return ApiResponse(success=True, data={"order_id": payload["id"]})


@router.get("/orders/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> dict:
    """주문 조회 — checkout success page lookup."""
    order = await order_service.get_order(db, order_id)
    return order_service.to_response(order)
