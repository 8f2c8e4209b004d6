"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations and
``Base.metadata.create_all``.

Modules:
    product: 상품 카탈로그 (Product catalog)
    order: 주문 (Orders, statuses, payment statuses)
    admin: 관리자 계정 (Single admin account)
    contact: 문의 메시지 (Contact form submissions)
    cart: 장바구니 (Shopper carts)
"""

from app.models.product import Product
from app.models.order import Order
from app.models.admin import Admin
from app.models.contact import Contact
from app.models.cart import Cart

__all__ = [
    "Product",
    "Order",
    "Admin",
    "Contact",
    "Cart",
]
