"""레포지토리 패키지 — 스토어 테이블 쿼리 계층.

Repository package — Query layer for the store tables (products, orders,
carts, contacts, admins). Repositories flush but never commit.
"""
