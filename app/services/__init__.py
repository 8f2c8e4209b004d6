"""서비스 패키지 — 스토어 비즈니스 로직 계층.

Service package — Catalog, cart, checkout and order rules, customer and
revenue derivation, reports, storage, and the realtime order event broker.
Routers call services; services call repositories.
"""
