"""
Person Registry — HTTP API for creating and searching person records.

Application package root. A small service using hexagonal architecture
(ports & adapters).

Bounded contexts:
    - persons: Creation with validation, lookup by id, term search, count.

Layers:
    - domain: Entities, validation rules, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: PostgreSQL and in-memory adapters implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, rate limiting, logging).
"""
