"""
Demo Service: a layered web-service scaffold.

Application package root. Hexagonal architecture (ports & adapters)
with one bounded context.

Bounded contexts:
    - demo: CRUD over a placeholder entity.

Layers:
    - domain: Entities, ports (ABCs), domain errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: SQLAlchemy adapters implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - core: Settings and the database handle.
    - shared: Cross-cutting concerns (errors, responses, request context, logging).
"""
