"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate field shape at the system boundary; the core never re-checks it
    - to_entity()/from_entity() are the only bridge between schemas and core records

Design Decisions:
    - Separate from core entities: schemas are API contracts, entities are domain state
"""
