"""Services Layer — orchestration over the core tables.

Invariants:
    - Services receive their tables by constructor injection
    - Cross-table rules live here, single-table rules live in core/
"""
