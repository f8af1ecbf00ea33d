"""Infrastructure Layer — cross-cutting concerns outside the domain core.

Invariants:
    - Infrastructure never imports from core/ domain logic

Design Decisions:
    - Logging setup kept here, not in main.py, so tests can call it directly
"""
