"""Core Layer — domain records, tables and ranking, no FastAPI, no IO.

Invariants:
    - No module in core/ imports from services/, api/, schemas/ or infrastructure/
    - Tables are synchronous and thread-safe; popularity ranking is a pure function

Design Decisions:
    - Functional core separated from the HTTP shell: the API layer only translates
"""
