"""Core Layer — domain types, errors, pagination math and storage contracts.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, models/ or db/
    - Everything here except the Protocol is pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell
"""
