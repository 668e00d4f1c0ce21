"""Core Layer — pure domain logic, no IO, no logging, no stores.

Invariants:
    - No module in core/ imports from services/, schemas/, or infrastructure/
    - Validation functions are pure and deterministic

Design Decisions:
    - Functional core separated from the stateful stores (ADR: impureim sandwich)
"""
