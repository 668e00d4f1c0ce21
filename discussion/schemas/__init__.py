"""Pydantic Schemas — value-copy views of board entities for output.

Invariants:
    - Views are copies: mutating a store never changes an existing view
    - Domain constants from core/ used for field limits
"""
