"""discussion-core — in-memory discussion board data layer.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Docstring-only __init__.py: explicit imports, no star exports
"""
