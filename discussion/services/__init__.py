"""Services Layer — stateful stores and the Board composition point.

Invariants:
    - Stores own their collections; callers receive OperationResults or snapshots
    - Stores log mutations and rejections; core/ stays silent
"""
