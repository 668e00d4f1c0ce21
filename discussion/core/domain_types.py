"""Domain Types — identity types, limits and deletion strategies for the board.

Invariants:
    - PostId and ReplyId are positive ints assigned by their store, never reused
    - TITLE_MAX / BODY_MAX are the single source of truth for length limits
    - DEFAULT_THREAD and DELETED_MESSAGE are part of the observable contract

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - DeletionStrategy as str Enum: posts and replies delete differently and the
      difference is declared, not inferred (ADR: no unified delete)
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PostId = NewType("PostId", int)
ReplyId = NewType("ReplyId", int)


# ─── Limits & Fixed Text ─────────────────────────────────────────

TITLE_MAX: int = 150
BODY_MAX: int = 5000

DEFAULT_THREAD: str = "General"
DELETED_MESSAGE: str = "This post was deleted."

FIRST_ID: int = 1


# ─── Enums ───────────────────────────────────────────────────────

class DeletionStrategy(str, Enum):
    """How a store treats an entity after a confirmed delete."""
    TOMBSTONE = "tombstone"  # stays listed, content replaced by DELETED_MESSAGE
    HIDE = "hide"            # flagged, excluded from every listing/count/search


def resolve_thread_name(thread_name: str | None) -> str:
    """None or blank → DEFAULT_THREAD, otherwise the trimmed label."""
    if thread_name is None:
        return DEFAULT_THREAD
    trimmed = thread_name.strip()
    return trimmed or DEFAULT_THREAD
