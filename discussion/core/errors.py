"""Error Taxonomy — stable messages, categories, and opt-in exceptions.

Invariants:
    - Every message constant is part of the observable contract (never reworded)
    - Store operations RETURN these messages in an OperationResult, never raise
    - Exceptions exist only for callers that opt in via OperationResult.unwrap()

Design Decisions:
    - Messages as module constants: validator, stores and tests share one spelling
    - ErrorCategory mirrors the recovery taxonomy (re-prompt / stop step / decide)
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from discussion.core.domain_types import TITLE_MAX, BODY_MAX


# ─── Stable Messages ─────────────────────────────────────────────

ERR_TITLE_EMPTY = "The title cannot be empty."
ERR_TITLE_TOO_LONG = (
    f"The title is too long. It must be {TITLE_MAX} characters or less."
)
ERR_BODY_EMPTY = "The body cannot be empty."
ERR_BODY_TOO_LONG = (
    f"The body is too long. It must be {BODY_MAX} characters or less."
)
ERR_POST_NOT_FOUND = "Post not found."
ERR_POST_DELETED = "Cannot edit a deleted post."
ERR_DELETE_NOT_CONFIRMED = "Deletion not confirmed."
ERR_REPLY_NOT_FOUND = "Reply not found."


class ErrorCategory(str, Enum):
    """High-level error categories for caller handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"


_MESSAGE_CATEGORIES: dict[str, ErrorCategory] = {
    ERR_TITLE_EMPTY: ErrorCategory.VALIDATION,
    ERR_TITLE_TOO_LONG: ErrorCategory.VALIDATION,
    ERR_BODY_EMPTY: ErrorCategory.VALIDATION,
    ERR_BODY_TOO_LONG: ErrorCategory.VALIDATION,
    ERR_POST_NOT_FOUND: ErrorCategory.RESOURCE_NOT_FOUND,
    ERR_REPLY_NOT_FOUND: ErrorCategory.RESOURCE_NOT_FOUND,
    ERR_POST_DELETED: ErrorCategory.CONFLICT,
    ERR_DELETE_NOT_CONFIRMED: ErrorCategory.CONFLICT,
}

_MESSAGE_CODES: dict[str, str] = {
    ERR_TITLE_EMPTY: "TITLE_EMPTY",
    ERR_TITLE_TOO_LONG: "TITLE_TOO_LONG",
    ERR_BODY_EMPTY: "BODY_EMPTY",
    ERR_BODY_TOO_LONG: "BODY_TOO_LONG",
    ERR_POST_NOT_FOUND: "POST_NOT_FOUND",
    ERR_REPLY_NOT_FOUND: "REPLY_NOT_FOUND",
    ERR_POST_DELETED: "POST_DELETED",
    ERR_DELETE_NOT_CONFIRMED: "DELETE_NOT_CONFIRMED",
}


def categorize(message: str) -> ErrorCategory:
    """Map a stable error message to its category. Unknown → INTERNAL."""
    return _MESSAGE_CATEGORIES.get(message, ErrorCategory.INTERNAL)


def error_code(message: str) -> str:
    """Map a stable error message to a short machine code for logs."""
    return _MESSAGE_CODES.get(message, "UNKNOWN_ERROR")


# ─── Exceptions (opt-in) ─────────────────────────────────────────

@dataclass
class ErrorContext:
    """Context attached to a raised error for logs and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    entity_id: int | None = None


class DiscussionError(Exception):
    """Base exception for all discussion-core errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.context = context or ErrorContext()

    def to_response(self) -> dict:
        """Convert to a JSON-friendly error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "operation": self.context.operation,
                    "entity_id": self.context.entity_id,
                },
            }
        }


class OperationFailedError(DiscussionError):
    """Raised by OperationResult.unwrap() on a failed result."""

    def __init__(self, errors: list[str], context: ErrorContext | None = None):
        first = errors[0] if errors else ""
        super().__init__(
            "; ".join(errors) or "Operation failed.",
            error_code(first), categorize(first), context,
        )
        self.errors = list(errors)
