"""Input Enforcement — validates post titles and post/reply bodies.

Invariants:
    - All functions are PURE: no IO, no state, safe to call from anywhere
    - Return an ordered list of violation messages; empty list means valid
    - Empty (None or all-whitespace) short-circuits: no length message follows
    - validate_post reports title violations before body violations

Design Decisions:
    - Lists (not exceptions): a form can show every violation at once
    - Length counts the raw input, whitespace included (only blankness is trimmed)
"""

from discussion.core.domain_types import TITLE_MAX, BODY_MAX
from discussion.core.errors import (
    ERR_TITLE_EMPTY,
    ERR_TITLE_TOO_LONG,
    ERR_BODY_EMPTY,
    ERR_BODY_TOO_LONG,
)


def _is_blank(text: str | None) -> bool:
    return text is None or not text.strip()


def validate_post_title(title: str | None) -> list[str]:
    """Title: not blank, at most TITLE_MAX characters."""
    if _is_blank(title):
        return [ERR_TITLE_EMPTY]
    if len(title) > TITLE_MAX:
        return [ERR_TITLE_TOO_LONG]
    return []


def validate_body(body: str | None) -> list[str]:
    """Body (post or reply): not blank, at most BODY_MAX characters."""
    if _is_blank(body):
        return [ERR_BODY_EMPTY]
    if len(body) > BODY_MAX:
        return [ERR_BODY_TOO_LONG]
    return []


def validate_post(title: str | None, body: str | None) -> list[str]:
    """Title violations followed by body violations."""
    return validate_post_title(title) + validate_body(body)


def validate_reply(body: str | None) -> list[str]:
    return validate_body(body)
