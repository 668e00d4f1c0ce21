"""Reply — a body-only response attached to a post id.

Invariants:
    - reply_id assigned by ReplyStore from one sequence shared by all posts
    - post_id is NOT checked against PostStore here (caller's job)
    - A deleted reply keeps its content and flag, but ReplyStore hides it
"""

from dataclasses import dataclass, field

from discussion.core.domain_types import PostId, ReplyId


@dataclass
class Reply:
    """A reply to a post. Mutated only by ReplyStore."""

    reply_id: ReplyId
    post_id: PostId
    author: str | None
    body: str
    deleted: bool = False
    readers: set[str] = field(default_factory=set, repr=False)

    @property
    def read_by(self) -> frozenset[str]:
        return frozenset(self.readers)

    def mark_read(self, viewer: str | None) -> None:
        if viewer is None:
            return
        self.readers.add(viewer)

    def is_unread_by(self, viewer: str | None) -> bool:
        if viewer is None:
            return True
        return viewer not in self.readers

    def update_body(self, body: str) -> None:
        self.body = body

    def mark_deleted(self) -> None:
        self.deleted = True

    def matches(self, keyword: str) -> bool:
        """Case-insensitive substring match on body. keyword is lowercase."""
        return keyword in (self.body or "").lower()
