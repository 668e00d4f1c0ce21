"""Post — a titled entry in a thread, tombstoned (never removed) on delete.

Invariants:
    - post_id assigned by PostStore, immutable afterwards
    - Once deleted, title == body == DELETED_MESSAGE; PostStore refuses edits
    - A None viewer never becomes a reader and always counts as unread
"""

from dataclasses import dataclass, field

from discussion.core.domain_types import PostId, DELETED_MESSAGE


@dataclass
class Post:
    """A post on the board. Mutated only by PostStore."""

    post_id: PostId
    thread_name: str
    author: str | None
    title: str
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

    def update(self, title: str, body: str) -> None:
        """Replace content. Caller has already validated and checked `deleted`."""
        self.title = title
        self.body = body

    def tombstone(self, message: str = DELETED_MESSAGE) -> None:
        self.deleted = True
        self.title = message
        self.body = message

    def matches(self, keyword: str) -> bool:
        """Case-insensitive substring match on title OR body. keyword is lowercase."""
        return keyword in (self.title or "").lower() or keyword in (self.body or "").lower()
