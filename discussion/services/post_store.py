"""Post Store — owns every post, assigns ids, tombstones on delete.

Invariants:
    - Ids start at 1, increase by one per SUCCESSFUL create, never reused
    - Validation runs before any mutation; a failed create consumes no id
    - Deleted posts stay in every listing, count and search (tombstone text)
    - Confirmation gate is checked before lookup: unconfirmed deletes of unknown
      ids still report "Deletion not confirmed."
    - Subset is a snapshot: rebuilt from scratch on refresh, never live

Design Decisions:
    - dict index + insertion-ordered list: O(1) lookup, stable "all posts" order
    - Listings return tuples/new lists, never the internal collections
    - No locks: one caller per store instance (ADR: single-process, synchronous)
"""

import logging

from discussion.core.domain_types import (
    DeletionStrategy,
    DELETED_MESSAGE,
    FIRST_ID,
    PostId,
    resolve_thread_name,
)
from discussion.core.enforce_input import validate_post
from discussion.core.errors import (
    ERR_DELETE_NOT_CONFIRMED,
    ERR_POST_DELETED,
    ERR_POST_NOT_FOUND,
    error_code,
)
from discussion.core.operation_result import OperationResult
from discussion.core.post import Post

logger = logging.getLogger(__name__)


class PostStore:
    """In-memory post collection plus the most recent search subset."""

    deletion_strategy = DeletionStrategy.TOMBSTONE

    def __init__(self):
        self._posts: dict[PostId, Post] = {}
        self._order: list[PostId] = []
        self._subset: list[Post] = []
        self._next_id: int = FIRST_ID

    # ─── Reads ───────────────────────────────────────────────────

    def get_all_posts(self) -> tuple[Post, ...]:
        return tuple(self._posts[pid] for pid in self._order)

    def get_subset_posts(self) -> tuple[Post, ...]:
        return tuple(self._subset)

    def get_post_by_id(self, post_id: int) -> Post | None:
        """Live post (tombstones included) or None."""
        return self._posts.get(post_id)

    def get_posts_by_author(self, author: str | None) -> list[Post]:
        if author is None:
            return []
        return [p for p in self.get_all_posts() if p.author == author]

    def count_unread_posts(self, viewer: str | None) -> int:
        return sum(1 for p in self.get_all_posts() if p.is_unread_by(viewer))

    # ─── Mutations ───────────────────────────────────────────────

    def create_post(
        self,
        author: str | None,
        thread_name: str | None,
        title: str | None,
        body: str | None,
    ) -> OperationResult[Post]:
        errors = validate_post(title, body)
        if errors:
            return self._reject("create_post", None, errors)

        post = Post(
            post_id=PostId(self._next_id),
            thread_name=resolve_thread_name(thread_name),
            author=author,
            title=title,
            body=body,
        )
        self._next_id += 1
        self._posts[post.post_id] = post
        self._order.append(post.post_id)
        logger.info(
            f"Post {post.post_id} created",
            extra={"post_id": post.post_id, "thread_name": post.thread_name},
        )
        return OperationResult.success(post)

    def update_post(
        self, post_id: int, new_title: str | None, new_body: str | None,
    ) -> OperationResult[Post]:
        post = self.get_post_by_id(post_id)
        if post is None:
            return self._reject("update_post", post_id, [ERR_POST_NOT_FOUND])
        if post.deleted:
            return self._reject("update_post", post_id, [ERR_POST_DELETED])

        errors = validate_post(new_title, new_body)
        if errors:
            return self._reject("update_post", post_id, errors)

        post.update(new_title, new_body)
        logger.info(f"Post {post_id} updated", extra={"post_id": post_id})
        return OperationResult.success(post)

    def delete_post(self, post_id: int, confirm: bool) -> OperationResult[bool]:
        """Tombstone a post. Re-deleting a tombstoned post succeeds again."""
        if not confirm:
            return self._reject("delete_post", post_id, [ERR_DELETE_NOT_CONFIRMED])
        post = self.get_post_by_id(post_id)
        if post is None:
            return self._reject("delete_post", post_id, [ERR_POST_NOT_FOUND])

        post.tombstone(DELETED_MESSAGE)
        logger.info(f"Post {post_id} tombstoned", extra={"post_id": post_id})
        return OperationResult.success(True)

    def mark_post_read(
        self, post_id: int, viewer: str | None,
    ) -> OperationResult[bool]:
        post = self.get_post_by_id(post_id)
        if post is None:
            return self._reject("mark_post_read", post_id, [ERR_POST_NOT_FOUND])
        post.mark_read(viewer)
        return OperationResult.success(True)

    # ─── Subset ──────────────────────────────────────────────────

    def refresh_subset_by_search(
        self, keyword: str | None, thread_name: str | None = None,
    ) -> tuple[Post, ...]:
        """Rebuild the subset: keyword on title/body AND exact thread label.

        Blank keyword or blank thread filter lets everything through that stage.
        Returns the new subset snapshot.
        """
        kw = (keyword or "").strip().lower()
        thread_filter = (thread_name or "").strip()

        self._subset.clear()
        for post in self.get_all_posts():
            if thread_filter and post.thread_name != thread_filter:
                continue
            if kw and not post.matches(kw):
                continue
            self._subset.append(post)

        logger.debug(
            f"Post subset refreshed: {len(self._subset)} match(es)",
            extra={"thread_name": thread_filter or None},
        )
        return self.get_subset_posts()

    # ─── Helpers ─────────────────────────────────────────────────

    @staticmethod
    def _reject(
        operation: str, post_id: int | None, errors: list[str],
    ) -> OperationResult:
        logger.warning(
            f"{operation} rejected: {'; '.join(errors)}",
            extra={"post_id": post_id, "error_code": error_code(errors[0])},
        )
        return OperationResult.failure(errors)
