"""Board — the one composition point that owns a PostStore and a ReplyStore.

Invariants:
    - Stores are injected (or created fresh); no module-level store instances
    - The stores never reference each other; cross-entity checks live here
    - Every method returns an OperationResult or a plain snapshot, never raises

Design Decisions:
    - Explicit object over process-wide singletons: tests and callers build as
      many independent boards as they need
    - reply_to_post is the checked path; ReplyStore.create_reply stays unchecked
      for callers that already know the post exists
"""

import logging

from discussion.core.board_stats import compute_board_stats
from discussion.core.errors import ERR_POST_NOT_FOUND
from discussion.core.operation_result import OperationResult
from discussion.core.post import Post
from discussion.core.reply import Reply
from discussion.services.post_store import PostStore
from discussion.services.reply_store import ReplyStore

logger = logging.getLogger(__name__)


class Board:
    """Posts and replies for one discussion board."""

    def __init__(
        self,
        posts: PostStore | None = None,
        replies: ReplyStore | None = None,
    ):
        self.posts = posts if posts is not None else PostStore()
        self.replies = replies if replies is not None else ReplyStore()

    def reply_to_post(
        self, post_id: int, author: str | None, body: str | None,
    ) -> OperationResult[Reply]:
        """Create a reply only if the post exists (tombstoned posts included)."""
        if self.posts.get_post_by_id(post_id) is None:
            logger.warning(
                f"reply_to_post rejected: post {post_id} not found",
                extra={"post_id": post_id, "error_code": "POST_NOT_FOUND"},
            )
            return OperationResult.failure([ERR_POST_NOT_FOUND])
        return self.replies.create_reply(post_id, author, body)

    def open_post(self, post_id: int, viewer: str | None) -> OperationResult[Post]:
        """Mark the post and all its visible replies read for viewer."""
        marked = self.posts.mark_post_read(post_id, viewer)
        if not marked.is_success:
            return OperationResult.failure(marked.errors)
        for reply in self.replies.get_replies_for_post(post_id):
            self.replies.mark_reply_read(reply.reply_id, viewer)
        return OperationResult.success(self.posts.get_post_by_id(post_id))

    def stats(self, viewer: str | None) -> dict:
        return compute_board_stats(
            self.posts.get_all_posts(), self.replies.get_all_replies(), viewer,
        )
