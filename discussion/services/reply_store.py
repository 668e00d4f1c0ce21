"""Reply Store — owns every reply, assigns ids, hides replies on delete.

Invariants:
    - One id sequence for all replies, independent of post ids
    - post_id is never checked against PostStore (caller's job, see Board)
    - A deleted reply is kept (flagged) but excluded from every listing, count,
      search and subset; update/delete/mark-read treat it as not found
    - Confirmation gate is checked before lookup

Design Decisions:
    - Hide instead of tombstone: a reply has no meaning once its content is gone,
      while a post must stay visible as the parent of its replies
    - Deleted replies retained, not erased: get_reply_by_id still returns them
      flagged (ADR: audit trail)
"""

import logging

from discussion.core.domain_types import DeletionStrategy, FIRST_ID, PostId, ReplyId
from discussion.core.enforce_input import validate_reply
from discussion.core.errors import (
    ERR_DELETE_NOT_CONFIRMED,
    ERR_REPLY_NOT_FOUND,
    error_code,
)
from discussion.core.operation_result import OperationResult
from discussion.core.reply import Reply

logger = logging.getLogger(__name__)


class ReplyStore:
    """In-memory reply collection plus the most recent search subset."""

    deletion_strategy = DeletionStrategy.HIDE

    def __init__(self):
        self._replies: dict[ReplyId, Reply] = {}
        self._order: list[ReplyId] = []
        self._subset: list[Reply] = []
        self._next_id: int = FIRST_ID

    # ─── Reads ───────────────────────────────────────────────────

    def _visible(self) -> list[Reply]:
        return [
            self._replies[rid] for rid in self._order
            if not self._replies[rid].deleted
        ]

    def get_all_replies(self) -> tuple[Reply, ...]:
        """Every visible reply in creation order."""
        return tuple(self._visible())

    def get_subset_replies(self) -> tuple[Reply, ...]:
        return tuple(self._subset)

    def get_reply_by_id(self, reply_id: int) -> Reply | None:
        """Raw lookup — deleted replies are returned too, flagged."""
        return self._replies.get(reply_id)

    def get_replies_for_post(self, post_id: int) -> list[Reply]:
        return [r for r in self._visible() if r.post_id == post_id]

    def get_unread_replies_for_post(
        self, post_id: int, viewer: str | None,
    ) -> list[Reply]:
        return [
            r for r in self.get_replies_for_post(post_id)
            if r.is_unread_by(viewer)
        ]

    def count_replies_for_post(self, post_id: int) -> int:
        return len(self.get_replies_for_post(post_id))

    def count_unread_replies_for_post(
        self, post_id: int, viewer: str | None,
    ) -> int:
        return len(self.get_unread_replies_for_post(post_id, viewer))

    # ─── Mutations ───────────────────────────────────────────────

    def create_reply(
        self, post_id: int, author: str | None, body: str | None,
    ) -> OperationResult[Reply]:
        errors = validate_reply(body)
        if errors:
            return self._reject("create_reply", None, errors)

        reply = Reply(
            reply_id=ReplyId(self._next_id),
            post_id=PostId(post_id),
            author=author,
            body=body,
        )
        self._next_id += 1
        self._replies[reply.reply_id] = reply
        self._order.append(reply.reply_id)
        logger.info(
            f"Reply {reply.reply_id} created on post {post_id}",
            extra={"reply_id": reply.reply_id, "post_id": post_id},
        )
        return OperationResult.success(reply)

    def update_reply(
        self, reply_id: int, new_body: str | None,
    ) -> OperationResult[Reply]:
        reply = self._find_live(reply_id)
        if reply is None:
            return self._reject("update_reply", reply_id, [ERR_REPLY_NOT_FOUND])

        errors = validate_reply(new_body)
        if errors:
            return self._reject("update_reply", reply_id, errors)

        reply.update_body(new_body)
        logger.info(f"Reply {reply_id} updated", extra={"reply_id": reply_id})
        return OperationResult.success(reply)

    def delete_reply(self, reply_id: int, confirm: bool) -> OperationResult[bool]:
        if not confirm:
            return self._reject(
                "delete_reply", reply_id, [ERR_DELETE_NOT_CONFIRMED],
            )
        reply = self._find_live(reply_id)
        if reply is None:
            return self._reject("delete_reply", reply_id, [ERR_REPLY_NOT_FOUND])

        reply.mark_deleted()
        logger.info(f"Reply {reply_id} hidden", extra={"reply_id": reply_id})
        return OperationResult.success(True)

    def mark_reply_read(
        self, reply_id: int, viewer: str | None,
    ) -> OperationResult[bool]:
        reply = self._find_live(reply_id)
        if reply is None:
            return self._reject(
                "mark_reply_read", reply_id, [ERR_REPLY_NOT_FOUND],
            )
        reply.mark_read(viewer)
        return OperationResult.success(True)

    # ─── Subset ──────────────────────────────────────────────────

    def refresh_subset_by_search(
        self, keyword: str | None, post_id: int | None = None,
    ) -> tuple[Reply, ...]:
        """Rebuild the subset: keyword on body AND exact post id when given."""
        kw = (keyword or "").strip().lower()

        self._subset.clear()
        for reply in self._visible():
            if post_id is not None and reply.post_id != post_id:
                continue
            if kw and not reply.matches(kw):
                continue
            self._subset.append(reply)

        logger.debug(
            f"Reply subset refreshed: {len(self._subset)} match(es)",
            extra={"post_id": post_id},
        )
        return self.get_subset_replies()

    # ─── Helpers ─────────────────────────────────────────────────

    def _find_live(self, reply_id: int) -> Reply | None:
        reply = self._replies.get(reply_id)
        if reply is None or reply.deleted:
            return None
        return reply

    @staticmethod
    def _reject(
        operation: str, reply_id: int | None, errors: list[str],
    ) -> OperationResult:
        logger.warning(
            f"{operation} rejected: {'; '.join(errors)}",
            extra={"reply_id": reply_id, "error_code": error_code(errors[0])},
        )
        return OperationResult.failure(errors)
