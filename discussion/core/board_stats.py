"""Board Stats — pure summary of posts and visible replies for one viewer.

Invariants:
    - Inputs are snapshots (no store access, no IO)
    - `replies` must already exclude hidden replies (ReplyStore.get_all_replies)
    - Never raises — an empty board yields zero counts
    - A None viewer counts everything as unread
"""

from typing import Iterable

from discussion.core.post import Post
from discussion.core.reply import Reply


def compute_board_stats(
    posts: Iterable[Post], replies: Iterable[Reply], viewer: str | None,
) -> dict:
    """Totals plus per-post reply/unread counts, in post order."""
    posts = list(posts)
    by_post: dict[int, list[Reply]] = {}
    for reply in replies:
        by_post.setdefault(reply.post_id, []).append(reply)

    per_post = []
    for post in posts:
        post_replies = by_post.get(post.post_id, [])
        per_post.append({
            "post_id": post.post_id,
            "thread_name": post.thread_name,
            "deleted": post.deleted,
            "unread": post.is_unread_by(viewer),
            "replies": len(post_replies),
            "unread_replies": sum(1 for r in post_replies if r.is_unread_by(viewer)),
        })

    return {
        "viewer": viewer,
        "total_posts": len(posts),
        "deleted_posts": sum(1 for p in posts if p.deleted),
        "unread_posts": sum(1 for p in posts if p.is_unread_by(viewer)),
        "total_replies": sum(row["replies"] for row in per_post),
        "unread_replies": sum(row["unread_replies"] for row in per_post),
        "threads": sorted({p.thread_name for p in posts}),
        "posts": per_post,
    }
