"""Discussion Console — scripted walk through every board operation.

Invariants:
    - Builds its own Board: no shared state with other callers
    - Every OperationResult is printed as SUCCESS/FAILURE with value or errors
    - Exit code 0 when the scenario ran to completion

Design Decisions:
    - argparse over a CLI framework: two flags, no subcommands
    - Results printed to stdout, diagnostics logged to stderr via setup_logging
"""

import argparse
import json
import logging
import sys

from discussion.config import get_settings
from discussion.core.operation_result import OperationResult
from discussion.core.post import Post
from discussion.core.reply import Reply
from discussion.infrastructure.observability import setup_logging
from discussion.schemas.board import PostView, ReplyView, ResultView
from discussion.services.board import Board

logger = logging.getLogger(__name__)


class ConsolePrinter:
    """Writes results either as indented text or as one JSON object per line."""

    def __init__(self, as_json: bool = False, out=None):
        self.as_json = as_json
        self.out = out or sys.stdout

    def line(self, text: str = "") -> None:
        if not self.as_json:
            print(text, file=self.out)

    def result(self, label: str, result: OperationResult) -> None:
        if self.as_json:
            payload = {"label": label, **ResultView.of(result).model_dump()}
            print(json.dumps(payload), file=self.out)
            return
        print(f"{label}: {'SUCCESS' if result.is_success else 'FAILURE'}", file=self.out)
        if result.is_success:
            print(f"  value={describe(result.value)}", file=self.out)
        else:
            for error in result.errors:
                print(f"  error: {error}", file=self.out)

    def entities(self, label: str, items) -> None:
        if self.as_json:
            views = [describe_view(i).model_dump() for i in items]
            print(json.dumps({"label": label, "items": views}), file=self.out)
            return
        print(label, file=self.out)
        for item in items:
            print(f"  {describe(item)}", file=self.out)

    def value(self, label: str, value) -> None:
        if self.as_json:
            print(json.dumps({"label": label, "value": value}), file=self.out)
        else:
            print(f"{label}: {value}", file=self.out)


def describe(item) -> str:
    if isinstance(item, Post):
        return (
            f"Post{{id={item.post_id}, thread='{item.thread_name}', "
            f"author='{item.author}', deleted={item.deleted}, title='{item.title}'}}"
        )
    if isinstance(item, Reply):
        return (
            f"Reply{{id={item.reply_id}, postId={item.post_id}, "
            f"author='{item.author}', deleted={item.deleted}, body='{item.body}'}}"
        )
    return repr(item)


def describe_view(item) -> PostView | ReplyView:
    return PostView.of(item) if isinstance(item, Post) else ReplyView.of(item)


def run_scenario(board: Board, printer: ConsolePrinter, viewer: str) -> None:
    """Create, read, update, search, reply and delete on one board."""
    alice, bob = "alice", "bob"

    printer.line("1) Create posts")
    p1 = board.posts.create_post(
        alice, None, "Team Project Meeting",
        "Can we meet Friday at 4pm to split up the user stories?",
    )
    printer.result("Create post p1 (default thread)", p1)
    p2 = board.posts.create_post(
        bob, "Homework", "Question about input validation",
        "Do we validate on every input field?",
    )
    printer.result("Create post p2 (Homework)", p2)
    printer.result(
        "Create post with blank title",
        board.posts.create_post(alice, "General", "   ", "Body is fine."),
    )
    printer.result(
        "Create post with blank body",
        board.posts.create_post(alice, "General", "Title is fine", ""),
    )
    post_id = p1.unwrap("create_post").post_id

    printer.line("\n2) Read lists and unread posts")
    printer.entities("All posts:", board.posts.get_all_posts())
    printer.value(f"Unread posts for {alice}", board.posts.count_unread_posts(alice))
    board.posts.mark_post_read(post_id, alice)
    printer.value(
        f"Unread posts for {alice} after reading p1",
        board.posts.count_unread_posts(alice),
    )

    printer.line("\n3) Update post")
    printer.result("Update p1", board.posts.update_post(
        post_id, "Team Project Meeting (Updated)", "Can we meet Thursday instead?",
    ))
    printer.result("Update p1 with blank title", board.posts.update_post(
        post_id, "", "Still has a body.",
    ))
    printer.result("Update p1 with blank body", board.posts.update_post(
        post_id, "Still has a title.", "",
    ))

    printer.line("\n4) Search posts")
    printer.entities(
        "Posts matching 'validation':",
        board.posts.refresh_subset_by_search("validation", None),
    )
    printer.entities(
        "Posts in thread 'Homework':",
        board.posts.refresh_subset_by_search("", "Homework"),
    )

    printer.line("\n5) Create replies")
    r1 = board.reply_to_post(post_id, bob, "Thursday 3pm works for me.")
    printer.result("Create reply r1", r1)
    r2 = board.reply_to_post(post_id, alice, "Great, I will text you!")
    printer.result("Create reply r2", r2)
    printer.result("Create blank reply", board.reply_to_post(post_id, alice, "   "))
    printer.result("Reply to unknown post", board.reply_to_post(999, alice, "Hello?"))
    printer.entities(
        f"Replies for post {post_id}:", board.replies.get_replies_for_post(post_id),
    )
    printer.value(
        f"Unread replies for {alice} on post {post_id}",
        board.replies.count_unread_replies_for_post(post_id, alice),
    )
    board.replies.mark_reply_read(r1.unwrap("create_reply").reply_id, alice)
    printer.value(
        f"Unread replies for {alice} after reading r1",
        board.replies.count_unread_replies_for_post(post_id, alice),
    )

    printer.line("\n6) Delete post with confirmation")
    printer.result("Delete p1 confirm=false", board.posts.delete_post(post_id, False))
    printer.result("Delete p1 confirm=true", board.posts.delete_post(post_id, True))
    printer.entities("Post after deletion:", [board.posts.get_post_by_id(post_id)])
    printer.entities(
        "Replies kept after post deletion:",
        board.replies.get_replies_for_post(post_id),
    )

    printer.line("\n7) Delete reply with confirmation")
    reply_id = r2.unwrap("create_reply").reply_id
    printer.result("Delete r2 confirm=false", board.replies.delete_reply(reply_id, False))
    printer.result("Delete r2 confirm=true", board.replies.delete_reply(reply_id, True))
    printer.entities(
        f"Replies for post {post_id} after deleting r2:",
        board.replies.get_replies_for_post(post_id),
    )

    printer.line("\n8) Board summary")
    stats = board.stats(viewer)
    printer.value(f"Stats for {viewer}", {k: v for k, v in stats.items() if k != "posts"})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="discussion-console",
        description="Exercise the in-memory discussion board and print every result.",
    )
    parser.add_argument("--json", action="store_true", help="print results as JSON lines")
    parser.add_argument("--log-level", default=None, help="override DISCUSSION_LOG_LEVEL")
    parser.add_argument("--viewer", default=None, help="identity for the final summary")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(args.log_level or settings.log_level, settings.log_format)

    printer = ConsolePrinter(as_json=args.json)
    printer.line("*** Starting discussion console ***\n")
    run_scenario(Board(), printer, args.viewer or settings.default_viewer)
    printer.line("\n*** End of discussion console ***")
    logger.info("Console scenario finished")
    return 0


if __name__ == "__main__":
    sys.exit(main())
