"""Post / Reply entities — read tracking, tombstoning, keyword matching, thread defaults."""

import pytest

from discussion.core.domain_types import (
    DEFAULT_THREAD,
    DELETED_MESSAGE,
    PostId,
    ReplyId,
    resolve_thread_name,
)
from discussion.core.post import Post
from discussion.core.reply import Reply


def _post(**overrides) -> Post:
    fields = dict(
        post_id=PostId(1), thread_name="General", author="alice",
        title="Study group", body="Meet at the library",
    )
    fields.update(overrides)
    return Post(**fields)


def _reply(**overrides) -> Reply:
    fields = dict(reply_id=ReplyId(1), post_id=PostId(1), author="bob", body="Count me in")
    fields.update(overrides)
    return Reply(**fields)


# ─── resolve_thread_name ─────────────────────────────────────────

@pytest.mark.parametrize("raw", [None, "", "   "])
def test_blank_thread_defaults_to_general(raw):
    assert resolve_thread_name(raw) == DEFAULT_THREAD


def test_thread_name_is_trimmed():
    assert resolve_thread_name("  Homework ") == "Homework"


# ─── Post ────────────────────────────────────────────────────────

def test_post_is_unread_until_marked():
    post = _post()
    assert post.is_unread_by("bob")
    post.mark_read("bob")
    assert not post.is_unread_by("bob")
    assert post.is_unread_by("carol")


def test_none_viewer_is_ignored_and_always_unread():
    post = _post()
    post.mark_read(None)
    assert post.read_by == frozenset()
    assert post.is_unread_by(None)


def test_read_by_is_a_copy():
    post = _post()
    post.mark_read("bob")
    snapshot = post.read_by
    post.mark_read("carol")
    assert snapshot == frozenset({"bob"})


def test_tombstone_replaces_title_and_body():
    post = _post()
    post.tombstone()
    assert post.deleted
    assert post.title == post.body == DELETED_MESSAGE


def test_post_matches_title_or_body_case_insensitive():
    post = _post(title="Input VALIDATION", body="nothing")
    assert post.matches("validation")
    assert _post(body="about validation rules").matches("validation")
    assert not post.matches("homework")


# ─── Reply ───────────────────────────────────────────────────────

def test_reply_read_tracking():
    reply = _reply()
    reply.mark_read("alice")
    assert not reply.is_unread_by("alice")
    assert reply.is_unread_by(None)


def test_reply_mark_deleted_keeps_content():
    reply = _reply()
    reply.mark_deleted()
    assert reply.deleted
    assert reply.body == "Count me in"


def test_reply_matches_body_only():
    assert _reply(body="Thursday WORKS").matches("works")
    assert not _reply().matches("library")
