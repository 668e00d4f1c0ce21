"""Service test fixtures — a fresh store or board per test.

Invariants:
    - Every test gets brand-new stores: ids always start at 1
    - No module-level store instances exist to leak state between tests
"""

import pytest

from discussion.services.board import Board
from discussion.services.post_store import PostStore
from discussion.services.reply_store import ReplyStore


@pytest.fixture
def post_store() -> PostStore:
    return PostStore()


@pytest.fixture
def reply_store() -> ReplyStore:
    return ReplyStore()


@pytest.fixture
def board(post_store, reply_store) -> Board:
    return Board(post_store, reply_store)


@pytest.fixture
def seeded_posts(post_store):
    """Two posts in different threads: (general_post, homework_post)."""
    general = post_store.create_post(
        "alice", None, "Team Project Meeting",
        "Can we meet Friday at 4pm to split up the user stories?",
    ).value
    homework = post_store.create_post(
        "bob", "Homework", "Question about input validation",
        "Do we validate on every input field?",
    ).value
    return general, homework
