"""Discussion Console — tests for the scripted walk-through and its output modes."""

import io
import json
import logging

import pytest

from discussion.console import ConsolePrinter, build_parser, main, run_scenario
from discussion.core.operation_result import OperationResult
from discussion.services.board import Board


@pytest.fixture(autouse=True)
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert not args.json
    assert args.log_level is None
    assert args.viewer is None


def test_printer_text_failure_lists_errors():
    out = io.StringIO()
    ConsolePrinter(out=out).result("Delete", OperationResult.failure(["Deletion not confirmed."]))
    assert out.getvalue().splitlines() == [
        "Delete: FAILURE", "  error: Deletion not confirmed.",
    ]


def test_printer_json_result_line():
    out = io.StringIO()
    ConsolePrinter(as_json=True, out=out).result("Delete", OperationResult.success(True))
    payload = json.loads(out.getvalue())
    assert payload == {"label": "Delete", "success": True, "value": True, "errors": []}


def test_scenario_leaves_board_in_expected_state():
    board = Board()
    run_scenario(board, ConsolePrinter(out=io.StringIO()), "alice")

    first = board.posts.get_post_by_id(1)
    assert first.deleted
    assert len(board.posts.get_all_posts()) == 2
    assert len(board.replies.get_replies_for_post(1)) == 1
    assert board.replies.get_reply_by_id(2).deleted


def test_main_text_output(capsys):
    assert main(["--log-level", "ERROR"]) == 0
    out = capsys.readouterr().out
    assert "Create post with blank title: FAILURE" in out
    assert "  error: The title cannot be empty." in out
    assert "Delete p1 confirm=false: FAILURE" in out
    assert "This post was deleted." in out
    assert "Reply to unknown post: FAILURE" in out


def test_main_json_output_is_line_delimited(capsys):
    assert main(["--json", "--log-level", "ERROR", "--viewer", "bob"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    payloads = [json.loads(line) for line in lines]
    labels = [p["label"] for p in payloads]
    assert "Create post p1 (default thread)" in labels
    stats = payloads[-1]
    assert stats["label"] == "Stats for bob"
    assert stats["value"]["total_posts"] == 2
