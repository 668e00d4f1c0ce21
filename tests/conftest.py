"""Root conftest — shared test configuration."""

import os

# Tests never pick up a developer's .env overrides
os.environ.setdefault("DISCUSSION_LOG_LEVEL", "DEBUG")
os.environ.setdefault("DISCUSSION_LOG_FORMAT", "text")
os.environ.setdefault("DISCUSSION_DEFAULT_VIEWER", "tester")
