"""Board Schemas — pydantic views of posts, replies and operation results.

Invariants:
    - PostView / ReplyView are built from live entities with from_attributes
      and never alias the entity's reader set
    - read_by is sorted so JSON output is deterministic
    - ResultView mirrors OperationResult: success iff errors is empty

Design Decisions:
    - Views over exposing dataclasses: callers get snapshots, not live objects
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from discussion.core.domain_types import TITLE_MAX, BODY_MAX, DELETED_MESSAGE
from discussion.core.operation_result import OperationResult
from discussion.core.post import Post
from discussion.core.reply import Reply


class PostView(BaseModel):
    """Snapshot of a post."""
    model_config = ConfigDict(from_attributes=True, frozen=True)

    post_id: int = Field(ge=1)
    thread_name: str = Field(min_length=1)
    author: str | None
    title: str = Field(max_length=TITLE_MAX)
    body: str = Field(max_length=BODY_MAX)
    deleted: bool
    read_by: list[str] = Field(default_factory=list)

    @field_validator("read_by", mode="before")
    @classmethod
    def sort_readers(cls, v):
        return sorted(v or [])

    @model_validator(mode="after")
    def check_tombstone(self) -> "PostView":
        if self.deleted and (
            self.title != DELETED_MESSAGE or self.body != DELETED_MESSAGE
        ):
            raise ValueError("deleted post must carry the deletion message")
        return self

    @classmethod
    def of(cls, post: Post) -> "PostView":
        return cls.model_validate(post, from_attributes=True)


class ReplyView(BaseModel):
    """Snapshot of a reply."""
    model_config = ConfigDict(from_attributes=True, frozen=True)

    reply_id: int = Field(ge=1)
    post_id: int
    author: str | None
    body: str = Field(max_length=BODY_MAX)
    deleted: bool
    read_by: list[str] = Field(default_factory=list)

    @field_validator("read_by", mode="before")
    @classmethod
    def sort_readers(cls, v):
        return sorted(v or [])

    @classmethod
    def of(cls, reply: Reply) -> "ReplyView":
        return cls.model_validate(reply, from_attributes=True)


class ResultView(BaseModel):
    """Serializable form of an OperationResult."""
    success: bool
    value: PostView | ReplyView | bool | None = None
    errors: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_exclusive(self) -> "ResultView":
        if self.success == bool(self.errors):
            raise ValueError("success must be true iff errors is empty")
        return self

    @classmethod
    def of(cls, result: OperationResult) -> "ResultView":
        return cls(
            success=result.is_success,
            value=to_view(result.value),
            errors=list(result.errors),
        )


def to_view(value: Any) -> Any:
    """Entity → view; anything else passes through unchanged."""
    if isinstance(value, Post):
        return PostView.of(value)
    if isinstance(value, Reply):
        return ReplyView.of(value)
    return value
