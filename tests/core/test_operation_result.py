"""Operation Result — tests for the success/failure envelope.

Tests cover:
    - success carries value and no errors (value may be None or False)
    - failure carries None and a non-empty ordered tuple of errors
    - failure with no errors is rejected
    - a failed result cannot also carry a value
    - errors are copied (caller list mutation has no effect)
    - unwrap returns value or raises OperationFailedError
    - to_dict shape
"""

import pytest

from discussion.core.errors import (
    ERR_POST_NOT_FOUND,
    ERR_TITLE_EMPTY,
    ERR_BODY_EMPTY,
    ErrorCategory,
    OperationFailedError,
)
from discussion.core.operation_result import OperationResult


def test_success_has_value_and_no_errors():
    result = OperationResult.success("post")
    assert result.is_success
    assert result.value == "post"
    assert result.errors == ()


def test_success_value_may_be_falsy():
    result = OperationResult.success(False)
    assert result.is_success
    assert result.value is False


def test_success_without_value():
    assert OperationResult.success().is_success


def test_failure_has_no_value_and_ordered_errors():
    result = OperationResult.failure([ERR_TITLE_EMPTY, ERR_BODY_EMPTY])
    assert not result.is_success
    assert result.value is None
    assert result.errors == (ERR_TITLE_EMPTY, ERR_BODY_EMPTY)


def test_failure_requires_at_least_one_error():
    with pytest.raises(ValueError):
        OperationResult.failure([])


def test_failed_result_cannot_carry_value():
    with pytest.raises(ValueError):
        OperationResult(value="x", errors=[ERR_POST_NOT_FOUND])


def test_failure_copies_caller_list():
    errors = [ERR_POST_NOT_FOUND]
    result = OperationResult.failure(errors)
    errors.append("extra")
    assert result.errors == (ERR_POST_NOT_FOUND,)


def test_unwrap_returns_value_on_success():
    assert OperationResult.success(42).unwrap() == 42


def test_unwrap_raises_with_errors_and_category():
    result = OperationResult.failure([ERR_POST_NOT_FOUND])
    with pytest.raises(OperationFailedError) as exc_info:
        result.unwrap("update_post")
    err = exc_info.value
    assert err.errors == [ERR_POST_NOT_FOUND]
    assert err.category == ErrorCategory.RESOURCE_NOT_FOUND
    assert err.code == "POST_NOT_FOUND"
    assert err.context.operation == "update_post"


def test_to_dict_shape():
    assert OperationResult.failure([ERR_TITLE_EMPTY]).to_dict() == {
        "success": False, "value": None, "errors": [ERR_TITLE_EMPTY],
    }
    assert OperationResult.success(True).to_dict() == {
        "success": True, "value": True, "errors": [],
    }
