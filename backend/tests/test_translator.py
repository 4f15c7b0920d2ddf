"""
Unit tests for translating framework exceptions into failures.
"""

import json

import pytest
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.exc import CompileError
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.exceptions import BusinessException, FailureKind, PayloadError
from core.translator import error_message, is_type_error, translate_exception
from schema.demo import UserQuery
from tests.fixtures import DENIED_DRIVER_MESSAGE, create_programming_error


def validation_error(*errors):
    """Build a RequestValidationError from raw error entries."""
    return RequestValidationError(list(errors))


class TestTranslateRequestValidation:
    """Test cases for RequestValidationError translation."""

    def test_missing_query_parameter(self):
        """Test that a missing parameter is recognised."""
        failure = translate_exception(validation_error(
            {"type": "missing", "loc": ("query", "text"), "msg": "Field required", "input": None}
        ))

        assert failure.kind == FailureKind.MISSING_PARAMETER
        assert failure.parameter == "text"

    def test_parameter_type_mismatch(self):
        """Test that an unparsable parameter is a type mismatch."""
        failure = translate_exception(validation_error(
            {"type": "int_parsing", "loc": ("path", "value"),
             "msg": "Input should be a valid integer, unable to parse string as an integer", "input": "abc"}
        ))

        assert failure.kind == FailureKind.PARAMETER_TYPE_MISMATCH
        assert "value" in failure.message

    def test_missing_wins_over_type_mismatch(self):
        """Test precedence when one request has both problems."""
        failure = translate_exception(validation_error(
            {"type": "int_parsing", "loc": ("query", "page_num"), "msg": "Input should be a valid integer", "input": "x"},
            {"type": "missing", "loc": ("query", "text"), "msg": "Field required", "input": None}
        ))

        assert failure.kind == FailureKind.MISSING_PARAMETER

    def test_parameter_constraints(self):
        """Test that constraint violations are collected."""
        failure = translate_exception(validation_error(
            {"type": "greater_than_equal", "loc": ("path", "user_id"),
             "msg": "Input should be greater than or equal to 1", "input": 0, "ctx": {"ge": 1}},
            {"type": "string_too_long", "loc": ("query", "q"),
             "msg": "String should have at most 5 characters", "input": "abcdefg", "ctx": {"max_length": 5}}
        ))

        assert failure.kind == FailureKind.PARAMETER_CONSTRAINT
        assert failure.violations == [
            "Input should be greater than or equal to 1",
            "String should have at most 5 characters"
        ]

    def test_missing_body(self):
        """Test that a missing body is unreadable without a cause."""
        failure = translate_exception(validation_error(
            {"type": "missing", "loc": ("body",), "msg": "Field required", "input": None}
        ))

        assert failure.kind == FailureKind.UNREADABLE_BODY
        assert failure.cause is None

    def test_invalid_json_body(self):
        """Test that malformed JSON is unreadable with a cause naming no field."""
        failure = translate_exception(validation_error(
            {"type": "json_invalid", "loc": ("body", 9), "msg": "JSON decode error",
             "input": {}, "ctx": {"error": "Expecting value"}}
        ))

        assert failure.kind == FailureKind.UNREADABLE_BODY
        assert isinstance(failure.cause, PayloadError)
        assert "Expecting value" in str(failure.cause)

    def test_body_field_type_error(self):
        """Test that a wrongly typed body field names its path in the cause."""
        failure = translate_exception(validation_error(
            {"type": "int_parsing", "loc": ("body", "user", "age"),
             "msg": "Input should be a valid integer, unable to parse string as an integer", "input": "old"}
        ))

        assert failure.kind == FailureKind.UNREADABLE_BODY
        assert failure.cause.path == ("user", "age")
        assert '["user"]["age"]' in str(failure.cause)

    def test_body_validation(self):
        """Test that body field violations are collected with their own text."""
        failure = translate_exception(validation_error(
            {"type": "value_error", "loc": ("body", "name"), "msg": "Value error, name required",
             "input": " ", "ctx": {"error": ValueError("name required")}},
            {"type": "value_error", "loc": ("body", "age"), "msg": "Value error, age must be positive",
             "input": -1, "ctx": {"error": ValueError("age must be positive")}}
        ))

        assert failure.kind == FailureKind.BODY_VALIDATION
        assert failure.violations == ["name required", "age must be positive"]


class TestTranslateOtherExceptions:
    """Test cases for library and builtin exception translation."""

    def test_request_failure_passes_through(self):
        """Test that failures already carrying a kind are returned unchanged."""
        failure = BusinessException("余额不足")

        assert translate_exception(failure) is failure

    def test_pydantic_validation_error_is_binding_failure(self):
        """Test that binding a model inside a handler is a binding failure."""
        with pytest.raises(ValidationError) as exc_info:
            UserQuery(page_num=0, page_size=500)

        failure = translate_exception(exc_info.value)

        assert failure.kind == FailureKind.FIELD_BINDING
        assert len(failure.violations) == 2

    def test_http_404_is_route_not_found(self):
        """Test that a 404 HTTP exception maps to route not found."""
        failure = translate_exception(StarletteHTTPException(status_code=404))

        assert failure.kind == FailureKind.ROUTE_NOT_FOUND

    def test_other_http_exception_is_protocol_failure(self):
        """Test that other HTTP exceptions keep their detail."""
        failure = translate_exception(StarletteHTTPException(status_code=405, detail="Method Not Allowed"))

        assert failure.kind == FailureKind.REQUEST_PROTOCOL
        assert failure.message == "Method Not Allowed"

    def test_payload_error_is_unreadable_body(self):
        """Test that a deserialization error raised directly keeps its cause."""
        cause = PayloadError("Cannot deserialize value", path=("age",))

        failure = translate_exception(cause)

        assert failure.kind == FailureKind.UNREADABLE_BODY
        assert failure.cause is cause

    def test_json_decode_error_is_serialization_failure(self):
        """Test JSON decoding errors."""
        with pytest.raises(json.JSONDecodeError) as exc_info:
            json.loads("{")

        assert translate_exception(exc_info.value).kind == FailureKind.SERIALIZATION

    def test_value_error_is_illegal_argument(self):
        """Test plain ValueError."""
        failure = translate_exception(ValueError("page size must be a multiple of 5"))

        assert failure.kind == FailureKind.ILLEGAL_ARGUMENT
        assert failure.message == "page size must be a multiple of 5"

    def test_programming_error_is_backend_grammar(self):
        """Test that the driver message becomes the failure detail."""
        failure = translate_exception(create_programming_error(DENIED_DRIVER_MESSAGE))

        assert failure.kind == FailureKind.BACKEND_GRAMMAR
        assert "denied to user" in failure.detail

    def test_compile_error_is_backend_syntax(self):
        """Test SQL compilation errors."""
        failure = translate_exception(CompileError("Unconsumed column names: nickname"))

        assert failure.kind == FailureKind.BACKEND_SYNTAX

    def test_anything_else_is_unexpected(self):
        """Test the catch-all."""
        exc = RuntimeError("boom")

        failure = translate_exception(exc)

        assert failure.kind == FailureKind.UNEXPECTED
        assert failure.cause is exc


class TestErrorEntryHelpers:
    """Test cases for pydantic error entry helpers."""

    def test_value_error_message_drops_prefix(self):
        """Test that custom validator messages are used verbatim."""
        error = {"type": "value_error", "msg": "Value error, name required",
                 "ctx": {"error": ValueError("name required")}}

        assert error_message(error) == "name required"

    def test_other_messages_unchanged(self):
        """Test built-in constraint messages."""
        assert error_message({"type": "greater_than", "msg": "Input should be greater than 0"}) == \
            "Input should be greater than 0"

    @pytest.mark.parametrize("error_type,expected", [
        ("int_parsing", True),
        ("bool_parsing", True),
        ("string_type", True),
        ("int_from_float", True),
        ("date_from_datetime_inexact", True),
        ("missing", False),
        ("greater_than_equal", False),
    ])
    def test_is_type_error(self, error_type, expected):
        """Test detection of type parsing errors."""
        assert is_type_error({"type": error_type}) is expected
