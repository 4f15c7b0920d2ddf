"""
Translation of framework and library exceptions into RequestFailure values.

The serving layer hands every exception it catches to ``translate_exception``;
the result always carries an explicit FailureKind.
"""

import json
from typing import Any, Dict, List, Sequence

from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.exc import CompileError, ProgrammingError
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.exceptions import (
    BackendGrammarFailure,
    BackendSyntaxFailure,
    BodyValidationFailure,
    FieldBindingFailure,
    IllegalArgumentFailure,
    MissingParameterFailure,
    ParameterConstraintFailure,
    ParameterTypeMismatchFailure,
    PayloadError,
    RequestFailure,
    RequestProtocolFailure,
    RouteNotFoundFailure,
    SerializationFailure,
    UnexpectedFailure,
    UnreadableBodyFailure,
)

BODY_LOCATION = "body"
# Coercion failures pydantic does not name with a _parsing or _type suffix
COERCION_ERROR_TYPES = frozenset({"int_from_float", "date_from_datetime_inexact"})


def translate_exception(exc: BaseException) -> RequestFailure:
    """Map any exception to a RequestFailure with an explicit kind."""
    if isinstance(exc, RequestFailure):
        return exc
    if isinstance(exc, RequestValidationError):
        return _translate_request_validation(exc.errors())
    if isinstance(exc, ValidationError):
        return FieldBindingFailure(
            message=str(exc),
            violations=[error_message(error) for error in exc.errors()],
            cause=exc
        )
    if isinstance(exc, StarletteHTTPException):
        if exc.status_code == 404:
            return RouteNotFoundFailure(str(exc.detail), cause=exc)
        return RequestProtocolFailure(str(exc.detail), cause=exc)
    if isinstance(exc, PayloadError):
        return UnreadableBodyFailure(str(exc), cause=exc)
    if isinstance(exc, json.JSONDecodeError):
        return SerializationFailure(str(exc), cause=exc)
    if isinstance(exc, ValueError):
        return IllegalArgumentFailure(str(exc), cause=exc)
    if isinstance(exc, ProgrammingError):
        return BackendGrammarFailure(str(exc), cause=exc, detail=str(exc.orig))
    if isinstance(exc, CompileError):
        return BackendSyntaxFailure(str(exc), cause=exc)
    return UnexpectedFailure(str(exc), cause=exc)


def error_message(error: Dict[str, Any]) -> str:
    """Client-facing text of one pydantic error entry."""
    if error.get("type") == "value_error":
        original = (error.get("ctx") or {}).get("error")
        if original is not None:
            return str(original)
    return error.get("msg", "")


def is_type_error(error: Dict[str, Any]) -> bool:
    """True for errors raised because a value could not be parsed as its type."""
    error_type = error.get("type", "")
    return (
        error_type in COERCION_ERROR_TYPES
        or error_type.endswith("_parsing")
        or error_type.endswith("_type")
    )


def _translate_request_validation(errors: Sequence[Dict[str, Any]]) -> RequestFailure:
    body_errors = [e for e in errors if _location(e)[:1] == (BODY_LOCATION,)]
    if body_errors:
        return _translate_body_errors(body_errors)

    missing = [e for e in errors if e.get("type") == "missing"]
    if missing:
        return MissingParameterFailure(_field_name(missing[0]))

    type_errors = [e for e in errors if is_type_error(e)]
    if type_errors:
        error = type_errors[0]
        return ParameterTypeMismatchFailure(
            f"Failed to convert parameter '{_field_name(error)}': {error_message(error)}"
        )

    messages = [error_message(e) for e in errors]
    return ParameterConstraintFailure("; ".join(messages), violations=messages)


def _translate_body_errors(errors: List[Dict[str, Any]]) -> RequestFailure:
    for error in errors:
        location = _location(error)
        if location == (BODY_LOCATION,) and error.get("type") == "missing":
            return UnreadableBodyFailure("Required request body is missing")
        if error.get("type") == "json_invalid":
            reason = (error.get("ctx") or {}).get("error") or error_message(error)
            cause = PayloadError(f"JSON parse error: {reason}")
            return UnreadableBodyFailure(str(cause), cause=cause)

    type_errors = [e for e in errors if is_type_error(e)]
    if type_errors:
        error = type_errors[0]
        cause = PayloadError(
            f"Cannot deserialize value: {error_message(error)}",
            path=_location(error)[1:],
            value=error.get("input")
        )
        return UnreadableBodyFailure(str(cause), cause=cause)

    messages = [error_message(e) for e in errors]
    return BodyValidationFailure("; ".join(messages), violations=messages)


def _location(error: Dict[str, Any]) -> tuple:
    return tuple(error.get("loc") or ())


def _field_name(error: Dict[str, Any]) -> str:
    location = _location(error)
    return str(location[-1]) if location else ""
