"""
Failure taxonomy for the request-processing boundary.

This module provides:
- FailureKind, the closed set of classification categories
- RequestFailure and one subclass per kind, each carrying its kind explicitly
- BusinessException for declared business failures
- PayloadError, raised by the body deserialization layer
"""

from enum import Enum
from typing import Iterable, Optional, Sequence, Union

from core.result_code import ResultCode


class FailureKind(str, Enum):
    """Failure categories handled by the error classifier."""
    FIELD_BINDING = "field_binding"
    PARAMETER_CONSTRAINT = "parameter_constraint"
    BODY_VALIDATION = "body_validation"
    ROUTE_NOT_FOUND = "route_not_found"
    MISSING_PARAMETER = "missing_parameter"
    PARAMETER_TYPE_MISMATCH = "parameter_type_mismatch"
    REQUEST_PROTOCOL = "request_protocol"
    ILLEGAL_ARGUMENT = "illegal_argument"
    SERIALIZATION = "serialization"
    UNREADABLE_BODY = "unreadable_body"
    TYPE_CONVERSION = "type_conversion"
    BACKEND_GRAMMAR = "backend_grammar"
    BACKEND_SYNTAX = "backend_syntax"
    BUSINESS = "business"
    UNEXPECTED = "unexpected"


class RequestFailure(Exception):
    """Base class for every failure that reaches the error boundary."""

    kind: FailureKind = FailureKind.UNEXPECTED

    def __init__(
        self,
        message: str = "",
        violations: Optional[Iterable[str]] = None,
        cause: Optional[BaseException] = None,
        detail: Optional[str] = None
    ):
        self.message = message
        self.violations = list(violations or [])
        self.cause = cause
        self.detail = detail
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, message={self.message!r})"


class FieldBindingFailure(RequestFailure):
    """Binding request values onto a model failed field constraints."""
    kind = FailureKind.FIELD_BINDING


class ParameterConstraintFailure(RequestFailure):
    """A query, path or header parameter violated its constraints."""
    kind = FailureKind.PARAMETER_CONSTRAINT


class BodyValidationFailure(RequestFailure):
    """The request body parsed but failed field validation."""
    kind = FailureKind.BODY_VALIDATION


class RouteNotFoundFailure(RequestFailure):
    kind = FailureKind.ROUTE_NOT_FOUND


class MissingParameterFailure(RequestFailure):
    kind = FailureKind.MISSING_PARAMETER

    def __init__(self, parameter: str, **kwargs):
        self.parameter = parameter
        super().__init__(f"Required request parameter '{parameter}' is not present", **kwargs)


class ParameterTypeMismatchFailure(RequestFailure):
    kind = FailureKind.PARAMETER_TYPE_MISMATCH


class RequestProtocolFailure(RequestFailure):
    """Generic HTTP protocol failure (unsupported method, media type, ...)."""
    kind = FailureKind.REQUEST_PROTOCOL


class IllegalArgumentFailure(RequestFailure):
    kind = FailureKind.ILLEGAL_ARGUMENT


class SerializationFailure(RequestFailure):
    kind = FailureKind.SERIALIZATION


class UnreadableBodyFailure(RequestFailure):
    """The request body is missing or could not be deserialized."""
    kind = FailureKind.UNREADABLE_BODY


class TypeConversionFailure(RequestFailure):
    kind = FailureKind.TYPE_CONVERSION


class BackendGrammarFailure(RequestFailure):
    """The database rejected a statement; ``detail`` holds the driver text."""
    kind = FailureKind.BACKEND_GRAMMAR


class BackendSyntaxFailure(RequestFailure):
    kind = FailureKind.BACKEND_SYNTAX


class UnexpectedFailure(RequestFailure):
    """Anything no other kind matched."""
    kind = FailureKind.UNEXPECTED


class BusinessException(RequestFailure):
    """
    Declared business failure.

    Raise with a registry code (``BusinessException(ResultCode.DATA_NOT_FOUND)``),
    a code plus a context-specific message, or a free-text message only.
    """
    kind = FailureKind.BUSINESS

    def __init__(
        self,
        result_code: Union[ResultCode, str, None] = None,
        message: Optional[str] = None,
        cause: Optional[BaseException] = None
    ):
        if isinstance(result_code, str):
            result_code, message = None, result_code
        self.result_code = result_code
        self.override_message = message if result_code is not None else None
        if message is None and result_code is not None:
            message = result_code.msg
        super().__init__(message or "", cause=cause)


class PayloadError(ValueError):
    """
    Raised when a request body value cannot be deserialized into its field.

    The text names the field through a reference chain such as
    ``UserForm["address"]["zip"]``.
    """

    def __init__(
        self,
        reason: str,
        path: Sequence[Union[str, int]] = (),
        model: str = "",
        value=None
    ):
        self.reason = reason
        # list indices do not name a field
        self.path = tuple(str(p) for p in path if not isinstance(p, int))
        self.model = model
        self.value = value
        super().__init__(self._render())

    def _render(self) -> str:
        if not self.path:
            return self.reason
        chain = "".join(f'["{segment}"]' for segment in self.path)
        return f"{self.reason}: through reference chain: {self.model}{chain}"
