"""
Error classifier.

Maps a RequestFailure to a result code (or literal message) and an HTTP
status. The mapping is a single table keyed by FailureKind; building a
classifier whose table misses a kind fails immediately.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from core.exceptions import FailureKind, RequestFailure
from core.message_extractor import MessageExtractor
from core.result_code import ResultCode
from schema.result import Result

VIOLATION_SEPARATOR = "；"
TYPE_ERROR_MESSAGE = "类型错误"
EMPTY_BODY_MESSAGE = "请求体不可为空"
MALFORMED_BODY_MESSAGE = "请求体格式错误"
ACCESS_DENIED_MARKER = "denied to user"


@dataclass(frozen=True)
class ClassifiedFailure:
    """Outcome of classifying one failure."""
    http_status: int
    result_code: Optional[ResultCode] = None
    override_message: Optional[str] = None

    def to_result(self) -> Result:
        if self.result_code is None:
            return Result.failed(self.override_message or "")
        return Result.failed(self.result_code, self.override_message)


class ErrorClassifier:
    """Total mapping from failure kinds to client-facing outcomes."""

    def __init__(self, extractor: Optional[MessageExtractor] = None):
        self.extractor = extractor or MessageExtractor()
        self._handlers = self._build_handlers()
        unhandled = set(FailureKind) - set(self._handlers)
        if unhandled:
            names = ", ".join(sorted(kind.name for kind in unhandled))
            raise RuntimeError(f"No classification for failure kinds: {names}")

    def _build_handlers(self) -> Dict[FailureKind, Callable[[RequestFailure], ClassifiedFailure]]:
        return {
            FailureKind.FIELD_BINDING: self._joined_violations,
            FailureKind.PARAMETER_CONSTRAINT: self._joined_violations,
            FailureKind.BODY_VALIDATION: self._joined_violations,
            FailureKind.ROUTE_NOT_FOUND: self._route_not_found,
            FailureKind.MISSING_PARAMETER: self._missing_parameter,
            FailureKind.PARAMETER_TYPE_MISMATCH: self._type_mismatch,
            FailureKind.REQUEST_PROTOCOL: self._own_message,
            FailureKind.ILLEGAL_ARGUMENT: self._own_message,
            FailureKind.SERIALIZATION: self._own_message,
            FailureKind.UNREADABLE_BODY: self._unreadable_body,
            FailureKind.TYPE_CONVERSION: self._own_message,
            FailureKind.BACKEND_GRAMMAR: self._backend_grammar,
            FailureKind.BACKEND_SYNTAX: self._backend_syntax,
            FailureKind.BUSINESS: self._business,
            FailureKind.UNEXPECTED: self._unexpected,
        }

    def classify(self, failure: RequestFailure) -> ClassifiedFailure:
        """Classify a failure. Pure: the same failure always yields the same outcome."""
        return self._handlers[failure.kind](failure)

    def to_result(self, failure: RequestFailure) -> Result:
        return self.classify(failure).to_result()

    # Handlers

    def _joined_violations(self, failure: RequestFailure) -> ClassifiedFailure:
        message = VIOLATION_SEPARATOR.join(failure.violations) or failure.message
        return ClassifiedFailure(400, ResultCode.PARAM_ERROR, message)

    def _route_not_found(self, failure: RequestFailure) -> ClassifiedFailure:
        return ClassifiedFailure(404, ResultCode.RESOURCE_NOT_FOUND)

    def _missing_parameter(self, failure: RequestFailure) -> ClassifiedFailure:
        return ClassifiedFailure(400, ResultCode.PARAM_IS_NULL)

    def _type_mismatch(self, failure: RequestFailure) -> ClassifiedFailure:
        return ClassifiedFailure(400, ResultCode.PARAM_ERROR, TYPE_ERROR_MESSAGE)

    def _own_message(self, failure: RequestFailure) -> ClassifiedFailure:
        return ClassifiedFailure(400, override_message=failure.message)

    def _unreadable_body(self, failure: RequestFailure) -> ClassifiedFailure:
        if failure.cause is None:
            return ClassifiedFailure(400, override_message=EMPTY_BODY_MESSAGE)
        message = self.extractor.extract(failure.cause) or MALFORMED_BODY_MESSAGE
        return ClassifiedFailure(400, override_message=message)

    def _backend_grammar(self, failure: RequestFailure) -> ClassifiedFailure:
        texts = (failure.detail or "", failure.message or "")
        if any(ACCESS_DENIED_MARKER in text for text in texts):
            return ClassifiedFailure(403, ResultCode.FORBIDDEN_OPERATION)
        return ClassifiedFailure(403, override_message=failure.message)

    def _backend_syntax(self, failure: RequestFailure) -> ClassifiedFailure:
        return ClassifiedFailure(403, override_message=failure.message)

    def _business(self, failure: RequestFailure) -> ClassifiedFailure:
        result_code = getattr(failure, "result_code", None)
        if result_code is not None:
            return ClassifiedFailure(400, result_code, getattr(failure, "override_message", None))
        return ClassifiedFailure(400, override_message=failure.message)

    def _unexpected(self, failure: RequestFailure) -> ClassifiedFailure:
        return ClassifiedFailure(500, ResultCode.SYSTEM_ERROR)
