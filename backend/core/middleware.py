"""
Middleware and handlers that turn failures into envelope responses.

This module provides:
- Exception handling middleware for FastAPI
- Explicit registration of the handlers FastAPI resolves before middleware
- Request tracing and logging integration
"""

import logging
import uuid
from contextlib import suppress
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from config.logging_config import get_error_logger
from config.settings import ErrorHandlingSettings
from .classifier import ClassifiedFailure, ErrorClassifier
from .exceptions import FailureKind, RequestFailure
from .translator import translate_exception

logger = get_error_logger()


def build_error_response(
    request: Request,
    exc: BaseException,
    classifier: ErrorClassifier,
    settings: ErrorHandlingSettings
) -> JSONResponse:
    """Translate, classify and log ``exc``; answer with its envelope."""
    failure = translate_exception(exc)
    classified = classifier.classify(failure)
    result = classified.to_result()
    trace_id = getattr(request.state, "trace_id", None)

    # A failing log call must not replace the classified response.
    with suppress(Exception):
        _log_failure(failure, classified, request, trace_id, settings.log_traceback)

    response = JSONResponse(
        status_code=classified.http_status,
        content=result.model_dump(mode="json")
    )
    if isinstance(exc, StarletteHTTPException) and exc.headers:
        response.headers.update(exc.headers)
    if trace_id:
        response.headers[settings.trace_header] = trace_id
    return response


class ExceptionHandlingMiddleware(BaseHTTPMiddleware):
    """Middleware that answers every exception raised by an endpoint with an envelope."""

    def __init__(
        self,
        app,
        classifier: Optional[ErrorClassifier] = None,
        settings: Optional[ErrorHandlingSettings] = None
    ):
        super().__init__(app)
        self.classifier = classifier or ErrorClassifier()
        self.settings = settings or ErrorHandlingSettings()

    async def dispatch(self, request: Request, call_next):
        # Generate trace ID for request tracking
        trace_id = str(uuid.uuid4())
        request.state.trace_id = trace_id

        try:
            response = await call_next(request)
        except Exception as e:
            if not self.settings.fallback_enabled and not is_classified(e):
                logger.error(
                    f"Unclassified exception re-raised: {type(e).__name__}: {e}",
                    extra={'trace_id': trace_id, 'path': request.url.path}
                )
                raise
            return build_error_response(request, e, self.classifier, self.settings)

        response.headers[self.settings.trace_header] = trace_id
        return response


def is_classified(exc: BaseException) -> bool:
    """True when ``exc`` maps to a kind other than the catch-all."""
    return translate_exception(exc).kind != FailureKind.UNEXPECTED


def register_exception_handlers(
    app: FastAPI,
    classifier: ErrorClassifier,
    settings: ErrorHandlingSettings
) -> None:
    """
    Route the exceptions FastAPI handles itself through the classifier.

    Validation errors and HTTP exceptions never reach middleware, so they are
    registered here explicitly.
    """

    async def handle_classified(request: Request, exc: Exception) -> JSONResponse:
        return build_error_response(request, exc, classifier, settings)

    app.add_exception_handler(RequestValidationError, handle_classified)
    app.add_exception_handler(StarletteHTTPException, handle_classified)
    app.add_exception_handler(RequestFailure, handle_classified)


def _log_failure(
    failure: RequestFailure,
    classified: ClassifiedFailure,
    request: Request,
    trace_id: Optional[str],
    include_traceback: bool
):
    """Log the full failure; the client only sees the sanitized envelope."""
    origin = failure.cause or failure
    log_data = {
        'trace_id': trace_id,
        'path': request.url.path,
        'method': request.method,
        'status_code': classified.http_status,
        'failure_kind': failure.kind.value,
        'client_ip': request.client.host if request.client else None
    }
    message = f"[{failure.kind.value}] {type(origin).__name__}: {origin}"
    if failure.violations:
        message += f" | violations: {failure.violations}"

    if classified.http_status >= 500:
        logger.error(
            f"Server Error {message}",
            extra=log_data,
            exc_info=origin if include_traceback else None
        )
    else:
        logger.warning(
            f"Client Error {message}",
            extra=log_data,
            exc_info=origin if include_traceback else None
        )
