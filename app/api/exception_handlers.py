"""Global exception handlers that turn every failure into a problem document."""

import logging
from http import HTTPStatus
from typing import Any, Mapping

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.problem_classifier import classify
from app.api.request_errors import (
    BodyMappingError,
    MessageNotReadableError,
    NoRouteFoundError,
    ParameterTypeMismatchError,
    translate_validation_error,
)
from app.core.config import settings
from app.errors import DomainError
from app.schemas.error import Problem, ProblemBuilder

logger = logging.getLogger(__name__)


def _reason_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def finalize(body: Any, status_code: int) -> Problem:
    """Guarantee a complete problem document for any response body.

    - no body, or a body that is not a document: built from the status alone
    - a plain string: used as the title
    - a Problem: returned as is, only a missing user message is filled in
    """
    if isinstance(body, Problem):
        if body.user_message is None:
            return body.model_copy(update={"user_message": settings.generic_user_message})
        return body

    title = body if isinstance(body, str) and body else _reason_phrase(status_code)
    return (
        ProblemBuilder(status_code)
        .title(title)
        .user_message(settings.generic_user_message)
        .build()
    )


def problem_response(
    problem: Problem, status_code: int, headers: Mapping[str, str] | None = None
) -> JSONResponse:
    """Return a standardized error response for a finalized document."""
    return JSONResponse(
        status_code=status_code,
        content=finalize(problem, status_code).to_content(),
        headers=dict(headers) if headers else None,
    )


def _classified_response(exc: BaseException) -> JSONResponse:
    status_code, problem = classify(exc)
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("Unhandled failure %s", type(exc).__name__, exc_info=exc)
    else:
        logger.info("Request failed: %s -> %d %s", type(exc).__name__, status_code, problem.type)
    return problem_response(problem, status_code)


def problem_exception_handler(_request: Request, exc: Exception) -> JSONResponse:
    return _classified_response(exc)


def request_validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    failure = translate_validation_error(exc)
    if failure is None:
        code = status.HTTP_400_BAD_REQUEST
        return problem_response(finalize(None, code), code)
    return _classified_response(failure)


def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Framework-level failures: unmatched routes, wrong methods, auth errors."""
    # The router raises 404 before an endpoint is picked.
    if exc.status_code == status.HTTP_404_NOT_FOUND and "endpoint" not in request.scope:
        return _classified_response(NoRouteFoundError(request.url.path))

    # FastAPI reports a body it cannot decode (e.g. invalid UTF-8) as a 400
    # chained from the decoding error.
    if exc.status_code == status.HTTP_400_BAD_REQUEST and exc.__cause__ is not None:
        failure = MessageNotReadableError()
        failure.__cause__ = exc.__cause__
        return _classified_response(failure)

    problem = finalize(exc.detail, exc.status_code)
    return problem_response(problem, exc.status_code, getattr(exc, "headers", None))


def register_exception_handlers(app):
    """Register problem document handlers on the FastAPI app."""
    app.add_exception_handler(DomainError, problem_exception_handler)
    app.add_exception_handler(MessageNotReadableError, problem_exception_handler)
    app.add_exception_handler(BodyMappingError, problem_exception_handler)
    app.add_exception_handler(ParameterTypeMismatchError, problem_exception_handler)
    app.add_exception_handler(NoRouteFoundError, problem_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, problem_exception_handler)
