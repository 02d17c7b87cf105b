"""Classify raised failures and build the matching problem document.

``classify`` is the single entry point: it maps any exception to a
``Classification`` (status + Problem). The mapping is a closed set of
:class:`FailureKind` values resolved in a fixed priority order, then turned
into a document by one exhaustive ``match``. Nothing here raises or logs;
reporting failures out of band is left to the transport adapter.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple, assert_never, cast

from fastapi import status

from app.api.request_errors import (
    BodyMappingError,
    InvalidFormatError,
    MessageNotReadableError,
    NoRouteFoundError,
    ParameterTypeMismatchError,
    PropertyBindingError,
    join_path,
)
from app.core.config import settings
from app.domain.problem_types import ProblemCategory, lookup
from app.errors import BusinessRuleError, DomainError, EntityInUseError, EntityNotFoundError
from app.schemas.error import Problem, ProblemBuilder, ProblemField

INVALID_FORMAT_DETAIL = "property {path} received value '{value}' incompatible with type {type_name}"
UNKNOWN_PROPERTY_DETAIL = "property '{path}' does not exist"
INVALID_BODY_DETAIL = "request body invalid"
INVALID_PARAMETER_DETAIL = "parameter '{name}' received value '{value}', expected type {type_name}"
NO_ROUTE_DETAIL = "resource {url} does not exist"


class FailureKind(Enum):
    INVALID_FORMAT = "invalid-format"
    UNKNOWN_PROPERTY = "unknown-property"
    UNREADABLE_BODY = "unreadable-body"
    ENTITY_NOT_FOUND = "entity-not-found"
    ENTITY_IN_USE = "entity-in-use"
    BUSINESS_RULE = "business-rule"
    PARAMETER_TYPE_MISMATCH = "parameter-type-mismatch"
    NO_ROUTE = "no-route"
    UNEXPECTED = "unexpected"


class Classification(NamedTuple):
    status: int
    problem: Problem


# Checked top to bottom after the body cases; subclasses before bases.
DISPATCH_ORDER: tuple[tuple[type[BaseException], FailureKind], ...] = (
    (EntityNotFoundError, FailureKind.ENTITY_NOT_FOUND),
    (EntityInUseError, FailureKind.ENTITY_IN_USE),
    (BusinessRuleError, FailureKind.BUSINESS_RULE),
    (DomainError, FailureKind.BUSINESS_RULE),
    (ParameterTypeMismatchError, FailureKind.PARAMETER_TYPE_MISMATCH),
    (NoRouteFoundError, FailureKind.NO_ROUTE),
)


def _specific_kind(failure: BaseException) -> FailureKind | None:
    # Format invalidity wins if a failure ever matches both.
    if isinstance(failure, InvalidFormatError):
        return FailureKind.INVALID_FORMAT
    if isinstance(failure, PropertyBindingError):
        return FailureKind.UNKNOWN_PROPERTY
    return None


def cause_chain(failure: BaseException) -> list[BaseException]:
    """The failure followed by its causes, stopping at the first repeat."""
    chain: list[BaseException] = []
    seen: set[int] = set()
    current: BaseException | None = failure
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        chain.append(current)
        if current.__cause__ is not None:
            current = current.__cause__
        elif not current.__suppress_context__:
            current = current.__context__
        else:
            current = None
    return chain


def unwrap(failure: BaseException) -> BaseException:
    """Return the first failure in the cause chain with a specific kind.

    Falls back to ``failure`` itself when nothing in the chain is specific.
    """
    for link in cause_chain(failure):
        if _specific_kind(link) is not None:
            return link
    return failure


def categorize(failure: BaseException) -> tuple[FailureKind, BaseException]:
    """Resolve the failure kind and the failure that carries its details."""
    if isinstance(failure, (MessageNotReadableError, BodyMappingError)):
        root = unwrap(failure)
        return _specific_kind(root) or FailureKind.UNREADABLE_BODY, root

    for failure_type, kind in DISPATCH_ORDER:
        if isinstance(failure, failure_type):
            return kind, failure

    return FailureKind.UNEXPECTED, failure


def _problem(status_code: int, category: ProblemCategory, detail: str | None) -> ProblemBuilder:
    return ProblemBuilder(status_code).problem_type(lookup(category)).detail(detail)


def _violations(failure: BaseException) -> list[ProblemField]:
    return [
        ProblemField(name=name, user_message=message)
        for name, message in getattr(failure, "violations", ())
    ]


def build_problem(kind: FailureKind, source: BaseException) -> Classification:
    """Build the document for an already categorized failure."""
    generic = settings.generic_user_message

    match kind:
        case FailureKind.INVALID_FORMAT:
            invalid = cast(InvalidFormatError, source)
            detail = INVALID_FORMAT_DETAIL.format(
                path=join_path(invalid.path),
                value=invalid.value,
                type_name=invalid.target_type.__name__,
            )
            code = status.HTTP_400_BAD_REQUEST
            builder = _problem(code, ProblemCategory.UNREADABLE_MESSAGE, detail).user_message(generic)
        case FailureKind.UNKNOWN_PROPERTY:
            unknown = cast(BodyMappingError, source)
            detail = UNKNOWN_PROPERTY_DETAIL.format(path=join_path(unknown.path))
            code = status.HTTP_400_BAD_REQUEST
            builder = _problem(code, ProblemCategory.UNREADABLE_MESSAGE, detail).user_message(generic)
        case FailureKind.UNREADABLE_BODY:
            code = status.HTTP_400_BAD_REQUEST
            builder = (
                _problem(code, ProblemCategory.UNREADABLE_MESSAGE, INVALID_BODY_DETAIL)
                .user_message(generic)
                .fields(_violations(source))
            )
        case FailureKind.ENTITY_NOT_FOUND:
            code = status.HTTP_404_NOT_FOUND
            builder = _problem(code, ProblemCategory.RESOURCE_NOT_FOUND, str(source)).user_message(str(source))
        case FailureKind.ENTITY_IN_USE:
            code = status.HTTP_409_CONFLICT
            builder = _problem(code, ProblemCategory.RESOURCE_IN_USE, str(source)).user_message(str(source))
        case FailureKind.BUSINESS_RULE:
            code = status.HTTP_400_BAD_REQUEST
            builder = _problem(code, ProblemCategory.BUSINESS_RULE_VIOLATION, str(source)).user_message(
                str(source)
            )
        case FailureKind.PARAMETER_TYPE_MISMATCH:
            mismatch = cast(ParameterTypeMismatchError, source)
            detail = INVALID_PARAMETER_DETAIL.format(
                name=mismatch.name,
                value=mismatch.value,
                type_name=mismatch.required_type.__name__,
            )
            code = status.HTTP_400_BAD_REQUEST
            builder = _problem(code, ProblemCategory.INVALID_PARAMETER, detail)
        case FailureKind.NO_ROUTE:
            no_route = cast(NoRouteFoundError, source)
            code = status.HTTP_404_NOT_FOUND
            builder = _problem(code, ProblemCategory.RESOURCE_NOT_FOUND, NO_ROUTE_DETAIL.format(url=no_route.url))
        case FailureKind.UNEXPECTED:
            return system_error()
        case _:
            assert_never(kind)

    return Classification(code, builder.build())


def system_error() -> Classification:
    """The sanitized 500 document; carries nothing from the original failure."""
    code = status.HTTP_500_INTERNAL_SERVER_ERROR
    problem = (
        _problem(code, ProblemCategory.SYSTEM_ERROR, None)
        .user_message(settings.generic_user_message)
        .build()
    )
    return Classification(code, problem)


def classify(failure: BaseException) -> Classification:
    """Map any raised failure to its status and problem document. Never raises.

    A failure whose details cannot be read is answered as a system error; the
    adapter logs the original failure for every 500.
    """
    try:
        kind, source = categorize(failure)
        return build_problem(kind, source)
    except Exception:
        return system_error()
