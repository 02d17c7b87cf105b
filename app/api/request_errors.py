"""Failures raised while turning an HTTP request into handler arguments.

The body deserializer, the argument binder and the router report problems
through these types. ``translate_validation_error`` converts FastAPI's
``RequestValidationError`` into them so the problem classifier only has to
know one vocabulary.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any, Sequence
from uuid import UUID

from fastapi.exceptions import RequestValidationError

PathElement = str | int

# Body fields and request parameters live under these first ``loc`` entries.
BODY_LOCATION = "body"
PARAMETER_LOCATIONS = ("path", "query", "header", "cookie")

# pydantic error types meaning "this value cannot be read as that type".
TARGET_TYPES: dict[str, type] = {
    "int_parsing": int,
    "int_type": int,
    "int_from_float": int,
    "float_parsing": float,
    "float_type": float,
    "decimal_parsing": Decimal,
    "decimal_type": Decimal,
    "bool_parsing": bool,
    "bool_type": bool,
    "string_type": str,
    "date_parsing": date,
    "date_type": date,
    "date_from_datetime_parsing": date,
    "datetime_parsing": datetime,
    "datetime_type": datetime,
    "datetime_from_date_parsing": datetime,
    "time_parsing": time,
    "time_type": time,
    "time_delta_parsing": timedelta,
    "uuid_parsing": UUID,
    "uuid_type": UUID,
    "list_type": list,
    "dict_type": dict,
}

UNKNOWN_PROPERTY = "extra_forbidden"
JSON_INVALID = "json_invalid"


def join_path(references: Sequence[PathElement]) -> str:
    """Join the field names of a nesting chain: ``["order", "item"]`` -> ``"order.item"``."""
    return ".".join(str(reference) for reference in references)


class MessageNotReadableError(Exception):
    """The request body could not be read into the handler's input model.

    When a more specific failure is known it is chained as the cause
    (``raise MessageNotReadableError(...) from InvalidFormatError(...)``).
    """

    def __init__(
        self,
        message: str = "request body could not be read",
        violations: Sequence[tuple[str, str]] = (),
    ):
        super().__init__(message)
        self.violations = tuple(violations)


class BodyMappingError(Exception):
    """Base for failures located at a path inside the request body."""

    def __init__(self, message: str, path: Sequence[PathElement] = ()):
        super().__init__(message)
        self.path = tuple(path)


class InvalidFormatError(BodyMappingError):
    def __init__(self, path: Sequence[PathElement], value: Any, target_type: type):
        super().__init__(
            f"cannot read {value!r} as {target_type.__name__}", path
        )
        self.value = value
        self.target_type = target_type


class PropertyBindingError(BodyMappingError):
    def __init__(self, path: Sequence[PathElement]):
        super().__init__(f"unknown property {join_path(path)!r}", path)


class ParameterTypeMismatchError(Exception):
    """A path, query, header or cookie parameter has the wrong type."""

    def __init__(self, name: str, value: Any, required_type: type):
        super().__init__(
            f"parameter {name!r}: cannot read {value!r} as {required_type.__name__}"
        )
        self.name = name
        self.value = value
        self.required_type = required_type


class NoRouteFoundError(Exception):
    """No route matches the requested URL."""

    def __init__(self, url: str):
        super().__init__(f"no route for {url}")
        self.url = url


def _body_failure(errors: list[dict[str, Any]]) -> MessageNotReadableError:
    for error in errors:
        if error.get("type") == JSON_INVALID:
            return MessageNotReadableError("malformed JSON document")

    # Format problems take priority over unknown properties.
    for error in errors:
        target_type = TARGET_TYPES.get(error.get("type", ""))
        if target_type is not None:
            cause = InvalidFormatError(error["loc"][1:], error.get("input"), target_type)
            return _wrap(cause)

    for error in errors:
        if error.get("type") == UNKNOWN_PROPERTY:
            return _wrap(PropertyBindingError(error["loc"][1:]))

    violations = [
        (join_path(error["loc"][1:]), error.get("msg", "invalid value"))
        for error in errors
        if len(error.get("loc", ())) > 1
    ]
    return MessageNotReadableError(violations=violations)


def _wrap(cause: BodyMappingError) -> MessageNotReadableError:
    failure = MessageNotReadableError()
    failure.__cause__ = cause
    return failure


def translate_validation_error(exc: RequestValidationError) -> Exception | None:
    """Map a FastAPI validation error onto a request failure.

    Returns None when the error is about parameters but is not a type
    mismatch (e.g. a missing query parameter); those are answered from the
    status code alone.
    """
    errors = list(exc.errors())

    body_errors = [e for e in errors if e.get("loc", ())[:1] == (BODY_LOCATION,)]
    if body_errors:
        return _body_failure(body_errors)

    for error in errors:
        loc = error.get("loc", ())
        target_type = TARGET_TYPES.get(error.get("type", ""))
        if loc and loc[0] in PARAMETER_LOCATIONS and target_type is not None:
            return ParameterTypeMismatchError(str(loc[-1]), error.get("input"), target_type)

    return None
