from decimal import Decimal

from fastapi.exceptions import RequestValidationError

from app.api.request_errors import (
    InvalidFormatError,
    MessageNotReadableError,
    ParameterTypeMismatchError,
    PropertyBindingError,
    translate_validation_error,
)


def _error(loc, type_, input_=None, msg="invalid"):
    return {"loc": loc, "type": type_, "input": input_, "msg": msg}


def test_json_invalid_has_no_specific_cause():
    exc = RequestValidationError([_error(("body", 12), "json_invalid", "{")])

    failure = translate_validation_error(exc)

    assert isinstance(failure, MessageNotReadableError)
    assert failure.__cause__ is None
    assert failure.violations == ()


def test_body_parse_error_becomes_invalid_format_cause():
    exc = RequestValidationError(
        [_error(("body", "shipping_fee"), "decimal_parsing", "abc")]
    )

    failure = translate_validation_error(exc)

    assert isinstance(failure, MessageNotReadableError)
    cause = failure.__cause__
    assert isinstance(cause, InvalidFormatError)
    assert cause.path == ("shipping_fee",)
    assert cause.value == "abc"
    assert cause.target_type is Decimal


def test_body_unknown_property_becomes_property_binding_cause():
    exc = RequestValidationError(
        [_error(("body", "kitchen", "nmae"), "extra_forbidden", "Thai")]
    )

    failure = translate_validation_error(exc)

    assert isinstance(failure.__cause__, PropertyBindingError)
    assert failure.__cause__.path == ("kitchen", "nmae")


def test_format_error_preferred_over_unknown_property():
    exc = RequestValidationError(
        [
            _error(("body", "extra"), "extra_forbidden", 1),
            _error(("body", "kitchen", "id"), "int_parsing", "x"),
        ]
    )

    failure = translate_validation_error(exc)

    assert isinstance(failure.__cause__, InvalidFormatError)
    assert failure.__cause__.path == ("kitchen", "id")


def test_other_body_errors_become_violations():
    exc = RequestValidationError(
        [
            _error(("body", "name"), "missing", msg="Field required"),
            _error(("body", "shipping_fee"), "greater_than_equal", -1, "Input should be >= 0"),
            _error(("body",), "missing", msg="Field required"),
        ]
    )

    failure = translate_validation_error(exc)

    assert isinstance(failure, MessageNotReadableError)
    assert failure.__cause__ is None
    assert failure.violations == (
        ("name", "Field required"),
        ("shipping_fee", "Input should be >= 0"),
    )


def test_path_parameter_type_mismatch():
    exc = RequestValidationError([_error(("path", "restaurant_id"), "int_parsing", "abc")])

    failure = translate_validation_error(exc)

    assert isinstance(failure, ParameterTypeMismatchError)
    assert failure.name == "restaurant_id"
    assert failure.value == "abc"
    assert failure.required_type is int


def test_query_parameter_type_mismatch():
    exc = RequestValidationError([_error(("query", "page"), "int_parsing", "two")])

    failure = translate_validation_error(exc)

    assert isinstance(failure, ParameterTypeMismatchError)
    assert failure.name == "page"


def test_parameter_constraint_error_is_not_classified():
    """Test non-type parameter errors are left to the status-only default."""
    exc = RequestValidationError([_error(("query", "page"), "greater_than_equal", 0)])

    assert translate_validation_error(exc) is None


def test_body_errors_take_precedence_over_parameters():
    exc = RequestValidationError(
        [
            _error(("path", "restaurant_id"), "int_parsing", "abc"),
            _error(("body", "name"), "missing"),
        ]
    )

    assert isinstance(translate_validation_error(exc), MessageNotReadableError)
