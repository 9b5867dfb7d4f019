import math

import pytest
from emusettings.settings.values import (
    VALUE_PARSERS,
    format_value,
    parse_bool,
    parse_float,
    parse_int,
    parse_value,
    to_float32,
)


@pytest.mark.parametrize(
    "text, expected, expected_type",
    [
        ("10", 10, int),
        ("-3", -3, int),
        ("+7", 7, int),
        ("0", 0, int),
        ("9223372036854775807", 9223372036854775807, int),
        ("9223372036854775808", 9.223372036854775808e18, float),
        ("1.5", 1.5, float),
        ("10.0", 10.0, float),
        ("10.", 10.0, float),
        (".5", 0.5, float),
        ("-2.5e-3", to_float32(-0.0025), float),
        ("1e3", 1000.0, float),
        ("Infinity", math.inf, float),
        ("-Infinity", -math.inf, float),
        ("True", True, bool),
        ("False", False, bool),
        ("true", "true", str),
        ("false", "false", str),
        ("TRUE", "TRUE", str),
        ("1_000", "1_000", str),
        ("inf", "inf", str),
        ("0x10", "0x10", str),
        ("auto", "auto", str),
        ("", "", str),
    ],
)
def test_parse_value_classification(text: str, expected: object, expected_type: type) -> None:
    value = parse_value(text)
    assert type(value) is expected_type
    assert value == expected


def test_integer_text_never_becomes_float() -> None:
    value = parse_value("10")
    assert isinstance(value, int)
    assert not isinstance(value, (bool, float))


def test_nan_parses_as_float() -> None:
    value = parse_value("NaN")
    assert isinstance(value, float)
    assert math.isnan(value)


def test_parsers_are_tried_int_float_bool() -> None:
    assert VALUE_PARSERS == (parse_int, parse_float, parse_bool)


def test_individual_parsers_reject_other_types() -> None:
    assert parse_int("1.5") is None
    assert parse_float("True") is None
    assert parse_bool("1") is None
    assert parse_bool("true") is None


@pytest.mark.parametrize(
    "value, text",
    [
        (True, "True"),
        (False, "False"),
        (3, "3"),
        (10.0, "10.0"),
        (0.1, "0.1"),
        (3.14159265358979, "3.1415927"),
        (1e20, "1e+20"),
        (1e39, "Infinity"),
        (-0.0, "-0.0"),
        (math.inf, "Infinity"),
        (-math.inf, "-Infinity"),
        (math.nan, "NaN"),
        ("auto", "auto"),
    ],
)
def test_format_value(value: object, text: str) -> None:
    assert format_value(value) == text  # type: ignore[arg-type]


@pytest.mark.parametrize("value", [True, False, 0, -42, 2**40, 10.0, to_float32(0.1), to_float32(1e-7), "Null Device"])
def test_formatted_values_parse_back_unchanged(value: object) -> None:
    parsed = parse_value(format_value(value))  # type: ignore[arg-type]
    assert type(parsed) is type(value)
    assert parsed == value


@pytest.mark.parametrize(
    "text, expected_type",
    [
        ("9" * 20, float),
        ("-" + "9" * 5000, float),
        ("0" * 30 + "7", int),
    ],
)
def test_long_digit_strings(text: str, expected_type: type) -> None:
    assert type(parse_value(text)) is expected_type


def test_huge_digit_string_is_not_an_int() -> None:
    assert parse_int("9" * 5000) is None
    assert parse_value("9" * 5000) == math.inf


def test_floats_are_single_precision() -> None:
    value = parse_value("3.14159265358979")
    assert value == to_float32(3.14159265358979)
    assert value != 3.14159265358979
    assert format_value(value) == "3.1415927"


def test_to_float32_overflow_becomes_infinity() -> None:
    assert to_float32(1e39) == math.inf
    assert to_float32(-1e39) == -math.inf
    assert to_float32(0.5) == 0.5
