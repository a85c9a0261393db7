"""Tests for single-field parsing and validation."""
import pytest

from search_param_editor.data_model import (
    EnumCodec, FieldDescriptor, FieldError, FieldKind, ValidResult,
)
from search_param_editor.field_validator import (
    parse_integer, parse_real, validate_field,
)
from search_param_editor.schema_comet import COMET_SCHEMA

MIN_PEAKS = COMET_SCHEMA.field("min_peaks")
ENZYME_TYPE = COMET_SCHEMA.field("enzyme_type")
OPTIONAL_REAL = FieldDescriptor(
    "window", FieldKind.OPTIONAL_REAL, "Window Width", required=False,
    non_negative=True,
)
SCORE = FieldDescriptor("score", FieldKind.REAL, "Score Cut-off")
FLAG = FieldDescriptor("flag", FieldKind.BOOLEAN_CHOICE, "Use Refinement")
TAG = FieldDescriptor("tag", FieldKind.TEXT, "Decoy Tag")


# ── Token parsing ────────────────────────────────────────────────────────

@pytest.mark.parametrize("text,expected", [
    ("10", 10), (" 10 ", 10), ("+3", 3), ("-7", -7), ("007", 7),
])
def test_parse_integer_accepts_plain_integers(text, expected):
    assert parse_integer(text) == expected


@pytest.mark.parametrize("text", ["10.0", "1e3", "1_000", "", "ten", "1,000"])
def test_parse_integer_rejects_everything_else(text):
    with pytest.raises(ValueError):
        parse_integer(text)


@pytest.mark.parametrize("text,expected", [
    ("0.4", 0.4), ("10000.0", 10000.0), ("1e-05", 1e-05), (".5", 0.5),
    ("5.", 5.0), ("-2.5E3", -2500.0), ("42", 42.0),
])
def test_parse_real_accepts_decimal_numbers(text, expected):
    assert parse_real(text) == expected


@pytest.mark.parametrize("text", ["nan", "inf", "-inf", "1e999", "1,5", "abc", "1_0.0"])
def test_parse_real_rejects_non_finite_and_malformed(text):
    with pytest.raises(ValueError):
        parse_real(text)


# ── validate_field ───────────────────────────────────────────────────────

def test_required_integer_parses():
    assert validate_field("10", MIN_PEAKS) == ValidResult(10)


@pytest.mark.parametrize("raw", ["", "   ", None])
def test_empty_required_field_is_an_error(raw):
    assert validate_field(raw, MIN_PEAKS) == FieldError(
        "min_peaks", "Minimum Number of Peaks is required"
    )


@pytest.mark.parametrize("raw", ["", "  ", None])
def test_empty_optional_field_is_absent(raw):
    result = validate_field(raw, OPTIONAL_REAL)
    assert result == ValidResult(None)
    assert result.is_absent


def test_integer_with_fraction_is_rejected():
    assert validate_field("10.5", MIN_PEAKS) == FieldError(
        "min_peaks", "Minimum Number of Peaks must be an integer"
    )


def test_malformed_real_is_rejected():
    assert validate_field("fast", SCORE) == FieldError(
        "score", "Score Cut-off must be a number"
    )


def test_negative_value_rejected_only_where_declared():
    assert validate_field("-1", MIN_PEAKS) == FieldError(
        "min_peaks", "Minimum Number of Peaks must not be negative"
    )
    assert validate_field("-1.5", SCORE) == ValidResult(-1.5)


def test_boolean_choice_index_convention():
    assert validate_field(0, FLAG) == ValidResult(True)
    assert validate_field(1, FLAG) == ValidResult(False)
    assert validate_field(True, FLAG) == ValidResult(True)
    assert validate_field("1", FLAG) == ValidResult(False)
    assert validate_field(2, FLAG) == FieldError(
        "flag", "Use Refinement has no option at index 2"
    )


def test_enum_decodes_through_codec():
    assert validate_field(2, ENZYME_TYPE) == ValidResult(8)
    assert validate_field(4, ENZYME_TYPE) == FieldError(
        "enzyme_type", "Enzyme Type has no option at index 4"
    )


def test_enum_with_non_numeric_selection_is_an_error():
    result = validate_field("first", ENZYME_TYPE)
    assert isinstance(result, FieldError)
    assert result.message == "Enzyme Type has no option at index first"


def test_optional_enum_without_selection_is_absent():
    descriptor = FieldDescriptor(
        "mode", FieldKind.ENUM, "Mode", required=False,
        codec=EnumCodec.of("a", "b"),
    )
    assert validate_field(None, descriptor) == ValidResult(None)


def test_text_is_trimmed():
    assert validate_field("  rev_ ", TAG) == ValidResult("rev_")
