"""Tests for the field descriptors, codecs, view state and reports."""
import pytest

from search_param_editor.constants import YES_NO
from search_param_editor.data_model import (
    ConstraintError, EnumCodec, FieldDescriptor, FieldKind, SchemaError,
    UnknownMapping, ValidationReport, ViewState,
)
from search_param_editor.schema_comet import COMET_SCHEMA, ENZYME_TYPE_CODEC
from search_param_editor.schema_sage import TMT_TYPE_CODEC
from search_param_editor.tool_registry import TOOL_SCHEMAS


# ── EnumCodec ────────────────────────────────────────────────────────────

def test_enzyme_type_codec_maps_non_contiguous_codes():
    assert ENZYME_TYPE_CODEC.decode(2) == 8
    assert ENZYME_TYPE_CODEC.encode(8) == 2
    assert ENZYME_TYPE_CODEC.decode(0) == 2
    assert ENZYME_TYPE_CODEC.encode(9) == 3


def test_every_codec_in_every_schema_is_bijective():
    for schema in TOOL_SCHEMAS.values():
        for descriptor in schema.fields:
            codec = descriptor.codec
            if codec is None:
                continue
            assert len(set(codec.view_indices)) == len(codec.positions)
            for index, value in codec.positions:
                assert codec.decode(codec.encode(value)) == value
                assert codec.encode(codec.decode(index)) == index


def test_codec_may_map_to_none():
    assert TMT_TYPE_CODEC.decode(0) is None
    assert TMT_TYPE_CODEC.encode(None) == 0
    assert None in TMT_TYPE_CODEC


@pytest.mark.parametrize("positions", [
    ((0, "a"), (0, "b")),
    ((0, "a"), (1, "a")),
    (),
])
def test_non_bijective_codec_is_rejected(positions):
    with pytest.raises(SchemaError):
        EnumCodec(positions)


def test_unknown_codec_entries_raise_unknown_mapping():
    codec = EnumCodec.of("OMX", "CSV")
    with pytest.raises(UnknownMapping):
        codec.decode(2)
    with pytest.raises(KeyError):
        codec.encode("XML")


def test_codec_keeps_booleans_and_integers_apart():
    codec = EnumCodec(((0, 1), (1, True)))
    assert codec.encode(1) == 0
    assert codec.encode(True) == 1
    assert codec.decode(1) is True

    correlation = COMET_SCHEMA.field("theoretical_fragment_ions_sum_only").codec
    assert correlation.encode(False) == 0
    assert 0 not in correlation
    with pytest.raises(UnknownMapping):
        correlation.encode(0)


def test_codec_of_uses_identity_positions():
    codec = EnumCodec.of("all", "valid", "stochastic")
    assert codec.view_indices == (0, 1, 2)
    assert codec.domain_values == ("all", "valid", "stochastic")


# ── FieldDescriptor ──────────────────────────────────────────────────────

def test_optional_kind_cannot_be_required():
    with pytest.raises(SchemaError):
        FieldDescriptor("charge", FieldKind.OPTIONAL_INTEGER, "Charge")
    descriptor = FieldDescriptor(
        "charge", FieldKind.OPTIONAL_INTEGER, "Charge", required=False,
    )
    assert not descriptor.required


def test_enum_field_needs_codec():
    with pytest.raises(SchemaError):
        FieldDescriptor("format", FieldKind.ENUM, "Format")


def test_codec_only_allowed_on_enum_fields():
    with pytest.raises(SchemaError):
        FieldDescriptor(
            "peaks", FieldKind.INTEGER, "Peaks", codec=EnumCodec.of(1, 2),
        )


def test_non_negative_requires_numeric_field():
    with pytest.raises(SchemaError):
        FieldDescriptor("tag", FieldKind.TEXT, "Tag", non_negative=True)


def test_boolean_choices_default_to_yes_no():
    descriptor = FieldDescriptor("lfq", FieldKind.BOOLEAN_CHOICE, "LFQ")
    assert descriptor.choices == YES_NO
    with pytest.raises(SchemaError):
        FieldDescriptor(
            "lfq", FieldKind.BOOLEAN_CHOICE, "LFQ", choices=("a", "b", "c"),
        )


def test_enum_choices_must_match_codec():
    descriptor = FieldDescriptor(
        "out", FieldKind.ENUM, "Output", codec=EnumCodec.of("OMX", "CSV"),
    )
    assert descriptor.choices == ("OMX", "CSV")
    with pytest.raises(SchemaError):
        FieldDescriptor(
            "out", FieldKind.ENUM, "Output",
            codec=EnumCodec.of("OMX", "CSV"), choices=("OMX",),
        )


def test_accessor_defaults_to_id():
    descriptor = FieldDescriptor("min_peaks", FieldKind.INTEGER, "Peaks")
    assert descriptor.accessor == "min_peaks"
    other = FieldDescriptor(
        "minPeaks", FieldKind.INTEGER, "Peaks", accessor="min_peaks",
    )
    assert other.accessor == "min_peaks"


# ── ViewState ────────────────────────────────────────────────────────────

def test_view_state_edits_produce_new_states():
    state = ViewState({"min_peaks": "10", "enzyme_type": 0})
    edited = state.with_value("min_peaks", "12")

    assert state["min_peaks"] == "10"
    assert edited["min_peaks"] == "12"
    assert edited["enzyme_type"] == 0
    assert state != edited
    assert edited == ViewState({"min_peaks": "12", "enzyme_type": 0})
    assert hash(edited) == hash(ViewState({"min_peaks": "12", "enzyme_type": 0}))


def test_view_state_is_a_read_only_mapping():
    state = ViewState({"a": "1"})
    assert state.get("missing") is None
    assert len(state) == 1
    assert list(state) == ["a"]
    assert state.to_dict() == {"a": "1"}
    with pytest.raises(TypeError):
        state["a"] = "2"


# ── ValidationReport ─────────────────────────────────────────────────────

def test_report_validity_ignores_notices():
    assert ValidationReport(notices=("note",)).overall_valid
    assert not ValidationReport(field_errors={"a": "A is required"}).overall_valid
    crossed = ValidationReport(cross_field_errors=(
        ConstraintError("range", ("low", "high"), "bad range"),
    ))
    assert not crossed.overall_valid


def test_errors_for_collects_field_and_cross_field_messages():
    report = ValidationReport(
        field_errors={"low": "Low must be a number"},
        cross_field_errors=(ConstraintError("range", ("low", "high"), "bad range"),),
    )
    assert report.errors_for("low") == ("Low must be a number", "bad range")
    assert report.errors_for("high") == ("bad range",)
    assert report.errors_for("other") == ()
