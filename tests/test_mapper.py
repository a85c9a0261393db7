"""Tests for the parameter object <-> view state mapping."""
import dataclasses
import warnings

import pytest

from search_param_editor.algorithm_parameters import (
    CometOutputFormat, CometParameters, MetaMorpheusDissociationType,
    MetaMorpheusParameters, MsgfParameters, OmssaParameters, SageParameters,
    XtandemParameters,
)
from search_param_editor.data_model import SchemaError, ViewState
from search_param_editor.mapper import from_view, to_view
from search_param_editor.schema_comet import COMET_SCHEMA
from search_param_editor.schema_metamorpheus import METAMORPHEUS_SCHEMA
from search_param_editor.schema_msgf import MSGF_SCHEMA
from search_param_editor.schema_omssa import OMSSA_SCHEMA
from search_param_editor.schema_sage import SAGE_SCHEMA
from search_param_editor.schema_xtandem import XTANDEM_SCHEMA
from search_param_editor.tool_registry import TOOL_SCHEMAS

CUSTOMISED = [
    (COMET_SCHEMA, CometParameters(
        enzyme_type=9, min_peak_intensity=1e-05, max_precursor_mass=6000.5,
        output_format=CometOutputFormat.SQT, print_expect_score=False,
        theoretical_fragment_ions_sum_only=True, remove_precursor_peak=2,
    )),
    (METAMORPHEUS_SCHEMA, MetaMorpheusParameters(
        dissociation_type=MetaMorpheusDissociationType.ETHCD,
        max_mods_per_peptide=-1, window_width_thomsons=100.0,
        number_of_windows=10, run_gptm=True,
    )),
    (MSGF_SCHEMA, MsgfParameters(
        instrument_id=1, protocol=5, number_tolerable_termini=0,
        search_decoy_database=True,
    )),
    (OMSSA_SCHEMA, OmssaParameters(
        selected_output="CSV", estimate_charge=False, neutron_threshold=1500.25,
    )),
    (SAGE_SCHEMA, SageParameters(
        tmt_type="Tmt16", tmt_sn=True, max_fragment_charge=3, decoy_tag="decoy_",
    )),
    (XTANDEM_SCHEMA, XtandemParameters(
        use_refine=False, output_results="valid", max_e_value=0.5,
        skyline_path="/opt/skyline/SkylineCmd.exe", proteome_complexity=12.0,
    )),
]


def _round_trip(parameters, schema):
    result = from_view(to_view(parameters, schema), schema)
    assert result.ok, result.report
    return result.parameters


# ── Round trip and idempotence ───────────────────────────────────────────

@pytest.mark.parametrize("schema", list(TOOL_SCHEMAS.values()), ids=list(TOOL_SCHEMAS))
def test_defaults_round_trip(schema):
    defaults = schema.default_parameters()
    assert _round_trip(defaults, schema) == defaults


@pytest.mark.parametrize(
    "schema,parameters", CUSTOMISED, ids=[schema.tool for schema, _ in CUSTOMISED],
)
def test_customised_parameters_round_trip(schema, parameters):
    assert _round_trip(parameters, schema) == parameters


@pytest.mark.parametrize("schema", list(TOOL_SCHEMAS.values()), ids=list(TOOL_SCHEMAS))
def test_from_view_is_idempotent(schema):
    view_state = to_view(schema.default_parameters(), schema)
    first = from_view(view_state, schema)
    second = from_view(view_state, schema)
    assert first.parameters == second.parameters
    assert first.report == second.report


def test_every_attribute_is_mapped_by_exactly_one_field():
    for schema in TOOL_SCHEMAS.values():
        attributes = {f.name for f in dataclasses.fields(schema.parameter_type)}
        accessors = [descriptor.accessor for descriptor in schema.fields]
        assert sorted(accessors) == sorted(attributes), schema.tool


# ── to_view ──────────────────────────────────────────────────────────────

def test_to_view_uses_canonical_display_values():
    view = to_view(CometParameters(enzyme_type=8), COMET_SCHEMA)
    assert view["min_peaks"] == "10"
    assert view["max_precursor_mass"] == "5000.0"
    assert view["fragment_bin_offset"] == "0.0"
    assert view["enzyme_type"] == 2
    assert view["remove_methionine"] == 1
    assert view["print_expect_score"] == 0
    assert view["output_format"] == 0


def test_to_view_leaves_absent_optional_values_empty():
    view = to_view(SageParameters(), SAGE_SCHEMA)
    assert view["max_fragment_charge"] == ""
    assert view["tmt_type"] == 0
    xtandem = to_view(XtandemParameters(), XTANDEM_SCHEMA)
    assert xtandem["skyline_path"] == ""


def test_to_view_rejects_none_in_required_field():
    with pytest.raises(SchemaError):
        to_view(CometParameters(min_peaks=None), COMET_SCHEMA)


def test_to_view_rejects_value_without_view_position():
    with pytest.raises(SchemaError):
        to_view(CometParameters(enzyme_type=5), COMET_SCHEMA)


def test_to_view_rejects_other_parameter_types():
    with pytest.raises(SchemaError):
        to_view(SageParameters(), COMET_SCHEMA)


def test_to_view_warns_about_values_a_rule_will_replace():
    parameters = XtandemParameters(output_proteins=False, output_sequences=True)
    with pytest.warns(UserWarning, match="output_sequences"):
        view = to_view(parameters, XTANDEM_SCHEMA)
    result = from_view(view, XTANDEM_SCHEMA)
    assert result.ok
    assert result.parameters.output_sequences is False


def test_to_view_is_silent_for_consistent_values():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        to_view(XtandemParameters(output_proteins=False), XTANDEM_SCHEMA)


# ── from_view ────────────────────────────────────────────────────────────

def test_from_view_builds_new_object_from_edits():
    view = to_view(CometParameters(), COMET_SCHEMA)
    view = view.with_value("min_peaks", " 25 ").with_value("enzyme_type", 2)
    result = from_view(view, COMET_SCHEMA)
    assert result.ok
    assert result.parameters.min_peaks == 25
    assert result.parameters.enzyme_type == 8
    assert result.report.overall_valid


def test_invalid_view_returns_report_without_parameters():
    view = to_view(CometParameters(), COMET_SCHEMA)
    view = view.with_value("min_peaks", "").with_value("lower_clear_mz_range", "5.0")
    view = view.with_value("upper_clear_mz_range", "1.0")
    result = from_view(view, COMET_SCHEMA)
    assert not result.ok
    assert result.parameters is None
    assert result.report.field_errors == {
        "min_peaks": "Minimum Number of Peaks is required",
    }
    assert [e.constraint_id for e in result.report.cross_field_errors] == [
        "clear_mz_range",
    ]


def test_disabled_field_that_does_not_parse_gets_the_default():
    view = to_view(XtandemParameters(use_refine=False), XTANDEM_SCHEMA)
    view = view.with_value("maximum_expectation_value_refinement", "n/a")
    result = from_view(view, XTANDEM_SCHEMA)
    assert result.ok
    assert result.parameters.maximum_expectation_value_refinement == (
        XTANDEM_SCHEMA.domain_default("maximum_expectation_value_refinement")
    )


def test_disabled_field_keeps_its_parsed_value():
    view = to_view(XtandemParameters(), XTANDEM_SCHEMA)
    view = view.with_value("max_e_value", "0.05")
    result = from_view(view, XTANDEM_SCHEMA)
    assert result.report.enabled["max_e_value"] is False
    assert result.parameters.max_e_value == 0.05


def test_empty_optional_field_becomes_none():
    view = to_view(SageParameters(max_fragment_charge=4), SAGE_SCHEMA)
    result = from_view(view.with_value("max_fragment_charge", ""), SAGE_SCHEMA)
    assert result.parameters.max_fragment_charge is None


def test_missing_view_entries_are_treated_as_empty():
    result = from_view(ViewState(), MSGF_SCHEMA)
    assert not result.ok
    assert set(result.report.field_errors) == set(MSGF_SCHEMA.field_ids)
