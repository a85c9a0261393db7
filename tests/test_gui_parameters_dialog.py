"""Tests for the schema-driven parameter dialog (offscreen Qt)."""
import pytest

pytest.importorskip("PySide6.QtWidgets")

from search_param_editor.algorithm_parameters import (  # noqa: E402
    CometOutputFormat, CometParameters, XtandemParameters,
)
from search_param_editor.gui_parameters_dialog import (  # noqa: E402
    AlgorithmParametersDialog,
)
from search_param_editor.schema_comet import COMET_SCHEMA  # noqa: E402
from search_param_editor.schema_msgf import MSGF_SCHEMA  # noqa: E402
from search_param_editor.schema_xtandem import (  # noqa: E402
    REFINEMENT_FIELDS, XTANDEM_SCHEMA,
)
from search_param_editor.tool_registry import TOOL_SCHEMAS  # noqa: E402


@pytest.fixture
def comet_dialog(qapp):
    dialog = AlgorithmParametersDialog(COMET_SCHEMA, CometParameters())
    yield dialog
    dialog.deleteLater()


@pytest.mark.parametrize("schema", list(TOOL_SCHEMAS.values()), ids=list(TOOL_SCHEMAS))
def test_dialog_opens_valid_for_every_tool(qapp, schema):
    dialog = AlgorithmParametersDialog(schema)
    assert dialog.report.overall_valid
    assert dialog.ok_button.isEnabled()
    assert dialog.get_parameters() == schema.default_parameters()
    dialog.deleteLater()


def test_widgets_show_the_view_state(comet_dialog):
    assert comet_dialog.editor("min_peaks").text() == "10"
    assert comet_dialog.editor("enzyme_type").currentIndex() == 0
    assert comet_dialog.editor("enzyme_type").currentText() == "Full-enzyme"


def test_invalid_edit_disables_ok_and_marks_label(comet_dialog):
    comet_dialog.editor("min_peaks").setText("")

    assert not comet_dialog.ok_button.isEnabled()
    assert comet_dialog.view_state["min_peaks"] == ""
    assert comet_dialog.label("min_peaks").toolTip() == (
        "Minimum Number of Peaks is required"
    )

    comet_dialog.editor("min_peaks").setText("12")
    assert comet_dialog.ok_button.isEnabled()
    assert comet_dialog.label("min_peaks").toolTip() == (
        COMET_SCHEMA.field("min_peaks").help_url
    )


def test_ok_builds_new_parameters(comet_dialog):
    comet_dialog.editor("min_peaks").setText("12")
    comet_dialog.editor("enzyme_type").setCurrentIndex(2)
    comet_dialog.ok_button.click()

    assert not comet_dialog.is_cancelled()
    parameters = comet_dialog.get_parameters()
    assert parameters.min_peaks == 12
    assert parameters.enzyme_type == 8


def test_cancel_keeps_original_parameters(qapp):
    original = CometParameters(min_peaks=20)
    dialog = AlgorithmParametersDialog(COMET_SCHEMA, original)
    dialog.editor("min_peaks").setText("30")
    dialog.reject()
    assert dialog.is_cancelled()
    assert dialog.get_parameters() is original
    dialog.deleteLater()


def test_output_format_notice_and_expect_score(comet_dialog):
    assert not comet_dialog.editor("print_expect_score").isEnabled()
    comet_dialog.editor("output_format").setCurrentIndex(1)
    assert comet_dialog.editor("print_expect_score").isEnabled()
    assert comet_dialog.report.notices == (
        f"Note that the Comet {CometOutputFormat.SQT.value} format is not "
        f"compatible with PeptideShaker.",
    )
    assert comet_dialog.ok_button.isEnabled()


def test_cross_field_error_blocks_ok(comet_dialog):
    comet_dialog.editor("lower_clear_mz_range").setText("5.0")
    comet_dialog.editor("upper_clear_mz_range").setText("1.0")
    assert not comet_dialog.ok_button.isEnabled()
    assert "lower range value" in comet_dialog.label("upper_clear_mz_range").toolTip()


def test_refinement_toggle_enables_dependents(qapp):
    dialog = AlgorithmParametersDialog(
        XTANDEM_SCHEMA, XtandemParameters(use_refine=False),
    )
    assert not any(dialog.editor(f).isEnabled() for f in REFINEMENT_FIELDS)
    text = dialog.editor("maximum_expectation_value_refinement").text()

    dialog.editor("use_refine").setCurrentIndex(0)

    assert all(dialog.editor(f).isEnabled() for f in REFINEMENT_FIELDS)
    assert dialog.editor("maximum_expectation_value_refinement").text() == text
    dialog.deleteLater()


def test_view_only_dialog_cannot_confirm(qapp):
    dialog = AlgorithmParametersDialog(COMET_SCHEMA, editable=False)
    assert not dialog.ok_button.isEnabled()
    assert not any(
        dialog.editor(f).isEnabled() for f in COMET_SCHEMA.field_ids
    )
    assert "view only" in dialog.windowTitle()
    dialog.deleteLater()


def test_instrument_change_selects_fragmentation_method(qapp):
    dialog = AlgorithmParametersDialog(MSGF_SCHEMA)
    fragmentation = dialog.editor("fragmentation_type")
    assert fragmentation.currentText() == "HCD"

    dialog.editor("instrument_id").setCurrentIndex(2)
    assert fragmentation.currentText() == "Automatic"
    assert dialog.view_state["fragmentation_type"] == 0

    dialog.editor("instrument_id").setCurrentIndex(1)
    assert fragmentation.currentText() == "HCD"

    fragmentation.setCurrentIndex(2)
    dialog.ok_button.click()
    parameters = dialog.get_parameters()
    assert parameters.instrument_id == 1
    assert parameters.fragmentation_type == 2
    dialog.deleteLater()


def test_validity_changed_follows_the_report(comet_dialog):
    seen = []
    comet_dialog.validity_changed.connect(seen.append)

    comet_dialog.editor("min_peaks").setText("ten")
    comet_dialog.editor("min_peaks").setText("10")

    assert seen == [False, True]
