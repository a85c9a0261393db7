"""Sage parameter schema."""

from .algorithm_parameters import SageParameters
from .constants import (
    SECTION_DATABASE, SECTION_OUTPUT, SECTION_SEARCH, SECTION_SPECTRUM,
)
from .constraints import OrderedPair
from .data_model import EnumCodec, FieldDescriptor, FieldKind
from .enablement import enabled_when_not_equal
from .schema import ParameterSchema

SAGE_HELP = "https://github.com/lazear/sage/blob/master/DOCS.md"

# ``None`` disables isobaric quantification.
TMT_TYPE_CODEC = EnumCodec((
    (0, None), (1, "Tmt6"), (2, "Tmt10"), (3, "Tmt11"), (4, "Tmt16"), (5, "Tmt18"),
))
TMT_TYPE_LABELS = ("None", "TMT 6", "TMT 10", "TMT 11", "TMT 16", "TMT 18")

_F = FieldKind


def _number(field_id, kind, label, section, required=True):
    return FieldDescriptor(
        field_id, kind, label, required=required, non_negative=True,
        section=section, help_url=SAGE_HELP,
    )


def _yes_no(field_id, label, section):
    return FieldDescriptor(
        field_id, _F.BOOLEAN_CHOICE, label, section=section, help_url=SAGE_HELP,
    )


SAGE_SCHEMA = ParameterSchema(
    tool="Sage",
    parameter_type=SageParameters,
    help_url="https://github.com/lazear/sage",
    fields=(
        # ── Database processing ──────────────────────────────────────────
        _number("bucket_size", _F.INTEGER, "Fragment Bucket Size", SECTION_DATABASE),
        _number("min_peptide_length", _F.INTEGER, "Minimum Peptide Length", SECTION_DATABASE),
        _number("max_peptide_length", _F.INTEGER, "Maximum Peptide Length", SECTION_DATABASE),
        _number("min_fragment_mz", _F.REAL, "Minimum Fragment m/z", SECTION_DATABASE),
        _number("max_fragment_mz", _F.REAL, "Maximum Fragment m/z", SECTION_DATABASE),
        _number("min_peptide_mass", _F.REAL, "Minimum Peptide Mass", SECTION_DATABASE),
        _number("max_peptide_mass", _F.REAL, "Maximum Peptide Mass", SECTION_DATABASE),
        _number("min_ion_index", _F.INTEGER, "Minimum Ion Index", SECTION_DATABASE),
        _number("max_variable_mods", _F.INTEGER, "Maximum Variable Modifications", SECTION_DATABASE),
        _yes_no("generate_decoys", "Generate Decoys", SECTION_DATABASE),
        FieldDescriptor(
            "decoy_tag", _F.TEXT, "Decoy Tag",
            section=SECTION_DATABASE, help_url=SAGE_HELP,
        ),
        # ── Quantification ───────────────────────────────────────────────
        FieldDescriptor(
            "tmt_type", _F.ENUM, "TMT Type",
            codec=TMT_TYPE_CODEC, choices=TMT_TYPE_LABELS,
            section=SECTION_SEARCH, help_url=SAGE_HELP,
        ),
        _number("tmt_level", _F.INTEGER, "TMT MS Level", SECTION_SEARCH),
        _yes_no("tmt_sn", "TMT Signal to Noise", SECTION_SEARCH),
        _yes_no("perform_lfq", "Label Free Quantification", SECTION_SEARCH),
        # ── Spectrum processing ──────────────────────────────────────────
        _yes_no("deisotope", "Deisotope", SECTION_SPECTRUM),
        _yes_no("chimera", "Chimeric Spectra", SECTION_SPECTRUM),
        _yes_no("predict_rt", "Predict Retention Time", SECTION_SPECTRUM),
        _number("min_peaks", _F.INTEGER, "Minimum Number of Peaks", SECTION_SPECTRUM),
        _number("max_peaks", _F.INTEGER, "Maximum Number of Peaks", SECTION_SPECTRUM),
        _number("min_matched_peaks", _F.INTEGER, "Minimum Matched Peaks", SECTION_SPECTRUM),
        _number(
            "max_fragment_charge", _F.OPTIONAL_INTEGER, "Maximum Fragment Charge",
            SECTION_SPECTRUM, required=False,
        ),
        # ── Output ───────────────────────────────────────────────────────
        _number(
            "number_of_psms_per_spectrum", _F.INTEGER,
            "Number of PSMs per Spectrum", SECTION_OUTPUT,
        ),
        _yes_no("parallel_search", "Parallel Search", SECTION_OUTPUT),
    ),
    constraints=(
        OrderedPair("peptide_length", "min_peptide_length", "max_peptide_length"),
        OrderedPair("fragment_mz", "min_fragment_mz", "max_fragment_mz"),
        OrderedPair("peptide_mass", "min_peptide_mass", "max_peptide_mass"),
        OrderedPair("number_of_peaks", "min_peaks", "max_peaks"),
    ),
    rules=(
        enabled_when_not_equal("tmt_type", None, ("tmt_level", "tmt_sn")),
    ),
)
