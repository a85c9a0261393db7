"""Comet parameter schema."""

from .algorithm_parameters import CometOutputFormat, CometParameters
from .constants import (
    SECTION_FRAGMENTS, SECTION_OUTPUT, SECTION_SEARCH, SECTION_SPECTRUM,
)
from .constraints import Advisory, OrderedPair
from .data_model import EnumCodec, FieldDescriptor, FieldKind
from .enablement import enabled_when_equal
from .schema import ParameterSchema

COMET_HELP = "http://comet-ms.sourceforge.net/parameters/parameters_201601"

# Comet's search_enzyme_number codes in display order.
ENZYME_TYPE_CODEC = EnumCodec(((0, 2), (1, 1), (2, 8), (3, 9)))

_F = FieldKind

COMET_SCHEMA = ParameterSchema(
    tool="Comet",
    parameter_type=CometParameters,
    help_url="http://comet-ms.sourceforge.net",
    fields=(
        # ── Spectrum processing ──────────────────────────────────────────
        FieldDescriptor(
            "min_peaks", _F.INTEGER, "Minimum Number of Peaks",
            non_negative=True, section=SECTION_SPECTRUM,
            help_url=f"{COMET_HELP}/minimum_peaks.php",
        ),
        FieldDescriptor(
            "min_peak_intensity", _F.REAL, "Minimal Peak Intensity",
            non_negative=True, section=SECTION_SPECTRUM,
            help_url=f"{COMET_HELP}/minimum_intensity.php",
        ),
        FieldDescriptor(
            "remove_precursor_peak", _F.ENUM, "Remove Precursor Peak",
            codec=EnumCodec.of(0, 1, 2),
            choices=("No", "Yes", "Yes + Charge Reduced"),
            section=SECTION_SPECTRUM,
            help_url=f"{COMET_HELP}/remove_precursor_peak.php",
        ),
        FieldDescriptor(
            "remove_precursor_tolerance", _F.REAL,
            "Remove Precursor Peak Tolerance (Da)",
            non_negative=True, section=SECTION_SPECTRUM,
            help_url=f"{COMET_HELP}/remove_precursor_tolerance.php",
        ),
        FieldDescriptor(
            "lower_clear_mz_range", _F.REAL, "Clear m/z Range Lower",
            non_negative=True, section=SECTION_SPECTRUM,
            help_url=f"{COMET_HELP}/clear_mz_range.php",
        ),
        FieldDescriptor(
            "upper_clear_mz_range", _F.REAL, "Clear m/z Range Upper",
            non_negative=True, section=SECTION_SPECTRUM,
            help_url=f"{COMET_HELP}/clear_mz_range.php",
        ),
        # ── Search settings ──────────────────────────────────────────────
        FieldDescriptor(
            "enzyme_type", _F.ENUM, "Enzyme Type",
            codec=ENZYME_TYPE_CODEC,
            choices=(
                "Full-enzyme", "Semi-specific",
                "Unspecific Peptide C-term", "Unspecific Peptide N-term",
            ),
            section=SECTION_SEARCH,
            help_url=f"{COMET_HELP}/num_enzyme_termini.php",
        ),
        FieldDescriptor(
            "isotope_correction", _F.ENUM, "Isotope Correction",
            codec=EnumCodec.of(0, 1, 2),
            choices=(
                "No Correction", "-1, 0, +1, +2, and +3",
                "-8, -4, 0, +4 and +8",
            ),
            section=SECTION_SEARCH,
            help_url=f"{COMET_HELP}/isotope_error.php",
        ),
        FieldDescriptor(
            "min_precursor_mass", _F.REAL, "Minimum Precursor Mass",
            non_negative=True, section=SECTION_SEARCH,
            help_url=f"{COMET_HELP}/digest_mass_range.php",
        ),
        FieldDescriptor(
            "max_precursor_mass", _F.REAL, "Maximum Precursor Mass",
            non_negative=True, section=SECTION_SEARCH,
            help_url=f"{COMET_HELP}/digest_mass_range.php",
        ),
        FieldDescriptor(
            "max_variable_mods", _F.INTEGER, "Max Variable PTMs per Peptide",
            non_negative=True, section=SECTION_SEARCH,
            help_url=f"{COMET_HELP}/max_variable_mods_in_peptide.php",
        ),
        FieldDescriptor(
            "require_variable_mods", _F.BOOLEAN_CHOICE,
            "Require Variable PTMs", section=SECTION_SEARCH,
            help_url=f"{COMET_HELP}/require_variable_mod.php",
        ),
        FieldDescriptor(
            "remove_methionine", _F.BOOLEAN_CHOICE,
            "Remove Starting Methionine", section=SECTION_SEARCH,
            help_url=f"{COMET_HELP}/clip_nterm_methionine.php",
        ),
        FieldDescriptor(
            "number_of_spectrum_matches", _F.INTEGER,
            "Number of Spectrum Matches",
            non_negative=True, section=SECTION_SEARCH,
            help_url=f"{COMET_HELP}/num_results.php",
        ),
        # ── Fragment ions ────────────────────────────────────────────────
        FieldDescriptor(
            "max_fragment_charge", _F.INTEGER, "Max Fragment Charge",
            non_negative=True, section=SECTION_FRAGMENTS,
            help_url=f"{COMET_HELP}/max_fragment_charge.php",
        ),
        FieldDescriptor(
            "theoretical_fragment_ions_sum_only", _F.ENUM,
            "Correlation Score Type",
            codec=EnumCodec.of(False, True),
            choices=("Summed Intensities +  Flanking", "Summed Intensities"),
            section=SECTION_FRAGMENTS,
            help_url=f"{COMET_HELP}/theoretical_fragment_ions.php",
        ),
        FieldDescriptor(
            "fragment_bin_offset", _F.REAL, "Fragment Bin Offset",
            non_negative=True, section=SECTION_FRAGMENTS,
            help_url=f"{COMET_HELP}/fragment_bin_offset.php",
        ),
        FieldDescriptor(
            "batch_size", _F.INTEGER, "Spectrum Batch Size",
            non_negative=True, section=SECTION_FRAGMENTS,
            help_url=f"{COMET_HELP}/spectrum_batch_size.php",
        ),
        # ── Output ───────────────────────────────────────────────────────
        FieldDescriptor(
            "output_format", _F.ENUM, "Output Format",
            codec=EnumCodec.of(*CometOutputFormat),
            choices=tuple(fmt.value for fmt in CometOutputFormat),
            section=SECTION_OUTPUT,
            help_url=f"{COMET_HELP}/output_pepxmlfile.php",
        ),
        FieldDescriptor(
            "print_expect_score", _F.BOOLEAN_CHOICE, "Print Expect Score",
            section=SECTION_OUTPUT,
            help_url=f"{COMET_HELP}/print_expect_score.php",
        ),
    ),
    constraints=(
        OrderedPair("clear_mz_range", "lower_clear_mz_range", "upper_clear_mz_range"),
        OrderedPair("precursor_mass_range", "min_precursor_mass", "max_precursor_mass"),
    ),
    rules=(
        # The expect score replaces the sp score column of SQT files only.
        enabled_when_equal(
            "output_format", CometOutputFormat.SQT, ("print_expect_score",),
        ),
    ),
    advisories=(
        Advisory(
            "output_format_compatibility", "output_format",
            lambda fmt: fmt is not CometOutputFormat.PEP_XML,
            "Note that the Comet {value} format is not compatible with "
            "PeptideShaker.",
        ),
    ),
)
