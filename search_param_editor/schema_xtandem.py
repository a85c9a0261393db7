"""X!Tandem parameter schema."""

from .algorithm_parameters import XtandemParameters
from .constants import (
    MSG_CEILING, SECTION_OUTPUT, SECTION_REFINEMENT, SECTION_SEARCH,
    SECTION_SPECTRUM, XTANDEM_MAX_PTM_COMPLEXITY,
)
from .constraints import NumericCeiling
from .data_model import EnumCodec, FieldDescriptor, FieldKind
from .enablement import enabled_when_equal, enabled_when_not_equal
from .schema import ParameterSchema

XTANDEM_API = "http://www.thegpm.org/TANDEM/api"
XTANDEM_OUTPUT_RESULTS = ("all", "valid", "stochastic")

REFINEMENT_FIELDS = (
    "maximum_expectation_value_refinement",
    "refine_unanticipated_cleavages",
    "refine_semi",
    "potential_modifications_for_full_refinement",
    "refine_point_mutations",
    "refine_snaps",
    "refine_spectrum_synthesis",
)

_F = FieldKind


def _api(page):
    return f"{XTANDEM_API}/{page}.html"


XTANDEM_SCHEMA = ParameterSchema(
    tool="X!Tandem",
    parameter_type=XtandemParameters,
    help_url="http://www.thegpm.org/TANDEM",
    fields=(
        # ── Spectrum processing ──────────────────────────────────────────
        FieldDescriptor(
            "dynamic_range", _F.REAL, "Spectrum Dynamic Range",
            non_negative=True, section=SECTION_SPECTRUM, help_url=_api("sdr"),
        ),
        FieldDescriptor(
            "n_peaks", _F.INTEGER, "Number of Peaks",
            non_negative=True, section=SECTION_SPECTRUM, help_url=_api("stp"),
        ),
        FieldDescriptor(
            "min_fragment_mz", _F.REAL, "Minimum Fragment m/z",
            non_negative=True, section=SECTION_SPECTRUM, help_url=_api("smfmz"),
        ),
        FieldDescriptor(
            "min_peaks_per_spectrum", _F.INTEGER, "Minimum Number of Peaks",
            non_negative=True, section=SECTION_SPECTRUM, help_url=_api("smp"),
        ),
        FieldDescriptor(
            "use_noise_suppression", _F.BOOLEAN_CHOICE, "Noise Suppression",
            section=SECTION_SPECTRUM, help_url=_api("suns"),
        ),
        FieldDescriptor(
            "min_precursor_mass", _F.REAL, "Minimum Precursor Mass",
            non_negative=True, section=SECTION_SPECTRUM, help_url=_api("smpmh"),
        ),
        FieldDescriptor(
            "parent_mono_isotopic_mass_isotope_error", _F.BOOLEAN_CHOICE,
            "Parent Isotope Expansion",
            section=SECTION_SPECTRUM, help_url=_api("spmmie"),
        ),
        # ── Search settings ──────────────────────────────────────────────
        FieldDescriptor(
            "protein_quick_acetyl", _F.BOOLEAN_CHOICE, "Quick Acetyl",
            section=SECTION_SEARCH, help_url=_api("pqa"),
        ),
        FieldDescriptor(
            "quick_pyrolidone", _F.BOOLEAN_CHOICE, "Quick Pyrolidone",
            section=SECTION_SEARCH, help_url=_api("pqp"),
        ),
        FieldDescriptor(
            "stp_bias", _F.BOOLEAN_CHOICE, "Protein stP Bias",
            section=SECTION_SEARCH, help_url=_api("pstpb"),
        ),
        FieldDescriptor(
            "proteome_complexity", _F.REAL, "PTM Complexity",
            non_negative=True, section=SECTION_SEARCH,
            help_url="http://www.thegpm.org/TANDEM/release.html",
        ),
        # ── Refinement ───────────────────────────────────────────────────
        FieldDescriptor(
            "use_refine", _F.BOOLEAN_CHOICE, "Refinement",
            section=SECTION_REFINEMENT, help_url=_api("refine"),
        ),
        FieldDescriptor(
            "maximum_expectation_value_refinement", _F.REAL,
            "Maximum Valid Expectation Value",
            non_negative=True, section=SECTION_REFINEMENT,
            help_url=_api("refmvev"),
        ),
        FieldDescriptor(
            "refine_unanticipated_cleavages", _F.BOOLEAN_CHOICE,
            "Unanticipated Cleavages",
            section=SECTION_REFINEMENT, help_url=_api("ruc"),
        ),
        FieldDescriptor(
            "refine_semi", _F.BOOLEAN_CHOICE, "Semi Enzymatic Cleavage",
            section=SECTION_REFINEMENT, help_url=_api("rcsemi"),
        ),
        FieldDescriptor(
            "potential_modifications_for_full_refinement", _F.BOOLEAN_CHOICE,
            "Potential Modifications for Full Refinement",
            section=SECTION_REFINEMENT, help_url=_api("rupmffr"),
        ),
        FieldDescriptor(
            "refine_point_mutations", _F.BOOLEAN_CHOICE, "Point Mutations",
            section=SECTION_REFINEMENT, help_url=_api("rpm"),
        ),
        FieldDescriptor(
            "refine_snaps", _F.BOOLEAN_CHOICE, "snAPs",
            section=SECTION_REFINEMENT, help_url=_api("rsaps"),
        ),
        FieldDescriptor(
            "refine_spectrum_synthesis", _F.BOOLEAN_CHOICE, "Spectrum Synthesis",
            section=SECTION_REFINEMENT, help_url=_api("rss"),
        ),
        # ── Output ───────────────────────────────────────────────────────
        FieldDescriptor(
            "output_results", _F.ENUM, "Output Results",
            codec=EnumCodec.of(*XTANDEM_OUTPUT_RESULTS),
            section=SECTION_OUTPUT, help_url=_api("oresu"),
        ),
        FieldDescriptor(
            "max_e_value", _F.REAL, "E-value Cutoff",
            non_negative=True, section=SECTION_OUTPUT, help_url=_api("omvev"),
        ),
        FieldDescriptor(
            "output_proteins", _F.BOOLEAN_CHOICE, "Output Proteins",
            section=SECTION_OUTPUT, help_url=_api("oprot"),
        ),
        FieldDescriptor(
            "output_sequences", _F.BOOLEAN_CHOICE, "Output Sequences",
            section=SECTION_OUTPUT, help_url=_api("osequ"),
        ),
        FieldDescriptor(
            "output_spectra", _F.BOOLEAN_CHOICE, "Output Spectra",
            section=SECTION_OUTPUT, help_url=_api("ospec"),
        ),
        FieldDescriptor(
            "output_histograms", _F.BOOLEAN_CHOICE, "Output Histograms",
            section=SECTION_OUTPUT, help_url=_api("ohist"),
        ),
        FieldDescriptor(
            "skyline_path", _F.TEXT, "Skyline Path", required=False,
            section=SECTION_OUTPUT, help_url=_api("ssp"),
        ),
    ),
    constraints=(
        NumericCeiling(
            "ptm_complexity", "proteome_complexity", XTANDEM_MAX_PTM_COMPLEXITY,
            MSG_CEILING.format(
                label="PTM Complexity", ceiling=XTANDEM_MAX_PTM_COMPLEXITY,
            ),
        ),
    ),
    rules=(
        enabled_when_equal("use_refine", True, REFINEMENT_FIELDS),
        enabled_when_equal("use_noise_suppression", True, ("min_precursor_mass",)),
        enabled_when_equal(
            "output_proteins", True, ("output_sequences",), forced_value=False,
        ),
        enabled_when_not_equal("output_results", "all", ("max_e_value",)),
    ),
)
