"""OMSSA parameter schema."""

from .algorithm_parameters import OmssaParameters
from .constants import (
    SECTION_DATABASE, SECTION_FRAGMENTS, SECTION_ITERATIVE, SECTION_OUTPUT,
    SECTION_SEARCH, SECTION_SPECTRUM,
)
from .constraints import OrderedPair
from .data_model import EnumCodec, FieldDescriptor, FieldKind
from .schema import ParameterSchema

OMSSA_HELP = "http://www.ncbi.nlm.nih.gov/CBBresearch/Yu/OMSSA/omssacl.htm"
OMSSA_OUTPUT_TYPES = ("OMX", "CSV")

_F = FieldKind


def _real(field_id, label, section):
    return FieldDescriptor(
        field_id, _F.REAL, label, non_negative=True, section=section,
        help_url=OMSSA_HELP,
    )


def _integer(field_id, label, section):
    return FieldDescriptor(
        field_id, _F.INTEGER, label, non_negative=True, section=section,
        help_url=OMSSA_HELP,
    )


def _yes_no(field_id, label, section, choices=()):
    return FieldDescriptor(
        field_id, _F.BOOLEAN_CHOICE, label, choices=choices, section=section,
        help_url=OMSSA_HELP,
    )


OMSSA_SCHEMA = ParameterSchema(
    tool="OMSSA",
    parameter_type=OmssaParameters,
    help_url="http://www.ncbi.nlm.nih.gov/CBBresearch/Yu/OMSSA",
    fields=(
        # ── Spectrum processing ──────────────────────────────────────────
        _real("low_intensity_cutoff", "Low Intensity Cutoff", SECTION_SPECTRUM),
        _real("high_intensity_cutoff", "High Intensity Cutoff", SECTION_SPECTRUM),
        _real("intensity_cutoff_increment", "Intensity Increment", SECTION_SPECTRUM),
        _integer("min_peaks", "Minimal Number of Peaks", SECTION_SPECTRUM),
        _integer(
            "min_precursors_per_spectrum", "Minimum Precursors per Spectrum",
            SECTION_SPECTRUM,
        ),
        _yes_no("remove_precursor", "Remove Precursor", SECTION_SPECTRUM),
        _yes_no("scale_precursor", "Scale Precursor Mass", SECTION_SPECTRUM),
        _yes_no(
            "estimate_charge", "Precursor Charge Estimation", SECTION_SPECTRUM,
            choices=("Use Range", "Believe Input File"),
        ),
        _real(
            "fraction_of_peaks_for_charge_estimation",
            "Fraction of Peaks below Precursor (Charge Estimation)",
            SECTION_SPECTRUM,
        ),
        _yes_no(
            "determine_charge_plus_one_algorithmically",
            "Plus One Charge Algorithmically", SECTION_SPECTRUM,
        ),
        _yes_no("search_positive_ions", "Search Positive Ions", SECTION_SPECTRUM),
        # ── Database processing ──────────────────────────────────────────
        _yes_no(
            "memory_mapped_sequence_libraries", "Memory Mapped Sequences",
            SECTION_DATABASE,
        ),
        _yes_no(
            "cleave_n_term_methionine", "Cleave N-term Methionine",
            SECTION_DATABASE,
        ),
        _integer("min_peptide_length", "Minimum Peptide Length", SECTION_DATABASE),
        _integer("max_peptide_length", "Maximum Peptide Length", SECTION_DATABASE),
        # ── Search settings ──────────────────────────────────────────────
        _real("max_e_value", "Maximal E-Value", SECTION_SEARCH),
        _integer("hitlist_length", "Hitlist Length", SECTION_SEARCH),
        _integer(
            "min_precursor_charge_multiply_charged_fragments",
            "Minimal Precursor Charge for Multiply Charged Fragments",
            SECTION_SEARCH,
        ),
        _real("neutron_threshold", "Mass Threshold to Consider Exact Neutron Mass", SECTION_SEARCH),
        _integer("single_charge_window", "Single Charge Window", SECTION_SEARCH),
        _integer("double_charge_window", "Double Charge Window", SECTION_SEARCH),
        _integer(
            "number_of_peaks_single_charge_window",
            "Number of Peaks in Single Charge Window", SECTION_SEARCH,
        ),
        _integer(
            "number_of_peaks_double_charge_window",
            "Number of Peaks in Double Charge Window", SECTION_SEARCH,
        ),
        _integer(
            "min_annotated_most_intense_peaks",
            "Minimum Number of Annotated Peaks among the Most Intense Ones",
            SECTION_SEARCH,
        ),
        _integer("min_annotated_peaks", "Minimum Number of Annotated Peaks", SECTION_SEARCH),
        _integer("hits_per_spectrum_per_charge", "Number of Hits per Spectrum per Charge", SECTION_SEARCH),
        # ── Fragment ions ────────────────────────────────────────────────
        _integer("max_m_h_ladders", "Maximum Number of m/z Ladders", SECTION_FRAGMENTS),
        _integer("max_fragment_charge", "Maximum Fragment Charge", SECTION_FRAGMENTS),
        _integer("max_fragments_per_series", "Maximum Number of Fragments per Series", SECTION_FRAGMENTS),
        _yes_no("search_forward_ions_first", "Search Forward Ions (b1) First", SECTION_FRAGMENTS),
        _yes_no("search_rewind_fragments", "Search Rewind (C-terminal) Ions", SECTION_FRAGMENTS),
        _yes_no(
            "use_correlation_correction_score", "Use Correlation Correction Score",
            SECTION_FRAGMENTS,
        ),
        _real("consecutive_ion_probability", "Consecutive Ion Probability", SECTION_FRAGMENTS),
        # ── Iterative search ─────────────────────────────────────────────
        _real("iterative_sequence_evalue", "Sequence E-value Cutoff", SECTION_ITERATIVE),
        _real("iterative_spectrum_evalue", "Spectrum E-value Cutoff", SECTION_ITERATIVE),
        _real("iterative_replace_evalue", "Replace E-value Cutoff", SECTION_ITERATIVE),
        # ── Output ───────────────────────────────────────────────────────
        FieldDescriptor(
            "selected_output", _F.ENUM, "Output Type",
            codec=EnumCodec.of(*OMSSA_OUTPUT_TYPES),
            section=SECTION_OUTPUT, help_url=OMSSA_HELP,
        ),
    ),
    constraints=(
        OrderedPair("peptide_length", "min_peptide_length", "max_peptide_length"),
        OrderedPair("intensity_cutoff", "low_intensity_cutoff", "high_intensity_cutoff"),
    ),
)
