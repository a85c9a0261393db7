"""MetaMorpheus parameter schema.

The G-PTM modification category table of the MetaMorpheus dialog is a
table editor, not a field, and is not part of this schema.
"""

from .algorithm_parameters import (
    MetaMorpheusDecoyType, MetaMorpheusDissociationType,
    MetaMorpheusFragmentationTerminus, MetaMorpheusInitiatorMethionine,
    MetaMorpheusMassDiffAcceptor, MetaMorpheusParameters,
    MetaMorpheusSearchType, MetaMorpheusToleranceType,
)
from .constants import (
    SECTION_DECONVOLUTION, SECTION_FRAGMENTS, SECTION_OUTPUT, SECTION_SEARCH,
    SECTION_SPECTRUM,
)
from .constraints import OrderedPair
from .data_model import EnumCodec, FieldDescriptor, FieldKind
from .schema import ParameterSchema

METAMORPHEUS_HELP = "https://github.com/smith-chem-wisc/MetaMorpheus/wiki"

_F = FieldKind


def _choice(field_id, enum_type, label, section):
    return FieldDescriptor(
        field_id, _F.ENUM, label,
        codec=EnumCodec.of(*enum_type),
        choices=tuple(member.value for member in enum_type),
        section=section, help_url=METAMORPHEUS_HELP,
    )


def _number(field_id, kind, label, section, non_negative=True):
    return FieldDescriptor(
        field_id, kind, label, required=not kind.is_optional,
        non_negative=non_negative, section=section,
        help_url=METAMORPHEUS_HELP,
    )


def _yes_no(field_id, label, section):
    return FieldDescriptor(
        field_id, _F.BOOLEAN_CHOICE, label, section=section,
        help_url=METAMORPHEUS_HELP,
    )


METAMORPHEUS_SCHEMA = ParameterSchema(
    tool="MetaMorpheus",
    parameter_type=MetaMorpheusParameters,
    help_url=METAMORPHEUS_HELP,
    fields=(
        # ── Search settings ──────────────────────────────────────────────
        _choice("search_type", MetaMorpheusSearchType, "Search Type", SECTION_SEARCH),
        _number("total_partitions", _F.INTEGER, "Number of Partitions", SECTION_SEARCH),
        _choice(
            "dissociation_type", MetaMorpheusDissociationType,
            "Dissociation Type", SECTION_SEARCH,
        ),
        # Negative values mean "no limit" to MetaMorpheus.
        _number(
            "max_mods_per_peptide", _F.INTEGER,
            "Maximum Number of Modifications per Peptide", SECTION_SEARCH,
            non_negative=False,
        ),
        _choice(
            "initiator_methionine", MetaMorpheusInitiatorMethionine,
            "Initiator Methionine Behavior", SECTION_SEARCH,
        ),
        _number("score_cutoff", _F.REAL, "Score Cut-off", SECTION_SEARCH),
        _yes_no("use_delta_score", "Use Delta Score", SECTION_SEARCH),
        _choice(
            "mass_diff_acceptor", MetaMorpheusMassDiffAcceptor,
            "Mass Difference Acceptor Type", SECTION_SEARCH,
        ),
        _number("min_peptide_length", _F.INTEGER, "Minimum Peptide Length", SECTION_SEARCH),
        _number("max_peptide_length", _F.INTEGER, "Maximum Peptide Length", SECTION_SEARCH),
        _number(
            "max_modification_isoforms", _F.INTEGER, "Max Modification Isoforms",
            SECTION_SEARCH,
        ),
        _yes_no("search_target", "Search Target", SECTION_SEARCH),
        _choice("decoy_type", MetaMorpheusDecoyType, "Decoy Type", SECTION_SEARCH),
        _number("min_variant_depth", _F.INTEGER, "Min Variant Depth", SECTION_SEARCH),
        _number(
            "max_heterozygous_variants", _F.INTEGER, "Max Heterozygous Variants",
            SECTION_SEARCH,
        ),
        _yes_no("mod_peptides_are_different", "Modified Peptides Are Different", SECTION_SEARCH),
        _yes_no("no_one_hit_wonders", "Exclude One Hit Wonders", SECTION_SEARCH),
        _yes_no("run_gptm", "Run G-PTM Search", SECTION_SEARCH),
        # ── Fragment ions ────────────────────────────────────────────────
        _choice(
            "fragmentation_terminus", MetaMorpheusFragmentationTerminus,
            "Fragmentation Terminus", SECTION_FRAGMENTS,
        ),
        _number("max_fragment_size", _F.REAL, "Max Fragment Size", SECTION_FRAGMENTS),
        # ── Deconvolution ────────────────────────────────────────────────
        _yes_no("use_provided_precursor", "Use Provided Precursor Info", SECTION_DECONVOLUTION),
        _yes_no("do_precursor_deconvolution", "Do Precursor Deconvolution", SECTION_DECONVOLUTION),
        _number(
            "deconvolution_intensity_ratio", _F.REAL,
            "Deconvolution Intensity Ratio", SECTION_DECONVOLUTION,
        ),
        _number(
            "deconvolution_mass_tolerance", _F.REAL,
            "Deconvolution Mass Tolerance", SECTION_DECONVOLUTION,
        ),
        _choice(
            "deconvolution_mass_tolerance_type", MetaMorpheusToleranceType,
            "Deconvolution Mass Tolerance Type", SECTION_DECONVOLUTION,
        ),
        # ── Spectrum processing ──────────────────────────────────────────
        _yes_no("trim_ms1_peaks", "Trim MS1 Peaks", SECTION_SPECTRUM),
        _yes_no("trim_msms_peaks", "Trim MSMS Peaks", SECTION_SPECTRUM),
        _number(
            "number_of_peaks_to_keep_per_window", _F.INTEGER,
            "Number of Peaks to Keep per Window", SECTION_SPECTRUM,
        ),
        _number(
            "min_allowed_intensity_ratio_to_base_peak", _F.REAL,
            "Minimum Allowed Intensity Ratio to Base Peak", SECTION_SPECTRUM,
        ),
        _number(
            "window_width_thomsons", _F.OPTIONAL_REAL, "Window Width in Thomson",
            SECTION_SPECTRUM,
        ),
        _number(
            "number_of_windows", _F.OPTIONAL_INTEGER, "Number of Windows",
            SECTION_SPECTRUM,
        ),
        _yes_no(
            "normalize_peaks_across_all_windows",
            "Normalize Peaks Across All Windows", SECTION_SPECTRUM,
        ),
        # ── Output ───────────────────────────────────────────────────────
        _yes_no("write_mzid", "Write mzIdentML", SECTION_OUTPUT),
        _yes_no("write_pepxml", "Write pepXML", SECTION_OUTPUT),
    ),
    constraints=(
        OrderedPair("peptide_length", "min_peptide_length", "max_peptide_length"),
    ),
)
