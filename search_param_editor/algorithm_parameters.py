"""
Tool-specific search parameter objects.

One frozen dataclass per search engine.  Every attribute has a default
so that ``ParameterType()`` yields the engine's recommended settings and
``from_view`` can build a new instance from keyword arguments alone.
Codes such as Comet's enzyme type are stored exactly as the engine's
own configuration file expects them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class _LabelledEnum(Enum):
    """Enum whose ``str()`` is its display value."""

    def __str__(self):
        return str(self.value)


# ── Comet ────────────────────────────────────────────────────────────────

class CometOutputFormat(_LabelledEnum):
    PEP_XML = "PepXML"
    SQT = "SQT"
    TXT = "TXT"
    PERCOLATOR = "Percolator"


@dataclass(frozen=True)
class CometParameters:
    """Comet settings.

    ``enzyme_type`` uses Comet's ``search_enzyme_number`` codes
    (2 full, 1 semi, 8 unspecific C-term, 9 unspecific N-term) and
    ``remove_precursor_peak`` Comet's 0/1/2 codes.
    """
    min_peaks: int = 10
    min_peak_intensity: float = 0.0
    remove_precursor_peak: int = 0
    remove_precursor_tolerance: float = 1.5
    lower_clear_mz_range: float = 0.0
    upper_clear_mz_range: float = 0.0
    enzyme_type: int = 2
    isotope_correction: int = 0
    min_precursor_mass: float = 600.0
    max_precursor_mass: float = 5000.0
    max_variable_mods: int = 10
    require_variable_mods: bool = False
    remove_methionine: bool = False
    number_of_spectrum_matches: int = 10
    max_fragment_charge: int = 3
    theoretical_fragment_ions_sum_only: bool = False
    fragment_bin_offset: float = 0.0
    batch_size: int = 0
    output_format: CometOutputFormat = CometOutputFormat.PEP_XML
    print_expect_score: bool = True


# ── MetaMorpheus ─────────────────────────────────────────────────────────

class MetaMorpheusSearchType(_LabelledEnum):
    CLASSIC = "Classic"
    MODERN = "Modern"
    NON_SPECIFIC = "NonSpecific"


class MetaMorpheusDissociationType(_LabelledEnum):
    HCD = "HCD"
    CID = "CID"
    ECD = "ECD"
    ETD = "ETD"
    ETHCD = "EThcD"
    AUTODETECT = "Autodetect"


class MetaMorpheusInitiatorMethionine(_LabelledEnum):
    UNDEFINED = "Undefined"
    RETAIN = "Retain"
    CLEAVE = "Cleave"
    VARIABLE = "Variable"


class MetaMorpheusMassDiffAcceptor(_LabelledEnum):
    EXACT = "Exact"
    ONE_MM = "OneMM"
    TWO_MM = "TwoMM"
    THREE_MM = "ThreeMM"
    PLUS_OR_MINUS_THREE_MM = "PlusOrMinusThreeMM"
    MOD_OPEN = "ModOpen"
    OPEN = "Open"
    CUSTOM = "Custom"


class MetaMorpheusToleranceType(_LabelledEnum):
    PPM = "PPM"
    ABSOLUTE = "Absolute"


class MetaMorpheusFragmentationTerminus(_LabelledEnum):
    BOTH = "Both"
    N = "N"
    C = "C"
    NONE = "None"


class MetaMorpheusDecoyType(_LabelledEnum):
    NONE = "None"
    REVERSE = "Reverse"
    SLIDE = "Slide"


@dataclass(frozen=True)
class MetaMorpheusParameters:
    """MetaMorpheus search, deconvolution and G-PTM task settings."""
    search_type: MetaMorpheusSearchType = MetaMorpheusSearchType.CLASSIC
    total_partitions: int = 1
    dissociation_type: MetaMorpheusDissociationType = MetaMorpheusDissociationType.HCD
    max_mods_per_peptide: int = 2
    initiator_methionine: MetaMorpheusInitiatorMethionine = (
        MetaMorpheusInitiatorMethionine.VARIABLE
    )
    score_cutoff: float = 5.0
    use_delta_score: bool = False
    fragmentation_terminus: MetaMorpheusFragmentationTerminus = (
        MetaMorpheusFragmentationTerminus.BOTH
    )
    max_fragment_size: float = 30000.0
    mass_diff_acceptor: MetaMorpheusMassDiffAcceptor = MetaMorpheusMassDiffAcceptor.ONE_MM
    min_peptide_length: int = 8
    max_peptide_length: int = 30
    max_modification_isoforms: int = 1024
    decoy_type: MetaMorpheusDecoyType = MetaMorpheusDecoyType.REVERSE
    search_target: bool = True
    min_variant_depth: int = 1
    max_heterozygous_variants: int = 4
    use_provided_precursor: bool = True
    do_precursor_deconvolution: bool = True
    deconvolution_intensity_ratio: float = 3.0
    deconvolution_mass_tolerance: float = 4.0
    deconvolution_mass_tolerance_type: MetaMorpheusToleranceType = (
        MetaMorpheusToleranceType.PPM
    )
    trim_ms1_peaks: bool = False
    trim_msms_peaks: bool = True
    number_of_peaks_to_keep_per_window: int = 200
    min_allowed_intensity_ratio_to_base_peak: float = 0.01
    window_width_thomsons: Optional[float] = None
    number_of_windows: Optional[int] = None
    normalize_peaks_across_all_windows: bool = False
    mod_peptides_are_different: bool = False
    no_one_hit_wonders: bool = False
    write_mzid: bool = True
    write_pepxml: bool = False
    run_gptm: bool = False


# ── OMSSA ────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class OmssaParameters:
    """OMSSA settings; ``selected_output`` is ``"OMX"`` or ``"CSV"``."""
    low_intensity_cutoff: float = 0.0
    high_intensity_cutoff: float = 0.2
    intensity_cutoff_increment: float = 0.0005
    min_peaks: int = 4
    min_precursors_per_spectrum: int = 1
    remove_precursor: bool = False
    scale_precursor: bool = True
    estimate_charge: bool = True
    fraction_of_peaks_for_charge_estimation: float = 0.95
    determine_charge_plus_one_algorithmically: bool = True
    search_positive_ions: bool = True
    memory_mapped_sequence_libraries: bool = False
    cleave_n_term_methionine: bool = True
    min_peptide_length: int = 6
    max_peptide_length: int = 40
    max_e_value: float = 100.0
    hitlist_length: int = 10
    min_precursor_charge_multiply_charged_fragments: int = 3
    neutron_threshold: float = 1446.94
    single_charge_window: int = 27
    double_charge_window: int = 14
    number_of_peaks_single_charge_window: int = 2
    number_of_peaks_double_charge_window: int = 2
    min_annotated_most_intense_peaks: int = 6
    min_annotated_peaks: int = 2
    max_m_h_ladders: int = 128
    max_fragment_charge: int = 2
    max_fragments_per_series: int = 100
    search_forward_ions_first: bool = False
    search_rewind_fragments: bool = True
    use_correlation_correction_score: bool = True
    consecutive_ion_probability: float = 0.5
    hits_per_spectrum_per_charge: int = 30
    iterative_sequence_evalue: float = 0.0
    iterative_spectrum_evalue: float = 0.01
    iterative_replace_evalue: float = 0.0
    selected_output: str = "OMX"


# ── X!Tandem ─────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class XtandemParameters:
    """X!Tandem settings; ``output_results`` is ``all``, ``valid`` or ``stochastic``."""
    dynamic_range: float = 100.0
    n_peaks: int = 50
    min_fragment_mz: float = 200.0
    min_peaks_per_spectrum: int = 5
    use_noise_suppression: bool = False
    min_precursor_mass: float = 500.0
    parent_mono_isotopic_mass_isotope_error: bool = False
    protein_quick_acetyl: bool = True
    quick_pyrolidone: bool = True
    stp_bias: bool = False
    use_refine: bool = True
    maximum_expectation_value_refinement: float = 0.01
    refine_unanticipated_cleavages: bool = True
    refine_semi: bool = False
    potential_modifications_for_full_refinement: bool = False
    refine_point_mutations: bool = False
    refine_snaps: bool = True
    refine_spectrum_synthesis: bool = True
    max_e_value: float = 0.01
    output_results: str = "all"
    output_proteins: bool = True
    output_sequences: bool = False
    output_spectra: bool = True
    output_histograms: bool = False
    skyline_path: Optional[str] = None
    proteome_complexity: float = 6.0


# ── Sage ─────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class SageParameters:
    """Sage settings; ``tmt_type`` is ``None`` or a Sage label name such as ``"Tmt16"``."""
    bucket_size: int = 32768
    min_peptide_length: int = 8
    max_peptide_length: int = 30
    min_fragment_mz: float = 200.0
    max_fragment_mz: float = 2000.0
    min_peptide_mass: float = 600.0
    max_peptide_mass: float = 5000.0
    min_ion_index: int = 2
    max_variable_mods: int = 2
    generate_decoys: bool = False
    decoy_tag: str = "_REVERSED"
    tmt_type: Optional[str] = None
    tmt_level: int = 3
    tmt_sn: bool = False
    perform_lfq: bool = False
    deisotope: bool = False
    chimera: bool = False
    predict_rt: bool = True
    min_peaks: int = 15
    max_peaks: int = 150
    min_matched_peaks: int = 4
    max_fragment_charge: Optional[int] = None
    number_of_psms_per_spectrum: int = 1
    parallel_search: bool = True


# ── MS-GF+ ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class MsgfParameters:
    """MS-GF+ settings using the ``-inst``, ``-m``, ``-protocol`` and ``-ntt`` codes."""
    search_decoy_database: bool = False
    instrument_id: int = 3
    fragmentation_type: int = 3
    protocol: int = 0
    min_peptide_length: int = 8
    max_peptide_length: int = 30
    number_of_spectrum_matches: int = 10
    additional_output: bool = False
    number_tolerable_termini: int = 2
    number_of_ptms: int = 2
