"""MS-GF+ parameter schema."""

from .algorithm_parameters import MsgfParameters
from .constants import SECTION_OUTPUT, SECTION_SEARCH
from .constraints import OrderedPair
from .data_model import EnumCodec, FieldDescriptor, FieldKind
from .enablement import linked_when_in
from .schema import ParameterSchema

MSGF_HELP = "https://msgfplus.github.io/msgfplus/MSGFPlus.html"

MSGF_INSTRUMENTS = ("Low-res LCQ/LTQ", "Orbitrap/FTICR", "TOF", "Q-Exactive")
MSGF_FRAGMENTATION = ("Automatic", "CID", "ETD", "HCD")
MSGF_PROTOCOLS = (
    "Automatic", "Phosphorylation", "iTRAQ", "iTRAQPhospho", "TMT", "Standard",
)
MSGF_TERMINI = ("None Required", "At Least One", "Both")

# Instruments searched with HCD spectra: Orbitrap/FTICR and Q-Exactive
HCD_INSTRUMENTS = (1, 3)
FRAGMENTATION_AUTOMATIC = 0
FRAGMENTATION_HCD = 3

_F = FieldKind


def _coded(field_id, label, labels, section=SECTION_SEARCH):
    """Enum field whose domain value is the option's MS-GF+ command line code."""
    return FieldDescriptor(
        field_id, _F.ENUM, label,
        codec=EnumCodec.of(*range(len(labels))), choices=labels,
        section=section, help_url=MSGF_HELP,
    )


MSGF_SCHEMA = ParameterSchema(
    tool="MS-GF+",
    parameter_type=MsgfParameters,
    help_url="https://github.com/MSGFPlus/msgfplus",
    fields=(
        FieldDescriptor(
            "search_decoy_database", _F.BOOLEAN_CHOICE, "Search Decoy Database",
            section=SECTION_SEARCH, help_url=MSGF_HELP,
        ),
        _coded("instrument_id", "Instrument", MSGF_INSTRUMENTS),
        _coded("fragmentation_type", "Fragmentation Method", MSGF_FRAGMENTATION),
        _coded("protocol", "Protocol", MSGF_PROTOCOLS),
        FieldDescriptor(
            "min_peptide_length", _F.INTEGER, "Minimum Peptide Length",
            non_negative=True, section=SECTION_SEARCH, help_url=MSGF_HELP,
        ),
        FieldDescriptor(
            "max_peptide_length", _F.INTEGER, "Maximum Peptide Length",
            non_negative=True, section=SECTION_SEARCH, help_url=MSGF_HELP,
        ),
        _coded("number_tolerable_termini", "Enzymatic Termini", MSGF_TERMINI),
        FieldDescriptor(
            "number_of_ptms", _F.INTEGER, "Max Variable PTMs per Peptide",
            non_negative=True, section=SECTION_SEARCH, help_url=MSGF_HELP,
        ),
        FieldDescriptor(
            "number_of_spectrum_matches", _F.INTEGER, "Number of Spectrum Matches",
            non_negative=True, section=SECTION_OUTPUT, help_url=MSGF_HELP,
        ),
        FieldDescriptor(
            "additional_output", _F.BOOLEAN_CHOICE, "Additional Output",
            section=SECTION_OUTPUT, help_url=MSGF_HELP,
        ),
    ),
    constraints=(
        OrderedPair("peptide_length", "min_peptide_length", "max_peptide_length"),
    ),
    links=(
        linked_when_in(
            "instrument_id", HCD_INSTRUMENTS, "fragmentation_type",
            FRAGMENTATION_HCD, FRAGMENTATION_AUTOMATIC,
        ),
    ),
)
