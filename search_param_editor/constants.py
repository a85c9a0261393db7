"""
Constants for the Search Parameter Editor.

Centralises message templates, choice labels shared by several tools,
numeric limits, font families and the dark GUI colour palette.
"""

# ── Field error message templates (``{label}`` is the field label) ──────
MSG_REQUIRED = "{label} is required"
MSG_NOT_INTEGER = "{label} must be an integer"
MSG_NOT_NUMBER = "{label} must be a number"
MSG_NEGATIVE = "{label} must not be negative"
MSG_NO_OPTION = "{label} has no option at index {index}"

# ── Cross-field message templates ────────────────────────────────────────
MSG_RANGE_ORDER = (
    "the lower range value has to be smaller than the upper range value."
)
MSG_CEILING = "{label} must not be larger than {ceiling}"

# ── Boolean choice convention: index 0 is always the affirmative ─────────
BOOLEAN_TRUE_INDEX = 0
BOOLEAN_FALSE_INDEX = 1
YES_NO = ("Yes", "No")

# ── Numeric limits ──────────────────────────────────────────────────────
XTANDEM_MAX_PTM_COMPLEXITY = 12.0

# ── Dialog section names (display grouping only) ────────────────────────
SECTION_SPECTRUM = "Spectrum Processing"
SECTION_SEARCH = "Search Settings"
SECTION_FRAGMENTS = "Fragment Ions"
SECTION_DATABASE = "Database Processing"
SECTION_ITERATIVE = "Iterative Search"
SECTION_REFINEMENT = "Refinement"
SECTION_OUTPUT = "Output"
SECTION_DECONVOLUTION = "Deconvolution"

# ── Font family fallback chain ──────────────────────────────────────────
FONT_FAMILIES = [
    "Segoe UI", "DejaVu Sans", "Liberation Sans", "Noto Sans",
    "Ubuntu", "Helvetica", "Arial", "sans-serif",
]

# ── Dark Catppuccin-inspired GUI colour palette ──────────────────────────
DARK_COLORS = {
    'bg':           '#1e1e2e',
    'bg_alt':       '#252536',
    'surface0':     '#313244',
    'bg_widget':    '#2a2a3c',
    'bg_input':     '#333348',
    'fg':           '#cdd6f4',
    'fg_dim':       '#9399b2',
    'fg_bright':    '#ffffff',
    'accent':       '#89b4fa',
    'accent_hover': '#74c7ec',
    'green':        '#a6e3a1',
    'yellow':       '#f9e2af',
    'red':          '#f38ba8',
    'border':       '#45475a',
    'selection':    '#45475a',
}
