"""
Theme and stylesheet for the Search Parameter Editor.

The dark stylesheet covers only the widgets the parameter dialog
builds: section group boxes inside a scroll area, line edits and combo
boxes for the fields, field labels, and the help and OK/Cancel buttons.
"""

from .constants import DARK_COLORS


def get_dark_stylesheet() -> str:
    """Generate the dark mode stylesheet for the parameter dialogs."""
    c = DARK_COLORS
    return f"""
    QDialog, QScrollArea > QWidget > QWidget {{
        background-color: {c['bg']};
        color: {c['fg']};
        font-size: 13px;
    }}
    QScrollArea {{
        border: 1px solid {c['surface0']};
    }}

    /* One group box per parameter section */
    QGroupBox {{
        border: 1px solid {c['border']};
        border-radius: 5px;
        margin-top: 14px;
        padding: 14px 8px 6px 8px;
        color: {c['accent']};
        font-weight: bold;
    }}
    QGroupBox::title {{
        subcontrol-origin: margin;
        left: 10px;
        padding: 0 4px;
    }}

    /* Field labels; disabled ones follow their editor */
    QLabel {{ color: {c['fg']}; }}
    QLabel:disabled {{ color: {c['fg_dim']}; }}

    /* Field editors */
    QLineEdit, QComboBox {{
        background-color: {c['bg_input']};
        color: {c['fg']};
        border: 1px solid {c['border']};
        border-radius: 3px;
        padding: 3px 6px;
        min-width: 160px;
    }}
    QLineEdit:focus, QComboBox:focus {{ border-color: {c['accent']}; }}
    QLineEdit:disabled, QComboBox:disabled {{
        background-color: {c['surface0']};
        color: {c['fg_dim']};
        border-style: dashed;
    }}
    QComboBox QAbstractItemView {{
        background-color: {c['bg_widget']};
        selection-background-color: {c['selection']};
    }}

    /* OK / Cancel and the help link */
    QDialogButtonBox QPushButton {{
        background-color: {c['bg_widget']};
        color: {c['fg']};
        border: 1px solid {c['border']};
        border-radius: 3px;
        padding: 5px 18px;
        min-width: 70px;
    }}
    QDialogButtonBox QPushButton:hover {{ border-color: {c['accent']}; }}
    QDialogButtonBox QPushButton:disabled {{ color: {c['fg_dim']}; }}
    QPushButton:flat {{
        border: none;
        color: {c['accent']};
        text-decoration: underline;
    }}
    QPushButton:flat:hover {{ color: {c['accent_hover']}; }}

    /* Help URLs and validation messages on field labels */
    QToolTip {{
        background-color: {c['bg_widget']};
        color: {c['fg']};
        border: 1px solid {c['accent']};
        padding: 4px;
    }}
    """
