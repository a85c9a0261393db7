"""
Schema-driven parameter dialog for the Search Parameter Editor.

One dialog class renders any ``ParameterSchema``: a group box per
section, a line edit per numeric or text field and a combo box per
choice field.  The widgets only collect edits into the dialog's
``ViewState``; after every edit the validation engine recomputes
enablement and errors, and OK is enabled only while the report is
valid.  ``from_view`` runs once, when OK is pressed.
"""

from PySide6.QtWidgets import (
    QDialog, QWidget, QVBoxLayout, QHBoxLayout, QFormLayout, QGroupBox,
    QLabel, QLineEdit, QComboBox, QPushButton, QScrollArea,
    QDialogButtonBox, QMessageBox,
)
from PySide6.QtGui import QDesktopServices
from PySide6.QtCore import Signal, QUrl

from . import APP_NAME
from .constants import DARK_COLORS
from .data_model import FieldDescriptor, ValidationReport, ViewState
from .mapper import apply_linked_values, from_view, to_view
from .schema import ParameterSchema
from .validation_engine import run


class AlgorithmParametersDialog(QDialog):
    """Edit the tool-specific parameters of one search engine.

    Parameters
    ----------
    schema : ParameterSchema
    parameters : object or None
        Instance of ``schema.parameter_type`` shown initially; the tool
        defaults when ``None``.
    editable : bool
        ``False`` opens the dialog view-only: every field is disabled
        and the parameters cannot be confirmed.
    """

    # Emitted after every validation pass with ``report.overall_valid``
    validity_changed = Signal(bool)

    def __init__(self, schema: ParameterSchema, parameters=None,
                 editable: bool = True, parent=None):
        super().__init__(parent)
        if parameters is None:
            parameters = schema.default_parameters()
        self._schema = schema
        self._editable = editable
        self._parameters = parameters
        self._cancelled = False
        self._view_state = to_view(parameters, schema)
        self._report = ValidationReport()

        self._labels = {}
        self._editors = {}

        mode = "" if editable else " (view only)"
        self.setWindowTitle(f"{schema.tool} Advanced Settings{mode} - {APP_NAME}")
        self.setMinimumSize(560, 600)

        self._setup_ui()
        self._populate()
        self._connect_signals()
        self._revalidate()

    # ── UI setup ─────────────────────────────────────────────────────

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(6)

        content = QWidget()
        content_layout = QVBoxLayout(content)
        content_layout.setSpacing(8)

        for section in self._schema.sections():
            grp = QGroupBox(section or self._schema.tool)
            form = QFormLayout(grp)
            form.setSpacing(4)
            for descriptor in self._schema.fields:
                if descriptor.section != section:
                    continue
                label = QLabel(descriptor.label)
                editor = self._create_editor(descriptor)
                form.addRow(label, editor)
                self._labels[descriptor.id] = label
                self._editors[descriptor.id] = editor
            content_layout.addWidget(grp)
        content_layout.addStretch()

        scroll = QScrollArea()
        scroll.setWidget(content)
        scroll.setWidgetResizable(True)
        layout.addWidget(scroll, 1)

        # Cross-field errors and advisories
        self._lbl_errors = QLabel("")
        self._lbl_errors.setWordWrap(True)
        self._lbl_errors.setStyleSheet(
            f"color: {DARK_COLORS['red']}; font-size: 11px;"
        )
        layout.addWidget(self._lbl_errors)

        self._lbl_notices = QLabel("")
        self._lbl_notices.setWordWrap(True)
        self._lbl_notices.setStyleSheet(
            f"color: {DARK_COLORS['yellow']}; font-size: 11px;"
        )
        layout.addWidget(self._lbl_notices)

        # ── Actions ──────────────────────────────────────────────────
        bottom = QHBoxLayout()
        self._btn_help = QPushButton(f"Open the {self._schema.tool} help page")
        self._btn_help.setFlat(True)
        self._btn_help.setVisible(bool(self._schema.help_url))
        bottom.addWidget(self._btn_help)
        bottom.addStretch()

        self._buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok
            | QDialogButtonBox.StandardButton.Cancel
        )
        bottom.addWidget(self._buttons)
        layout.addLayout(bottom)

    def _create_editor(self, descriptor: FieldDescriptor):
        if descriptor.kind.is_choice:
            combo = QComboBox()
            combo.addItems(list(descriptor.choices))
            return combo
        edit = QLineEdit()
        if not descriptor.required:
            edit.setPlaceholderText("(not set)")
        return edit

    def _populate(self):
        """Show the values of the current ViewState in the widgets."""
        for field_id, editor in self._editors.items():
            raw = self._view_state.get(field_id)
            if isinstance(editor, QComboBox):
                editor.setCurrentIndex(-1 if raw is None else int(raw))
            else:
                editor.setText("" if raw is None else str(raw))

    # ── Signal connections ───────────────────────────────────────────

    def _connect_signals(self):
        for field_id, editor in self._editors.items():
            if isinstance(editor, QComboBox):
                editor.currentIndexChanged.connect(
                    lambda index, f=field_id: self._on_edit(
                        f, None if index < 0 else index
                    )
                )
            else:
                editor.textChanged.connect(
                    lambda text, f=field_id: self._on_edit(f, text)
                )
        self._buttons.accepted.connect(self._on_ok)
        self._buttons.rejected.connect(self.reject)
        self._btn_help.clicked.connect(lambda *_: self._open_help())

    # ── Slot implementations ─────────────────────────────────────────

    def _on_edit(self, field_id, raw):
        previous = self._view_state.with_value(field_id, raw)
        self._view_state = apply_linked_values(previous, field_id, self._schema)
        for linked_id in self._schema.field_ids:
            if self._view_state.get(linked_id) == previous.get(linked_id):
                continue
            # Linked selections must not re-enter _on_edit
            editor = self._editors[linked_id]
            editor.blockSignals(True)
            editor.setCurrentIndex(self._view_state[linked_id])
            editor.blockSignals(False)
        self._revalidate()

    def _revalidate(self):
        """Recompute enablement and errors for the current ViewState."""
        report = run(self._view_state, self._schema, self._editable)
        self._report = report
        c = DARK_COLORS

        for descriptor in self._schema.fields:
            field_id = descriptor.id
            enabled = report.enabled.get(field_id, False)
            self._editors[field_id].setEnabled(enabled)
            label = self._labels[field_id]
            label.setEnabled(enabled)
            errors = report.errors_for(field_id)
            if errors:
                label.setStyleSheet(f"color: {c['red']};")
                label.setToolTip("\n".join(errors))
            else:
                label.setStyleSheet("")
                label.setToolTip(descriptor.help_url or "")

        self._lbl_errors.setText(
            "\n".join(err.message for err in report.cross_field_errors)
        )
        self._lbl_notices.setText("\n".join(report.notices))

        self.ok_button.setEnabled(self._editable and report.overall_valid)
        self.validity_changed.emit(report.overall_valid)

    def _on_ok(self):
        if not self._editable:
            return
        result = from_view(self._view_state, self._schema)
        if not result.ok:
            self._revalidate()
            QMessageBox.warning(
                self, "Input Error",
                "Please correct the highlighted values:\n\n"
                + "\n".join(result.report.field_errors.values()),
            )
            return
        self._parameters = result.parameters
        self._cancelled = False
        self.accept()

    def reject(self):
        """Cancel, close button and Escape all discard the edits."""
        self._cancelled = True
        super().reject()

    def _open_help(self):
        QDesktopServices.openUrl(QUrl(self._schema.help_url))

    # ── Public API ───────────────────────────────────────────────────

    def is_cancelled(self) -> bool:
        """``True`` when the dialog was closed without confirming."""
        return self._cancelled

    def get_parameters(self):
        """The confirmed parameters, or the initial ones if not confirmed."""
        return self._parameters

    @property
    def view_state(self) -> ViewState:
        return self._view_state

    @property
    def report(self) -> ValidationReport:
        """Report of the latest validation pass."""
        return self._report

    @property
    def ok_button(self) -> QPushButton:
        return self._buttons.button(QDialogButtonBox.StandardButton.Ok)

    def editor(self, field_id: str) -> QWidget:
        """The input widget of ``field_id`` (``KeyError`` if unknown)."""
        return self._editors[field_id]

    def label(self, field_id: str) -> QLabel:
        return self._labels[field_id]
