"""
Validation engine for the Search Parameter Editor.

One validation pass is two steps:

1. parse every field with ``validate_field``;
2. run every cross-field constraint over the values that parsed.

Fields disabled by a conditional enablement rule are not checked at
all.  ``run`` performs the pass without building a parameter object
and is what a dialog calls after every edit; ``from_view`` in
``mapper`` calls the same ``evaluate`` and therefore always reports the
same errors for the same ``ViewState``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .data_model import FieldError, ValidationReport, ViewState
from .enablement import evaluate_enablement
from .field_validator import validate_field
from .schema import ParameterSchema


@dataclass(frozen=True)
class ValidationPass:
    """Everything one pass produced, shared by ``run`` and ``from_view``.

    Parameters
    ----------
    report : ValidationReport
    parsed : dict
        ``{field_id: value}`` for every field that parsed, enabled or
        not (absent optional fields map to ``None``).
    active : dict
        ``{field_id: bool}`` conditional enablement, ignoring view-only
        mode.  Inactive fields were not validated.
    """
    report: ValidationReport
    parsed: Dict[str, Any] = field(default_factory=dict)
    active: Dict[str, bool] = field(default_factory=dict)


def evaluate(
    view_state: ViewState,
    schema: ParameterSchema,
    global_editable: bool = True,
) -> ValidationPass:
    """Parse and constrain a complete ``ViewState``."""
    parsed: Dict[str, Any] = {}
    failures: Dict[str, FieldError] = {}
    for descriptor in schema.fields:
        outcome = validate_field(view_state.get(descriptor.id), descriptor)
        if isinstance(outcome, FieldError):
            failures[descriptor.id] = outcome
        else:
            parsed[descriptor.id] = outcome.value

    active = evaluate_enablement(parsed, schema.rules, schema.field_ids)
    if global_editable:
        enabled = dict(active)
    else:
        enabled = evaluate_enablement(
            parsed, schema.rules, schema.field_ids, global_editable=False,
        )

    field_errors = {
        field_id: failure.message
        for field_id, failure in failures.items()
        if active[field_id]
    }
    checked = {
        field_id: value for field_id, value in parsed.items()
        if active[field_id]
    }

    cross_field_errors = []
    for constraint in schema.constraints:
        error = constraint.check(checked)
        if error is not None:
            cross_field_errors.append(error)

    notices: List[str] = []
    for advisory in schema.advisories:
        notice = advisory.notice(checked)
        if notice is not None:
            notices.append(notice)

    report = ValidationReport(
        field_errors=field_errors,
        cross_field_errors=tuple(cross_field_errors),
        enabled=enabled,
        notices=tuple(notices),
    )
    return ValidationPass(report=report, parsed=parsed, active=active)


def run(
    view_state: ViewState,
    schema: ParameterSchema,
    global_editable: bool = True,
) -> ValidationReport:
    """Validate a ``ViewState`` without building a parameter object.

    ``global_editable`` only shapes ``report.enabled``; the errors are
    those a subsequent ``from_view`` would report.
    """
    return evaluate(view_state, schema, global_editable).report
