"""
Bidirectional mapping between parameter objects and display values.

``to_view`` formats a parameter object into a ``ViewState``;
``from_view`` validates a ``ViewState`` and, only if the whole pass is
clean, builds a new parameter object from it.  A partially valid state
never produces a parameter object.  ``apply_linked_values`` is the
dialog-side step that selects values linked to an edited field.
"""

import warnings
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .constants import BOOLEAN_FALSE_INDEX, BOOLEAN_TRUE_INDEX
from .data_model import (
    FieldDescriptor, FieldKind, SchemaError, UnknownMapping, ValidResult,
    ValidationReport, ViewState,
)
from .enablement import forced_values, linked_values
from .field_validator import validate_field
from .schema import ParameterSchema
from .validation_engine import evaluate


@dataclass(frozen=True)
class FromViewResult:
    """Outcome of ``from_view``.

    ``parameters`` is the new parameter object, or ``None`` when
    ``report`` holds errors.
    """
    parameters: Any
    report: ValidationReport

    @property
    def ok(self) -> bool:
        return self.parameters is not None


# ── Parameter object → display values ────────────────────────────────────

def format_value(value: Any, descriptor: FieldDescriptor) -> Any:
    """Format one domain value as its raw display value.

    Numbers use their canonical Python text (``repr`` for floats, which
    round-trips exactly), booleans become view index 0 (yes) or 1 (no),
    enumerated values go through the field's codec.
    """
    kind = descriptor.kind
    if kind is FieldKind.ENUM:
        try:
            return descriptor.codec.encode(value)
        except UnknownMapping:
            if value is None and not descriptor.required:
                return None
            raise SchemaError(
                f"Field '{descriptor.id}' cannot display value {value!r}"
            ) from None
    if value is None:
        if descriptor.required:
            raise SchemaError(
                f"Required field '{descriptor.id}' has no value "
                f"('{descriptor.accessor}' is None)"
            )
        return None if kind.is_choice else ""
    if kind is FieldKind.BOOLEAN_CHOICE:
        return BOOLEAN_TRUE_INDEX if value else BOOLEAN_FALSE_INDEX
    if kind.is_integer:
        return str(int(value))
    if kind.is_real:
        return repr(float(value))
    return str(value)


def to_view(parameters: Any, schema: ParameterSchema) -> ViewState:
    """Build the display values of every schema field.

    Raises
    ------
    SchemaError
        A required field is ``None`` or an enumerated value has no view
        position; both mean the schema and the parameter class disagree.
    """
    if not isinstance(parameters, schema.parameter_type):
        raise SchemaError(
            f"{schema.tool} schema edits {schema.parameter_type.__name__}, "
            f"got {type(parameters).__name__}"
        )
    values: Dict[str, Any] = {}
    for descriptor in schema.fields:
        domain_value = getattr(parameters, descriptor.accessor)
        values[descriptor.id] = format_value(domain_value, descriptor)
    view_state = ViewState(values)
    _warn_on_overridden_values(parameters, view_state, schema)
    return view_state


def _warn_on_overridden_values(parameters, view_state, schema):
    """Warn when a disabled field holds a value confirmation will replace."""
    parsed = evaluate(view_state, schema).parsed
    for field_id, forced in forced_values(parsed, schema.rules).items():
        accessor = schema.field(field_id).accessor
        current = getattr(parameters, accessor)
        if current != forced:
            warnings.warn(
                f"{schema.tool}: '{accessor}' is {current!r} although its "
                f"field is disabled; it will be saved as {forced!r}.",
                stacklevel=3,
            )


# ── Display values → parameter object ────────────────────────────────────

def from_view(view_state: ViewState, schema: ParameterSchema) -> FromViewResult:
    """Validate ``view_state`` and build a new parameter object from it.

    Fields disabled by an enablement rule are not validated.  They keep
    their parsed value when it parses, fall back to the parameter class
    default when it does not, and take the rule's forced value when the
    rule defines one.
    """
    result = evaluate(view_state, schema)
    if not result.report.overall_valid:
        return FromViewResult(parameters=None, report=result.report)

    forced = forced_values(result.parsed, schema.rules)
    kwargs: Dict[str, Any] = {}
    for descriptor in schema.fields:
        kwargs[descriptor.accessor] = _domain_value(
            descriptor, schema, result.parsed, result.active, forced,
        )
    parameters = schema.parameter_type(**kwargs)
    return FromViewResult(parameters=parameters, report=result.report)


def _domain_value(
    descriptor: FieldDescriptor,
    schema: ParameterSchema,
    parsed: Dict[str, Any],
    active: Dict[str, bool],
    forced: Dict[str, Any],
) -> Optional[Any]:
    field_id = descriptor.id
    if active[field_id]:
        return parsed[field_id]
    if field_id in forced:
        return forced[field_id]
    if field_id in parsed:
        return parsed[field_id]
    return schema.domain_default(descriptor.accessor)


# ── Linked values ────────────────────────────────────────────────────────

def apply_linked_values(
    view_state: ViewState,
    changed_id: str,
    schema: ParameterSchema,
) -> ViewState:
    """Return ``view_state`` with the values linked to ``changed_id`` selected.

    Called by the dialog after the user edits ``changed_id``.  The state
    is returned unchanged when no link starts at that field or its new
    value does not parse.
    """
    descriptor = schema.field(changed_id)
    result = validate_field(view_state.get(changed_id), descriptor)
    if not isinstance(result, ValidResult) or result.is_absent:
        return view_state
    linked = linked_values(changed_id, {changed_id: result.value}, schema.links)
    for field_id, value in linked.items():
        view_state = view_state.with_value(
            field_id, format_value(value, schema.field(field_id)),
        )
    return view_state
