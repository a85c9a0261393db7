"""
Parameter schema for the Search Parameter Editor.

A ``ParameterSchema`` is the ordered description of one tool's dialog:
its field descriptors, cross-field constraints, enablement rules and
advisories, together with the parameter class it edits.

Every consistency check runs in ``__post_init__`` so that a broken
schema fails when its module is imported, never later while a user is
editing values.
"""

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .constraints import Advisory, NumericCeiling, OrderedPair
from .data_model import FieldDescriptor, FieldKind, SchemaError
from .enablement import EnablementRule, LinkedValueRule, UNSET


@dataclass(frozen=True)
class ParameterSchema:
    """Ordered field set and rules of one search engine.

    Parameters
    ----------
    tool : str
        Display name of the search engine, e.g. ``"Comet"``.
    parameter_type : type
        Frozen dataclass built by ``from_view``.  Each field accessor
        must be one of its attributes, and no two fields may share one.
    fields : tuple of FieldDescriptor
        In display order.
    constraints : tuple
        ``OrderedPair`` / ``NumericCeiling`` instances.
    rules : tuple of EnablementRule
        Evaluated in this order.
    advisories : tuple of Advisory
    links : tuple of LinkedValueRule
        Values the dialog selects when a trigger field is changed.
    help_url : str or None
        Tool-level documentation link.
    """
    tool: str
    parameter_type: type
    fields: Tuple[FieldDescriptor, ...]
    constraints: Tuple[Any, ...] = ()
    rules: Tuple[EnablementRule, ...] = ()
    advisories: Tuple[Advisory, ...] = ()
    help_url: Optional[str] = None
    links: Tuple[LinkedValueRule, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'fields', tuple(self.fields))
        object.__setattr__(self, 'constraints', tuple(self.constraints))
        object.__setattr__(self, 'rules', tuple(self.rules))
        object.__setattr__(self, 'advisories', tuple(self.advisories))
        object.__setattr__(self, 'links', tuple(self.links))
        self._check_fields()
        self._check_constraints()
        self._check_rules()
        self._check_links()
        for advisory in self.advisories:
            self._require_known(advisory.field_id, f"advisory '{advisory.notice_id}'")

    # ── Consistency checks ───────────────────────────────────────────

    def _check_fields(self):
        if not dataclasses.is_dataclass(self.parameter_type):
            raise SchemaError(
                f"{self.tool}: parameter type {self.parameter_type!r} "
                f"is not a dataclass"
            )
        attributes = {f.name for f in dataclasses.fields(self.parameter_type)}
        seen_ids = set()
        seen_accessors: Dict[str, str] = {}
        for descriptor in self.fields:
            if descriptor.id in seen_ids:
                raise SchemaError(f"{self.tool}: duplicate field id '{descriptor.id}'")
            seen_ids.add(descriptor.id)
            if descriptor.accessor not in attributes:
                raise SchemaError(
                    f"{self.tool}: field '{descriptor.id}' has no accessor "
                    f"'{descriptor.accessor}' on {self.parameter_type.__name__}"
                )
            if descriptor.accessor in seen_accessors:
                raise SchemaError(
                    f"{self.tool}: fields '{seen_accessors[descriptor.accessor]}' "
                    f"and '{descriptor.id}' both map to "
                    f"'{descriptor.accessor}'"
                )
            seen_accessors[descriptor.accessor] = descriptor.id

    def _check_constraints(self):
        for constraint in self.constraints:
            if not isinstance(constraint, (OrderedPair, NumericCeiling)):
                raise SchemaError(
                    f"{self.tool}: unsupported constraint {constraint!r}"
                )
            where = f"constraint '{constraint.constraint_id}'"
            for field_id in constraint.field_ids:
                descriptor = self._require_known(field_id, where)
                if not descriptor.kind.is_numeric:
                    raise SchemaError(
                        f"{self.tool}: {where} needs a numeric field, "
                        f"'{field_id}' is {descriptor.kind.value}"
                    )

    def _check_rules(self):
        for rule in self.rules:
            where = f"enablement rule on '{rule.trigger_id}'"
            trigger = self._require_known(rule.trigger_id, where)
            if not trigger.kind.is_choice:
                raise SchemaError(
                    f"{self.tool}: {where} needs a choice trigger field"
                )
            if not rule.dependent_ids:
                raise SchemaError(f"{self.tool}: {where} has no dependent fields")
            for field_id in rule.dependent_ids:
                if field_id == rule.trigger_id:
                    raise SchemaError(f"{self.tool}: {where} depends on itself")
                self._require_known(field_id, where)
            if rule.forced_value is not UNSET:
                for field_id in rule.dependent_ids:
                    self._check_forced_value(self.field(field_id), rule.forced_value)

    def _check_links(self):
        for link in self.links:
            where = f"linked value on '{link.trigger_id}'"
            trigger = self._require_known(link.trigger_id, where)
            dependent = self._require_known(link.dependent_id, where)
            if trigger.kind is not FieldKind.ENUM:
                raise SchemaError(f"{self.tool}: {where} needs an enum trigger field")
            if dependent.id == trigger.id:
                raise SchemaError(f"{self.tool}: {where} depends on itself")
            # Every trigger option must select a value the dependent can show
            for value in trigger.codec.domain_values:
                self._check_forced_value(dependent, link.value_for(value))

    def _check_forced_value(self, descriptor, value):
        if descriptor.kind is FieldKind.BOOLEAN_CHOICE and isinstance(value, bool):
            return
        if descriptor.kind is FieldKind.ENUM and value in descriptor.codec:
            return
        raise SchemaError(
            f"{self.tool}: forced value {value!r} cannot be shown by "
            f"field '{descriptor.id}'"
        )

    def _require_known(self, field_id: str, where: str) -> FieldDescriptor:
        for descriptor in self.fields:
            if descriptor.id == field_id:
                return descriptor
        raise SchemaError(f"{self.tool}: {where} refers to unknown field '{field_id}'")

    # ── Lookup ───────────────────────────────────────────────────────

    @property
    def field_ids(self) -> Tuple[str, ...]:
        return tuple(descriptor.id for descriptor in self.fields)

    def field(self, field_id: str) -> FieldDescriptor:
        """Return the descriptor of ``field_id`` (``KeyError`` if unknown)."""
        for descriptor in self.fields:
            if descriptor.id == field_id:
                return descriptor
        raise KeyError(field_id)

    def sections(self) -> Tuple[str, ...]:
        """Section names in first-appearance order."""
        names = []
        for descriptor in self.fields:
            if descriptor.section not in names:
                names.append(descriptor.section)
        return tuple(names)

    def default_parameters(self):
        """A parameter object holding the tool defaults."""
        return self.parameter_type()

    def domain_default(self, accessor: str) -> Any:
        """Default value of one attribute of the parameter class."""
        for f in dataclasses.fields(self.parameter_type):
            if f.name != accessor:
                continue
            if f.default is not dataclasses.MISSING:
                return f.default
            if f.default_factory is not dataclasses.MISSING:
                return f.default_factory()
            return None
        raise KeyError(accessor)
