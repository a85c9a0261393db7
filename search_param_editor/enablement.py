"""
Field enablement for the Search Parameter Editor.

Enablement is data, not widget code: each ``EnablementRule`` names a
trigger field, a predicate over the trigger's parsed value and the
fields that are only editable while the predicate holds.

``evaluate_enablement`` is recomputed after every edit.  Rules run in
declared order and can only disable fields, never re-enable one that an
earlier rule (or view-only mode) disabled.  Raw values of disabled
fields are left untouched so that re-enabling a field restores what the
user typed.

A ``LinkedValueRule`` instead selects a value for a dependent choice
when the user changes its trigger.  It is applied to dialog edits only.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Mapping, Tuple


class _Unset:
    def __repr__(self):
        return "UNSET"


UNSET = _Unset()


@dataclass(frozen=True)
class EnablementRule:
    """Dependent fields are enabled only while ``enabled_when(trigger)``.

    Parameters
    ----------
    trigger_id : str
        Field whose parsed value drives the rule.
    dependent_ids : tuple of str
        Fields disabled while the predicate is false.
    enabled_when : callable
        Predicate over the trigger's parsed value.
    forced_value : object
        When set, the parameter object receives this value for every
        dependent while the rule disables it (e.g. X!Tandem never
        outputs sequences without proteins).
    """
    trigger_id: str
    dependent_ids: Tuple[str, ...]
    enabled_when: Callable[[Any], bool]
    forced_value: Any = UNSET

    @property
    def forces_value(self) -> bool:
        return self.forced_value is not UNSET

    def allows(self, values: Mapping[str, Any]) -> bool:
        """Whether the dependents are enabled for these parsed values.

        A trigger that did not parse does not restrict its dependents.
        """
        if self.trigger_id not in values:
            return True
        return bool(self.enabled_when(values[self.trigger_id]))


def enabled_when_equal(trigger_id, value, dependent_ids, forced_value=UNSET):
    """Rule enabling ``dependent_ids`` while the trigger equals ``value``."""
    return EnablementRule(
        trigger_id, tuple(dependent_ids), lambda v: v == value, forced_value,
    )


def enabled_when_not_equal(trigger_id, value, dependent_ids, forced_value=UNSET):
    """Rule enabling ``dependent_ids`` while the trigger differs from ``value``."""
    return EnablementRule(
        trigger_id, tuple(dependent_ids), lambda v: v != value, forced_value,
    )


def evaluate_enablement(
    values: Mapping[str, Any],
    rules: Iterable[EnablementRule],
    field_ids: Iterable[str],
    global_editable: bool = True,
) -> Dict[str, bool]:
    """Compute the enabled state of every field.

    Parameters
    ----------
    values : mapping
        Parsed values of the fields that validated.
    rules : iterable of EnablementRule
        Evaluated in the given order.
    field_ids : iterable of str
        Every field of the schema.
    global_editable : bool
        ``False`` (view-only dialog) disables every field regardless of
        the rules.

    Returns
    -------
    dict
        ``{field_id: enabled}``
    """
    enabled = {field_id: bool(global_editable) for field_id in field_ids}
    if not global_editable:
        return enabled
    for rule in rules:
        if rule.allows(values):
            continue
        for field_id in rule.dependent_ids:
            enabled[field_id] = False
    return enabled


def forced_values(
    values: Mapping[str, Any],
    rules: Iterable[EnablementRule],
) -> Dict[str, Any]:
    """Values imposed on fields disabled by value-forcing rules.

    The first forcing rule that disables a field wins.
    """
    forced: Dict[str, Any] = {}
    for rule in rules:
        if not rule.forces_value or rule.allows(values):
            continue
        for field_id in rule.dependent_ids:
            forced.setdefault(field_id, rule.forced_value)
    return forced


# ── Linked values ────────────────────────────────────────────────────────

@dataclass(frozen=True)
class LinkedValueRule:
    """Selecting a trigger option also selects a value for another field.

    Unlike an ``EnablementRule`` this is applied only when the user
    changes the trigger in the dialog.  ``from_view`` never applies it,
    so a dependent value the user picked afterwards is kept.

    Parameters
    ----------
    trigger_id : str
        Choice field whose change sets the dependent.
    dependent_id : str
        Choice field receiving the linked value.
    value_for : callable
        Maps the trigger's parsed value to the dependent's domain value.
    """
    trigger_id: str
    dependent_id: str
    value_for: Callable[[Any], Any]


def linked_when_in(trigger_id, trigger_values, dependent_id, value, otherwise):
    """Rule selecting ``value`` for triggers in ``trigger_values``, else ``otherwise``."""
    members = tuple(trigger_values)
    return LinkedValueRule(
        trigger_id, dependent_id,
        lambda v: value if v in members else otherwise,
    )


def linked_values(
    changed_id: str,
    values: Mapping[str, Any],
    links: Iterable[LinkedValueRule],
) -> Dict[str, Any]:
    """Dependent domain values implied by a change to ``changed_id``.

    Empty when the changed field did not parse.
    """
    if changed_id not in values:
        return {}
    linked: Dict[str, Any] = {}
    for link in links:
        if link.trigger_id == changed_id:
            linked[link.dependent_id] = link.value_for(values[changed_id])
    return linked
