"""
Cross-field constraints for the Search Parameter Editor.

A constraint relates values that already passed ``validate_field``.
``check`` receives only those typed values.  A field that failed to
parse or is disabled is missing from the mapping, and the constraint
then stays silent rather than repeating the field error.

``Advisory`` is not a constraint: it yields a non-blocking notice and
never affects the overall validity.
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Tuple

from .constants import MSG_RANGE_ORDER
from .data_model import ConstraintError


@dataclass(frozen=True)
class OrderedPair:
    """``low <= high`` for two numeric fields (min/max range inputs)."""
    constraint_id: str
    low_id: str
    high_id: str
    message: str = MSG_RANGE_ORDER

    @property
    def field_ids(self) -> Tuple[str, ...]:
        return (self.low_id, self.high_id)

    def check(self, values: Mapping[str, Any]) -> Optional[ConstraintError]:
        low = values.get(self.low_id)
        high = values.get(self.high_id)
        if low is None or high is None:
            return None
        if low > high:
            return ConstraintError(self.constraint_id, self.field_ids, self.message)
        return None


@dataclass(frozen=True)
class NumericCeiling:
    """``value <= ceiling`` for one numeric field."""
    constraint_id: str
    field_id: str
    ceiling: float
    message: str

    @property
    def field_ids(self) -> Tuple[str, ...]:
        return (self.field_id,)

    def check(self, values: Mapping[str, Any]) -> Optional[ConstraintError]:
        value = values.get(self.field_id)
        if value is None:
            return None
        if value > self.ceiling:
            return ConstraintError(self.constraint_id, self.field_ids, self.message)
        return None


@dataclass(frozen=True)
class Advisory:
    """Notice raised when ``applies(value)`` holds for a parsed field.

    ``message`` may contain ``{value}``, replaced by the parsed value.
    """
    notice_id: str
    field_id: str
    applies: Callable[[Any], bool]
    message: str

    @property
    def field_ids(self) -> Tuple[str, ...]:
        return (self.field_id,)

    def notice(self, values: Mapping[str, Any]) -> Optional[str]:
        if self.field_id not in values:
            return None
        value = values[self.field_id]
        if self.applies(value):
            return self.message.format(value=value)
        return None
