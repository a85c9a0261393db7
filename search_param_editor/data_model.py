"""
Data model for the Search Parameter Editor.

Immutable dataclasses describing one editable field (``FieldDescriptor``),
the bijective view/domain tables of enumerated fields (``EnumCodec``),
the raw edit state of a dialog (``ViewState``) and the outcome of one
validation pass (``ValidationReport``).

Field and cross-field problems are plain values (``FieldError``,
``ConstraintError``) collected into a report.  Only schema definition
mistakes are exceptions (``SchemaError``), raised while the schema is
being built.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, Optional, Tuple

from .constants import YES_NO


class SchemaError(ValueError):
    """A schema, descriptor or codec is inconsistent (programming error)."""


class UnknownMapping(KeyError):
    """An ``EnumCodec`` has no entry for the given view index or value."""


class FieldKind(Enum):
    """Domain kind of an editable field."""
    INTEGER = "integer"
    REAL = "real"
    OPTIONAL_INTEGER = "optional_integer"
    OPTIONAL_REAL = "optional_real"
    BOOLEAN_CHOICE = "boolean_choice"
    ENUM = "enum"
    TEXT = "text"

    @property
    def is_integer(self) -> bool:
        return self in (FieldKind.INTEGER, FieldKind.OPTIONAL_INTEGER)

    @property
    def is_real(self) -> bool:
        return self in (FieldKind.REAL, FieldKind.OPTIONAL_REAL)

    @property
    def is_numeric(self) -> bool:
        return self.is_integer or self.is_real

    @property
    def is_choice(self) -> bool:
        return self in (FieldKind.BOOLEAN_CHOICE, FieldKind.ENUM)

    @property
    def is_optional(self) -> bool:
        return self in (FieldKind.OPTIONAL_INTEGER, FieldKind.OPTIONAL_REAL)


def _same_value(a, b) -> bool:
    """Equality that keeps ``True`` and ``1`` (or ``False`` and ``0``) apart."""
    return type(a) is type(b) and a == b


@dataclass(frozen=True)
class EnumCodec:
    """Bijective table between combo-box positions and domain values.

    Parameters
    ----------
    positions : tuple of (int, object)
        ``(view_index, domain_value)`` pairs in display order.  Both
        sides must be unique; the order of domain values is free, e.g.
        Comet's enzyme type is ``((0, 2), (1, 1), (2, 8), (3, 9))``.
    """
    positions: Tuple[Tuple[int, Any], ...]

    def __post_init__(self):
        if not self.positions:
            raise SchemaError("EnumCodec needs at least one position")
        indices = [index for index, _ in self.positions]
        values = [value for _, value in self.positions]
        if len(set(indices)) != len(indices):
            raise SchemaError(f"EnumCodec view indices are not unique: {indices}")
        # Domain values may be unhashable in principle; compare pairwise.
        for i, value in enumerate(values):
            if any(_same_value(value, other) for other in values[i + 1:]):
                raise SchemaError(
                    f"EnumCodec domain value {value!r} appears more than once"
                )

    @classmethod
    def of(cls, *values) -> "EnumCodec":
        """Identity-ordered codec: position *i* maps to ``values[i]``."""
        return cls(tuple(enumerate(values)))

    @property
    def view_indices(self) -> Tuple[int, ...]:
        return tuple(index for index, _ in self.positions)

    @property
    def domain_values(self) -> Tuple[Any, ...]:
        return tuple(value for _, value in self.positions)

    def decode(self, view_index: int) -> Any:
        """Return the domain value shown at ``view_index``."""
        for index, value in self.positions:
            if index == view_index:
                return value
        raise UnknownMapping(view_index)

    def encode(self, domain_value: Any) -> int:
        """Return the view index showing ``domain_value``."""
        for index, value in self.positions:
            if _same_value(value, domain_value):
                return index
        raise UnknownMapping(domain_value)

    def __contains__(self, domain_value) -> bool:
        return any(_same_value(value, domain_value) for value in self.domain_values)


@dataclass(frozen=True)
class FieldDescriptor:
    """Static description of one editable field.

    Parameters
    ----------
    id : str
        Identifier, unique within a schema.
    kind : FieldKind
        How the raw input is parsed.
    label : str
        Display name, used in error messages.
    required : bool
        ``False`` lets an empty input stand for "absent" (``None``).
    accessor : str or None
        Attribute of the parameter object read by ``to_view`` and passed
        to its constructor by ``from_view``.  Defaults to ``id``.
    codec : EnumCodec or None
        Mandatory for ``ENUM`` fields, forbidden otherwise.
    choices : tuple of str
        Combo-box labels of choice fields.  Boolean choices default to
        ``("Yes", "No")``.
    non_negative : bool
        Reject negative numbers.
    section : str
        Dialog group the field is shown in.
    help_url : str or None
        Opaque documentation link, never dereferenced by the engine.
    """
    id: str
    kind: FieldKind
    label: str
    required: bool = True
    accessor: Optional[str] = None
    codec: Optional[EnumCodec] = None
    choices: Tuple[str, ...] = ()
    non_negative: bool = False
    section: str = ""
    help_url: Optional[str] = None

    def __post_init__(self):
        if not self.id:
            raise SchemaError("FieldDescriptor id must not be empty")
        if self.kind.is_optional and self.required:
            raise SchemaError(
                f"Field '{self.id}' is {self.kind.value} and cannot be required"
            )
        if self.kind is FieldKind.ENUM and self.codec is None:
            raise SchemaError(f"Enum field '{self.id}' has no EnumCodec")
        if self.kind is not FieldKind.ENUM and self.codec is not None:
            raise SchemaError(
                f"Field '{self.id}' is {self.kind.value} and must not carry an EnumCodec"
            )
        if self.non_negative and not self.kind.is_numeric:
            raise SchemaError(
                f"Field '{self.id}' is {self.kind.value}; only numeric fields "
                f"can be non-negative"
            )
        if self.kind is FieldKind.BOOLEAN_CHOICE:
            if not self.choices:
                object.__setattr__(self, 'choices', YES_NO)
            elif len(self.choices) != 2:
                raise SchemaError(
                    f"Boolean field '{self.id}' needs exactly two choices"
                )
        if self.kind is FieldKind.ENUM:
            if not self.choices:
                object.__setattr__(
                    self, 'choices',
                    tuple(str(v) for v in self.codec.domain_values),
                )
            elif len(self.choices) != len(self.codec.positions):
                raise SchemaError(
                    f"Enum field '{self.id}' has {len(self.choices)} choices "
                    f"but its codec has {len(self.codec.positions)} positions"
                )
        if self.accessor is None:
            object.__setattr__(self, 'accessor', self.id)


@dataclass(frozen=True)
class ValidResult:
    """A successfully parsed field value; ``None`` means absent."""
    value: Any

    @property
    def is_absent(self) -> bool:
        return self.value is None


@dataclass(frozen=True)
class FieldError:
    """A single field's raw input is not acceptable."""
    field_id: str
    message: str


@dataclass(frozen=True)
class ConstraintError:
    """Independently valid fields break a declared relationship."""
    constraint_id: str
    field_ids: Tuple[str, ...]
    message: str


@dataclass(frozen=True)
class ValidationReport:
    """Outcome of one validation pass over a complete ``ViewState``.

    Parameters
    ----------
    field_errors : dict
        ``{field_id: message}`` for every field that failed to parse.
    cross_field_errors : tuple of ConstraintError
        In the order the constraints are declared in the schema.
    enabled : dict
        ``{field_id: bool}`` enablement snapshot of the same pass.
    notices : tuple of str
        Non-blocking advisories; they never affect ``overall_valid``.
    """
    field_errors: Dict[str, str] = field(default_factory=dict)
    cross_field_errors: Tuple[ConstraintError, ...] = ()
    enabled: Dict[str, bool] = field(default_factory=dict)
    notices: Tuple[str, ...] = ()

    @property
    def overall_valid(self) -> bool:
        return not self.field_errors and not self.cross_field_errors

    def errors_for(self, field_id: str) -> Tuple[str, ...]:
        """All messages (field and cross-field) that mention ``field_id``."""
        messages = []
        if field_id in self.field_errors:
            messages.append(self.field_errors[field_id])
        messages.extend(
            err.message for err in self.cross_field_errors
            if field_id in err.field_ids
        )
        return tuple(messages)


class ViewState(Mapping):
    """Raw, unvalidated display values of one editing session.

    Text and numeric fields hold the string the user typed; choice
    fields hold the selected view index (``int``).  Instances are
    immutable: an edit produces a new state via ``with_value``.
    """

    __slots__ = ('_values',)

    def __init__(self, values: Optional[Dict[str, Any]] = None):
        self._values = dict(values or {})

    def __getitem__(self, field_id: str) -> Any:
        return self._values[field_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other) -> bool:
        if isinstance(other, ViewState):
            return self._values == other._values
        return NotImplemented

    def __hash__(self):
        return hash(tuple(sorted((k, repr(v)) for k, v in self._values.items())))

    def __repr__(self) -> str:
        return f"ViewState({self._values!r})"

    def with_value(self, field_id: str, raw: Any) -> "ViewState":
        """Return a copy with ``field_id`` set to ``raw``."""
        values = dict(self._values)
        values[field_id] = raw
        return ViewState(values)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._values)
