"""
Single-field validation for the Search Parameter Editor.

``validate_field`` turns one raw display value into a typed value
(``ValidResult``) or a ``FieldError``.  It never raises for bad user
input and has no side effects.

Numbers are parsed strictly: the display values produced by
``to_view`` are canonical, so there is no locale handling, no digit
grouping and no silent truncation of decimals into integer fields.
"""

import math
import re
from typing import Any, Optional, Union

from .constants import (
    BOOLEAN_FALSE_INDEX, BOOLEAN_TRUE_INDEX,
    MSG_NEGATIVE, MSG_NO_OPTION, MSG_NOT_INTEGER, MSG_NOT_NUMBER,
    MSG_REQUIRED,
)
from .data_model import (
    FieldDescriptor, FieldError, FieldKind, UnknownMapping, ValidResult,
)

_INTEGER_RE = re.compile(r'^[+-]?\d+$')
_REAL_RE = re.compile(r'^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$')


# ── Token parsing ────────────────────────────────────────────────────────

def parse_integer(text: str) -> int:
    """Parse a base-10 integer without fractional part.

    Raises ``ValueError`` for anything else, including ``"10.0"``,
    ``"1e3"`` and ``"1_000"`` (all accepted by bare ``int``/``float``).
    """
    s = text.strip()
    if not _INTEGER_RE.match(s):
        raise ValueError(f"not an integer: {text!r}")
    return int(s)


def parse_real(text: str) -> float:
    """Parse a finite decimal number.

    Raises ``ValueError`` for non-numeric text and for values that are
    not finite (``nan``, ``inf`` or an overflowing exponent).
    """
    s = text.strip()
    if not _REAL_RE.match(s):
        raise ValueError(f"not a number: {text!r}")
    result = float(s)
    if not math.isfinite(result):
        raise ValueError(f"non-finite value: {s!r}")
    return result


def _choice_index(raw: Any) -> Optional[int]:
    """Normalise a choice-field raw value to a view index.

    ``bool`` is accepted for boolean choices (``True`` is the affirmative
    index 0); digit strings are accepted so text-only front ends work.
    Returns ``None`` for an empty selection.
    """
    if raw is None:
        return None
    if isinstance(raw, bool):
        return BOOLEAN_TRUE_INDEX if raw else BOOLEAN_FALSE_INDEX
    if isinstance(raw, int):
        return raw
    text = str(raw).strip()
    if not text:
        return None
    return parse_integer(text)


def _is_empty(raw: Any) -> bool:
    if raw is None:
        return True
    if isinstance(raw, str):
        return not raw.strip()
    return False


# ── Public API ───────────────────────────────────────────────────────────

def validate_field(
    raw: Any,
    descriptor: FieldDescriptor,
) -> Union[ValidResult, FieldError]:
    """Validate one raw display value against its descriptor.

    Parameters
    ----------
    raw : str, int, bool or None
        The value held in the ``ViewState`` (missing entries are passed
        as ``None``).
    descriptor : FieldDescriptor

    Returns
    -------
    ValidResult or FieldError
        ``ValidResult(None)`` for an empty optional field.
    """
    label = descriptor.label
    kind = descriptor.kind

    if _is_empty(raw):
        if descriptor.required:
            return FieldError(descriptor.id, MSG_REQUIRED.format(label=label))
        return ValidResult(None)

    if kind.is_choice:
        try:
            index = _choice_index(raw)
        except ValueError:
            return FieldError(
                descriptor.id, MSG_NO_OPTION.format(label=label, index=raw)
            )
        if index is None:
            if descriptor.required:
                return FieldError(descriptor.id, MSG_REQUIRED.format(label=label))
            return ValidResult(None)
        if kind is FieldKind.BOOLEAN_CHOICE:
            if index == BOOLEAN_TRUE_INDEX:
                return ValidResult(True)
            if index == BOOLEAN_FALSE_INDEX:
                return ValidResult(False)
            return FieldError(
                descriptor.id, MSG_NO_OPTION.format(label=label, index=index)
            )
        try:
            return ValidResult(descriptor.codec.decode(index))
        except UnknownMapping:
            return FieldError(
                descriptor.id, MSG_NO_OPTION.format(label=label, index=index)
            )

    if kind is FieldKind.TEXT:
        return ValidResult(str(raw).strip())

    text = str(raw)
    if kind.is_integer:
        try:
            value = parse_integer(text)
        except ValueError:
            return FieldError(descriptor.id, MSG_NOT_INTEGER.format(label=label))
    else:
        try:
            value = parse_real(text)
        except ValueError:
            return FieldError(descriptor.id, MSG_NOT_NUMBER.format(label=label))

    if descriptor.non_negative and value < 0:
        return FieldError(descriptor.id, MSG_NEGATIVE.format(label=label))
    return ValidResult(value)
