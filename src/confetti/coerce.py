"""String-to-field coercion.

Each ``FieldKind`` has one coercer in ``COERCERS``. A coercer receives the
field descriptor, the raw string and the strict flag, and returns the value
to assign or ``SKIP`` when the field must be left untouched.
"""

import re
from typing import Any, Callable, Dict

from confetti.exceptions import CoercionError
from confetti.fields import FieldDescriptor, FieldKind, Uint, unwrap_optional

TRUE_VALUES = frozenset({"true", "t", "yes", "1", "on"})
FALSE_VALUES = frozenset({"", "false", "f", "no", "0", "off"})

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT64_MODULUS = 2**64

# Base-10 with an optional sign; ASCII digits only.
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


class _Skip:
    def __repr__(self) -> str:
        return "SKIP"


SKIP: Any = _Skip()

Coercer = Callable[[FieldDescriptor, str, bool], Any]


def parse_int(raw: str) -> int:
    """Parse a signed 64-bit base-10 integer.

    Raises:
        ValueError: On syntax errors or values outside the int64 range
    """
    if not _INT_PATTERN.fullmatch(raw):
        raise ValueError(f"invalid syntax parsing {raw!r}")
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueError(f"value out of range parsing {raw!r}")
    return value


def _details(descriptor: FieldDescriptor, raw: str) -> Dict[str, Any]:
    return {"field": descriptor.name, "value": raw, "kind": descriptor.kind.value}


def _coerce_string(descriptor: FieldDescriptor, raw: str, strict: bool) -> str:
    return raw


def _coerce_bool(descriptor: FieldDescriptor, raw: str, strict: bool) -> bool:
    lowered = raw.lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise CoercionError(
        f"could not assign {raw!r} to bool {descriptor.name!r}",
        details=_details(descriptor, raw),
    )


def _coerce_int(descriptor: FieldDescriptor, raw: str, strict: bool) -> int:
    try:
        return parse_int(raw)
    except ValueError as e:
        raise CoercionError(
            f"could not assign {raw!r} to int {descriptor.name!r}: {e}",
            details=_details(descriptor, raw),
        ) from e


def _coerce_uint(descriptor: FieldDescriptor, raw: str, strict: bool) -> int:
    try:
        value = parse_int(raw)
    except ValueError as e:
        raise CoercionError(
            f"could not assign {raw!r} to uint {descriptor.name!r}: {e}",
            details=_details(descriptor, raw),
        ) from e

    if value < 0 and strict:
        raise CoercionError(
            f"could not assign {raw!r} to uint {descriptor.name!r}: negative value",
            details=_details(descriptor, raw),
        )
    return Uint(value % UINT64_MODULUS)


def _coerce_bytes(descriptor: FieldDescriptor, raw: str, strict: bool) -> Any:
    encoded = raw.encode("utf-8")
    if unwrap_optional(descriptor.declared_type) is bytearray:
        return bytearray(encoded)
    return encoded


def _reject_sequence(descriptor: FieldDescriptor, raw: str, strict: bool) -> Any:
    raise CoercionError(
        f"could not assign {raw!r} to sequence {descriptor.name!r}: "
        "only byte sequences are supported",
        details=_details(descriptor, raw),
    )


def _coerce_unsupported(descriptor: FieldDescriptor, raw: str, strict: bool) -> Any:
    if strict:
        raise CoercionError(
            f"could not assign {raw!r} to {descriptor.name!r}: "
            f"unsupported field type {descriptor.declared_type!r}",
            details=_details(descriptor, raw),
        )
    return SKIP


COERCERS: Dict[FieldKind, Coercer] = {
    FieldKind.STRING: _coerce_string,
    FieldKind.BOOL: _coerce_bool,
    FieldKind.INT: _coerce_int,
    FieldKind.UINT: _coerce_uint,
    FieldKind.BYTES: _coerce_bytes,
    FieldKind.SEQUENCE: _reject_sequence,
    FieldKind.UNSUPPORTED: _coerce_unsupported,
}


def coerce_value(descriptor: FieldDescriptor, raw: str, strict: bool = False) -> Any:
    """Convert ``raw`` to the field's native value.

    Returns:
        The coerced value, or ``SKIP`` for unsupported field types

    Raises:
        CoercionError: If raw cannot be converted to the field's kind
    """
    return COERCERS[descriptor.kind](descriptor, raw, strict)
