"""Field discovery for hydration targets.

A hydration target is a dataclass instance. Each dataclass field becomes a
``FieldDescriptor`` carrying the field name, the optional mapping key from
the field's ``"conf"`` metadata, the resolved annotation and the coercion
kind derived from it.

Example:
    from dataclasses import dataclass
    from confetti import Uint, conf_field

    @dataclass
    class AppConfig:
        name: str = conf_field("APP_NAME", default="")
        port: Uint = conf_field("APP_PORT", default=Uint(0))
        debug: bool = False          # looked up as "debug"

Descriptors are rebuilt on every call; nothing is cached per class.
"""

import collections.abc
import dataclasses
import enum
import types
import typing
from dataclasses import dataclass
from typing import Any, Dict, List, NewType, Optional, Union

from confetti.exceptions import ShapeError

# Metadata key holding the explicit lookup key of a field.
CONF_TAG = "conf"

Uint = NewType("Uint", int)
"""Unsigned integer field type; values are reinterpreted as unsigned 64-bit."""


class FieldKind(enum.Enum):
    """Closed set of coercion kinds a field annotation maps to."""

    STRING = "string"
    BOOL = "bool"
    INT = "int"
    UINT = "uint"
    BYTES = "bytes"
    SEQUENCE = "sequence"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class FieldDescriptor:
    """One field of a hydration target.

    Attributes:
        name: Declared field name
        mapping_key: Explicit lookup key from ``conf`` metadata, if any
        declared_type: Resolved field annotation
        kind: Coercion kind derived from ``declared_type``
    """

    name: str
    mapping_key: Optional[str]
    declared_type: Any
    kind: FieldKind

    @property
    def effective_key(self) -> str:
        """Lookup key: the mapping key if present and non-empty, else the name."""
        return self.mapping_key or self.name


def conf_field(
    key: str,
    *,
    default: Any = dataclasses.MISSING,
    default_factory: Any = dataclasses.MISSING,
    **kwargs: Any,
) -> Any:
    """Declare a dataclass field looked up under ``key``.

    Any other ``dataclasses.field`` argument is passed through; existing
    ``metadata`` entries are kept.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[CONF_TAG] = key
    return dataclasses.field(
        default=default,
        default_factory=default_factory,
        metadata=metadata,
        **kwargs,
    )


def unwrap_optional(tp: Any) -> Any:
    origin = typing.get_origin(tp)
    if origin is Union or origin is types.UnionType:
        args = [arg for arg in typing.get_args(tp) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return tp


def classify(tp: Any) -> FieldKind:
    """Map a field annotation to its coercion kind."""
    tp = unwrap_optional(tp)

    # Identity checks: bool is a subclass of int and Uint is not a class.
    if tp is Uint:
        return FieldKind.UINT
    if tp is str:
        return FieldKind.STRING
    if tp is bool:
        return FieldKind.BOOL
    if tp is int:
        return FieldKind.INT
    if tp is bytes or tp is bytearray:
        return FieldKind.BYTES

    container = typing.get_origin(tp) or tp
    if (
        isinstance(container, type)
        and issubclass(container, collections.abc.Sequence)
        and not issubclass(container, (str, bytes, bytearray))
    ):
        return FieldKind.SEQUENCE

    return FieldKind.UNSUPPORTED


def get_target(target: Any) -> type:
    """Validate a hydration target and return its dataclass type.

    Raises:
        ShapeError: If target is a class, not a dataclass instance, or frozen
    """
    if isinstance(target, type):
        raise ShapeError(
            "confetti can only parse into dataclass instances, not classes",
            details={"target_type": target.__name__},
        )

    target_type = type(target)
    if not dataclasses.is_dataclass(target):
        raise ShapeError(
            "confetti can only parse into dataclass instances",
            details={"target_type": target_type.__name__},
        )

    if target_type.__dataclass_params__.frozen:
        raise ShapeError(
            "confetti cannot parse into frozen dataclasses",
            details={"target_type": target_type.__name__},
        )

    return target_type


def describe(target_type: type) -> List[FieldDescriptor]:
    """Build field descriptors for a dataclass type, in declaration order."""
    try:
        hints = typing.get_type_hints(target_type)
    except NameError as e:
        raise ShapeError(
            f"could not resolve field annotations of {target_type.__name__!r}: {e}",
            details={"target_type": target_type.__name__},
        ) from e

    descriptors = []
    for f in dataclasses.fields(target_type):
        declared = hints.get(f.name, f.type)
        descriptors.append(
            FieldDescriptor(
                name=f.name,
                mapping_key=f.metadata.get(CONF_TAG) or None,
                declared_type=declared,
                kind=classify(declared),
            )
        )
    return descriptors


_ZERO_VALUES: Dict[FieldKind, Any] = {
    FieldKind.STRING: "",
    FieldKind.BOOL: False,
    FieldKind.INT: 0,
    FieldKind.UINT: Uint(0),
}


def zero_value(descriptor: FieldDescriptor) -> Any:
    """Zero value for a field kind; None for kinds without one."""
    if descriptor.kind is FieldKind.BYTES:
        return unwrap_optional(descriptor.declared_type)()
    return _ZERO_VALUES.get(descriptor.kind)


def zero_instance(target_type: Any) -> Any:
    """Construct ``target_type`` with zero values for fields lacking defaults.

    Raises:
        ShapeError: If target_type is not a dataclass type
    """
    if not isinstance(target_type, type) or not dataclasses.is_dataclass(target_type):
        raise ShapeError(
            "confetti can only construct dataclass types",
            details={"target_type": getattr(target_type, "__name__", type(target_type).__name__)},
        )

    by_name = {d.name: d for d in describe(target_type)}
    kwargs = {}
    for f in dataclasses.fields(target_type):
        if not f.init:
            continue
        if f.default is not dataclasses.MISSING or f.default_factory is not dataclasses.MISSING:
            continue
        kwargs[f.name] = zero_value(by_name[f.name])

    return target_type(**kwargs)
