"""Hydrate dataclass instances from the environment and config files.

Sources are applied to the same instance in the order given; each source
only writes the fields it has a value for, so later sources override earlier
ones field by field.

Example:
    from dataclasses import dataclass
    from confetti import apply_env, apply_files, conf_field

    @dataclass
    class AppConfig:
        name: str = conf_field("APP_NAME", default="app")
        debug: bool = conf_field("APP_DEBUG", default=False)

    cfg = AppConfig()
    apply_files(cfg, "defaults.env", "local.env")
    apply_env(cfg)
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Type, TypeVar

from confetti.coerce import SKIP, coerce_value
from confetti.exceptions import CoercionError
from confetti.fields import FieldDescriptor, describe, get_target, zero_instance
from confetti.logger import Logger, get_logger
from confetti.sources import read_dotenv, read_pairs

T = TypeVar("T")

_logger: Optional[Logger] = None


def set_logger(logger: Optional[Logger]) -> None:
    """Route loader log records to ``logger``; None restores the default."""
    global _logger
    _logger = logger


def _log() -> Logger:
    global _logger
    if _logger is None:
        _logger = get_logger("confetti")
    return _logger


def _resolve_strict(strict: Optional[bool]) -> bool:
    if strict is not None:
        return strict
    # Imported here: settings are themselves loaded through this module
    from confetti.config import get_settings

    return get_settings().strict


def _assign(target: Any, descriptor: FieldDescriptor, raw: str, strict: bool) -> None:
    value = coerce_value(descriptor, raw, strict)
    if value is SKIP:
        _log().debug(
            "Skipped field with unsupported type",
            field=descriptor.name,
            key=descriptor.effective_key,
        )
        return
    setattr(target, descriptor.name, value)
    _log().debug(
        "Assigned field",
        field=descriptor.name,
        key=descriptor.effective_key,
        kind=descriptor.kind.value,
    )


def apply_env(
    target: Any,
    env: Optional[Mapping[str, str]] = None,
    strict: Optional[bool] = None,
) -> None:
    """Coerce matching environment variables into the target's fields.

    Each field is looked up under its ``conf`` key, falling back to the
    field name. Absent or empty variables leave the field untouched.

    Args:
        target: Dataclass instance to hydrate in place
        env: Environment snapshot (default: ``os.environ``)
        strict: Reject unsupported field types and negative unsigned values
            (default: ``Settings.strict``)

    Raises:
        ShapeError: If target is not a mutable dataclass instance
        CoercionError: If a value cannot be converted to its field's type
    """
    target_type = get_target(target)
    strict = _resolve_strict(strict)
    env = os.environ if env is None else env

    target_name = target_type.__name__
    for descriptor in describe(target_type):
        raw = env.get(descriptor.effective_key, "")
        if raw == "":
            continue

        try:
            _assign(target, descriptor, raw, strict)
        except CoercionError as err:
            raise err.wrap(f"applying env to {target_name!r}", record=target_name) from err


def apply_key_value(
    target: Any,
    key: str,
    value: str,
    strict: Optional[bool] = None,
) -> None:
    """Assign ``value`` to every field whose effective key equals ``key``.

    Raises:
        ShapeError: If target is not a mutable dataclass instance
        CoercionError: On the first field that cannot take the value
    """
    target_type = get_target(target)
    strict = _resolve_strict(strict)

    target_name = target_type.__name__
    for descriptor in describe(target_type):
        if descriptor.effective_key != key:
            continue

        try:
            _assign(target, descriptor, value, strict)
        except CoercionError as err:
            raise err.wrap(f"applying config to {target_name!r}", record=target_name) from err


def _apply_file(target: Any, path: Path | str, strict: bool) -> None:
    pairs = read_pairs(path)
    for key, value in pairs:
        try:
            apply_key_value(target, key, value, strict)
        except CoercionError as err:
            raise err.wrap(f"applying {str(path)!r}", path=str(path)) from err

    _log().debug("Applied config file", path=str(path), pairs=len(pairs))


def apply_files(target: Any, *paths: Path | str, strict: Optional[bool] = None) -> None:
    """Apply ``key=value`` files to the target in order.

    Later files take precedence; keys a later file does not define keep
    the value from earlier files. Processing stops at the first error.

    Raises:
        ShapeError: If target is not a mutable dataclass instance
        SourceReadError: If a file cannot be opened or read
        CoercionError: If a value cannot be converted to its field's type
    """
    get_target(target)
    strict = _resolve_strict(strict)

    for path in paths:
        _apply_file(target, path, strict)


def from_env(
    target_type: Type[T],
    env: Optional[Mapping[str, str]] = None,
    strict: Optional[bool] = None,
) -> T:
    """Return a new ``target_type`` hydrated by the environment using ``apply_env``."""
    target = zero_instance(target_type)
    apply_env(target, env=env, strict=strict)
    return target


def from_files(target_type: Type[T], *paths: Path | str, strict: Optional[bool] = None) -> T:
    """Return a new ``target_type`` hydrated by the given files using ``apply_files``."""
    target = zero_instance(target_type)
    apply_files(target, *paths, strict=strict)
    return target


class EnvSource:
    """Environment layer for ``apply_sources``.

    The snapshot is built from, lowest precedence first: the optional
    ``env_file`` (dotenv syntax), ``env`` (default: ``os.environ``) and
    ``overrides``.

    Example:
        EnvSource(env_file=".env", overrides={"APP_DEBUG": "true"})
    """

    def __init__(
        self,
        env: Optional[Mapping[str, str]] = None,
        env_file: Optional[Path | str] = None,
        overrides: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.env = env
        self.env_file = env_file
        self.overrides = overrides

    def snapshot(self) -> Mapping[str, str]:
        """Return the merged environment this source applies.

        Raises:
            SourceReadError: If ``env_file`` cannot be read
        """
        env = os.environ if self.env is None else self.env
        if self.env_file is None and not self.overrides:
            return env

        data: Dict[str, str] = {}
        if self.env_file is not None:
            data.update(read_dotenv(self.env_file))
        data.update(env)
        if self.overrides:
            data.update({k: str(v) for k, v in self.overrides.items()})
        return data

    def apply(self, target: Any, strict: Optional[bool] = None) -> None:
        apply_env(target, env=self.snapshot(), strict=strict)

    def __repr__(self) -> str:
        parts = ["os.environ" if self.env is None else "<snapshot>"]
        if self.env_file is not None:
            parts.append(f"env_file={str(self.env_file)!r}")
        if self.overrides:
            parts.append(f"overrides={sorted(self.overrides)!r}")
        return f"EnvSource({', '.join(parts)})"


class FileSource:
    """Config file layer for ``apply_sources``."""

    def __init__(self, path: Path | str) -> None:
        self.path = path

    def apply(self, target: Any, strict: Optional[bool] = None) -> None:
        apply_files(target, self.path, strict=strict)

    def __repr__(self) -> str:
        return f"FileSource({str(self.path)!r})"


def apply_sources(
    target: Any,
    sources: Iterable[EnvSource | FileSource],
    strict: Optional[bool] = None,
) -> None:
    """Apply sources to the target in precedence order (lowest first).

    Example:
        apply_sources(cfg, [FileSource("defaults.env"), FileSource(".env"), EnvSource()])
    """
    get_target(target)
    strict = _resolve_strict(strict)

    for source in sources:
        source.apply(target, strict=strict)
        _log().debug("Applied source", source=repr(source))
