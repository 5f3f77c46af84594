# config.py
# SPDX-License-Identifier: MIT
"""Configuration models for licenseguess runs.

The filename and identifier tables are fixed and not configurable; what a
config controls is how license files are read and how logging is set up.
Configs round-trip through JSON and TOML.
"""
from __future__ import annotations

import json
try:  # pragma: no cover - optional dependency
    import tomllib  # Python 3.11+
except ModuleNotFoundError:  # pragma: no cover
    try:
        import tomli as tomllib  # type: ignore[assignment]
    except Exception:  # pragma: no cover
        tomllib = None  # type: ignore[assignment]
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Type, TypeVar

from .log import PACKAGE_LOGGER_NAME, configure_logging

__all__ = [
    "ReadConfig",
    "LoggingConfig",
    "LicenseGuessConfig",
    "load_config_from_path",
]

T = TypeVar("T")


@dataclass(slots=True)
class ReadConfig:
    """Controls how license files are read.

    Attributes:
        max_bytes (int | None): Cap on bytes read from a license file.
            None reads the whole file; a cap can hide signatures that sit
            past it.
        fix_mojibake (bool): Repair UTF-8 text that was saved as cp1252.
    """
    max_bytes: Optional[int] = None
    fix_mojibake: bool = True

    def validate(self) -> None:
        if self.max_bytes is not None and int(self.max_bytes) <= 0:
            raise ValueError("read.max_bytes must be a positive integer when set.")


@dataclass(slots=True)
class LoggingConfig:
    """Controls the package logger; set propagate=True/logger_name to
    integrate with host apps.
    """
    level: int | str = "INFO"
    propagate: bool = False
    fmt: Optional[str] = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    logger_name: str = PACKAGE_LOGGER_NAME

    def apply(self) -> None:
        """Apply this logging configuration to the package logger."""
        configure_logging(
            level=self.level,
            propagate=self.propagate,
            fmt=self.fmt,
            logger_name=self.logger_name or PACKAGE_LOGGER_NAME,
        )


@dataclass(slots=True)
class LicenseGuessConfig:
    """Top-level configuration: ``[read]`` and ``[logging]`` tables."""
    read: ReadConfig = field(default_factory=ReadConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> None:
        self.read.validate()

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable representation, skipping None values."""
        return _dataclass_to_dict(self)

    def to_json(self, path: Path | str, *, indent: int = 2) -> str:
        """Write the configuration as JSON and return the path written."""
        target = Path(path)
        target.write_text(json.dumps(self.to_dict(), indent=indent, sort_keys=True), encoding="utf-8")
        return str(target)

    @classmethod
    def from_dict(cls: Type[T], data: Mapping[str, Any]) -> T:
        """Build a config from a mapping shaped like :meth:`to_dict` output.

        Raises:
            ValueError: Unknown keys are present at any level.
        """
        return _dataclass_from_dict(cls, data)

    @classmethod
    def from_json(cls: Type[T], path: Path | str) -> T:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls.from_dict(payload)

    @classmethod
    def from_toml(cls: Type[T], path: Path | str) -> T:
        if tomllib is None:
            raise RuntimeError(
                "TOML support requires Python 3.11+ (tomllib) or installing the 'tomli' package."
            )
        data = tomllib.loads(Path(path).read_bytes().decode("utf-8"))
        return cls.from_dict(data)


def load_config_from_path(path: str | Path) -> LicenseGuessConfig:
    """Load a LicenseGuessConfig from a ``.toml`` or ``.json`` file.

    Raises:
        ValueError: The extension is neither ``.toml`` nor ``.json``, or the
            document contains unknown keys or invalid values.
    """
    p = Path(path)
    suffix = p.suffix.lower()
    if suffix == ".toml":
        cfg = LicenseGuessConfig.from_toml(p)
    elif suffix == ".json":
        cfg = LicenseGuessConfig.from_json(p)
    else:
        raise ValueError(f"Unsupported config extension {p.suffix!r}; expected .toml or .json.")
    cfg.validate()
    return cfg


def _dataclass_to_dict(obj: Any) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        if value is None:
            continue
        result[f.name] = _dataclass_to_dict(value) if is_dataclass(value) else value
    return result


def _dataclass_from_dict(cls: Type[T], data: Mapping[str, Any] | None) -> T:
    if data is None:
        return cls()  # type: ignore[call-arg]
    if not isinstance(data, Mapping):
        raise TypeError(f"Expected a mapping for {cls.__name__}; got {type(data).__name__}.")
    known = {f.name: f for f in fields(cls)}  # type: ignore[arg-type]
    unknown = sorted(k for k in data if k not in known)
    if unknown:
        raise ValueError(
            f"Unsupported options for {cls.__name__}: {', '.join(unknown)}. "
            f"Allowed keys: {', '.join(sorted(known))}"
        )
    # Nested tables map onto the dataclass defaults of the same field.
    defaults = cls()  # type: ignore[call-arg]
    kwargs: Dict[str, Any] = {}
    for name, value in data.items():
        current = getattr(defaults, name)
        if is_dataclass(current) and not isinstance(current, type):
            kwargs[name] = _dataclass_from_dict(type(current), value)
        else:
            kwargs[name] = value
    return cls(**kwargs)  # type: ignore[arg-type]
