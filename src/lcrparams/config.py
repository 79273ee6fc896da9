"""Configuration management for lcrparams."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional, Dict, Any

import yaml

from lcrparams.constants import (
    DEFAULT_TARGET_LENGTH,
    MAX_TARGET_LENGTH,
    MIN_TARGET_LENGTH,
    MISSING_LENGTH_DEFAULT,
    MISSING_LENGTH_POLICIES,
)
from lcrparams.exceptions import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class RuntimeConfig:
    """Runtime configuration."""

    log_level: str = "WARNING"
    log_file: Optional[Path] = None

    @property
    def log_level_value(self) -> int:
        return getattr(logging, str(self.log_level).upper())


@dataclass
class Config:
    """Main configuration class."""

    # Substituted for an out-of-range -l, and for a missing -l under the 'default' policy
    default_target_length: int = DEFAULT_TARGET_LENGTH
    # 'default' or 'sentinel' (compute on the unset value -1, every row NA)
    missing_length: str = MISSING_LENGTH_DEFAULT

    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)

    def validate(self) -> None:
        """Validate configuration."""
        if self.missing_length not in MISSING_LENGTH_POLICIES:
            raise ConfigurationError(
                f"Invalid missing_length: {self.missing_length!r} "
                f"(expected one of: {', '.join(MISSING_LENGTH_POLICIES)})"
            )
        length = self.default_target_length
        if isinstance(length, bool) or not isinstance(length, int):
            raise ConfigurationError(
                f"default_target_length must be an integer, got {length!r}"
            )
        if not MIN_TARGET_LENGTH <= length <= MAX_TARGET_LENGTH:
            raise ConfigurationError(
                f"default_target_length must be in {MIN_TARGET_LENGTH}-{MAX_TARGET_LENGTH}, "
                f"got {length}"
            )
        if str(self.runtime.log_level).upper() not in LOG_LEVELS:
            raise ConfigurationError(f"Invalid runtime.log_level: {self.runtime.log_level!r}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        data = asdict(self)
        if data["runtime"]["log_file"] is not None:
            data["runtime"]["log_file"] = str(data["runtime"]["log_file"])
        return data


def load_config(path: Path) -> Config:
    """Load configuration from YAML file."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as exc:
        raise ConfigurationError(f"Cannot read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in config file {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")

    known = {"default_target_length", "missing_length", "runtime"}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError("Unsupported config option(s): " + ", ".join(unknown))

    cfg = Config()
    if data.get("default_target_length") is not None:
        cfg.default_target_length = data["default_target_length"]
    if data.get("missing_length") is not None:
        cfg.missing_length = str(data["missing_length"])

    runtime = data.get("runtime") or {}
    if not isinstance(runtime, dict):
        raise ConfigurationError("runtime must be a mapping")
    for key, value in runtime.items():
        if not hasattr(cfg.runtime, key):
            raise ConfigurationError(f"Unsupported config option: runtime.{key}")
        if key == "log_file" and value:
            value = Path(value)
        setattr(cfg.runtime, key, value)

    return cfg


def save_config(cfg: Config, path: Path) -> None:
    """Save configuration to YAML file."""
    data = cfg.to_dict()
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
