"""
Configuration for ccmetrics.

Supports YAML and JSON configuration files. Values found in a file are
deep-merged over the built-in defaults, and command-line flags override
both.
"""

from __future__ import annotations

import copy
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ccmetrics.analysis.operators import OperatorResolution
from ccmetrics.core.records import Strategy
from ccmetrics.core.registry import parse_strategies
from ccmetrics.errors import ConfigError


CONFIG_FILE_NAMES = [
    ".ccmetrics.yaml",
    ".ccmetrics.yml",
    ".ccmetrics.json",
]

DEFAULT_CONFIG: Dict[str, Any] = {
    "version": 1,
    "analysis": {
        "strategy": "decision",
        "operator_resolution": "auto",
        "max_workers": 1,
    },
    "frontend": {
        "strict": False,
        "clang": "clang",
        "clang_args": [],
    },
    "reporting": {
        "output": "output.cy",
        "format": "text",
        "append": True,
        "fail_above": None,
    },
    "instructions": {
        "output": None,
    },
    "logging": {
        "level": "WARNING",
    },
}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


@dataclass(frozen=True)
class Config:
    data: Dict[str, Any]

    @classmethod
    def default(cls) -> "Config":
        return cls(copy.deepcopy(DEFAULT_CONFIG))

    @classmethod
    def load(cls, path: Optional[str]) -> "Config":
        if not path:
            return cls.default()
        config_path = Path(path)
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {path}")
        try:
            raw = config_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
        try:
            if config_path.suffix.lower() == ".json":
                overrides = json.loads(raw)
            else:
                overrides = yaml.safe_load(raw) or {}
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            raise ConfigError(f"Malformed config file {path}: {exc}") from exc
        if not isinstance(overrides, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")
        return cls(_deep_merge(DEFAULT_CONFIG, overrides))

    def with_overrides(self, overrides: Dict[str, Any]) -> "Config":
        return Config(_deep_merge(self.data, overrides))

    def section(self, name: str) -> Dict[str, Any]:
        return self.data.get(name) or {}

    def strategies(self) -> List[Strategy]:
        try:
            return parse_strategies(self.section("analysis").get("strategy", "decision"))
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc

    def operator_resolution(self) -> OperatorResolution:
        value = self.section("analysis").get("operator_resolution", "auto")
        try:
            return OperatorResolution(value)
        except ValueError:
            raise ConfigError(f"Unknown operator resolution: {value}") from None

    def max_workers(self) -> int:
        return max(1, int(self.section("analysis").get("max_workers", 1)))

    def strict_parse(self) -> bool:
        return bool(self.section("frontend").get("strict", False))

    def clang(self) -> str:
        return self.section("frontend").get("clang", "clang")

    def clang_args(self) -> List[str]:
        return list(self.section("frontend").get("clang_args", []))

    def reporting(self) -> Dict[str, Any]:
        return self.section("reporting")

    def instructions(self) -> Dict[str, Any]:
        return self.section("instructions")

    def log_level(self) -> str:
        return str(self.section("logging").get("level", "WARNING")).upper()


def find_config(start_path: str = ".") -> Optional[str]:
    """
    Find a configuration file by searching up the directory tree.

    Returns the path to the first config file found, or None.
    """
    current = Path(start_path).resolve()
    if current.is_file():
        current = current.parent

    while True:
        for name in CONFIG_FILE_NAMES:
            config_path = current / name
            if config_path.exists():
                return str(config_path)
        if current == current.parent:
            return None
        current = current.parent


def create_default_config() -> str:
    """Render the default configuration as YAML."""
    return yaml.safe_dump(DEFAULT_CONFIG, default_flow_style=False, sort_keys=False)
