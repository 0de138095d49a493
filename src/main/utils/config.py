"""Central config helpers for strict YAML-driven settings."""
from __future__ import annotations
import numbers
from typing import Any, Dict, Iterable

import numpy as np

class ConfigError(ValueError):
    """Raised when a configuration value is present but unusable."""

class MissingConfigError(ConfigError):
    pass

def require(cfg: Dict[str, Any], key: str) -> Any:
    if key not in cfg or cfg[key] is None:
        raise MissingConfigError(f"Missing required config key: '{key}'")
    return cfg[key]

def require_nested(cfg: Dict[str, Any], path: str) -> Any:
    cur: Any = cfg
    for part in path.split('.'):
        if not isinstance(cur, dict) or part not in cur or cur[part] is None:
            raise MissingConfigError(f"Missing required config key path: '{path}' (stopped at '{part}')")
        cur = cur[part]
    return cur

def ensure_keys(section: Dict[str, Any], required: Iterable[str], section_name: str):
    for k in required:
        if k not in section or section[k] is None:
            raise MissingConfigError(f"Missing required key '{k}' in section '{section_name}'")

def require_positive(value: Any, name: str, integral: bool = False) -> Any:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise ConfigError(f"'{name}' must be a number, got {value!r}")
    if not value > 0 or value == float('inf'):
        raise ConfigError(f"'{name}' must be a positive finite number, got {value!r}")
    if integral and int(value) != value:
        raise ConfigError(f"'{name}' must be an integer, got {value!r}")
    return int(value) if integral else float(value)

__all__ = [
    'ConfigError', 'MissingConfigError', 'require', 'require_nested', 'ensure_keys', 'require_positive'
]
