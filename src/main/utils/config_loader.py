"""Config loader that merges multiple YAML files into a single dict.
Load order defines precedence (later overrides earlier). Files listed as
optional are skipped when absent; all others must exist."""
from __future__ import annotations
import yaml
from typing import Any, Dict, Iterable, List
import os


def load_yaml_file(path: str) -> Dict[str, Any]:
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping at top level: {path}")
    return data


def merge_dicts(dicts: List[Dict[str, Any]]) -> Dict[str, Any]:
    result: Dict[str, Any] = {}
    for d in dicts:
        for k, v in d.items():
            if isinstance(v, dict) and isinstance(result.get(k), dict):
                result[k] = merge_dicts([result[k], v])  # type: ignore[arg-type]
            else:
                result[k] = v
    return result


def load_configs(paths: List[str], optional: Iterable[str] = ()) -> Dict[str, Any]:
    skip = {os.path.abspath(p) for p in optional}
    configs = [
        load_yaml_file(p) for p in paths
        if os.path.isfile(p) or os.path.abspath(p) not in skip
    ]
    return merge_dicts(configs)

__all__ = ["load_configs", "load_yaml_file", "merge_dicts"]
