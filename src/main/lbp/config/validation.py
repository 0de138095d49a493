"""Validation for LBP pipeline configuration (strict mode)."""
from __future__ import annotations
from typing import Dict, Any
from ...utils.config import MissingConfigError, ensure_keys, require
from ..descriptor import LBPConfig

def validate_lbp_config(cfg: Dict[str, Any]) -> LBPConfig:
    require(cfg, 'output_dir')
    lbp = cfg.get('lbp')
    if not isinstance(lbp, dict):
        raise MissingConfigError("Missing 'lbp' section")
    ensure_keys(lbp, ['points', 'radius', 'mode'], 'lbp')

    # Inputs: a single file wins over a directory scan
    if not cfg.get('image_path'):
        if not cfg.get('image_dir'):
            raise MissingConfigError("Either 'image_path' or 'image_dir' is required")
        require(cfg, 'image_pattern')

    # Label images (conditional)
    if cfg.get('save_label_images'):
        require(cfg, 'label_output_dir')

    return LBPConfig.from_dict(cfg)

__all__ = ['validate_lbp_config']
