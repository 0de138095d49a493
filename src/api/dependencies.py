from __future__ import annotations
from functools import lru_cache
import os


@lru_cache(maxsize=1)
def get_lbp_config_dir() -> str:
    # Could be overridden by env var
    default = os.path.join(os.path.dirname(os.path.dirname(__file__)), 'main', 'lbp', 'config')
    return os.environ.get('LBP_CONFIG_DIR', default)
