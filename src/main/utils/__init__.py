from .config_loader import load_configs
from .config import ConfigError, MissingConfigError
from .io_utils import ensure_dir, flush_dir, load_gray_image, save_histogram, save_label_image
__all__ = [
    "load_configs",
    "ConfigError",
    "MissingConfigError",
    "ensure_dir",
    "flush_dir",
    "load_gray_image",
    "save_histogram",
    "save_label_image",
]
