"""I/O utilities for loading images and saving descriptor outputs."""
from __future__ import annotations
import json
import os
import shutil
import cv2
import numpy as np
from typing import Any, Dict, Optional

__all__ = ["ensure_dir", "flush_dir", "load_gray_image", "save_histogram", "save_label_image"]

# ---- Directory utilities ----

def ensure_dir(path: str):
    os.makedirs(path, exist_ok=True)


def flush_dir(path: str):
    """Remove all contents of a directory and recreate it.

    Safety guards:
      - Path must exist or be creatable.
      - Path length must be > 3 characters to avoid accidental root wipes.
    """
    if not path:
        return
    norm = os.path.abspath(path)
    # Basic safety: avoid wiping drive roots like C:\ or /
    if len(norm) <= 3:
        return
    if os.path.isdir(norm):
        shutil.rmtree(norm, ignore_errors=True)
    os.makedirs(norm, exist_ok=True)

# ---- Images ----

def load_gray_image(path: str) -> np.ndarray:
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Image not found: {path}")
    image = cv2.imread(path, cv2.IMREAD_GRAYSCALE)
    if image is None:
        raise ValueError(f"Could not decode image: {path}")
    return image


def save_label_image(labels: np.ndarray, bins: int, out_dir: str, name: str) -> Optional[str]:
    """Write labels stretched to 0..255 so the bins are visible. Returns the path or None."""
    ensure_dir(out_dir)
    out_path = os.path.join(out_dir, f"{name}_labels.png")
    scale = 255.0 / max(bins - 1, 1)
    stretched = np.clip(np.rint(labels.astype(np.float64) * scale), 0, 255).astype(np.uint8)
    if stretched.size == 0:
        return None
    ok = cv2.imwrite(out_path, stretched, [cv2.IMWRITE_PNG_COMPRESSION, 3])
    return out_path if ok else None

# ---- Histograms ----

def save_histogram(payload: Dict[str, Any], out_dir: str, name: str) -> str:
    ensure_dir(out_dir)
    out_path = os.path.join(out_dir, f"{name}_lbp.json")
    with open(out_path, 'w', encoding='utf-8') as f:
        json.dump(payload, f, indent=2)
    return out_path
