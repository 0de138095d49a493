"""Label histograms: count, normalize, merge."""
from __future__ import annotations
from typing import Iterable, Optional

import numpy as np

__all__ = ["accumulate_histogram", "normalize_histogram", "compute_histogram", "merge_histograms"]


def accumulate_histogram(label_raster: np.ndarray, points: int) -> np.ndarray:
    bins = points + 2
    labels = np.asarray(label_raster).ravel()
    if labels.dtype.kind not in 'iu':
        raise ValueError(f"Labels must be integers, got dtype {labels.dtype}")
    if labels.size == 0:
        return np.zeros(bins, dtype=np.int64)
    if labels.min() < 0 or labels.max() >= bins:
        raise ValueError(f"Labels must lie in [0, {bins - 1}], got [{labels.min()}, {labels.max()}]")
    return np.bincount(labels.astype(np.intp), minlength=bins).astype(np.int64)


def normalize_histogram(counts: np.ndarray, total: Optional[int] = None) -> np.ndarray:
    """Divide counts by ``total`` (default: their sum). An empty total gives zeros."""
    counts = np.asarray(counts, dtype=np.float64)
    if total is None:
        total = counts.sum()
    if total == 0:
        return np.zeros_like(counts)
    return counts / float(total)


def compute_histogram(label_raster: np.ndarray, points: int) -> np.ndarray:
    """Normalized ``P + 2`` bin histogram of a label raster."""
    raster = np.asarray(label_raster)
    counts = accumulate_histogram(raster, points)
    return normalize_histogram(counts, raster.size)


def merge_histograms(partials: Iterable[np.ndarray]) -> np.ndarray:
    """Sum partial count histograms, e.g. one per worker over disjoint row blocks."""
    merged: Optional[np.ndarray] = None
    for part in partials:
        part = np.asarray(part, dtype=np.int64)
        if merged is None:
            merged = part.copy()
            continue
        if part.shape != merged.shape:
            raise ValueError(f"Cannot merge histograms of shapes {merged.shape} and {part.shape}")
        merged += part
    if merged is None:
        raise ValueError("No histograms to merge")
    return merged
