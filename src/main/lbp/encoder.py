"""Uniform LBP encoding: threshold, count transitions, assign a label.

All functions take the neighbor axis first, so the same code handles one
pixel (shape ``(P,)``) or whole neighbor planes (shape ``(P, H, W)``).

Transition scans
----------------
``truncated``  compare pairs (i, i+1) for i in [0, P-2). The last pair and the
               wrap-around pair are not counted. Default for the interpolated
               sampler.
``linear``     compare pairs (i, i+1) for i in [0, P-1). No wrap-around.
               Default for the fixed 3x3 sampler.
``circular``   ``linear`` plus the pair (P-1, 0): the textbook definition.

Label ``P + 1`` marks a non-uniform pattern (more than two transitions).

:func:`pack_bits` skips the uniform mapping and returns the raw P-bit code,
neighbor 0 in the most significant bit.
"""
from __future__ import annotations
from typing import Union

import numpy as np

__all__ = [
    "SCAN_TRUNCATED",
    "SCAN_LINEAR",
    "SCAN_CIRCULAR",
    "TRANSITION_SCANS",
    "round_intensity",
    "threshold",
    "count_transitions",
    "uniform_label",
    "encode",
    "pack_bits",
]

SCAN_TRUNCATED = 'truncated'
SCAN_LINEAR = 'linear'
SCAN_CIRCULAR = 'circular'
TRANSITION_SCANS = (SCAN_TRUNCATED, SCAN_LINEAR, SCAN_CIRCULAR)

ArrayLike = Union[np.ndarray, list, tuple]


def round_intensity(values: ArrayLike) -> np.ndarray:
    """Round interpolated intensities to the nearest integer (ties to even)."""
    return np.rint(np.asarray(values, dtype=np.float64)).astype(np.int64)


def threshold(center, neighbors: ArrayLike, strict: bool = False) -> np.ndarray:
    """Signature bits: neighbor >= center (or > center when ``strict``)."""
    neighbors = np.asarray(neighbors).astype(np.int64, copy=False)
    center = np.asarray(center).astype(np.int64, copy=False)
    if strict:
        return neighbors > center
    return neighbors >= center


def count_transitions(bits: ArrayLike, scan: str = SCAN_TRUNCATED) -> np.ndarray:
    bits = np.asarray(bits, dtype=bool)
    points = bits.shape[0]
    if scan == SCAN_TRUNCATED:
        pairs = max(points - 2, 0)
    elif scan in (SCAN_LINEAR, SCAN_CIRCULAR):
        pairs = max(points - 1, 0)
    else:
        raise ValueError(f"Unknown transition scan '{scan}', expected one of {TRANSITION_SCANS}")
    changes = np.sum(bits[:pairs] != bits[1:pairs + 1], axis=0)
    if scan == SCAN_CIRCULAR and points > 1:
        changes = changes + (bits[-1] != bits[0])
    return np.asarray(changes, dtype=np.int64)


def uniform_label(bits: ArrayLike, scan: str = SCAN_TRUNCATED) -> np.ndarray:
    """Popcount of uniform signatures, ``P + 1`` for the rest."""
    bits = np.asarray(bits, dtype=bool)
    points = bits.shape[0]
    ones = np.sum(bits, axis=0, dtype=np.int64)
    return np.where(count_transitions(bits, scan) <= 2, ones, points + 1)


def encode(center, neighbors: ArrayLike, strict: bool = False, scan: str = SCAN_TRUNCATED):
    """Label for one pixel (int) or a label plane (array)."""
    label = uniform_label(threshold(center, neighbors, strict=strict), scan)
    return int(label) if np.ndim(label) == 0 else label


def pack_bits(bits: ArrayLike) -> np.ndarray:
    """Raw LBP code: bit ``P - 1 - i`` is set when neighbor ``i`` passed the threshold."""
    bits = np.asarray(bits, dtype=bool)
    points = bits.shape[0]
    weights = (1 << np.arange(points - 1, -1, -1, dtype=np.int64)).reshape((points,) + (1,) * (bits.ndim - 1))
    return np.sum(bits * weights, axis=0, dtype=np.int64)
