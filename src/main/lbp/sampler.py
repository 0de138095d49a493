"""Neighbor sampling for Local Binary Patterns.

Two samplers share one shape: given a center pixel they return the ring of
neighbor intensities the encoder thresholds.

* Interpolated: P points on a circle of radius R, read with bilinear
  interpolation. Only pixels inside :func:`safe_region` may be sampled.
* Fixed 3x3: the 8 direct neighbors, clockwise from the top-left corner.
  Neighbors outside the image read as 0 (not clamped, not wrapped).

Scalar functions (``sample_bilinear``, ``sample_fixed3x3``) check bounds and
raise :class:`SamplingError`. Plane functions apply the identical arithmetic
to whole coordinate arrays at once.
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

__all__ = [
    "SamplingError",
    "Region",
    "FIXED_3X3_OFFSETS",
    "ring_offsets",
    "safe_region",
    "sample_bilinear",
    "bilinear_plane",
    "sample_ring",
    "sample_fixed3x3",
    "fixed3x3_planes",
]


class SamplingError(IndexError):
    pass


# (dr, dc) clockwise from NW: NW, N, NE, E, SE, S, SW, W
FIXED_3X3_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, 1),
    (1, 1), (1, 0), (1, -1),
    (0, -1),
)


@dataclass(frozen=True)
class Region:
    """Half-open rectangle ``[top, bottom) x [left, right)`` of image pixels."""
    top: int
    left: int
    bottom: int
    right: int

    @property
    def height(self) -> int:
        return max(0, self.bottom - self.top)

    @property
    def width(self) -> int:
        return max(0, self.right - self.left)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.height, self.width

    @property
    def area(self) -> int:
        return self.height * self.width


def ring_offsets(points: int, radius: float) -> List[Tuple[float, float]]:
    """Offsets ``(dr, dc)`` of the P ring samples.

    Index 0 lies east of the center; indices advance through north
    (negative row) first.
    """
    offsets = []
    for i in range(points):
        angle = 2 * math.pi * i / points
        offsets.append((-radius * math.sin(angle), radius * math.cos(angle)))
    return offsets


def safe_region(shape: Tuple[int, int], radius: float) -> Region:
    """Pixels whose whole ring, including interpolation corners, is in-bounds."""
    rows, cols = shape[:2]
    margin = int(math.ceil(radius))
    top = left = margin
    bottom = max(top, rows - margin)
    right = max(left, cols - margin)
    return Region(top=top, left=left, bottom=bottom, right=right)


def _check_corners(image: np.ndarray, minr, maxr, minc, maxc) -> None:
    rows, cols = image.shape[:2]
    if np.any(minr < 0) or np.any(minc < 0) or np.any(maxr >= rows) or np.any(maxc >= cols):
        raise SamplingError(
            f"Interpolation corners outside image of shape {rows}x{cols}: "
            f"rows [{np.min(minr)}, {np.max(maxr)}], cols [{np.min(minc)}, {np.max(maxc)}]"
        )


def sample_bilinear(image: np.ndarray, row: float, col: float) -> float:
    """Bilinear interpolation of ``image`` at a (possibly fractional) position.

    Interpolates across columns on the two enclosing rows, then across rows.
    Integer coordinates return the pixel value exactly.
    """
    if not (math.isfinite(row) and math.isfinite(col)):
        raise SamplingError(f"Non-finite sample position ({row}, {col})")
    minr = int(math.floor(row))
    maxr = int(math.ceil(row))
    minc = int(math.floor(col))
    maxc = int(math.ceil(col))
    _check_corners(image, minr, maxr, minc, maxc)
    dr = row - minr
    dc = col - minc
    top = (1 - dc) * int(image[minr, minc]) + dc * int(image[minr, maxc])
    bottom = (1 - dc) * int(image[maxr, minc]) + dc * int(image[maxr, maxc])
    return (1 - dr) * top + dr * bottom


def bilinear_plane(image: np.ndarray, rows: np.ndarray, cols: np.ndarray) -> np.ndarray:
    """Element-wise :func:`sample_bilinear` over broadcastable coordinate arrays."""
    rows = np.asarray(rows, dtype=np.float64)
    cols = np.asarray(cols, dtype=np.float64)
    rows, cols = np.broadcast_arrays(rows, cols)
    minr = np.floor(rows).astype(np.intp)
    maxr = np.ceil(rows).astype(np.intp)
    minc = np.floor(cols).astype(np.intp)
    maxc = np.ceil(cols).astype(np.intp)
    if rows.size:
        _check_corners(image, minr, maxr, minc, maxc)
    dr = rows - minr
    dc = cols - minc
    pixels = image.astype(np.float64, copy=False)
    top = (1 - dc) * pixels[minr, minc] + dc * pixels[minr, maxc]
    bottom = (1 - dc) * pixels[maxr, minc] + dc * pixels[maxr, maxc]
    return (1 - dr) * top + dr * bottom


def sample_ring(image: np.ndarray, row: int, col: int, points: int, radius: float) -> np.ndarray:
    """Interpolated intensities of the P ring samples around one pixel."""
    return np.array(
        [sample_bilinear(image, row + dr, col + dc) for dr, dc in ring_offsets(points, radius)],
        dtype=np.float64,
    )


def sample_fixed3x3(image: np.ndarray, row: int, col: int, index: int) -> int:
    """Exact intensity of 3x3 neighbor ``index`` (0=NW .. 7=W), 0 outside the image."""
    rows, cols = image.shape[:2]
    if not 0 <= index < len(FIXED_3X3_OFFSETS):
        raise SamplingError(f"Neighbor index must be in [0, 8), got {index}")
    if not (0 <= row < rows and 0 <= col < cols):
        raise SamplingError(f"Center ({row}, {col}) outside image of shape {rows}x{cols}")
    dr, dc = FIXED_3X3_OFFSETS[index]
    r, c = row + dr, col + dc
    if 0 <= r < rows and 0 <= c < cols:
        return int(image[r, c])
    return 0


def fixed3x3_planes(image: np.ndarray) -> np.ndarray:
    """Stack ``(8, rows, cols)`` of neighbor intensities with 0-fill borders."""
    rows, cols = image.shape[:2]
    padded = np.pad(image, 1, mode='constant', constant_values=0)
    planes = np.empty((len(FIXED_3X3_OFFSETS), rows, cols), dtype=image.dtype)
    for idx, (dr, dc) in enumerate(FIXED_3X3_OFFSETS):
        planes[idx] = padded[1 + dr:1 + dr + rows, 1 + dc:1 + dc + cols]
    return planes
