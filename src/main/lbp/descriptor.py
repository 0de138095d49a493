"""Uniform LBP descriptor: label rasters and normalized histograms.

Entry points
------------
compute_label_raster(image, points, radius, mode)
    ``mode='interpolated'``: P bilinear samples on a circle of radius R.
    The raster covers :func:`safe_region` only, so ``raster[0, 0]`` is image
    pixel ``(m, m)`` with ``m = ceil(R)`` and every cell is processed.
    ``mode='fixed3x3'``: delegates to compute_label_raster_fixed3x3.
compute_label_raster_fixed3x3(image)
    Full-size raster over the 8-neighborhood, 0-fill outside the image.
compute_code_raster(image)
    Plain 8-bit codes over the interior ``(rows-2) x (cols-2)``, strict ``>``,
    NW in bit 7 down to W in bit 0. No uniform mapping.
compute_histogram(label_raster, points)
    ``P + 2`` bins normalized by raster area.

Default conventions (overridable through LBPConfig):
interpolated samples are rounded to integers and compared with ``>=`` using
the truncated transition scan; the fixed 3x3 path compares raw intensities
with ``>`` using the linear scan.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import numpy as np

from src.main.utils.config import ConfigError, require_positive
from .encoder import (
    SCAN_LINEAR,
    SCAN_TRUNCATED,
    TRANSITION_SCANS,
    encode,
    pack_bits,
    round_intensity,
    threshold,
)
from .histogram import accumulate_histogram, compute_histogram, normalize_histogram
from .sampler import Region, bilinear_plane, fixed3x3_planes, ring_offsets, safe_region

__all__ = [
    "MODE_INTERPOLATED",
    "MODE_FIXED_3X3",
    "MODES",
    "ImageError",
    "LBPConfig",
    "DescriptorResult",
    "LBPDescriptor",
    "as_gray_image",
    "label_dtype",
    "compute_label_raster",
    "compute_label_raster_fixed3x3",
    "compute_code_raster",
    "compute_histogram",
]

MODE_INTERPOLATED = 'interpolated'
MODE_FIXED_3X3 = 'fixed3x3'
MODES = (MODE_INTERPOLATED, MODE_FIXED_3X3)


class ImageError(ValueError):
    pass


@dataclass
class LBPConfig:
    points: int = 8
    radius: float = 1
    mode: str = MODE_INTERPOLATED
    strict_threshold: Optional[bool] = None  # None: per-mode default
    transition_scan: Optional[str] = None

    def validate(self) -> "LBPConfig":
        if self.mode not in MODES:
            raise ConfigError(f"Unknown LBP mode '{self.mode}', expected one of {MODES}")
        self.points = require_positive(self.points, 'points', integral=True)
        self.radius = require_positive(self.radius, 'radius')
        if self.mode == MODE_FIXED_3X3 and (self.points != 8 or self.radius != 1):
            raise ConfigError(
                f"Mode '{MODE_FIXED_3X3}' samples the 8-neighborhood (points=8, radius=1), "
                f"got points={self.points}, radius={self.radius}"
            )
        if self.strict_threshold is not None and not isinstance(self.strict_threshold, bool):
            raise ConfigError(f"'strict_threshold' must be a boolean, got {self.strict_threshold!r}")
        if self.transition_scan is not None and self.transition_scan not in TRANSITION_SCANS:
            raise ConfigError(
                f"Unknown transition scan '{self.transition_scan}', expected one of {TRANSITION_SCANS}"
            )
        return self

    @property
    def bins(self) -> int:
        return self.points + 2

    @property
    def strict(self) -> bool:
        if self.strict_threshold is not None:
            return self.strict_threshold
        return self.mode == MODE_FIXED_3X3

    @property
    def scan(self) -> str:
        if self.transition_scan is not None:
            return self.transition_scan
        return SCAN_LINEAR if self.mode == MODE_FIXED_3X3 else SCAN_TRUNCATED

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> "LBPConfig":
        """Build from a merged settings dict (``lbp`` section) or the section itself."""
        section = cfg.get('lbp', cfg)
        if not isinstance(section, dict):
            raise ConfigError("'lbp' section must be a mapping")
        return cls(
            points=section.get('points', 8),
            radius=section.get('radius', 1),
            mode=section.get('mode', MODE_INTERPOLATED),
            strict_threshold=section.get('strict_threshold'),
            transition_scan=section.get('transition_scan'),
        ).validate()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'points': self.points,
            'radius': self.radius,
            'mode': self.mode,
            'strict_threshold': self.strict,
            'transition_scan': self.scan,
        }


def as_gray_image(image) -> np.ndarray:
    """Validate a single-channel 8-bit image, returning it as ``uint8``."""
    arr = np.asarray(image)
    if arr.ndim != 2:
        raise ImageError(f"Expected a 2-D grayscale image, got shape {arr.shape}")
    if arr.dtype == np.uint8:
        return arr
    if arr.dtype.kind not in 'iu':
        raise ImageError(f"Expected 8-bit integer samples, got dtype {arr.dtype}")
    if arr.size and (arr.min() < 0 or arr.max() > 255):
        raise ImageError(f"Samples must lie in [0, 255], got [{arr.min()}, {arr.max()}]")
    return arr.astype(np.uint8)


def label_dtype(points: int):
    return np.uint8 if points + 1 <= np.iinfo(np.uint8).max else np.uint16


def _interpolated_labels(gray: np.ndarray, cfg: LBPConfig) -> np.ndarray:
    region = safe_region(gray.shape, cfg.radius)
    labels = np.zeros(region.shape, dtype=label_dtype(cfg.points))
    if region.area == 0:
        return labels
    rr = np.arange(region.top, region.bottom, dtype=np.float64)[:, None]
    cc = np.arange(region.left, region.right, dtype=np.float64)[None, :]
    centers = gray[region.top:region.bottom, region.left:region.right]
    neighbors = np.stack([
        round_intensity(bilinear_plane(gray, rr + dr, cc + dc))
        for dr, dc in ring_offsets(cfg.points, cfg.radius)
    ])
    labels[...] = encode(centers, neighbors, strict=cfg.strict, scan=cfg.scan)
    return labels


def _fixed3x3_labels(gray: np.ndarray, cfg: LBPConfig) -> np.ndarray:
    labels = np.zeros(gray.shape, dtype=label_dtype(cfg.points))
    if gray.size == 0:
        return labels
    labels[...] = encode(gray, fixed3x3_planes(gray), strict=cfg.strict, scan=cfg.scan)
    return labels


def _labels_for(gray: np.ndarray, cfg: LBPConfig) -> np.ndarray:
    if cfg.mode == MODE_FIXED_3X3:
        return _fixed3x3_labels(gray, cfg)
    return _interpolated_labels(gray, cfg)


def compute_label_raster(
    image,
    points: int,
    radius: float,
    mode: str = MODE_INTERPOLATED,
    strict: Optional[bool] = None,
    scan: Optional[str] = None,
) -> np.ndarray:
    cfg = LBPConfig(points=points, radius=radius, mode=mode,
                    strict_threshold=strict, transition_scan=scan).validate()
    return _labels_for(as_gray_image(image), cfg)


def compute_label_raster_fixed3x3(image, strict: Optional[bool] = None, scan: Optional[str] = None) -> np.ndarray:
    cfg = LBPConfig(mode=MODE_FIXED_3X3, strict_threshold=strict, transition_scan=scan).validate()
    return _fixed3x3_labels(as_gray_image(image), cfg)


def compute_code_raster(image) -> np.ndarray:
    gray = as_gray_image(image)
    region = safe_region(gray.shape, 1)
    codes = np.zeros(region.shape, dtype=np.uint8)
    if region.area == 0:
        return codes
    interior = (slice(region.top, region.bottom), slice(region.left, region.right))
    neighbors = fixed3x3_planes(gray)[(slice(None),) + interior]
    codes[...] = pack_bits(threshold(gray[interior], neighbors, strict=True))
    return codes


@dataclass
class DescriptorResult:
    labels: np.ndarray
    counts: np.ndarray
    histogram: np.ndarray
    region: Region
    config: Dict[str, Any] = field(default_factory=dict)

    @property
    def processed_pixels(self) -> int:
        return int(self.labels.size)


class LBPDescriptor:
    """Reusable descriptor bound to one validated configuration."""

    def __init__(self, cfg: Optional[Dict[str, Any]] = None, config: Optional[LBPConfig] = None):
        if config is None:
            config = LBPConfig.from_dict(cfg or {})
        self.config = config.validate()

    def region(self, shape) -> Region:
        if self.config.mode == MODE_FIXED_3X3:
            return Region(top=0, left=0, bottom=shape[0], right=shape[1])
        return safe_region(shape, self.config.radius)

    def labels(self, image) -> np.ndarray:
        return _labels_for(as_gray_image(image), self.config)

    def histogram(self, image) -> np.ndarray:
        return compute_histogram(self.labels(image), self.config.points)

    def describe(self, image) -> DescriptorResult:
        gray = as_gray_image(image)
        labels = _labels_for(gray, self.config)
        counts = accumulate_histogram(labels, self.config.points)
        return DescriptorResult(
            labels=labels,
            counts=counts,
            histogram=normalize_histogram(counts, labels.size),
            region=self.region(gray.shape),
            config=self.config.to_dict(),
        )
