from .sampler import (
    SamplingError,
    Region,
    FIXED_3X3_OFFSETS,
    ring_offsets,
    safe_region,
    sample_bilinear,
    sample_ring,
    sample_fixed3x3,
)
from .encoder import threshold, count_transitions, uniform_label, encode, pack_bits
from .histogram import accumulate_histogram, normalize_histogram, compute_histogram, merge_histograms
from .descriptor import (
    MODE_INTERPOLATED,
    MODE_FIXED_3X3,
    ImageError,
    LBPConfig,
    LBPDescriptor,
    DescriptorResult,
    compute_label_raster,
    compute_label_raster_fixed3x3,
    compute_code_raster,
)
__all__ = [
    "SamplingError",
    "Region",
    "FIXED_3X3_OFFSETS",
    "ring_offsets",
    "safe_region",
    "sample_bilinear",
    "sample_ring",
    "sample_fixed3x3",
    "threshold",
    "count_transitions",
    "uniform_label",
    "encode",
    "accumulate_histogram",
    "normalize_histogram",
    "compute_histogram",
    "merge_histograms",
    "MODE_INTERPOLATED",
    "MODE_FIXED_3X3",
    "ImageError",
    "LBPConfig",
    "LBPDescriptor",
    "DescriptorResult",
    "compute_label_raster",
    "compute_label_raster_fixed3x3",
    "compute_code_raster",
    "pack_bits",
]
