from __future__ import annotations
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field
from typing import List
import os
from src.api.dependencies import get_lbp_config_dir
from src.main.lbp.descriptor import LBPConfig, LBPDescriptor
from src.main.lbp.pipeline import load_lbp_settings
from src.main.utils.io_utils import load_gray_image

router = APIRouter(prefix="/lbp", tags=["lbp"])

class HistogramRequest(BaseModel):
    image_path: str = Field(..., description="Local image file path to describe")
    points: int | None = Field(None, description="Ring point count P (defaults to config)")
    radius: float | None = Field(None, description="Ring radius R (defaults to config)")
    mode: str | None = Field(None, description="'interpolated' or 'fixed3x3'")

class HistogramResponse(BaseModel):
    mode: str
    points: int
    radius: float
    bins: int
    histogram: List[float]
    counts: List[int]
    processed_pixels: int
    label_shape: List[int]

@router.post('/histogram', response_model=HistogramResponse, summary="Uniform LBP histogram of a local image")
def lbp_histogram(req: HistogramRequest):
    if not os.path.isfile(req.image_path):
        raise HTTPException(status_code=404, detail='Image not found')
    cfg = load_lbp_settings(get_lbp_config_dir())
    lbp_cfg = dict(cfg.get('lbp') or {})
    for key in ('points', 'radius', 'mode'):
        value = getattr(req, key)
        if value is not None:
            lbp_cfg[key] = value
    try:
        descriptor = LBPDescriptor(config=LBPConfig.from_dict(lbp_cfg))
        image = load_gray_image(req.image_path)
        result = descriptor.describe(image)
    except ValueError as e:  # ConfigError, ImageError, undecodable files
        raise HTTPException(status_code=400, detail=str(e))
    config = descriptor.config
    return HistogramResponse(
        mode=config.mode,
        points=config.points,
        radius=float(config.radius),
        bins=config.bins,
        histogram=[float(v) for v in result.histogram],
        counts=[int(v) for v in result.counts],
        processed_pixels=result.processed_pixels,
        label_shape=list(result.labels.shape),
    )
