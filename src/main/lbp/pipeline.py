"""Batch LBP texture pipeline: images on disk -> normalized histograms on disk."""
from __future__ import annotations
import argparse
import glob
import os
import time
from typing import Any, Dict, List, Optional

from tqdm import tqdm

from src.main.utils.config_loader import load_configs
from src.main.utils.io_utils import flush_dir, load_gray_image, save_histogram, save_label_image
from src.main.lbp.config.validation import validate_lbp_config
from src.main.lbp.descriptor import LBPDescriptor

__all__ = ["TexturePipeline", "load_lbp_settings", "main"]


def load_lbp_settings(config_dir: str) -> Dict[str, Any]:
    base = os.path.join(config_dir, 'base.yml')
    debug = os.path.join(config_dir, 'debug.yml')
    return load_configs([base, debug], optional=[debug])


class TexturePipeline:
    def __init__(self, cfg: Dict[str, Any]):
        self.cfg = cfg
        self.lbp_config = validate_lbp_config(cfg)
        self.descriptor = LBPDescriptor(config=self.lbp_config)

    def image_paths(self) -> List[str]:
        cfg = self.cfg
        if cfg.get('image_path'):
            path = cfg['image_path']
            if not os.path.isfile(path):
                raise FileNotFoundError(f"Image not found: {path}")
            return [path]
        image_dir = cfg['image_dir']
        if not os.path.isdir(image_dir):
            raise FileNotFoundError(f"Image directory not found: {image_dir}")
        return sorted(glob.glob(os.path.join(image_dir, cfg['image_pattern'])))

    def run(self) -> Dict[str, List[float]]:
        cfg = self.cfg
        paths = self.image_paths()
        names = [os.path.splitext(os.path.basename(p))[0] for p in paths]
        clashes = sorted({n for n in names if names.count(n) > 1})
        if clashes:
            raise ValueError(f"Images share output names (same stem, different extension): {clashes}")

        # Fresh run: clear previous outputs so histograms from different inputs don't mix
        if cfg.get('flush_output', True):
            flush_dir(cfg['output_dir'])
            if cfg.get('save_label_images'):
                flush_dir(cfg['label_output_dir'])

        results: Dict[str, List[float]] = {}
        start_time = time.time()
        progress = tqdm(zip(paths, names), total=len(paths), disable=not cfg.get('progress_bar', True), desc="LBP Pipeline")
        for path, name in progress:
            result = self.descriptor.describe(load_gray_image(path))
            histogram = [float(v) for v in result.histogram]
            save_histogram({
                'image': path,
                'config': result.config,
                'processed_pixels': result.processed_pixels,
                'label_shape': list(result.labels.shape),
                'counts': [int(v) for v in result.counts],
                'histogram': histogram,
            }, cfg['output_dir'], name)
            if cfg.get('save_label_images'):
                save_label_image(result.labels, self.lbp_config.bins, cfg['label_output_dir'], name)
            results[name] = histogram

        elapsed = time.time() - start_time
        if cfg.get('verbose', True):
            print(f"LBP pipeline finished. {len(results)} histograms written to {cfg['output_dir']} in {elapsed:.2f}s")
        return results


def main(argv: Optional[List[str]] = None):
    root = os.path.dirname(__file__)
    parser = argparse.ArgumentParser(description="Compute uniform LBP histograms for grayscale images")
    parser.add_argument('--config-dir', default=os.path.join(root, 'config'))
    parser.add_argument('--image', help="Single image to process (overrides image_dir)")
    parser.add_argument('--image-dir')
    parser.add_argument('--output-dir')
    args = parser.parse_args(argv)

    cfg = load_lbp_settings(args.config_dir)
    if args.image:
        cfg['image_path'] = args.image
    if args.image_dir:
        cfg['image_dir'] = args.image_dir
    if args.output_dir:
        cfg['output_dir'] = args.output_dir
    pipeline = TexturePipeline(cfg)
    pipeline.run()


if __name__ == '__main__':
    main()
