import json
import cv2
import numpy as np
import pytest
from src.main.lbp.pipeline import TexturePipeline, main


def _cfg(tmp_path, **extra):
    cfg = {
        'lbp': {'points': 8, 'radius': 1, 'mode': 'interpolated'},
        'image_dir': str(tmp_path / 'images'),
        'image_pattern': '*.png',
        'output_dir': str(tmp_path / 'hist'),
        'label_output_dir': str(tmp_path / 'labels'),
        'progress_bar': False,
        'verbose': False,
    }
    cfg.update(extra)
    return cfg


def _write_images(tmp_path):
    img_dir = tmp_path / 'images'
    img_dir.mkdir()
    rng = np.random.default_rng(0)
    cv2.imwrite(str(img_dir / 'noise.png'), rng.integers(0, 256, size=(20, 24), dtype=np.uint8))
    cv2.imwrite(str(img_dir / 'flat.png'), np.full((10, 10), 90, dtype=np.uint8))
    return img_dir


def test_pipeline_writes_histograms(tmp_path):
    _write_images(tmp_path)
    results = TexturePipeline(_cfg(tmp_path)).run()
    assert sorted(results) == ['flat', 'noise']
    assert results['flat'][8] == pytest.approx(1.0)
    with open(tmp_path / 'hist' / 'noise_lbp.json', encoding='utf-8') as f:
        payload = json.load(f)
    assert payload['processed_pixels'] == 18 * 22
    assert payload['label_shape'] == [18, 22]
    assert sum(payload['counts']) == 18 * 22
    assert sum(payload['histogram']) == pytest.approx(1.0)
    assert payload['config']['mode'] == 'interpolated'


def test_pipeline_label_images(tmp_path):
    _write_images(tmp_path)
    cfg = _cfg(tmp_path, save_label_images=True, lbp={'points': 8, 'radius': 1, 'mode': 'fixed3x3'})
    TexturePipeline(cfg).run()
    labels = cv2.imread(str(tmp_path / 'labels' / 'flat_labels.png'), cv2.IMREAD_GRAYSCALE)
    assert labels.shape == (10, 10)
    assert np.all(labels == 0)


def test_pipeline_single_image_and_missing_input(tmp_path):
    img_dir = _write_images(tmp_path)
    results = TexturePipeline(_cfg(tmp_path, image_path=str(img_dir / 'flat.png'))).run()
    assert list(results) == ['flat']
    with pytest.raises(FileNotFoundError):
        TexturePipeline(_cfg(tmp_path, image_path=str(img_dir / 'nope.png'))).run()


def test_main_cli(tmp_path):
    img_dir = _write_images(tmp_path)
    out_dir = tmp_path / 'cli_out'
    main(['--image', str(img_dir / 'noise.png'), '--output-dir', str(out_dir)])
    assert (out_dir / 'noise_lbp.json').is_file()


def test_pipeline_rejects_clashing_output_names(tmp_path):
    img_dir = _write_images(tmp_path)
    cv2.imwrite(str(img_dir / 'flat.bmp'), np.full((10, 10), 90, dtype=np.uint8))
    out_dir = tmp_path / 'hist'
    out_dir.mkdir()
    (out_dir / 'keep.json').write_text('{}', encoding='utf-8')
    with pytest.raises(ValueError):
        TexturePipeline(_cfg(tmp_path, image_pattern='flat.*')).run()
    assert (out_dir / 'keep.json').is_file()
