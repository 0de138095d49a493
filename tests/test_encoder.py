import numpy as np
import pytest
from src.main.lbp.encoder import (
    count_transitions,
    encode,
    pack_bits,
    round_intensity,
    threshold,
    uniform_label,
)


def test_threshold_inclusive_and_strict():
    neighbors = [99, 100, 101]
    assert threshold(100, neighbors).tolist() == [False, True, True]
    assert threshold(100, neighbors, strict=True).tolist() == [False, False, True]


def test_round_intensity_ties_to_even():
    assert round_intensity([0.4, 0.5, 1.5, 2.5, 254.6]).tolist() == [0, 0, 2, 2, 255]


def test_transition_scans():
    bits = [1, 1, 0, 0, 1, 1, 0, 0]
    assert count_transitions(bits, 'truncated') == 3
    assert count_transitions(bits, 'linear') == 3
    assert count_transitions(bits, 'circular') == 4


def test_truncated_scan_ignores_last_pair():
    bits = [1, 0, 0, 0, 0, 0, 1, 0]
    assert count_transitions(bits, 'truncated') == 2
    assert count_transitions(bits, 'linear') == 3
    assert uniform_label(bits, 'truncated') == 2
    assert uniform_label(bits, 'linear') == 9
    assert uniform_label(bits, 'circular') == 9


def test_wraparound_not_counted_unless_circular():
    bits = [1, 1, 1, 0, 0, 0, 0, 0]
    assert count_transitions(bits, 'linear') == 1
    assert count_transitions(bits, 'circular') == 2
    assert uniform_label(bits, 'circular') == 3


def test_unknown_scan_rejected():
    with pytest.raises(ValueError):
        count_transitions([1, 0, 1], 'ror')


def test_uniform_labels():
    assert uniform_label([0] * 8) == 0
    assert uniform_label([1] * 8) == 8
    assert uniform_label([0, 0, 1, 1, 1, 0, 0, 0]) == 3


def test_alternating_signature_is_non_uniform():
    bits = [1, 0] * 4
    for scan in ('truncated', 'linear', 'circular'):
        assert uniform_label(bits, scan) == 9
    assert uniform_label([1, 0] * 8, 'truncated') == 17


def test_short_rings():
    # P=2 has no pairs under the truncated scan
    assert count_transitions([1, 0], 'truncated') == 0
    assert uniform_label([1, 0], 'truncated') == 1
    assert uniform_label([1], 'circular') == 1


def test_encode_scalar_returns_int():
    label = encode(50, [60, 60, 60, 40, 40, 40, 40, 40])
    assert isinstance(label, int)
    assert label == 3


def test_encode_planes():
    center = np.full((2, 3), 10, dtype=np.uint8)
    neighbors = np.zeros((8, 2, 3), dtype=np.int64)
    neighbors[:, 0, 0] = 20
    neighbors[::2, 1, 2] = 20
    labels = encode(center, neighbors)
    assert labels.shape == (2, 3)
    assert labels[0, 0] == 8
    assert labels[1, 2] == 9
    assert labels[0, 1] == 0


def test_pack_bits_first_neighbor_is_most_significant():
    assert pack_bits([1, 0, 0, 0, 0, 0, 0, 1]) == 129
    assert pack_bits([0] * 8) == 0
    planes = np.zeros((8, 1, 2), dtype=bool)
    planes[:, 0, 1] = True
    assert pack_bits(planes).tolist() == [[0, 255]]
