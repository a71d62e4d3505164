import math

import pytest

from shared.math_utils import arithmetic_mean, coverage_percent, shannon_entropy


def test_shannon_entropy():
    assert shannon_entropy(b"") == 0.0
    assert shannon_entropy(b"zzzz") == 0.0
    assert shannon_entropy(b"abcd") == pytest.approx(2.0)
    assert shannon_entropy([0x1F600, 0x1F601]) == pytest.approx(1.0)
    assert shannon_entropy(bytes(range(256))) == pytest.approx(8.0)


def test_shannon_entropy_skewed():
    # p = 3/4, 1/4
    expected = -(0.75 * math.log2(0.75) + 0.25 * math.log2(0.25))
    assert shannon_entropy(b"aaab") == pytest.approx(expected)


def test_arithmetic_mean():
    assert arithmetic_mean(b"") == 0.0
    assert arithmetic_mean(bytes([0, 255])) == pytest.approx(127.5)
    assert arithmetic_mean(b"KU") == pytest.approx(80.0)


def test_coverage_percent():
    assert coverage_percent(19, 95) == pytest.approx(20.0)
    assert coverage_percent(0, 95) == 0.0
    assert coverage_percent(3, 0x110000) == 300 / 0x110000
