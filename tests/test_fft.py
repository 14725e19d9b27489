import cmath
import logging
import math

import numpy as np
import pytest

from komplex import Complex, dft, fft, is_power_of_two
from komplex.sampling import to_array, to_complex_list


def assert_all_close(actual, expected, tol=1e-9):
    assert len(actual) == len(expected)
    for a, e in zip(actual, expected):
        assert a.isclose(e, abs_tol=tol), f"{a} != {e}"


def random_signal(n, seed=42):
    rng = np.random.default_rng(seed)
    return to_complex_list(rng.standard_normal(n) + 1j * rng.standard_normal(n))


def test_base_case():
    c = Complex(2.5, -1)
    signal = [c]
    out = fft(signal)
    assert out == [c]
    assert out is not signal


def test_impulse():
    out = fft(to_complex_list([1, 0, 0, 0]))
    assert_all_close(out, [Complex(1)] * 4)


def test_dc_signal():
    out = fft(to_complex_list([1, 1, 1, 1]))
    assert_all_close(out, [Complex(4), Complex(0), Complex(0), Complex(0)])


def test_accepts_real_samples():
    assert_all_close(fft([1.0, 0, 0, 0]), [Complex(1)] * 4)


def test_linearity():
    x, y = random_signal(8, seed=1), random_signal(8, seed=2)
    a = 2.5
    lhs = fft([a * xi + yi for xi, yi in zip(x, y)])
    rhs = [a * fx + fy for fx, fy in zip(fft(x), fft(y))]
    assert_all_close(lhs, rhs)


@pytest.mark.parametrize("n", [2, 8, 64])
def test_parseval(n):
    x = random_signal(n)
    energy_in = sum(z.magnitude() ** 2 for z in x)
    energy_out = sum(z.magnitude() ** 2 for z in fft(x))
    assert energy_out == pytest.approx(n * energy_in)


@pytest.mark.parametrize("n", [1, 2, 4, 16, 128])
def test_matches_numpy(n):
    x = random_signal(n)
    ours = to_array(fft(x))
    np.testing.assert_allclose(ours, np.fft.fft(to_array(x)), atol=1e-9)


def test_matches_direct_dft():
    x = random_signal(32)
    assert_all_close(fft(x), dft(x))


def test_sinusoid_peaks():
    n = 16
    x = [math.sin(2 * math.pi * 2 * k / n) for k in range(n)]
    mags = [z.magnitude() for z in fft(x)]
    peaks = sorted(range(n), key=lambda k: mags[k], reverse=True)[:2]
    assert sorted(peaks) == [2, n - 2]
    assert mags[2] == pytest.approx(n / 2)


def test_input_not_mutated():
    x = random_signal(8)
    before = list(x)
    fft(x)
    assert x == before


def test_non_power_of_two_rejected():
    with pytest.raises(ValueError, match="power of 2"):
        fft(to_complex_list([0, 1, 0]))
    with pytest.raises(ValueError):
        fft([])


def test_dft_of_length_three():
    out = dft(to_complex_list([0, 1, 0]))
    expected = [Complex.from_builtin(cmath.exp(-2j * math.pi * k / 3)) for k in range(3)]
    assert_all_close(out, expected)
    with pytest.raises(ValueError):
        dft([])


@pytest.mark.parametrize("n, expected", [
    (0, False), (-4, False), (1, True), (2, True), (3, False),
    (6, False), (1024, True),
])
def test_is_power_of_two(n, expected):
    assert is_power_of_two(n) is expected


def test_logs_transform_size(caplog):
    caplog.set_level(logging.DEBUG, logger="komplex.fft")
    fft([1, 0, 0, 0])
    assert "fft over 4 samples" in caplog.text


def test_accepts_builtin_complex_samples():
    assert_all_close(fft([1 + 0j, 0, 0, 0]), [Complex(1)] * 4)
    assert_all_close(fft([1j, 1j]), [Complex(0, 2), Complex(0)])
