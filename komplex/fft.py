import logging
import math
from typing import Iterable, List

from .complex import Complex, to_complex

logger = logging.getLogger(__name__)


def is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


def _twiddle(k: int, n: int) -> Complex:
    """e^{-2πik/n}"""
    return Complex(math.cos(2 * math.pi * k / n), -math.sin(2 * math.pi * k / n))


def _fft(signal: List[Complex], start: int, stride: int, length: int) -> List[Complex]:
    # Transform signal[start], signal[start + stride], ... (length samples).
    if length == 1:
        return [signal[start]]

    half = length // 2
    even = _fft(signal, start, stride * 2, half)
    odd = _fft(signal, start + stride, stride * 2, half)

    result = [None] * length
    for k in range(half):
        t = odd[k] * _twiddle(k, length)
        result[k] = even[k] + t
        result[k + half] = even[k] - t
    return result


def fft(samples: Iterable["Complex | float"]) -> List[Complex]:
    """
    Recursive radix-2 decimation-in-time FFT.

    Args:
        samples: Complex (or real) samples; the length must be a power of two.

    Returns:
        A new list of DFT bins, bin 0 being the DC component.

    Raises:
        ValueError: If the input is empty or its length is not a power of two.
    """
    signal = [to_complex(x) for x in samples]
    n = len(signal)
    if not is_power_of_two(n):
        raise ValueError(f"FFT length must be a power of 2, given: {n}")

    logger.debug("fft over %d samples (%d levels)", n, n.bit_length() - 1)
    return _fft(signal, 0, 1, n)


def dft(samples: Iterable["Complex | float"]) -> List[Complex]:
    """Naive O(n²) DFT with the same sign convention as ``fft``, for any length."""
    signal = [to_complex(x) for x in samples]
    n = len(signal)
    if n == 0:
        raise ValueError("DFT of an empty sequence is undefined")

    result = []
    for k in range(n):
        acc = Complex(0.0, 0.0)
        for j, x in enumerate(signal):
            acc = acc + x * _twiddle(j * k % n, n)
        result.append(acc)
    return result
