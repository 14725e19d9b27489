"""Complex numbers with Cartesian/polar arithmetic and a recursive radix-2 FFT."""

from .complex import Complex, PolarComplex, I, to_complex
from .fft import fft, dft, is_power_of_two

__all__ = [
    "Complex",
    "PolarComplex",
    "I",
    "to_complex",
    "fft",
    "dft",
    "is_power_of_two",
]
