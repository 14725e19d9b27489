from numbers import Real
from typing import Callable, Iterable, List

import numpy as np

from .complex import Complex


def sample_math_function(
    start: float,
    end: float,
    step: float,
    math_function: Callable[[float], float],
) -> List[float]:
    """
    Sample ``math_function`` at start, start + step, ... up to and including end.

    x advances by repeated addition, so whether the last grid point lands on
    ``end`` depends on floating-point accumulation.
    """
    if step <= 0:
        raise ValueError(f"step must be positive, given: {step}")

    sampled_values = []
    x = start
    while x <= end:
        sampled_values.append(math_function(x))
        x += step
    return sampled_values


def to_complex_list(values: Iterable) -> List[Complex]:
    """Accepts Complex, real numbers, Python complex, or a numpy array of either."""
    out: List[Complex] = []
    for v in np.ravel(values) if isinstance(values, np.ndarray) else values:
        if isinstance(v, Complex):
            out.append(v)
        elif isinstance(v, Real):
            out.append(Complex(v))
        elif isinstance(v, (complex, np.complexfloating)):
            out.append(Complex.from_builtin(complex(v)))
        else:
            raise TypeError(f"cannot convert {type(v).__name__} to Complex")
    return out


def to_array(values: Iterable[Complex]) -> np.ndarray:
    return np.array([complex(v) for v in to_complex_list(values)], dtype=np.complex128)
