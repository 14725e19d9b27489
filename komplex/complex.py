import math
from numbers import Real
from typing import Union


class Complex:
    """
    An immutable complex-number value with rectangular and polar support.

    Constructors
    ------------
    Complex(a, b)                  -> a + b i
    Complex(a)                     -> a + 0 i
    Complex.from_polar(r, theta)   -> r·e^{iθ}
    Complex.from_builtin(z)        -> from a Python ``complex``

    Real scalars may appear on either side of ``+ - * /``.  Division by a
    value of zero magnitude raises ``ZeroDivisionError``.
    """

    __slots__ = ("_re", "_im")

    # ---------- construction ----------
    def __init__(self, real: float, imag: float = 0.0):
        object.__setattr__(self, "_re", float(real))
        object.__setattr__(self, "_im", float(imag))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (Complex, (self._re, self._im))

    # ---------- convenience makers ----------
    @classmethod
    def from_polar(cls, magnitude: float, angle: float) -> "Complex":
        """Explicit polar constructor."""
        return PolarComplex(magnitude, angle).to_cartesian()

    @classmethod
    def from_builtin(cls, z: complex) -> "Complex":
        return cls(z.real, z.imag)

    # ---------- components ----------
    @property
    def real(self) -> float:
        return self._re

    @property
    def imag(self) -> float:
        return self._im

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self._re
        if index == 1:
            return self._im
        raise IndexError(f"complex is of dimension 2, given: {index}")

    # ---------- basic properties ----------
    def magnitude(self) -> float:
        return math.sqrt(self._re * self._re + self._im * self._im)

    modulus = magnitude

    def argument(self) -> float:
        """Angle of the polar form, in [0, 2π)."""
        return self.to_polar().angle

    def to_polar(self) -> "PolarComplex":
        """
        Convert to polar form.

        The angle follows a fixed branch table and always lands in [0, 2π)
        rather than the (-π, π] range of ``atan2``.

        Raises
        ------
        ValueError
            If both parts are zero, since the angle is undefined there.
        """
        re, im = self._re, self._im
        if re > 0 and im >= 0:
            angle = math.atan(im / re)
        elif re > 0 and im < 0:
            angle = math.atan(im / re) + 2 * math.pi
        elif re < 0:
            angle = math.atan(im / re) + math.pi
        elif re == 0 and im > 0:
            angle = math.pi / 2
        elif re == 0 and im < 0:
            angle = 3 * math.pi / 2
        else:
            raise ValueError(
                "Undefined angle for a complex number with real and "
                "imaginary parts both equal to 0."
            )
        return PolarComplex(self.magnitude(), angle)

    # ---------- arithmetic helpers ----------
    def additive_inverse(self) -> "Complex":
        return Complex(-self._re, -self._im)

    def multiplicative_inverse(self) -> "Complex":
        mag_sq = self._re * self._re + self._im * self._im
        if mag_sq == 0:
            raise ZeroDivisionError("squared magnitude is 0, no multiplicative inverse")
        return Complex(self._re / mag_sq, -self._im / mag_sq)

    def conjugate(self) -> "Complex":
        return Complex(self._re, -self._im)

    def pow(self, n: Union[int, float]) -> "Complex":
        """Raise to a real exponent through the polar form."""
        return self.to_polar().pow(n).to_cartesian()

    def isclose(self, other: "Complex | float", rel_tol: float = 1e-9,
                abs_tol: float = 0.0) -> bool:
        other = to_complex(other)
        return (math.isclose(self._re, other.real, rel_tol=rel_tol, abs_tol=abs_tol)
                and math.isclose(self._im, other.imag, rel_tol=rel_tol, abs_tol=abs_tol))

    # ---------- operators ----------
    def __add__(self, other):
        if isinstance(other, Complex):
            return Complex(self._re + other._re, self._im + other._im)
        if isinstance(other, Real):
            return Complex(self._re + other, self._im)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Complex):
            return Complex(self._re - other._re, self._im - other._im)
        if isinstance(other, Real):
            return Complex(self._re - other, self._im)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Complex):
            return Complex(self._re * other._re - self._im * other._im,
                           self._re * other._im + self._im * other._re)
        if isinstance(other, Real):
            return Complex(self._re * other, self._im * other)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Complex):
            return self * other.multiplicative_inverse()
        if isinstance(other, Real):
            return Complex(self._re / other, self._im / other)
        return NotImplemented

    def __pow__(self, n):
        if isinstance(n, Real):
            return self.pow(n)
        return NotImplemented

    # scalar on the left
    def __radd__(self, other):
        if isinstance(other, Real):
            return self + other
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, Real):
            return -self + other
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def __rtruediv__(self, other):
        if isinstance(other, Real):
            return Complex(other) / self
        return NotImplemented

    def __neg__(self) -> "Complex":
        return self * -1

    def __pos__(self) -> "Complex":
        return self

    __abs__ = magnitude

    def __complex__(self) -> complex:
        return complex(self._re, self._im)

    # ---------- value semantics ----------
    def __eq__(self, other):
        if isinstance(other, Complex):
            return self._re == other._re and self._im == other._im
        if isinstance(other, Real):
            return self._re == other and self._im == 0
        return NotImplemented

    def __hash__(self):
        if self._im == 0:
            return hash(self._re)
        return hash((self._re, self._im))

    def __str__(self):
        sign = "+" if self._im >= 0 else "-"
        return f"{self._re} {sign} {abs(self._im)}i"

    def __repr__(self):
        return f"Complex({self._re!r}, {self._im!r})"


class PolarComplex:
    """
    A complex number as (magnitude, angle).

    The angle is kept exactly as given; only ``Complex.to_polar`` guarantees
    a value in [0, 2π).
    """

    __slots__ = ("_mag", "_angle")

    def __init__(self, magnitude: float, angle: float):
        magnitude = float(magnitude)
        if magnitude < 0:
            raise ValueError(f"magnitude must be >= 0, given: {magnitude}")
        object.__setattr__(self, "_mag", magnitude)
        object.__setattr__(self, "_angle", float(angle))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (PolarComplex, (self._mag, self._angle))

    @property
    def magnitude(self) -> float:
        return self._mag

    @property
    def modulus(self) -> float:
        return self._mag

    @property
    def angle(self) -> float:
        return self._angle

    def to_cartesian(self) -> Complex:
        return Complex(self._mag * math.cos(self._angle),
                       self._mag * math.sin(self._angle))

    def pow(self, n: Union[int, float]) -> "PolarComplex":
        try:
            mag = self._mag ** n
        except OverflowError:
            mag = math.inf
        return PolarComplex(mag, self._angle * n)

    def __pow__(self, n):
        if isinstance(n, Real):
            return self.pow(n)
        return NotImplemented

    def __eq__(self, other):
        if isinstance(other, PolarComplex):
            return self._mag == other._mag and self._angle == other._angle
        return NotImplemented

    def __hash__(self):
        return hash((self._mag, self._angle))

    def __repr__(self):
        return f"PolarComplex({self._mag!r}, {self._angle!r})"


I = Complex(0.0, 1.0)


def to_complex(value: "Complex | float") -> Complex:
    """Promote a real or builtin complex number; a ``Complex`` passes through."""
    if isinstance(value, Complex):
        return value
    if isinstance(value, Real):
        return Complex(value, 0.0)
    if isinstance(value, complex):
        return Complex.from_builtin(value)
    raise TypeError(f"cannot convert {type(value).__name__} to Complex")
