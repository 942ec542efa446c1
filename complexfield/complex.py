import logging
import math
import numbers

import numpy as np

from complexfield.field import power

logger = logging.getLogger(__name__)

IMAGINARY_UNIT_MARKER = "i"


class ComplexDivisionByZero(ZeroDivisionError):
    """Raised by :meth:`Complex.checked_div` when the divisor is the zero value."""


def _fdiv(num: float, den: float) -> float:
    # IEEE-754 quotient: x/0 -> ±inf, 0/0 -> nan, overflow -> ±inf, never raises or warns
    with np.errstate(all="ignore"):
        return float(np.float64(num) / np.float64(den))


def _format_component(value: float, spec: str = "") -> str:
    if spec:
        return format(value, spec)
    text = repr(value)
    if text.endswith(".0"):
        text = text[:-2]
    return text


class Complex:
    """
    A mutable complex number with float64 real and imaginary parts.

    Constructors
    ------------
    Complex(a, b)               -> a + b i
    Complex()                   -> 0 + 0 i   (same as Complex.zero())
    Complex.from_polar(r, theta) -> r·e^{iθ}

    Arithmetic never raises: division by the zero value yields inf/nan
    components exactly as float64 division would.  Use ``checked_div`` when
    an explicit error is wanted instead.

    Equality is exact component-wise float comparison.
    """

    __slots__ = ("_real", "_imag")

    # ---------- construction ----------
    def __init__(self, real: float = 0.0, imag: float = 0.0):
        self._real = float(real)
        self._imag = float(imag)

    @classmethod
    def zero(cls) -> "Complex":
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> "Complex":
        return cls(1.0, 0.0)

    @classmethod
    def i(cls) -> "Complex":
        """Imaginary unit, a fresh value on every call."""
        return cls(0.0, 1.0)

    @classmethod
    def from_polar(cls, r: float, theta: float) -> "Complex":
        return cls(r * math.cos(theta), r * math.sin(theta))

    @classmethod
    def from_builtin(cls, value: "complex | float | int") -> "Complex":
        value = complex(value)
        return cls(value.real, value.imag)

    def copy(self) -> "Complex":
        return type(self)(self._real, self._imag)

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    # ---------- accessors ----------
    @property
    def real(self) -> float:
        return self._real

    @property
    def imag(self) -> float:
        return self._imag

    def set_real(self, value: float) -> None:
        self._real = float(value)

    def set_imag(self, value: float) -> None:
        self._imag = float(value)

    # ---------- derived queries ----------
    def abs_sq(self) -> float:
        # x*x rather than x**2: float ** overflows with OverflowError, * gives inf
        return self._real * self._real + self._imag * self._imag

    def abs(self) -> float:
        return math.sqrt(self.abs_sq())

    def arg(self) -> float:
        """Principal angle in (-π, π]; 0.0 at the origin."""
        return math.atan2(self._imag, self._real)

    def conjugate(self) -> "Complex":
        return type(self)(self._real, -self._imag)

    def to_polar(self) -> "tuple[float, float]":
        return self.abs(), self.arg()

    def normalize(self) -> "Complex":
        m = self.abs()
        if m == 0:
            raise ZeroDivisionError("Cannot normalize the zero value")
        return type(self)(self._real / m, self._imag / m)

    def inverse(self) -> "Complex":
        return self.one().div(self)

    # ---------- identity protocol ----------
    def is_zero(self) -> bool:
        return self._real == 0.0 and self._imag == 0.0

    def is_one(self) -> bool:
        return self == self.one()

    def set_zero(self) -> None:
        self._real = 0.0
        self._imag = 0.0

    def set_one(self) -> None:
        self._real = 1.0
        self._imag = 0.0

    # ---------- arithmetic ----------
    @classmethod
    def _coerce(cls, other):
        if isinstance(other, Complex):
            return other
        if isinstance(other, numbers.Real):
            return cls(other, 0.0)
        return None

    def add(self, other: "Complex | float | int") -> "Complex":
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return type(self)(self._real + other._real, self._imag + other._imag)

    def sub(self, other: "Complex | float | int") -> "Complex":
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return type(self)(self._real - other._real, self._imag - other._imag)

    def mul(self, other: "Complex | float | int") -> "Complex":
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return type(self)(self._real * other._real - self._imag * other._imag,
                          self._real * other._imag + self._imag * other._real)

    def div(self, other: "Complex | float | int") -> "Complex":
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        d = other.abs_sq()
        return type(self)(_fdiv(self._real * other._real + self._imag * other._imag, d),
                          _fdiv(self._imag * other._real - self._real * other._imag, d))

    def checked_div(self, other: "Complex | float | int") -> "Complex":
        """Like ``div`` but raises ComplexDivisionByZero for a zero divisor."""
        other = self._coerce(other)
        if other is None:
            raise TypeError("divisor must be Complex or a real number")
        if other.abs_sq() == 0.0:
            logger.debug("rejected division of %r by zero value %r", self, other)
            raise ComplexDivisionByZero(f"cannot divide {self} by {other}")
        return self.div(other)

    def __radd__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else other.add(self)

    def __rsub__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else other.sub(self)

    def __rmul__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else other.mul(self)

    def __rtruediv__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else other.div(self)

    def __neg__(self):
        return type(self)(-self._real, -self._imag)

    def __pos__(self):
        return self.copy()

    def __pow__(self, n):
        if isinstance(n, bool) or not isinstance(n, numbers.Integral):
            return NotImplemented
        return power(self, n)

    # ---------- dunder sugar ----------
    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __truediv__ = div
    __abs__ = abs

    def __bool__(self):
        return not self.is_zero()

    def __complex__(self):
        return complex(self._real, self._imag)

    def __eq__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._real == other._real and self._imag == other._imag

    # mutable: set_* would silently change the hash
    __hash__ = None

    def __format__(self, spec: str) -> str:
        re = _format_component(self._real, spec)
        im = _format_component(self._imag, spec)
        if self._imag == 0.0:
            return re
        if self._real == 0.0:
            return f"{im}{IMAGINARY_UNIT_MARKER}"
        return f"{re} + {im}{IMAGINARY_UNIT_MARKER}"

    def __str__(self):
        return self.__format__("")

    def __repr__(self):
        return f"Complex({self._real!r}, {self._imag!r})"
