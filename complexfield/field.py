"""
Identity protocol and algorithms written once for any field-like number type.

A type takes part by offering ``zero()``/``one()`` constructors together with
``is_zero``/``is_one``/``set_zero``/``set_one`` and the four arithmetic
operators (see ``FieldElement``).  Plain numbers (``int``, ``float``,
``fractions.Fraction``) work too: their identities come from ``kind(0)`` and
``kind(1)``.
"""
import numbers
from typing import Iterable, Optional, Protocol, Sequence, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class FieldElement(Protocol):
    @classmethod
    def zero(cls): ...

    @classmethod
    def one(cls): ...

    def is_zero(self) -> bool: ...

    def is_one(self) -> bool: ...

    def set_zero(self) -> None: ...

    def set_one(self) -> None: ...

    def __add__(self, other): ...

    def __sub__(self, other): ...

    def __mul__(self, other): ...

    def __truediv__(self, other): ...


# ---------- identities ----------
def zero_of(kind: type):
    factory = getattr(kind, "zero", None)
    if callable(factory):
        return factory()
    return kind(0)


def one_of(kind: type):
    factory = getattr(kind, "one", None)
    if callable(factory):
        return factory()
    return kind(1)


def is_zero(x) -> bool:
    test = getattr(x, "is_zero", None)
    if callable(test):
        return test()
    return x == 0


def is_one(x) -> bool:
    test = getattr(x, "is_one", None)
    if callable(test):
        return test()
    return x == 1


# ---------- folds ----------
def sum_of(values: Iterable[T], kind: type) -> T:
    acc = zero_of(kind)
    for v in values:
        acc = acc + v
    return acc


def product_of(values: Iterable[T], kind: type) -> T:
    acc = one_of(kind)
    for v in values:
        acc = acc * v
    return acc


def power(x: T, n: int, kind: Optional[type] = None) -> T:
    """
    x**n by repeated squaring.

    n == 0 gives ``one``; a negative n gives ``one / x**|n|``.
    """
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise TypeError(f"exponent must be an integer, got {type(n).__name__}")
    kind = kind or type(x)
    if n < 0:
        return one_of(kind) / power(x, -n, kind)

    result = one_of(kind)
    base = x
    while n:
        if n & 1:
            result = result * base
        n >>= 1
        if n:
            base = base * base
    return result


def horner(coefficients: Sequence[T], x: T, kind: Optional[type] = None) -> T:
    """Evaluate a polynomial given its coefficients, highest degree first."""
    acc = zero_of(kind or type(x))
    for c in coefficients:
        acc = acc * x + c
    return acc


def dot(xs: Sequence[T], ys: Sequence[T], kind: type) -> T:
    if len(xs) != len(ys):
        raise ValueError(f"length mismatch: {len(xs)} != {len(ys)}")
    return sum_of((a * b for a, b in zip(xs, ys)), kind)
