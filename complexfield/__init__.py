"""
Complex numbers as a field element: float64 arithmetic with IEEE-754
propagation plus the zero/one identity protocol used by generic algorithms.
"""
from complexfield.complex import IMAGINARY_UNIT_MARKER, Complex, ComplexDivisionByZero
from complexfield.field import (
    FieldElement,
    dot,
    horner,
    is_one,
    is_zero,
    one_of,
    power,
    product_of,
    sum_of,
    zero_of,
)

__version__ = "0.1.0"

__all__ = [
    "Complex",
    "ComplexDivisionByZero",
    "FieldElement",
    "IMAGINARY_UNIT_MARKER",
    "dot",
    "horner",
    "is_one",
    "is_zero",
    "one_of",
    "power",
    "product_of",
    "sum_of",
    "zero_of",
]
