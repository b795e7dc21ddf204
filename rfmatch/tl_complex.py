# rfmatch/tl_complex.py
from __future__ import annotations
import math
from dataclasses import dataclass

from .config import EPSILON
from .tl_errors import NumericDegeneracyError

@dataclass(frozen=True)
class Impedance:
    real: float   # ohm (or S when used as an admittance)
    imag: float = 0.0

    @classmethod
    def from_complex(cls, z: complex) -> "Impedance":
        z = complex(z)
        return cls(z.real, z.imag)

    def as_complex(self) -> complex:
        return complex(self.real, self.imag)

    def __str__(self) -> str:
        sign = '+' if self.imag >= 0 else '-'
        return f'{self.real:.4g} {sign} j{abs(self.imag):.4g}'

ZERO = Impedance(0.0, 0.0)
ONE = Impedance(1.0, 0.0)
OPEN_CIRCUIT = Impedance(math.inf, 0.0)

def add(a: Impedance, b: Impedance) -> Impedance:
    return Impedance(a.real + b.real, a.imag + b.imag)

def subtract(a: Impedance, b: Impedance) -> Impedance:
    return Impedance(a.real - b.real, a.imag - b.imag)

def scale(a: Impedance, k: float) -> Impedance:
    """Multiply by a real scalar."""
    return Impedance(a.real*k, a.imag*k)

def multiply(a: Impedance, b: Impedance) -> Impedance:
    return Impedance(
        a.real*b.real - a.imag*b.imag,
        a.real*b.imag + a.imag*b.real,
    )

def magnitude(a: Impedance) -> float:
    return math.sqrt(a.real*a.real + a.imag*a.imag)

def invert(a: Impedance, saturate: bool = False, reference: float | None = None) -> Impedance:
    """Reciprocal conj(a)/|a|^2.

    Below the degeneracy floor this raises NumericDegeneracyError, or returns
    0+0j when ``saturate`` is set. The floor is EPSILON*reference**2, so pass the
    magnitude of the terms that summed to ``a`` to make it relative; without
    ``reference`` it is absolute.
    """
    denom = a.real*a.real + a.imag*a.imag
    floor = EPSILON if reference is None else EPSILON*reference*reference
    if denom == 0.0 or denom < floor:
        if saturate:
            return ZERO
        raise NumericDegeneracyError(f'cannot invert near-zero value {a} (|a|^2={denom:.3e})')
    return Impedance(a.real/denom, -a.imag/denom)

def divide(a: Impedance, b: Impedance) -> Impedance:
    return multiply(a, invert(b))
