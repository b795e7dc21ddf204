# rfmatch/tl_network.py
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Literal

from .config import EPSILON
from .tl_complex import Impedance, add, invert, magnitude
from .tl_errors import InvalidInputError, NumericDegeneracyError

ComponentKind = Literal['inductor', 'capacitor']

@dataclass(frozen=True)
class ReactiveComponent:
    kind: ComponentKind
    value: float           # H for inductors, F for capacitors, always >= 0
    unit: str

    def reactance(self, omega: float) -> float:
        """Series reactance X at angular frequency omega."""
        if self.kind == 'inductor':
            return omega*self.value
        if self.value == 0.0:
            raise NumericDegeneracyError('zero-valued capacitor has no finite reactance')
        return -1.0/(omega*self.value)

    def susceptance(self, omega: float) -> float:
        """Shunt susceptance B at angular frequency omega."""
        if self.kind == 'capacitor':
            return omega*self.value
        if self.value == 0.0:
            raise NumericDegeneracyError('zero-valued inductor has no finite susceptance')
        return -1.0/(omega*self.value)

def inductor(value: float) -> ReactiveComponent:
    return ReactiveComponent('inductor', value, 'H')

def capacitor(value: float) -> ReactiveComponent:
    return ReactiveComponent('capacitor', value, 'F')

def component_for_susceptance(B: float, omega: float) -> ReactiveComponent:
    """Shunt element realising susceptance B: B>0 is a capacitor, B<0 an inductor.

    |B| below the floor is an open branch, reported as a 0 F capacitor.
    """
    if abs(B) < EPSILON:
        return capacitor(0.0)
    if B > 0:
        return capacitor(B/omega)
    return inductor(-1.0/(B*omega))

def component_for_reactance(X: float, omega: float) -> ReactiveComponent:
    """Series element realising reactance X: X>0 is an inductor, X<0 a capacitor.

    |X| below the floor is a through connection, reported as a 0 H inductor.
    """
    if abs(X) < EPSILON:
        return inductor(0.0)
    if X > 0:
        return inductor(X/omega)
    return capacitor(-1.0/(X*omega))

def add_series(Z: Impedance, X: float) -> Impedance:
    """Series element of reactance X in front of Z."""
    return add(Z, Impedance(0.0, X))

def add_shunt(Z: Impedance, B: float) -> Impedance:
    """Shunt element of susceptance B across Z; done in admittance.

    The total admittance is only degenerate when Y and jB cancel, so its
    inversion floor is taken relative to their magnitudes.
    """
    Y = invert(Z)
    return invert(add(Y, Impedance(0.0, B)), reference=max(magnitude(Y), abs(B)))

def _tan(theta: float, saturate: bool) -> float:
    c = math.cos(theta)
    if abs(c) < EPSILON:
        if saturate:
            return math.inf
        raise NumericDegeneracyError(f'stub angle {theta:.6g} rad makes tan() singular')
    return math.sin(theta)/c

def _cot(theta: float, saturate: bool) -> float:
    s = math.sin(theta)
    if abs(s) < EPSILON:
        if saturate:
            return math.inf
        raise NumericDegeneracyError(f'stub angle {theta:.6g} rad makes cot() singular')
    return math.cos(theta)/s

def stub_reactance(Z0: float, length: float, stub_type: str, saturate: bool = False) -> float:
    """Input reactance of a lossless stub ``length`` wavelengths long.

    short: X = Z0 tan(bl), open: X = -Z0 cot(bl)

    At a singular angle the stub is an open circuit: with ``saturate`` the
    result is infinite, otherwise NumericDegeneracyError is raised.
    """
    bl = 2*math.pi*length
    if stub_type == 'short':
        return Z0*_tan(bl, saturate)
    if stub_type == 'open':
        return -Z0*_cot(bl, saturate)
    raise InvalidInputError(f'unknown stub type {stub_type!r}')

def stub_susceptance(Z0: float, length: float, stub_type: str, saturate: bool = False) -> float:
    """Input susceptance of a lossless stub ``length`` wavelengths long.

    short: B = -cot(bl)/Z0, open: B = tan(bl)/Z0

    At a singular angle the stub is a short circuit; ``saturate`` as above.
    """
    bl = 2*math.pi*length
    if stub_type == 'short':
        return -_cot(bl, saturate)/Z0
    if stub_type == 'open':
        return _tan(bl, saturate)/Z0
    raise InvalidInputError(f'unknown stub type {stub_type!r}')
