# rfmatch/tl_core.py
from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import Literal

from .config import (
    C_0, EPSILON, SWR_OVERFLOW,
    DEFAULT_SOURCE_IMPEDANCE_OHMS, DEFAULT_RELATIVE_PERMITTIVITY,
)
from .tl_complex import Impedance, add, multiply, invert, magnitude, scale
from .tl_errors import InvalidInputError

LumpedConfiguration = Literal['shunt-first', 'series-first']
StubConfiguration = Literal['shunt', 'series']
StubType = Literal['short', 'open']

LUMPED_CONFIGURATIONS = ('shunt-first', 'series-first')
STUB_CONFIGURATIONS = ('shunt', 'series')
STUB_TYPES = ('short', 'open')

@dataclass(frozen=True)
class TopologyOptions:
    configuration: LumpedConfiguration = 'shunt-first'   # lumped element
    stub_configuration: StubConfiguration = 'shunt'      # single stub
    stub_type: StubType = 'short'                        # single stub termination

@dataclass(frozen=True)
class DesignRequest:
    load_impedance: Impedance
    frequency_mhz: float
    source_impedance_ohms: float = DEFAULT_SOURCE_IMPEDANCE_OHMS
    relative_permittivity: float = DEFAULT_RELATIVE_PERMITTIVITY
    options: TopologyOptions = field(default_factory=TopologyOptions)

    def validate(self) -> None:
        """Raise ``InvalidInputError`` when the request is out of domain."""
        values = {
            'load resistance': self.load_impedance.real,
            'load reactance': self.load_impedance.imag,
            'frequency_mhz': self.frequency_mhz,
            'source_impedance_ohms': self.source_impedance_ohms,
            'relative_permittivity': self.relative_permittivity,
        }
        for name, value in values.items():
            if not math.isfinite(value):
                raise InvalidInputError(f'{name} must be finite, got {value}')
        if self.load_impedance.real <= 0.0:
            raise InvalidInputError(f'load resistance must be positive, got {self.load_impedance.real}')
        if self.frequency_mhz <= 0.0:
            raise InvalidInputError(f'frequency_mhz must be positive, got {self.frequency_mhz}')
        if self.source_impedance_ohms <= 0.0:
            raise InvalidInputError(f'source_impedance_ohms must be positive, got {self.source_impedance_ohms}')
        if self.relative_permittivity < 1.0:
            raise InvalidInputError(f'relative_permittivity must be >= 1, got {self.relative_permittivity}')

        opts = self.options
        if opts.configuration not in LUMPED_CONFIGURATIONS:
            raise InvalidInputError(f'configuration must be one of {LUMPED_CONFIGURATIONS}, got {opts.configuration!r}')
        if opts.stub_configuration not in STUB_CONFIGURATIONS:
            raise InvalidInputError(f'stub_configuration must be one of {STUB_CONFIGURATIONS}, got {opts.stub_configuration!r}')
        if opts.stub_type not in STUB_TYPES:
            raise InvalidInputError(f'stub_type must be one of {STUB_TYPES}, got {opts.stub_type!r}')

    @property
    def frequency_hz(self) -> float:
        return self.frequency_mhz * 1e6

    @property
    def omega(self) -> float:
        return angular_frequency(self.frequency_mhz)

    @property
    def wavelength_m(self) -> float:
        return wavelength(self.frequency_mhz, self.relative_permittivity)

def angular_frequency(frequency_mhz: float) -> float:
    return 2*math.pi*frequency_mhz*1e6

def wavelength(frequency_mhz: float, relative_permittivity: float = 1.0) -> float:
    """Guided wavelength in metres for a TEM line filled with er."""
    return C_0 / math.sqrt(relative_permittivity) / (frequency_mhz*1e6)

def swr(z: Impedance, z0: float) -> float:
    """Standing-wave ratio from the impedance magnitude.

    Uses |z| against z0 rather than the vector reflection coefficient, so a
    reactive impedance of magnitude z0 reads as SWR 1. A short (gamma = 1)
    saturates to SWR_OVERFLOW, and so does an open circuit (infinite |z|).
    """
    Z = magnitude(z)
    if math.isinf(Z):
        return SWR_OVERFLOW
    gamma = abs((Z - z0)/(Z + z0))
    if gamma >= 1.0:
        return SWR_OVERFLOW
    return (1 + gamma)/(1 - gamma)

def wrap_half_wavelength(fraction: float) -> float:
    """Fold a wavelength fraction into [0, 0.5); line impedances repeat every lambda/2."""
    r = math.fmod(fraction, 0.5)
    if r < 0:
        r += 0.5
    if r >= 0.5 - EPSILON:
        r = 0.0
    return r

def zin_at_distance(ZL: Impedance, Z0: float, d: float) -> Impedance:
    """Input impedance of a lossless line of Z0, d wavelengths long, terminated by ZL.

    Zin = Z0 (ZL + j Z0 tan t)/(Z0 + j ZL tan t) with t = 2*pi*d, evaluated with
    numerator and denominator multiplied through by cos t so t = pi/2 stays finite.
    """
    theta = 2*math.pi*d
    c, s = math.cos(theta), math.sin(theta)
    num = add(scale(ZL, c), Impedance(0.0, Z0*s))
    den = add(Impedance(Z0*c, 0.0), multiply(Impedance(0.0, s), ZL))
    return scale(multiply(num, invert(den)), Z0)
