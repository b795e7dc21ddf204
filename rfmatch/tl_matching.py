# rfmatch/tl_matching.py
from __future__ import annotations
import logging
import math
from dataclasses import dataclass, field
from typing import Dict, Tuple

from .config import EPSILON
from .tl_complex import Impedance, ONE, add, subtract, divide, magnitude, scale
from .tl_core import (
    DesignRequest, StubConfiguration, StubType,
    STUB_CONFIGURATIONS, STUB_TYPES,
    wrap_half_wavelength, zin_at_distance,
)
from .tl_errors import InvalidInputError, UnsupportedLoadError

logger = logging.getLogger(__name__)

# ----------------------------
# Dataclasses for results
# ----------------------------

@dataclass(frozen=True)
class QuarterWaveDesign:
    request: DesignRequest
    z0_ohms: float                 # characteristic impedance of the transformer section
    wavelength_m: float
    quarter_wave_length_m: float
    topology: str = 'quarter-wave'

    @property
    def electrical_length(self) -> float:
        """Section length in wavelengths at the design frequency."""
        return self.quarter_wave_length_m / self.wavelength_m

@dataclass(frozen=True)
class StubSolution:
    distance_wavelengths: float
    stub_length_wavelengths: float
    distance_m: float
    stub_length_m: float
    derived: Dict[str, float] = field(default_factory=dict)

    @property
    def total_length_m(self) -> float:
        return self.distance_m + self.stub_length_m

@dataclass(frozen=True)
class StubDesign:
    request: DesignRequest
    stub_configuration: StubConfiguration
    stub_type: StubType
    solutions: Tuple[StubSolution, ...]
    optimal_index: int
    justification: str
    topology: str = 'single-stub'

    @property
    def optimal(self) -> StubSolution:
        return self.solutions[self.optimal_index]

# ----------------------------
# Matching: Quarter-wave transformer
# ----------------------------

def quarter_wave_transform(request: DesignRequest) -> QuarterWaveDesign:
    """Single lambda/4 section matching a resistive load to the source."""
    request.validate()
    ZL = request.load_impedance
    if ZL.imag != 0:
        raise UnsupportedLoadError(
            'quarter-wave transformer is designed for purely resistive loads; '
            f'got ZL={ZL}. Use a lumped element or single stub network for complex loads.'
        )
    Z0 = math.sqrt(request.source_impedance_ohms * ZL.real)
    lamb = request.wavelength_m
    logger.debug('quarter-wave: Z0=%.6g ohm lambda=%.6g m', Z0, lamb)
    return QuarterWaveDesign(
        request=request,
        z0_ohms=Z0,
        wavelength_m=lamb,
        quarter_wave_length_m=lamb/4.0,
    )

# ----------------------------
# Stub helpers
# ----------------------------

def _distance_from_t(t: float) -> float:
    """d/lambda with tan(2*pi*d) = t, on the principal positive branch."""
    if t >= 0:
        return math.atan(t)/(2*math.pi)
    # a round-off negative t lands on 0.5, which folds back to 0
    return wrap_half_wavelength((math.pi + math.atan(t))/(2*math.pi))

def _shunt_susceptance_at(t: float, RL: float, XL: float, Z0: float) -> float:
    """Susceptance B of Y(d) = G + jB seen at the stub position."""
    den = Z0*(RL*RL + (XL + Z0*t)**2)
    return (RL*RL*t - (Z0 - XL*t)*(XL + Z0*t))/den

def _shunt_stub_length(B: float, Z0: float, stub_type: str) -> float:
    """Stub length (wavelengths) that cancels susceptance B."""
    Y0 = 1.0/Z0
    if abs(B) < EPSILON:
        # zero susceptance: lambda/4 short, or an open stub of no length
        return 0.25 if stub_type == 'short' else 0.0
    if stub_type == 'short':
        length = math.atan(Y0/B)/(2*math.pi)
    else:
        length = -math.atan(B/Y0)/(2*math.pi)
    return wrap_half_wavelength(length)

def _series_stub_length(Xstub: float, Z0: float, stub_type: str) -> float:
    """Stub length (wavelengths) presenting series reactance Xstub."""
    if abs(Xstub) < EPSILON:
        return 0.0 if stub_type == 'short' else 0.25
    if stub_type == 'short':
        length = math.atan(Xstub/Z0)/(2*math.pi)
    else:
        length = math.atan(-Z0/Xstub)/(2*math.pi)
    return wrap_half_wavelength(length)

def _shunt_stub_solutions(request: DesignRequest, stub_type: str):
    RL, XL = request.load_impedance.real, request.load_impedance.imag
    Z0 = request.source_impedance_ohms

    if math.isclose(RL, Z0, rel_tol=EPSILON):
        ts = [-XL/(2*Z0)]
    else:
        discriminant = math.sqrt((RL/Z0)*((Z0 - RL)**2 + XL*XL))
        ts = [(XL + discriminant)/(RL - Z0), (XL - discriminant)/(RL - Z0)]

    out = []
    for t in ts:
        d = _distance_from_t(t)
        B = _shunt_susceptance_at(t, RL, XL, Z0)
        length = _shunt_stub_length(B, Z0, stub_type)
        logger.debug('shunt stub root t=%.6g d=%.6g B=%.6g l=%.6g', t, d, B, length)
        out.append((d, length, {'t': t, 'B': B}))
    return out

def _series_stub_solutions(request: DesignRequest, stub_type: str):
    ZL = request.load_impedance
    Z0 = request.source_impedance_ohms

    zL = scale(ZL, 1.0/Z0)
    Gamma_L = divide(subtract(zL, ONE), add(zL, ONE))
    phi = math.atan2(Gamma_L.imag, Gamma_L.real)
    alpha = math.acos(min(max(magnitude(Gamma_L), 0.0), 1.0))

    out = []
    for d in ((phi - alpha)/(4*math.pi), (phi + alpha)/(4*math.pi)):
        d = wrap_half_wavelength(d)
        Xstub = -zin_at_distance(ZL, Z0, d).imag
        length = _series_stub_length(Xstub, Z0, stub_type)
        logger.debug('series stub d=%.6g Xstub=%.6g l=%.6g', d, Xstub, length)
        out.append((d, length, {'X': Xstub}))
    return out

def _select_shortest(solutions: Tuple[StubSolution, ...]) -> Tuple[int, str]:
    """Index of the solution with the least total track length, ties to the first."""
    if len(solutions) == 1:
        total = solutions[0].total_length_m
        return 0, f'Solution 1 is the only solution ({total:.4f} m total track length).'
    total1, total2 = solutions[0].total_length_m, solutions[1].total_length_m
    if total1 <= total2:
        return 0, f'Solution 1 requires less total track length ({total1:.4f} m vs {total2:.4f} m).'
    return 1, f'Solution 2 requires less total track length ({total2:.4f} m vs {total1:.4f} m).'

# ----------------------------
# Matching: single stub
# ----------------------------

def single_stub_match(
    request: DesignRequest,
    stub_configuration: StubConfiguration | None = None,
    stub_type: StubType | None = None,
) -> StubDesign:
    """Design a single shunt or series stub match.

    Distances are measured from the load toward the source; both the
    distance and the stub length are reported in wavelengths and metres.
    Arguments left as None fall back to ``request.options``.
    """
    request.validate()
    stub_configuration = stub_configuration or request.options.stub_configuration
    stub_type = stub_type or request.options.stub_type
    if stub_configuration not in STUB_CONFIGURATIONS:
        raise InvalidInputError(f'stub_configuration must be one of {STUB_CONFIGURATIONS}, got {stub_configuration!r}')
    if stub_type not in STUB_TYPES:
        raise InvalidInputError(f'stub_type must be one of {STUB_TYPES}, got {stub_type!r}')

    if stub_configuration == 'shunt':
        raw = _shunt_stub_solutions(request, stub_type)
    else:
        raw = _series_stub_solutions(request, stub_type)

    lamb = request.wavelength_m
    solutions = tuple(
        StubSolution(
            distance_wavelengths=d,
            stub_length_wavelengths=length,
            distance_m=d*lamb,
            stub_length_m=length*lamb,
            derived=derived,
        )
        for d, length, derived in raw
    )
    optimal_index, justification = _select_shortest(solutions)
    logger.debug('%s-%s stub: %s', stub_configuration, stub_type, justification)
    return StubDesign(
        request=request,
        stub_configuration=stub_configuration,
        stub_type=stub_type,
        solutions=solutions,
        optimal_index=optimal_index,
        justification=justification,
    )
