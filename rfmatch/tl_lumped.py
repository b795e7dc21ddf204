# rfmatch/tl_lumped.py
"""
Two-element (L-section) lumped matching networks.

shunt-first : load -> shunt B -> series X -> source   (natural choice for RL > Z0)
series-first: load -> series X -> shunt B -> source   (natural choice for RL < Z0)

Both algebraic roots are valid matches at the design frequency; the caller picks.
"""
from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Tuple

from .config import EPSILON
from .tl_core import DesignRequest, LumpedConfiguration, LUMPED_CONFIGURATIONS
from .tl_errors import InvalidInputError, NoRealSolutionError
from .tl_network import ReactiveComponent, component_for_reactance, component_for_susceptance

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class LumpedSolution:
    shunt: ReactiveComponent
    series: ReactiveComponent
    B: float     # S, shunt susceptance
    X: float     # ohm, series reactance

@dataclass(frozen=True)
class LumpedDesign:
    request: DesignRequest
    configuration: LumpedConfiguration
    solutions: Tuple[LumpedSolution, ...]
    topology: str = 'lumped-element'

    @property
    def is_shunt_first(self) -> bool:
        return self.configuration == 'shunt-first'

def _shunt_first_roots(RL: float, XL: float, Z0: float):
    discriminant = (RL/Z0)*(RL*RL + XL*XL - Z0*RL)
    if discriminant < 0:
        raise NoRealSolutionError(
            f'no real solution for shunt-first configuration '
            f'(RL={RL:g}, XL={XL:g}, Z0={Z0:g}, discriminant={discriminant:.4g})'
        )
    sqrtD = math.sqrt(discriminant)
    logger.debug('shunt-first discriminant=%.6g sqrtD=%.6g', discriminant, sqrtD)

    mag2 = RL*RL + XL*XL
    candidates = [(XL + sqrtD)/mag2]
    if sqrtD >= EPSILON:
        candidates.append((XL - sqrtD)/mag2)

    roots = []
    for B in candidates:
        if abs(B) < EPSILON:
            # B = 0 is a root only when RL == Z0; the series element alone cancels XL
            logger.debug('shunt-first root B=0: series element only')
            roots.append((0.0, -XL))
            continue
        X = 1/B + XL*Z0/RL - Z0/(B*RL)
        roots.append((B, X))
    return roots

def _series_first_roots(RL: float, XL: float, Z0: float):
    discriminant = RL*(Z0 - RL)
    if discriminant < 0:
        raise NoRealSolutionError(
            f'no real solution for series-first configuration '
            f'(RL={RL:g}, Z0={Z0:g}, discriminant={discriminant:.4g})'
        )
    sqrtD = math.sqrt(discriminant)
    logger.debug('series-first discriminant=%.6g sqrtD=%.6g', discriminant, sqrtD)

    signs = (1.0, -1.0) if sqrtD >= EPSILON else (1.0,)
    return [(sign*sqrtD/(Z0*RL), sign*sqrtD - XL) for sign in signs]

def lumped_element_match(
    request: DesignRequest, configuration: LumpedConfiguration | None = None
) -> LumpedDesign:
    """Synthesize both L-section solutions for ``request``.

    ``configuration`` overrides ``request.options.configuration``. A double root
    gives a single solution; a load with RL == Z0 always has a solution with no
    shunt element (0 F capacitor), so a matched load comes back as an open
    shunt and a through series in either configuration.
    """
    request.validate()
    configuration = configuration or request.options.configuration
    if configuration not in LUMPED_CONFIGURATIONS:
        raise InvalidInputError(f'configuration must be one of {LUMPED_CONFIGURATIONS}, got {configuration!r}')

    RL, XL = request.load_impedance.real, request.load_impedance.imag
    Z0 = request.source_impedance_ohms
    w = request.omega

    if configuration == 'shunt-first':
        roots = _shunt_first_roots(RL, XL, Z0)
    else:
        roots = _series_first_roots(RL, XL, Z0)

    solutions = tuple(
        LumpedSolution(
            shunt=component_for_susceptance(B, w),
            series=component_for_reactance(X, w),
            B=B, X=X,
        )
        for B, X in roots
    )
    for i, s in enumerate(solutions, 1):
        logger.debug('%s solution %d: B=%.6g S (%s) X=%.6g ohm (%s)',
                     configuration, i, s.B, s.shunt.kind, s.X, s.series.kind)
    return LumpedDesign(request=request, configuration=configuration, solutions=solutions)

def minimal_magnitude_solution(design: LumpedDesign) -> LumpedSolution:
    """Secondary policy: the root with the smallest normalized element values.

    Ranks by |B|*Z0 + |X|/Z0; ties keep the first root.
    """
    Z0 = design.request.source_impedance_ohms
    return min(design.solutions, key=lambda s: abs(s.B)*Z0 + abs(s.X)/Z0)
