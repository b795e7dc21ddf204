# rfmatch/tl_microstrip.py
"""
Microstrip dimensions for a synthesized line impedance.

Quasi-static Hammerstad/Pozar formulas, zero strip thickness, no dispersion.
Widths and lengths are returned in metres.
"""
from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Optional

import numpy as np
from scipy.optimize import brentq

from .config import (
    C_0, DEFAULT_SUBSTRATE_ER, DEFAULT_SUBSTRATE_HEIGHT_MM,
    MICROSTRIP_WIDE_RATIO, STUB_LINE_IMPEDANCE_OHMS,
)
from .tl_errors import InvalidInputError
from .tl_matching import QuarterWaveDesign, StubDesign

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class MicrostripLayout:
    z0_ohms: float
    width_m: float
    effective_permittivity: float
    guided_wavelength_m: float
    length_m: Optional[float] = None        # quarter-wave section
    distance_m: Optional[float] = None      # single stub: load to stub
    stub_length_m: Optional[float] = None   # single stub: stub itself

def _check_substrate(h: float, er: float):
    if not h > 0:
        raise InvalidInputError(f'substrate height must be positive, got {h}')
    if not er >= 1:
        raise InvalidInputError(f'substrate permittivity must be >= 1, got {er}')

def effective_permittivity(w: float, h: float, er: float) -> float:
    return (er + 1)/2 + (er - 1)/2 / math.sqrt(1 + 12*h/w)

def microstrip_impedance(w: float, h: float, er: float) -> float:
    """Characteristic impedance of a strip of width w on a substrate of height h."""
    _check_substrate(h, er)
    if not w > 0:
        raise InvalidInputError(f'strip width must be positive, got {w}')
    e_eff = effective_permittivity(w, h, er)
    u = w/h
    if u <= 1:
        return 60/math.sqrt(e_eff) * math.log(8/u + u/4)
    return 120*math.pi/(math.sqrt(e_eff)*(u + 1.393 + 0.667*math.log(u + 1.444)))

def _closed_form_ratio(z0: float, er: float) -> float:
    A = z0/60*math.sqrt((er + 1)/2) + (er - 1)/(er + 1)*(0.23 + 0.11/er)
    den = math.exp(2*A) - 2
    narrow = 8*math.exp(A)/den if den > 0 else math.inf
    if narrow < MICROSTRIP_WIDE_RATIO:
        return narrow
    B = 377*math.pi/(2*z0*math.sqrt(er))
    return 2/math.pi*(B - 1 - math.log(2*B - 1) + (er - 1)/(2*er)*(math.log(B - 1) + 0.39 - 0.61/er))

def microstrip_width(z0: float, h: float, er: float, refine: bool = False) -> float:
    """Strip width for impedance z0.

    The closed-form synthesis is accurate to about 1% against the analysis
    formula; ``refine`` polishes it with a bracketed root search.
    """
    _check_substrate(h, er)
    if not z0 > 0:
        raise InvalidInputError(f'line impedance must be positive, got {z0}')
    w = _closed_form_ratio(z0, er)*h
    if not refine:
        return w

    def f(x):
        return microstrip_impedance(x, h, er) - z0
    # impedance falls monotonically with width; widen the bracket until it straddles z0
    a, b = w/2, w*2
    for _ in range(40):
        if np.sign(f(a)) != np.sign(f(b)):
            break
        a, b = a/2, b*2
    w_ref = float(brentq(f, a, b, xtol=1e-15, rtol=1e-12, maxiter=200))
    logger.debug('microstrip width refined %.6g -> %.6g m for Z0=%.4g', w, w_ref, z0)
    return w_ref

def microstrip_layout(
    design,
    frequency_mhz: Optional[float] = None,
    substrate_height_mm: float = DEFAULT_SUBSTRATE_HEIGHT_MM,
    substrate_permittivity: float = DEFAULT_SUBSTRATE_ER,
    refine: bool = False,
    solution_index: Optional[int] = None,
) -> MicrostripLayout:
    """Physical microstrip realisation of a quarter-wave or single-stub design."""
    h = substrate_height_mm/1000
    er = substrate_permittivity
    _check_substrate(h, er)
    freq = (frequency_mhz or design.request.frequency_mhz)*1e6

    if isinstance(design, QuarterWaveDesign):
        z0 = design.z0_ohms
    elif isinstance(design, StubDesign):
        z0 = STUB_LINE_IMPEDANCE_OHMS
    else:
        raise InvalidInputError(
            'microstrip layout is only available for quarter-wave and single-stub designs'
        )

    width = microstrip_width(z0, h, er, refine=refine)
    e_eff = effective_permittivity(width, h, er)
    lamb = C_0/(freq*math.sqrt(e_eff))

    if isinstance(design, QuarterWaveDesign):
        return MicrostripLayout(z0, width, e_eff, lamb, length_m=lamb/4)

    idx = design.optimal_index if solution_index is None else solution_index
    if not 0 <= idx < len(design.solutions):
        raise InvalidInputError(f'solution_index {idx} out of range for {len(design.solutions)} solution(s)')
    sol = design.solutions[idx]
    return MicrostripLayout(
        z0, width, e_eff, lamb,
        distance_m=sol.distance_wavelengths*lamb,
        stub_length_m=sol.stub_length_wavelengths*lamb,
    )
