# rfmatch/tl_wizard.py
"""Coarse topology recommendation from the load classification.

This never runs a synthesizer; it only looks at RL, XL and the scalar SWR.
"""
from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Optional

from .config import WIZARD_HIGH_SWR, WIZARD_MATCH_TOL, WIZARD_REACTANCE_TOL
from .tl_core import DesignRequest, swr

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Recommendation:
    network: str                           # 'none' | 'quarter-wave' | 'single-stub' | 'lumped-element'
    reason: str
    configuration: Optional[str] = None    # lumped 'shunt-first'/'series-first' or stub 'shunt'
    stub_type: Optional[str] = None
    z0_ohms: Optional[float] = None        # suggested transformer impedance (quarter-wave only)

def recommend_network(request: DesignRequest) -> Recommendation:
    request.validate()
    RL, XL = request.load_impedance.real, request.load_impedance.imag
    Z0 = request.source_impedance_ohms
    load_swr = swr(request.load_impedance, Z0)
    logger.debug('wizard: RL=%g XL=%g Z0=%g swr=%.4g', RL, XL, Z0, load_swr)

    if abs(XL) < WIZARD_REACTANCE_TOL:
        if abs(RL - Z0) < WIZARD_MATCH_TOL:
            return Recommendation('none', 'The load is already matched to the source impedance.')
        return Recommendation(
            'quarter-wave',
            'The load is purely resistive, and a quarter-wave transformer is a simple solution.',
            z0_ohms=math.sqrt(Z0*RL),
        )
    if load_swr > WIZARD_HIGH_SWR:
        return Recommendation(
            'single-stub',
            'The load has a high SWR, and a single-stub matching network provides good flexibility.',
            configuration='shunt', stub_type='short',
        )
    if RL > Z0:
        return Recommendation(
            'lumped-element',
            'The load resistance is higher than the source impedance, a shunt-first lumped element network is optimal.',
            configuration='shunt-first',
        )
    return Recommendation(
        'lumped-element',
        'The load resistance is lower than the source impedance, a series-first lumped element network is optimal.',
        configuration='series-first',
    )
