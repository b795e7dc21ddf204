# rfmatch/tl_sweep.py
"""
Frequency response of a synthesized network.

Component values and physical line lengths are frozen at the design; only the
frequency moves. A line that is d wavelengths long at f0 is d*f/f0 wavelengths
long at f. A stub that reaches a singular angle inside the band shorts (shunt)
or opens (series) the line, and that sample reads SWR_OVERFLOW.
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Tuple, Union

import numpy as np
import pandas as pd

from .config import SWEEP_START_FACTOR, SWEEP_STOP_FACTOR, SWEEP_STEPS
from .tl_complex import OPEN_CIRCUIT, ZERO, Impedance
from .tl_core import angular_frequency, swr, zin_at_distance
from .tl_errors import InvalidInputError
from .tl_lumped import LumpedDesign
from .tl_matching import QuarterWaveDesign, StubDesign
from .tl_network import add_series, add_shunt, stub_reactance, stub_susceptance

Design = Union[QuarterWaveDesign, LumpedDesign, StubDesign]

@dataclass(frozen=True)
class SweepPoint:
    frequency_mhz: float
    real: float
    imag: float
    swr: float

def _solution_index(design: Design, solution_index: int | None) -> int:
    if isinstance(design, QuarterWaveDesign):
        return 0
    if solution_index is None:
        return design.optimal_index if isinstance(design, StubDesign) else 0
    if not 0 <= solution_index < len(design.solutions):
        raise InvalidInputError(
            f'solution_index {solution_index} out of range for {len(design.solutions)} solution(s)'
        )
    return solution_index

def _lumped_zin(design: LumpedDesign, idx: int, frequency_mhz: float) -> Impedance:
    sol = design.solutions[idx]
    w = angular_frequency(frequency_mhz)
    B = sol.shunt.susceptance(w)
    X = sol.series.reactance(w)
    ZL = design.request.load_impedance
    if design.is_shunt_first:
        return add_series(add_shunt(ZL, B), X)
    return add_shunt(add_series(ZL, X), B)

def _stub_zin(design: StubDesign, idx: int, frequency_mhz: float) -> Impedance:
    sol = design.solutions[idx]
    req = design.request
    Z0 = req.source_impedance_ohms
    ratio = frequency_mhz / req.frequency_mhz
    d = sol.distance_wavelengths * ratio
    length = sol.stub_length_wavelengths * ratio

    Zd = zin_at_distance(req.load_impedance, Z0, d)
    if design.stub_configuration == 'shunt':
        B = stub_susceptance(Z0, length, design.stub_type, saturate=True)
        if math.isinf(B):
            # stub shorts the line
            return ZERO
        return add_shunt(Zd, B)
    X = stub_reactance(Z0, length, design.stub_type, saturate=True)
    if math.isinf(X):
        return OPEN_CIRCUIT
    return add_series(Zd, X)

def _quarter_wave_zin(design: QuarterWaveDesign, frequency_mhz: float) -> Impedance:
    req = design.request
    d = design.electrical_length * frequency_mhz / req.frequency_mhz
    return zin_at_distance(req.load_impedance, design.z0_ohms, d)

def input_impedance(design: Design, frequency_mhz: float, solution_index: int | None = None) -> Impedance:
    """Impedance seen by the source looking into the matched load at ``frequency_mhz``."""
    if frequency_mhz <= 0:
        raise InvalidInputError(f'frequency_mhz must be positive, got {frequency_mhz}')
    idx = _solution_index(design, solution_index)
    if isinstance(design, LumpedDesign):
        return _lumped_zin(design, idx, frequency_mhz)
    if isinstance(design, StubDesign):
        return _stub_zin(design, idx, frequency_mhz)
    if isinstance(design, QuarterWaveDesign):
        return _quarter_wave_zin(design, frequency_mhz)
    raise InvalidInputError(f'unsupported design type {type(design).__name__}')

def sweep_frequencies(frequency_mhz: float) -> np.ndarray:
    """SWEEP_STEPS+1 equally spaced frequencies from f/2 to 1.5 f (MHz)."""
    return np.linspace(frequency_mhz*SWEEP_START_FACTOR, frequency_mhz*SWEEP_STOP_FACTOR, SWEEP_STEPS + 1)

def frequency_response(design: Design, solution_index: int | None = None) -> Tuple[SweepPoint, ...]:
    """Input impedance and SWR of ``design`` across the band around its design frequency.

    ``solution_index`` picks the root to sweep; it defaults to the first lumped
    solution and to the optimal stub solution.
    """
    idx = _solution_index(design, solution_index)
    Z0s = design.request.source_impedance_ohms
    points = []
    for f in sweep_frequencies(design.request.frequency_mhz):
        f = float(f)
        zin = input_impedance(design, f, idx)
        points.append(SweepPoint(frequency_mhz=f, real=zin.real, imag=zin.imag, swr=swr(zin, Z0s)))
    return tuple(points)

def sweep_to_frame(points) -> pd.DataFrame:
    """Tabulate a sweep for charting or CSV export."""
    cols = ['frequency_mhz', 'real', 'imag', 'swr']
    return pd.DataFrame([[p.frequency_mhz, p.real, p.imag, p.swr] for p in points], columns=cols)
