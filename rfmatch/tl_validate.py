# rfmatch/tl_validate.py
from __future__ import annotations
from dataclasses import dataclass

from .tl_complex import Impedance
from .tl_core import DesignRequest, TopologyOptions, swr
from .tl_sweep import Design, input_impedance

MATCH_TOL = 1e-6

def approx(a, b, tol=1e-3):
    """Relative tolerance check: |a-b| <= tol*(1+|b|)."""
    return abs(a - b) <= tol * (1 + abs(b))

@dataclass(frozen=True)
class Verification:
    zin: Impedance
    swr: float
    matched: bool

def verify_design(design: Design, solution_index: int | None = None, tol: float = MATCH_TOL) -> Verification:
    """Re-evaluate ``design`` at its own frequency and check Zin == Z0s + j0."""
    req = design.request
    zin = input_impedance(design, req.frequency_mhz, solution_index)
    Z0s = req.source_impedance_ohms
    matched = approx(zin.real, Z0s, tol) and abs(zin.imag) <= tol * (1 + Z0s)
    return Verification(zin=zin, swr=swr(zin, Z0s), matched=matched)

def check_quarter_wave():
    """
    Textbook benchmark: 100 ohm load to 50 ohm at 1 GHz in air.
    Z0 = sqrt(50*100) = 70.71 ohm, lambda/4 = 74.948 mm, and the section must match.
    """
    from .tl_matching import quarter_wave_transform
    d = quarter_wave_transform(DesignRequest(Impedance(100.0, 0.0), 1000.0))
    assert approx(d.z0_ohms, 70.7107, 1e-5), f'Expected Z0~70.71, got {d.z0_ohms}'
    assert approx(d.quarter_wave_length_m, 0.0749481, 1e-5), f'Got {d.quarter_wave_length_m}'
    assert verify_design(d).matched, 'quarter-wave section does not match at f0'

def check_every_root_matches():
    """Every lumped and stub solution must present Z0s at the design frequency."""
    from .tl_lumped import lumped_element_match
    from .tl_matching import single_stub_match
    ZL = Impedance(100.0, 50.0)
    for configuration in ('shunt-first', 'series-first'):
        load = ZL if configuration == 'shunt-first' else Impedance(20.0, -15.0)
        design = lumped_element_match(DesignRequest(load, 1000.0, options=TopologyOptions(configuration=configuration)))
        for i in range(len(design.solutions)):
            assert verify_design(design, i).matched, f'{configuration} root {i+1} not matched'
    for stub_configuration in ('shunt', 'series'):
        for stub_type in ('short', 'open'):
            opts = TopologyOptions(stub_configuration=stub_configuration, stub_type=stub_type)
            design = single_stub_match(DesignRequest(ZL, 1000.0, options=opts))
            for i in range(len(design.solutions)):
                assert verify_design(design, i).matched, f'{stub_configuration}-{stub_type} root {i+1} not matched'

if __name__ == '__main__':
    check_quarter_wave()
    check_every_root_matches()
    print("OK")
