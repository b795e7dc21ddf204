"""Quarter-wave transformer synthesis."""

from __future__ import annotations

import pytest

from rfmatch import DesignRequest, Impedance, InvalidInputError, UnsupportedLoadError, quarter_wave_transform


def test_resistive_load_benchmark(resistive_request):
    design = quarter_wave_transform(resistive_request)

    assert design.topology == "quarter-wave"
    assert design.z0_ohms == pytest.approx(70.7107, rel=1e-5)
    assert design.wavelength_m * 1e3 == pytest.approx(299.792, rel=1e-5)
    assert design.quarter_wave_length_m * 1e3 == pytest.approx(74.948, rel=1e-5)
    assert design.electrical_length == pytest.approx(0.25)


@pytest.mark.parametrize("RL", [1.0, 12.5, 50.0, 75.0, 300.0, 4000.0])
@pytest.mark.parametrize("Z0", [25.0, 50.0, 75.0])
def test_section_impedance_is_geometric_mean(RL, Z0):
    design = quarter_wave_transform(DesignRequest(Impedance(RL, 0.0), 433.0, Z0))
    assert design.z0_ohms ** 2 == pytest.approx(Z0 * RL, rel=1e-12)


def test_dielectric_shortens_the_section():
    air = quarter_wave_transform(DesignRequest(Impedance(100.0, 0.0), 1000.0))
    filled = quarter_wave_transform(DesignRequest(Impedance(100.0, 0.0), 1000.0, relative_permittivity=4.0))
    assert filled.quarter_wave_length_m == pytest.approx(air.quarter_wave_length_m / 2)
    assert filled.z0_ohms == air.z0_ohms


def test_reactive_load_is_rejected(complex_request):
    with pytest.raises(UnsupportedLoadError, match="resistive"):
        quarter_wave_transform(complex_request)


def test_invalid_request_is_rejected_before_synthesis():
    with pytest.raises(InvalidInputError):
        quarter_wave_transform(DesignRequest(Impedance(-100.0, 0.0), 1000.0))
    with pytest.raises(InvalidInputError):
        quarter_wave_transform(DesignRequest(Impedance(100.0, 0.0), -1.0))
