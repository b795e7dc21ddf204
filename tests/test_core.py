"""Design request validation, SWR and the transmission-line transform."""

from __future__ import annotations

import math

import pytest

from rfmatch import (
    DesignRequest,
    Impedance,
    InvalidInputError,
    TopologyOptions,
    swr,
    wavelength,
    zin_at_distance,
)
from rfmatch.config import C_0, SWR_OVERFLOW
from rfmatch.tl_complex import OPEN_CIRCUIT
from rfmatch.tl_core import wrap_half_wavelength


def test_swr_is_one_for_magnitude_match():
    assert swr(Impedance(50.0, 0.0), 50.0) == 1.0
    # scalar approximation: |30 + j40| == 50 also reads as a perfect match
    assert swr(Impedance(30.0, 40.0), 50.0) == 1.0


def test_swr_known_values():
    assert swr(Impedance(100.0, 0.0), 50.0) == pytest.approx(2.0)
    assert swr(Impedance(25.0, 0.0), 50.0) == pytest.approx(2.0)
    assert swr(Impedance(0.0, 250.0), 50.0) == pytest.approx(5.0)


def test_swr_short_circuit_saturates_instead_of_raising():
    value = swr(Impedance(0.0, 0.0), 50.0)
    assert value == SWR_OVERFLOW
    assert math.isinf(value)


@pytest.mark.parametrize("real", [0.0, 1.0, 12.5, 49.9, 50.0, 75.0, 300.0, 1e4])
@pytest.mark.parametrize("imag", [-200.0, -1.0, 0.0, 3.0, 80.0])
def test_swr_never_below_one(real, imag):
    assert swr(Impedance(real, imag), 50.0) >= 1.0


def test_request_validation_rejects_out_of_domain_values():
    good = DesignRequest(Impedance(100.0, 10.0), 1000.0)
    good.validate()

    bad = [
        DesignRequest(Impedance(0.0, 10.0), 1000.0),
        DesignRequest(Impedance(-5.0, 0.0), 1000.0),
        DesignRequest(Impedance(100.0, 0.0), 0.0),
        DesignRequest(Impedance(100.0, 0.0), 1000.0, source_impedance_ohms=-50.0),
        DesignRequest(Impedance(100.0, 0.0), 1000.0, relative_permittivity=0.5),
        DesignRequest(Impedance(float("nan"), 0.0), 1000.0),
        DesignRequest(Impedance(100.0, float("inf")), 1000.0),
        DesignRequest(Impedance(100.0, 0.0), 1000.0, options=TopologyOptions(configuration="pi")),
        DesignRequest(Impedance(100.0, 0.0), 1000.0, options=TopologyOptions(stub_type="bent")),
        DesignRequest(Impedance(100.0, 0.0), 1000.0, options=TopologyOptions(stub_configuration="x")),
    ]
    for request in bad:
        with pytest.raises(InvalidInputError):
            request.validate()


def test_request_derived_quantities():
    request = DesignRequest(Impedance(100.0, 0.0), 1000.0, relative_permittivity=4.0)
    assert request.frequency_hz == 1e9
    assert request.omega == pytest.approx(2 * math.pi * 1e9)
    assert request.wavelength_m == pytest.approx(C_0 / 2.0 / 1e9)
    assert wavelength(1000.0) == pytest.approx(0.299792458)


def test_line_transform_special_lengths():
    ZL = Impedance(100.0, 0.0)

    at_zero = zin_at_distance(ZL, 50.0, 0.0)
    assert at_zero.real == pytest.approx(100.0)
    assert at_zero.imag == pytest.approx(0.0, abs=1e-12)

    # quarter wave inverts: Z0^2 / ZL, finite even though tan(pi/2) is not
    quarter = zin_at_distance(ZL, 50.0, 0.25)
    assert quarter.real == pytest.approx(25.0)
    assert quarter.imag == pytest.approx(0.0, abs=1e-9)

    half = zin_at_distance(Impedance(30.0, -20.0), 50.0, 0.5)
    assert half.real == pytest.approx(30.0)
    assert half.imag == pytest.approx(-20.0)


def test_line_transform_matches_tan_form():
    ZL = Impedance(75.0, 25.0)
    Z0, d = 50.0, 0.1
    t = math.tan(2 * math.pi * d)
    zl = ZL.as_complex()
    expected = Z0 * (zl + 1j * Z0 * t) / (Z0 + 1j * zl * t)
    assert zin_at_distance(ZL, Z0, d).as_complex() == pytest.approx(expected)


def test_matched_line_is_transparent():
    for d in (0.03, 0.17, 0.25, 0.41):
        z = zin_at_distance(Impedance(50.0, 0.0), 50.0, d)
        assert z.real == pytest.approx(50.0)
        assert z.imag == pytest.approx(0.0, abs=1e-9)


def test_wrap_half_wavelength():
    assert wrap_half_wavelength(-0.1) == pytest.approx(0.4)
    assert wrap_half_wavelength(0.6) == pytest.approx(0.1)
    assert wrap_half_wavelength(0.5) == 0.0
    assert wrap_half_wavelength(0.2) == 0.2


def test_swr_open_circuit_saturates():
    assert swr(OPEN_CIRCUIT, 50.0) == SWR_OVERFLOW
