"""Microstrip analysis, synthesis and layout of line-based designs."""

from __future__ import annotations

import pytest

from rfmatch import (
    InvalidInputError,
    lumped_element_match,
    microstrip_impedance,
    microstrip_layout,
    microstrip_width,
    quarter_wave_transform,
    single_stub_match,
)
from rfmatch.config import C_0
from rfmatch.tl_microstrip import effective_permittivity

H = 1.6e-3
ER = 4.4


def test_fifty_ohm_line_on_fr4():
    w = microstrip_width(50.0, H, ER)
    assert w / H == pytest.approx(1.91, rel=1e-2)
    assert microstrip_impedance(w, H, ER) == pytest.approx(50.0, rel=2e-2)


@pytest.mark.parametrize("z0", [20.0, 35.0, 50.0, 70.71, 110.0])
def test_closed_form_agrees_with_analysis(z0):
    w = microstrip_width(z0, H, ER)
    assert microstrip_impedance(w, H, ER) == pytest.approx(z0, rel=2e-2)


@pytest.mark.parametrize("z0", [20.0, 50.0, 70.71, 110.0])
def test_refined_width_inverts_analysis(z0):
    w = microstrip_width(z0, H, ER, refine=True)
    assert microstrip_impedance(w, H, ER) == pytest.approx(z0, abs=1e-6)


def test_wider_strip_has_lower_impedance():
    assert microstrip_impedance(5e-3, H, ER) < microstrip_impedance(1e-3, H, ER)
    assert 1.0 < effective_permittivity(3e-3, H, ER) < ER


def test_bad_geometry_is_rejected():
    with pytest.raises(InvalidInputError):
        microstrip_width(50.0, 0.0, ER)
    with pytest.raises(InvalidInputError):
        microstrip_width(50.0, H, 0.5)
    with pytest.raises(InvalidInputError):
        microstrip_width(-50.0, H, ER)
    with pytest.raises(InvalidInputError):
        microstrip_impedance(0.0, H, ER)


def test_quarter_wave_layout(resistive_request):
    layout = microstrip_layout(quarter_wave_transform(resistive_request))

    assert layout.z0_ohms == pytest.approx(70.7107, rel=1e-5)
    assert layout.guided_wavelength_m == pytest.approx(
        C_0 / (1e9 * layout.effective_permittivity ** 0.5)
    )
    assert layout.length_m == pytest.approx(layout.guided_wavelength_m / 4)
    assert layout.distance_m is None and layout.stub_length_m is None


def test_stub_layout_uses_a_fifty_ohm_line(complex_request):
    design = single_stub_match(complex_request)
    layout = microstrip_layout(design, substrate_height_mm=0.8, substrate_permittivity=3.5)

    assert layout.z0_ohms == 50.0
    assert layout.length_m is None
    lamb = layout.guided_wavelength_m
    assert layout.distance_m == pytest.approx(design.optimal.distance_wavelengths * lamb)
    assert layout.stub_length_m == pytest.approx(design.optimal.stub_length_wavelengths * lamb)

    other = microstrip_layout(design, substrate_height_mm=0.8, substrate_permittivity=3.5,
                              solution_index=1 - design.optimal_index)
    assert other.distance_m != pytest.approx(layout.distance_m)
    with pytest.raises(InvalidInputError):
        microstrip_layout(design, solution_index=2)


def test_lumped_designs_have_no_layout(complex_request):
    with pytest.raises(InvalidInputError, match="quarter-wave and single-stub"):
        microstrip_layout(lumped_element_match(complex_request))
