"""Impedance value type and free-function complex arithmetic."""

from __future__ import annotations

import math

import pytest

from rfmatch import Impedance, NumericDegeneracyError, add, divide, invert, magnitude, multiply, subtract
from rfmatch.tl_complex import ZERO, scale


def test_add_and_multiply_follow_complex_algebra():
    a = Impedance(1.0, 2.0)
    b = Impedance(3.0, -1.0)

    assert add(a, b) == Impedance(4.0, 1.0)
    assert subtract(a, b) == Impedance(-2.0, 3.0)
    assert multiply(a, b) == Impedance(5.0, 5.0)
    assert scale(a, 2.0) == Impedance(2.0, 4.0)
    assert multiply(a, b).as_complex() == pytest.approx((1 + 2j) * (3 - 1j))


def test_invert_is_conjugate_over_magnitude_squared():
    z = Impedance(3.0, 4.0)

    assert magnitude(z) == 5.0
    inv = invert(z)
    assert inv.real == pytest.approx(0.12)
    assert inv.imag == pytest.approx(-0.16)
    assert multiply(z, inv).real == pytest.approx(1.0)
    assert multiply(z, inv).imag == pytest.approx(0.0, abs=1e-15)


def test_divide_matches_builtin_complex():
    a = Impedance(10.0, -7.0)
    b = Impedance(2.0, 5.0)
    assert divide(a, b).as_complex() == pytest.approx((10 - 7j) / (2 + 5j))


def test_invert_near_zero_raises_or_saturates():
    with pytest.raises(NumericDegeneracyError, match="near-zero"):
        invert(Impedance(0.0, 0.0))
    with pytest.raises(NumericDegeneracyError):
        invert(Impedance(1e-9, -1e-9))

    assert invert(Impedance(0.0, 0.0), saturate=True) == ZERO
    # saturation only kicks in below the floor
    assert invert(Impedance(2.0, 0.0), saturate=True) == Impedance(0.5, -0.0)


def test_degeneracy_error_is_a_value_error():
    with pytest.raises(ValueError):
        invert(ZERO)


def test_impedance_is_immutable_and_converts():
    z = Impedance.from_complex(25 - 30j)
    assert z == Impedance(25.0, -30.0)
    assert z.as_complex() == 25 - 30j
    assert str(z) == "25 - j30"
    with pytest.raises(AttributeError):
        z.real = 1.0
    assert math.isclose(magnitude(Impedance(-6.0, 8.0)), 10.0)


def test_invert_floor_scales_with_reference():
    tiny_admittance = Impedance(5e-7, 0.0)
    with pytest.raises(NumericDegeneracyError):
        invert(tiny_admittance)
    assert invert(tiny_admittance, reference=1e-4).real == pytest.approx(2e6)

    # cancellation down to round-off relative to the summed terms is still degenerate
    with pytest.raises(NumericDegeneracyError):
        invert(Impedance(1e-22, 0.0), reference=1e-4)
    with pytest.raises(NumericDegeneracyError):
        invert(ZERO, reference=0.0)
