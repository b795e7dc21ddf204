"""Shared design requests for the matching-network tests."""

from __future__ import annotations

import pytest

from rfmatch import DesignRequest, Impedance, TopologyOptions


@pytest.fixture
def resistive_request() -> DesignRequest:
    """Scenario A: 100 ohm resistive load, 50 ohm source, 1 GHz, air line."""
    return DesignRequest(Impedance(100.0, 0.0), 1000.0, 50.0, 1.0)


@pytest.fixture
def complex_request() -> DesignRequest:
    """Scenario B load: 100 + j50 ohm against 50 ohm at 1 GHz."""
    return DesignRequest(Impedance(100.0, 50.0), 1000.0, 50.0, 1.0)


@pytest.fixture
def make_request():
    def _make(real, imag=0.0, frequency_mhz=1000.0, z0=50.0, er=1.0, **options):
        return DesignRequest(Impedance(real, imag), frequency_mhz, z0, er, TopologyOptions(**options))
    return _make
