"""
conftest.py - Shared pytest fixtures for nostro tests

Provides common fixtures used across unit, functional and conformance tests:
- The bundled registry and individual corridors
- Synthetic corridors (fee-only, single FX, double FX, fee-free)
- Fresh simulation sessions
"""

import pytest
from decimal import Decimal

from nostro import (
    CorridorRegistry,
    Playback,
    SimulationSession,
    default_registry,
    load_corridors,
)

from tests.fake_corridor import make_corridor


# =============================================================================
# BUNDLED DATA
# =============================================================================

@pytest.fixture
def registry() -> CorridorRegistry:
    """The validated registry of bundled corridors."""
    return default_registry()


@pytest.fixture
def fresh_registry() -> CorridorRegistry:
    """A registry built from freshly constructed corridors (not the cached one)."""
    return CorridorRegistry(load_corridors())


@pytest.fixture
def sgd_gbp(registry):
    return registry.get_corridor("sgd-gbp")


@pytest.fixture
def usd_ngn(registry):
    return registry.get_corridor("usd-ngn")


@pytest.fixture
def jpy_mxn(registry):
    return registry.get_corridor("jpy-mxn")


# =============================================================================
# SYNTHETIC CORRIDORS
# =============================================================================

@pytest.fixture
def fee_only_corridor():
    """USD → USD, three hops, fees 10/5/2, no conversion."""
    return make_corridor(fees=(10, 5, 2))


@pytest.fixture
def fx_corridor():
    """USD → GBP, fees 10 USD, 5 USD (then convert at 0.5), 2 GBP."""
    return make_corridor(fees=(10, 5, 2), fx={1: ("0.5", "GBP")})


@pytest.fixture
def double_fx_corridor():
    """JPY → USD → MXN, converting on the second and third hops."""
    return make_corridor(
        fees=(100, 50, 1),
        fx={1: ("0.01", "USD"), 2: ("20", "MXN")},
        source_currency="JPY",
        default_amount=100000,
    )


@pytest.fixture
def fee_free_corridor():
    """USD → EUR, no fees at all, one conversion at 0.9."""
    return make_corridor(fees=(None, None, None), fx={0: ("0.9", "EUR")})


@pytest.fixture
def synthetic_registry(fx_corridor):
    return CorridorRegistry([
        fx_corridor,
        make_corridor(fees=(10, 5, 2), corridor_id="flat", default_amount=500),
    ])


# =============================================================================
# SESSIONS
# =============================================================================

@pytest.fixture
def session(registry):
    """Session on SGD → GBP, serial, SHA, default amount."""
    s = SimulationSession(registry=registry, corridor_id="sgd-gbp")
    yield s
    s.close()


@pytest.fixture
def playback():
    """Playback over a 5-step sequence."""
    return Playback(5)


@pytest.fixture
def principal():
    return Decimal("1000")
