"""Shared fixtures for sealanes tests."""

from pathlib import Path

import pytest

from sealanes.models.settings import RouterSettings
from sealanes.network.store import LineFeature, Network
from sealanes.routing.router import SeaRouter

DATA_DIR = Path(__file__).parent / "data"
SAMPLE_NETWORK_PATH = DATA_DIR / "sample_sea_lanes.geojson"


# ============================================================================
# Small synthetic network
# ============================================================================
#
#   (2,2)
#     |  B
#   (2,1)
#     |
#   (0,0)---(1,0)---(2,0)          (10,10)---(11,10)   C (disconnected)
#           A

LANE_A = [(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)]
LANE_B = [(2.0, 0.0), (2.0, 1.0), (2.0, 2.0)]
LANE_C = [(10.0, 10.0), (11.0, 10.0)]


@pytest.fixture
def simple_network() -> Network:
    """Two connected lanes plus one isolated lane."""
    return Network([
        LineFeature(tuple(LANE_A), {"name": "A"}),
        LineFeature(tuple(LANE_B), {"name": "B"}),
        LineFeature(tuple(LANE_C), {"name": "C"}),
    ])


@pytest.fixture
def simple_router(simple_network) -> SeaRouter:
    """Router over the synthetic network with default settings."""
    return SeaRouter(simple_network, settings=RouterSettings())


# ============================================================================
# Sample global lane network
# ============================================================================


@pytest.fixture(scope="session")
def sample_network_path() -> Path:
    return SAMPLE_NETWORK_PATH


@pytest.fixture(scope="session")
def sample_router() -> SeaRouter:
    """Router over the coarse global sample (Shanghai - Suez - Rotterdam)."""
    return SeaRouter.from_file(SAMPLE_NETWORK_PATH)
