"""Shared fixtures for the adviser test suite."""

import pytest

from conpave_adviser.config import reset_config
from conpave_adviser.schema import ParameterSet


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts from the default configuration."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def jpcp_params():
    """Ideal JPCP site: medium traffic, 20 years, good subgrade, 200 mm."""
    return ParameterSet.from_mapping({
        "trafficVolume": "2",
        "designLife": "20",
        "subgradeCBR": "3",
        "slabThickness": "200",
    })


@pytest.fixture
def crcp_params():
    """Heavy corridor with no site hazards."""
    return ParameterSet.from_mapping({
        "trafficVolume": "4",
        "designLife": "40",
        "subgradeCBR": "4",
        "marineEnvironment": "No",
        "utilityLines": "No",
    })


@pytest.fixture
def pcp_params():
    """Light rural road with a short design life."""
    return ParameterSet.from_mapping({"trafficVolume": "1", "designLife": "10"})
