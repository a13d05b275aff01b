"""
Pytest configuration and shared fixtures for all tests.

This file is automatically loaded by pytest and provides:
  - Reference points from published worked examples
  - A spread of world cities for property-style checks
"""

import pytest

from spherenav.point import LatLon


@pytest.fixture
def lands_end():
    """Land's End, Cornwall (50°03′59″N, 005°42′53″W)."""
    return LatLon.parse("50°03′59″N", "005°42′53″W")


@pytest.fixture
def john_o_groats():
    """John o'Groats, Caithness (58°38′38″N, 003°04′12″W)."""
    return LatLon.parse("58°38′38″N", "003°04′12″W")


@pytest.fixture
def cambridge():
    return LatLon(52.205, 0.119)


@pytest.fixture
def paris():
    return LatLon(48.857, 2.351)


@pytest.fixture
def dover():
    return LatLon(51.127, 1.338)


@pytest.fixture
def calais():
    return LatLon(50.964, 1.853)


@pytest.fixture
def world_cities():
    """
    A spread of points across hemispheres, the antimeridian and high latitudes.

    Used by property-style tests that loop over every pair.
    """
    return [
        LatLon(51.5074, -0.1278),  # London
        LatLon(40.7128, -74.0060),  # New York
        LatLon(-33.8688, 151.2093),  # Sydney
        LatLon(35.6762, 139.6503),  # Tokyo
        LatLon(-54.8019, -68.3030),  # Ushuaia
        LatLon(64.1466, -21.9426),  # Reykjavik
        LatLon(-17.7134, 178.0650),  # Fiji
        LatLon(1.3521, 103.8198),  # Singapore
    ]

