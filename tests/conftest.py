"""
Shared fixtures: a small in-memory port catalog.
"""

import pytest

from ports_db import build_catalog


@pytest.fixture
def dutch_catalog():
    return build_catalog([
        {"id": "1", "name": "Rotterdam", "country": "Netherlands", "lat": 51.95, "lng": 4.14},
        {"id": "2", "name": "Amsterdam", "country": "Netherlands", "lat": 52.37, "lng": 4.90},
        {"id": "3", "name": "Tokyo", "country": "Japan", "lat": 35.68, "lng": 139.76},
    ])


@pytest.fixture
def catalog():
    return build_catalog([
        {"id": "1", "name": "Rotterdam", "country": "Netherlands", "lat": 51.95, "lng": 4.14},
        {"id": "2", "name": "Amsterdam", "country": "Netherlands", "lat": 52.37, "lng": 4.90},
        {"id": "3", "name": "Tokyo", "country": "Japan", "lat": 35.68, "lng": 139.76},
        {"id": "4", "name": "Yokohama", "country": " japan ", "lat": 35.44, "lng": 139.64},
        {"id": "5", "name": "Victoria", "country": "Canada", "lat": 48.42, "lng": -123.37},
        {"id": "6", "name": "Victoria", "country": "Seychelles", "lat": -4.62, "lng": 55.45},
        {"id": "7", "name": "Ghost Port", "country": "Atlantis", "lat": None, "lng": "n/a"},
        {"id": "8", "name": "", "country": "Netherlands", "lat": 53.0, "lng": 5.0},
        {"id": "9", "name": "Nowhere", "country": "  ", "lat": 10.0, "lng": 10.0},
        {"id": "10", "name": "Århus", "country": "Denmark", "lat": 56.15, "lng": 10.22},
        {"id": "11", "name": "Esbjerg", "country": "denmark", "lat": 55.47, "lng": 8.45},
    ])
