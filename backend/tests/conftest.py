import random

import pytest
from fastapi.testclient import TestClient

from indiaguessr.main import create_app
from indiaguessr.models.geo import Division, GeoPoint
from indiaguessr.services.divisions import DivisionCatalog, load_divisions
from indiaguessr.services.engine import GameEngine


@pytest.fixture
def catalog():
    return load_divisions()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def engine(catalog, rng):
    return GameEngine(catalog, rng=rng)


@pytest.fixture
def two_division_catalog():
    """Two divisions roughly 1150 km apart."""
    return DivisionCatalog([
        Division(name="Delhi", centroid=GeoPoint(lat=28.6139, lng=77.2090)),
        Division(name="Mumbai", centroid=GeoPoint(lat=19.0760, lng=72.8777)),
    ])


@pytest.fixture
def client(engine):
    with TestClient(create_app(engine)) as test_client:
        yield test_client
