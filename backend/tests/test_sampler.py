import random

import pytest

from indiaguessr.models.geo import GeoPoint
from indiaguessr.services.geodesy import haversine_distance
from indiaguessr.services.sampler import sample_uniform_point_in_disk

EPSILON_KM = 1e-6


@pytest.mark.parametrize("center", [
    GeoPoint(lat=22.9734, lng=78.6569),
    GeoPoint(lat=-45.0, lng=-179.95),
    GeoPoint(lat=85.0, lng=10.0),
])
@pytest.mark.parametrize("radius_km", [1.0, 70.0, 500.0])
def test_samples_stay_inside_shrunk_disk(center, radius_km):
    rng = random.Random(42)
    for _ in range(10_000):
        point = sample_uniform_point_in_disk(center, radius_km, rng=rng)
        assert haversine_distance(center, point) <= radius_km * 0.95 + EPSILON_KM


def test_samples_are_uniform_by_area():
    # For a uniform disk of radius R, the mean of r^2 is R^2 / 2 and half of
    # the points fall outside R / sqrt(2).
    center = GeoPoint(lat=15.9129, lng=79.7400)
    rng = random.Random(7)
    effective_radius = 70.0 * 0.95

    distances = [
        haversine_distance(center, sample_uniform_point_in_disk(center, 70.0, rng=rng))
        for _ in range(10_000)
    ]

    mean_sq = sum(d * d for d in distances) / len(distances)
    assert mean_sq == pytest.approx(effective_radius ** 2 / 2, rel=0.05)

    outer = sum(1 for d in distances if d > effective_radius / 2 ** 0.5)
    assert 0.47 < outer / len(distances) < 0.53


def test_custom_shrink_factor():
    center = GeoPoint(lat=0.0, lng=0.0)
    rng = random.Random(3)
    for _ in range(1000):
        point = sample_uniform_point_in_disk(center, 100.0, shrink_factor=0.5, rng=rng)
        assert haversine_distance(center, point) <= 50.0 + EPSILON_KM


def test_seeded_generator_is_reproducible():
    center = GeoPoint(lat=11.1271, lng=78.6569)
    first = sample_uniform_point_in_disk(center, 70.0, rng=random.Random(99))
    second = sample_uniform_point_in_disk(center, 70.0, rng=random.Random(99))
    assert first == second
