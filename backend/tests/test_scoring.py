import pytest

from indiaguessr.services.scoring import calculate_score


@pytest.mark.parametrize("distance", [0.0, 12.3, 100.0, 700.0, 5000.0])
def test_exact_match_always_scores_max(distance):
    assert calculate_score(distance, True) == 5000


@pytest.mark.parametrize("distance,expected", [
    (0.0, 5000),
    (100.0, 4200),
    (312.4, 2501),
    (624.9, 1),
    (625.0, 0),
    (700.0, 0),
])
def test_wrong_guess_loses_eight_points_per_km(distance, expected):
    assert calculate_score(distance, False) == expected


def test_halves_round_up():
    # 5000 - 8 * 0.1875 == 4998.5
    assert calculate_score(0.1875, False) == 4999


def test_custom_scale():
    assert calculate_score(10.0, False, max_points=1000, points_per_km=50) == 500
    assert calculate_score(10.0, True, max_points=1000, points_per_km=50) == 1000
