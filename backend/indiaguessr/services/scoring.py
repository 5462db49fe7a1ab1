from math import floor


def calculate_score(
    distance_km: float,
    is_exact_match: bool,
    max_points: int = 5000,
    points_per_km: float = 8.0
) -> int:
    """
    Calculate score for a division guess.

    Scoring system:
    - Correct division: max_points, whatever the distance
    - Wrong division: max_points minus points_per_km for every km between the
      sampled point and the guessed division's centroid, never below 0

    Args:
        distance_km: Distance from the sampled point to the guessed centroid
        is_exact_match: Whether the guessed name is the true division
        max_points: Maximum possible points
        points_per_km: Points lost per kilometer on a wrong guess

    Returns:
        Score (0 to max_points)
    """
    if is_exact_match:
        return max_points

    raw = max_points - distance_km * points_per_km
    # halves round up
    return max(0, int(floor(raw + 0.5)))
