# foodswipe/services/scoring_service.py

import math
from typing import Dict, Any, List, Sequence

from foodswipe.models.request_models import UserLocation
from foodswipe.models.response_models import RestaurantRecord
from foodswipe.services.geo_service import distance_km

# ---------------- Weights ---------------- #

WEIGHTS = {
    "net_like": 0.2,
    "like_ratio": 0.1,
    "avg_price": 0.3,   # applied as (1 - z)
    "distance": 0.4,    # applied as (1 - z)
}

RECOMMENDATION_LIMIT = 100


def _or_zero(value) -> float:
    return 0.0 if value is None else value


def standardize(values: Sequence[float]) -> List[float]:
    """
    Population Z-scores of `values`.
    A column with zero variance carries no ranking signal, so it maps to zeros.
    """
    n = len(values)
    if n == 0:
        return []

    mean = sum(values) / n
    variance = sum((v - mean) ** 2 for v in values) / n
    std = math.sqrt(variance)

    # constant columns can leave a rounding residue in std, so compare the values too
    if std == 0 or min(values) == max(values):
        return [0.0] * n

    return [(v - mean) / std for v in values]


def extract_features(restaurant: Dict[str, Any], user_location: UserLocation) -> Dict[str, float]:
    """Raw feature vector for one restaurant, missing fields read as 0."""
    record = RestaurantRecord.model_validate(restaurant)
    return {
        "distance": distance_km(
            user_location.latitude,
            user_location.longitude,
            _or_zero(record.lat),
            _or_zero(record.lng),
        ),
        "net_like": _or_zero(record.netLike),
        "like_ratio": _or_zero(record.likeRatio),
        "avg_price": _or_zero(record.avgPrice),
    }


def compute_score(std_net_like, std_like_ratio, std_avg_price, std_distance) -> float:
    return (
        WEIGHTS["net_like"] * std_net_like
        + WEIGHTS["like_ratio"] * std_like_ratio
        + WEIGHTS["avg_price"] * (1 - std_avg_price)
        + WEIGHTS["distance"] * (1 - std_distance)
    )


def recommend(
    restaurants: Sequence[Dict[str, Any]],
    user_location: UserLocation,
    limit: int = RECOMMENDATION_LIMIT,
) -> List[Dict[str, Any]]:
    """
    Rank restaurants for a user location.

    Each output is a copy of the input record with `score` and `distance`
    (km) added, sorted by score descending and cut to `limit` entries.
    Input records are never modified.
    """
    if not restaurants:
        return []

    features = [extract_features(r, user_location) for r in restaurants]

    std_net_like = standardize([f["net_like"] for f in features])
    std_like_ratio = standardize([f["like_ratio"] for f in features])
    std_avg_price = standardize([f["avg_price"] for f in features])
    std_distance = standardize([f["distance"] for f in features])

    scored: List[Dict[str, Any]] = []
    for i, restaurant in enumerate(restaurants):
        scored.append(
            {
                **restaurant,
                "score": compute_score(
                    std_net_like[i],
                    std_like_ratio[i],
                    std_avg_price[i],
                    std_distance[i],
                ),
                "distance": features[i]["distance"],
            }
        )

    # sorted() is stable, so equal scores keep their input order
    scored = sorted(scored, key=lambda r: r["score"], reverse=True)

    return scored[:limit]
