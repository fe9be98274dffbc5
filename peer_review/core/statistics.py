"""Arithmetic aggregation over rating responses.

Only means and discrete distributions are computed here. The confidence score is
a volume heuristic, not a statistical confidence interval: its coefficients are
fixed constants kept for compatibility with previously issued summaries.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

from peer_review.core.errors import InputError
from peer_review.schemas.review import Review, ReviewResponse
from peer_review.schemas.summary import CategoryRating, Sentiment

DEFAULT_SCALE_MAX = 5

CONFIDENCE_SATURATION_REVIEWS = 5
CONFIDENCE_WEIGHT = 0.8
CONFIDENCE_FLOOR = 0.2

POSITIVE_THRESHOLD = 4.0
NEGATIVE_THRESHOLD = 2.5


def round_half_up(value: float, places: int) -> float:
    if not math.isfinite(value):
        raise InputError(
            "Cannot round a non-finite value",
            [{"field": "value", "code": "type", "message": f"Expected a finite number, got {value}"}],
        )
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def _rating_value(r: ReviewResponse) -> int | float | None:
    if r.type != "rating":
        return None
    v = r.value
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        return None
    return v


def compute_overall_rating(responses: Iterable[ReviewResponse]) -> float:
    """Mean of the rating responses to one decimal place; 0.0 when there are none."""
    values = [v for v in map(_rating_value, responses) if v is not None]
    if not values:
        return 0.0
    return round_half_up(sum(values) / len(values), 1)


def category_ratings(
    reviews: Iterable[Review],
    scale_max: int = DEFAULT_SCALE_MAX,
) -> dict[str, CategoryRating]:
    """
    Per-category mean, count and 1-based distribution of rating responses.

    Every rating must be a whole number of at least 1; otherwise InputError lists
    each offending response as "<review id>.<question id>".
    """
    sums: dict[str, float] = {}
    counts: dict[str, int] = {}
    distributions: dict[str, list[int]] = {}
    errors: list[dict] = []

    for review in reviews:
        for r in review.responses:
            v = _rating_value(r)
            if v is None:
                continue

            where = f"{review.id}.{r.question_id}"
            if not math.isfinite(v) or not float(v).is_integer():
                errors.append({"field": where, "code": "integer", "message": f"Rating must be a whole number, got {v}"})
                continue
            if v < 1:
                errors.append({"field": where, "code": "min", "message": f"Rating must be at least 1, got {v}"})
                continue

            dist = distributions.setdefault(r.category, [0] * scale_max)
            sums[r.category] = sums.get(r.category, 0.0) + v
            counts[r.category] = counts.get(r.category, 0) + 1

            bucket = int(v)
            if bucket > len(dist):
                dist.extend([0] * (bucket - len(dist)))
            dist[bucket - 1] += 1

    if errors:
        raise InputError("Ratings cannot be aggregated", errors)

    return {
        category: CategoryRating(
            average=sums[category] / counts[category],
            count=counts[category],
            distribution=distributions[category],
        )
        for category in counts
    }


def confidence_score(review_count: int) -> float:
    raw = (review_count / CONFIDENCE_SATURATION_REVIEWS) * CONFIDENCE_WEIGHT + CONFIDENCE_FLOOR
    return round_half_up(min(1.0, raw), 2)


def derive_sentiment(average: float, strength_count: int, improvement_count: int) -> Sentiment:
    # Check order is the tie-break policy.
    if average >= POSITIVE_THRESHOLD:
        return "positive"
    if average <= NEGATIVE_THRESHOLD:
        return "negative"
    if strength_count > improvement_count:
        return "positive"
    if improvement_count > strength_count:
        return "mixed"
    return "neutral"
