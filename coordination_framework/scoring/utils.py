"""
Shared scoring helpers
coordination_framework/scoring/utils.py

Set-similarity and small statistics helpers used by every calculator.
All helpers guard their denominators and never raise on empty input.
"""

import math
from typing import Iterable, Sequence


def clamp(value: float, min_val: float = 0.0, max_val: float = 1.0) -> float:
    """Clamp value to range [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def mean(values: Sequence[float], default: float = 0.0) -> float:
    """Arithmetic mean; ``default`` for an empty sequence."""
    if not values:
        return default
    return sum(values) / len(values)


def population_variance(values: Sequence[float]) -> float:
    """
    Population variance.

    Formula: Σ(value_i − mean)² / n
    Returns 0.0 for an empty sequence.
    """
    if not values:
        return 0.0
    mu = mean(values)
    return sum((v - mu) ** 2 for v in values) / len(values)


def weighted_mean(values: Sequence[float], weights: Sequence[float]) -> float:
    """
    Calculate weighted mean.

    Formula: Σ(value_i × weight_i) / Σ(weight_i)
    Returns 0.0 if all weights are zero.
    """
    if len(values) != len(weights):
        raise ValueError("values and weights must have same length")

    total_weight = sum(weights)
    if total_weight == 0:
        return 0.0

    return sum(v * w for v, w in zip(values, weights)) / total_weight


def pearson_correlation(xs: Sequence[float], ys: Sequence[float]) -> float:
    """
    Pearson correlation coefficient in [-1, 1].

    Returns 0.0 when the sequences differ in length, are empty, or either
    has zero variance.
    """
    if len(xs) != len(ys) or not xs:
        return 0.0

    mean_x = mean(xs)
    mean_y = mean(ys)

    numerator = 0.0
    sum_sq_x = 0.0
    sum_sq_y = 0.0
    for x, y in zip(xs, ys):
        dx = x - mean_x
        dy = y - mean_y
        numerator += dx * dy
        sum_sq_x += dx * dx
        sum_sq_y += dy * dy

    denominator = math.sqrt(sum_sq_x * sum_sq_y)
    if denominator == 0:
        return 0.0
    return numerator / denominator


def jaccard_similarity(a: Iterable[str], b: Iterable[str]) -> float:
    """
    |A ∩ B| / |A ∪ B|.

    Identical non-empty sets give 1.0, disjoint sets 0.0. If either set is
    empty the similarity is 0.0.
    """
    set_a, set_b = set(a), set(b)
    if not set_a or not set_b:
        return 0.0
    return len(set_a & set_b) / len(set_a | set_b)


def tag_prefix(tag: str) -> str:
    """Category prefix of a snake_case tag ('career_growth' → 'career')."""
    return tag.split("_")[0]
