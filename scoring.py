"""Scoring Module - composite AI presence score and industry benchmark

Overall score is a weighted blend of the six dimensions:
- Visibility 25%
- Authority 20%
- Sentiment 15% (rescaled from -100..+100 to 0..100)
- Completeness 15%
- Source Quality 15%
- Optimization 10%

Benchmark percentile is a linear heuristic, NOT a statistical percentile:
scoring exactly the industry average lands at the 50th, clamped to 1-99.
"""

import math

from models import Benchmark, DimensionScores
from reference_tables import DIMENSION_WEIGHTS, INDUSTRY_BENCHMARKS


def normalize_sentiment(sentiment: float) -> float:
    """Map sentiment from -100..+100 onto 0..100."""
    return (sentiment + 100) / 2


def calculate_overall_score(scores: DimensionScores) -> float:
    """Weighted composite of the six dimension scores (0-100)."""
    return (
        scores.visibility * DIMENSION_WEIGHTS['visibility'] +
        scores.authority * DIMENSION_WEIGHTS['authority'] +
        normalize_sentiment(scores.sentiment) * DIMENSION_WEIGHTS['sentiment'] +
        scores.completeness * DIMENSION_WEIGHTS['completeness'] +
        scores.source_quality * DIMENSION_WEIGHTS['source_quality'] +
        scores.optimization * DIMENSION_WEIGHTS['optimization']
    )


def get_industry_average(industry: str) -> float:
    """Expected average score for an industry, default bucket otherwise."""
    return INDUSTRY_BENCHMARKS.get((industry or '').lower()) or INDUSTRY_BENCHMARKS['default']


def calculate_percentile(score: float, average_score: float) -> int:
    """Linear percentile estimate, clamped to 1-99."""
    # Round half up, matching how stored results were produced
    percentile = math.floor((score / average_score) * 50 + 0.5)
    return min(99, max(1, percentile))


def get_benchmark(industry: str, score: float) -> Benchmark:
    average_score = get_industry_average(industry)
    return Benchmark(
        industry=industry or 'default',
        average_score=average_score,
        percentile=calculate_percentile(score, average_score),
    )


def calculate_grade(percentile: int) -> str:
    """Letter grade from the benchmark percentile.

    Percentile 50 is the industry average, so each cut-off is a multiple
    of the average score:
    - A+ (90+): 1.8x the average or better
    - A (75-89): 1.5x
    - B (50-74): at or above average
    - C (25-49): at least half the average
    - D (10-24): at least a fifth
    - F (<10): barely represented
    """
    if percentile >= 90:
        return 'A+'
    elif percentile >= 75:
        return 'A'
    elif percentile >= 50:
        return 'B'
    elif percentile >= 25:
        return 'C'
    elif percentile >= 10:
        return 'D'
    else:
        return 'F'


def calculate_presence_band(percentile: int) -> str:
    """Position against the industry, by benchmark quartile."""
    if percentile >= 75:
        return 'Leading'
    elif percentile >= 50:
        return 'Above average'
    elif percentile >= 25:
        return 'Below average'
    else:
        return 'Critical'
