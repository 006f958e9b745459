"""Audit Analyzer - single entry point of the analytics engine

Takes every query record of one audit and produces the full AnalyticsResult:
1. Six dimension scores
2. Weighted overall score
3. Industry benchmark
4. SWOT insights
5. Prioritized recommendations
6. Source distribution analysis
7. Platform comparison

Pure and synchronous: no I/O, no shared state. Errors from any scorer
propagate to the caller; only malformed citation payloads are tolerated.
"""

import logging
from typing import Iterable

from checks.authority import calculate_authority_score, calculate_source_quality_score
from checks.citations import extract_all_sources
from checks.completeness import calculate_completeness_score
from checks.optimization import calculate_optimization_score
from checks.sentiment import calculate_sentiment_score
from checks.sources import analyze_source_distribution
from checks.visibility import calculate_visibility_score
from insights import generate_insights, generate_recommendations
from models import AnalyticsResult, DimensionScores
from platforms import generate_platform_comparison
from records import QueryRecord
from scoring import calculate_overall_score, get_benchmark

logger = logging.getLogger(__name__)


def calculate_dimension_scores(records: Iterable[QueryRecord], entity_type: str) -> DimensionScores:
    """Run all six dimension scorers."""
    records = list(records)

    return DimensionScores(
        visibility=calculate_visibility_score(records),
        authority=calculate_authority_score(records),
        sentiment=calculate_sentiment_score(records),
        completeness=calculate_completeness_score(records, entity_type),
        source_quality=calculate_source_quality_score(records),
        optimization=calculate_optimization_score(records),
    )


def analyze_audit(
    records: Iterable[QueryRecord],
    entity_type: str,
    industry: str,
) -> AnalyticsResult:
    """Analyze one audit.

    Args:
        records: Query records of the audit (never modified)
        entity_type: 'person' or 'company'
        industry: Free-text industry, matched case-insensitively against
            the benchmark table

    Returns:
        AnalyticsResult

    Raises:
        UnknownEntityTypeError: entity_type is not person/company
    """
    records = list(records)

    scores = calculate_dimension_scores(records, entity_type)
    overall_score = calculate_overall_score(scores)

    result = AnalyticsResult(
        overall_score=overall_score,
        scores=scores,
        benchmark=get_benchmark(industry, overall_score),
        insights=generate_insights(scores),
        recommendations=generate_recommendations(scores, entity_type),
        source_analysis=analyze_source_distribution(extract_all_sources(records)),
        platform_comparison=generate_platform_comparison(records),
    )

    logger.info(
        f"Analyzed {len(records)} records: overall={overall_score:.1f}, "
        f"recommendations={len(result.recommendations)}, "
        f"platforms={len(result.platform_comparison)}"
    )
    return result


analyze = analyze_audit
