"""Platform Comparison - per-platform breakdown of an audit

Re-runs the text scorers on each platform's records. Platforms without any
record are left out rather than reported as zero rows. Web-search variants
(e.g. chatgpt_web) are not folded into their base platform.
"""

import logging
from typing import List, Sequence

from checks.citations import extract_all_sources
from checks.completeness import calculate_completeness_score
from checks.sentiment import calculate_sentiment_score
from checks.visibility import calculate_visibility_score
from models import PlatformComparison, PlatformReport
from records import EntityType, QueryRecord, QueryStatus
from reference_tables import COMPARISON_PLATFORMS
from scoring import normalize_sentiment

logger = logging.getLogger(__name__)


def compare_platform(platform: str, records: Sequence[QueryRecord]) -> PlatformComparison:
    visibility = calculate_visibility_score(records)
    sentiment = calculate_sentiment_score(records)
    # Always scored as a company, whatever the audited entity is
    completeness = calculate_completeness_score(records, EntityType.COMPANY.value)
    source_count = len(extract_all_sources(records))

    response_quality = (visibility + normalize_sentiment(sentiment) + completeness) / 3

    return PlatformComparison(
        platform=platform,
        visibility=visibility,
        sentiment=sentiment,
        completeness=completeness,
        source_count=source_count,
        response_quality=response_quality,
    )


def _records_by_platform(records: Sequence[QueryRecord]):
    for platform in COMPARISON_PLATFORMS:
        platform_records = [r for r in records if r.platform == platform]
        if platform_records:
            yield platform, platform_records


def generate_platform_comparison(records: Sequence[QueryRecord]) -> List[PlatformComparison]:
    """One comparison row per platform that has at least one record."""
    comparison = []

    for platform, platform_records in _records_by_platform(records):
        comparison.append(compare_platform(platform, platform_records))

    logger.debug(f"Compared {len(comparison)} platforms")
    return comparison


def generate_platform_report(records: Sequence[QueryRecord]) -> List[PlatformReport]:
    """Comparison rows with query counts, success rate and mean response length."""
    report = []

    for platform, platform_records in _records_by_platform(records):
        completed = [r for r in platform_records if r.status == QueryStatus.COMPLETED.value]
        total_length = sum(len(r.response_text or '') for r in completed)

        report.append(PlatformReport(
            **compare_platform(platform, platform_records).model_dump(),
            query_count=len(platform_records),
            completed_count=len(completed),
            avg_response_length=total_length / (len(completed) or 1),
            success_rate=len(completed) / len(platform_records) * 100,
        ))

    return report
