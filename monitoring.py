"""Monitoring Helpers - change detection and source tracking between audits

Pure functions used by scheduled monitoring:
- Compare two audits platform by platform (word-set similarity)
- Aggregate cited domains with the platforms that cite them
- Flag thin, inconsistent or narrowly-sourced AI knowledge
- Compute when the next scheduled audit is due
"""

import calendar
import logging
import re
from datetime import datetime, timedelta
from typing import Dict, List, Optional, Sequence

from checks.citations import extract_record_sources
from checks.sources import extract_domain
from models import (
    ChangeReport,
    MonitoredEntity,
    MonitoringAlert,
    MonitoringReport,
    PlatformChange,
    SourceTracking,
    TrackedSource,
)
from records import AnalyticsError, QueryRecord
from reference_tables import COMPARISON_PLATFORMS

logger = logging.getLogger(__name__)

MONITORING_FREQUENCIES = ("daily", "weekly", "biweekly", "monthly")

MIN_DESCRIPTION_LENGTH = 100
INCONSISTENCY_THRESHOLD = 0.6
MIN_DISTINCT_SOURCES = 3


def calculate_similarity(text1: str, text2: str) -> float:
    """Jaccard similarity of the lower-cased word sets (0-1)."""
    words1 = set(re.split(r"\s+", text1.lower()))
    words2 = set(re.split(r"\s+", text2.lower()))

    union = words1 | words2
    if not union:
        return 1.0
    return len(words1 & words2) / len(union)


def classify_change(similarity: float) -> str:
    if similarity < 0.5:
        return "major"
    elif similarity < 0.8:
        return "moderate"
    return "minor"


def _first_for_platform(records: Sequence[QueryRecord], platform: str) -> Optional[QueryRecord]:
    return next((r for r in records if r.platform == platform), None)


def detect_changes(
    current: Sequence[QueryRecord],
    previous: Optional[Sequence[QueryRecord]],
) -> ChangeReport:
    """Compare the current audit with the previous completed one.

    Only the first record per platform is compared; platforms missing from
    either audit are skipped.
    """
    if previous is None:
        return ChangeReport(is_first_audit=True)

    changes = []

    for platform in COMPARISON_PLATFORMS:
        current_record = _first_for_platform(current, platform)
        previous_record = _first_for_platform(previous, platform)

        if not current_record or not previous_record:
            continue

        current_text = current_record.response_text or ""
        previous_text = previous_record.response_text or ""

        if current_text == previous_text:
            continue

        similarity = calculate_similarity(current_text, previous_text)
        changes.append(PlatformChange(
            platform=platform,
            change_type=classify_change(similarity),
            similarity=similarity,
            previous_length=len(previous_text),
            current_length=len(current_text),
            length_change=len(current_text) - len(previous_text),
        ))

    logger.info(f"Detected {len(changes)} changed platforms")

    return ChangeReport(
        is_first_audit=False,
        changes=changes,
        total_changes=len(changes),
    )


def analyze_sources_for_audit(records: Sequence[QueryRecord]) -> SourceTracking:
    """Cited domains of an audit, most cited first.

    Each entry keeps the first URL/title seen for the domain and the
    platforms that cited it.
    """
    sources: Dict[str, TrackedSource] = {}

    for record in records:
        for ref in extract_record_sources(record):
            if not ref.url:
                continue

            domain = extract_domain(ref.url)
            if domain not in sources:
                sources[domain] = TrackedSource(domain=domain, url=ref.url, title=ref.title)

            source = sources[domain]
            if record.platform not in source.platforms:
                source.platforms.append(record.platform)
            source.count += 1

    sorted_sources = sorted(sources.values(), key=lambda s: s.count, reverse=True)

    return SourceTracking(
        total_sources=len(sorted_sources),
        sources=sorted_sources,
        top_sources=sorted_sources[:10],
    )


def _has_inconsistencies(responses: List[str]) -> bool:
    return any(
        calculate_similarity(r, r2) < INCONSISTENCY_THRESHOLD
        for i, r in enumerate(responses)
        for r2 in responses[i + 1:]
    )


def generate_monitoring_recommendations(
    entity_name: str,
    entity_type: str,
    records: Sequence[QueryRecord],
) -> MonitoringReport:
    """Quick monitoring alerts for an audit (independent of the scored plan)."""
    recommendations = []

    has_description = any(
        r.response_text and len(r.response_text) > MIN_DESCRIPTION_LENGTH
        for r in records
    )
    if not has_description:
        recommendations.append(MonitoringAlert(
            type="missing_information",
            priority="high",
            title="Limited AI Knowledge",
            description=f"AI platforms have limited information about {entity_name}. This suggests a lack of authoritative online presence.",
            actions=[
                "Create or update Wikipedia page",
                "Publish press releases on major news sites",
                "Update LinkedIn profile with comprehensive information",
                "Publish thought leadership content",
            ],
        ))

    if _has_inconsistencies([r.response_text or "" for r in records]):
        recommendations.append(MonitoringAlert(
            type="inconsistency",
            priority="medium",
            title="Inconsistent Information Across Platforms",
            description="Different AI platforms are providing different information, suggesting conflicting sources.",
            actions=[
                "Identify and update outdated sources",
                "Ensure consistent messaging across all platforms",
                "Claim and update official profiles (LinkedIn, company website)",
            ],
        ))

    if analyze_sources_for_audit(records).total_sources < MIN_DISTINCT_SOURCES:
        recommendations.append(MonitoringAlert(
            type="limited_sources",
            priority="medium",
            title="Limited Source Diversity",
            description="AI platforms are drawing from very few sources, making your presence fragile.",
            actions=[
                "Diversify online presence across multiple authoritative platforms",
                "Get featured in industry publications",
                "Participate in podcasts and interviews",
                "Contribute to reputable blogs and forums",
            ],
        ))

    return MonitoringReport(
        total_recommendations=len(recommendations),
        recommendations=recommendations,
        entity=MonitoredEntity(name=entity_name, type=getattr(entity_type, "value", entity_type)),
    )


def _add_month(moment: datetime) -> datetime:
    """Same day next month, clamped to the month's last day."""
    year = moment.year + moment.month // 12
    month = moment.month % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def schedule_next_audit(frequency: str, now: Optional[datetime] = None) -> datetime:
    """When the next monitoring audit is due.

    Raises:
        AnalyticsError: unknown frequency
    """
    now = now or datetime.now()

    if frequency == "daily":
        return now + timedelta(days=1)
    elif frequency == "weekly":
        return now + timedelta(days=7)
    elif frequency == "biweekly":
        return now + timedelta(days=14)
    elif frequency == "monthly":
        return _add_month(now)

    raise AnalyticsError(f"Unknown monitoring frequency: {frequency} (expected one of {', '.join(MONITORING_FREQUENCIES)})")
