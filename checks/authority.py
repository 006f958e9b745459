"""Authority & Source Quality Scores - credibility of cited sources

Authority (0-100): mean tier authority of every citation
- Tier 1 source = 100, Tier 2 = 60, Tier 3 = 30

Source Quality (0-100): blend of
- Tier distribution (40%)
- Domain diversity (30%)
- Structured data presence (30%) - Wikidata, Crunchbase, schema.org
"""

from typing import Iterable, List

from checks.citations import extract_all_sources
from checks.sources import analyze_source_distribution, resolve_source
from records import QueryRecord

TIER_WEIGHTS = {1: 1.0, 2: 0.6, 3: 0.3}


def calculate_source_authority(sources: List[str]) -> float:
    """Mean tier authority of a flat source list."""
    if not sources:
        return 0.0

    authority_sum = sum(resolve_source(source).authority for source in sources)
    return min(100.0, authority_sum / len(sources))


def calculate_authority_score(records: Iterable[QueryRecord]) -> float:
    """Calculate Authority Score (0-100)."""
    return calculate_source_authority(extract_all_sources(records))


def calculate_source_quality_score(records: Iterable[QueryRecord]) -> float:
    """Calculate Source Quality Score (0-100)."""
    sources = extract_all_sources(records)

    if not sources:
        return 0.0

    analysis = analyze_source_distribution(sources)
    total = len(sources)

    tier_score = (
        analysis.tier1_sources / total * 100 * TIER_WEIGHTS[1] +
        analysis.tier2_sources / total * 100 * TIER_WEIGHTS[2] +
        analysis.tier3_sources / total * 100 * TIER_WEIGHTS[3]
    )
    structured_data_score = 100 if analysis.structured_data_sources > 0 else 0

    return tier_score * 0.4 + analysis.diversity_score * 0.3 + structured_data_score * 0.3
