"""Optimization Score - how well the entity is set up for AI answers

Additive checklist over cited sources and response text:
- Wikipedia presence (25 points)
- Wikidata / knowledge base entry (20 points)
- Structured profiles: Crunchbase, LinkedIn, schema.org (20 points)
- Major media coverage (20 points)
- Fresh content: recent year or "recently/latest/current" (15 points)
"""

import re
from typing import Dict, List, Sequence

from checks.citations import extract_all_sources
from records import QueryRecord
from reference_tables import (
    FRESHNESS_PATTERN,
    KNOWLEDGE_BASE_DOMAIN,
    MAJOR_MEDIA_DOMAINS,
    OPTIMIZATION_POINTS,
    STRUCTURED_PROFILE_DOMAINS,
    WIKIPEDIA_DOMAIN,
)

_FRESHNESS_RE = re.compile(FRESHNESS_PATTERN, re.IGNORECASE)


def _cites_any(sources: List[str], domains: Sequence[str]) -> bool:
    return any(domain in source for source in sources for domain in domains)


def detect_optimization_signals(records: Sequence[QueryRecord]) -> Dict[str, bool]:
    """Which optimization signals an audit shows."""
    sources = extract_all_sources(records)

    return {
        'wikipedia': _cites_any(sources, (WIKIPEDIA_DOMAIN,)),
        'knowledge_base': _cites_any(sources, (KNOWLEDGE_BASE_DOMAIN,)),
        'structured_data': _cites_any(sources, STRUCTURED_PROFILE_DOMAINS),
        'major_media': _cites_any(sources, MAJOR_MEDIA_DOMAINS),
        'fresh_content': any(
            record.has_response and _FRESHNESS_RE.search(record.response_text)
            for record in records
        ),
    }


def calculate_optimization_score(records: Sequence[QueryRecord]) -> float:
    """Calculate Optimization Score (0-100)."""
    signals = detect_optimization_signals(records)
    score = sum(OPTIMIZATION_POINTS[name] for name, present in signals.items() if present)
    return float(max(0, min(100, score)))
