"""Source Analysis - domain tiers and citation distribution

Classifies cited domains into credibility tiers and measures how the
citations of an audit are spread across domains:
- Tier 1 (authority 100): major news, reference, academic
- Tier 2 (authority 60): trade press, professional networks, business data
- Tier 3 (authority 30): everything else
- Diversity: normalized Shannon entropy of the domain distribution (0-100)
"""

import math
from collections import Counter
from typing import List, Sequence
from urllib.parse import urlparse

from models import SourceAnalysis, TopDomain
from records import SourceReference
from reference_tables import (
    STRUCTURED_DATA_DOMAINS,
    TIER1_DOMAINS,
    TIER2_DOMAINS,
    TIER_AUTHORITY,
)

TOP_DOMAINS_LIMIT = 10


def extract_domain(url: str) -> str:
    """Lower-cased hostname without a leading www.

    Falls back to the raw string when no hostname can be parsed.
    """
    try:
        hostname = urlparse(url).hostname
    except ValueError:
        return url

    if not hostname:
        return url

    if hostname.startswith('www.'):
        hostname = hostname[4:]
    return hostname


def classify_source_tier(
    domain: str,
    tier1_domains: Sequence[str] = TIER1_DOMAINS,
    tier2_domains: Sequence[str] = TIER2_DOMAINS,
) -> int:
    """Tier 1, 2 or 3 by substring match against the tier lists."""
    if any(d in domain for d in tier1_domains):
        return 1
    if any(d in domain for d in tier2_domains):
        return 2
    return 3


def authority_for_tier(tier: int) -> int:
    return TIER_AUTHORITY[tier]


def resolve_source(url: str) -> SourceReference:
    domain = extract_domain(url)
    tier = classify_source_tier(domain)
    return SourceReference(domain=domain, tier=tier, authority=authority_for_tier(tier))


def is_structured_data_domain(domain: str) -> bool:
    return any(d in domain for d in STRUCTURED_DATA_DOMAINS)


def calculate_diversity_score(domain_counts: Counter) -> float:
    """Normalized Shannon entropy of domain occurrences (0-100).

    A single distinct domain has zero maximum entropy and scores 0.
    """
    total = sum(domain_counts.values())
    if total == 0 or len(domain_counts) < 2:
        return 0.0

    # Uniform distribution is maximum entropy by definition
    if len(set(domain_counts.values())) == 1:
        return 100.0

    entropy = 0.0
    for count in domain_counts.values():
        p = count / total
        entropy -= p * math.log2(p)

    max_entropy = math.log2(len(domain_counts))
    return min(100.0, (entropy / max_entropy) * 100)


def analyze_source_distribution(sources: List[str]) -> SourceAnalysis:
    """Tier counts, structured data count, diversity and top domains.

    Args:
        sources: Flat list of citation URLs (see checks.citations)

    Returns:
        SourceAnalysis, zero-valued when there are no sources
    """
    if not sources:
        return SourceAnalysis()

    domain_counts: Counter = Counter()
    tier_counts = {1: 0, 2: 0, 3: 0}
    structured = 0

    for source in sources:
        ref = resolve_source(source)
        domain_counts[ref.domain] += 1
        tier_counts[ref.tier] += 1

        if is_structured_data_domain(ref.domain):
            structured += 1

    # Counter preserves first-seen order and sorted() is stable,
    # so equal counts keep the order domains were first cited in.
    ranked = sorted(domain_counts.items(), key=lambda item: item[1], reverse=True)
    top_domains = []
    for domain, count in ranked[:TOP_DOMAINS_LIMIT]:
        tier = classify_source_tier(domain)
        top_domains.append(TopDomain(
            domain=domain,
            count=count,
            tier=tier,
            authority=authority_for_tier(tier),
        ))

    return SourceAnalysis(
        total_sources=len(sources),
        tier1_sources=tier_counts[1],
        tier2_sources=tier_counts[2],
        tier3_sources=tier_counts[3],
        structured_data_sources=structured,
        top_domains=top_domains,
        diversity_score=calculate_diversity_score(domain_counts),
    )
