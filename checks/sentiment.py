"""Sentiment Score - tone and framing of AI responses (-100 to +100)

Keyword based: every whole-word positive hit is +20, every negative hit is
-20, clamped per response, then averaged across completed responses.
"""

import re
from typing import Dict, Iterable, List, Pattern

from records import QueryRecord
from reference_tables import NEGATIVE_KEYWORDS, POSITIVE_KEYWORDS

POINTS_PER_KEYWORD = 20


def _compile_keywords(keywords: Iterable[str]) -> List[Pattern]:
    # ASCII word boundaries: accented letters do not join a keyword
    return [re.compile(rf'\b{re.escape(k)}\b', re.IGNORECASE | re.ASCII) for k in keywords]


_POSITIVE_PATTERNS = _compile_keywords(POSITIVE_KEYWORDS)
_NEGATIVE_PATTERNS = _compile_keywords(NEGATIVE_KEYWORDS)


def count_keyword_hits(text: str) -> Dict[str, int]:
    """Count positive and negative keyword occurrences in a response."""
    return {
        'positive': sum(len(p.findall(text)) for p in _POSITIVE_PATTERNS),
        'negative': sum(len(p.findall(text)) for p in _NEGATIVE_PATTERNS),
    }


def score_response_sentiment(response_text: str) -> float:
    hits = count_keyword_hits(response_text)
    net_sentiment = hits['positive'] - hits['negative']
    return float(max(-100, min(100, net_sentiment * POINTS_PER_KEYWORD)))


def calculate_sentiment_score(records: Iterable[QueryRecord]) -> float:
    """Calculate Sentiment Score (-100 to +100), 0 when nothing qualifies."""
    sentiment_sum = 0.0
    count = 0

    for record in records:
        if not record.has_response:
            continue

        sentiment_sum += score_response_sentiment(record.response_text)
        count += 1

    return sentiment_sum / count if count > 0 else 0.0
