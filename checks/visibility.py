"""Visibility Score - how prominently the entity appears in AI responses

Per completed response:
- Position (40%): earlier occurrence of the query text = higher score
- Length (40%): more detailed = higher score, full marks at 500 characters
- Substantive info bonus (+20): founded / ceo / company / product / service

Responses of 50 characters or fewer are treated as "not mentioned" and
score 0, but still count towards the average.
"""

import re
from typing import Iterable

from records import QueryRecord
from reference_tables import SUBSTANTIVE_INFO_PATTERN

MIN_MENTION_LENGTH = 50
REFERENCE_LENGTH = 500
KEY_INFO_BONUS = 20

_KEY_INFO_RE = re.compile(SUBSTANTIVE_INFO_PATTERN, re.IGNORECASE)


def score_response_visibility(query_text: str, response_text: str) -> float:
    """Visibility of a single response (0-100)."""
    response = response_text.lower()

    if len(response) <= MIN_MENTION_LENGTH:
        return 0.0

    first_mention = response.find(query_text.lower())
    if first_mention == -1:
        position_score = 0.0
    else:
        position_score = max(0.0, 100 - (first_mention / len(response)) * 100)

    length_score = min(100.0, (len(response) / REFERENCE_LENGTH) * 100)
    key_info_bonus = KEY_INFO_BONUS if _KEY_INFO_RE.search(response) else 0

    # 0.8 from position and length, bonus on top
    return position_score * 0.4 + length_score * 0.4 + key_info_bonus


def calculate_visibility_score(records: Iterable[QueryRecord]) -> float:
    """Calculate Visibility Score (0-100)."""
    total_score = 0.0
    count = 0

    for record in records:
        if not record.has_response:
            continue

        total_score += score_response_visibility(record.query_text, record.response_text)
        count += 1

    return min(100.0, total_score / count) if count > 0 else 0.0
