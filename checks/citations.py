"""Citation Extraction - normalize per-query citation payloads

Platforms return citations in different shapes:
- JSON text of an array (as persisted)
- An already parsed array
- Array entries that are bare URL strings or objects with url/source/title/snippet

Everything is normalized into SourceRef here; scorers only ever see URLs.
A malformed payload drops that record's citations and nothing else.
"""

import json
import logging
from typing import Any, Iterable, List

from records import QueryRecord, SourceRef

logger = logging.getLogger(__name__)


def _citation_url(citation: Any) -> str:
    """url, then source, else empty."""
    for key in ('url', 'source'):
        value = citation.get(key)
        if isinstance(value, str) and value:
            return value
    return ''


def parse_citations(raw: Any) -> List[SourceRef]:
    """Parse one record's citation payload.

    Returns:
        List of SourceRef (empty URLs included, callers filter)

    Raises:
        ValueError: payload is not valid JSON or holds entries that are
            neither strings nor objects
    """
    citations = json.loads(raw) if isinstance(raw, str) else raw

    if not isinstance(citations, list):
        return []

    refs = []
    for citation in citations:
        if isinstance(citation, str):
            refs.append(SourceRef(url=citation))
        elif isinstance(citation, dict):
            title = citation.get('title')
            refs.append(SourceRef(
                url=_citation_url(citation),
                title=title if isinstance(title, str) else None,
            ))
        else:
            raise ValueError(f"Unsupported citation entry: {type(citation).__name__}")

    return refs


def extract_record_sources(record: QueryRecord) -> List[SourceRef]:
    """Normalized citations of a single record, or [] when malformed."""
    if not record.citations:
        return []

    try:
        return parse_citations(record.citations)
    except (ValueError, TypeError) as e:
        # json.JSONDecodeError is a ValueError
        logger.debug(f"Skipping malformed citations on {record.platform} record: {e}")
        return []


def extract_all_sources(records: Iterable[QueryRecord]) -> List[str]:
    """Flat list of citation URLs across records.

    No deduplication: the same URL cited twice counts twice.
    """
    sources: List[str] = []

    for record in records:
        sources.extend(ref.url for ref in extract_record_sources(record))

    return [s for s in sources if len(s) > 0]
