"""Completeness Score - information gaps in AI responses (0-100)

Checks each response for the literal field names of an entity-type specific
checklist. Required fields carry 70% of the score, optional fields 30%.
"""

from typing import Iterable, Sequence

from records import EntityType, QueryRecord, UnknownEntityTypeError
from reference_tables import OPTIONAL_FIELDS, REQUIRED_FIELDS

REQUIRED_WEIGHT = 70
OPTIONAL_WEIGHT = 30


def _fields_for(entity_type: str):
    entity_type = getattr(entity_type, 'value', entity_type)
    if entity_type not in {e.value for e in EntityType}:
        raise UnknownEntityTypeError(entity_type)
    return REQUIRED_FIELDS[entity_type], OPTIONAL_FIELDS[entity_type]


def _count_fields(response: str, fields: Sequence[str]) -> int:
    return sum(1 for field in fields if field in response)


def score_response_completeness(response_text: str, entity_type: str) -> float:
    required_fields, optional_fields = _fields_for(entity_type)
    response = response_text.lower()

    return (
        _count_fields(response, required_fields) / len(required_fields) * REQUIRED_WEIGHT +
        _count_fields(response, optional_fields) / len(optional_fields) * OPTIONAL_WEIGHT
    )


def calculate_completeness_score(records: Iterable[QueryRecord], entity_type: str) -> float:
    """Calculate Completeness Score (0-100).

    Args:
        records: Query records of the audit
        entity_type: 'person' or 'company'

    Raises:
        UnknownEntityTypeError: entity_type is not person/company
    """
    # Validate up front so an empty audit still rejects a bad entity type
    _fields_for(entity_type)

    total_score = 0.0
    count = 0

    for record in records:
        if not record.has_response:
            continue

        total_score += score_response_completeness(record.response_text, entity_type)
        count += 1

    return total_score / count if count > 0 else 0.0
