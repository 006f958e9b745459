# ABOUTME: Query record types fed into the analytics engine
# ABOUTME: Defines platforms, statuses, normalized citations and analytics errors

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union


class Platform(str, Enum):
    """AI platforms a query can be executed against."""
    CHATGPT = "chatgpt"
    PERPLEXITY = "perplexity"
    GEMINI = "gemini"
    CLAUDE = "claude"
    GROK = "grok"
    # Web-search-augmented variants
    CHATGPT_WEB = "chatgpt_web"
    GEMINI_WEB = "gemini_web"
    CLAUDE_WEB = "claude_web"
    GROK_WEB = "grok_web"


class QueryStatus(str, Enum):
    """Lifecycle of a single query execution."""
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


class EntityType(str, Enum):
    """Kind of entity being audited."""
    PERSON = "person"
    COMPANY = "company"


CitationPayload = Union[str, list, None]


@dataclass(frozen=True)
class QueryRecord:
    """One executed platform/query pair of an audit.

    `citations` is untrusted: either JSON text of an array or an already
    parsed array of URL strings / citation objects.
    """
    platform: str
    query_text: str
    response_text: Optional[str] = None
    citations: CitationPayload = None
    status: str = QueryStatus.COMPLETED.value
    query_type: str = "llm"

    @property
    def has_response(self) -> bool:
        """Completed with a non-empty response."""
        return self.status == QueryStatus.COMPLETED.value and bool(self.response_text)

    @classmethod
    def from_dict(cls, data: Any) -> "QueryRecord":
        """Build a record from a stored row or JSON object (camelCase or snake_case keys).

        Raises:
            InvalidRecordError: not an object, missing/unknown platform or
                status, or a field of the wrong type
        """
        if not isinstance(data, dict):
            raise InvalidRecordError(f"Record must be an object, got {type(data).__name__}")

        platform = data.get("platform")
        query_text = data.get("queryText", data.get("query_text"))
        response_text = data.get("responseText", data.get("response_text"))
        citations = data.get("citations")

        if not platform:
            raise InvalidRecordError("Record is missing 'platform'")
        if not isinstance(platform, str):
            raise InvalidRecordError(f"'platform' must be a string, got {type(platform).__name__}")
        if platform not in {p.value for p in Platform}:
            raise InvalidRecordError(f"Unknown platform: {platform}")

        if query_text is None:
            raise InvalidRecordError(f"Record for {platform} is missing 'queryText'")
        if not isinstance(query_text, str):
            raise InvalidRecordError(f"Record for {platform}: 'queryText' must be a string")
        if response_text is not None and not isinstance(response_text, str):
            raise InvalidRecordError(f"Record for {platform}: 'responseText' must be a string")
        if citations is not None and not isinstance(citations, (str, list)):
            raise InvalidRecordError(f"Record for {platform}: 'citations' must be JSON text or a list")

        status = str(data.get("status") or QueryStatus.COMPLETED.value)
        if status not in {s.value for s in QueryStatus}:
            raise InvalidRecordError(f"Unknown status: {status}")

        return cls(
            platform=platform,
            query_text=query_text,
            response_text=response_text,
            citations=citations,
            status=status,
            query_type=data.get("queryType", data.get("query_type")) or "llm",
        )


@dataclass(frozen=True)
class SourceRef:
    """Citation normalized at the ingestion boundary."""
    url: str
    title: Optional[str] = None


@dataclass(frozen=True)
class SourceReference:
    """Citation resolved to a domain and credibility tier."""
    domain: str
    tier: int
    authority: int


class AnalyticsError(Exception):
    """Base analytics error."""
    pass


class InvalidRecordError(AnalyticsError):
    """Query record payload could not be ingested."""
    pass


class UnknownEntityTypeError(AnalyticsError):
    """Entity type is neither person nor company."""
    def __init__(self, entity_type: str):
        super().__init__(f"Unknown entity type: {entity_type!r} (expected 'person' or 'company')")
        self.entity_type = entity_type
