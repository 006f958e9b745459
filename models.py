"""Analytics Result Models

Pydantic models for everything the engine produces. Attributes are
snake_case; JSON output uses camelCase aliases (overallScore, sourceAnalysis,
specificActions, ...) so stored results and API consumers share one shape.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Priority = Literal["critical", "high", "medium", "low"]
Effort = Literal["low", "medium", "high"]


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> dict:
        """Plain nested data for JSON serialization."""
        return self.model_dump(by_alias=True)


class DimensionScores(CamelModel):
    visibility: float = 0.0
    authority: float = 0.0
    sentiment: float = 0.0  # -100..+100
    completeness: float = 0.0
    source_quality: float = 0.0
    optimization: float = 0.0


class Benchmark(CamelModel):
    industry: str
    average_score: float
    percentile: int


class Insights(CamelModel):
    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)
    opportunities: List[str] = Field(default_factory=list)
    threats: List[str] = Field(default_factory=list)


class Recommendation(CamelModel):
    priority: Priority
    category: str
    title: str
    description: str
    impact: str
    effort: Effort
    timeline: str
    specific_actions: List[str] = Field(default_factory=list)


class TopDomain(CamelModel):
    domain: str
    count: int
    tier: Literal[1, 2, 3]
    authority: int


class SourceAnalysis(CamelModel):
    total_sources: int = 0
    tier1_sources: int = 0  # Wikipedia, major news, academic
    tier2_sources: int = 0  # Industry pubs, professional networks
    tier3_sources: int = 0  # Press releases, minor sites
    structured_data_sources: int = 0  # Wikidata, Crunchbase, schema.org
    top_domains: List[TopDomain] = Field(default_factory=list)
    diversity_score: float = 0.0


class PlatformComparison(CamelModel):
    platform: str
    visibility: float
    sentiment: float
    completeness: float
    source_count: int
    response_quality: float


class PlatformReport(PlatformComparison):
    """Comparison row plus query execution stats."""
    query_count: int
    completed_count: int
    avg_response_length: float  # completed queries only
    success_rate: float  # percent completed


class AnalyticsResult(CamelModel):
    overall_score: float
    scores: DimensionScores
    benchmark: Benchmark
    insights: Insights
    recommendations: List[Recommendation] = Field(default_factory=list)
    source_analysis: SourceAnalysis
    platform_comparison: List[PlatformComparison] = Field(default_factory=list)


# ==================== Monitoring ====================

ChangeType = Literal["major", "moderate", "minor"]


class PlatformChange(CamelModel):
    platform: str
    change_type: ChangeType
    similarity: float  # 0-1 word overlap
    previous_length: int
    current_length: int
    length_change: int


class ChangeReport(CamelModel):
    is_first_audit: bool
    changes: List[PlatformChange] = Field(default_factory=list)
    total_changes: int = 0


class TrackedSource(CamelModel):
    domain: str
    url: str  # first URL seen for the domain
    title: Optional[str] = None
    platforms: List[str] = Field(default_factory=list)
    count: int = 0


class SourceTracking(CamelModel):
    total_sources: int = 0  # distinct domains
    sources: List[TrackedSource] = Field(default_factory=list)
    top_sources: List[TrackedSource] = Field(default_factory=list)


class MonitoringAlert(CamelModel):
    type: Literal["missing_information", "inconsistency", "limited_sources"]
    priority: Priority
    title: str
    description: str
    actions: List[str] = Field(default_factory=list)


class MonitoredEntity(CamelModel):
    name: str
    type: str


class MonitoringReport(CamelModel):
    total_recommendations: int
    recommendations: List[MonitoringAlert] = Field(default_factory=list)
    entity: MonitoredEntity
