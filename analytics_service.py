"""AI Presence Analytics Service - HTTP front for the analytics engine

FastAPI service that scores already-collected AI platform responses:
- /analyze - Full analytics: 6 dimension scores, overall score, benchmark,
  SWOT insights, recommendations, source analysis, platform comparison
- /platforms - Platform comparison with query counts and success rate
- /sources - Cited domains with the platforms citing them
- /changes - Change detection between two audits
- /recommendations - Monitoring alerts (thin/inconsistent/narrow sources)

Querying the AI platforms and storing records happens upstream; this
service only receives the records.

Environment Variables:
- LOG_LEVEL: logging level (default INFO)
- DEFAULT_INDUSTRY: benchmark bucket when a request has no industry
- CORS_ORIGINS: comma separated allowed origins (default *)
"""

import logging
import os
import time
from typing import Any, List, Optional, Union

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from analyzer import analyze_audit
from models import AnalyticsResult, ChangeReport, MonitoringReport, PlatformReport, SourceTracking
from monitoring import analyze_sources_for_audit, detect_changes, generate_monitoring_recommendations
from platforms import generate_platform_report
from records import AnalyticsError, EntityType, QueryRecord, QueryStatus
from reference_tables import COMPARISON_PLATFORMS, TABLES_VERSION

SERVICE_VERSION = "1.0.0"

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

app = FastAPI(
    title="AI Presence Analytics Service",
    description="Multi-dimensional scoring of how AI platforms represent a person or company",
    version=SERVICE_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",")],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# === Request Models ===

class QueryRecordIn(BaseModel):
    """One executed platform query as stored by the collector."""
    platform: str
    queryText: str
    responseText: Optional[str] = None
    citations: Optional[Union[str, List[Any]]] = None
    status: str = QueryStatus.COMPLETED.value
    queryType: str = "llm"


class AnalyzeRequest(BaseModel):
    records: List[QueryRecordIn] = Field(default_factory=list)
    entityType: EntityType = EntityType.COMPANY
    industry: Optional[str] = None


class RecordsRequest(BaseModel):
    records: List[QueryRecordIn] = Field(default_factory=list)


class ChangesRequest(BaseModel):
    current: List[QueryRecordIn] = Field(default_factory=list)
    previous: Optional[List[QueryRecordIn]] = Field(
        default=None,
        description="Records of the previous completed audit; omit for a first audit",
    )


class MonitoringRecommendationsRequest(BaseModel):
    entityName: str
    entityType: EntityType = EntityType.COMPANY
    records: List[QueryRecordIn] = Field(default_factory=list)


def to_records(items: List[QueryRecordIn]) -> List[QueryRecord]:
    """Convert request payloads into engine records (raises InvalidRecordError)."""
    return [QueryRecord.from_dict(item.model_dump()) for item in items]


# === API Endpoints ===

@app.get("/")
async def root():
    """Service info."""
    return {
        "service": "ai-presence-analytics",
        "version": SERVICE_VERSION,
        "tables_version": TABLES_VERSION,
        "endpoints": {
            "/analyze": "POST - Full analytics for one audit",
            "/platforms": "POST - Platform comparison with query stats",
            "/sources": "POST - Cited domains by platform",
            "/changes": "POST - Change detection between two audits",
            "/recommendations": "POST - Monitoring recommendations",
            "/health": "GET - Service health status",
        },
        "platforms": list(COMPARISON_PLATFORMS),
        "dimensions": [
            "visibility", "authority", "sentiment",
            "completeness", "sourceQuality", "optimization",
        ],
    }


@app.get("/health")
async def health():
    """Service health check."""
    return {"status": "healthy", "service": "ai-presence-analytics", "version": SERVICE_VERSION}


@app.post("/analyze", response_model=AnalyticsResult)
async def analyze(request: AnalyzeRequest):
    """Run full analytics over the records of one audit.

    Returns six dimension scores, the weighted overall score, an industry
    benchmark, SWOT insights, prioritized recommendations, source analysis
    and a per-platform comparison.
    """
    if not request.records:
        raise HTTPException(status_code=400, detail="No queries found for this audit")

    industry = request.industry or os.getenv("DEFAULT_INDUSTRY", "default")
    start_time = time.time()

    try:
        records = to_records(request.records)
        result = analyze_audit(records, request.entityType.value, industry)
    except AnalyticsError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception(f"Analysis failed: {e}")
        raise HTTPException(status_code=500, detail=f"Analysis failed: {str(e)}")

    logger.info(
        f"Analysis complete: score={result.overall_score:.1f}, "
        f"percentile={result.benchmark.percentile}, time={time.time() - start_time:.3f}s"
    )
    return result


@app.post("/platforms", response_model=List[PlatformReport])
async def platforms(request: RecordsRequest):
    """Per-platform visibility, sentiment, completeness and query success stats."""
    try:
        return generate_platform_report(to_records(request.records))
    except AnalyticsError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/sources", response_model=SourceTracking)
async def sources(request: RecordsRequest):
    """Cited domains of an audit, most cited first."""
    try:
        return analyze_sources_for_audit(to_records(request.records))
    except AnalyticsError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/changes", response_model=ChangeReport)
async def changes(request: ChangesRequest):
    """Compare an audit against the previous one."""
    try:
        previous = to_records(request.previous) if request.previous is not None else None
        return detect_changes(to_records(request.current), previous)
    except AnalyticsError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/recommendations", response_model=MonitoringReport)
async def recommendations(request: MonitoringRecommendationsRequest):
    """Monitoring alerts for an audit."""
    try:
        return generate_monitoring_recommendations(
            request.entityName,
            request.entityType.value,
            to_records(request.records),
        )
    except AnalyticsError as e:
        raise HTTPException(status_code=400, detail=str(e))


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
