"""
Tests for the end-to-end analyzer and platform comparison.
Run with: pytest test_analyzer.py -v
"""
import json

import pytest

from analyzer import analyze_audit
from platforms import generate_platform_comparison
from records import QueryRecord, UnknownEntityTypeError

RICH_RESPONSE = (
    "Acme Corp is a leading and innovative company founded in 2012 by its founder "
    "Jane Doe. The name is well known in the logistics industry, with headquarters "
    "in Berlin. Its main product is a trusted routing platform used by customers "
    "worldwide. The company recently raised funding and now has 400 employees. "
).ljust(600, ".")

RICH_CITATIONS = json.dumps([
    "https://en.wikipedia.org/wiki/Acme_Corp",
    {"url": "https://www.wikidata.org/wiki/Q42", "title": "Acme Corp"},
    {"url": "https://www.crunchbase.com/organization/acme"},
    {"source": "https://techcrunch.com/2024/acme-funding"},
    "https://www.forbes.com/acme",
])


def record(platform="chatgpt", response=RICH_RESPONSE, citations=RICH_CITATIONS, status="completed"):
    return QueryRecord(
        platform=platform,
        query_text="Acme Corp",
        response_text=response,
        citations=citations,
        status=status,
    )


def test_empty_audit():
    """No records at all: zero dimensions, neutral overall, no comparison rows."""
    result = analyze_audit([], "company", "technology")

    assert result.scores.model_dump() == {
        "visibility": 0, "authority": 0, "sentiment": 0,
        "completeness": 0, "source_quality": 0, "optimization": 0,
    }
    assert result.overall_score == pytest.approx(7.5)
    assert result.source_analysis.total_sources == 0
    assert result.platform_comparison == []


def test_analysis_compares_only_platforms_with_records():
    result = analyze_audit([record("claude"), record("gemini")], "company", "technology")
    assert len(result.platform_comparison) == 2
    assert [r.platform for r in result.platform_comparison] == ["gemini", "claude"]


def test_failed_only_audit():
    """No completed responses and no citations: only neutral sentiment scores."""
    records = [record(response=None, citations=None, status="failed")]
    result = analyze_audit(records, "company", "technology")

    assert result.overall_score == pytest.approx(7.5)
    assert result.scores.visibility == 0
    assert result.scores.sentiment == 0
    assert result.source_analysis.total_sources == 0
    assert result.benchmark.percentile == 5


def test_rich_audit_scores_in_range():
    records = [record("chatgpt"), record("perplexity"), record("claude")]
    result = analyze_audit(records, "company", "technology")

    scores = result.scores
    for value in (scores.visibility, scores.authority, scores.completeness,
                  scores.source_quality, scores.optimization, result.overall_score):
        assert 0 <= value <= 100
    assert -100 <= scores.sentiment <= 100
    assert scores.optimization == 100
    assert result.source_analysis.total_sources == 15
    assert 1 <= result.benchmark.percentile <= 99


def test_analysis_is_deterministic():
    records = [record("chatgpt"), record("gemini", response="Acme Corp faced a lawsuit.")]
    first = analyze_audit(records, "company", "finance").to_dict()
    second = analyze_audit(records, "company", "finance").to_dict()
    assert first == second


def test_input_records_are_not_modified():
    records = [record("chatgpt"), record("grok")]
    snapshot = list(records)
    analyze_audit(records, "person", "default")
    assert records == snapshot


def test_repeated_citation_is_counted_each_time():
    url = ["https://www.bloomberg.com/acme"]
    result = analyze_audit([record(citations=url), record("claude", citations=url)], "company", "default")
    assert result.source_analysis.total_sources == 2
    assert result.source_analysis.top_domains[0].count == 2


def test_unknown_entity_type_is_rejected():
    with pytest.raises(UnknownEntityTypeError):
        analyze_audit([record()], "planet", "default")


def test_result_serializes_with_camel_case_keys():
    data = analyze_audit([record()], "company", "technology").to_dict()

    assert set(data) == {
        "overallScore", "scores", "benchmark", "insights",
        "recommendations", "sourceAnalysis", "platformComparison",
    }
    assert "sourceQuality" in data["scores"]
    assert "averageScore" in data["benchmark"]
    assert "tier1Sources" in data["sourceAnalysis"]
    assert "responseQuality" in data["platformComparison"][0]


# ==================== Platform Comparison ====================

def test_only_platforms_with_records_are_compared():
    """Claude + Gemini only: two rows, in comparison order."""
    rows = generate_platform_comparison([record("claude"), record("gemini")])
    assert [r.platform for r in rows] == ["gemini", "claude"]


def test_web_variants_are_not_folded_in():
    rows = generate_platform_comparison([record("chatgpt_web"), record("grok_web")])
    assert rows == []


def test_platform_row_metrics():
    response = "Acme Corp is a trusted name. ".ljust(500, "x")
    rows = generate_platform_comparison([record("perplexity", response=response, citations=["https://bbc.com/a"])])
    row = rows[0]

    assert row.source_count == 1
    assert row.sentiment == 20
    assert row.visibility == pytest.approx(80)
    # 'name' is one of six required company fields
    assert row.completeness == pytest.approx(70 / 6)
    assert row.response_quality == pytest.approx((80 + 60 + 70 / 6) / 3)


def test_platform_completeness_always_uses_company_fields():
    """Person audits still get company completeness per platform."""
    records = [record("chatgpt")]
    person = analyze_audit(records, "person", "default")
    company = analyze_audit(records, "company", "default")
    assert person.platform_comparison == company.platform_comparison
    assert person.scores.completeness != company.scores.completeness
