"""
Tests for the overall score, benchmark, insights and recommendations.
Run with: pytest test_scoring.py -v
"""
import pytest

from insights import generate_insights, generate_recommendations
from models import DimensionScores
from scoring import (
    calculate_grade,
    calculate_presence_band,
    calculate_overall_score,
    calculate_percentile,
    get_benchmark,
    normalize_sentiment,
)


# ==================== Overall Score ====================

def test_all_zero_dimensions_score_seven_and_a_half():
    """Neutral sentiment still contributes 50 * 0.15."""
    assert calculate_overall_score(DimensionScores()) == pytest.approx(7.5)


def test_perfect_dimensions_score_100():
    scores = DimensionScores(
        visibility=100, authority=100, sentiment=100,
        completeness=100, source_quality=100, optimization=100,
    )
    assert calculate_overall_score(scores) == pytest.approx(100)


def test_overall_score_weights():
    scores = DimensionScores(visibility=80, authority=50, sentiment=-20,
                             completeness=60, source_quality=40, optimization=30)
    expected = 80 * 0.25 + 50 * 0.20 + 40 * 0.15 + 60 * 0.15 + 40 * 0.15 + 30 * 0.10
    assert calculate_overall_score(scores) == pytest.approx(expected)


def test_normalize_sentiment():
    assert normalize_sentiment(-100) == 0
    assert normalize_sentiment(0) == 50
    assert normalize_sentiment(100) == 100


# ==================== Benchmark ====================

@pytest.mark.parametrize("score,percentile", [
    (0, 1),
    (1000, 99),
    (75, 50),
    (150, 99),
])
def test_percentile_is_clamped(score, percentile):
    assert get_benchmark("technology", score).percentile == percentile


def test_percentile_rounds_half_up():
    """12.5 rounds to 13, not to the even 12."""
    assert calculate_percentile(1, 4) == 13


def test_industry_lookup_is_case_insensitive():
    benchmark = get_benchmark("Finance", 35)
    assert benchmark.industry == "Finance"
    assert benchmark.average_score == 70
    assert benchmark.percentile == 25


def test_unknown_industry_uses_default():
    benchmark = get_benchmark("aerospace", 60)
    assert benchmark.average_score == 60
    assert benchmark.percentile == 50


def test_missing_industry_is_reported_as_default():
    assert get_benchmark(None, 60).industry == "default"


@pytest.mark.parametrize("percentile,grade", [
    (99, "A+"), (90, "A+"), (75, "A"), (50, "B"), (49, "C"), (25, "C"), (10, "D"), (9, "F"), (1, "F"),
])
def test_calculate_grade(percentile, grade):
    assert calculate_grade(percentile) == grade


def test_grade_follows_industry_average():
    """The same score grades lower in an industry with a higher average."""
    retail = get_benchmark("retail", 60)
    technology = get_benchmark("technology", 60)
    assert calculate_grade(retail.percentile) == "B"
    assert calculate_grade(technology.percentile) == "C"


@pytest.mark.parametrize("percentile,band", [
    (80, "Leading"), (50, "Above average"), (30, "Below average"), (5, "Critical"),
])
def test_calculate_presence_band(percentile, band):
    assert calculate_presence_band(percentile) == band


# ==================== Insights ====================

def test_insights_bucket_by_threshold():
    scores = DimensionScores(visibility=20, authority=80, sentiment=-60,
                             completeness=50, source_quality=80, optimization=80)
    insights = generate_insights(scores)

    assert insights.strengths == [
        "High-authority sources citing entity",
        "High-quality, diverse source portfolio",
        "Well-optimized for AI search",
    ]
    assert insights.weaknesses == ["Low visibility in AI search results"]
    assert insights.threats == ["Negative sentiment detected"]
    assert insights.opportunities == []


def test_insight_thresholds_are_strict():
    """Scores exactly on a threshold produce nothing."""
    scores = DimensionScores(visibility=70, authority=40, sentiment=30,
                             completeness=70, source_quality=40, optimization=70)
    insights = generate_insights(scores)
    assert insights.to_dict() == {
        "strengths": [], "weaknesses": [], "opportunities": [], "threats": [],
    }


def test_low_optimization_is_an_opportunity():
    insights = generate_insights(DimensionScores(visibility=50, authority=50, completeness=50,
                                                 source_quality=50, optimization=10))
    assert insights.opportunities == ["Major optimization opportunities available"]


# ==================== Recommendations ====================

def test_recommendations_sorted_by_priority_then_dimension():
    scores = DimensionScores(visibility=20, authority=80, sentiment=-60,
                             completeness=50, source_quality=80, optimization=80)
    recommendations = generate_recommendations(scores, "company")

    assert [r.category for r in recommendations] == ["Visibility", "Reputation", "Information"]
    assert [r.priority for r in recommendations] == ["critical", "critical", "medium"]


def test_no_recommendations_for_strong_audit():
    scores = DimensionScores(visibility=90, authority=90, sentiment=10,
                             completeness=90, source_quality=90, optimization=90)
    assert generate_recommendations(scores, "company") == []


def test_optimization_priority_split():
    high = generate_recommendations(
        DimensionScores(visibility=90, authority=90, completeness=90, source_quality=90, optimization=20),
        "company",
    )
    medium = generate_recommendations(
        DimensionScores(visibility=90, authority=90, completeness=90, source_quality=90, optimization=50),
        "company",
    )
    assert high[0].priority == "high"
    assert medium[0].priority == "medium"


def test_high_outranks_medium_across_dimensions():
    """A high optimization item comes before medium completeness/sources items."""
    scores = DimensionScores(visibility=90, authority=90, sentiment=10,
                             completeness=10, source_quality=10, optimization=10)
    categories = [r.category for r in generate_recommendations(scores, "company")]
    assert categories == ["Optimization", "Information", "Sources"]


def test_optimization_actions_same_for_both_entity_types():
    scores = DimensionScores(visibility=90, authority=90, completeness=90, source_quality=90)
    person = generate_recommendations(scores, "person")[0]
    company = generate_recommendations(scores, "company")[0]
    assert person.specific_actions[0] == "Add schema.org markup to website (Organization/Person schema)"
    assert person == company


def test_recommendation_serializes_camel_case():
    scores = DimensionScores(visibility=10, authority=90, completeness=90,
                             source_quality=90, optimization=90)
    data = generate_recommendations(scores, "company")[0].to_dict()
    assert data["specificActions"]
    assert set(data) == {
        "priority", "category", "title", "description",
        "impact", "effort", "timeline", "specificActions",
    }
