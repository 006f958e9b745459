"""Insights & Recommendations - rule tables over the dimension scores

SWOT insights: each dimension yields at most one strength (high score) or one
weakness/opportunity/threat (low score). Scores between the thresholds say
nothing.

Recommendations: one structured remediation item per dimension below its
trigger, sorted critical → high → medium → low. Ties keep dimension order.
"""

from typing import List

from models import DimensionScores, Insights, Recommendation

PRIORITY_ORDER = {"critical": 0, "high": 1, "medium": 2, "low": 3}

RECOMMENDATION_TRIGGER = 60
SENTIMENT_TRIGGER = 0


def generate_insights(scores: DimensionScores) -> Insights:
    """Bucket the dimension scores into strengths/weaknesses/opportunities/threats."""
    insights = Insights()

    if scores.visibility > 70:
        insights.strengths.append("Strong visibility across AI platforms")
    elif scores.visibility < 40:
        insights.weaknesses.append("Low visibility in AI search results")

    if scores.authority > 70:
        insights.strengths.append("High-authority sources citing entity")
    elif scores.authority < 40:
        insights.weaknesses.append("Weak source authority profile")

    if scores.sentiment > 30:
        insights.strengths.append("Positive sentiment in AI responses")
    elif scores.sentiment < -30:
        insights.threats.append("Negative sentiment detected")

    if scores.completeness > 70:
        insights.strengths.append("Comprehensive information coverage")
    elif scores.completeness < 40:
        insights.weaknesses.append("Significant information gaps")

    if scores.source_quality > 70:
        insights.strengths.append("High-quality, diverse source portfolio")
    elif scores.source_quality < 40:
        insights.weaknesses.append("Poor source quality and diversity")

    if scores.optimization > 70:
        insights.strengths.append("Well-optimized for AI search")
    elif scores.optimization < 40:
        insights.opportunities.append("Major optimization opportunities available")

    return insights


def generate_recommendations(scores: DimensionScores, entity_type: str) -> List[Recommendation]:
    """Prioritized remediation plan for every dimension below its trigger.

    The plan texts are the same for people and companies; entity_type is
    part of the signature so callers pass the audit context unchanged.
    """
    recommendations: List[Recommendation] = []

    if scores.visibility < RECOMMENDATION_TRIGGER:
        recommendations.append(Recommendation(
            priority="critical" if scores.visibility < 30 else "high",
            category="Visibility",
            title="Improve AI Search Visibility",
            description="Entity has low visibility in AI search results. Implement structured content and digital PR strategies.",
            impact="Increase mentions in AI responses by 40-60%",
            effort="medium",
            timeline="2-3 months",
            specific_actions=[
                "Create Wikipedia page (if notable)",
                "Add Wikidata entry with structured facts",
                "Implement schema.org markup on website",
                "Launch digital PR campaign targeting major publications",
                "Optimize content with FAQ sections and clear headings",
            ],
        ))

    if scores.authority < RECOMMENDATION_TRIGGER:
        recommendations.append(Recommendation(
            priority="critical" if scores.authority < 30 else "high",
            category="Authority",
            title="Build Source Authority",
            description="Current sources lack credibility. Focus on earning mentions from Tier 1 authoritative sources.",
            impact="Improve trust signals and AI citation quality",
            effort="high",
            timeline="3-6 months",
            specific_actions=[
                "Secure coverage in Forbes, TechCrunch, or Bloomberg",
                "Publish thought leadership in industry journals",
                "Get featured in academic or research publications",
                "Build complete Crunchbase and LinkedIn profiles",
                "Earn organic mentions from authoritative industry sources",
            ],
        ))

    if scores.sentiment < SENTIMENT_TRIGGER:
        recommendations.append(Recommendation(
            priority="critical" if scores.sentiment < -50 else "high",
            category="Reputation",
            title="Address Negative Sentiment",
            description="AI responses contain negative framing or controversial content. Proactive reputation management needed.",
            impact="Shift narrative from negative to neutral/positive",
            effort="high",
            timeline="6-12 months",
            specific_actions=[
                "Identify and address sources of negative coverage",
                "Publish positive case studies and success stories",
                "Engage in community contributions and thought leadership",
                "Correct misinformation in Wikipedia and other sources",
                "Launch PR campaign to build positive narrative",
            ],
        ))

    if scores.completeness < RECOMMENDATION_TRIGGER:
        recommendations.append(Recommendation(
            priority="medium",
            category="Information",
            title="Fill Information Gaps",
            description="AI responses lack key facts and details. Ensure comprehensive information is available online.",
            impact="Provide complete, accurate information to AI systems",
            effort="low",
            timeline="1-2 months",
            specific_actions=[
                "Update all online profiles with consistent information",
                "Add missing facts to Wikipedia/Wikidata",
                "Publish comprehensive About page on website",
                "Ensure recent achievements are documented",
                "Correct outdated information across all platforms",
            ],
        ))

    if scores.source_quality < RECOMMENDATION_TRIGGER:
        recommendations.append(Recommendation(
            priority="medium",
            category="Sources",
            title="Upgrade Source Portfolio",
            description="Too many low-quality sources. Focus on diversifying and upgrading to Tier 1/2 sources.",
            impact="Improve credibility and reduce reliance on weak sources",
            effort="medium",
            timeline="3-4 months",
            specific_actions=[
                "Reduce dependence on press releases",
                "Earn mentions from reputable news outlets",
                "Add structured data sources (Wikidata, Crunchbase)",
                "Diversify source portfolio across multiple domains",
                "Target industry-specific authoritative publications",
            ],
        ))

    if scores.optimization < RECOMMENDATION_TRIGGER:
        recommendations.append(Recommendation(
            priority="high" if scores.optimization < 30 else "medium",
            category="Optimization",
            title="Implement AI Search Best Practices",
            description="Entity lacks basic AI search optimization. Quick wins available through technical implementation.",
            impact="Immediate improvement in AI discoverability",
            effort="low",
            timeline="2-4 weeks",
            specific_actions=[
                "Add schema.org markup to website (Organization/Person schema)",
                "Create Wikidata entry with key facts",
                "Restructure website content with clear headings and FAQ",
                "Update Wikipedia page (if exists) with recent information",
                "Implement answer engine optimization (AEO) best practices",
            ],
        ))

    # list.sort is stable
    recommendations.sort(key=lambda r: PRIORITY_ORDER[r.priority])

    return recommendations
