from datetime import datetime, timezone

from truthlens.core.models import AnalysisResult, CredibilityScore, FactCheck, KeyFinding, Source

DEMO_ANALYSIS_ID = "demo"

DEMO_CONTENT = (
    "Breaking: Revolutionary new technology promises to solve climate change overnight, "
    "according to undisclosed sources from CleanTech Corp. The company claims their "
    "breakthrough carbon capture method can reverse decades of environmental damage in a "
    "matter of hours."
)


def build_demo_result() -> AnalysisResult:
    """Canned analysis served under the "demo" id."""
    return AnalysisResult(
        id=DEMO_ANALYSIS_ID,
        content=DEMO_CONTENT,
        type="text",
        credibility_score=CredibilityScore(
            overall=35,
            source_authority=25,
            fact_verification=40,
            language_analysis=67,
        ),
        key_findings=[
            KeyFinding(
                type="error",
                title="Unverified Claims",
                description='No credible sources found for "overnight climate solution"',
            ),
            KeyFinding(
                type="warning",
                title="Missing Context",
                description="Article lacks specific details and expert quotes",
            ),
            KeyFinding(
                type="error",
                title="Anonymous Sources",
                description="Claims based on undisclosed sources",
            ),
        ],
        fact_checks=[
            FactCheck(
                claim="Technology can reverse climate change overnight",
                status="FALSE",
                explanation="No scientific evidence supports instantaneous climate reversal claims.",
            ),
            FactCheck(
                claim="New carbon capture methods show promise",
                status="PARTIAL",
                explanation="Some research exists, but timeline claims are exaggerated.",
            ),
            FactCheck(
                claim="CleanTech Corp founded in 2018",
                status="TRUE",
                explanation="Company registration and basic facts verified.",
            ),
        ],
        sources=[
            Source(
                url="https://climate.gov/news-features/understanding-climate/climate-change-carbon-capture",
                title="Climate.gov - Carbon Capture Technologies",
                credibility=9.2,
            ),
            Source(
                url="https://ipcc.ch/reports/",
                title="IPCC Climate Change Reports",
                credibility=9.8,
            ),
            Source(
                url="https://example-news.com/breaking-news",
                title="Original Article Source",
                credibility=3.1,
            ),
        ],
        analyzed_at=datetime.now(timezone.utc),
        processing_time=2340,
    )
