"""
Mock Analysis

Deterministic placeholder analysis used when no LLM is configured, so the
pipeline stays demoable without credentials.
"""

from ..models import AnalysisResult, Highlight, SimilarTopic
from .aligner import format_timestamp

MOCK_TITLE = "Podcast Episode Analysis"

WORDS_PER_MINUTE = 150

_MOCK_HIGHLIGHTS = [
    (0, "Opening discussion sets the context for the main topic"),
    (135, "In-depth exploration of key concepts and ideas"),
    (330, "Expert insights and personal experiences shared"),
    (525, "Practical examples and real-world applications"),
    (720, "Concluding thoughts and recommendations"),
]


def generate_mock_analysis(transcript: str) -> AnalysisResult:
    """
    Build the fixed demo analysis for a transcript.

    Only the summary varies, with a duration estimate from the word count.
    """
    word_count = len(transcript.split(" "))
    # Round half up
    estimated_minutes = int(word_count / WORDS_PER_MINUTE + 0.5)

    highlights = []
    for seconds, text in _MOCK_HIGHLIGHTS:
        match = format_timestamp(seconds * 1000)
        highlights.append(
            Highlight(
                text=text,
                snippet=None,
                timestamp=match.formatted,
                timestamp_seconds=match.seconds,
            )
        )

    return AnalysisResult(
        title=MOCK_TITLE,
        summary=(
            f"This podcast episode covers various topics discussed over approximately "
            f"{estimated_minutes} minutes. The conversation explores multiple perspectives "
            f"and insights on the subject matter."
        ),
        highlights=highlights,
        key_takeaways=[
            "Understanding the fundamental principles discussed",
            "Practical applications for everyday situations",
            "Important considerations for implementation",
            "Common pitfalls to avoid",
            "Resources for further learning",
        ],
        similar_topics=[
            SimilarTopic(topic="Related Field A", description="Shares similar methodologies and approaches"),
            SimilarTopic(topic="Related Field B", description="Complementary perspectives on the subject"),
            SimilarTopic(topic="Related Field C", description="Additional context and background information"),
        ],
        follow_ups=[
            "Explore advanced techniques in this area",
            "Research the historical development of these concepts",
            "Connect with experts in the field",
        ],
        tags=["podcast", "analysis", "insights", "learning", "discussion"],
    )
