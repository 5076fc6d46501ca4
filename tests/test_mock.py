"""
Tests for the demo analysis used when no LLM is available.
"""

from podsift.llm.mock import MOCK_TITLE, generate_mock_analysis


class TestGenerateMockAnalysis:
    def test_fixed_highlight_timestamps(self):
        analysis = generate_mock_analysis("short transcript")

        assert analysis.title == MOCK_TITLE
        assert [h.timestamp for h in analysis.highlights] == ["0:00", "2:15", "5:30", "8:45", "12:00"]
        assert [h.timestamp_seconds for h in analysis.highlights] == [0, 135, 330, 525, 720]
        assert all(h.speaker is None for h in analysis.highlights)

    def test_schema_complete(self):
        analysis = generate_mock_analysis("words")
        assert len(analysis.key_takeaways) == 5
        assert len(analysis.similar_topics) == 3
        assert len(analysis.follow_ups) == 3
        assert analysis.tags == ["podcast", "analysis", "insights", "learning", "discussion"]

    def test_duration_estimate_rounds_half_up(self):
        """150 words per minute; 225 words is 1.5 minutes, reported as 2."""
        assert "approximately 2 minutes" in generate_mock_analysis(" ".join(["word"] * 225)).summary
        assert "approximately 1 minutes" in generate_mock_analysis(" ".join(["word"] * 224)).summary

    def test_deterministic(self):
        assert generate_mock_analysis("same text") == generate_mock_analysis("same text")
