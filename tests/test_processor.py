"""
Tests for PodcastProcessor

Unit tests for the end-to-end pipeline with demo and mock fallbacks.
"""

from unittest.mock import MagicMock

import pytest

from conftest import analysis_json, make_settings
from podsift.errors import (
    ConfigurationError,
    ErrorKind,
    ResponseFormatError,
    ServiceUnavailableError,
    TranscriptionTimeoutError,
    ValidationError,
)
from podsift.llm.base_provider import parse_analysis
from podsift.llm.mock import MOCK_TITLE
from podsift.models import ProviderInvocationResult, TokenUsage, Transcript
from podsift.processor import DEMO_TRANSCRIPT, PodcastProcessor, validate_podcast_url

AUDIO_URL = "https://cdn.example.com/episode-42.mp3"


def groq_result():
    return ProviderInvocationResult(
        analysis=parse_analysis(analysis_json()),
        provider="groq",
        model="llama-3.3-70b-versatile",
        processing_time_ms=850,
        usage=TokenUsage(prompt_tokens=1_000_000, completion_tokens=0, total_tokens=1_000_000),
    )


def processor_with(transcript=None, transcribe_error=None, analyze=None, analyze_error=None, **overrides):
    transcriber = MagicMock()
    if transcribe_error:
        transcriber.transcribe.side_effect = transcribe_error
    else:
        transcriber.transcribe.return_value = transcript
    orchestrator = MagicMock()
    if analyze_error:
        orchestrator.analyze.side_effect = analyze_error
    else:
        orchestrator.analyze.return_value = analyze
    processor = PodcastProcessor(make_settings(**overrides), transcriber=transcriber, orchestrator=orchestrator)
    return processor, transcriber, orchestrator


class TestValidatePodcastUrl:
    def test_accepts_http_and_https(self):
        assert validate_podcast_url("  https://example.com/a.mp3 ") == "https://example.com/a.mp3"
        assert validate_podcast_url("http://example.com/feed") == "http://example.com/feed"

    @pytest.mark.parametrize("url", [None, "", "   ", "not a url", "ftp://example.com/a.mp3", "https://"])
    def test_rejects_invalid(self, url):
        with pytest.raises(ValidationError):
            validate_podcast_url(url)


class TestNoCredentials:
    """With no keys at all the pipeline still answers, from demo data."""

    def test_demo_transcript_and_mock_analysis(self, settings):
        result = PodcastProcessor(settings).process(AUDIO_URL)

        assert result.success is True
        assert result.analysis.title == MOCK_TITLE
        assert [h.timestamp for h in result.analysis.highlights] == ["0:00", "2:15", "5:30", "8:45", "12:00"]
        assert result.llm_provider.mock is True
        assert result.llm_provider.provider == "mock"
        assert result.llm_provider.cost == 0.0
        assert result.transcript == DEMO_TRANSCRIPT
        assert result.transcript_length == len(DEMO_TRANSCRIPT)
        assert result.platform.platform == "audio"
        assert result.transcription_cost == 0.0

    def test_serializes_with_camel_case(self, settings):
        data = PodcastProcessor(settings).process(AUDIO_URL).model_dump(by_alias=True)

        assert data["podcastUrl"] == AUDIO_URL
        assert data["llmProvider"]["mock"] is True
        assert "keyTakeaways" in data["analysis"]
        assert "timestampSeconds" in data["analysis"]["highlights"][0]


class TestPipeline:
    """Tests for PodcastProcessor.process() with collaborators mocked."""

    def test_success(self, sentences, utterances):
        transcript = Transcript(
            text="word " * 300, sentences=sentences, utterances=utterances, duration=1800
        )
        processor, _, orchestrator = processor_with(transcript, analyze=groq_result())

        result = processor.process(AUDIO_URL, provider="groq", model="llama-3.1-8b-instant")

        orchestrator.analyze.assert_called_once_with(
            "groq", transcript.text, transcript.sentences, transcript.utterances,
            model="llama-3.1-8b-instant",
        )
        assert result.llm_provider.provider == "groq"
        assert result.llm_provider.mock is False
        assert result.llm_provider.cost == pytest.approx(0.59)
        assert result.llm_provider.processing_time_ms == 850
        assert result.transcription_cost == pytest.approx(0.45)
        assert result.duration == 1800
        assert result.sentences == sentences
        assert result.processing_time.endswith("s")
        assert result.timestamp.endswith("+00:00")

    def test_default_provider_from_settings(self):
        transcript = Transcript(text="x" * 100)
        processor, _, orchestrator = processor_with(transcript, analyze=groq_result(), default_provider="gemini")

        processor.process(AUDIO_URL)

        assert orchestrator.analyze.call_args.args[0] == "gemini"

    def test_excerpt_is_truncated(self):
        transcript = Transcript(text="a" * 1500)
        processor, _, _ = processor_with(transcript, analyze=groq_result())

        result = processor.process(AUDIO_URL)

        assert result.transcript == "a" * 1000 + "..."
        assert result.transcript_length == 1500

    def test_short_transcript_rejected_before_analysis(self):
        """49 characters is below the minimum; no LLM call is made."""
        processor, _, orchestrator = processor_with(Transcript(text="x" * 49), analyze=groq_result())

        with pytest.raises(ValidationError, match="too short"):
            processor.process(AUDIO_URL)
        orchestrator.analyze.assert_not_called()

    def test_minimum_length_accepted(self):
        processor, _, orchestrator = processor_with(Transcript(text="x" * 50), analyze=groq_result())
        processor.process(AUDIO_URL)
        orchestrator.analyze.assert_called_once()

    def test_invalid_url_rejected_before_transcription(self):
        processor, transcriber, _ = processor_with(Transcript(text="x" * 100))

        with pytest.raises(ValidationError):
            processor.process("not-a-url")
        transcriber.transcribe.assert_not_called()

    def test_transcriber_not_configured_uses_demo(self):
        processor, _, orchestrator = processor_with(
            transcribe_error=ConfigurationError("AssemblyAI API key is not configured"),
            analyze=groq_result(),
        )

        processor.process(AUDIO_URL)

        assert orchestrator.analyze.call_args.args[1] == DEMO_TRANSCRIPT

    def test_transcription_timeout_propagates(self):
        processor, _, _ = processor_with(transcribe_error=TranscriptionTimeoutError("timed out"))

        with pytest.raises(TranscriptionTimeoutError):
            processor.process(AUDIO_URL)

    def test_service_down_falls_back_to_mock(self):
        processor, _, _ = processor_with(
            Transcript(text="x" * 100),
            analyze_error=ServiceUnavailableError("Ollama is not running"),
        )

        result = processor.process(AUDIO_URL, provider="ollama")

        assert result.llm_provider.mock is True
        assert result.analysis.title == MOCK_TITLE

    def test_bad_response_propagates(self):
        processor, _, _ = processor_with(
            Transcript(text="x" * 100), analyze_error=ResponseFormatError("bad json")
        )

        with pytest.raises(ResponseFormatError) as exc_info:
            processor.process(AUDIO_URL, provider="groq")
        assert exc_info.value.kind == ErrorKind.BAD_RESPONSE

    def test_youtube_platform(self):
        processor, _, _ = processor_with(Transcript(text="x" * 100), analyze=groq_result())

        result = processor.process("https://www.youtube.com/watch?v=dQw4w9WgXcQ")

        assert result.platform.platform == "youtube"
        assert result.platform.youtube_id == "dQw4w9WgXcQ"
