"""
Podcast Processing Pipeline

URL -> transcript -> LLM analysis -> response. Falls back to a demo
transcript and a mock analysis when the external services are not
configured, so the product stays usable without credentials.
"""

import logging
import time
from datetime import datetime, timezone
from typing import Optional, Tuple
from urllib.parse import urlparse

from .config import Settings
from .errors import RECOVERABLE_KINDS, ConfigurationError, PodsiftError, ValidationError
from .llm.cost import calculate_cost, calculate_transcription_cost
from .llm.mock import generate_mock_analysis
from .llm.orchestrator import AnalysisOrchestrator
from .models import AnalysisResult, LLMProviderInfo, PodcastAnalysis, Transcript
from .platforms import detect_platform
from .transcript import AssemblyAITranscriber

logger = logging.getLogger(__name__)

DEMO_TRANSCRIPT = (
    "This is a demo transcript. In production, this would contain the actual podcast "
    "transcript extracted from the audio file. The transcript would include all spoken "
    "words from the podcast episode."
)

MOCK_PROVIDER = "mock"


def validate_podcast_url(url: Optional[str]) -> str:
    """
    Check that a URL is an absolute http(s) URL.

    Raises:
        ValidationError: If the URL is empty or malformed
    """
    if not url or not url.strip():
        raise ValidationError("Podcast URL is required")

    url = url.strip()
    try:
        parsed = urlparse(url)
    except ValueError as e:
        raise ValidationError(f"Invalid URL format: {url}") from e

    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValidationError(f"Invalid URL format: {url}")
    return url


class PodcastProcessor:
    """
    Sequences one podcast request end to end.

    Usage:
        processor = PodcastProcessor(settings)
        result = processor.process("https://example.com/episode.mp3", provider="auto")
    """

    def __init__(
        self,
        settings: Settings,
        transcriber: Optional[AssemblyAITranscriber] = None,
        orchestrator: Optional[AnalysisOrchestrator] = None,
    ):
        self.settings = settings
        self.transcriber = transcriber or AssemblyAITranscriber(settings)
        self.orchestrator = orchestrator or AnalysisOrchestrator(settings)

    def process(
        self,
        podcast_url: str,
        provider: Optional[str] = None,
        model: Optional[str] = None,
    ) -> PodcastAnalysis:
        """
        Process a podcast URL into a complete analysis.

        Args:
            podcast_url: Audio or podcast page URL
            provider: "auto" or an explicit provider id
            model: Optional model override for an explicit provider

        Returns:
            PodcastAnalysis response

        Raises:
            ValidationError: Bad URL or transcript shorter than the minimum
            PodsiftError: Transcription or analysis failures that have no
                demo fallback
        """
        started = time.perf_counter()
        podcast_url = validate_podcast_url(podcast_url)
        provider = provider or self.settings.default_provider

        logger.info("Step 1: Extracting transcript...")
        transcript = self._extract_transcript(podcast_url)

        if len(transcript.text) < self.settings.min_transcript_length:
            raise ValidationError("Transcript is too short or empty")
        logger.info(f"Transcript extracted: {len(transcript.text)} characters")

        logger.info("Step 2: Analyzing transcript with AI...")
        analysis, llm_provider = self._analyze(transcript, provider, model)

        elapsed = time.perf_counter() - started
        logger.info(f"Processing completed in {elapsed:.2f} seconds")

        return self._build_response(podcast_url, transcript, analysis, llm_provider, elapsed)

    def _extract_transcript(self, podcast_url: str) -> Transcript:
        try:
            return self.transcriber.transcribe(podcast_url)
        except ConfigurationError as e:
            logger.warning(f"Transcript extraction unavailable ({e}), using demo transcript")
            return Transcript(text=DEMO_TRANSCRIPT)

    def _analyze(
        self, transcript: Transcript, provider: str, model: Optional[str]
    ) -> Tuple[AnalysisResult, LLMProviderInfo]:
        try:
            result = self.orchestrator.analyze(
                provider,
                transcript.text,
                transcript.sentences,
                transcript.utterances,
                model=model,
            )
        except PodsiftError as e:
            if e.kind not in RECOVERABLE_KINDS:
                raise
            logger.warning(f"LLM analysis unavailable ({e}), using mock analysis")
            return generate_mock_analysis(transcript.text), LLMProviderInfo(
                provider=MOCK_PROVIDER, model=MOCK_PROVIDER, mock=True
            )

        return result.analysis, LLMProviderInfo(
            provider=result.provider,
            model=result.model,
            usage=result.usage,
            cost=calculate_cost(result.provider, result.usage),
            processing_time_ms=result.processing_time_ms,
        )

    def _build_response(
        self,
        podcast_url: str,
        transcript: Transcript,
        analysis: AnalysisResult,
        llm_provider: LLMProviderInfo,
        elapsed: float,
    ) -> PodcastAnalysis:
        limit = self.settings.transcript_excerpt_length
        excerpt = transcript.text[:limit] + ("..." if len(transcript.text) > limit else "")

        return PodcastAnalysis(
            success=True,
            podcast_url=podcast_url,
            audio_url=podcast_url,
            platform=detect_platform(podcast_url),
            duration=transcript.duration,
            transcript=excerpt,
            transcript_length=len(transcript.text),
            chapters=transcript.chapters,
            sentences=transcript.sentences,
            utterances=transcript.utterances,
            speaker_stats=transcript.speaker_stats,
            analysis=analysis,
            llm_provider=llm_provider,
            transcription_cost=calculate_transcription_cost(transcript.duration),
            processing_time=f"{elapsed:.2f}s",
            timestamp=datetime.now(timezone.utc).isoformat(),
        )
