"""
Podsift Data Models
Pydantic models for transcripts, LLM analysis results, and pipeline output.

All models serialize with camelCase aliases (the JSON contract shared with the
LLM prompt and the HTTP API) while accepting snake_case names in Python.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model with camelCase wire names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


# --- Transcript ---


class Sentence(CamelModel):
    """A time-coded transcript sentence."""

    text: str
    start: int = Field(description="Start time in milliseconds")
    end: int = Field(description="End time in milliseconds")


class Utterance(CamelModel):
    """A speaker-attributed interval of the transcript."""

    speaker: str = Field(description="Speaker label (e.g., 'A')")
    start: int = Field(description="Start time in milliseconds")
    end: int = Field(description="End time in milliseconds")
    text: str = ""
    confidence: Optional[float] = None


class Chapter(CamelModel):
    """An auto-detected chapter from the transcription service."""

    headline: str = ""
    summary: str = ""
    gist: str = ""
    start: int = Field(0, description="Start time in milliseconds")
    end: int = Field(0, description="End time in milliseconds")


class SpeakerStat(CamelModel):
    """Aggregate talk time for one speaker."""

    speaker: str
    utterance_count: int = 0
    word_count: int = 0
    total_duration_ms: int = 0
    percentage: float = Field(0.0, description="Share of total speaking time, 0-100")


class Transcript(CamelModel):
    """Complete transcription output for an episode."""

    model_config = ConfigDict(frozen=True)

    text: str
    sentences: List[Sentence] = Field(default_factory=list)
    utterances: List[Utterance] = Field(default_factory=list)
    chapters: List[Chapter] = Field(default_factory=list)
    speaker_stats: List[SpeakerStat] = Field(default_factory=list)
    duration: float = Field(0.0, description="Audio duration in seconds")


# --- Analysis ---


class Highlight(CamelModel):
    """One key moment picked by the LLM, enriched with timestamp and speaker."""

    text: str
    snippet: Optional[str] = Field(None, description="Exact or near quote from the transcript")
    timestamp: str = Field("00:00", description="Formatted start time of the matched sentence")
    timestamp_seconds: int = 0
    speaker: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _accept_plain_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"text": data}
        return data


class KeyInsight(CamelModel):
    insight: str
    snippet: Optional[str] = None
    timestamp: str = "00:00"
    timestamp_seconds: int = 0
    speaker: Optional[str] = None


class WorthListening(CamelModel):
    verdict: str = ""
    reason: str = ""
    best_for: str = ""


class TLDR(CamelModel):
    quick_summary: str = ""
    key_insights: List[KeyInsight] = Field(default_factory=list)
    worth_listening: Optional[WorthListening] = None
    reading_time: Optional[int] = None


class Categories(CamelModel):
    primary: str = ""
    secondary: List[str] = Field(default_factory=list)
    industry: str = ""
    topics: List[str] = Field(default_factory=list)


class SimilarTopic(CamelModel):
    topic: str
    description: str = ""

    @model_validator(mode="before")
    @classmethod
    def _accept_plain_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"topic": data}
        return data


class AnalysisResult(CamelModel):
    """The fixed analysis schema every provider must emit as JSON."""

    title: str
    summary: str
    highlights: List[Highlight]
    key_takeaways: List[str]
    similar_topics: List[SimilarTopic]
    follow_ups: List[str]
    tags: List[str]
    tldr: Optional[TLDR] = None
    categories: Optional[Categories] = None


# Top-level keys a provider response must contain, by wire name
REQUIRED_ANALYSIS_KEYS = (
    "title",
    "summary",
    "highlights",
    "keyTakeaways",
    "similarTopics",
    "followUps",
    "tags",
)


class TokenUsage(CamelModel):
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class ProviderInvocationResult(CamelModel):
    """Outcome of one successful provider call."""

    analysis: AnalysisResult
    provider: str
    model: str
    processing_time_ms: int
    usage: TokenUsage


# --- Pipeline output ---


class PlatformInfo(CamelModel):
    platform: str = "other"
    name: str = "Podcast"
    youtube_id: Optional[str] = None
    thumbnail_url: Optional[str] = None


class LLMProviderInfo(CamelModel):
    provider: str
    model: str
    usage: TokenUsage = Field(default_factory=TokenUsage)
    cost: float = 0.0
    processing_time_ms: int = 0
    mock: bool = False


class PodcastAnalysis(CamelModel):
    """Complete response for one processed podcast URL."""

    success: bool = True
    podcast_url: str
    audio_url: str
    platform: PlatformInfo
    duration: float = 0.0
    transcript: str = Field(description="Transcript excerpt")
    transcript_length: int
    chapters: List[Chapter] = Field(default_factory=list)
    sentences: List[Sentence] = Field(default_factory=list)
    utterances: List[Utterance] = Field(default_factory=list)
    speaker_stats: List[SpeakerStat] = Field(default_factory=list)
    analysis: AnalysisResult
    llm_provider: LLMProviderInfo
    transcription_cost: float = 0.0
    processing_time: str = Field(description="Wall-clock time, e.g. '12.34s'")
    timestamp: str = Field(description="ISO-8601 completion time (UTC)")
