"""
Podsift LLM Analysis

Provider adapters, fallback orchestration, cost accounting, and the
snippet-to-timestamp aligner that enriches LLM highlights.
"""

from .aligner import (
    TimestampMatch,
    align_highlights,
    find_speaker_at_timestamp,
    find_timestamp_for_text,
    format_timestamp,
)
from .base_provider import BaseProvider, CompletionResponse, ProviderInfo, parse_analysis
from .claude_provider import ClaudeProvider
from .cost import calculate_cost, calculate_transcription_cost
from .gemini_provider import GeminiProvider
from .groq_provider import GroqProvider
from .mock import generate_mock_analysis
from .ollama_provider import OllamaProvider
from .orchestrator import AnalysisOrchestrator
from .prompt import build_analysis_prompt
from .registry import AUTO, ProviderRegistry

__all__ = [
    # Aligner
    "TimestampMatch",
    "align_highlights",
    "find_speaker_at_timestamp",
    "find_timestamp_for_text",
    "format_timestamp",
    # Providers
    "BaseProvider",
    "CompletionResponse",
    "ProviderInfo",
    "parse_analysis",
    "GroqProvider",
    "GeminiProvider",
    "ClaudeProvider",
    "OllamaProvider",
    "ProviderRegistry",
    "AUTO",
    # Orchestration
    "AnalysisOrchestrator",
    "build_analysis_prompt",
    "generate_mock_analysis",
    # Cost
    "calculate_cost",
    "calculate_transcription_cost",
]
