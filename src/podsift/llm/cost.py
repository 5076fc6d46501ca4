"""
Usage Cost Calculation

Pure functions from (provider, token usage) to USD. Nothing here is stored;
costs are recomputed on demand from the pricing table.
"""

from typing import Callable, Dict

from ..models import TokenUsage

# USD per 1M tokens
GROQ_INPUT_PER_1M = 0.59
GROQ_OUTPUT_PER_1M = 0.79
CLAUDE_INPUT_PER_1M = 3.00
CLAUDE_OUTPUT_PER_1M = 15.00
GEMINI_INPUT_PER_1M = 0.075
GEMINI_OUTPUT_PER_1M = 0.30
GEMINI_FREE_TOKEN_LIMIT = 128_000

# AssemblyAI, USD per second of audio
TRANSCRIPTION_PER_SECOND = 0.00025


def _token_cost(usage: TokenUsage, input_per_1m: float, output_per_1m: float) -> float:
    input_cost = (usage.prompt_tokens / 1_000_000) * input_per_1m
    output_cost = (usage.completion_tokens / 1_000_000) * output_per_1m
    return input_cost + output_cost


def calculate_groq_cost(usage: TokenUsage) -> float:
    return _token_cost(usage, GROQ_INPUT_PER_1M, GROQ_OUTPUT_PER_1M)


def calculate_claude_cost(usage: TokenUsage) -> float:
    return _token_cost(usage, CLAUDE_INPUT_PER_1M, CLAUDE_OUTPUT_PER_1M)


def calculate_gemini_cost(usage: TokenUsage) -> float:
    """Gemini is free below the token limit, billed per token above it."""
    if usage.total_tokens < GEMINI_FREE_TOKEN_LIMIT:
        return 0.0
    return _token_cost(usage, GEMINI_INPUT_PER_1M, GEMINI_OUTPUT_PER_1M)


def calculate_ollama_cost(usage: TokenUsage) -> float:
    """Local processing is always free."""
    return 0.0


COST_FUNCTIONS: Dict[str, Callable[[TokenUsage], float]] = {
    "groq": calculate_groq_cost,
    "claude": calculate_claude_cost,
    "gemini": calculate_gemini_cost,
    "ollama": calculate_ollama_cost,
}


def calculate_cost(provider: str, usage: TokenUsage) -> float:
    """
    Cost of one provider call in USD.

    Providers without a pricing entry (such as the mock analysis) cost 0.
    """
    cost_fn = COST_FUNCTIONS.get(provider)
    if cost_fn is None:
        return 0.0
    return cost_fn(usage)


def calculate_transcription_cost(duration_seconds: float) -> float:
    """Transcription cost in USD for an audio duration."""
    if not duration_seconds or duration_seconds <= 0:
        return 0.0
    return duration_seconds * TRANSCRIPTION_PER_SECOND
