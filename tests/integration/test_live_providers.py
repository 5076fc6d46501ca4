"""
Integration tests against live LLM providers.

These tests require real credentials in the environment (or .env):
- GROQ_API_KEY, GEMINI_API_KEY, ANTHROPIC_API_KEY
- a running Ollama server for the Ollama test

Run with: pytest tests/integration -v -m slow
"""

import pytest

from podsift.config import Settings
from podsift.llm.registry import ProviderRegistry
from podsift.models import Sentence

TRANSCRIPT = (
    "Welcome back to the show. Today we are talking about training for ultra marathons. "
    "My guest changed how she races by practising eating during long training runs. "
    "Gut training, she says, is the most underrated skill in endurance sport."
)

SENTENCES = [
    Sentence(text="Welcome back to the show.", start=0, end=2000),
    Sentence(text="Today we are talking about training for ultra marathons.", start=2000, end=6000),
    Sentence(
        text="My guest changed how she races by practising eating during long training runs.",
        start=6000,
        end=12000,
    ),
    Sentence(
        text="Gut training, she says, is the most underrated skill in endurance sport.",
        start=12000,
        end=17000,
    ),
]

settings = Settings()
registry = ProviderRegistry(settings)


@pytest.mark.slow
@pytest.mark.parametrize("name", ["groq", "gemini", "claude"])
def test_remote_provider_returns_valid_analysis(name):
    provider = registry.get(name)
    if not provider.is_configured():
        pytest.skip(f"{name} API key not configured")

    result = provider.invoke(TRANSCRIPT, SENTENCES)

    assert result.provider == name
    assert result.analysis.title
    assert result.analysis.highlights
    assert result.usage.total_tokens > 0


@pytest.mark.slow
def test_ollama_returns_valid_analysis():
    provider = registry.get("ollama")
    if not provider.check_availability():
        pytest.skip("Ollama not running")

    result = provider.invoke(TRANSCRIPT, SENTENCES)

    assert result.provider == "ollama"
    assert result.analysis.key_takeaways
