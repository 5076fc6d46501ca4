"""
Shared fixtures: settings isolated from the process environment and
small time-coded transcripts.
"""

import json

import pytest

from podsift.config import Settings
from podsift.models import Sentence, Utterance


def make_settings(**overrides) -> Settings:
    """Settings with every credential blank unless overridden; .env ignored."""
    values = {
        "groq_api_key": "",
        "gemini_api_key": "",
        "anthropic_api_key": "",
        "assemblyai_api_key": "",
        "use_groq": True,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def sentences():
    return [
        Sentence(text="Welcome back to the show everyone.", start=0, end=4000),
        Sentence(text="Today we talk about training for ultra marathons.", start=4000, end=9000),
        Sentence(text="Hello and thanks for having me on.", start=61000, end=65000),
        Sentence(text="Gut training changed how I race long distances.", start=3661000, end=3665000),
    ]


@pytest.fixture
def utterances():
    return [
        Utterance(speaker="A", start=0, end=9000, text="Welcome back..."),
        Utterance(speaker="B", start=61000, end=65000, text="Hello and thanks..."),
        Utterance(speaker="B", start=3600000, end=3700000, text="Gut training..."),
    ]


def analysis_payload(**overrides) -> dict:
    """A schema-complete analysis as an LLM would return it."""
    payload = {
        "title": "Racing Ultras",
        "summary": "A conversation about endurance racing.",
        "highlights": [
            {"text": "Guest joins", "snippet": "hello and thanks for having me", "timestamp": "9:99"},
            {"text": "Gut training", "snippet": "gut training changed how I race"},
        ],
        "keyTakeaways": ["Train the gut"],
        "similarTopics": [{"topic": "Nutrition", "description": "Fuel for racing"}],
        "followUps": ["Read the meta-analysis"],
        "tags": ["running", "nutrition"],
        "tldr": {
            "quickSummary": "Train your gut.",
            "keyInsights": [
                {"insight": "Gut training works", "snippet": "gut training changed", "timestamp": "00:00:00"}
            ],
            "worthListening": {"verdict": "recommended", "reason": "Practical", "bestFor": "Runners"},
            "readingTime": 5,
        },
        "categories": {"primary": "health", "secondary": ["Running"], "industry": "general", "topics": ["ultras"]},
    }
    payload.update(overrides)
    return payload


def analysis_json(**overrides) -> str:
    return json.dumps(analysis_payload(**overrides))
