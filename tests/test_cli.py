"""
Tests for the command-line interface.
"""

import json
from unittest.mock import patch

from click.testing import CliRunner

from conftest import make_settings
from podsift.cli import cli
from podsift.errors import ResponseFormatError
from podsift.llm.ollama_provider import OllamaProvider
from podsift.llm.registry import ProviderRegistry
from podsift.processor import PodcastProcessor

AUDIO_URL = "https://cdn.example.com/episode-42.mp3"


def offline_result():
    return PodcastProcessor(make_settings()).process(AUDIO_URL)


class TestAnalyzeCommand:
    @patch("podsift.processor.PodcastProcessor")
    def test_prints_summary(self, mock_processor_cls):
        mock_processor_cls.return_value.process.return_value = offline_result()

        result = CliRunner().invoke(cli, ["analyze", AUDIO_URL, "--provider", "groq"])

        assert result.exit_code == 0
        assert "Podcast Episode Analysis" in result.output
        assert "2:15" in result.output
        assert "mock analysis" in result.output
        mock_processor_cls.return_value.process.assert_called_once_with(
            AUDIO_URL, provider="groq", model=None
        )

    @patch("podsift.processor.PodcastProcessor")
    def test_json_output(self, mock_processor_cls):
        mock_processor_cls.return_value.process.return_value = offline_result()

        result = CliRunner().invoke(cli, ["analyze", AUDIO_URL, "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["llmProvider"]["provider"] == "mock"

    @patch("podsift.processor.PodcastProcessor")
    def test_error_exits_nonzero(self, mock_processor_cls):
        mock_processor_cls.return_value.process.side_effect = ResponseFormatError("bad json")

        result = CliRunner().invoke(cli, ["analyze", AUDIO_URL])

        assert result.exit_code == 1
        assert "bad_response" in result.output

    @patch("podsift.processor.PodcastProcessor")
    def test_provider_defaults_to_settings(self, mock_processor_cls):
        mock_processor_cls.return_value.process.return_value = offline_result()

        result = CliRunner().invoke(cli, ["analyze", AUDIO_URL])

        assert result.exit_code == 0
        mock_processor_cls.return_value.process.assert_called_once_with(
            AUDIO_URL, provider=None, model=None
        )


class TestProvidersCommand:
    @patch.object(OllamaProvider, "check_availability", return_value=False)
    def test_lists_providers(self, mock_check):
        registry = ProviderRegistry(make_settings(gemini_api_key="gm-test"))
        with patch.object(ProviderRegistry, "create", return_value=registry):
            result = CliRunner().invoke(cli, ["providers"])

        assert result.exit_code == 0
        assert "✅ gemini" in result.output
        assert "❌ ollama" in result.output


class TestServeCommand:
    @patch("uvicorn.run")
    def test_starts_uvicorn(self, mock_run):
        result = CliRunner().invoke(cli, ["serve", "--port", "8080", "--host", "127.0.0.1"])

        assert result.exit_code == 0
        mock_run.assert_called_once_with("podsift.main:app", host="127.0.0.1", port=8080)
