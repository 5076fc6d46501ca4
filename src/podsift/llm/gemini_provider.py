"""
Gemini Provider

Google Gemini via the generateContent REST endpoint. Gemini's reply carries
no token counters we rely on, so usage is always estimated from text length.
"""

import logging

from ..errors import ResponseFormatError
from .base_provider import BaseProvider, CompletionResponse, ProviderInfo

logger = logging.getLogger(__name__)


class GeminiProvider(BaseProvider):
    """Analyze transcripts with Gemini Flash."""

    name = "gemini"

    @property
    def default_model(self) -> str:
        return self.settings.gemini_model

    def get_info(self) -> ProviderInfo:
        return ProviderInfo(
            name=self.name,
            display_name="Gemini",
            description="Gemini 2.0 Flash - free tier, large context window",
            cost_label="FREE (under 128K tokens)",
        )

    def is_configured(self) -> bool:
        return bool(self.settings.gemini_api_key)

    def _complete(self, prompt: str, model: str) -> CompletionResponse:
        data = self._post_json(
            f"{self.settings.gemini_base_url}/models/{model}:generateContent",
            payload={
                "contents": [{"role": "user", "parts": [{"text": prompt}]}],
                "generationConfig": {
                    "temperature": self.settings.llm_temperature,
                    "maxOutputTokens": self.settings.llm_max_tokens,
                    "responseMimeType": "application/json",
                },
            },
            headers={"x-goog-api-key": self.settings.gemini_api_key},
        )

        try:
            parts = data["candidates"][0]["content"]["parts"]
            text = "".join(part.get("text", "") for part in parts)
        except (KeyError, IndexError, TypeError) as e:
            # Blocked prompts come back without candidates
            feedback = data.get("promptFeedback") if isinstance(data, dict) else None
            raise ResponseFormatError(
                f"Gemini response has no candidate text (feedback: {feedback})",
                provider=self.name,
            ) from e

        return CompletionResponse(text=text)
