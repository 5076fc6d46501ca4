"""
Groq Provider

Llama models served through Groq's OpenAI-compatible chat completions API.
"""

import logging

from ..errors import ResponseFormatError
from .base_provider import BaseProvider, CompletionResponse, ProviderInfo

logger = logging.getLogger(__name__)


class GroqProvider(BaseProvider):
    """Analyze transcripts with Groq (Llama 3.3 70B by default)."""

    name = "groq"

    @property
    def default_model(self) -> str:
        return self.settings.groq_model

    def get_info(self) -> ProviderInfo:
        return ProviderInfo(
            name=self.name,
            display_name="Groq",
            description="Llama 3.3 70B on Groq - ultra-fast inference",
            cost_label="~$0.01 per episode",
        )

    def is_configured(self) -> bool:
        return bool(self.settings.groq_api_key)

    def _complete(self, prompt: str, model: str) -> CompletionResponse:
        data = self._post_json(
            f"{self.settings.groq_base_url}/chat/completions",
            payload={
                "model": model,
                "messages": [{"role": "user", "content": prompt}],
                "temperature": self.settings.llm_temperature,
                "max_tokens": self.settings.llm_max_tokens,
                "response_format": {"type": "json_object"},
            },
            headers={"Authorization": f"Bearer {self.settings.groq_api_key}"},
        )

        try:
            text = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise ResponseFormatError(
                "Groq response has no message content", provider=self.name
            ) from e

        usage = data.get("usage") or {}
        return CompletionResponse(
            text=text,
            prompt_tokens=usage.get("prompt_tokens"),
            completion_tokens=usage.get("completion_tokens"),
        )
