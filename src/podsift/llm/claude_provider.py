"""
Claude Provider

Anthropic Claude via the Messages API.
"""

import logging

from ..errors import ResponseFormatError
from .base_provider import BaseProvider, CompletionResponse, ProviderInfo

logger = logging.getLogger(__name__)


class ClaudeProvider(BaseProvider):
    """Analyze transcripts with Claude. Final step of the auto fallback chain."""

    name = "claude"

    @property
    def default_model(self) -> str:
        return self.settings.claude_model

    def get_info(self) -> ProviderInfo:
        return ProviderInfo(
            name=self.name,
            display_name="Anthropic",
            description="Claude 3.5 Sonnet - highest quality analysis",
            cost_label="~$0.05-0.15 per episode",
        )

    def is_configured(self) -> bool:
        return bool(self.settings.anthropic_api_key)

    def _complete(self, prompt: str, model: str) -> CompletionResponse:
        data = self._post_json(
            f"{self.settings.anthropic_base_url}/messages",
            payload={
                "model": model,
                "max_tokens": self.settings.llm_max_tokens,
                "temperature": self.settings.llm_temperature,
                "messages": [{"role": "user", "content": prompt}],
            },
            headers={
                "x-api-key": self.settings.anthropic_api_key,
                "anthropic-version": self.settings.anthropic_version,
            },
        )

        blocks = data.get("content") if isinstance(data, dict) else None
        if not blocks:
            raise ResponseFormatError("Claude response has no content", provider=self.name)
        text = "".join(block.get("text", "") for block in blocks if block.get("type") == "text")

        usage = data.get("usage") or {}
        return CompletionResponse(
            text=text,
            prompt_tokens=usage.get("input_tokens"),
            completion_tokens=usage.get("output_tokens"),
        )
