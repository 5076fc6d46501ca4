"""
Ollama Provider

Local models through an Ollama server. No credential is needed, so the
provider is always "configured"; an unreachable server is reported as
ServiceUnavailableError. Ollama is never part of the auto fallback chain.
"""

import logging
from typing import List

import httpx

from ..errors import PodsiftError, ResponseFormatError, ServiceUnavailableError
from .base_provider import BaseProvider, CompletionResponse, ProviderInfo

logger = logging.getLogger(__name__)


class OllamaProvider(BaseProvider):
    """Analyze transcripts with a local Ollama model."""

    name = "ollama"

    @property
    def base_url(self) -> str:
        return self.settings.ollama_url.rstrip("/")

    @property
    def default_model(self) -> str:
        return self.settings.ollama_model

    def get_info(self) -> ProviderInfo:
        return ProviderInfo(
            name=self.name,
            display_name="Ollama",
            description="Local models - private, runs on your own hardware",
            cost_label="FREE (local)",
            requires_api_key=False,
            local=True,
        )

    def is_available(self) -> bool:
        return self.check_availability()

    def _connection_error(self, error: httpx.HTTPError) -> PodsiftError:
        logger.warning(f"Cannot connect to Ollama at {self.base_url}")
        return ServiceUnavailableError(
            "Ollama is not running. Please start Ollama with: ollama serve",
            provider=self.name,
        )

    def _complete(self, prompt: str, model: str) -> CompletionResponse:
        data = self._post_json(
            f"{self.base_url}/api/generate",
            payload={
                "model": model,
                "prompt": prompt,
                "stream": False,
                "format": "json",
                "options": {
                    "temperature": self.settings.llm_temperature,
                    "num_predict": self.settings.llm_max_tokens,
                },
            },
        )

        text = data.get("response") if isinstance(data, dict) else None
        if text is None:
            raise ResponseFormatError("Ollama response has no 'response' field", provider=self.name)

        # Ollama omits or zeroes the counters when it served from cache
        return CompletionResponse(
            text=text,
            prompt_tokens=data.get("prompt_eval_count") or None,
            completion_tokens=data.get("eval_count") or None,
        )

    def check_availability(self, timeout: float = 2.0) -> bool:
        """Check whether the Ollama server answers."""
        try:
            with httpx.Client(timeout=timeout) as client:
                response = client.get(f"{self.base_url}/api/tags")
                return response.status_code == 200
        except httpx.HTTPError:
            return False

    def list_models(self) -> List[dict]:
        """List models installed on the Ollama server, or [] if unreachable."""
        try:
            with httpx.Client(timeout=5.0) as client:
                response = client.get(f"{self.base_url}/api/tags")
                response.raise_for_status()
                return response.json().get("models", [])
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Failed to get Ollama models: {e}")
            return []
