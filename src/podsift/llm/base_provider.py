"""
Base LLM Provider Interface

Abstract base class defining the analysis contract shared by every vendor.
Subclasses only implement the vendor request (`_complete`); prompt building,
timing, strict JSON parsing, schema validation, alignment and token
accounting live here.
"""

import json
import logging
import math
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

import httpx
from pydantic import ValidationError as PydanticValidationError

from ..config import Settings
from ..errors import (
    ConfigurationError,
    PodsiftError,
    ProviderRequestError,
    ProviderTimeoutError,
    ResponseFormatError,
)
from ..models import (
    REQUIRED_ANALYSIS_KEYS,
    AnalysisResult,
    ProviderInvocationResult,
    Sentence,
    TokenUsage,
    Utterance,
)
from .aligner import align_highlights, align_key_insights
from .prompt import build_analysis_prompt

logger = logging.getLogger(__name__)


@dataclass
class CompletionResponse:
    """Raw vendor reply. Token counts are None when the vendor omits them."""

    text: str
    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None


@dataclass
class ProviderInfo:
    """Describes a provider for listings and availability checks."""

    name: str
    display_name: str
    description: str
    cost_label: str
    requires_api_key: bool = True
    local: bool = False


def estimate_tokens(text: str) -> int:
    """Rough token count: one token per four characters."""
    return math.ceil(len(text) / 4)


def parse_analysis(raw_text: str, provider: Optional[str] = None) -> AnalysisResult:
    """
    Strictly parse a provider reply into an AnalysisResult.

    No repair is attempted: surrounding prose or code fences fail the parse.

    Raises:
        ResponseFormatError: If the text is not JSON, is not an object,
            lacks a required top-level key, or has mistyped fields
    """
    label = provider or "LLM"
    try:
        data = json.loads(raw_text)
    except (json.JSONDecodeError, TypeError) as e:
        raise ResponseFormatError(
            f"Failed to parse {label} response as JSON: response not valid JSON ({e})",
            provider=provider,
        ) from e

    if not isinstance(data, dict):
        raise ResponseFormatError(
            f"{label} response is not a JSON object", provider=provider
        )

    missing = [key for key in REQUIRED_ANALYSIS_KEYS if key not in data]
    if missing:
        raise ResponseFormatError(
            f"{label} response missing required keys: {', '.join(missing)}",
            provider=provider,
        )

    try:
        return AnalysisResult.model_validate(data)
    except PydanticValidationError as e:
        raise ResponseFormatError(
            f"{label} response does not match the analysis schema: {e.error_count()} error(s)",
            provider=provider,
        ) from e


class BaseProvider(ABC):
    """
    Abstract base class for all LLM provider adapters.

    Implementations:
    - GroqProvider: Llama 3.3 70B via Groq's OpenAI-compatible API
    - GeminiProvider: Gemini Flash via generateContent
    - ClaudeProvider: Claude via the Anthropic Messages API
    - OllamaProvider: local models via Ollama
    """

    name: str = ""

    def __init__(self, settings: Settings):
        self.settings = settings

    @property
    @abstractmethod
    def default_model(self) -> str:
        pass

    @abstractmethod
    def get_info(self) -> ProviderInfo:
        pass

    @abstractmethod
    def _complete(self, prompt: str, model: str) -> CompletionResponse:
        """
        Send one non-streaming completion request.

        Args:
            prompt: Fully rendered analysis prompt
            model: Vendor model identifier

        Returns:
            CompletionResponse with the raw reply text
        """
        pass

    def is_configured(self) -> bool:
        """True when the credentials this provider needs are present."""
        return True

    def is_available(self) -> bool:
        """True when the provider can be called right now."""
        return self.is_configured()

    def invoke(
        self,
        transcript: str,
        sentences: Sequence[Sentence] = (),
        utterances: Sequence[Utterance] = (),
        model: Optional[str] = None,
    ) -> ProviderInvocationResult:
        """
        Analyze a transcript and align the highlights.

        Args:
            transcript: Full transcript text
            sentences: Time-coded sentences used for highlight timestamps
            utterances: Speaker intervals used for attribution
            model: Optional model override

        Returns:
            ProviderInvocationResult with analysis, usage and timing

        Raises:
            ConfigurationError: Credentials missing (raised before any I/O)
            ResponseFormatError: Reply is not valid analysis JSON
        """
        if not self.is_configured():
            info = self.get_info()
            raise ConfigurationError(
                f"{info.display_name} API key is not configured", provider=self.name
            )

        model = model or self.default_model
        prompt = build_analysis_prompt(transcript)
        logger.info(f"Analyzing transcript with {self.name} ({model})...")
        logger.debug(f"Prompt size: {len(prompt)} chars")

        started = time.perf_counter()
        response = self._complete(prompt, model)
        processing_time_ms = int((time.perf_counter() - started) * 1000)

        analysis = parse_analysis(response.text, provider=self.name)
        analysis = analysis.model_copy(
            update={
                "highlights": align_highlights(analysis.highlights, sentences, utterances),
                "tldr": align_key_insights(analysis.tldr, sentences, utterances),
            }
        )

        usage = self._resolve_usage(transcript, response)
        logger.info(
            f"{self.name} analysis completed in {processing_time_ms}ms "
            f"({usage.total_tokens} tokens)"
        )

        return ProviderInvocationResult(
            analysis=analysis,
            provider=self.name,
            model=model,
            processing_time_ms=processing_time_ms,
            usage=usage,
        )

    @staticmethod
    def _resolve_usage(transcript: str, response: CompletionResponse) -> TokenUsage:
        """Vendor counters where reported, character estimates otherwise."""
        prompt_tokens = response.prompt_tokens
        if prompt_tokens is None:
            prompt_tokens = estimate_tokens(transcript)

        completion_tokens = response.completion_tokens
        if completion_tokens is None:
            completion_tokens = estimate_tokens(response.text)

        return TokenUsage(
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            total_tokens=prompt_tokens + completion_tokens,
        )

    def _connection_error(self, error: httpx.HTTPError) -> PodsiftError:
        """Map a connection failure; local providers override this."""
        return ProviderRequestError(
            f"Failed to analyze transcript with {self.name}: cannot connect ({error})",
            provider=self.name,
        )

    def _post_json(
        self,
        url: str,
        payload: Dict[str, Any],
        headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """POST a JSON body and return the decoded JSON envelope."""
        try:
            with httpx.Client(timeout=self.settings.llm_timeout_seconds) as client:
                response = client.post(url, json=payload, headers=headers)
                response.raise_for_status()
                return response.json()
        except httpx.TimeoutException as e:
            raise ProviderTimeoutError(
                f"{self.name} request timed out after {self.settings.llm_timeout_seconds}s",
                provider=self.name,
            ) from e
        except httpx.ConnectError as e:
            raise self._connection_error(e) from e
        except httpx.HTTPStatusError as e:
            raise ProviderRequestError(
                f"{self.name} API returned {e.response.status_code}: {e.response.text[:200]}",
                provider=self.name,
            ) from e
        except httpx.HTTPError as e:
            raise ProviderRequestError(
                f"Failed to analyze transcript with {self.name}: {e}", provider=self.name
            ) from e
        except ValueError as e:
            raise ResponseFormatError(
                f"{self.name} API returned a non-JSON envelope", provider=self.name
            ) from e
