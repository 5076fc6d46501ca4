"""
Provider Registry

Static map from provider id to adapter instance, built once at startup from
the application settings.
"""

import logging
from typing import Dict, Iterator, List, Optional, Type

from ..config import Settings
from ..errors import ValidationError
from .base_provider import BaseProvider
from .claude_provider import ClaudeProvider
from .gemini_provider import GeminiProvider
from .groq_provider import GroqProvider
from .ollama_provider import OllamaProvider

logger = logging.getLogger(__name__)

AUTO = "auto"

PROVIDER_CLASSES: Dict[str, Type[BaseProvider]] = {
    "groq": GroqProvider,
    "gemini": GeminiProvider,
    "ollama": OllamaProvider,
    "claude": ClaudeProvider,
}

# Display order for listings
PROVIDER_ORDER = (AUTO, "groq", "gemini", "ollama", "claude")

# Auto mode tries these in order; the last one is always attempted
FALLBACK_ORDER = ("groq", "gemini", "claude")


def normalize_provider_name(name: Optional[str]) -> str:
    """Lower-case and trim a provider id; empty means auto."""
    return (name or AUTO).strip().lower() or AUTO


class ProviderRegistry:
    """
    Resolves provider ids to adapters.

    Usage:
        registry = ProviderRegistry.create(settings)
        provider = registry.get("groq")
        result = provider.invoke(transcript, sentences, utterances)
    """

    def __init__(self, settings: Settings, providers: Optional[Dict[str, BaseProvider]] = None):
        self.settings = settings
        if providers is None:
            providers = {name: cls(settings) for name, cls in PROVIDER_CLASSES.items()}
        self._providers = providers

    @classmethod
    def create(cls, settings: Settings) -> "ProviderRegistry":
        registry = cls(settings)
        configured = [name for name, p in registry._providers.items() if p.is_configured()]
        logger.info(f"Provider registry ready, configured: {', '.join(configured) or 'none'}")
        return registry

    def get(self, name: str) -> BaseProvider:
        """
        Look up a provider by id.

        Raises:
            ValidationError: If the id is unknown (including "auto", which
                is not a concrete provider)
        """
        key = normalize_provider_name(name)
        try:
            return self._providers[key]
        except KeyError:
            raise ValidationError(
                f"Unknown provider: {name}. Choose one of: {', '.join(self.names())}"
            ) from None

    def names(self) -> List[str]:
        return list(self._providers)

    def __contains__(self, name: str) -> bool:
        return normalize_provider_name(name) in self._providers

    def __iter__(self) -> Iterator[BaseProvider]:
        return iter(self._providers.values())

    def fallback_candidates(self) -> List[str]:
        """Auto-chain providers that are enabled and configured, in order."""
        candidates = []
        for name in FALLBACK_ORDER:
            if name == "groq" and not self.settings.use_groq:
                continue
            if self.get(name).is_configured():
                candidates.append(name)
        return candidates

    def describe(self) -> Dict[str, dict]:
        """
        Describe every provider for listings.

        Returns:
            Dict keyed by provider id (plus "auto") with name, description,
            cost, available, and for local providers the installed models
        """
        listing: Dict[str, dict] = {}

        for name in PROVIDER_ORDER:
            if name == AUTO or name not in self._providers:
                continue
            provider = self._providers[name]
            info = provider.get_info()
            entry = {
                "name": info.display_name,
                "description": info.description,
                "cost": info.cost_label,
                "available": provider.is_available(),
                "model": provider.default_model,
            }
            if info.local:
                entry["models"] = provider.list_models() if entry["available"] else []
            listing[name] = entry

        chain_available = bool(self.fallback_candidates())
        auto_entry = {
            "name": "Auto (Best Available)",
            "description": "Tries Groq, then Gemini, then Claude",
            "cost": "Varies",
            "available": chain_available,
        }
        return {AUTO: auto_entry, **listing}
