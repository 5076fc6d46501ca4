"""
Analysis Orchestrator

Resolves one analysis request to one provider call, or walks the auto
fallback chain (Groq -> Gemini -> Claude) one provider at a time.
"""

import logging
from typing import List, Optional, Sequence

from ..config import Settings
from ..models import ProviderInvocationResult, Sentence, Utterance
from .registry import AUTO, FALLBACK_ORDER, ProviderRegistry, normalize_provider_name

logger = logging.getLogger(__name__)


class AnalysisOrchestrator:
    """
    Select a provider and run the analysis.

    An explicit provider is invoked exactly once and its errors propagate.
    In auto mode every step but the last logs and swallows its error; the
    final Claude step is attempted without a credential gate so a missing
    key surfaces as ConfigurationError to the caller.
    """

    def __init__(self, settings: Settings, registry: Optional[ProviderRegistry] = None):
        self.settings = settings
        self.registry = registry or ProviderRegistry.create(settings)

    def analyze(
        self,
        provider_choice: Optional[str],
        transcript: str,
        sentences: Sequence[Sentence] = (),
        utterances: Sequence[Utterance] = (),
        model: Optional[str] = None,
    ) -> ProviderInvocationResult:
        """
        Analyze a transcript with the chosen provider.

        Args:
            provider_choice: "auto" or a provider id (groq, gemini, ollama, claude)
            transcript: Full transcript text
            sentences: Time-coded sentences for highlight alignment
            utterances: Speaker intervals for attribution
            model: Model override, honoured for explicit providers only

        Returns:
            ProviderInvocationResult from the provider that succeeded

        Raises:
            ValidationError: Unknown provider id
            PodsiftError: Any provider failure in explicit mode, or the
                final step's failure in auto mode
        """
        choice = normalize_provider_name(provider_choice)

        if choice == AUTO:
            if model:
                logger.info(f"Ignoring model override '{model}' in auto mode")
            return self.analyze_with_fallback(transcript, sentences, utterances)

        provider = self.registry.get(choice)
        return provider.invoke(transcript, sentences, utterances, model=model)

    def fallback_chain(self) -> List[str]:
        """Providers auto mode will attempt, in order."""
        final = FALLBACK_ORDER[-1]
        chain = [name for name in self.registry.fallback_candidates() if name != final]
        chain.append(final)
        return chain

    def analyze_with_fallback(
        self,
        transcript: str,
        sentences: Sequence[Sentence] = (),
        utterances: Sequence[Utterance] = (),
    ) -> ProviderInvocationResult:
        *optional, final = self.fallback_chain()

        for name in optional:
            try:
                return self.registry.get(name).invoke(transcript, sentences, utterances)
            except Exception as e:
                logger.warning(f"{name} analysis failed, falling back: {e}")

        logger.info(f"Using {final} for analysis")
        return self.registry.get(final).invoke(transcript, sentences, utterances)
