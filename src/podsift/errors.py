"""
Podsift Error Taxonomy

Every failure the pipeline can recover from (or must surface) is raised as a
PodsiftError subclass carrying an ErrorKind, so callers branch on the kind
instead of parsing messages.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    CONFIG_MISSING = "config_missing"
    SERVICE_DOWN = "service_down"
    BAD_RESPONSE = "bad_response"
    VALIDATION = "validation"
    TIMEOUT = "timeout"
    REQUEST_FAILED = "request_failed"
    TRANSCRIPTION_FAILED = "transcription_failed"


class PodsiftError(Exception):
    """Base class for all pipeline errors."""

    kind: ErrorKind = ErrorKind.REQUEST_FAILED

    def __init__(self, message: str, provider: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.provider = provider


class ConfigurationError(PodsiftError):
    """A required credential is not configured."""

    kind = ErrorKind.CONFIG_MISSING


class ServiceUnavailableError(PodsiftError):
    """A local service (e.g. Ollama) is not running or refused the connection."""

    kind = ErrorKind.SERVICE_DOWN


class ResponseFormatError(PodsiftError):
    """A provider returned non-JSON or a payload missing required fields."""

    kind = ErrorKind.BAD_RESPONSE


class ValidationError(PodsiftError):
    """Caller input was rejected (short transcript, bad URL, unknown provider)."""

    kind = ErrorKind.VALIDATION


class PodsiftTimeoutError(PodsiftError):
    kind = ErrorKind.TIMEOUT


class TranscriptionTimeoutError(PodsiftTimeoutError):
    """Transcript polling exceeded its wall-clock ceiling."""


class ProviderTimeoutError(PodsiftTimeoutError):
    """An LLM request exceeded its timeout."""


class ProviderRequestError(PodsiftError):
    """An LLM vendor request failed at the HTTP level."""

    kind = ErrorKind.REQUEST_FAILED


class TranscriptionError(PodsiftError):
    """The transcription service reported a failure."""

    kind = ErrorKind.TRANSCRIPTION_FAILED


# Kinds the pipeline converts into demo/mock output instead of failing
RECOVERABLE_KINDS = frozenset({ErrorKind.CONFIG_MISSING, ErrorKind.SERVICE_DOWN})
