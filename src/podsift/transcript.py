"""
Transcript Extraction

AssemblyAI client: submit an audio URL, poll the job until it finishes, and
collect sentences, utterances and chapters as a Transcript.
"""

import logging
import time
from typing import Any, Callable, Dict, List, Optional

import httpx
from tenacity import (
    RetryCallState,
    RetryError,
    Retrying,
    retry_if_result,
    stop_before_delay,
    wait_exponential,
)

from .config import Settings
from .errors import ConfigurationError, TranscriptionError, TranscriptionTimeoutError
from .models import Chapter, Sentence, SpeakerStat, Transcript, Utterance

logger = logging.getLogger(__name__)

FINISHED_STATUSES = ("completed", "error")


def compute_speaker_stats(utterances: List[Utterance]) -> List[SpeakerStat]:
    """
    Aggregate talk time per speaker, in order of first appearance.

    Args:
        utterances: Speaker-attributed intervals

    Returns:
        One SpeakerStat per speaker; percentages share of total talk time
    """
    totals: Dict[str, Dict[str, int]] = {}
    for utterance in utterances:
        stats = totals.setdefault(
            utterance.speaker, {"utterances": 0, "words": 0, "duration": 0}
        )
        stats["utterances"] += 1
        stats["words"] += len(utterance.text.split())
        stats["duration"] += max(0, utterance.end - utterance.start)

    total_duration = sum(s["duration"] for s in totals.values())

    return [
        SpeakerStat(
            speaker=speaker,
            utterance_count=stats["utterances"],
            word_count=stats["words"],
            total_duration_ms=stats["duration"],
            percentage=round(100 * stats["duration"] / total_duration, 1) if total_duration else 0.0,
        )
        for speaker, stats in totals.items()
    ]


def build_transcript(job: Dict[str, Any], sentences: List[Dict[str, Any]]) -> Transcript:
    """Assemble a Transcript from a completed job and its sentences payload."""
    utterances = [Utterance.model_validate(u) for u in job.get("utterances") or []]
    return Transcript(
        text=job.get("text") or "",
        sentences=[Sentence.model_validate(s) for s in sentences],
        utterances=utterances,
        chapters=[Chapter.model_validate(c) for c in job.get("chapters") or []],
        speaker_stats=compute_speaker_stats(utterances),
        duration=job.get("audio_duration") or 0,
    )


def _is_pending(job: Dict[str, Any]) -> bool:
    return job.get("status") not in FINISHED_STATUSES


def _log_poll(retry_state: RetryCallState) -> None:
    if retry_state.attempt_number % 10 == 0:
        logger.info(f"Still transcribing... ({retry_state.seconds_since_start:.0f}s elapsed)")


class AssemblyAITranscriber:
    """
    Transcribe audio URLs with AssemblyAI.

    Polling waits grow exponentially from `transcript_poll_interval_seconds`
    by `transcript_poll_backoff`, capped at `transcript_poll_max_interval_seconds`,
    and give up once the next wait would pass `transcript_timeout_seconds`
    of wall-clock time, so polling never sleeps beyond the deadline.
    """

    def __init__(self, settings: Settings, sleep: Optional[Callable[[float], None]] = None):
        self.settings = settings
        self._sleep = sleep or time.sleep

    def is_configured(self) -> bool:
        return bool(self.settings.assemblyai_api_key)

    def transcribe(self, audio_url: str) -> Transcript:
        """
        Transcribe one audio URL.

        Raises:
            ConfigurationError: No AssemblyAI key (raised before any I/O)
            TranscriptionError: The service rejected or failed the job
            TranscriptionTimeoutError: Polling exceeded the deadline
        """
        if not self.is_configured():
            raise ConfigurationError("AssemblyAI API key is not configured")

        with httpx.Client(
            base_url=self.settings.assemblyai_base_url,
            headers={"authorization": self.settings.assemblyai_api_key},
            timeout=self.settings.transcript_request_timeout_seconds,
        ) as client:
            logger.info("Submitting audio for transcription...")
            submitted = self._request(
                client,
                "POST",
                "/transcript",
                json={
                    "audio_url": audio_url,
                    "auto_chapters": True,
                    "speaker_labels": True,
                    "punctuate": True,
                    "format_text": True,
                },
            )
            transcript_id = submitted["id"]
            logger.info(f"Transcription started with ID: {transcript_id}")

            job = self._wait_for_completion(client, transcript_id)
            logger.info("Transcription completed successfully")

            sentences = self._request(client, "GET", f"/transcript/{transcript_id}/sentences")

        transcript = build_transcript(job, sentences.get("sentences") or [])
        logger.info(
            f"Transcript ready: {len(transcript.text)} chars, {len(transcript.sentences)} sentences, "
            f"{len(transcript.speaker_stats)} speakers"
        )
        return transcript

    def _wait_for_completion(self, client: httpx.Client, transcript_id: str) -> Dict[str, Any]:
        retryer = Retrying(
            retry=retry_if_result(_is_pending),
            stop=stop_before_delay(self.settings.transcript_timeout_seconds),
            wait=wait_exponential(
                multiplier=self.settings.transcript_poll_interval_seconds,
                exp_base=self.settings.transcript_poll_backoff,
                max=self.settings.transcript_poll_max_interval_seconds,
            ),
            sleep=self._sleep,
            before_sleep=_log_poll,
        )

        try:
            job = retryer(self._request, client, "GET", f"/transcript/{transcript_id}")
        except RetryError:
            raise TranscriptionTimeoutError(
                f"Transcription timed out after {self.settings.transcript_timeout_seconds:.0f}s"
            ) from None

        if job.get("status") == "error":
            raise TranscriptionError(f"Transcription failed: {job.get('error')}")
        return job

    @staticmethod
    def _request(client: httpx.Client, method: str, path: str, **kwargs) -> Dict[str, Any]:
        try:
            response = client.request(method, path, **kwargs)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise TranscriptionError(
                f"Failed to extract transcript: AssemblyAI returned "
                f"{e.response.status_code}: {e.response.text[:200]}"
            ) from e
        except httpx.HTTPError as e:
            raise TranscriptionError(f"Failed to extract transcript: {e}") from e
        except ValueError as e:
            raise TranscriptionError("Failed to extract transcript: response not valid JSON") from e
