"""
Snippet-to-Timestamp Alignment Module

Maps LLM-chosen quotes back onto the time-coded transcript and attributes
them to the speaker talking at that moment. LLM snippets are not guaranteed
verbatim, so matching is two-tier: exact containment first, then word
overlap above a fixed floor.
"""

import logging
from typing import List, NamedTuple, Optional, Sequence

from ..models import Highlight, KeyInsight, Sentence, TLDR, Utterance

logger = logging.getLogger(__name__)

# Minimum word-overlap score (exclusive) for an approximate match
MATCH_THRESHOLD = 0.30

ZERO_TIMESTAMP = "00:00"


class TimestampMatch(NamedTuple):
    """Integer seconds plus display form of a transcript position."""

    seconds: int
    formatted: str


NO_MATCH = TimestampMatch(0, ZERO_TIMESTAMP)


def format_timestamp(ms: float) -> TimestampMatch:
    """
    Convert milliseconds to whole seconds and a display string.

    Durations under an hour render as M:SS, longer ones as H:MM:SS.
    """
    total_seconds = int(ms // 1000)
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)

    if hours > 0:
        return TimestampMatch(total_seconds, f"{hours}:{minutes:02d}:{seconds:02d}")
    return TimestampMatch(total_seconds, f"{minutes}:{seconds:02d}")


def word_overlap_score(snippet: str, sentence: str) -> float:
    """
    Fraction of snippet tokens that also appear in the sentence.

    Snippet tokens are not deduplicated: a repeated word counts once per
    occurrence, both in the numerator and the denominator.
    """
    snippet_words = snippet.split()
    if not snippet_words:
        return 0.0

    sentence_words = set(sentence.split())
    matches = sum(1 for word in snippet_words if word in sentence_words)
    return matches / len(snippet_words)


def find_timestamp_for_text(
    snippet: Optional[str], sentences: Sequence[Sentence]
) -> TimestampMatch:
    """
    Find the start time of the sentence that best matches a snippet.

    Args:
        snippet: Quote or paraphrase produced by the LLM
        sentences: Transcript sentences in original order

    Returns:
        TimestampMatch of the winning sentence, or NO_MATCH
    """
    if not snippet or not sentences:
        return NO_MATCH

    needle = snippet.lower().strip()
    if not needle:
        return NO_MATCH

    # First containment match wins outright
    for sentence in sentences:
        if needle in sentence.text.lower().strip():
            return format_timestamp(sentence.start)

    best_sentence = None
    best_score = 0.0
    for sentence in sentences:
        score = word_overlap_score(needle, sentence.text.lower().strip())
        if score > best_score:
            best_score = score
            best_sentence = sentence

    if best_sentence is None or best_score <= MATCH_THRESHOLD:
        logger.debug(f"No sentence matched snippet (best score {best_score:.2f}): {needle[:60]}")
        return NO_MATCH

    return format_timestamp(best_sentence.start)


def find_speaker_at_timestamp(
    timestamp_ms: float, utterances: Sequence[Utterance]
) -> Optional[str]:
    """
    Return the speaker whose utterance contains the timestamp.

    Bounds are inclusive. Timestamps in a gap between utterances yield None.
    """
    for utterance in utterances:
        if utterance.start <= timestamp_ms <= utterance.end:
            return utterance.speaker
    return None


def align_highlights(
    highlights: Sequence[Highlight],
    sentences: Sequence[Sentence],
    utterances: Sequence[Utterance],
) -> List[Highlight]:
    """
    Attach timestamp and speaker to each highlight.

    Any timestamp or speaker the LLM supplied is overwritten.
    """
    aligned = []
    for highlight in highlights:
        match = find_timestamp_for_text(highlight.snippet or highlight.text, sentences)
        speaker = find_speaker_at_timestamp(match.seconds * 1000, utterances)
        aligned.append(
            highlight.model_copy(
                update={
                    "timestamp": match.formatted,
                    "timestamp_seconds": match.seconds,
                    "speaker": speaker,
                }
            )
        )

    matched = sum(1 for h in aligned if h.timestamp != ZERO_TIMESTAMP)
    logger.info(f"Aligned {matched}/{len(aligned)} highlights to transcript sentences")
    return aligned


def align_key_insights(
    tldr: Optional[TLDR],
    sentences: Sequence[Sentence],
    utterances: Sequence[Utterance],
) -> Optional[TLDR]:
    """Map the TL;DR key insights' placeholder timestamps onto the transcript."""
    if tldr is None:
        return None

    insights: List[KeyInsight] = []
    for insight in tldr.key_insights:
        match = find_timestamp_for_text(insight.snippet or insight.insight, sentences)
        insights.append(
            insight.model_copy(
                update={
                    "timestamp": match.formatted,
                    "timestamp_seconds": match.seconds,
                    "speaker": find_speaker_at_timestamp(match.seconds * 1000, utterances),
                }
            )
        )
    return tldr.model_copy(update={"key_insights": insights})
