"""
Extractive summarizer: frequency/position/length sentence scoring.
Deterministic and dependency-free; used whenever the generative path is skipped or fails.
"""
from __future__ import annotations

import logging
import math
import re
from collections import Counter

from docsummary.summarizer.errors import NoSentencesError
from docsummary.summarizer.types import LengthTier, ScoredSentence

logger = logging.getLogger(__name__)

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_TOKEN_SPLIT_RE = re.compile(r"\W+")

MIN_SENTENCE_CHARS = 20
MIN_SENTENCE_TOKENS = 3
MIN_WORD_CHARS = 3

# tier -> (ratio of sentences, floor, cap)
TIER_TARGETS: dict[LengthTier, tuple[float, int, int]] = {
    LengthTier.SHORT: (0.10, 2, 4),
    LengthTier.MEDIUM: (0.20, 4, 8),
    LengthTier.LONG: (0.30, 8, 15),
}

POSITION_WEIGHT = 10.0
LENGTH_WEIGHT = 5.0
IDEAL_SENTENCE_WORDS = 15


def split_sentences(text: str) -> list[str]:
    """Split on runs of . ! ? and keep trimmed fragments that look like real sentences.

    A fragment is kept only if it is longer than 20 characters and has more than
    3 space-delimited tokens; headers and stray fragments are dropped.
    """
    out: list[str] = []
    for fragment in _SENTENCE_SPLIT_RE.split(text):
        trimmed = fragment.strip()
        if len(trimmed) > MIN_SENTENCE_CHARS and len(trimmed.split(" ")) > MIN_SENTENCE_TOKENS:
            out.append(trimmed)
    return out


def content_words(text: str) -> list[str]:
    """Lower-cased tokens longer than 3 characters. Stands in for a stop-word list."""
    return [w for w in _TOKEN_SPLIT_RE.split(text.lower()) if len(w) > MIN_WORD_CHARS]


def word_frequencies(text: str) -> Counter[str]:
    return Counter(content_words(text))


def target_sentence_count(total: int, tier: LengthTier) -> int:
    """clamp(ceil(total * ratio), floor, cap) for the tier."""
    ratio, floor, cap = TIER_TARGETS[LengthTier.coerce(tier)]
    return min(cap, max(floor, math.ceil(total * ratio)))


def frequency_score(words: list[str], frequencies: Counter[str]) -> float:
    return float(sum(frequencies.get(w, 0) for w in words))


def position_score(index: int, total: int) -> float:
    """Lead bias: 10 for the first sentence, falling linearly towards 0."""
    return (total - index) / total * POSITION_WEIGHT


def length_score(word_count: int) -> float:
    """Peaks at 15 words, 0 at 0 and at 30+ words."""
    return max(0.0, 1 - abs(word_count - IDEAL_SENTENCE_WORDS) / IDEAL_SENTENCE_WORDS) * LENGTH_WEIGHT


def score_sentences(sentences: list[str], frequencies: Counter[str]) -> list[ScoredSentence]:
    """Score each sentence; the sum of sub-scores is normalized by its content-word count."""
    total = len(sentences)
    scored: list[ScoredSentence] = []
    for index, sentence in enumerate(sentences):
        words = content_words(sentence)
        freq = frequency_score(words, frequencies)
        pos = position_score(index, total)
        length = length_score(len(words))
        scored.append(
            ScoredSentence(
                text=sentence,
                index=index,
                frequency=freq,
                position=pos,
                length=length,
                score=(freq + pos + length) / max(len(words), 1),
            )
        )
    return scored


def select_sentences(scored: list[ScoredSentence], count: int) -> list[ScoredSentence]:
    """Top `count` by score (stable, so ties keep source order), returned in reading order."""
    ranked = sorted(scored, key=lambda s: s.score, reverse=True)[:count]
    return sorted(ranked, key=lambda s: s.index)


def summarize_extractive(text: str, tier: LengthTier | str) -> str:
    """Build a summary from the highest-scoring original sentences.

    Raises NoSentencesError when no sentence passes the length filter.
    """
    tier = LengthTier.coerce(tier)
    sentences = split_sentences(text)
    if not sentences:
        raise NoSentencesError()

    target = target_sentence_count(len(sentences), tier)
    scored = score_sentences(sentences, word_frequencies(text))
    selected = select_sentences(scored, target)

    logger.info(
        "Extractive summary (%s): %d of %d sentences selected",
        tier.value,
        len(selected),
        len(sentences),
    )
    return ". ".join(s.text for s in selected) + "."
