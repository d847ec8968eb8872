"""
AI-generated review detection.
Phrase-count heuristics for the polished, marketing-flavored prose that
language models tend to produce in product reviews.
"""

from collections import Counter
from typing import Callable, Tuple

from trustlens.models.fingerprint import DetectorVerdict, Fingerprint
from trustlens.utils.lexicons import (
    DESCRIPTIVE_PHRASES,
    ENTHUSIASTIC_PHRASES,
    MARKETING_PHRASES,
    POSITIVE_ADJECTIVES,
    count_phrase_hits,
)
from trustlens.utils.logging_config import StructuredLogger
from trustlens.utils.preprocessing import split_sentences

logger = StructuredLogger("trustlens.ai_content")


def _phrase_rule(phrases: Tuple[str, ...], minimum: int) -> Callable[[Fingerprint], bool]:
    def rule(fingerprint: Fingerprint) -> bool:
        return count_phrase_hits(fingerprint.original_text, phrases) >= minimum
    return rule


def _has_repetitive_starters(fingerprint: Fingerprint) -> bool:
    sentences = split_sentences(fingerprint.original_text)
    if len(sentences) < 3:
        return False
    starters = Counter(s.strip().lower().split(" ")[0] for s in sentences)
    return max(starters.values()) >= 3


AIRule = Tuple[Callable[[Fingerprint], bool], str]

AI_CONTENT_RULES: Tuple[AIRule, ...] = (
    (_phrase_rule(DESCRIPTIVE_PHRASES, 3), "Overly descriptive marketing language detected"),
    (_phrase_rule(POSITIVE_ADJECTIVES, 4), "Excessive positive adjectives detected"),
    (_phrase_rule(MARKETING_PHRASES, 2), "Marketing language patterns detected"),
    (_has_repetitive_starters, "Repetitive sentence structures detected"),
    (_phrase_rule(ENTHUSIASTIC_PHRASES, 2), "Overly enthusiastic language detected"),
)


def detect_ai_generated(fingerprint: Fingerprint) -> DetectorVerdict:
    """Check the review for AI-generated writing patterns; first match wins."""
    for predicate, reason in AI_CONTENT_RULES:
        if predicate(fingerprint):
            logger.debug(
                "AI content rule fired",
                reason=reason,
                fingerprint_id=fingerprint.fingerprint_id,
            )
            return DetectorVerdict(matched=True, reason=reason)

    return DetectorVerdict(matched=False)
