"""
Gibberish detection.
Ordered rules over a fingerprint; the first rule that fires decides the verdict.
"""

import re
from collections import Counter
from typing import Callable, Tuple

from trustlens.models.fingerprint import DetectorVerdict, Fingerprint
from trustlens.utils.lexicons import KEYBOARD_SMASH_PATTERNS
from trustlens.utils.logging_config import StructuredLogger

logger = StructuredLogger("trustlens.gibberish")

MIN_TEXT_LENGTH = 10

_CHAR_RUN = re.compile(r"([a-zA-Z])\1{4,}")
_NON_ENGLISH = re.compile(r"[a-zA-Z\s.,!?]")
_ALTERNATING = re.compile(r"([bcdfghjklmnpqrstvwxyz][aeiou]){6,}", re.I)
_RANDOM_SEQUENCE = re.compile(r"[a-zA-Z]{3,}[bcdfghjklmnpqrstvwxyz]{5,}")


def _text(fingerprint: Fingerprint) -> str:
    return (fingerprint.original_text or "").lower()


def _has_character_run(fingerprint: Fingerprint) -> bool:
    return _CHAR_RUN.search(fingerprint.original_text or "") is not None


def _has_keyboard_smash(fingerprint: Fingerprint) -> bool:
    text = _text(fingerprint)
    return any(pattern in text for pattern in KEYBOARD_SMASH_PATTERNS)


def _has_low_diversity(fingerprint: Fingerprint) -> bool:
    return fingerprint.word_count > 10 and fingerprint.vocabulary_richness < 0.15


def _has_dominant_word(fingerprint: Fingerprint) -> bool:
    words = _text(fingerprint).split()
    counts = Counter(word for word in words if len(word) > 2)
    if not counts:
        return False
    return max(counts.values()) > len(words) * 0.5


def _has_foreign_characters(fingerprint: Fingerprint) -> bool:
    text = fingerprint.original_text or ""
    return len(_NON_ENGLISH.sub("", text)) / len(text) > 0.5


def _has_alternating_pattern(fingerprint: Fingerprint) -> bool:
    return _ALTERNATING.search(_text(fingerprint)) is not None


def _has_random_sequence(fingerprint: Fingerprint) -> bool:
    return _RANDOM_SEQUENCE.search(_text(fingerprint)) is not None


GibberishRule = Tuple[Callable[[Fingerprint], bool], str]

# Order matters: stricter signals first, only one reason is ever reported
GIBBERISH_RULES: Tuple[GibberishRule, ...] = (
    (_has_character_run, "Excessive character repetition detected"),
    (_has_keyboard_smash, "Keyboard smashing pattern detected"),
    (_has_low_diversity, "Extremely low vocabulary diversity for text length"),
    (_has_dominant_word, "Excessive repetition of the same word"),
    (_has_foreign_characters, "High ratio of non-English characters"),
    (_has_alternating_pattern, "Suspicious alternating consonant-vowel pattern"),
    (_has_random_sequence, "Random character sequence pattern detected"),
)


def detect_gibberish(fingerprint: Fingerprint) -> DetectorVerdict:
    """Check whether the review text looks like gibberish rather than prose."""
    if len(fingerprint.original_text or "") < MIN_TEXT_LENGTH:
        return DetectorVerdict(matched=False)

    for predicate, reason in GIBBERISH_RULES:
        if predicate(fingerprint):
            logger.debug(
                "Gibberish rule fired",
                rule=predicate.__name__,
                fingerprint_id=fingerprint.fingerprint_id,
            )
            return DetectorVerdict(matched=True, reason=reason)

    return DetectorVerdict(matched=False)
