"""
Lexicon tables used as evidence by the fingerprint extractor and detectors.
Module-level immutable constants; nothing here is mutated at runtime.
"""

from typing import FrozenSet, Tuple

COMMON_WORDS: FrozenSet[str] = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of",
    "with", "by", "is", "are", "was", "were", "be", "been", "have", "has",
    "had", "do", "does", "did", "will", "would", "could", "should", "may",
    "might", "can", "this", "that", "these", "those", "i", "you", "he", "she",
    "it", "we", "they", "me", "him", "her", "us", "them",
})

POSITIVE_WORDS: FrozenSet[str] = frozenset({
    "good", "great", "excellent", "amazing", "wonderful", "fantastic",
    "awesome", "love", "perfect", "best", "nice", "beautiful", "quality",
    "recommend", "happy", "satisfied", "pleased", "impressed",
})

NEGATIVE_WORDS: FrozenSet[str] = frozenset({
    "bad", "terrible", "awful", "horrible", "worst", "hate", "disappointed",
    "poor", "cheap", "fake", "broken", "useless", "waste", "regret", "angry",
    "frustrated",
})

# Matched by substring containment, so multi-word phrases are fine
SPAM_PHRASES: FrozenSet[str] = frozenset({
    "buy now", "click here", "limited time", "special offer", "guaranteed",
    "free shipping", "discount", "sale", "promotion",
})

# ---------- Gibberish ----------

KEYBOARD_SMASH_PATTERNS: Tuple[str, ...] = (
    "qwerty", "asdfgh", "zxcvbn", "qazwsx", "edcrfv", "tgbyhn", "ujmikl", "oplp;",
)

# ---------- AI-generated prose ----------

DESCRIPTIVE_PHRASES: Tuple[str, ...] = (
    "truly stands out", "exactly what you want", "cooks up beautifully",
    "fills the kitchen with", "turns out perfect every time",
    "definitely a", "highly recommended", "lives up to its name",
    "quality", "essential", "pantry essential", "goes a long way",
    "perfect every time", "beautifully", "lovely", "nutty aroma",
)

POSITIVE_ADJECTIVES: Tuple[str, ...] = (
    "perfect", "beautiful", "lovely", "excellent", "amazing", "fantastic",
    "wonderful", "outstanding", "superb", "magnificent", "splendid",
    "fragrant", "fluffy", "nutty", "aromatic",
)

MARKETING_PHRASES: Tuple[str, ...] = (
    "definitely", "highly recommended", "essential", "must-have",
    "game-changer", "worth every penny", "best investment",
    "pantry essential", "lives up to its name",
)

ENTHUSIASTIC_PHRASES: Tuple[str, ...] = (
    "absolutely love", "completely satisfied", "beyond expectations",
    "couldn't be happier", "exceeded all expectations", "perfect in every way",
    "definitely a pantry essential", "highly recommended",
)


def count_phrase_hits(text: str, phrases) -> int:
    """Number of distinct phrases contained in the (lower-cased) text."""
    lowered = (text or "").lower()
    return sum(1 for phrase in phrases if phrase in lowered)
