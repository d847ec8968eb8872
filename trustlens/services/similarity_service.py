from collections.abc import Mapping
from typing import Any, Optional, Tuple

STYLE_FEATURES: Tuple[str, ...] = (
    "vocabulary_richness",
    "common_words_ratio",
    "sentiment_score",
    "punctuation_density",
    "capitalization_ratio",
    "avg_words_per_sentence",
    "avg_chars_per_word",
    "writing_speed",
)


def _feature(fingerprint: Any, name: str) -> Optional[float]:
    if isinstance(fingerprint, Mapping):
        return fingerprint.get(name)
    return getattr(fingerprint, name, None)


def compare_fingerprints(first: Any, second: Any) -> float:
    """
    Writing-style similarity of two fingerprints in [0, 1].

    Averages the per-feature closeness over every style feature both sides
    carry; returns 0.0 when none are comparable.
    """
    total = 0.0
    comparable = 0

    for name in STYLE_FEATURES:
        a = _feature(first, name)
        b = _feature(second, name)
        if a is None or b is None:
            continue
        closeness = 1 - abs(a - b) / max(a, b, 0.01)
        total += max(0.0, closeness)
        comparable += 1

    return total / comparable if comparable else 0.0
