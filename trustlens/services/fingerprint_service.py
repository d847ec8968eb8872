"""
Linguistic fingerprinting service.
Turns review text plus typing behavior into a flat bag of features.
"""

import re
import uuid
import hashlib
from collections import Counter
from datetime import datetime
from typing import Any, Callable, Optional

from trustlens.models.fingerprint import Fingerprint
from trustlens.schemas.review_schemas import BehaviorMetrics, as_model
from trustlens.utils.lexicons import (
    COMMON_WORDS,
    NEGATIVE_WORDS,
    POSITIVE_WORDS,
    SPAM_PHRASES,
    count_phrase_hits,
)
from trustlens.utils.logging_config import StructuredLogger
from trustlens.utils.preprocessing import normalize_text, split_sentences, tokenize_words

logger = StructuredLogger("trustlens.fingerprint")

_PUNCTUATION = re.compile(r"[.,!?;:]")
_CAPITAL = re.compile(r"[A-Z]")
_WHITESPACE = re.compile(r"\s")

MS_PER_MINUTE = 60 * 1000


def hash_text(normalized_text: str) -> str:
    """Content hash used for exact-duplicate detection."""
    return hashlib.md5(normalized_text.encode("utf-8")).hexdigest()


def _new_fingerprint_id() -> str:
    return str(uuid.uuid4())


def generate_fingerprint(
    text: str,
    behavior_metrics: Optional[Any] = None,
    *,
    now: Optional[datetime] = None,
    id_factory: Optional[Callable[[], str]] = None,
) -> Fingerprint:
    """
    Build the linguistic fingerprint of a review.

    Args:
        text: Raw review text (may be empty)
        behavior_metrics: BehaviorMetrics or mapping with writingTime,
            revisionsCount, sessionDuration, imageCount
        now: Creation instant (defaults to the local wall clock)
        id_factory: Source of the fingerprint id (defaults to uuid4)

    Returns:
        An immutable Fingerprint
    """
    raw = text or ""
    normalized = normalize_text(raw)
    words = tokenize_words(normalized)
    sentences = split_sentences(normalized)

    word_total = max(len(words), 1)
    char_total = max(len(normalized), 1)

    behavior = as_model(BehaviorMetrics, behavior_metrics) or BehaviorMetrics()

    # Word frequencies stay local to this call
    frequencies = Counter(words)
    positive = sum(1 for word in words if word in POSITIVE_WORDS)
    negative = sum(1 for word in words if word in NEGATIVE_WORDS)
    common = sum(1 for word in words if word in COMMON_WORDS)

    if behavior.writing_time:
        writing_speed = len(words) / (behavior.writing_time / MS_PER_MINUTE)
    else:
        writing_speed = 0.0

    created = now or datetime.now()

    fingerprint = Fingerprint(
        original_text=normalized,
        character_count=len(normalized),
        word_count=len(words),
        sentence_count=len(sentences),
        avg_words_per_sentence=len(words) / max(len(sentences), 1),
        avg_chars_per_word=len(_WHITESPACE.sub("", normalized)) / word_total,
        vocabulary_richness=len(frequencies) / word_total,
        common_words_ratio=common / word_total,
        sentiment_score=(positive - negative) / word_total,
        punctuation_density=len(_PUNCTUATION.findall(normalized)) / char_total,
        capitalization_ratio=len(_CAPITAL.findall(raw)) / max(len(raw), 1),
        repetition_score=max(frequencies.values(), default=0) / word_total,
        spam_indicators=count_phrase_hits(normalized, SPAM_PHRASES),
        writing_speed=writing_speed,
        revisions_count=behavior.revisions_count or 0,
        session_duration=behavior.session_duration or 0,
        image_count=behavior.image_count or 0,
        timestamp=created,
        # Python weeks start on Monday; consumers expect Sunday = 0
        day_of_week=(created.weekday() + 1) % 7,
        hour_of_day=created.hour,
        text_hash=hash_text(normalized),
        fingerprint_id=(id_factory or _new_fingerprint_id)(),
    )

    logger.debug(
        "Fingerprint generated",
        fingerprint_id=fingerprint.fingerprint_id,
        text_hash=fingerprint.text_hash,
        word_count=fingerprint.word_count,
    )
    return fingerprint
