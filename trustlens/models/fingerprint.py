from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Fingerprint:
    """Linguistic and behavioral features extracted from one review."""
    # Lower-cased, trimmed text kept for detector re-scans
    original_text: str

    # Basic counts
    character_count: int
    word_count: int
    sentence_count: int
    avg_words_per_sentence: float
    avg_chars_per_word: float

    # Derived ratios
    vocabulary_richness: float
    common_words_ratio: float
    sentiment_score: float
    punctuation_density: float
    capitalization_ratio: float
    repetition_score: float
    spam_indicators: int

    # Behavior
    writing_speed: float  # words per minute
    revisions_count: float
    session_duration: float  # ms
    image_count: float

    # Temporal
    timestamp: datetime
    day_of_week: int  # 0 = Sunday
    hour_of_day: int

    # Identity
    text_hash: str
    fingerprint_id: str

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["timestamp"] = self.timestamp.isoformat()
        return data


@dataclass(frozen=True)
class DetectorVerdict:
    """Outcome of a pattern detector: whether it fired and why."""
    matched: bool
    reason: Optional[str] = None
