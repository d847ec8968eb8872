"""
Reviewer linguistic profiles.
Aggregates the fingerprints of an author's past reviews into a handful of
0-100 style metrics plus a combined stylometric fingerprint.
"""

import math
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from trustlens.models.fingerprint import Fingerprint
from trustlens.services.fingerprint_service import generate_fingerprint
from trustlens.utils.logging_config import StructuredLogger

logger = StructuredLogger("trustlens.profile")

NEUTRAL_METRIC = 50

PROFILE_STYLE_FEATURES = (
    "vocabulary_richness",
    "common_words_ratio",
    "sentiment_score",
    "punctuation_density",
    "capitalization_ratio",
    "repetition_score",
    "avg_words_per_sentence",
    "avg_chars_per_word",
)


@dataclass
class HistoricalReview:
    """A previously stored review of the author."""
    content: str
    fingerprint: Optional[Fingerprint] = None
    authenticity_score: Optional[int] = None
    created_at: Optional[datetime] = None


@dataclass
class LinguisticProfile:
    sentence_variety: int = NEUTRAL_METRIC
    emotional_authenticity: int = NEUTRAL_METRIC
    specific_details: int = NEUTRAL_METRIC
    vocabulary_complexity: int = NEUTRAL_METRIC
    grammar_score: int = NEUTRAL_METRIC
    overall_authenticity: int = NEUTRAL_METRIC
    review_count: int = 0
    analysis_method: str = "default"  # "default" | "review_based"
    average_review_length: Optional[int] = None  # characters
    last_review_date: Optional[datetime] = None
    style: Optional[Dict[str, float]] = None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        if self.last_review_date is not None:
            data["last_review_date"] = self.last_review_date.isoformat()
        return data


def _round(value: float) -> int:
    # Halves round up
    return math.floor(value + 0.5)


def _clamp(value: float) -> float:
    return min(100.0, max(0.0, value))


def _review_metrics(fp: Fingerprint, total_reviews: int) -> Dict[str, float]:
    return {
        "sentence_variety": _clamp(
            fp.avg_words_per_sentence / 20 * 100 + fp.sentence_count / total_reviews * 10
        ),
        "emotional_authenticity": _clamp(50 + fp.sentiment_score * 100),
        "specific_details": _clamp(fp.vocabulary_richness * 100),
        "vocabulary_complexity": _clamp(
            fp.avg_chars_per_word / 8 * 100 + fp.vocabulary_richness * 50
        ),
        "grammar_score": _clamp(
            50 + fp.punctuation_density * 200 + fp.capitalization_ratio * 100
        ),
    }


def build_linguistic_profile(
    reviews: Sequence[HistoricalReview],
    *,
    now: Optional[datetime] = None,
) -> LinguisticProfile:
    """
    Build an author profile from their review history.

    Only reviews that carry a fingerprint contribute to the averages; with
    none of those the neutral default profile is returned.
    """
    scored = [review for review in reviews if review.fingerprint is not None]
    if not scored:
        return LinguisticProfile(review_count=len(reviews))

    totals: Dict[str, float] = {}
    authenticity_total = 0
    for review in scored:
        for name, value in _review_metrics(review.fingerprint, len(reviews)).items():
            totals[name] = totals.get(name, 0.0) + value
        if review.authenticity_score is None:
            authenticity_total += NEUTRAL_METRIC
        else:
            authenticity_total += review.authenticity_score

    contents: List[str] = [review.content or "" for review in reviews]
    combined_text = " ".join(contents)
    combined = generate_fingerprint(combined_text, now=now)
    dated = [review.created_at for review in reviews if review.created_at is not None]

    count = len(scored)
    profile = LinguisticProfile(
        sentence_variety=_round(totals["sentence_variety"] / count),
        emotional_authenticity=_round(totals["emotional_authenticity"] / count),
        specific_details=_round(totals["specific_details"] / count),
        vocabulary_complexity=_round(totals["vocabulary_complexity"] / count),
        grammar_score=_round(totals["grammar_score"] / count),
        overall_authenticity=_round(authenticity_total / count),
        review_count=len(reviews),
        analysis_method="review_based",
        average_review_length=_round(len(combined_text) / len(reviews)),
        last_review_date=max(dated) if dated else None,
        style={name: getattr(combined, name) for name in PROFILE_STYLE_FEATURES},
    )

    logger.debug(
        "Linguistic profile built",
        review_count=profile.review_count,
        fingerprinted=count,
        overall_authenticity=profile.overall_authenticity,
    )
    return profile
