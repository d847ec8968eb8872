"""
Authenticity scoring.
Starts every review at 100 and applies fixed deductions and bonuses for the
signals found in its fingerprint, the reviewer's history and the order.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from trustlens.models.fingerprint import Fingerprint
from trustlens.schemas.review_schemas import OrderData, UserHistory, as_model
from trustlens.services.ai_content_service import detect_ai_generated
from trustlens.services.gibberish_service import detect_gibberish
from trustlens.utils.logging_config import StructuredLogger
from trustlens.utils.risk_levels import RiskLevel, derive_risk_from_score

logger = StructuredLogger("trustlens.scoring")

BASE_SCORE = 100
GIBBERISH_PENALTY = 30
AI_CONTENT_PENALTY = 25


@dataclass
class AnalysisBreakdown:
    """Per-category views; independent of the headline score."""
    text_quality: int = 100
    sentiment_analysis: int = 100
    behavioral_consistency: int = 100
    temporal_patterns: int = 100
    user_consistency: int = 100


@dataclass
class ScoreResult:
    """Result of an authenticity assessment."""
    authenticity_score: int
    risk_level: RiskLevel
    flags: List[str] = field(default_factory=list)
    reasons: List[str] = field(default_factory=list)
    analysis: AnalysisBreakdown = field(default_factory=AnalysisBreakdown)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["risk_level"] = self.risk_level.value
        return data


@dataclass(frozen=True)
class ScoringRule:
    flag: str
    penalty: int
    reason: str
    applies: Callable[[Fingerprint, Optional[UserHistory]], bool]


def _length_anomaly(fp: Fingerprint, history: Optional[UserHistory]) -> bool:
    if history is None or (history.total_reviews or 0) <= 10 or not history.avg_review_length:
        return False
    deviation = abs(fp.word_count - history.avg_review_length) / history.avg_review_length
    return deviation > 2


def _high_activity(fp: Fingerprint, history: Optional[UserHistory]) -> bool:
    return history is not None and (history.recent_review_count or 0) > 5


SCORING_RULES: Tuple[ScoringRule, ...] = (
    # Text quality
    ScoringRule("SHORT_REVIEW", 15, "Review too short (less than 10 words)",
                lambda fp, _: fp.word_count < 10),
    ScoringRule("LOW_VOCABULARY", 10, "Limited vocabulary diversity",
                lambda fp, _: fp.vocabulary_richness < 0.3),
    ScoringRule("HIGH_REPETITION", 8, "Excessive word repetition detected",
                lambda fp, _: fp.repetition_score > 0.3),
    # Sentiment
    ScoringRule("EXTREME_SENTIMENT", 5, "Extremely polarized sentiment",
                lambda fp, _: abs(fp.sentiment_score) > 0.5),
    ScoringRule("SPAM_INDICATORS", 15, "Contains promotional language",
                lambda fp, _: fp.spam_indicators > 0),
    # Behavior
    ScoringRule("FAST_TYPING", 12, "Unusually fast typing speed",
                lambda fp, _: fp.writing_speed > 100),
    ScoringRule("NO_REVISIONS", 8, "No text revisions for lengthy review",
                lambda fp, _: fp.revisions_count < 2 and fp.word_count > 50),
    ScoringRule("RUSHED_WRITING", 10, "Review written too quickly",
                lambda fp, _: fp.session_duration < 30000 and fp.word_count > 30),
    # Temporal
    ScoringRule("UNUSUAL_TIME", 5, "Review submitted at unusual hours",
                lambda fp, _: 2 <= fp.hour_of_day <= 5),
    # User history
    ScoringRule("LENGTH_ANOMALY", 8, "Review length significantly different from user pattern",
                _length_anomaly),
    ScoringRule("HIGH_ACTIVITY", 7, "Unusually high review activity",
                _high_activity),
)

# Category -> (flags, penalty per flag) for the analysis breakdown
ANALYSIS_CATEGORIES: Dict[str, Tuple[Tuple[str, ...], int]] = {
    "text_quality": (("SHORT_REVIEW", "LOW_VOCABULARY", "HIGH_REPETITION"), 10),
    "sentiment_analysis": (("EXTREME_SENTIMENT", "SPAM_INDICATORS"), 10),
    "behavioral_consistency": (("FAST_TYPING", "NO_REVISIONS", "RUSHED_WRITING"), 10),
    "temporal_patterns": (("UNUSUAL_TIME",), 20),
    "user_consistency": (("LENGTH_ANOMALY", "HIGH_ACTIVITY"), 10),
}


def build_analysis(flags: List[str]) -> AnalysisBreakdown:
    scores = {}
    for category, (members, penalty) in ANALYSIS_CATEGORIES.items():
        hits = sum(1 for flag in flags if flag in members)
        scores[category] = max(0, 100 - hits * penalty)
    return AnalysisBreakdown(**scores)


def score_authenticity(
    fingerprint: Fingerprint,
    user_history: Optional[Any] = None,
    order_data: Optional[Any] = None,
) -> ScoreResult:
    """
    Score how likely a review is genuine.

    Args:
        fingerprint: Fingerprint from generate_fingerprint
        user_history: UserHistory or mapping (totalReviews, avgReviewLength,
            recentReviewCount); absent fields skip their rules
        order_data: OrderData or mapping (purchaseVerified, orderTrustScore)

    Returns:
        ScoreResult with the clamped score, risk tier, flags and reasons
    """
    history = as_model(UserHistory, user_history)
    order = as_model(OrderData, order_data)

    score = BASE_SCORE
    flags: List[str] = []
    reasons: List[str] = []

    gibberish = detect_gibberish(fingerprint)
    if gibberish.matched:
        score -= GIBBERISH_PENALTY
        flags.append("GIBBERISH_CONTENT")
        reasons.append(gibberish.reason)

    ai_content = detect_ai_generated(fingerprint)
    if ai_content.matched:
        score -= AI_CONTENT_PENALTY
        flags.append("AI_GENERATED_CONTENT")
        reasons.append(ai_content.reason)

    for rule in SCORING_RULES:
        if rule.applies(fingerprint, history):
            score -= rule.penalty
            flags.append(rule.flag)
            reasons.append(rule.reason)

    if order is not None:
        if order.purchase_verified:
            score += 10
            reasons.append("Purchase verified - authenticity bonus")
        if order.order_trust_score is not None and order.order_trust_score > 70:
            score += 5
            reasons.append("High order trust score")

    score = max(0, min(100, score))

    result = ScoreResult(
        authenticity_score=int(score),
        risk_level=derive_risk_from_score(score),
        flags=flags,
        reasons=reasons,
        analysis=build_analysis(flags),
    )

    logger.debug(
        "Authenticity scored",
        fingerprint_id=fingerprint.fingerprint_id,
        authenticity_score=result.authenticity_score,
        risk_level=result.risk_level.value,
        flags=flags,
    )
    return result
