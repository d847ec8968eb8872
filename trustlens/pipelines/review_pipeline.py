from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Sequence

from trustlens.models.fingerprint import Fingerprint
from trustlens.schemas.review_schemas import ReviewSubmission
from trustlens.services.fingerprint_service import generate_fingerprint
from trustlens.services.pattern_service import FraudPatternReport, detect_fraud_patterns
from trustlens.services.scoring_service import ScoreResult, score_authenticity
from trustlens.utils.logging_config import (
    StructuredLogger,
    init_logging_once,
    log_execution_time,
    track_analysis,
)
from trustlens.utils.risk_levels import RiskLevel

init_logging_once()

logger = StructuredLogger("trustlens.pipeline")


@dataclass
class ReviewAnalysis:
    """Fingerprint and authenticity assessment of one submitted review."""
    fingerprint: Fingerprint
    score: ScoreResult

    @property
    def risk_level(self) -> RiskLevel:
        return self.score.risk_level

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fingerprint": self.fingerprint.to_dict(),
            "authenticity": self.score.to_dict(),
        }


@track_analysis("review")
@log_execution_time("trustlens.pipeline")
def analyze_review(
    text: Any,
    behavior_metrics: Optional[Any] = None,
    user_history: Optional[Any] = None,
    order_data: Optional[Any] = None,
    *,
    now: Optional[datetime] = None,
) -> ReviewAnalysis:
    """
    Main pipeline for a newly submitted review.
    Validates the submission, fingerprints the text and scores it.

    Raises:
        pydantic.ValidationError: if the text is not a string or the
            metadata has the wrong shape
    """
    submission = ReviewSubmission(
        text=text,
        behavior_metrics=behavior_metrics,
        user_history=user_history,
        order_data=order_data,
    )

    # 1) Fingerprint
    fingerprint = generate_fingerprint(
        submission.text,
        submission.behavior_metrics,
        now=now,
    )

    # 2) Score (runs the gibberish and AI content detectors)
    score = score_authenticity(
        fingerprint,
        submission.user_history,
        submission.order_data,
    )

    logger.info(
        "Review analyzed",
        fingerprint_id=fingerprint.fingerprint_id,
        text_hash=fingerprint.text_hash,
        authenticity_score=score.authenticity_score,
        risk_level=score.risk_level.value,
        flags=score.flags,
    )

    return ReviewAnalysis(fingerprint=fingerprint, score=score)


@log_execution_time("trustlens.pipeline")
def analyze_campaign(fingerprints: Sequence[Fingerprint]) -> FraudPatternReport:
    """Run fraud pattern mining over a batch of stored fingerprints."""
    report = detect_fraud_patterns(fingerprints)

    summary = dict(
        batch_size=len(fingerprints),
        duplicate_pairs=len(report.duplicate_content),
        similar_style_pairs=len(report.similar_writing_styles),
        temporal_clusters=len(report.temporal_clustering),
    )
    if report.has_patterns:
        logger.warning("Coordinated review patterns found", **summary)
    else:
        logger.info("No coordinated review patterns", **summary)

    return report
