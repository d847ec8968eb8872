"""
Risk level utilities.
Risk tiers are derived purely from the 0-100 authenticity score: the lower
the score, the higher the risk.
"""

from enum import Enum
from typing import Optional

from trustlens.config import settings


class RiskLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


def derive_risk_from_score(
    score: float,
    high_threshold: Optional[float] = None,
    medium_threshold: Optional[float] = None,
) -> RiskLevel:
    """
    Derive risk level from an authenticity score (0-100 scale).

    Args:
        score: The authenticity score (0-100)
        high_threshold: Score < this = High (default from config)
        medium_threshold: Score < this = Medium (default from config)

    Returns:
        RiskLevel.HIGH, RiskLevel.MEDIUM or RiskLevel.LOW
    """
    high = high_threshold if high_threshold is not None else settings.high_risk_threshold
    medium = medium_threshold if medium_threshold is not None else settings.medium_risk_threshold

    if score < high:
        return RiskLevel.HIGH
    elif score < medium:
        return RiskLevel.MEDIUM
    else:
        return RiskLevel.LOW
