"""Smoke tests to verify basic functionality."""

from trustlens.pipelines.review_pipeline import analyze_review
from trustlens.services.pattern_service import detect_fraud_patterns


def test_analyze_review_basic():
    """analyze_review returns a fingerprint and a score."""
    analysis = analyze_review("Decent blender, a bit loud but it crushes ice fine.")
    assert 0 <= analysis.score.authenticity_score <= 100
    assert analysis.risk_level.value in {"Low", "Medium", "High"}
    assert analysis.fingerprint.word_count == 10


def test_analyze_review_empty():
    """Empty text is scored without errors."""
    analysis = analyze_review("")
    assert analysis.fingerprint.word_count == 0
    assert analysis.score.authenticity_score <= 85


def test_detect_patterns_single():
    """A single fingerprint forms no patterns."""
    analysis = analyze_review("Works as described.")
    report = detect_fraud_patterns([analysis.fingerprint])
    assert report.has_patterns is False
