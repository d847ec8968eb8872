"""Tests for fingerprint comparison and fraud pattern mining."""

from datetime import datetime, timedelta, timezone

import pytest

from trustlens.services.pattern_service import (
    FraudPatternReport,
    detect_fraud_patterns,
    find_temporal_clusters,
)
from trustlens.services.similarity_service import STYLE_FEATURES, compare_fingerprints


class TestCompareFingerprints:
    """Tests for writing-style similarity."""

    def test_identical_fingerprint_is_one(self, neutral_fingerprint):
        """A fingerprint is fully similar to itself."""
        assert compare_fingerprints(neutral_fingerprint, neutral_fingerprint) == 1.0

    def test_symmetric(self, neutral_fingerprint, make_fingerprint):
        """Order of arguments does not matter."""
        other = make_fingerprint("BUY NOW!!! CLICK HERE!!!")
        assert compare_fingerprints(neutral_fingerprint, other) == pytest.approx(
            compare_fingerprints(other, neutral_fingerprint)
        )

    def test_different_styles_below_threshold(self, make_fingerprint, neutral_text):
        """Shouting spam and calm prose are not alike."""
        calm = make_fingerprint(neutral_text)
        loud = make_fingerprint("BUY NOW!!! CLICK HERE!!!")
        assert compare_fingerprints(calm, loud) < 0.85

    def test_partial_features(self):
        """Only features present on both sides are averaged."""
        similarity = compare_fingerprints(
            {"vocabulary_richness": 0.5, "writing_speed": 40},
            {"vocabulary_richness": 0.25},
        )
        assert similarity == 0.5

    def test_nothing_comparable(self):
        """No shared features gives 0."""
        assert compare_fingerprints({}, {"sentiment_score": 0.1}) == 0.0

    def test_terms_floor_at_zero(self):
        """Opposite sentiment cannot make similarity negative."""
        assert compare_fingerprints({"sentiment_score": 0.5}, {"sentiment_score": -0.5}) == 0.0

    def test_both_zero_is_identical(self):
        """Zero on both sides counts as a perfect match."""
        assert compare_fingerprints({"writing_speed": 0}, {"writing_speed": 0}) == 1.0

    def test_feature_subset(self):
        """Eight stylometric features are compared."""
        assert len(STYLE_FEATURES) == 8
        assert "repetition_score" not in STYLE_FEATURES


class TestDetectFraudPatterns:
    """Tests for batch fraud pattern mining."""

    @pytest.fixture
    def base_time(self):
        return datetime(2026, 10, 21, 14, 5, tzinfo=timezone.utc)

    def test_empty_batch(self):
        """No fingerprints, no patterns."""
        report = detect_fraud_patterns([])
        assert report.duplicate_content == []
        assert report.similar_writing_styles == []
        assert report.temporal_clustering == []
        assert report.behavioral_anomalies == []
        assert report.has_patterns is False

    def test_duplicate_content(self, make_fingerprint, neutral_text):
        """Identical text is reported as a duplicate and a style match."""
        first = make_fingerprint(neutral_text)
        second = make_fingerprint(neutral_text.upper())
        report = detect_fraud_patterns([first, second])

        assert len(report.duplicate_content) == 1
        assert report.duplicate_content[0].fingerprint1 == first.fingerprint_id
        assert report.duplicate_content[0].fingerprint2 == second.fingerprint_id
        assert len(report.similar_writing_styles) == 1

    def test_different_reviews_not_paired(self, make_fingerprint, neutral_text):
        """Unrelated reviews produce no pairs."""
        report = detect_fraud_patterns([
            make_fingerprint(neutral_text),
            make_fingerprint("BUY NOW!!! CLICK HERE!!!"),
        ])
        assert report.duplicate_content == []
        assert report.similar_writing_styles == []

    def test_similarity_threshold_override(self, make_fingerprint, neutral_text):
        """A lower threshold pairs looser matches."""
        batch = [
            make_fingerprint(neutral_text),
            make_fingerprint("BUY NOW!!! CLICK HERE!!!"),
        ]
        report = detect_fraud_patterns(batch, similarity_threshold=0.1)
        assert len(report.similar_writing_styles) == 1
        assert 0.1 < report.similar_writing_styles[0].similarity < 0.85

    def test_five_in_one_window(self, make_fingerprint, base_time):
        """Five reviews inside one half hour form one cluster."""
        batch = [
            make_fingerprint(f"review number {i}", now=base_time + timedelta(minutes=i))
            for i in range(5)
        ]
        report = detect_fraud_patterns(batch)

        assert len(report.temporal_clustering) == 1
        cluster = report.temporal_clustering[0]
        assert cluster.count == 5
        assert cluster.fingerprints == [fp.fingerprint_id for fp in batch]
        assert cluster.window_start == datetime(2026, 10, 21, 14, 0, tzinfo=timezone.utc)

    def test_three_in_window_not_a_cluster(self, make_fingerprint, base_time):
        """A window needs more than three reviews."""
        batch = [make_fingerprint(f"review {i}", now=base_time) for i in range(3)]
        assert detect_fraud_patterns(batch).temporal_clustering == []

        batch.append(make_fingerprint("review 3", now=base_time))
        assert len(detect_fraud_patterns(batch).temporal_clustering) == 1

    def test_windows_are_fixed(self, make_fingerprint, base_time):
        """Reviews straddling a window boundary land in separate buckets."""
        boundary = datetime(2026, 10, 21, 14, 30, tzinfo=timezone.utc)
        before = [make_fingerprint("early", now=boundary - timedelta(minutes=1)) for _ in range(4)]
        after = [make_fingerprint("late", now=boundary) for _ in range(4)]

        clusters = find_temporal_clusters(before + after)
        assert [c.count for c in clusters] == [4, 4]
        assert clusters[0].time_slot + 1 == clusters[1].time_slot

    def test_custom_window(self, make_fingerprint, base_time):
        """Window size and cluster size are tunable."""
        batch = [
            make_fingerprint("x", now=base_time + timedelta(minutes=20 * i))
            for i in range(3)
        ]
        clusters = find_temporal_clusters(batch, window_minutes=120, min_size=2)
        assert len(clusters) == 1
        assert clusters[0].count == 3

    def test_configured_window(self, make_fingerprint, base_time, monkeypatch):
        """Without an explicit window the configured one is used."""
        from trustlens.config import settings

        monkeypatch.setattr(settings, "temporal_window_minutes", 120)
        batch = [
            make_fingerprint("x", now=base_time + timedelta(minutes=20 * i))
            for i in range(3)
        ]
        clusters = find_temporal_clusters(batch, min_size=2)
        assert len(clusters) == 1
        assert clusters[0].window_start == datetime(2026, 10, 21, 14, 0, tzinfo=timezone.utc)

    def test_behavioral_anomalies_reserved(self, make_fingerprint, base_time):
        """The anomaly list stays empty."""
        batch = [make_fingerprint("same text", now=base_time) for _ in range(6)]
        report = detect_fraud_patterns(batch)
        assert report.behavioral_anomalies == []
        assert len(report.duplicate_content) == 15
        assert report.has_patterns is True

    def test_to_dict(self, make_fingerprint, base_time):
        """Report serializes with ISO window starts."""
        batch = [make_fingerprint(f"r{i}", now=base_time) for i in range(4)]
        data = detect_fraud_patterns(batch).to_dict()
        assert data["temporal_clustering"][0]["window_start"] == "2026-10-21T14:00:00+00:00"
        assert set(data) == {
            "duplicate_content",
            "similar_writing_styles",
            "temporal_clustering",
            "behavioral_anomalies",
        }

    def test_report_defaults(self):
        """A fresh report is empty."""
        assert FraudPatternReport().has_patterns is False
