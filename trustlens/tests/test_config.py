"""Tests for environment-driven settings."""

from trustlens.config import Settings


class TestSettings:
    """Tests for defaults and environment overrides."""

    def test_defaults(self, monkeypatch):
        """Reference thresholds are the defaults."""
        for name in ("ENVIRONMENT", "SIMILARITY_THRESHOLD", "HIGH_RISK_THRESHOLD",
                     "MEDIUM_RISK_THRESHOLD", "TEMPORAL_WINDOW_MINUTES"):
            monkeypatch.delenv(name, raising=False)
        config = Settings(_env_file=None)
        assert config.high_risk_threshold == 40
        assert config.medium_risk_threshold == 70
        assert config.similarity_threshold == 0.85
        assert config.temporal_window_minutes == 30
        assert config.temporal_cluster_min_size == 3
        assert config.is_production is False

    def test_env_override(self, monkeypatch):
        """Environment variables override defaults."""
        monkeypatch.setenv("SIMILARITY_THRESHOLD", "0.9")
        monkeypatch.setenv("TEMPORAL_WINDOW_MINUTES", "15")
        monkeypatch.setenv("ENVIRONMENT", "PROD")
        config = Settings(_env_file=None)
        assert config.similarity_threshold == 0.9
        assert config.temporal_window_seconds == 900
        assert config.is_production is True
