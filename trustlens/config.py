from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # ==========================================================================
    # ENVIRONMENT
    # ==========================================================================
    environment: str = "dev"  # "dev", "prod"
    log_level: str = ""  # Empty = DEBUG in dev, INFO in prod

    # ==========================================================================
    # RISK THRESHOLDS (0-100 authenticity scale)
    # ==========================================================================
    high_risk_threshold: int = 40  # Score < this = High
    medium_risk_threshold: int = 70  # Score < this = Medium (above = Low)

    # ==========================================================================
    # FRAUD PATTERN MINING
    # ==========================================================================
    similarity_threshold: float = 0.85  # Pairs strictly above this are "similar style"
    temporal_window_minutes: int = 30  # Fixed wall-clock bucket size
    temporal_cluster_min_size: int = 3  # Buckets with more members than this are reported

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ==========================================================================
    # COMPUTED PROPERTIES
    # ==========================================================================

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "prod"

    @property
    def temporal_window_seconds(self) -> int:
        return self.temporal_window_minutes * 60


settings = Settings()
