"""Configuration settings for the VC company intelligence backend."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Paths
    base_dir: Path = Path(__file__).parent.parent
    data_dir: Path = base_dir / "data"
    db_path: Path = data_dir / "vcintel.db"

    # Storage
    storage_backend: str = "sqlite"  # sqlite | memory
    seed_demo_data: bool = True

    # Company data
    companies_file: Optional[Path] = None

    # Listing
    default_page_size: int = 10
    max_page_size: int = 100

    # Enrichment
    enrichment_provider: str = "mock"  # mock | http
    enrichment_service_url: str = ""
    enrichment_timeout: float = 30.0  # seconds, caller-imposed upper bound
    # Seconds tolerated on fetchedAt bounds; covers a remote clock slightly
    # behind this host and timestamps truncated to milliseconds
    enrichment_clock_skew: float = 2.0

    # HTTP Client Settings
    user_agent: str = "VCIntelBot/1.0 (+contact@example.com)"
    connect_timeout: float = 10.0

    # Database URL
    @property
    def database_url(self) -> str:
        return f"sqlite:///{self.db_path}"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "VCINTEL_"


settings = Settings()

# Ensure data directory exists
settings.data_dir.mkdir(parents=True, exist_ok=True)
