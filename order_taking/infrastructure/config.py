"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_version: str = "0.1.0"
    debug: bool = False

    # Address checking service (offline checker when no URL is set)
    address_service_name: str = "AddressCheckingService"
    address_service_url: str | None = None
    address_service_timeout_seconds: float = 5.0

    # Product catalog: product code -> unit price in minor units
    product_prices: dict[str, int] = {
        "W1234": 1000,
        "W5678": 2500,
        "G123": 450,
        "G456": 1200,
    }

    # Acknowledgments
    acknowledgment_sender: str = "orders@example.com"

    # Logging
    log_level: str = "INFO"
    json_logs: bool = True

    class Config:
        """Pydantic configuration."""

        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
