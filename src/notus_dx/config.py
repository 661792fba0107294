"""Application configuration using pydantic-settings.

Covers the Notus API client, the signed webhook receiver and the local
webhook event store.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Light Account factory used for smart wallet registration
LIGHT_ACCOUNT_FACTORY = "0x0000000000400CdFef5E2714E63d8040b700BC24"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # Notus API
    # ======================
    notus_api_url: str = Field(
        default="https://api.notus.team/api/v1", description="Notus API base URL"
    )
    notus_api_key: str = Field(default="", description="Notus API key (X-Api-Key header)")
    request_timeout: float = Field(default=30.0, description="Request timeout in seconds")
    max_retries: int = Field(default=3, ge=0, description="Retries for 429/5xx/network errors")
    network: str = Field(default="testnet", description="Target network label")

    # ======================
    # Smart Wallets
    # ======================
    smart_wallet_factory: str = Field(
        default=LIGHT_ACCOUNT_FACTORY, description="Account abstraction factory address"
    )
    smart_wallet_salt: str = Field(default="0", description="Salt for deterministic addresses")

    # ======================
    # Webhooks
    # ======================
    webhook_secret: Optional[str] = Field(
        default=None, description="Webhook signing secret (whsec_...)"
    )
    webhook_tolerance_seconds: int = Field(
        default=300, description="Maximum accepted clock skew for webhook timestamps"
    )
    persist_webhook_events: bool = Field(
        default=True, description="Record verified webhook deliveries in the database"
    )
    persist_unknown_events: bool = Field(
        default=False, description="Also record deliveries with unrecognized event types"
    )

    # ======================
    # Polling
    # ======================
    kyc_poll_initial_delay: float = Field(default=2.0, description="Delay before first KYC check")
    kyc_poll_interval: float = Field(default=5.0, description="Seconds between KYC checks")
    cross_swap_poll_interval: float = Field(
        default=5.0, description="Seconds between cross-swap status checks"
    )
    poll_timeout: float = Field(default=600.0, description="Give up polling after this many seconds")

    # ======================
    # Auth providers (client identifiers only)
    # ======================
    privy_app_id: str = Field(default="", description="Privy application ID")
    web3auth_client_id: str = Field(default="", description="Web3Auth client ID")

    # ======================
    # Database
    # ======================
    database_url: str = Field(
        default="sqlite+aiosqlite:///./data/notus_dx.db",
        description="Database connection URL",
    )

    # ======================
    # API
    # ======================
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8000, description="API server port")
    admin_token: str = Field(default="", description="Admin API token for protected endpoints")

    # ======================
    # Environment
    # ======================
    environment: str = Field(default="development", description="Runtime environment")
    debug: bool = Field(default=False, description="Enable debug mode")

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def has_webhook_secret(self) -> bool:
        return bool(self.webhook_secret)

    def get_safe_dict(self) -> dict:
        """Return settings dict with secrets redacted."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "network": self.network,
            "api_host": self.api_host,
            "api_port": self.api_port,
            "database_url": self._redact_url(self.database_url),
            "notus": {
                "base_url": self.notus_api_url,
                "api_key": "***" if self.notus_api_key else "(not set)",
                "timeout": self.request_timeout,
                "max_retries": self.max_retries,
            },
            "smart_wallet": {
                "factory": self.smart_wallet_factory,
                "salt": self.smart_wallet_salt,
            },
            "webhooks": {
                "secret": "***" if self.webhook_secret else "(not set)",
                "tolerance_seconds": self.webhook_tolerance_seconds,
                "persist_events": self.persist_webhook_events,
                "persist_unknown": self.persist_unknown_events,
            },
            "auth_providers": {
                "privy": "***" if self.privy_app_id else "(not set)",
                "web3auth": "***" if self.web3auth_client_id else "(not set)",
            },
            "admin_token": "***" if self.admin_token else "(not set)",
        }

    @staticmethod
    def _redact_url(url: str) -> str:
        """Redact sensitive parts of database URL."""
        if "://" in url and "@" in url:
            proto, rest = url.split("://", 1)
            if "@" in rest:
                creds, host = rest.rsplit("@", 1)
                if ":" in creds:
                    user, _ = creds.split(":", 1)
                    return f"{proto}://{user}:***@{host}"
        return url


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
