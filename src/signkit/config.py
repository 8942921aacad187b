"""Client configuration via environment variables.

There is no module-level settings instance: build a ``Settings`` (from the
environment or explicitly) and pass it to :class:`signkit.client.base.ApiClient`.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from signkit.errors.exceptions import ConfigurationError

SANDBOX_BASE_URL = "https://sandbox.api.example.com"
PRODUCTION_BASE_URL = "https://api.example.com"


class Settings(BaseSettings):
    # Signing API
    base_url: str | None = None
    api_version: str = "v3"
    access_token: str | None = None

    # Transport
    timeout: float = 30.0

    # Logging
    log_level: str = "info"
    log_json: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SIGNKIT_",
        extra="ignore",
    )

    def validate_ready(self) -> None:
        """Raise ConfigurationError naming every missing required setting."""
        errors = []
        if not self.base_url:
            errors.append("base_url is required")
        if not self.access_token:
            errors.append("access_token is required")
        if errors:
            raise ConfigurationError(", ".join(errors))

    @property
    def is_configured(self) -> bool:
        return bool(self.base_url and self.access_token)

    def sandbox(self) -> "Settings":
        """Copy of these settings pointed at the sandbox environment."""
        return self.model_copy(update={"base_url": SANDBOX_BASE_URL})

    def production(self) -> "Settings":
        """Copy of these settings pointed at the production environment."""
        return self.model_copy(update={"base_url": PRODUCTION_BASE_URL})
