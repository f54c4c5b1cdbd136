from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment (CHRONOS_* variables)."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="CHRONOS_", extra="ignore")

    app_name: str = "chronosclient"

    # Backend base URL; in local development this is the proxy target
    api_base_url: str = "http://localhost:3053"

    # Seconds before httpx gives up on a request
    request_timeout: float = 30.0


settings = Settings()


# =============================================================================
# CARD ENDPOINTS
# =============================================================================

# Separator for the batched card lookup (?codes=a,b,c)
CARD_CODES_SEPARATOR = ","
