from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    storage_dir: str = ".cadastro"
    storage_key: str = "cadastros"

    postal_lookup_provider: str = "viacep"
    viacep_base_url: str = "https://viacep.com.br"
    viacep_timeout_seconds: int = 10

    success_message_ttl_ms: int = 2000
