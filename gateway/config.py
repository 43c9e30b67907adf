"""Gateway configuration loaded from environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # --- Server ---
    host: str = "0.0.0.0"
    port: int = 3000
    debug: bool = False
    log_level: str = "info"

    # --- CORS ---
    cors_origins: str = "*"

    # --- Org chart ---
    org_file: str = ""  # Empty: company/org.yaml, or a lone default CEO if absent

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
