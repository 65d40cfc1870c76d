"""
REPL settings, read from environment variables prefixed with CALCULEX_
or from a .env file (e.g. CALCULEX_LOG_LEVEL=DEBUG).
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = "WARNING"

    # REPL
    prompt: str = "> "
    show_ast: bool = False

    model_config = SettingsConfigDict(env_prefix="CALCULEX_", env_file=".env", extra="ignore")
