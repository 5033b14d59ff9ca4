# file: brainstream/core/config.py

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """
    Centralized application configuration.
    Values are loaded from environment variables (e.g., from a .env file).
    """
    # --- Source Log Configuration ---
    LOG_DIR: str = "/tmp/openclaw"
    LOG_FILE_PREFIX: str = "openclaw"   # -> openclaw-YYYY-MM-DD.log
    LOG_MESSAGE_FIELD: str = "1"
    LOG_TIME_FIELD: str = "time"

    # --- Tail & Buffer ---
    EVENT_BUFFER_SIZE: int = 50
    POLL_INTERVAL_SEC: float = 0.5
    BACKFILL_MAX_BYTES: int = 2 * 1024 * 1024

    # --- Stream Clients ---
    KEEPALIVE_INTERVAL_SEC: float = 30.0
    SINK_QUEUE_SIZE: int = 100

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

# Create a single settings instance to be used throughout the application
settings = Settings()
