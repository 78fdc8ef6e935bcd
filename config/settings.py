from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Raffle
    DEFAULT_CATEGORIES: list[str] = ["A", "B", "C"]
    MAX_GROUP_SIZE: int = 5  # UI bound only; the engine accepts any positive size
    MAX_TICKET_RANGE: int = 100_000  # largest POST /tickets/range request

    # Draw animation (cosmetic phase). DRAW_ANIMATION_MS=0 skips it entirely.
    DRAW_ANIMATION_MS: int = 2500
    DRAW_TICK_MS: int = 80

    # App
    APP_NAME: str = "Raffle"
    DEBUG: bool = False  # Safe default for production; set DEBUG=True in .env for local dev
    LOG_LEVEL: str = "INFO"


settings = Settings()
