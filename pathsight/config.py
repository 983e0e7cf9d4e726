"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    pathsight_env: str = "development"
    pathsight_log_level: str = "info"

    # Decimals kept when writing path text; a negative value disables rounding
    default_round: int = 4
    # Transform origin for PathCommander; unset means the bounding-box center
    default_origin: list[float] | None = None

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @property
    def precision(self) -> int | None:
        return self.default_round if self.default_round >= 0 else None


settings = Settings()
