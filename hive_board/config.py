from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = "INFO"
    frontend_url: str = "http://localhost:3000"

    # 2D board (sprite units per cell)
    screen_scale_x: float = 1.0
    screen_scale_y: float = 1.0
    screen_offset_x: float = 0.0
    screen_offset_y: float = 0.0

    # AR board (metres per cell / per stacked piece)
    ar_horizontal_scale: float = 0.05
    ar_vertical_scale: float = 0.02

    model_config = SettingsConfigDict(
        env_prefix="HIVE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()
