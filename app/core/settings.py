from __future__ import annotations

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=None, extra="ignore")

    # ──────────────────────────────────────────────────────────────
    # Polyline decoding
    # 1e5 = Google polyline, 1e6 = polyline6 (OSRM / Valhalla)
    # ──────────────────────────────────────────────────────────────

    polyline_precision: float = Field(default=1e5, gt=0, alias="POLYLINE_PRECISION")
    polyline_max_bytes: int = Field(default=1_000_000, alias="POLYLINE_MAX_BYTES")

    # ──────────────────────────────────────────────────────────────
    # App
    # ──────────────────────────────────────────────────────────────

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    cors_allow_origins: str = Field(default="*", alias="CORS_ALLOW_ORIGINS")

    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]


settings = Settings()
