from __future__ import annotations

from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field


# ──────────────────────────────────────────────────────────────
# Shared
# ──────────────────────────────────────────────────────────────

class Point(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float


class HealthResponse(BaseModel):
    ok: bool = True


# ──────────────────────────────────────────────────────────────
# Polyline decoding
# ──────────────────────────────────────────────────────────────

class DecodeRequest(BaseModel):
    polyline: str                           # encoded polyline (ASCII)
    start: Optional[Point] = None           # None = (0, 0)
    precision: Optional[float] = Field(default=None, gt=0)  # None = settings default


class DecodeMultiRequest(BaseModel):
    polylines: List[DecodeRequest] = Field(default_factory=list)
    precision: Optional[float] = Field(default=None, gt=0)  # per-polyline precision wins


class TokenErrorInfo(BaseModel):
    code: Literal["incomplete_token"] = "incomplete_token"
    message: str
    length: int                             # bytes scanned
    token_hex: str


class DecodeResponse(BaseModel):
    points: List[Point] = Field(default_factory=list)
    complete: bool = True
    precision: float
    error: Optional[TokenErrorInfo] = None
