# app/main.py
from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse
from starlette.middleware.gzip import GZipMiddleware

# Load /backend/.env (main.py is /backend/app/main.py)
BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR / ".env")

from app.core.settings import settings
from app.api import api_router

# Level for this package only; handlers are left to the server (uvicorn).
logging.getLogger("app").setLevel(settings.log_level.upper())
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Polyline Decoder",
    version="1.0.0",
    default_response_class=ORJSONResponse,
)

# ── Compression (must be added before CORS) ──
app.add_middleware(GZipMiddleware, minimum_size=1000)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

# Routes
app.include_router(api_router)

logger.info(
    "[app] polyline decoder ready precision=%s max_bytes=%d",
    settings.polyline_precision,
    settings.polyline_max_bytes,
)
