"""
BlockDraft FastAPI application.

Endpoints:
  POST /api/v1/measurements              — normalize + derive measurements
  GET  /api/v1/blocks                    — list pattern blocks
  GET  /api/v1/blocks/{id}               — one block's metadata
  POST /api/v1/blocks/{id}/check         — draftability for a measurement set
  POST /api/v1/blocks/{id}/draft         — draft every piece of a block
  POST /api/v1/patterns                  — draft a single piece
  GET  /health                           — health check
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blockdraft.config import config
from blockdraft.api.routes import blocks, measurements, patterns
from blockdraft.core.formulas import FORMULA_VERSION
from blockdraft.models.schemas import HealthResponse

logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format="%(asctime)s  %(name)-30s  %(levelname)-7s  %(message)s",
)

app = FastAPI(
    title=config.app_name,
    version=config.version,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Route registration ─────────────────────────────────────────────────

app.include_router(measurements.router, prefix="/api/v1/measurements", tags=["measurements"])
app.include_router(blocks.router, prefix="/api/v1/blocks", tags=["blocks"])
app.include_router(patterns.router, prefix="/api/v1/patterns", tags=["patterns"])


@app.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="ok", version=config.version)


logging.getLogger(__name__).info(
    "%s %s loaded (formulas v%s)", config.app_name, config.version, FORMULA_VERSION,
)
