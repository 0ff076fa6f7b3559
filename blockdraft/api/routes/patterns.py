"""
Single-piece drafting endpoint.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from blockdraft.config import config
from blockdraft.core.errors import DraftingError
from blockdraft.core.normalizer import normalize
from blockdraft.core.pipeline import draft
from blockdraft.models.schemas import (
    DraftRequest,
    DraftResponse,
    ErrorResponse,
    RenderingSettings,
)

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    "",
    response_model=DraftResponse,
    responses={422: {"model": ErrorResponse}},
)
async def draft_piece(req: DraftRequest):
    """Normalize measurements and draft one pattern piece."""

    try:
        derived = normalize(req.measurements, req.unit)
        piece = draft(req.piece_type, derived)
    except DraftingError as exc:
        logger.info("Cannot draft %s: %s", req.piece_type.value, exc)
        raise HTTPException(422, str(exc)) from exc

    return DraftResponse(
        piece=piece,
        rendering=RenderingSettings(**config.rendering.model_dump()),
    )
