"""
Measurement endpoint.

Takes raw body measurements and a unit, returns the canonical and derived
measurement set plus a two-unit summary.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from blockdraft.core.errors import DraftingError
from blockdraft.core.normalizer import normalize, summarize
from blockdraft.models.schemas import (
    NormalizeRequest,
    NormalizeResponse,
    ErrorResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    "",
    response_model=NormalizeResponse,
    responses={422: {"model": ErrorResponse}},
)
async def compute_measurements(req: NormalizeRequest):
    """Normalize raw measurements and compute derived values."""

    try:
        derived = normalize(req.measurements, req.unit)
    except DraftingError as exc:
        logger.info("Rejected measurement set: %s", exc)
        raise HTTPException(422, str(exc)) from exc

    return NormalizeResponse(derived=derived, summary=summarize(derived))
