"""
Pattern block endpoints.

List the block library, check draftability, and draft every piece of a
block in one call.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from blockdraft.config import config
from blockdraft.core.blocks import check_block, get_block, list_blocks
from blockdraft.core.errors import DraftingError, MissingMeasurement
from blockdraft.core.pipeline import draft_block
from blockdraft.models.schemas import (
    BlockDraftRequest,
    BlockDraftResponse,
    DraftabilityReport,
    ErrorResponse,
    PatternBlock,
    RawMeasurements,
    RenderingSettings,
)

logger = logging.getLogger(__name__)
router = APIRouter()


def _block_or_404(block_id: str) -> PatternBlock:
    try:
        return get_block(block_id)
    except KeyError as exc:
        raise HTTPException(404, f"Block '{block_id}' not found") from exc


@router.get("", response_model=list[PatternBlock])
async def get_blocks():
    return list_blocks()


@router.get(
    "/{block_id}",
    response_model=PatternBlock,
    responses={404: {"model": ErrorResponse}},
)
async def get_block_info(block_id: str):
    return _block_or_404(block_id)


@router.post(
    "/{block_id}/check",
    response_model=DraftabilityReport,
    responses={404: {"model": ErrorResponse}},
)
async def check_draftable(block_id: str, measurements: RawMeasurements):
    """Report which required measurements are missing for a block."""
    _block_or_404(block_id)
    return check_block(block_id, measurements)


@router.post(
    "/{block_id}/draft",
    response_model=BlockDraftResponse,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def draft_whole_block(block_id: str, req: BlockDraftRequest):
    """Draft every piece of a block."""
    _block_or_404(block_id)

    try:
        pieces = draft_block(block_id, req.measurements, req.unit)
    except MissingMeasurement as exc:
        raise HTTPException(
            422, {"message": str(exc), "missing": exc.report.missing},
        ) from exc
    except DraftingError as exc:
        raise HTTPException(422, str(exc)) from exc

    logger.info("Block %s drafted: %s", block_id, [p.type.value for p in pieces])

    return BlockDraftResponse(
        block_id=block_id,
        pieces=pieces,
        rendering=RenderingSettings(**config.rendering.model_dump()),
    )
