"""
Drafting pipeline.

The data-level operations offered to the input and rendering
collaborators:

    normalize(raw, unit)              → DerivedMeasurements
    is_block_draftable(block_id, raw) → bool
    draft(piece_type, derived)        → PatternPiece
    draft_block(block_id, raw, unit)  → list[PatternPiece]

Every call is a pure transform.  Logging happens only here, through an
optional injected logger; the normalizer, drafter and assembler never log.
"""

from __future__ import annotations

import logging

from blockdraft.config import DraftingConfig
from blockdraft.core.assembler import assemble_piece
from blockdraft.core.blocks import check_block, get_block, is_block_draftable
from blockdraft.core.drafter import draft_points
from blockdraft.core.errors import MissingMeasurement
from blockdraft.core.normalizer import normalize
from blockdraft.models.schemas import (
    RAW_MEASUREMENT_NAMES,
    DerivedMeasurements,
    PatternPiece,
    PieceType,
    RawMeasurements,
    Unit,
)

__all__ = ["normalize", "check_block", "is_block_draftable", "draft", "draft_block"]

_logger = logging.getLogger(__name__)


def draft(
    piece_type: PieceType | str,
    derived: DerivedMeasurements,
    cfg: DraftingConfig | None = None,
    logger: logging.Logger | None = None,
) -> PatternPiece:
    """
    Draft one pattern piece from a normalized measurement set.

    Raises InvalidMeasurementSet if *derived* lacks a value the block needs.
    """
    log = logger or _logger
    piece_type = PieceType(piece_type)

    points = draft_points(piece_type, derived, cfg)
    piece = assemble_piece(piece_type, points, derived, cfg)

    log.debug(
        "Drafted %s: %d points, %d seams, %d darts (formulas v%s)",
        piece_type.value, len(piece.points), len(piece.seams),
        len(piece.darts), derived.formula_version,
    )
    return piece


def draft_block(
    block_id: str,
    raw: RawMeasurements,
    unit: Unit | str | None = None,
    cfg: DraftingConfig | None = None,
    logger: logging.Logger | None = None,
) -> list[PatternPiece]:
    """
    Normalize *raw* and draft every piece of *block_id*.

    Draftability is checked first; nothing is drafted when a required
    measurement is missing.  Only the block's required measurements are
    normalized, so an unusable value in a field the block never reads
    does not stop the draft.

    Raises
    ------
    UnknownBlock        unknown block id (a KeyError)
    MissingMeasurement  required raw measurement absent or non-positive
    InvalidUnit, InvalidMeasurementSet  from normalization
    """
    log = logger or _logger
    block = get_block(block_id)

    report = check_block(block_id, raw)
    if not report.draftable:
        log.info("Block %s not draftable, missing: %s", block_id, report.missing)
        raise MissingMeasurement(report)

    unused = set(RAW_MEASUREMENT_NAMES) - set(block.required_measurements)
    derived = normalize(raw.model_copy(update=dict.fromkeys(unused)), unit)
    pieces = [draft(p, derived, cfg, log) for p in block.pieces]

    log.info("Drafted block %s (%d pieces)", block_id, len(pieces))
    return pieces
