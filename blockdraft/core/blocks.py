"""
Pattern block library.

Static metadata for the blocks the drafter supports.  Required
measurements are RawMeasurements field names; a block is draftable only
when each of them is present and positive.
"""

from __future__ import annotations

from blockdraft.core.errors import UnknownBlock
from blockdraft.core.normalizer import missing_measurements
from blockdraft.models.schemas import (
    DraftabilityReport,
    PatternBlock,
    PieceType,
    RawMeasurements,
)

BASIC_BODICE = PatternBlock(
    id="basic-bodice",
    name="Basic Bodice Block",
    description="Foundation pattern for tops and dresses",
    pieces=[PieceType.bodice_front, PieceType.bodice_back],
    required_measurements=["body_height", "chest_girth", "waist_girth"],
)

BASIC_SLEEVE = PatternBlock(
    id="basic-sleeve",
    name="Basic Sleeve Block",
    description="Set-in sleeve foundation",
    pieces=[PieceType.sleeve],
    required_measurements=["chest_girth", "sleeve_length"],
)

# Library lookup
PATTERN_BLOCKS: dict[str, PatternBlock] = {
    BASIC_BODICE.id: BASIC_BODICE,
    BASIC_SLEEVE.id: BASIC_SLEEVE,
}


def get_block(block_id: str) -> PatternBlock:
    """Return the block registered under *block_id*.

    Raises
    ------
    UnknownBlock
        If *block_id* is not in the library.  Also a KeyError.
    """
    if block_id not in PATTERN_BLOCKS:
        raise UnknownBlock(block_id)
    return PATTERN_BLOCKS[block_id]


def list_blocks() -> list[PatternBlock]:
    return list(PATTERN_BLOCKS.values())


def check_block(block_id: str, raw: RawMeasurements) -> DraftabilityReport:
    """Report whether *raw* is sufficient to draft *block_id*.  Never raises
    for missing values; an unknown block id is reported as not draftable."""
    block = PATTERN_BLOCKS.get(block_id)
    if block is None:
        return DraftabilityReport(block_id=block_id, draftable=False)
    missing = missing_measurements(block.required_measurements, raw)
    return DraftabilityReport(block_id=block_id, draftable=not missing, missing=missing)


def is_block_draftable(block_id: str, raw: RawMeasurements) -> bool:
    return check_block(block_id, raw).draftable
