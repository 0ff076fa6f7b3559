"""
Seam & dart assembler.

Seams
─────
Each block type has a fixed set of named seams.  A seam is an ordered list
of landmark names; its order is the draw/cut order.  The names and orders
in SEAM_LAYOUTS are consumed verbatim by renderers and exporters, so
renaming or reordering them is a breaking change.

Darts
─────
A dart is computed from the measurements and anchored on the y of an
existing landmark:

    position = (k_x · measurement,  landmark.y)
    width    =  k_w · girth
    length   =  k_l · vertical measurement

Its legs are fully determined by those three fields:

    left  = (x − w/2, y) → (x, y − l)
    right = (x + w/2, y) → (x, y − l)
"""

from __future__ import annotations

from collections.abc import Mapping

import numpy as np

from blockdraft.config import DraftingConfig, config
from blockdraft.core.errors import InvalidMeasurementSet
from blockdraft.models.schemas import (
    Dart,
    DerivedMeasurements,
    PatternPiece,
    PieceType,
    Point2D,
)


# ── Seam layouts ───────────────────────────────────────────────────────

_BODICE_OUTLINE: dict[str, tuple[str, ...]] = {
    "neckline": ("neck_center", "neck_shoulder"),
    "shoulder": ("neck_shoulder", "shoulder_tip"),
    "armhole": ("shoulder_tip", "armhole_depth"),
    "side_seam": ("armhole_depth", "waist_side"),
    "waistline": ("waist_side", "waist_center"),
}

SEAM_LAYOUTS: dict[PieceType, dict[str, tuple[str, ...]]] = {
    PieceType.bodice_front: {
        **_BODICE_OUTLINE,
        "center_front": ("waist_center", "neck_center"),
    },
    PieceType.bodice_back: {
        **_BODICE_OUTLINE,
        "center_back": ("waist_center", "neck_center"),
    },
    PieceType.sleeve: {
        "cap_front": ("cap_center", "cap_front", "underarm"),
        "cap_back": ("cap_center", "cap_back", "underarm"),
        "under_seam": ("underarm", "wrist_front"),
        "wrist": ("wrist_front", "wrist_back"),
    },
}

GRAIN_LINES: dict[PieceType, tuple[str, str]] = {
    PieceType.bodice_front: ("waist_center", "neck_center"),
    PieceType.bodice_back: ("waist_center", "neck_center"),
    PieceType.sleeve: ("cap_center", "wrist_front"),
}


def _lookup(points: Mapping[str, Point2D], names: tuple[str, ...], piece: PieceType) -> list[Point2D]:
    missing = [n for n in names if n not in points]
    if missing:
        raise InvalidMeasurementSet(
            f"{piece.value}: landmarks not drafted: {', '.join(missing)}",
            missing=missing,
        )
    return [points[n] for n in names]


def assemble_seams(
    points: Mapping[str, Point2D], piece_type: PieceType,
) -> dict[str, list[Point2D]]:
    """Build the named, ordered seam polylines for *piece_type*."""
    piece_type = PieceType(piece_type)
    return {
        name: _lookup(points, layout, piece_type)
        for name, layout in SEAM_LAYOUTS[piece_type].items()
    }


# ── Darts ──────────────────────────────────────────────────────────────

def _values(dm: DerivedMeasurements, piece: PieceType, *names: str) -> list[float]:
    values = [getattr(dm, n) for n in names]
    missing = [n for n, v in zip(names, values) if v is None]
    if missing:
        raise InvalidMeasurementSet(
            f"Cannot place {piece.value} darts: missing {', '.join(missing)}",
            missing=missing,
        )
    return values


def _front_darts(points, dm, dcfg) -> dict[str, Dart]:
    piece = PieceType.bodice_front
    bust_point, waist_center = _lookup(points, ("bust_point", "waist_center"), piece)
    chest_w, chest, bust_lvl, waist, bwl = _values(
        dm, piece,
        "chest_width", "chest_girth", "bust_level", "waist_girth", "back_waist_length",
    )
    return {
        "bust_dart": Dart(
            position=Point2D(x=chest_w * dcfg.bust_dart_x_ratio, y=bust_point.y),
            width=chest * dcfg.bust_dart_width_ratio,
            length=bust_lvl * dcfg.bust_dart_length_ratio,
        ),
        "waist_dart": Dart(
            position=Point2D(x=waist * dcfg.front_waist_dart_x_ratio, y=waist_center.y),
            width=waist * dcfg.front_waist_dart_width_ratio,
            length=bwl * dcfg.front_waist_dart_length_ratio,
        ),
    }


def _back_darts(points, dm, dcfg) -> dict[str, Dart]:
    piece = PieceType.bodice_back
    shoulder_tip, waist_center = _lookup(points, ("shoulder_tip", "waist_center"), piece)
    nw, slope, back_w, waist, bwl = _values(
        dm, piece,
        "neck_width", "shoulder_slope", "back_width", "waist_girth", "back_waist_length",
    )
    return {
        "shoulder_dart": Dart(
            position=Point2D(
                x=nw * dcfg.shoulder_dart_x_ratio,
                y=shoulder_tip.y * dcfg.shoulder_dart_y_ratio,
            ),
            width=slope * dcfg.shoulder_dart_width_ratio,
            length=back_w * dcfg.shoulder_dart_length_ratio,
        ),
        "waist_dart": Dart(
            position=Point2D(x=waist * dcfg.back_waist_dart_x_ratio, y=waist_center.y),
            width=waist * dcfg.back_waist_dart_width_ratio,
            length=bwl * dcfg.back_waist_dart_length_ratio,
        ),
    }


def assemble_darts(
    points: Mapping[str, Point2D],
    derived: DerivedMeasurements,
    piece_type: PieceType,
    cfg: DraftingConfig | None = None,
) -> dict[str, Dart]:
    """Compute the darts of *piece_type*.  The sleeve block has none."""
    dcfg = (cfg or config.drafting).darts
    piece_type = PieceType(piece_type)
    if piece_type == PieceType.bodice_front:
        return _front_darts(points, derived, dcfg)
    if piece_type == PieceType.bodice_back:
        return _back_darts(points, derived, dcfg)
    return {}


def assemble_dart_legs(darts: Mapping[str, Dart]) -> dict[str, list[list[Point2D]]]:
    """
    Leg polylines for each dart, [left, right], each [base, apex].

    Same geometry as ``Dart.legs()``, computed as vectors so a renderer
    can draw every dart in one pass.
    """
    legs: dict[str, list[list[Point2D]]] = {}
    for name, dart in darts.items():
        pos = np.array([dart.position.x, dart.position.y])
        half = np.array([dart.width / 2, 0.0])
        apex = pos - np.array([0.0, dart.length])
        bases = (pos - half, pos + half)
        legs[name] = [
            [_point(base), _point(apex)] for base in bases
        ]
    return legs


def _point(v: np.ndarray) -> Point2D:
    return Point2D(x=float(v[0]), y=float(v[1]))


# ── Piece assembly ─────────────────────────────────────────────────────

def seam_length(seam: list[Point2D]) -> float:
    """Sum of segment lengths along an open polyline."""
    if len(seam) < 2:
        return 0.0
    coords = np.array([[p.x, p.y] for p in seam])
    return float(np.sum(np.linalg.norm(np.diff(coords, axis=0), axis=1)))


def assemble_piece(
    piece_type: PieceType,
    points: dict[str, Point2D],
    derived: DerivedMeasurements,
    cfg: DraftingConfig | None = None,
) -> PatternPiece:
    """Seams, darts, dart legs, grain line and seam lengths around drafted *points*."""
    piece_type = PieceType(piece_type)
    seams = assemble_seams(points, piece_type)
    darts = assemble_darts(points, derived, piece_type, cfg)
    grain_line = _lookup(points, GRAIN_LINES[piece_type], piece_type)

    return PatternPiece(
        type=piece_type,
        points=dict(points),
        seams=seams,
        darts=darts,
        dart_legs=assemble_dart_legs(darts),
        grain_line=grain_line,
        seam_lengths={name: seam_length(seam) for name, seam in seams.items()},
    )
