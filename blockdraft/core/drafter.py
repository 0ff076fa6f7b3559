"""
Block drafter: derived measurements → named landmark points.

Coordinate convention
─────────────────────
Origin (0, 0) is the centre of the neckline (bodice) or the crown of the
sleeve cap (sleeve).  x grows toward the side seam / front of the sleeve;
vertical distances are drafted downward as negative y.  All values are in
centimeters; any display scale is the renderer's business.

Every landmark is computed directly from the measurement set and never
from another landmark, so the points can be evaluated in any order.

Bodice front
────────────

      neck_center ●────────● neck_shoulder
                  │         ╲
                  │          ● shoulder_tip
                  │
                  │              ● armhole_depth
                  │   ● bust_point
                  │
     waist_center ●─────────────────● waist_side

Sleeve
──────

                     ● cap_center
          cap_back ●    ● cap_front
                          ● underarm
               │        │
      wrist_back ●──────● wrist_front
"""

from __future__ import annotations

from collections.abc import Callable

from blockdraft.config import DraftingConfig, config
from blockdraft.core.errors import InvalidMeasurementSet
from blockdraft.models.schemas import DerivedMeasurements, PieceType, Point2D


def _require(dm: DerivedMeasurements, piece: PieceType, *names: str) -> list[float]:
    """Fetch *names* from *dm*, failing loudly if any were never computed."""
    values = [getattr(dm, name) for name in names]
    missing = [name for name, value in zip(names, values) if value is None]
    if missing:
        raise InvalidMeasurementSet(
            f"Cannot draft {piece.value}: missing {', '.join(missing)}",
            missing=missing,
        )
    return values


def _p(x: float, y: float) -> Point2D:
    # -0.0 → 0.0
    return Point2D(x=x + 0.0, y=y + 0.0)


# ── Bodice ─────────────────────────────────────────────────────────────

def draft_bodice_front(
    dm: DerivedMeasurements, cfg: DraftingConfig | None = None,
) -> dict[str, Point2D]:
    """Landmarks of the bodice front block.

    *cfg* keeps the DRAFTERS signature uniform; the bodice outline has no
    configurable ratios.
    """
    (nw, slope, drop, chest_w, scye, bust_dart_w, bust_lvl,
     waist, dart_w, bwl) = _require(
        dm, PieceType.bodice_front,
        "neck_width", "shoulder_slope", "shoulder_drop", "chest_width",
        "scye_depth", "bust_dart_width", "bust_level", "waist_girth",
        "dart_width", "back_waist_length",
    )

    return {
        "neck_center": _p(0.0, 0.0),
        "neck_shoulder": _p(nw / 2, 0.0),
        "shoulder_tip": _p(nw / 2 + slope, -drop),
        "armhole_depth": _p(chest_w / 2, -scye),
        "bust_point": _p(bust_dart_w / 2, -bust_lvl),
        "waist_side": _p(waist / 4 + dart_w, -bwl),
        "waist_center": _p(0.0, -bwl),
    }


def draft_bodice_back(
    dm: DerivedMeasurements, cfg: DraftingConfig | None = None,
) -> dict[str, Point2D]:
    """Landmarks of the bodice back block.  No bust point; no dart allowance at the side.

    *cfg* is accepted for the DRAFTERS signature and not read.
    """
    nw, slope, drop, back_w, scye, waist, bwl = _require(
        dm, PieceType.bodice_back,
        "neck_width", "shoulder_slope", "shoulder_drop", "back_width",
        "scye_depth", "waist_girth", "back_waist_length",
    )

    return {
        "neck_center": _p(0.0, 0.0),
        "neck_shoulder": _p(nw / 2, 0.0),
        "shoulder_tip": _p(nw / 2 + slope, -drop),
        "armhole_depth": _p(back_w / 2, -scye),
        "waist_side": _p(waist / 4, -bwl),
        "waist_center": _p(0.0, -bwl),
    }


# ── Sleeve ─────────────────────────────────────────────────────────────

def sleeve_cap(dm: DerivedMeasurements, cfg: DraftingConfig | None = None) -> tuple[float, float]:
    """Return (cap_height, bicep_width) for the sleeve block."""
    scfg = (cfg or config.drafting).sleeve
    scye, chest = _require(dm, PieceType.sleeve, "scye_depth", "chest_girth")
    return scye * scfg.cap_height_ratio, chest * scfg.bicep_ratio


def draft_sleeve(
    dm: DerivedMeasurements, cfg: DraftingConfig | None = None,
) -> dict[str, Point2D]:
    """Landmarks of the set-in sleeve block."""
    scfg = (cfg or config.drafting).sleeve
    wrist_w, sleeve_len = _require(
        dm, PieceType.sleeve, "wrist_width", "sleeve_length",
    )
    cap_height, bicep = sleeve_cap(dm, cfg)

    return {
        "cap_center": _p(0.0, 0.0),
        "cap_front": _p(bicep / 2, -cap_height * scfg.cap_front_drop_ratio),
        "cap_back": _p(-bicep / 2, -cap_height * scfg.cap_back_drop_ratio),
        "underarm": _p(bicep / 2, -cap_height),
        "wrist_front": _p(wrist_w / 2, -sleeve_len),
        "wrist_back": _p(-wrist_w / 2, -sleeve_len),
    }


DRAFTERS: dict[PieceType, Callable[..., dict[str, Point2D]]] = {
    PieceType.bodice_front: draft_bodice_front,
    PieceType.bodice_back: draft_bodice_back,
    PieceType.sleeve: draft_sleeve,
}


def draft_points(
    piece_type: PieceType, dm: DerivedMeasurements, cfg: DraftingConfig | None = None,
) -> dict[str, Point2D]:
    return DRAFTERS[PieceType(piece_type)](dm, cfg)
