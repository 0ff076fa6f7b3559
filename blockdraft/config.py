"""
BlockDraft configuration.

Drafting ratios that are not part of the versioned formula table live here
so block geometry can be tuned without touching algorithmic code.
Rendering settings are carried for the rendering collaborator only; the
drafting core never reads them.
"""

from pydantic_settings import BaseSettings
from pydantic import Field


class SleeveConfig(BaseSettings):
    """Sleeve cap proportions."""

    cap_height_ratio: float = 0.8  # fraction of scye depth
    bicep_ratio: float = 0.2  # fraction of chest girth
    cap_front_drop_ratio: float = 0.3  # fraction of cap height
    cap_back_drop_ratio: float = 0.4


class DartConfig(BaseSettings):
    """Dart placement (x), width and length ratios per block."""

    # Bodice front
    bust_dart_x_ratio: float = 0.3  # of chest width
    bust_dart_width_ratio: float = 0.02  # of chest girth
    bust_dart_length_ratio: float = 0.6  # of bust level
    front_waist_dart_x_ratio: float = 0.15  # of waist girth
    front_waist_dart_width_ratio: float = 0.03
    front_waist_dart_length_ratio: float = 0.4  # of back waist length

    # Bodice back
    shoulder_dart_x_ratio: float = 0.4  # of neck width
    shoulder_dart_y_ratio: float = 0.5  # of shoulder drop
    shoulder_dart_width_ratio: float = 0.2  # of shoulder slope
    shoulder_dart_length_ratio: float = 0.3  # of back width
    back_waist_dart_x_ratio: float = 0.1
    back_waist_dart_width_ratio: float = 0.04
    back_waist_dart_length_ratio: float = 0.5


class DraftingConfig(BaseSettings):
    """Everything the drafter and assembler read."""

    sleeve: SleeveConfig = Field(default_factory=SleeveConfig)
    darts: DartConfig = Field(default_factory=DartConfig)


class RenderingConfig(BaseSettings):
    """Handed to the rendering collaborator alongside drafted pieces."""

    seam_allowance_cm: float = 2.0
    display_scale: float = 2.0


class AppConfig(BaseSettings):
    """Top-level application configuration."""

    app_name: str = "BlockDraft"
    version: str = "0.1.0"
    debug: bool = False
    cors_origins: list[str] = ["*"]

    drafting: DraftingConfig = Field(default_factory=DraftingConfig)
    rendering: RenderingConfig = Field(default_factory=RenderingConfig)


config = AppConfig()
