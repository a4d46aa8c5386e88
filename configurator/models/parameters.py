"""Layout constants and generation configuration."""

from __future__ import annotations
from pydantic import BaseModel


class LayoutParams(BaseModel):
    """Fixed sizes and spacings used by the layout rules (building units)."""
    wall_thickness: float = 0.2
    feature_clearance: float = 0.1      # Gap between a feature and its wall face
    feature_depth: float = 0.4

    # Roof
    panel_thickness: float = 0.2
    ridge_cap_width: float = 0.4
    ridge_cap_height: float = 0.3
    skylight_thickness: float = 0.2

    # Vertical beams
    beam_margin: float = 2.0
    beam_min_spacing: float = 4.0
    beam_max_spacing: float = 8.0
    beam_width: float = 0.3
    beam_depth: float = 0.2
    beam_inset: float = 0.1
    flange_width: float = 0.4
    flange_height: float = 0.15
    flange_max_spacing: float = 6.0

    # Horizontal tie beams
    tie_beam_fractions: tuple[float, ...] = (0.25, 0.5, 0.75)
    tie_beam_end_gap: float = 1.0
    tie_beam_size: float = 0.3

    # Gutters
    gutter_offset: float = 0.1
    gutter_rise: float = 0.05           # Gutter lip above the eave
    gutter_width: float = 0.6
    gutter_depth: float = 0.4
    gutter_wall: float = 0.08
    bracket_spacing: float = 6.0
    downspout_radius: float = 0.12
    splash_block_reach: float = 1.2

    # Foundation
    slab_thickness: float = 0.2


class GenerationConfig(BaseModel):
    """Controls which rules run and how much detail they emit."""
    enabled_rules: list[str] = []        # Empty = use all registered defaults
    disabled_rules: list[str] = []       # Explicitly disable specific rules
    include_trim: bool = True            # Frames, handles, slats on features
    include_flanges: bool = True         # Flange plates along vertical beams
