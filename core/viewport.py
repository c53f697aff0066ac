"""
Viewport - Screen-size presets for the simulated preview width

PURPOSE: Translate between named screen presets and the preview width fed
         to compute_steps(config, simulated_width).
"""
from typing import Optional

from config import SCREEN_PRESETS, FULL_WIDTH, MIN_PREVIEW_WIDTH, MAX_PREVIEW_WIDTH

RESPONSIVE = "responsive"


def width_for_preset(name: str) -> int:
    """
    Preview width of a screen preset.

    Raises:
        ValueError: For unknown presets
    """
    try:
        return SCREEN_PRESETS[name]["width"]
    except KeyError:
        raise ValueError(
            f"Unknown screen preset '{name}', expected one of {', '.join(SCREEN_PRESETS)}"
        ) from None


def preset_for_width(width: float, responsive: bool = False) -> str:
    """
    Name of the preset whose breakpoint range contains width.

    Widths between the tablet and laptop ranges (768-1023) have no preset
    and report "responsive", as does any width in responsive mode.

    Example:
        >>> preset_for_width(1152)
        'laptop'
        >>> preset_for_width(900)
        'responsive'
    """
    if responsive:
        return RESPONSIVE
    if width >= 1280:
        return "desktop"
    if 1024 <= width <= 1279:
        return "laptop"
    if 640 <= width <= 767:
        return "tablet"
    if 0 <= width <= 639:
        return "mobile"
    return RESPONSIVE


def clamp_preview_width(width: float) -> int:
    """Limit a dragged preview width to the supported range"""
    return round(max(MIN_PREVIEW_WIDTH, min(MAX_PREVIEW_WIDTH, width)))


def simulated_width(width: Optional[float]) -> Optional[float]:
    """Full-width previews are unconstrained; everything else is simulated"""
    if width is None or width >= FULL_WIDTH:
        return None
    return width
