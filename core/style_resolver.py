"""
Style Resolver - Per-element text styles from a computed scale

PURPOSE: Given the current step list and the step a preview element asks
         for, produce the CSS properties that element should render with.

CONTEXT: Called once per rendered text element. A step missing from the
         list (renamed steps, switched mode) yields an empty style so the
         element falls back to inherited styling instead of failing.
"""
from typing import Any, Dict, Iterable, Optional

from config import BODY_STEP_NAMES, INHERIT
from core.presets import StepCategory, resolve_alias
from core.scale_config import TypographySettings
from core.scale_engine import TypeStep
from utils.logger import get_logger
from utils.scale_math import format_number

logger = get_logger()

# CSS property name -> value
StyleProperties = Dict[str, Any]


def heading_font_family(typography: TypographySettings) -> str:
    family = typography.heading_font_family
    return INHERIT if family == INHERIT else f'"{family}", sans-serif'


def heading_color(typography: TypographySettings) -> str:
    color = typography.heading_color
    return INHERIT if color == INHERIT else color


def find_step(steps: Iterable[TypeStep], name: str) -> Optional[TypeStep]:
    for step in steps:
        if step.name == name:
            return step
    return None


def _preset_style(step: TypeStep, typography: TypographySettings) -> StyleProperties:
    style = {
        "font-size": f"{format_number(step.font_size)}px",
        "font-weight": step.font_weight or typography.font_weight,
        "line-height": step.line_height or typography.line_height,
        "letter-spacing": f"{format_number(step.letter_spacing or 0)}em",
    }
    if step.category is not StepCategory.BODY:
        style["font-family"] = heading_font_family(typography)
        style["color"] = heading_color(typography)
    return style


def _heading_style(typography: TypographySettings) -> StyleProperties:
    return {
        "font-family": heading_font_family(typography),
        "font-weight": typography.heading_font_weight,
        "line-height": typography.heading_line_height,
        "letter-spacing": f"{format_number(typography.heading_letter_spacing)}em",
        "color": heading_color(typography),
    }


def resolve_style(
    steps: Iterable[TypeStep],
    requested_step: str,
    typography: TypographySettings,
    is_preset_mode: bool
) -> StyleProperties:
    """
    Resolve the style of one text element.

    Args:
        steps: Current step list from compute_steps
        requested_step: Step name the element uses (legacy aliases such as
            "base" or "display" are honoured in preset mode)
        typography: Global body / heading typography
        is_preset_mode: Whether the steps come from a fixed preset

    Returns:
        CSS properties; empty if the step does not exist

    Example:
        >>> resolve_style(steps, "body", TypographySettings(), False)
        {'font-size': 'clamp(0.875rem, 0.787rem + 0.376vw, 1.125rem)'}
    """
    name = resolve_alias(requested_step) if is_preset_mode else requested_step

    step = find_step(steps, name)
    if step is None:
        logger.debug(f"No step named '{name}', using inherited style")
        return {}

    if is_preset_mode and step.is_preset_step:
        return _preset_style(step, typography)

    style = {"font-size": step.clamp}
    if requested_step not in BODY_STEP_NAMES:
        style.update(_heading_style(typography))
    return style


def to_css_declarations(style: StyleProperties) -> str:
    """
    Render resolved properties as a declaration list.

    Example:
        >>> to_css_declarations({"font-size": "16px", "font-weight": 600})
        'font-size: 16px; font-weight: 600;'
    """
    parts = []
    for prop, value in style.items():
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            value = format_number(value)
        parts.append(f"{prop}: {value};")
    return " ".join(parts)
