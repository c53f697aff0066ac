"""
Scale Report - Display metrics and grouping for the step list

PURPOSE: The numbers shown next to each step in the scale overview:
         font size in px and rem, line-height factor and line-height in px,
         with the optional "whole number" and "multiple of 4" rounding.

CONTEXT: Display only. Rounding here never feeds back into the generated CSS.
"""
import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from config import (
    DEFAULT_ROUND_TO_WHOLE_NUMBER,
    DEFAULT_ROUND_LINE_HEIGHT_TO_MULTIPLE_OF_4,
)
from core.presets import STEP_NAME_ALIASES, StepCategory
from core.scale_config import TypeScaleConfig
from core.scale_engine import TypeStep, is_heading_step
from utils.error_handler import ConfigurationError, ErrorType
from utils.scale_math import format_number, round_to

OTHER = "other"
CATEGORY_ORDER = (StepCategory.HEADING.value, StepCategory.BODY.value, OTHER)

VIEW_MODES = ("desktop", "mobile")


def step_category(name: str) -> str:
    """
    Category of a step name: "heading", "body" or "other".

    Legacy names ("display", "base", ...) are classified by the step they
    alias.
    """
    name = STEP_NAME_ALIASES.get(name, name)
    if is_heading_step(name):
        return StepCategory.HEADING.value
    if name.startswith("body"):
        return StepCategory.BODY.value
    return OTHER


def _category_of(step: TypeStep, is_preset_mode: bool) -> str:
    if is_preset_mode and step.category is not None:
        return step.category.value
    return step_category(step.name)


def _display_size(step: TypeStep) -> float:
    return step.font_size if step.font_size is not None else step.min_size


def group_steps(
    steps: Sequence[TypeStep],
    is_preset_mode: bool
) -> List[Tuple[str, List[TypeStep]]]:
    """
    Group steps for the overview: headings, then body, then anything else,
    largest first inside each group. Empty groups are left out.
    """
    groups = {category: [] for category in CATEGORY_ORDER}
    for step in steps:
        groups[_category_of(step, is_preset_mode)].append(step)

    result = []
    for category in CATEGORY_ORDER:
        members = sorted(groups[category], key=_display_size, reverse=True)
        if members:
            result.append((category, members))
    return result


@dataclass(frozen=True)
class StepMetrics:
    """Display values of one step"""
    name: str
    font_size_px: str
    font_size_rem: float
    line_height: float
    line_height_px: str

    @property
    def label(self) -> str:
        # e.g. "16px/1rem; 1.5/24px"
        return (
            f"{self.font_size_px}px/{format_number(self.font_size_rem)}rem; "
            f"{format_number(self.line_height)}/{self.line_height_px}px"
        )


def round_line_height_px(
    line_height_px: float,
    round_to_whole_number: bool,
    round_to_multiple_of_4: bool
) -> str:
    """
    Line-height in px as displayed.

    Example:
        >>> round_line_height_px(21, True, True)
        '20'
        >>> round_line_height_px(21.6, False, False)
        '21.6'
    """
    if round_to_multiple_of_4:
        return format_number(round_to(line_height_px / 4, 0) * 4)
    if round_to_whole_number:
        return format_number(round_to(line_height_px, 0))
    return format_number(round_to(line_height_px, 3))


def describe_step(
    step: TypeStep,
    config: TypeScaleConfig,
    view_mode: str = "desktop",
    round_to_whole_number: bool = DEFAULT_ROUND_TO_WHOLE_NUMBER,
    round_line_height_to_multiple_of_4: bool = DEFAULT_ROUND_LINE_HEIGHT_TO_MULTIPLE_OF_4
) -> StepMetrics:
    """
    Display metrics of a step.

    Fluid steps show max_size on desktop and min_size on mobile and use the
    configured body or heading line-height; preset steps show their fixed
    size and own line-height.

    Raises:
        ValueError: For an unknown view mode
        ConfigurationError: If rem_value is not a positive finite number,
            preset configs included
    """
    if view_mode not in VIEW_MODES:
        raise ValueError(f"Unknown view mode '{view_mode}', expected desktop or mobile")

    rem_value = config.rem_value
    if isinstance(rem_value, bool) or not isinstance(rem_value, (int, float)) \
            or not math.isfinite(rem_value) or rem_value <= 0:
        raise ConfigurationError(
            f"rem_value must be a positive number, got {rem_value!r}",
            field="rem_value", value=rem_value, error_type=ErrorType.INVALID_VALUE,
        )

    typography = config.typography
    if step.is_preset_step:
        size = step.font_size
        line_height = step.line_height or typography.line_height
    else:
        size = step.max_size if view_mode == "desktop" else step.min_size
        line_height = (
            typography.heading_line_height if is_heading_step(step.name) else typography.line_height
        )

    if round_to_whole_number:
        size_px = format_number(round_to(size, 0))
    else:
        size_px = format_number(round_to(size, 3))

    return StepMetrics(
        name=step.name,
        font_size_px=size_px,
        font_size_rem=round_to(size / rem_value, 3),
        line_height=round_to(line_height, 3),
        line_height_px=round_line_height_px(
            size * line_height, round_to_whole_number, round_line_height_to_multiple_of_4
        ),
    )
