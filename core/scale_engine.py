"""
Scale Engine - Fluid type scale computation

PURPOSE: Turn a TypeScaleConfig into an ordered list of TypeSteps, each with
         its size at both viewport bounds and a ready-to-use CSS length.

CONTEXT: Called on every configuration or preview-width change by
         core.session, core.css_export and the CLI. Pure: the same input
         always yields a fresh, equal list.

MODES (priority order):
    1. PRESET - either ratio is Preset.SHADCN: the fixed preset table,
       constant px sizes, viewport and ratios ignored.
    2. PINNED - simulated preview width <= min_width: constant sizes from the
       minimum-side parameters, emitted as plain length literals.
    3. FLUID  - clamp(lo, intercept + slope*100 vw, hi) per step, the
       preferred term being the line through (min_width, min_size) and
       (max_width, max_size).

Headings (names starting with "heading-") always scale from the 16px
reference size, so only the ratio drives them; other steps scale from the
configured font sizes.
"""
import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from config import HEADING_REFERENCE_SIZE, HEADING_STEP_PREFIX, MAX_DECIMALS
from core.presets import Preset, StepCategory, preset_table
from core.scale_config import TypeScaleConfig
from utils.error_handler import ConfigurationError, DegenerateViewportError, ErrorType
from utils.logger import get_logger
from utils.scale_math import (
    format_fixed_length,
    format_length,
    format_number,
    linear_interpolation,
    px_to_rem,
    rem_to_px,
    round_to,
    step_size,
)

logger = get_logger()


class ScaleMode(Enum):
    PRESET = "preset"
    PINNED = "pinned"
    FLUID = "fluid"


@dataclass(frozen=True)
class TypeStep:
    """
    One computed rung of the type scale.

    Attributes:
        name: Step name from config.steps or the preset table
        min_size: Size at min_width in px
        max_size: Size at max_width in px
        clamp: CSS length or clamp() expression
        fallbacks: Static fallback declarations (only with include_fallbacks)
        font_size, font_weight, line_height, letter_spacing, category:
            Set only for preset steps, which carry their own typography
    """
    name: str
    min_size: float
    max_size: float
    clamp: str
    fallbacks: Tuple[str, ...] = ()
    font_size: Optional[float] = None
    font_weight: Optional[int] = None
    line_height: Optional[float] = None
    letter_spacing: Optional[float] = None
    category: Optional[StepCategory] = None

    @property
    def is_preset_step(self) -> bool:
        return self.category is not None


@dataclass(frozen=True)
class ClampParts:
    """Numeric content of a generated length, all values in px"""
    lower: float
    upper: float
    intercept: float
    slope: float  # px of font size per px of viewport


def is_heading_step(name: str) -> bool:
    return name.startswith(HEADING_STEP_PREFIX)


def select_mode(config: TypeScaleConfig, simulated_width: Optional[float] = None) -> ScaleMode:
    """Decide which computation applies to this config and preview width"""
    if config.is_preset:
        return ScaleMode.PRESET
    if simulated_width is not None and simulated_width <= config.min_width:
        return ScaleMode.PINNED
    return ScaleMode.FLUID


def _check_number(name: str, value, positive: bool = True) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(
            f"{name} must be a number, got {value!r}",
            field=name, value=value, error_type=ErrorType.INVALID_VALUE,
        )
    if not math.isfinite(value):
        raise ConfigurationError(
            f"{name} must be finite, got {value!r}",
            field=name, value=value, error_type=ErrorType.INVALID_VALUE,
        )
    if positive and value <= 0:
        raise ConfigurationError(
            f"{name} must be positive, got {value!r}",
            field=name, value=value, error_type=ErrorType.INVALID_VALUE,
        )


def validate_config(config: TypeScaleConfig, simulated_width: Optional[float] = None) -> None:
    """
    Check a non-preset configuration before any step is produced.

    Raises:
        ConfigurationError: On non-numeric, non-finite or non-positive sizes,
            widths, ratios or rem value, decimals outside 0..MAX_DECIMALS,
            duplicate step names or a base step missing from a non-empty
            step list
        DegenerateViewportError: If min_width == max_width
    """
    for name in ("min_width", "max_width", "min_font_size", "max_font_size",
                 "min_ratio", "max_ratio", "rem_value"):
        _check_number(name, getattr(config, name))

    if simulated_width is not None:
        _check_number("simulated_width", simulated_width, positive=False)

    decimals = config.decimals
    if isinstance(decimals, bool) or not isinstance(decimals, int) or not 0 <= decimals <= MAX_DECIMALS:
        raise ConfigurationError(
            f"decimals must be an integer from 0 to {MAX_DECIMALS}, got {decimals!r}",
            field="decimals", value=decimals, error_type=ErrorType.INVALID_VALUE,
        )

    if config.min_width == config.max_width:
        raise DegenerateViewportError(config.min_width)

    seen = set()
    for name in config.steps:
        if name in seen:
            raise ConfigurationError(f"Duplicate step name '{name}'", field="steps", value=name)
        seen.add(name)

    if config.steps and config.base_step not in seen:
        raise ConfigurationError(
            f"Base step '{config.base_step}' is not one of the steps",
            field="base_step", value=config.base_step, error_type=ErrorType.MISSING_STEP,
        )


def _preset_steps(preset: Preset) -> List[TypeStep]:
    return [
        TypeStep(
            name=style.name,
            min_size=style.font_size,
            max_size=style.font_size,
            clamp=f"{format_number(style.font_size)}px",
            font_size=style.font_size,
            font_weight=style.font_weight,
            line_height=style.line_height,
            letter_spacing=style.letter_spacing,
            category=style.category,
        )
        for style in preset_table(preset)
    ]


def _sized(name: str, base: float, ratio: float, power: int) -> float:
    try:
        size = step_size(base, ratio, power)
    except OverflowError:
        size = math.inf
    if not math.isfinite(size) or size <= 0:
        raise ConfigurationError(
            f"Step '{name}' has no finite size ({base} * {ratio} ** {power})",
            field="steps", value=name, error_type=ErrorType.INVALID_VALUE,
        )
    return size


def _pinned_steps(config: TypeScaleConfig) -> List[TypeStep]:
    base_index = config.steps.index(config.base_step)
    result = []
    for index, name in enumerate(config.steps):
        power = index - base_index
        base = HEADING_REFERENCE_SIZE if is_heading_step(name) else config.min_font_size
        size = _sized(name, base, config.min_ratio, power)
        result.append(TypeStep(
            name=name,
            min_size=size,
            max_size=size,
            clamp=format_fixed_length(size, config.use_rems, config.rem_value, config.decimals),
        ))
    return result


def _fluid_step(config: TypeScaleConfig, name: str, power: int) -> TypeStep:
    if is_heading_step(name):
        base_min = base_max = HEADING_REFERENCE_SIZE
    else:
        base_min, base_max = config.min_font_size, config.max_font_size

    min_px = _sized(name, base_min, config.min_ratio, power)
    max_px = _sized(name, base_max, config.max_ratio, power)

    slope, y_intercept = linear_interpolation(config.min_width, min_px, config.max_width, max_px)

    unit = "rem" if config.use_rems else "px"
    intercept_value = px_to_rem(y_intercept, config.rem_value) if config.use_rems else y_intercept
    intercept = f"{format_number(round_to(intercept_value, config.decimals))}{unit}"

    slope_coefficient = format_number(round_to(slope * 100, config.decimals))
    vp_unit = "cqi" if config.use_container_width else "vw"
    preferred = f"{intercept} + {slope_coefficient}{vp_unit}"

    # Bounds are sorted so the clamp stays valid when min_px > max_px
    lower, upper = sorted((min_px, max_px))
    lower_str = format_length(lower, config.use_rems, config.rem_value, config.decimals)
    upper_str = format_length(upper, config.use_rems, config.rem_value, config.decimals)

    fallbacks = ()
    if config.include_fallbacks:
        fallback = format_length(min_px, config.use_rems, config.rem_value, config.decimals)
        fallbacks = (f"font-size: {fallback};",)

    return TypeStep(
        name=name,
        min_size=min_px,
        max_size=max_px,
        clamp=f"clamp({lower_str}, {preferred}, {upper_str})",
        fallbacks=fallbacks,
    )


def compute_steps(
    config: TypeScaleConfig,
    simulated_width: Optional[float] = None
) -> List[TypeStep]:
    """
    Compute the type scale for a configuration.

    Args:
        config: Complete configuration snapshot
        simulated_width: Width of the simulated preview in px; None means an
            unconstrained preview (fluid mode)

    Returns:
        New list of TypeSteps, in config.steps order (preset table order in
        preset mode)

    Raises:
        ConfigurationError: If a non-preset configuration is invalid

    Example:
        >>> steps = compute_steps(TypeScaleConfig(max_font_size=18, steps=("body",)))
        >>> steps[0].clamp
        'clamp(0.875rem, 0.787rem + 0.376vw, 1.125rem)'
    """
    mode = select_mode(config, simulated_width)

    if mode is ScaleMode.PRESET:
        if isinstance(config.min_ratio, Preset) != isinstance(config.max_ratio, Preset):
            logger.warning("Only one ratio selects a preset; using the preset scale")
        steps = _preset_steps(config.preset)
        logger.log_scale_computation(mode.value, len(steps))
        return steps

    validate_config(config, simulated_width)

    if not config.steps:
        return []

    if mode is ScaleMode.PINNED:
        steps = _pinned_steps(config)
    else:
        base_index = config.steps.index(config.base_step)
        steps = [
            _fluid_step(config, name, index - base_index)
            for index, name in enumerate(config.steps)
        ]

    logger.log_scale_computation(mode.value, len(steps))
    return steps


_NUMBER = r"-?\d+(?:\.\d+)?"
_LENGTH_RE = re.compile(rf"^\s*(?P<value>{_NUMBER})(?P<unit>rem|px)\s*$")
_CLAMP_RE = re.compile(
    rf"^\s*clamp\(\s*(?P<lower>{_NUMBER})(?P<lower_unit>rem|px)\s*,"
    rf"\s*(?P<intercept>{_NUMBER})(?P<intercept_unit>rem|px)"
    rf"\s*\+\s*(?P<slope>{_NUMBER})(?:vw|cqi)\s*,"
    rf"\s*(?P<upper>{_NUMBER})(?P<upper_unit>rem|px)\s*\)\s*$"
)


def _to_px(value: str, unit: str, rem_value: float) -> float:
    number = float(value)
    return rem_to_px(number, rem_value) if unit == "rem" else number


def parse_clamp(expression: str, rem_value: float = 16) -> ClampParts:
    """
    Parse a length generated by compute_steps back into numbers.

    Plain literals ("16px", "1.000rem") parse as a constant line.

    Raises:
        ValueError: If the expression was not produced by this engine
    """
    literal = _LENGTH_RE.match(expression)
    if literal:
        value = _to_px(literal["value"], literal["unit"], rem_value)
        return ClampParts(lower=value, upper=value, intercept=value, slope=0.0)

    match = _CLAMP_RE.match(expression)
    if not match:
        raise ValueError(f"Not a generated clamp expression: {expression!r}")

    return ClampParts(
        lower=_to_px(match["lower"], match["lower_unit"], rem_value),
        upper=_to_px(match["upper"], match["upper_unit"], rem_value),
        intercept=_to_px(match["intercept"], match["intercept_unit"], rem_value),
        slope=float(match["slope"]) / 100,
    )


def evaluate_preferred(expression: str, viewport_width: float, rem_value: float = 16) -> float:
    """Value of the preferred (middle) term at viewport_width, in px"""
    parts = parse_clamp(expression, rem_value)
    return parts.intercept + parts.slope * viewport_width


def evaluate_clamp(expression: str, viewport_width: float, rem_value: float = 16) -> float:
    """Rendered size at viewport_width in px, bounds applied"""
    parts = parse_clamp(expression, rem_value)
    preferred = parts.intercept + parts.slope * viewport_width
    return max(parts.lower, min(preferred, parts.upper))
