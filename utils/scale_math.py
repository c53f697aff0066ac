"""
Scale Math - Numeric helpers for fluid type scales

PURPOSE: Rounding, number formatting, px/rem conversion and the linear
         interpolation behind every clamp() expression.

CONTEXT: Used by core.scale_engine to build clamp expressions and by
         core.scale_report for display values. Pure functions, no state.

ROUNDING: Values are rounded half away from zero on their exact binary value,
          the same result browsers produce for Number.prototype.toFixed(),
          so generated CSS matches what the web tool emits.
"""
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Tuple

from utils.error_handler import DegenerateViewportError


def _quantize(value: float, decimals: int) -> Decimal:
    if decimals < 0:
        raise ValueError(f"Decimals must not be negative, got {decimals}")
    exact = Decimal(value)
    with localcontext() as ctx:
        # Room for every integer digit plus the requested decimals
        ctx.prec = max(exact.adjusted(), 0) + decimals + 2
        return exact.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)


def round_to(value: float, decimals: int) -> float:
    """
    Round value to the given number of decimal places.

    Example:
        >>> round_to(0.78694, 3)
        0.787
        >>> round_to(2.5, 0)
        3.0
    """
    return float(_quantize(value, decimals))


def to_fixed(value: float, decimals: int) -> str:
    """
    Format value with exactly `decimals` digits after the point.

    Example:
        >>> to_fixed(1, 3)
        '1.000'
    """
    return format(_quantize(value, decimals), "f")


def format_number(value: float) -> str:
    """
    Shortest plain-decimal representation of a number.

    Example:
        >>> format_number(14.0)
        '14'
        >>> format_number(0.875)
        '0.875'
        >>> format_number(1e-07)
        '0.0000001'
    """
    if value == 0:
        return "0"
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def px_to_rem(px: float, rem_value: float) -> float:
    """Convert pixels to rem for a root font size of rem_value px"""
    if rem_value <= 0:
        raise ValueError(f"rem value must be positive, got {rem_value}")
    return px / rem_value


def rem_to_px(rem: float, rem_value: float) -> float:
    """Convert rem back to pixels"""
    return rem * rem_value


def format_length(px: float, use_rems: bool, rem_value: float, decimals: int) -> str:
    """
    Format a pixel size as a CSS length, trailing zeros trimmed.

    Example:
        >>> format_length(14, True, 16, 3)
        '0.875rem'
        >>> format_length(18, False, 16, 3)
        '18px'
    """
    if use_rems:
        return f"{format_number(round_to(px_to_rem(px, rem_value), decimals))}rem"
    return f"{format_number(round_to(px, decimals))}px"


def format_fixed_length(px: float, use_rems: bool, rem_value: float, decimals: int) -> str:
    """
    Format a pixel size as a CSS length with exactly `decimals` places.

    Example:
        >>> format_fixed_length(16, True, 16, 3)
        '1.000rem'
    """
    if use_rems:
        return f"{to_fixed(px_to_rem(px, rem_value), decimals)}rem"
    return f"{to_fixed(px, decimals)}px"


def step_size(base_size: float, ratio: float, power: int) -> float:
    """
    Size of the step `power` rungs away from the base step.

    Formula:
        size = base_size * ratio ** power
    """
    return base_size * ratio ** power


def linear_interpolation(
    min_width: float,
    min_size: float,
    max_width: float,
    max_size: float
) -> Tuple[float, float]:
    """
    Line through (min_width, min_size) and (max_width, max_size).

    Returns:
        Tuple of (slope, y_intercept), both in px per px / px

    Raises:
        DegenerateViewportError: If min_width == max_width

    Example:
        >>> slope, intercept = linear_interpolation(375, 14, 1440, 18)
        >>> round(slope, 6), round(intercept, 3)
        (0.003756, 12.592)
    """
    if max_width == min_width:
        raise DegenerateViewportError(min_width)

    slope = (max_size - min_size) / (max_width - min_width)
    y_intercept = min_size - slope * min_width
    return slope, y_intercept
