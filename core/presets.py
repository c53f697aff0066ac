"""
Presets - Fixed design-system type scales and scale ratios

PURPOSE: Hold the closed lookup tables of the tool: the fixed "shadcn" text
         styles, the named scale ratios and the legacy step-name aliases.

CONTEXT: A ratio is either a number (geometric step ratio) or Preset.SHADCN.
         core.scale_engine dispatches on isinstance(ratio, Preset).
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple, Union

from config import NAMED_RATIOS
from utils.error_handler import ConfigurationError


class Preset(Enum):
    """Fixed design-system scales"""
    SHADCN = "shadcn"


ScaleRatio = Union[float, Preset]

# Extra spellings accepted for the preset sentinel
_PRESET_ALIASES = {"preset": Preset.SHADCN}


class StepCategory(Enum):
    HEADING = "heading"
    BODY = "body"


@dataclass(frozen=True)
class PresetStyle:
    """One named step of a fixed design-system scale"""
    name: str
    font_size: float
    font_weight: int
    line_height: float
    letter_spacing: float  # em
    category: StepCategory


SHADCN_TEXT_STYLES: Tuple[PresetStyle, ...] = (
    PresetStyle("heading-1", 48, 800, 1, -0.025, StepCategory.HEADING),
    PresetStyle("heading-2", 30, 600, 1.2, -0.025, StepCategory.HEADING),
    PresetStyle("heading-3", 24, 600, 1.333, -0.025, StepCategory.HEADING),
    PresetStyle("heading-4", 20, 600, 1.4, -0.025, StepCategory.HEADING),
    PresetStyle("heading-5", 18, 600, 1.5, -0.025, StepCategory.HEADING),
    PresetStyle("heading-6", 16, 600, 1.5, -0.025, StepCategory.HEADING),
    # body-sm and body-lg are 14px divided / multiplied by 1.125
    PresetStyle("body", 14, 400, 1.5, 0, StepCategory.BODY),
    PresetStyle("body-sm", 12.44, 400, 1.25, 0, StepCategory.BODY),
    PresetStyle("body-lg", 15.75, 400, 1.75, 0, StepCategory.BODY),
)

PRESET_TABLES: Dict[Preset, Tuple[PresetStyle, ...]] = {
    Preset.SHADCN: SHADCN_TEXT_STYLES,
}

# Legacy preview step names -> current step names
STEP_NAME_ALIASES: Dict[str, str] = {
    "display": "heading-1",
    "xxxl": "heading-2",
    "xxl": "heading-3",
    "xl": "heading-4",
    "lg": "heading-5",
    "md": "heading-6",
    "base": "body",
    "sm": "body-sm",
}


def preset_table(preset: Preset) -> Tuple[PresetStyle, ...]:
    """Return the ordered step table of a fixed preset"""
    return PRESET_TABLES[preset]


def resolve_alias(step_name: str) -> str:
    """Map a legacy step name to its current name, other names pass through"""
    return STEP_NAME_ALIASES.get(step_name, step_name)


def parse_ratio(value) -> ScaleRatio:
    """
    Parse a user-supplied ratio into a ScaleRatio.

    Accepts numbers, numeric strings, named ratios ("major-third",
    "Golden Ratio") and the preset sentinels "shadcn" / "preset".

    Raises:
        ConfigurationError: If the value cannot be interpreted

    Example:
        >>> parse_ratio("1.25")
        1.25
        >>> parse_ratio("perfect-fourth")
        1.333
        >>> parse_ratio("shadcn")
        <Preset.SHADCN: 'shadcn'>
    """
    if isinstance(value, Preset):
        return value
    if isinstance(value, bool):
        raise ConfigurationError(f"Invalid ratio: {value!r}", field="ratio", value=value)
    if isinstance(value, (int, float)):
        return float(value)
    if not isinstance(value, str):
        raise ConfigurationError(f"Invalid ratio: {value!r}", field="ratio", value=value)

    key = value.strip().lower().replace(" ", "-").replace("_", "-")
    if key in _PRESET_ALIASES:
        return _PRESET_ALIASES[key]
    for preset in Preset:
        if key == preset.value:
            return preset
    if key in NAMED_RATIOS:
        return parse_ratio(NAMED_RATIOS[key]["value"])

    try:
        return float(key)
    except ValueError:
        raise ConfigurationError(
            f"Unknown ratio {value!r}; use a number, one of "
            f"{', '.join(NAMED_RATIOS)} or 'preset'",
            field="ratio",
            value=value,
        ) from None


def ratio_to_value(ratio: ScaleRatio):
    """Plain representation of a ratio (number or preset name)"""
    return ratio.value if isinstance(ratio, Preset) else ratio
