"""
Scale Config - Immutable configuration snapshot for one scale computation

PURPOSE: Typed replacement for the web tool's mutable config object. Every
         computation receives a complete TypeScaleConfig by value.

CONTEXT: Built by core.session / cli.main, consumed by core.scale_engine,
         core.style_resolver and core.css_export.
"""
from dataclasses import dataclass, field, fields, replace, asdict
from typing import Any, Dict, Mapping, Tuple

from config import (
    DEFAULT_MIN_WIDTH,
    DEFAULT_MAX_WIDTH,
    DEFAULT_MIN_FONT_SIZE,
    DEFAULT_MAX_FONT_SIZE,
    DEFAULT_RATIO,
    DEFAULT_STEPS,
    DEFAULT_BASE_STEP,
    DEFAULT_PREFIX,
    DEFAULT_DECIMALS,
    DEFAULT_REM_VALUE,
    DEFAULT_USE_REMS,
    DEFAULT_USE_CONTAINER_WIDTH,
    DEFAULT_INCLUDE_FALLBACKS,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_WEIGHT,
    DEFAULT_LINE_HEIGHT,
    DEFAULT_LETTER_SPACING,
    DEFAULT_COLOR,
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_HEADING_FONT_FAMILY,
    DEFAULT_HEADING_FONT_WEIGHT,
    DEFAULT_HEADING_LINE_HEIGHT,
    DEFAULT_HEADING_LETTER_SPACING,
    DEFAULT_HEADING_COLOR,
)
from core.presets import Preset, ScaleRatio, parse_ratio, ratio_to_value
from utils.error_handler import ConfigurationError
from utils.logger import get_logger

logger = get_logger()


@dataclass(frozen=True)
class TypographySettings:
    """Body and heading typography, used by the style resolver only"""
    font_family: str = DEFAULT_FONT_FAMILY
    font_weight: int = DEFAULT_FONT_WEIGHT
    line_height: float = DEFAULT_LINE_HEIGHT
    letter_spacing: float = DEFAULT_LETTER_SPACING
    color: str = DEFAULT_COLOR
    background_color: str = DEFAULT_BACKGROUND_COLOR

    heading_font_family: str = DEFAULT_HEADING_FONT_FAMILY
    heading_font_weight: int = DEFAULT_HEADING_FONT_WEIGHT
    heading_line_height: float = DEFAULT_HEADING_LINE_HEIGHT
    heading_letter_spacing: float = DEFAULT_HEADING_LETTER_SPACING
    heading_color: str = DEFAULT_HEADING_COLOR


@dataclass(frozen=True)
class TypeScaleConfig:
    """
    Complete input of one scale computation.

    Attributes:
        min_width, max_width: Viewport bounds in px
        min_font_size, max_font_size: Base step size at each bound in px
        min_ratio, max_ratio: Step ratio at each bound, or Preset.SHADCN
        steps: Step names, smallest first; order defines each step's exponent
        base_step: Step whose size equals min_font_size / max_font_size
        prefix: Custom property prefix for CSS export
        decimals: Rounding precision of emitted numbers
        use_rems: Emit rem instead of px
        rem_value: px per rem
        use_container_width: Use cqi instead of vw in the preferred term
        include_fallbacks: Attach a static font-size fallback to each step
        typography: Body / heading typography
    """
    min_width: float = DEFAULT_MIN_WIDTH
    max_width: float = DEFAULT_MAX_WIDTH
    min_font_size: float = DEFAULT_MIN_FONT_SIZE
    max_font_size: float = DEFAULT_MAX_FONT_SIZE
    min_ratio: ScaleRatio = DEFAULT_RATIO
    max_ratio: ScaleRatio = DEFAULT_RATIO
    steps: Tuple[str, ...] = DEFAULT_STEPS
    base_step: str = DEFAULT_BASE_STEP
    prefix: str = DEFAULT_PREFIX
    decimals: int = DEFAULT_DECIMALS
    use_rems: bool = DEFAULT_USE_REMS
    rem_value: float = DEFAULT_REM_VALUE
    use_container_width: bool = DEFAULT_USE_CONTAINER_WIDTH
    include_fallbacks: bool = DEFAULT_INCLUDE_FALLBACKS
    typography: TypographySettings = field(default_factory=TypographySettings)

    def __post_init__(self):
        # Lists from callers are frozen so the snapshot stays immutable
        if isinstance(self.steps, str):
            names = [name.strip() for name in self.steps.split(",")]
            object.__setattr__(self, "steps", tuple(name for name in names if name))
        elif not isinstance(self.steps, tuple):
            object.__setattr__(self, "steps", tuple(self.steps))

        for name in ("min_ratio", "max_ratio"):
            value = getattr(self, name)
            if isinstance(value, str):
                object.__setattr__(self, name, parse_ratio(value))

    @property
    def is_preset(self) -> bool:
        """True if either ratio selects a fixed preset scale"""
        return isinstance(self.min_ratio, Preset) or isinstance(self.max_ratio, Preset)

    @property
    def preset(self):
        """The selected preset, min_ratio taking precedence, or None"""
        for ratio in (self.min_ratio, self.max_ratio):
            if isinstance(ratio, Preset):
                return ratio
        return None

    def with_changes(self, **changes) -> "TypeScaleConfig":
        """
        Return a copy with some fields replaced.

        Typography fields may be passed directly (e.g. heading_color="#000").
        """
        typography_names = {f.name for f in fields(TypographySettings)}
        typography_changes = {k: changes.pop(k) for k in list(changes) if k in typography_names}

        unknown = set(changes) - {f.name for f in fields(TypeScaleConfig)}
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration field(s): {', '.join(sorted(unknown))}",
                field=sorted(unknown)[0],
            )

        if typography_changes:
            base = changes.get("typography", self.typography)
            changes["typography"] = replace(base, **typography_changes)

        return replace(self, **changes)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TypeScaleConfig":
        """
        Build a config from a plain mapping.

        Keys may be snake_case or the camelCase names of the web tool
        ("minWidth", "headingFontFamily", ...). Unknown keys are ignored.
        """
        changes = {}
        for key, value in data.items():
            name = _FIELD_ALIASES.get(key, key)
            if name in _ALL_FIELD_NAMES:
                changes[name] = value
            else:
                logger.debug(f"Ignoring unknown configuration key '{key}'")

        if isinstance(changes.get("typography"), Mapping):
            changes["typography"] = TypographySettings(**changes["typography"])

        return cls().with_changes(**changes)

    def to_dict(self) -> Dict[str, Any]:
        """Plain snake_case mapping; preset ratios become their name"""
        data = asdict(self)
        data["steps"] = list(self.steps)
        data["min_ratio"] = ratio_to_value(self.min_ratio)
        data["max_ratio"] = ratio_to_value(self.max_ratio)
        return data


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


_CONFIG_FIELD_NAMES = {f.name for f in fields(TypeScaleConfig)}
_TYPOGRAPHY_FIELD_NAMES = {f.name for f in fields(TypographySettings)}
_ALL_FIELD_NAMES = _CONFIG_FIELD_NAMES | _TYPOGRAPHY_FIELD_NAMES
_FIELD_ALIASES = {_camel_case(name): name for name in _ALL_FIELD_NAMES}
