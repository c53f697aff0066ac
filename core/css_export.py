"""
CSS Export - :root custom-properties block for a computed scale
"""
from typing import Iterable, Optional

from config import INHERIT
from core.scale_config import TypeScaleConfig
from core.scale_engine import TypeStep, compute_steps
from utils.logger import get_logger

logger = get_logger()


def generate_css(steps: Iterable[TypeStep], config: TypeScaleConfig) -> str:
    """
    Render steps as CSS custom properties.

    Example output:
        :root {
          --fs-body: clamp(0.875rem, 0.787rem + 0.376vw, 1.125rem);

          /* Typography Settings */
          --font-body: 'Inter', sans-serif;
          --font-heading: var(--font-body);
        }
    """
    typography = config.typography
    lines = [":root {"]
    count = 0
    for step in steps:
        lines.append(f"  --{config.prefix}-{step.name}: {step.clamp};")
        count += 1

    if typography.heading_font_family == INHERIT:
        heading = "var(--font-body)"
    else:
        heading = f"'{typography.heading_font_family}', sans-serif"

    lines.append("")
    lines.append("  /* Typography Settings */")
    lines.append(f"  --font-body: '{typography.font_family}', sans-serif;")
    lines.append(f"  --font-heading: {heading};")
    lines.append("}")

    logger.log_export(config.prefix, count)
    return "\n".join(lines)


def export_css(config: TypeScaleConfig, simulated_width: Optional[float] = None) -> str:
    """
    Compute the scale and render it in one call.

    Raises:
        ConfigurationError: Propagated from compute_steps, so an invalid
            configuration never produces a CSS block
    """
    return generate_css(compute_steps(config, simulated_width), config)
