#!/usr/bin/env python3
"""
Fluid Type CLI - Main entry point

Generates fluid type scales as CSS custom properties.
"""

import json
import sys
from pathlib import Path
from typing import Optional

import click

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import APP_NAME, APP_VERSION, NAMED_RATIOS, SCREEN_PRESETS
from core.css_export import generate_css
from core.scale_config import TypeScaleConfig
from core.scale_engine import compute_steps, evaluate_clamp, select_mode
from core.style_mapping import StyleMappingTable
from core.style_resolver import resolve_style, to_css_declarations
from core.viewport import simulated_width, width_for_preset
from utils.error_handler import ConfigurationError, error_handler
from utils.logger import get_logger
from utils.scale_math import format_number, round_to

logger = get_logger()

CONFIG_ERROR_EXIT_CODE = 2
ERROR_EXIT_CODE = 1


def scale_options(func):
    """Options shared by every command that computes a scale"""
    options = [
        click.option("--config", "config_file", type=click.Path(exists=True, dir_okay=False, path_type=Path),
                     default=None, help="JSON file with configuration values (camelCase or snake_case keys)"),
        click.option("--min-width", type=float, default=None, help="Minimum viewport width in px (default: 375)"),
        click.option("--max-width", type=float, default=None, help="Maximum viewport width in px (default: 1440)"),
        click.option("--min-font-size", type=float, default=None, help="Base step size at min width in px"),
        click.option("--max-font-size", type=float, default=None, help="Base step size at max width in px"),
        click.option("--ratio", default=None, help="Ratio for both bounds: number, name (e.g. major-third) or 'shadcn'"),
        click.option("--min-ratio", default=None, help="Ratio at min width"),
        click.option("--max-ratio", default=None, help="Ratio at max width"),
        click.option("--steps", "step_names", default=None, help="Comma-separated step names, smallest first"),
        click.option("--base-step", default=None, help="Step whose size equals the font size (default: body)"),
        click.option("--prefix", default=None, help="Custom property prefix (default: fs)"),
        click.option("--decimals", type=click.IntRange(min=0), default=None, help="Rounding precision (default: 3)"),
        click.option("--rem/--px", "use_rems", default=None, help="Output unit (default: rem)"),
        click.option("--rem-value", type=float, default=None, help="px per rem (default: 16)"),
        click.option("--container/--viewport", "use_container_width", default=None,
                     help="Interpolate on container width (cqi) instead of viewport width (vw)"),
        click.option("--fallbacks/--no-fallbacks", "include_fallbacks", default=None,
                     help="Attach static font-size fallbacks"),
        click.option("--font", "font_family", default=None, help="Body font family"),
        click.option("--heading-font", "heading_font_family", default=None,
                     help="Heading font family or 'inherit'"),
        click.option("--screen", type=click.Choice(list(SCREEN_PRESETS)), default=None,
                     help="Simulate a screen preset"),
        click.option("--preview-width", type=float, default=None,
                     help="Simulated preview width in px (overrides --screen)"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def load_config_file(path: Path) -> dict:
    """Read a JSON configuration file into a mapping"""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {path}: {e}", field="config", value=str(path)) from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"{path} must contain a JSON object", field="config", value=str(path))

    logger.debug(f"Loaded configuration from {path}")
    return data


def build_config(config_file: Optional[Path] = None, ratio: Optional[str] = None, **options) -> TypeScaleConfig:
    """
    Merge defaults, the optional config file and command-line options.

    Command-line options win over the file; --ratio sets both ratios unless
    --min-ratio / --max-ratio are given.
    """
    config = TypeScaleConfig.from_dict(load_config_file(config_file)) if config_file else TypeScaleConfig()

    changes = {name: value for name, value in options.items() if value is not None}
    if ratio is not None:
        changes.setdefault("min_ratio", ratio)
        changes.setdefault("max_ratio", ratio)
    if "step_names" in changes:
        changes["steps"] = changes.pop("step_names")

    return config.with_changes(**changes)


def resolve_preview_width(screen: Optional[str], preview_width: Optional[float]) -> Optional[float]:
    if preview_width is not None:
        return simulated_width(preview_width)
    if screen is not None:
        return simulated_width(width_for_preset(screen))
    return None


def _split_scale_options(options: dict):
    screen = options.pop("screen")
    preview_width = options.pop("preview_width")
    config = build_config(**options)
    return config, resolve_preview_width(screen, preview_width)


def _fail(error: Exception, context: Optional[dict] = None):
    error_handler.log_error(error, context)
    click.secho(f"Error: {error}", fg="red", err=True)
    if isinstance(error, ConfigurationError):
        sys.exit(CONFIG_ERROR_EXIT_CODE)
    sys.exit(ERROR_EXIT_CODE)


@click.group()
@click.version_option(APP_VERSION, prog_name=APP_NAME)
def main():
    """
    Generate fluid typography scales built on CSS clamp().

    \b
    Examples:
        fluidtype css
        fluidtype css --max-font-size 18 --ratio major-third
        fluidtype css --ratio shadcn
        fluidtype steps --screen mobile
        fluidtype style landing-heading
    """


@main.command()
@scale_options
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Write the CSS to a file instead of stdout")
def css(output: Optional[Path], **options):
    """Print the :root custom-properties block."""
    try:
        config, width = _split_scale_options(options)
        steps = compute_steps(config, width)
    except ConfigurationError as e:
        _fail(e)

    block = generate_css(steps, config)
    if output is None:
        click.echo(block)
        return

    try:
        output.write_text(block + "\n", encoding="utf-8")
    except OSError as e:
        _fail(e, context={"output": str(output)})
    click.secho(f"✓ Wrote {len(steps)} steps to {output}", fg="green", err=True)


@main.command()
@scale_options
@click.option("--at", "at_width", type=float, default=None,
              help="Also show the rendered size at this viewport width")
def steps(at_width: Optional[float], **options):
    """Show every step with its size range and CSS value."""
    try:
        config, width = _split_scale_options(options)
        result = compute_steps(config, width)
    except ConfigurationError as e:
        _fail(e)

    mode = select_mode(config, width)
    click.secho(f"{len(result)} steps ({mode.value} mode)", fg="cyan", bold=True)

    for step in reversed(result):
        line = (
            f"  {step.name:<12} {format_number(round_to(step.min_size, 3)):>8}px"
            f" -> {format_number(round_to(step.max_size, 3)):>8}px   {step.clamp}"
        )
        if at_width is not None:
            rendered = evaluate_clamp(step.clamp, at_width, config.rem_value)
            line += f"   @{format_number(at_width)}px: {format_number(round_to(rendered, 3))}px"
        click.echo(line)


@main.command()
@scale_options
@click.argument("slot")
@click.option("--step", "step_name", default=None, help="Override the step mapped to SLOT")
def style(slot: str, step_name: Optional[str], **options):
    """Show the resolved style of a preview text SLOT (e.g. landing-heading)."""
    try:
        config, width = _split_scale_options(options)
        result = compute_steps(config, width)
    except ConfigurationError as e:
        _fail(e)

    mappings = StyleMappingTable()
    if step_name:
        mappings.set(slot, step_name)

    mapped = mappings.step_for(slot)
    properties = resolve_style(result, mapped, config.typography, config.is_preset)

    click.echo(f"{slot} -> {mapped}")
    if properties:
        click.echo(f"  {to_css_declarations(properties)}")
    else:
        click.secho("  (no matching step, inherits surrounding styles)", fg="yellow")


@main.command()
def ratios():
    """List the named scale ratios."""
    for key, ratio in NAMED_RATIOS.items():
        value = ratio["value"]
        shown = f"{value:.3f}" if isinstance(value, float) else value
        click.echo(f"  {key:<18} {shown:<8} {ratio['name']}")


if __name__ == "__main__":
    main()
