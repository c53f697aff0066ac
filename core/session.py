"""
Session - In-memory editing state of the scale designer

PURPOSE: Hold what the control panel edits (configuration, preview width,
         slot mappings, display toggles) and derive steps, styles and CSS
         from it on demand.

CONTEXT: Replaces the web tool's component state. Nothing is persisted; a
         new ScaleSession starts from the defaults in config.py.

FALLBACK: While the user is mid-edit the configuration may be invalid. The
          engine raises ConfigurationError; the session logs it, keeps it in
          last_error and keeps serving the last valid step list. CSS export
          does not fall back and raises instead.
"""
from typing import List, Optional

from config import (
    FULL_WIDTH,
    DEFAULT_ROUND_TO_WHOLE_NUMBER,
    DEFAULT_ROUND_LINE_HEIGHT_TO_MULTIPLE_OF_4,
)
from core.css_export import generate_css
from core.scale_config import TypeScaleConfig
from core.scale_engine import TypeStep, compute_steps
from core.scale_report import StepMetrics, describe_step
from core.style_mapping import StyleMappingTable
from core.style_resolver import StyleProperties, resolve_style
from core.viewport import clamp_preview_width, preset_for_width, simulated_width, width_for_preset
from utils.error_handler import ConfigurationError, error_handler
from utils.logger import get_logger

logger = get_logger()


class ScaleSession:
    """Mutable session state around the pure scale engine"""

    def __init__(self, config: Optional[TypeScaleConfig] = None):
        self.config = config or TypeScaleConfig()
        self.preview_width: float = FULL_WIDTH
        self.responsive_mode = False
        self.mappings = StyleMappingTable()
        self.round_to_whole_number = DEFAULT_ROUND_TO_WHOLE_NUMBER
        self.round_line_height_to_multiple_of_4 = DEFAULT_ROUND_LINE_HEIGHT_TO_MULTIPLE_OF_4

        self.last_error: Optional[ConfigurationError] = None
        self._last_valid_steps: List[TypeStep] = []

        logger.info("ScaleSession initialized")

    # Configuration

    def update(self, **changes) -> TypeScaleConfig:
        """Replace configuration fields (typography fields included)"""
        self.config = self.config.with_changes(**changes)
        return self.config

    def reset(self):
        """Back to the default configuration and display toggles"""
        self.config = TypeScaleConfig()
        self.round_to_whole_number = DEFAULT_ROUND_TO_WHOLE_NUMBER
        self.round_line_height_to_multiple_of_4 = DEFAULT_ROUND_LINE_HEIGHT_TO_MULTIPLE_OF_4
        self.last_error = None
        logger.info("Configuration reset to defaults")

    @property
    def is_default(self) -> bool:
        return (
            self.config == TypeScaleConfig()
            and self.round_to_whole_number is True
            and self.round_line_height_to_multiple_of_4 is True
        )

    # Preview width

    def set_preview_width(self, width: float, dragged: bool = False):
        """
        Set the simulated preview width.

        Dragging the preview edges switches to responsive mode and limits the
        width to the draggable range.
        """
        if dragged:
            self.responsive_mode = True
            width = clamp_preview_width(width)
        self.preview_width = width

    def select_screen(self, name: str):
        """Apply a screen preset ("desktop", "laptop", ...) or "responsive"."""
        if name == "responsive":
            self.responsive_mode = True
            self.preview_width = FULL_WIDTH
            return
        self.responsive_mode = False
        self.preview_width = width_for_preset(name)

    @property
    def screen(self) -> str:
        return preset_for_width(self.preview_width, self.responsive_mode)

    # Derived values

    @property
    def steps(self) -> List[TypeStep]:
        """Current step list, or the last valid one if the config is invalid"""
        try:
            steps = compute_steps(self.config, simulated_width(self.preview_width))
        except ConfigurationError as e:
            self.last_error = e
            error_handler.log_error(e, context={"preview_width": self.preview_width})
            return list(self._last_valid_steps)

        self.last_error = None
        self._last_valid_steps = steps
        return list(steps)

    @property
    def available_step_names(self) -> List[str]:
        return [step.name for step in self.steps]

    @property
    def css(self) -> str:
        """
        CSS export of the current configuration

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        steps = compute_steps(self.config, simulated_width(self.preview_width))
        return generate_css(steps, self.config)

    def style_for_slot(self, slot_id: str) -> StyleProperties:
        """Resolved style of a preview text slot, honouring overrides"""
        return resolve_style(
            self.steps,
            self.mappings.step_for(slot_id),
            self.config.typography,
            self.config.is_preset,
        )

    def step_metrics(self, view_mode: str = "desktop") -> List[StepMetrics]:
        """
        Display metrics of the current steps

        Raises:
            ConfigurationError: If rem_value is invalid
        """
        return [
            describe_step(
                step,
                self.config,
                view_mode,
                self.round_to_whole_number,
                self.round_line_height_to_multiple_of_4,
            )
            for step in self.steps
        ]
