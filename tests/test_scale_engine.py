"""
Tests for scale_engine module - Fluid, pinned and preset scales
"""
import math

import pytest
from core.presets import Preset
from core.scale_config import TypeScaleConfig
from core.scale_engine import (
    ScaleMode,
    TypeStep,
    compute_steps,
    evaluate_clamp,
    evaluate_preferred,
    parse_clamp,
    select_mode,
)
from utils.error_handler import ConfigurationError, DegenerateViewportError, ErrorType

# Intercept and slope are each rounded to 3 decimals (rem and vw), which
# moves the preferred value by at most ~0.016px inside 375-1440px
ENDPOINT_TOLERANCE = 0.02


def _by_name(steps):
    return {step.name: step for step in steps}


@pytest.mark.unit
class TestSelectMode:
    """Tests for select_mode"""

    def test_unconstrained_is_fluid(self, default_config):
        assert select_mode(default_config) is ScaleMode.FLUID

    def test_narrow_preview_is_pinned(self, default_config):
        assert select_mode(default_config, 320) is ScaleMode.PINNED
        assert select_mode(default_config, 375) is ScaleMode.PINNED

    def test_wide_preview_is_fluid(self, default_config):
        assert select_mode(default_config, 376) is ScaleMode.FLUID

    def test_preset_wins(self, preset_config):
        assert select_mode(preset_config, 320) is ScaleMode.PRESET


@pytest.mark.unit
class TestFluidSteps:
    """Tests for fluid clamp() output"""

    def test_growing_body_step(self, growing_body_config):
        steps = compute_steps(growing_body_config)
        assert steps == [TypeStep(
            name="body",
            min_size=14,
            max_size=18,
            clamp="clamp(0.875rem, 0.787rem + 0.376vw, 1.125rem)",
        )]

    def test_flat_body_step(self, default_config):
        body = _by_name(compute_steps(default_config))["body"]
        assert body.clamp == "clamp(0.875rem, 0.875rem + 0vw, 0.875rem)"

    def test_order_follows_config(self, default_config):
        names = [step.name for step in compute_steps(default_config)]
        assert names == list(default_config.steps)

    def test_base_step_identity(self):
        config = TypeScaleConfig(min_font_size=15, max_font_size=19, min_ratio=1.2, max_ratio=1.333)
        body = _by_name(compute_steps(config))["body"]
        assert body.min_size == 15
        assert body.max_size == 19

    def test_non_heading_steps_grow(self):
        config = TypeScaleConfig(steps=("xs", "sm", "body", "lg", "xl"))
        sizes = [step.min_size for step in compute_steps(config)]
        assert sizes == sorted(sizes)
        assert sizes[1] == pytest.approx(14 / 1.125)

    def test_headings_use_reference_size(self):
        config = TypeScaleConfig(steps=("body", "heading-6"))
        heading = _by_name(compute_steps(config))["heading-6"]
        assert heading.min_size == 18
        assert heading.max_size == 18

    def test_headings_ignore_font_size(self):
        small = TypeScaleConfig(steps=("body", "heading-6"), min_font_size=10, max_font_size=12)
        large = TypeScaleConfig(steps=("body", "heading-6"), min_font_size=20, max_font_size=24)
        assert _by_name(compute_steps(small))["heading-6"] == _by_name(compute_steps(large))["heading-6"]

    def test_endpoints_match_sizes(self):
        config = TypeScaleConfig(max_font_size=18, min_ratio=1.2, max_ratio=1.333)
        for step in compute_steps(config):
            at_min = evaluate_preferred(step.clamp, config.min_width)
            at_max = evaluate_preferred(step.clamp, config.max_width)
            assert at_min == pytest.approx(step.min_size, abs=ENDPOINT_TOLERANCE), step.name
            assert at_max == pytest.approx(step.max_size, abs=ENDPOINT_TOLERANCE), step.name

    def test_bounds_sorted_when_shrinking(self):
        config = TypeScaleConfig(min_font_size=18, max_font_size=14, steps=("body",))
        step = compute_steps(config)[0]
        parts = parse_clamp(step.clamp)
        assert parts.lower <= parts.upper
        assert step.clamp == "clamp(0.875rem, 1.213rem + -0.376vw, 1.125rem)"

    def test_bounds_sorted_for_every_step(self):
        config = TypeScaleConfig(min_font_size=20, max_font_size=12, min_ratio=1.5, max_ratio=1.067)
        for step in compute_steps(config):
            parts = parse_clamp(step.clamp)
            assert parts.lower <= parts.upper, step.name

    def test_px_output(self):
        config = TypeScaleConfig(max_font_size=18, steps=("body",), use_rems=False)
        assert compute_steps(config)[0].clamp == "clamp(14px, 12.592px + 0.376vw, 18px)"

    def test_container_units(self):
        config = TypeScaleConfig(max_font_size=18, steps=("body",), use_container_width=True)
        assert compute_steps(config)[0].clamp == "clamp(0.875rem, 0.787rem + 0.376cqi, 1.125rem)"

    def test_fallbacks(self):
        config = TypeScaleConfig(max_font_size=18, steps=("body",), include_fallbacks=True)
        assert compute_steps(config)[0].fallbacks == ("font-size: 0.875rem;",)

    def test_no_fallbacks_by_default(self, growing_body_config):
        assert compute_steps(growing_body_config)[0].fallbacks == ()

    def test_decimals(self):
        config = TypeScaleConfig(max_font_size=18, steps=("body",), decimals=2)
        assert compute_steps(config)[0].clamp == "clamp(0.88rem, 0.79rem + 0.38vw, 1.13rem)"

    def test_high_precision_decimals(self):
        config = TypeScaleConfig(max_font_size=18, steps=("body",), decimals=30)
        clamp = compute_steps(config)[0].clamp
        assert clamp.startswith("clamp(0.875rem, 0.786971830985")
        assert "+ 0.375586854460" in clamp
        assert clamp.endswith("vw, 1.125rem)")

    def test_large_finite_sizes(self):
        config = TypeScaleConfig(min_font_size=1e30, max_font_size=1e30, steps=("body",))
        step = compute_steps(config)[0]
        assert step.min_size == 1e30
        rem = "62500000000000000000000000000rem"
        assert step.clamp == f"clamp({rem}, {rem} + 0vw, {rem})"

    def test_large_pinned_size(self):
        config = TypeScaleConfig(min_font_size=1e30, steps=("body",), use_rems=False)
        assert compute_steps(config, 320)[0].clamp == "1000000000000000019884624838656.000px"

    def test_returns_fresh_list(self, default_config):
        first = compute_steps(default_config)
        second = compute_steps(default_config)
        assert first == second
        assert first is not second

    def test_empty_steps(self):
        assert compute_steps(TypeScaleConfig(steps=())) == []


@pytest.mark.unit
class TestPinnedSteps:
    """Tests for the narrow-preview pinned scale"""

    def test_literal_lengths(self):
        config = TypeScaleConfig(min_font_size=16, max_font_size=20, steps=("body",))
        assert compute_steps(config, 320)[0].clamp == "1.000rem"

    def test_min_side_parameters(self, default_config):
        steps = _by_name(compute_steps(default_config, 320))
        assert steps["body"].clamp == "0.875rem"
        assert steps["body-sm"].clamp == "0.778rem"
        assert steps["heading-6"].clamp == "1.266rem"

    def test_constant_sizes(self):
        config = TypeScaleConfig(max_font_size=18, min_ratio=1.2, max_ratio=1.5)
        for step in compute_steps(config, 200):
            assert step.min_size == step.max_size
            assert "clamp" not in step.clamp

    def test_uses_min_ratio(self):
        config = TypeScaleConfig(steps=("body", "lg"), min_ratio=1.2, max_ratio=1.5)
        lg = _by_name(compute_steps(config, 320))["lg"]
        assert lg.min_size == pytest.approx(14 * 1.2)

    def test_px_literals(self):
        config = TypeScaleConfig(steps=("body",), use_rems=False)
        assert compute_steps(config, 320)[0].clamp == "14.000px"

    def test_headings_ignore_font_size(self):
        small = TypeScaleConfig(min_font_size=10, max_font_size=12)
        large = TypeScaleConfig(min_font_size=22, max_font_size=30)
        headings = [name for name in small.steps if name.startswith("heading-")]
        small_steps = _by_name(compute_steps(small, 320))
        large_steps = _by_name(compute_steps(large, 320))
        for name in headings:
            assert small_steps[name] == large_steps[name]

    def test_pinned_at_min_width(self, default_config):
        assert compute_steps(default_config, 375) == compute_steps(default_config, 100)


@pytest.mark.unit
class TestPresetSteps:
    """Tests for the fixed shadcn preset"""

    def test_nine_steps(self, preset_config):
        steps = compute_steps(preset_config)
        assert len(steps) == 9
        assert steps[0].name == "heading-1"
        assert steps[0].clamp == "48px"

    def test_preset_typography_attached(self, preset_config):
        body_sm = _by_name(compute_steps(preset_config))["body-sm"]
        assert body_sm.clamp == "12.44px"
        assert body_sm.font_weight == 400
        assert body_sm.line_height == 1.25
        assert body_sm.is_preset_step

    def test_independent_of_viewport(self, preset_config):
        wide = compute_steps(preset_config)
        assert compute_steps(preset_config, 320) == wide
        assert compute_steps(preset_config.with_changes(min_width=1000, max_width=1000)) == wide

    def test_independent_of_sizes_and_steps(self, preset_config):
        changed = preset_config.with_changes(min_font_size=20, steps=("a", "b"), base_step="x")
        assert compute_steps(changed) == compute_steps(preset_config)

    def test_single_preset_ratio(self):
        config = TypeScaleConfig(min_ratio=Preset.SHADCN, max_ratio=1.25)
        assert [step.name for step in compute_steps(config)][-1] == "body-lg"


@pytest.mark.unit
class TestValidation:
    """Tests for rejected configurations"""

    def test_degenerate_viewport(self):
        with pytest.raises(DegenerateViewportError) as exc_info:
            compute_steps(TypeScaleConfig(min_width=800, max_width=800))
        assert exc_info.value.error_type is ErrorType.DEGENERATE_RANGE

    def test_degenerate_viewport_is_configuration_error(self):
        with pytest.raises(ConfigurationError):
            compute_steps(TypeScaleConfig(min_width=800, max_width=800), 320)

    def test_missing_base_step(self):
        with pytest.raises(ConfigurationError) as exc_info:
            compute_steps(TypeScaleConfig(steps=("small", "large")))
        assert exc_info.value.error_type is ErrorType.MISSING_STEP
        assert exc_info.value.field == "base_step"

    def test_duplicate_step(self):
        with pytest.raises(ConfigurationError):
            compute_steps(TypeScaleConfig(steps=("body", "lg", "body")))

    @pytest.mark.parametrize("field,value", [
        ("min_font_size", 0),
        ("max_font_size", -14),
        ("min_ratio", 0),
        ("max_width", math.inf),
        ("min_width", math.nan),
        ("rem_value", 0),
    ])
    def test_invalid_numbers(self, field, value):
        with pytest.raises(ConfigurationError) as exc_info:
            compute_steps(TypeScaleConfig().with_changes(**{field: value}))
        assert exc_info.value.field == field

    def test_invalid_decimals(self):
        with pytest.raises(ConfigurationError):
            compute_steps(TypeScaleConfig(decimals=-1))

    def test_decimals_above_limit(self):
        with pytest.raises(ConfigurationError) as exc_info:
            compute_steps(TypeScaleConfig(decimals=101))
        assert exc_info.value.field == "decimals"

    def test_decimals_at_limit(self, growing_body_config):
        steps = compute_steps(growing_body_config.with_changes(decimals=100))
        assert steps[0].clamp.startswith("clamp(0.875rem, ")

    def test_overflowing_step(self):
        steps = ("body",) + tuple(f"s{i}" for i in range(5))
        config = TypeScaleConfig(steps=steps, min_ratio=1e200, max_ratio=1e200)
        with pytest.raises(ConfigurationError):
            compute_steps(config)


@pytest.mark.unit
class TestClampParsing:
    """Tests for parse_clamp and evaluation"""

    def test_parse(self):
        parts = parse_clamp("clamp(0.875rem, 0.787rem + 0.376vw, 1.125rem)")
        assert parts.lower == 14
        assert parts.upper == 18
        assert parts.intercept == pytest.approx(12.592)
        assert parts.slope == pytest.approx(0.00376)

    def test_parse_literal(self):
        parts = parse_clamp("1.000rem")
        assert parts.lower == parts.upper == parts.intercept == 16
        assert parts.slope == 0

    def test_parse_rejects_other_css(self):
        with pytest.raises(ValueError):
            parse_clamp("calc(1rem + 1vw)")

    def test_evaluate_clamp(self):
        expression = "clamp(0.875rem, 0.787rem + 0.376vw, 1.125rem)"
        assert evaluate_clamp(expression, 100) == 14
        assert evaluate_clamp(expression, 375) == pytest.approx(14, abs=ENDPOINT_TOLERANCE)
        assert evaluate_clamp(expression, 3000) == 18
