"""
Pytest fixtures for the scale tests

PURPOSE: Keep test logs out of the source tree and provide common configs.
CONTEXT: FLUIDTYPE_HOME must be set before config.py is imported, so it is
         set at module level here, ahead of any test module import.
"""
import os
import tempfile

import pytest

os.environ.setdefault("FLUIDTYPE_HOME", tempfile.mkdtemp(prefix="fluidtype-tests-"))

from core.scale_config import TypeScaleConfig  # noqa: E402


@pytest.fixture
def default_config():
    """Configuration with every default value"""
    return TypeScaleConfig()


@pytest.fixture
def growing_body_config():
    """Single body step growing from 14px at 375px to 18px at 1440px"""
    return TypeScaleConfig(max_font_size=18, steps=("body",))


@pytest.fixture
def preset_config():
    return TypeScaleConfig(min_ratio="shadcn", max_ratio="shadcn")
