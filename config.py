"""
Zentrale Konfiguration für Fluid Type Scale
"""

import os
from pathlib import Path


def get_user_dir():
    """
    Get the user data directory for writable files (logs).

    FLUIDTYPE_HOME overrides the location; otherwise logs live next to the
    sources.
    """
    override = os.environ.get("FLUIDTYPE_HOME")
    user_dir = Path(override) if override else Path(__file__).parent

    user_dir.mkdir(parents=True, exist_ok=True)
    return user_dir


# Basis-Pfade
USER_DIR = get_user_dir()

LOGS_DIR = USER_DIR / "logs"
LOGS_DIR.mkdir(parents=True, exist_ok=True)

# Logging
LOG_FILE = LOGS_DIR / "fluidtype.log"
LOG_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
LOG_BACKUP_COUNT = 5
LOG_LEVEL = os.environ.get("FLUIDTYPE_LOG_LEVEL", "INFO").upper()  # DEBUG, INFO, WARNING, ERROR

# Viewport defaults (px)
DEFAULT_MIN_WIDTH = 375
DEFAULT_MAX_WIDTH = 1440

# Base step size at each viewport bound (px) - 14px = 0.875rem
DEFAULT_MIN_FONT_SIZE = 14
DEFAULT_MAX_FONT_SIZE = 14

DEFAULT_RATIO = 1.125

# Ordered smallest to largest; the exponent of a step is its offset from the base step
DEFAULT_STEPS = (
    "body-sm",
    "body",
    "body-lg",
    "heading-6",
    "heading-5",
    "heading-4",
    "heading-3",
    "heading-2",
    "heading-1",
)
DEFAULT_BASE_STEP = "body"

# Output formatting
DEFAULT_PREFIX = "fs"
DEFAULT_DECIMALS = 3
MAX_DECIMALS = 100  # same limit as Number.prototype.toFixed()
DEFAULT_REM_VALUE = 16
DEFAULT_USE_REMS = True
DEFAULT_USE_CONTAINER_WIDTH = False
DEFAULT_INCLUDE_FALLBACKS = False

# Headings scale from this size instead of the configured body size
HEADING_REFERENCE_SIZE = 16
HEADING_STEP_PREFIX = "heading-"
BODY_STEP_NAMES = ("body-sm", "body", "body-lg")

# Body typography
DEFAULT_FONT_FAMILY = "Inter"
DEFAULT_FONT_WEIGHT = 400
DEFAULT_LINE_HEIGHT = 1.5
DEFAULT_LETTER_SPACING = 0  # em
DEFAULT_COLOR = "#2d2d2d"
DEFAULT_BACKGROUND_COLOR = "#ffffff"

# Heading typography ("inherit" falls back to the body value)
DEFAULT_HEADING_FONT_FAMILY = "Inter"
DEFAULT_HEADING_FONT_WEIGHT = 600
DEFAULT_HEADING_LINE_HEIGHT = 1.1
DEFAULT_HEADING_LETTER_SPACING = -0.02  # em
DEFAULT_HEADING_COLOR = "inherit"
INHERIT = "inherit"

# Named scale ratios; "shadcn" switches to the fixed preset table
NAMED_RATIOS = {
    "minor-second": {"name": "Minor Second", "value": 1.067},
    "major-second": {"name": "Major Second", "value": 1.125},
    "minor-third": {"name": "Minor Third", "value": 1.2},
    "major-third": {"name": "Major Third", "value": 1.25},
    "perfect-fourth": {"name": "Perfect Fourth", "value": 1.333},
    "augmented-fourth": {"name": "Augmented Fourth", "value": 1.414},
    "perfect-fifth": {"name": "Perfect Fifth", "value": 1.5},
    "golden-ratio": {"name": "Golden Ratio", "value": 1.618},
    "shadcn": {"name": "Shadcn Type", "value": "shadcn"},
}

# Simulated preview widths (px)
FULL_WIDTH = 9999  # unconstrained preview, fills the container
MIN_PREVIEW_WIDTH = 200
MAX_PREVIEW_WIDTH = 3000

SCREEN_PRESETS = {
    "desktop": {"label": "Desktop", "description": ">= 1280px", "width": FULL_WIDTH},
    "laptop": {"label": "Laptop", "description": "1024px to 1279px", "width": 1152},
    "tablet": {"label": "Tablet", "description": "640px to 767px", "width": 704},
    "mobile": {"label": "Mobile", "description": "0 to 639px", "width": 320},
}

# Step report display toggles
DEFAULT_ROUND_TO_WHOLE_NUMBER = True
DEFAULT_ROUND_LINE_HEIGHT_TO_MULTIPLE_OF_4 = True

# App-Metadaten
APP_NAME = "Fluid Type Scale"
APP_VERSION = "1.0.0"
