"""
Animal Age - Utilities and Constants

This module contains utility functions and constants used throughout the tool.
"""

import os
import shutil
from decimal import ROUND_HALF_UP, Decimal

# Reference human lifespan used for the human-side bar (years)
HUMAN_MAX_LIFESPAN = 80.0

# Ages beyond this multiple of a species' lifespan trigger a warning
LIFESPAN_WARN_FACTOR = 1.5

# Suggestions are only offered below this edit distance
SUGGESTION_MAX_DISTANCE = 3

# Layout
MAX_BAR_WIDTH = 50
MIN_LABEL_WIDTH = 10
LIST_KEY_WIDTH = 12
DEFAULT_COLUMNS = 80

# ANSI styles
RESET = "\x1b[0m"
CYAN = "\x1b[36m"
YELLOW = "\x1b[33m"
RED = "\x1b[31m"


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp a value between lo and hi bounds."""
    return lo if value < lo else hi if value > hi else value


def round_tenths(value: float) -> float:
    """Round to one decimal place, halves away from zero (12.25 -> 12.3)."""
    return float(Decimal(repr(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def fmt_years(value: float) -> str:
    """Format a year count in its shortest form (e.g., '3' or '1.5')."""
    return f"{value:g}"


def terminal_columns() -> int:
    """Get the terminal width in columns, falling back to DEFAULT_COLUMNS."""
    return shutil.get_terminal_size(fallback=(DEFAULT_COLUMNS, 24)).columns


def color_disabled_by_env() -> bool:
    """True when the NO_COLOR convention asks for plain output."""
    return bool(os.environ.get("NO_COLOR"))
