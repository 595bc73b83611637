"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (class-count limits, axis ranges,
   colors) from being scattered throughout the view and model code.
2. Environment: It resolves the optional logging overrides taken from the
   environment, so `main.py` does not need to know about them.

Exports:
    MIN_CLASSES, MAX_CLASSES, DEFAULT_CLASSES (int): Class-count spinner range.
    LOSS_RANGE, PROBABILITY_RANGE (tuple): Visible axis ranges.
    REFERENCE_PROBABILITIES (tuple): Target probabilities with a static line.
"""
from __future__ import annotations

import logging
import os
from typing import Optional


# Class count (N)
MIN_CLASSES: int = 2
MAX_CLASSES: int = 100_000
DEFAULT_CLASSES: int = 2

# Axis ranges (loss on x, probability on y)
LOSS_RANGE: tuple[float, float] = (0.0, 5.0)
PROBABILITY_RANGE: tuple[float, float] = (0.0, 1.0)
CURVE_STEP: float = 0.01

# Static dashed reference lines
REFERENCE_PROBABILITIES: tuple[float, ...] = (0.9, 0.8, 0.7)

# Window
WINDOW_TITLE: str = "Cross-Entropy Analysis"
WINDOW_SIZE: tuple[int, int] = (1400, 1000)
APP_FONT_POINT_SIZE: int = 20

# Chart styling
CHART_TITLE: str = "Cross-Entropy Analysis"
CHART_TITLE_SIZE: str = "24pt"
AXIS_TICK_FONT: tuple[str, int] = ("Arial", 16)
AXIS_LABEL_STYLE: dict[str, str] = {"font-size": "18pt", "font-weight": "bold"}

CURVE_COLOR: str = "#1f77b4"
CURVE_WIDTH: int = 3
REFERENCE_COLOR: str = "#7f7f7f"
REFERENCE_WIDTH: int = 2
RANDOM_LINE_COLOR: str = "r"
RANDOM_LINE_WIDTH: int = 4
MARKER_COLOR: tuple[int, int, int] = (52, 152, 219)
MARKER_SIZE: int = 20
TOOLTIP_FONT_SIZE: str = "24px"

# Environment overrides
LOG_LEVEL_ENV: str = "LOSSCURVE_LOG_LEVEL"
LOG_FILE_ENV: str = "LOSSCURVE_LOG_FILE"


def get_log_level() -> int:
    """
    Resolve the logging level from the environment.

    Accepts level names such as "DEBUG" or "warning". Unknown or missing
    values fall back to logging.INFO.
    """
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else logging.INFO
    return level if isinstance(level, int) else logging.INFO


def get_log_file() -> Optional[str]:
    """Optional log file path from the environment (None when unset or blank)."""
    path = os.environ.get(LOG_FILE_ENV, "").strip()
    return path or None
