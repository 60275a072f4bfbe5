"""
Shared utilities for the Golf Skins Analyzer.

This module provides common functions used across multiple modules
to avoid code duplication.
"""

import sys
from pathlib import Path

# Enable both `python src/utils.py` and `python -m src.utils` execution modes.
# This ensures src.config imports work regardless of how the script is invoked.
_project_root = str(Path(__file__).parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import logging

import pandas as pd

from src.config import ALLOWED_SCORE_POLICIES, COURSE_PROFILES


# --- Logging Setup ---
def setup_logging(name: str | None = None, level: int = logging.INFO) -> logging.Logger:
    """
    Configure and return a logger with consistent formatting.

    Args:
        name: Logger name (usually __name__ from the calling module)
        level: Logging level (default: INFO)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


# --- Cell Helpers ---
def clean_cell(value) -> str:
    """Return a cell as stripped text, with None/NaN/blank mapped to ""."""
    if value is None:
        return ""
    if not isinstance(value, str) and pd.isna(value):
        return ""
    return str(value).strip()


_MARKDOWN_SPECIAL = set("\\`*_{}[]()#+-.!|~<>")


def escape_markdown(text: str) -> str:
    """Backslash-escape Markdown control characters so text renders literally."""
    return "".join(f"\\{ch}" if ch in _MARKDOWN_SPECIAL else ch for ch in text)


# --- Validation ---
def validate_score_policy(policy: str) -> None:
    """
    Validate that an invalid-score policy name is allowed.

    Args:
        policy: Policy name to validate

    Raises:
        ValueError: If policy is not in ALLOWED_SCORE_POLICIES
    """
    if policy not in ALLOWED_SCORE_POLICIES:
        raise ValueError(
            f"Invalid score policy: '{policy}'. "
            f"Allowed values: {', '.join(sorted(ALLOWED_SCORE_POLICIES))}"
        )


def get_course_profile(course: str) -> tuple[int, ...]:
    """
    Look up the hole difficulty table for a configured course.

    Raises:
        ValueError: If the course has no profile
    """
    if course not in COURSE_PROFILES:
        raise ValueError(
            f"Unknown course: '{course}'. "
            f"Available courses: {', '.join(sorted(COURSE_PROFILES))}"
        )
    return COURSE_PROFILES[course]


def validate_input_size(text: str, max_size: int) -> None:
    """
    Validate that input text does not exceed maximum size.

    Args:
        text: Input text to validate
        max_size: Maximum allowed size in bytes

    Raises:
        ValueError: If input exceeds max_size
    """
    if len(text) > max_size:
        raise ValueError(
            f"Input too large: {len(text):,} bytes. "
            f"Maximum allowed: {max_size:,} bytes"
        )


__all__ = [
    # Logging
    'setup_logging',
    # Cells
    'clean_cell',
    'escape_markdown',
    # Validation
    'validate_score_policy',
    'get_course_profile',
    'validate_input_size',
]
