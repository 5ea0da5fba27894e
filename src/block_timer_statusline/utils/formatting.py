"""Formatting utilities for durations and progress bars."""

import math

from decimal import ROUND_HALF_UP, Decimal

MS_PER_MINUTE = 60 * 1000
MS_PER_HOUR = 60 * MS_PER_MINUTE


def split_hours_minutes(duration_ms: float) -> tuple[int, int]:
    """Split a millisecond duration into whole hours and leftover minutes.

    Args:
        duration_ms: Duration in milliseconds

    Returns:
        Tuple of (hours, minutes) where minutes is the remainder after hours
    """
    hours = math.floor(duration_ms / MS_PER_HOUR)
    minutes = math.floor((duration_ms % MS_PER_HOUR) / MS_PER_MINUTE)
    return hours, minutes


def format_elapsed(hours: int, minutes: int) -> str:
    """Format elapsed time (e.g., "2hr", "1hr 30m")."""
    if minutes == 0:
        return f"{hours}hr"
    return f"{hours}hr {minutes}m"


def format_remaining(hours: int, minutes: int) -> str:
    """Format remaining time (e.g., "3h", "3h 15m")."""
    if minutes == 0:
        return f"{hours}h"
    return f"{hours}h {minutes}m"


def render_progress_bar(
    progress: float, segments: int = 10, filled_char: str = "●", empty_char: str = "○"
) -> str:
    """Render a progress bar with filled/empty segments.

    Args:
        progress: Completed fraction (0.0-1.0)
        segments: Number of segments in progress bar
        filled_char: Character for filled segments
        empty_char: Character for empty segments

    Returns:
        Progress bar string (e.g., "●●●●●●○○○○")
    """
    filled = math.floor(progress * segments)
    empty = segments - filled
    return filled_char * filled + empty_char * empty


def format_percentage(percentage: float, decimals: int = 1) -> str:
    """Format percentage with specified decimal places.

    Ties round up, so 0.25 becomes "0.3%".

    Args:
        percentage: Percentage value (0-100)
        decimals: Number of decimal places

    Returns:
        Formatted percentage string (e.g., "67.5%")
    """
    quantum = Decimal(1).scaleb(-decimals)
    rounded = Decimal(percentage).quantize(quantum, rounding=ROUND_HALF_UP)
    return f"{rounded}%"
