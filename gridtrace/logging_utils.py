"""Logging utilities for gridtrace.

Provides color-coded debug output for the tracing and pathfinding engines.
Library code is silent unless one of the ``DEBUG_*`` switches is set.
"""

import os
from enum import Enum


class Color(Enum):
    """ANSI color codes for terminal output."""

    # Colors for operation types
    BLUE = "\033[94m"      # Tracing operations (lines, rays, fov)
    YELLOW = "\033[93m"    # Search operations (pathfinding)
    RED = "\033[91m"       # Failures (unreachable goal, aborted trace)
    GREEN = "\033[92m"     # Success/completion
    CYAN = "\033[96m"      # Info/metadata

    # Formatting
    BOLD = "\033[1m"
    RESET = "\033[0m"


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap text in ANSI color codes if colors are enabled.

    Args:
        text: Text to colorize
        color: Color to apply
        bold: Whether to make text bold

    Returns:
        Colorized text if GRIDTRACE_NO_COLOR is not set, otherwise plain text
    """
    if os.getenv("GRIDTRACE_NO_COLOR"):
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def debug_enabled(flag: str) -> bool:
    """Return True when the ``flag`` environment switch is set to a truthy value."""
    return os.getenv(flag, "").lower() in ("1", "true", "yes")


def log_trace(message: str) -> None:
    """Log a tracing operation (blue)."""
    print(colored(f"{LOG_TAG_TRACE} {message}", Color.BLUE))


def log_search(message: str) -> None:
    """Log a search operation (yellow)."""
    print(colored(f"{LOG_TAG_SEARCH} {message}", Color.YELLOW))


def log_error(message: str) -> None:
    """Log a failure (red)."""
    print(colored(f"{LOG_TAG_ERROR} {message}", Color.RED))


def log_success(message: str) -> None:
    """Log a success (green)."""
    print(colored(f"{LOG_TAG_SUCCESS} {message}", Color.GREEN))


def log_info(message: str) -> None:
    """Log metadata/info (cyan)."""
    print(colored(f"{LOG_TAG_INFO} {message}", Color.CYAN))


# Markers for operation types (color-blind accessible)
LOG_TAG_TRACE = "[•]"     # Tracing operation
LOG_TAG_SEARCH = "[A*]"   # Path search
LOG_TAG_ERROR = "[!]"     # Failure
LOG_TAG_SUCCESS = "[✓]"   # Success
LOG_TAG_INFO = "[i]"      # Information
