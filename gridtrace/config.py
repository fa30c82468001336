"""
gridtrace Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


class Config:
    """Library configuration loaded from environment variables."""

    # Tracing density
    # Rays cast per unit of radius by the field-of-view tracer. Higher values
    # close gaps between rays at large radii at the cost of more line walks.
    FOV_RAYS_PER_RADIUS: int = int(os.getenv("GRIDTRACE_FOV_RAYS_PER_RADIUS", "24"))
    # Angular samples per unit of radius when tracing circle outlines
    CIRCLE_SAMPLES_PER_RADIUS: int = int(os.getenv("GRIDTRACE_CIRCLE_SAMPLES_PER_RADIUS", "12"))

    # Sight radius used by callers that do not pass one explicitly
    DEFAULT_FOV_RADIUS: int = int(os.getenv("GRIDTRACE_DEFAULT_FOV_RADIUS", "8"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are unusable."""
        if cls.FOV_RAYS_PER_RADIUS <= 0:
            raise ValueError(
                "GRIDTRACE_FOV_RAYS_PER_RADIUS must be positive "
                f"(got {cls.FOV_RAYS_PER_RADIUS})"
            )

        if cls.CIRCLE_SAMPLES_PER_RADIUS <= 0:
            raise ValueError(
                "GRIDTRACE_CIRCLE_SAMPLES_PER_RADIUS must be positive "
                f"(got {cls.CIRCLE_SAMPLES_PER_RADIUS})"
            )

        if cls.DEFAULT_FOV_RADIUS < 0:
            raise ValueError(
                "GRIDTRACE_DEFAULT_FOV_RADIUS cannot be negative "
                f"(got {cls.DEFAULT_FOV_RADIUS})"
            )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "gridtrace Configuration:",
            f"  FOV Rays / Radius: {cls.FOV_RAYS_PER_RADIUS}",
            f"  Circle Samples / Radius: {cls.CIRCLE_SAMPLES_PER_RADIUS}",
            f"  Default FOV Radius: {cls.DEFAULT_FOV_RADIUS}",
            f"  Log Level: {cls.LOG_LEVEL}",
        ]
        return "\n".join(lines)
