"""
Configuration module for the spherenav geodesy toolkit.

Loads environment variables and provides the configuration singleton.
Uses pydantic for validation.
"""

import math
from typing import Optional

from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """
    Library configuration loaded from environment variables.

    All values come from .env file or system environment.
    Type hints provide validation (pydantic converts types automatically).
    """

    # ============================================================
    # SPHERE MODEL
    # ============================================================
    EARTH_RADIUS_KM: float = 6371.0
    """Default radius for new points. Mean Earth radius, in km."""

    # ============================================================
    # NUMERIC CONVENTIONS
    # ============================================================
    DISTANCE_PRECISION: int = 4
    """Significant digits returned by great-circle distance. 4 reflects the ~0.3% error of a spherical model."""

    RHUMB_EPSILON: float = 1e-12
    """Mercator latitude differences below this count as an east-west line."""

    INTERSECTION_EPSILON: float = 1e-12
    """Angles (radians) and sines below this count as zero when intersecting paths."""

    # ============================================================
    # LOGGING
    # ============================================================
    DEBUG: bool = False
    """Enable debug logging on the console."""

    LOG_FILE_PATH: Optional[str] = None
    """Optional rotating log file. Console only when unset."""

    class Config:
        """Pydantic configuration."""
        env_file = ".env"  # Read from .env file
        case_sensitive = True  # Variable names are case-sensitive
        extra = "ignore"  # Ignore extra env vars not defined above


# ============================================================
# SINGLETON INSTANCE
# ============================================================
config = Config()


# ============================================================
# VALIDATION
# ============================================================
def validate_config() -> dict:
    """
    Validate that config values describe a usable sphere model.

    Returns:
        dict: Status of each checked field

    Raises:
        ValueError: If any value is out of range
    """
    errors = []

    if not math.isfinite(config.EARTH_RADIUS_KM) or config.EARTH_RADIUS_KM <= 0:
        errors.append("EARTH_RADIUS_KM must be a positive finite number")

    if config.DISTANCE_PRECISION < 1:
        errors.append("DISTANCE_PRECISION must be at least 1")

    for name in ("RHUMB_EPSILON", "INTERSECTION_EPSILON"):
        value = getattr(config, name)
        if not math.isfinite(value) or value < 0:
            errors.append(f"{name} must be a non-negative finite number")

    if errors:
        raise ValueError("Configuration errors:\n" + "\n".join([f"  - {e}" for e in errors]))

    return {
        "radius": f"✓ {config.EARTH_RADIUS_KM} km",
        "precision": f"✓ {config.DISTANCE_PRECISION} significant digits",
        "log_file": f"✓ {config.LOG_FILE_PATH}" if config.LOG_FILE_PATH else "✗ Console only",
    }


if __name__ == "__main__":
    """Allow checking config by running: python -m spherenav.config"""
    try:
        status = validate_config()
        print("✅ Configuration is valid!")
        print("\nConfiguration Status:")
        for key, value in status.items():
            print(f"  {key}: {value}")
    except ValueError as e:
        print(f"❌ Configuration error:\n{e}")
        exit(1)
