"""Library settings and default study parameters."""

from __future__ import annotations

import os

# Default design parameters (percentages / ratios)
DEFAULT_POWER = 80
DEFAULT_CONFIDENCE = 95
DEFAULT_RATIO = 1.0

# Documented input ranges the caller's validation layer must enforce
POWER_RANGE = (80, 99)
CONFIDENCE_RANGE = (90, 99)


class Settings:
    # === Logging ===
    LOG_LEVEL: str = os.getenv("PYSTATSEPI_LOG_LEVEL", "WARNING").upper()


settings = Settings()
