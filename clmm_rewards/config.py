"""
Configuration settings for the reward ledger

Loads environment variables and provides ledger configuration.
"""
import logging
import os
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings:
    """Ledger settings"""

    # Rate source rates are divided by this factor before Q128 scaling
    PRECISION_FACTOR: int = int(os.getenv("CLMM_REWARDS_PRECISION_FACTOR", "1"))

    # Logging
    LOG_LEVEL: str = os.getenv("CLMM_REWARDS_LOG_LEVEL", "WARNING").upper()
    LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


# Create global settings instance
settings = Settings()


# Validate critical settings on import
if settings.PRECISION_FACTOR <= 0:
    raise ValueError(
        f"CLMM_REWARDS_PRECISION_FACTOR must be positive, got {settings.PRECISION_FACTOR}"
    )


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for scripts and local simulation"""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=settings.LOG_FORMAT,
    )
