"""
Lumen configuration package.

Re-exports all public classes and constants.
"""

from config.portfolio_config import (
    PortfolioConfig, DEFAULT_CONFIG, VALID_DATE_DIRECTIONS, VALID_TAG_LOGIC,
)
