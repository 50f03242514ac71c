"""
Configuration loading for the FastAPI API server.

"""

import os

from config import PortfolioConfig

# --- CONFIG (single parse of portfolio_config.json) ---
_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
_CONFIG_PATH = os.environ.get('PORTFOLIO_CONFIG') or os.path.join(_PROJECT_ROOT, 'portfolio_config.json')

PORTFOLIO_CONFIG = PortfolioConfig(_CONFIG_PATH)


def get_config():
    """Current PortfolioConfig (FastAPI dependency)."""
    return PORTFOLIO_CONFIG


# --- CACHES ---

# Loaded corpus, keyed by the export path it came from
_corpus_cache = {'data': None, 'path': None}
