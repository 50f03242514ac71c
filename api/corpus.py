"""
Corpus access for FastAPI.

The content export is read once and kept in memory; every request filters
and searches that same in-memory corpus.
"""

from api import config as api_config
from catalog import load_corpus


def get_corpus():
    """Return the cached Corpus, loading it on first use (FastAPI dependency)."""
    path = api_config.PORTFOLIO_CONFIG.get_corpus_path()
    cache = api_config._corpus_cache
    if cache['data'] is None or cache['path'] != path:
        cache['data'] = load_corpus(path)
        cache['path'] = path
    return cache['data']
