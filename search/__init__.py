"""
Lumen search package.
"""

from search.engine import (
    SearchResult, SEARCH_SPACES, PHOTOGRAPHY, PROFESSIONAL,
    tokenize, build_haystack, matches_query, compute_relevance, make_snippet,
    search, search_photography, search_professional,
)
