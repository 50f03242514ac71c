"""
Lumen ranking package.

Re-exports the canonical sort functions.
"""

from ranking.order import (
    ASC, DESC, is_descending, date_sort_key,
    sort_photos, sort_albums, sort_entries,
    select_recent_posts, select_featured_projects,
)
