"""
Canonical ordering for photos, albums and blog/project entries.

Every listing sorts through these functions so a photo keeps the same relative
position whichever page it is reached from. Sorting is done in stable passes,
least significant key first; all functions return new lists.
"""

from datetime import date, datetime, time, timezone

ASC = 'asc'
DESC = 'desc'


def is_descending(direction):
    """Anything other than 'asc' (any case) sorts newest first."""
    return str(direction or DESC).lower() != ASC


def date_sort_key(value):
    """
    Comparable timestamp for a date or datetime.

    Naive datetimes are read as UTC so naive and aware values can be mixed.
    """
    if value is None:
        return 0.0
    if not isinstance(value, datetime):
        if isinstance(value, date):
            value = datetime.combine(value, time.min)
        else:
            return 0.0
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.timestamp()


def sort_photos(photos, date_direction=DESC):
    """
    Sort photos by order_score (desc), then date, then id.

    Args:
        photos: Iterable of photos
        date_direction: 'desc' (newest first, most listings) or 'asc'
            (oldest first, album pages)

    Returns:
        list: New sorted list
    """
    ordered = sorted(photos, key=lambda p: p.id)
    ordered.sort(key=lambda p: date_sort_key(p.date), reverse=is_descending(date_direction))
    ordered.sort(key=lambda p: p.order_score or 0, reverse=True)
    return ordered


def sort_albums(albums):
    """Sort albums: featured first, then order_score (desc), date (desc), slug."""
    ordered = sorted(albums, key=lambda a: a.slug)
    ordered.sort(key=lambda a: date_sort_key(a.date), reverse=True)
    ordered.sort(key=lambda a: a.order_score or 0, reverse=True)
    ordered.sort(key=lambda a: not a.featured)
    return ordered


def sort_entries(entries):
    """Sort blog posts/projects newest first; undated entries go last, ties by slug."""
    ordered = sorted(entries, key=lambda e: e.slug)
    ordered.sort(key=lambda e: (e.date is None, -date_sort_key(e.date)))
    return ordered


def select_recent_posts(entries, limit=5, excluded_slugs=('about',)):
    """Newest blog posts for the homepage, hidden slugs dropped."""
    excluded = set(excluded_slugs or ())
    return sort_entries(e for e in entries if e.slug not in excluded)[:limit]


def select_featured_projects(entries, limit=5):
    """
    Projects for the homepage: featured first, then newest first, then slug.

    Args:
        entries: Project entries
        limit: Maximum number returned

    Returns:
        list: New list of at most ``limit`` entries
    """
    ordered = sort_entries(entries)
    ordered.sort(key=lambda e: not e.featured)
    return ordered[:limit]
