"""
Facet filter engine.

Applies the eight filter dimensions (tags, albums, cameras, date, aperture,
shutter speed, ISO, focal length) to a photo corpus. Every call recomputes
from scratch; inputs are never mutated and input order is preserved.
"""

from datetime import datetime

from filtering.state import DateRange, FacetBounds, NumericRange, RANGE_FIELDS, TagLogic
from utils.exif import parse_settings
from utils.tags import normalize_tags


def photo_day(photo):
    """Calendar day of a photo's date (None when missing)."""
    value = photo.date
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    return value


def photo_dimension_values(photo):
    """
    Values of every range dimension for one photo.

    The settings string is parsed once here; aperture, shutter speed and ISO
    are None when the string doesn't carry them.

    Returns:
        dict: dimension name -> value or None
    """
    exif = parse_settings(photo.settings)
    return {
        'date': photo_day(photo),
        'aperture': exif.get('aperture'),
        'shutter_speed': exif.get('shutter_speed'),
        'iso': exif.get('iso'),
        'focal_length': photo.focal_length,
    }


def compute_bounds(photos):
    """
    Full extent of every range dimension over ``photos``.

    Args:
        photos: Photo corpus

    Returns:
        FacetBounds: Dimensions no photo carries are left as None
    """
    collected = {dim: [] for dim in RANGE_FIELDS}
    for photo in photos:
        for dim, value in photo_dimension_values(photo).items():
            if value is not None:
                collected[dim].append(value)

    bounds = {}
    for dim, values in collected.items():
        if not values:
            continue
        range_cls = DateRange if dim == 'date' else NumericRange
        bounds[dim] = range_cls(min=min(values), max=max(values))
    return FacetBounds(**bounds)


def matches_tags(photo_tags, selected_tags, logic=TagLogic.OR):
    """
    Tag predicate for one photo.

    Args:
        photo_tags: Normalized tag set of the photo
        selected_tags: Normalized selected tags (empty = no constraint)
        logic: TagLogic.AND requires every selected tag, OR any of them

    Returns:
        bool
    """
    if not selected_tags:
        return True
    if TagLogic(logic) == TagLogic.AND:
        return all(tag in photo_tags for tag in selected_tags)
    return any(tag in photo_tags for tag in selected_tags)


def filter_by_tags(photos, tags, logic=TagLogic.OR):
    """Filter photos by tags alone. No tags returns every photo."""
    selected = normalize_tags(tags)
    if not selected:
        return list(photos)
    return [photo for photo in photos if matches_tags(normalize_tags(photo.tags), selected, logic)]


def matches_state(photo, state):
    """True if ``photo`` passes every active dimension of ``state``."""
    if not matches_tags(normalize_tags(photo.tags), state.selected_tags, state.tag_logic):
        return False

    if state.selected_albums and photo.album not in state.selected_albums:
        return False

    if state.selected_cameras and (photo.camera or '').strip() not in state.selected_cameras:
        return False

    active = [dim for dim in RANGE_FIELDS if state.is_range_active(dim)]
    if not active:
        return True

    values = photo_dimension_values(photo)
    for dim in active:
        value = values[dim]
        # A missing value can't be known to satisfy a narrowed range
        if value is None:
            return False
        if not state.range_for(dim).contains(value):
            return False
    return True


def filter_photos(photos, state):
    """
    Apply a FilterState to a photo corpus.

    Args:
        photos: Photo corpus (any iterable)
        state: FilterState

    Returns:
        list: Photos passing every active dimension, in input order
    """
    return [photo for photo in photos if matches_state(photo, state)]
