"""
Facet availability and option counts.

Decides which tag controls stay selectable for the current selection so the
UI can grey out tags that would only ever produce an empty listing.
"""

from collections import Counter

from filtering.facets import filter_by_tags
from filtering.state import TagLogic
from utils.tags import normalize_tags


def _all_tags(photos):
    tags = set()
    for photo in photos:
        tags |= normalize_tags(photo.tags)
    return tags


def available_tags(photos, state):
    """
    Tags that remain selectable under ``state``.

    OR mode can only widen results, so every corpus tag is available. AND mode
    offers the tags of the photos carrying every selected tag. In both modes
    the selected tags themselves are included so they can be deselected.

    Args:
        photos: Full photo corpus
        state: FilterState (only tags and tag logic are consulted)

    Returns:
        set: Normalized tag strings
    """
    if state.tag_logic == TagLogic.AND:
        available = _all_tags(filter_by_tags(photos, state.selected_tags, TagLogic.AND))
    else:
        available = _all_tags(photos)
    available |= set(state.selected_tags)
    return available


def _ranked(counter):
    return sorted(counter.items(), key=lambda item: (-item[1], item[0]))


def facet_counts(photos):
    """
    Dropdown options with photo counts.

    Returns:
        dict: 'tags', 'albums', 'cameras' -> list of (value, count), most
        frequent first, ties by value
    """
    tags = Counter()
    albums = Counter()
    cameras = Counter()
    for photo in photos:
        tags.update(normalize_tags(photo.tags))
        if photo.album:
            albums[photo.album] += 1
        camera = (photo.camera or '').strip()
        if camera:
            cameras[camera] += 1

    return {
        'tags': _ranked(tags),
        'albums': _ranked(albums),
        'cameras': _ranked(cameras),
    }
