"""
Listing pipeline.

Every photo listing (all photos, one album, one tag) runs the same steps on
each filter change: filter the full corpus, sort it, recompute tag
availability, then hand the ordered set to the view sync bridge.
"""

import logging
from typing import Optional

from pydantic import BaseModel

from catalog.models import Photo, album_title_map
from filtering.availability import available_tags
from filtering.facets import filter_by_tags, filter_photos
from filtering.state import FilterState, TagLogic
from ranking.order import DESC, sort_photos
from sync.bridge import ViewSyncBridge, to_viewer_photo
from utils.tags import normalize_tags

logger = logging.getLogger(__name__)


class GalleryResult(BaseModel):
    photos: list[Photo]
    available_tags: list[str]
    total_count: int
    state: FilterState


class GalleryView:
    """One listing page: a fixed corpus, a date direction and an optional bridge."""

    def __init__(self, photos, albums=(), date_direction=DESC,
                 bridge: Optional[ViewSyncBridge] = None, cdn_url=None):
        self.photos = list(photos)
        self.date_direction = date_direction
        self.bridge = bridge
        self.cdn_url = cdn_url
        self._album_titles = album_title_map(albums)
        self._last_facets = None

    def initial_state(self, tag_logic=TagLogic.OR) -> FilterState:
        """Inert state whose ranges span this listing's corpus."""
        return FilterState.for_corpus(self.photos, tag_logic=tag_logic)

    def apply(self, state: FilterState) -> GalleryResult:
        """Recompute the listing for ``state``."""
        ordered = sort_photos(filter_photos(self.photos, state), self.date_direction)
        tags = sorted(available_tags(self.photos, state))

        logger.debug("Listing recompute: %d of %d photos, active facets %s",
                     len(ordered), len(self.photos), state.active_dimensions())

        if self.bridge is not None:
            facets = (state.selected_tags, state.tag_logic)
            if facets != self._last_facets:
                self.bridge.publish_facet_change(state)
            self.bridge.update_viewer_photos(
                [to_viewer_photo(photo, self._album_titles, self.cdn_url) for photo in ordered])
        self._last_facets = (state.selected_tags, state.tag_logic)

        return GalleryResult(photos=ordered, available_tags=tags,
                             total_count=len(ordered), state=state)


def tag_listing(photos, tags, date_direction=DESC):
    """
    Per-tag page listing: photos carrying every given tag.

    Unlike the filter panel, a tag page with no tags shows nothing.
    """
    selected = normalize_tags(tags)
    if not selected:
        return []
    return sort_photos(filter_by_tags(photos, selected, TagLogic.AND), date_direction)
