"""
Lumen filtering package.

Filter state, the facet filter engine, tag availability and the listing
pipeline.
"""

from filtering.state import (
    TagLogic, NumericRange, DateRange, FacetBounds, FilterState, RANGE_FIELDS,
)
from filtering.facets import (
    compute_bounds, filter_photos, filter_by_tags, matches_state, matches_tags,
    photo_dimension_values, photo_day,
)
from filtering.availability import available_tags, facet_counts
from filtering.pipeline import GalleryView, GalleryResult, tag_listing
