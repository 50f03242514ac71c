"""
Filter state for the photo listings.

A FilterState is rebuilt from the filter controls on every change. Empty
selections and ranges equal to the corpus bounds impose no constraint.
"""

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, field_validator

from utils.tags import normalize_tags


class TagLogic(str, Enum):
    AND = 'and'
    OR = 'or'


class NumericRange(BaseModel):
    """Inclusive numeric interval. Inverted intervals are kept as given."""

    min: float
    max: float

    model_config = {'frozen': True}

    def contains(self, value) -> bool:
        return self.min <= value <= self.max


class DateRange(BaseModel):
    """Inclusive calendar-day interval."""

    min: date
    max: date

    model_config = {'frozen': True}

    def contains(self, value: date) -> bool:
        return self.min <= value <= self.max


class FacetBounds(BaseModel):
    """Full-corpus extent of each range dimension (None when no photo has the value)."""

    date: Optional[DateRange] = None
    aperture: Optional[NumericRange] = None
    shutter_speed: Optional[NumericRange] = None
    iso: Optional[NumericRange] = None
    focal_length: Optional[NumericRange] = None

    model_config = {'frozen': True}


# Range dimension -> FilterState attribute
RANGE_FIELDS = {
    'date': 'date_range',
    'aperture': 'aperture_range',
    'shutter_speed': 'shutter_range',
    'iso': 'iso_range',
    'focal_length': 'focal_length_range',
}


class FilterState(BaseModel):
    selected_tags: frozenset[str] = frozenset()
    tag_logic: TagLogic = TagLogic.OR
    selected_albums: frozenset[str] = frozenset()
    selected_cameras: frozenset[str] = frozenset()
    date_range: Optional[DateRange] = None
    aperture_range: Optional[NumericRange] = None
    shutter_range: Optional[NumericRange] = None
    iso_range: Optional[NumericRange] = None
    focal_length_range: Optional[NumericRange] = None
    bounds: FacetBounds = FacetBounds()

    model_config = {'frozen': True}

    @field_validator('selected_tags', mode='before')
    @classmethod
    def _normalize_tags(cls, value):
        if isinstance(value, str):
            value = [value]
        return frozenset(normalize_tags(value))

    @field_validator('selected_albums', 'selected_cameras', mode='before')
    @classmethod
    def _drop_blank(cls, value):
        if not value:
            return frozenset()
        if isinstance(value, str):
            value = [value]
        return frozenset(v.strip() for v in value if v and v.strip())

    @classmethod
    def for_corpus(cls, photos, tag_logic=TagLogic.OR):
        """Inert state for a listing: every range set to its corpus bounds."""
        from filtering.facets import compute_bounds
        bounds = compute_bounds(photos)
        ranges = {field: getattr(bounds, dim) for dim, field in RANGE_FIELDS.items()}
        return cls(tag_logic=tag_logic, bounds=bounds, **ranges)

    def with_changes(self, **changes):
        """Return a new state with the given fields replaced (validators re-run)."""
        return type(self).model_validate({**dict(self), **changes})

    def range_for(self, dimension):
        return getattr(self, RANGE_FIELDS[dimension])

    def is_range_active(self, dimension) -> bool:
        """True when the range for ``dimension`` is narrowed away from its bounds."""
        selected = self.range_for(dimension)
        return selected is not None and selected != getattr(self.bounds, dimension)

    def active_dimensions(self) -> list[str]:
        """Names of the facets currently constraining results (filter badge count)."""
        active = []
        if self.selected_tags:
            active.append('tags')
        if self.selected_albums:
            active.append('albums')
        if self.selected_cameras:
            active.append('cameras')
        active.extend(dim for dim in RANGE_FIELDS if self.is_range_active(dim))
        return active
