"""Pydantic models for gallery, filter option and search endpoints."""

from pydantic import BaseModel
from typing import Optional

from search.engine import SearchResult


class GalleryResponse(BaseModel):
    photos: list[dict]  # Using dict for the derived EXIF/URL fields
    total_count: int
    available_tags: list[str]
    tag_logic: str
    active_filters: list[str] = []


class AlbumItem(BaseModel):
    slug: str
    title: str
    description: str = ''
    date: Optional[str] = None
    featured: bool = False
    order_score: float = 0
    cover_url: Optional[str] = None
    photo_count: int = 0


class AlbumsResponse(BaseModel):
    albums: list[AlbumItem]


class AlbumPhotosResponse(GalleryResponse):
    album: AlbumItem


class RangeBounds(BaseModel):
    min: Optional[float | str] = None
    max: Optional[float | str] = None


class BoundsResponse(BaseModel):
    date: RangeBounds
    aperture: RangeBounds
    shutter_speed: RangeBounds
    iso: RangeBounds
    focal_length: RangeBounds


class TagSummary(BaseModel):
    tag: str
    display_tag: str
    count: int


class SearchResponse(BaseModel):
    results: list[SearchResult]
