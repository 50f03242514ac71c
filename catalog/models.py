"""Pydantic models for the portfolio content collections."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import AliasChoices, BaseModel, Field


class Photo(BaseModel):
    id: str
    title: str
    album: str
    filename: str = ''
    tags: list[str] = []
    date: datetime
    camera: Optional[str] = None
    settings: Optional[str] = None
    focal_length: Optional[float] = Field(
        default=None, validation_alias=AliasChoices('focal_length', 'focalLength'))
    order_score: float = Field(
        default=0, validation_alias=AliasChoices('order_score', 'orderScore', 'order'))
    location: Optional[str] = None
    body: str = ''
    featured: bool = False
    position: Optional[str] = None

    model_config = {'frozen': True}

    @property
    def slug(self) -> str:
        return self.id.rsplit('/', 1)[-1]


class Album(BaseModel):
    slug: str
    title: str
    description: str = ''
    date: datetime
    featured: bool = False
    order_score: float = Field(
        default=0, validation_alias=AliasChoices('order_score', 'orderScore', 'order'))
    cover_photo: Optional[str] = Field(
        default=None, validation_alias=AliasChoices('cover_photo', 'coverPhoto'))
    body: str = ''

    model_config = {'frozen': True}


class ContentEntry(BaseModel):
    """A blog post or a project page."""

    slug: str
    kind: Literal['blog', 'project'] = 'blog'
    title: str
    description: str = ''
    date: Optional[datetime] = None
    tags: list[str] = []
    body: str = ''
    featured: bool = False

    model_config = {'frozen': True}


class Corpus(BaseModel):
    """Everything the content loader hands over, already validated."""

    photos: list[Photo] = []
    albums: list[Album] = []
    posts: list[ContentEntry] = []
    projects: list[ContentEntry] = []

    def album_titles(self) -> dict[str, str]:
        return album_title_map(self.albums)


def album_title_map(albums) -> dict[str, str]:
    """Map album slug -> title. Unknown slugs are simply absent."""
    return {album.slug: album.title for album in albums}
