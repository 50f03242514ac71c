"""
View sync bridge.

Connects the filter pipeline to the components rendered outside this
package: the full-screen photo viewer (which must navigate the currently
filtered set) and any gallery components listening for tag facet changes.

The viewer is passed in explicitly instead of being looked up globally; with
no viewer attached, updates are a no-op.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional, Protocol

from pydantic import BaseModel

from utils.urls import photo_url

logger = logging.getLogger(__name__)

FACET_CHANGE_CHANNEL = 'tagFilterChange'


class FacetChange(BaseModel):
    """Payload published when the tag selection or tag logic changes."""

    active_tags: list[str] = []
    tag_logic: str = 'or'

    model_config = {'frozen': True}


class PhotoViewer(Protocol):
    """Anything that can replace its navigable photo list."""

    def update_photos(self, photos: list) -> None:
        ...


class FacetChannel:
    """Single named publish/subscribe channel for FacetChange payloads.

    Delivery is fire-and-forget to the handlers subscribed at publication
    time. Nothing is queued or replayed for late subscribers.
    """

    def __init__(self, name: str = FACET_CHANGE_CHANNEL):
        self.name = name
        self._handlers: List[Callable[[FacetChange], None]] = []

    def subscribe(self, handler: Callable[[FacetChange], None]) -> Callable[[], None]:
        """Register ``handler``; returns a callable that detaches it."""
        self._handlers.append(handler)
        logger.debug("Subscribed to %s: %s", self.name, getattr(handler, '__name__', handler))

        def detach():
            self.unsubscribe(handler)
        return detach

    def unsubscribe(self, handler: Callable[[FacetChange], None]) -> None:
        try:
            self._handlers.remove(handler)
        except ValueError:
            logger.debug("Handler not subscribed to %s", self.name)

    @property
    def subscriber_count(self) -> int:
        return len(self._handlers)

    def publish(self, change: FacetChange) -> None:
        # Snapshot so handlers can subscribe/unsubscribe while being called
        handlers = list(self._handlers)
        for handler in handlers:
            try:
                handler(change)
            except Exception:
                logger.error("Error in %s handler %s", self.name,
                             getattr(handler, '__name__', handler), exc_info=True)
        logger.debug("Published %s to %d handlers: %s", self.name, len(handlers), change)


class ViewSyncBridge:
    """Pushes filtered photo sets to the viewer and wires facet listeners."""

    def __init__(self, viewer: Optional[PhotoViewer] = None, channel: Optional[FacetChannel] = None):
        self._viewer = viewer
        self.channel = channel or FacetChannel()
        self._filter_listeners: List[Callable[[list], None]] = []

    @property
    def viewer(self) -> Optional[PhotoViewer]:
        return self._viewer

    def attach_viewer(self, viewer: PhotoViewer) -> None:
        self._viewer = viewer

    def detach_viewer(self) -> None:
        self._viewer = None

    def on_filter_change(self, handler: Callable[[list], None]) -> Callable[[], None]:
        """Call ``handler(photos)`` after every recompute; returns a detach callable."""
        self._filter_listeners.append(handler)

        def detach():
            if handler in self._filter_listeners:
                self._filter_listeners.remove(handler)
        return detach

    def on_active_tags_change(self, handler: Callable[[list], None]) -> Callable[[], None]:
        """Call ``handler(active_tags)`` whenever a facet change is published."""
        def forward(change: FacetChange):
            handler(list(change.active_tags))
        forward.__name__ = getattr(handler, '__name__', 'forward')
        return self.channel.subscribe(forward)

    def update_viewer_photos(self, photos: list) -> None:
        """Forward the current ordered set to the viewer (if open) and filter listeners."""
        if self._viewer is not None:
            try:
                self._viewer.update_photos(photos)
            except Exception:
                logger.error("Viewer rejected photo update", exc_info=True)

        for listener in list(self._filter_listeners):
            try:
                listener(photos)
            except Exception:
                logger.error("Error in filter listener %s",
                             getattr(listener, '__name__', listener), exc_info=True)

    def publish_facet_change(self, state) -> FacetChange:
        """Publish the tag selection and logic of a FilterState."""
        change = FacetChange(
            active_tags=sorted(state.selected_tags),
            tag_logic=getattr(state.tag_logic, 'value', state.tag_logic),
        )
        self.channel.publish(change)
        return change


def _iso_date(value):
    """
    ISO string for a date value; '' when it can't be read as a date.

    Datetimes are normalized to UTC with a 'Z' suffix (naive values are read
    as UTC) so payloads built from different sources compare equal.
    """
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return ''
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat().replace('+00:00', 'Z')
    if value is not None and hasattr(value, 'isoformat'):
        return value.isoformat()
    return ''


def to_viewer_photo(photo, album_titles=None, cdn_url=None) -> dict:
    """
    Viewer payload for one photo.

    Args:
        photo: Photo model
        album_titles: Optional album slug -> title map
        cdn_url: Optional photo CDN base URL

    Returns:
        dict: id, url, body and a 'data' dict with display fields
    """
    album_titles = album_titles or {}
    return {
        'id': photo.id,
        'url': photo_url(photo.filename, cdn_url),
        'body': photo.body or '',
        'data': {
            'title': photo.title,
            'filename': photo.filename,
            'album': photo.album,
            'album_title': album_titles.get(photo.album),
            'tags': list(photo.tags or []),
            'camera': photo.camera,
            'settings': photo.settings,
            'focal_length': photo.focal_length,
            'location': photo.location,
            'date': _iso_date(photo.date),
            'position': photo.position,
        },
    }
