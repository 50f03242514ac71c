"""
Tests for the listing pipeline (filter, sort, availability, viewer sync).

Run: python3 -m pytest test_pipeline.py -v
"""

import os
import sys
import unittest
from datetime import datetime
from unittest.mock import MagicMock

# Ensure project root is on sys.path
_script_dir = os.path.dirname(os.path.abspath(__file__))
if _script_dir not in sys.path:
    sys.path.insert(0, _script_dir)

from catalog import Album, Photo
from filtering import GalleryView, NumericRange, TagLogic, tag_listing
from ranking import ASC
from sync import ViewSyncBridge


def _photo(slug, tags, day, settings=None, order_score=0):
    return Photo(id=f"tokyo/{slug}", title=slug, album='tokyo', filename=f"tokyo/{slug}.jpg",
                 tags=tags, date=datetime(2024, 3, day), settings=settings,
                 order_score=order_score)


class TestGalleryView(unittest.TestCase):

    def setUp(self):
        self.photos = [
            _photo('early', ['street', 'night'], 1, 'f/2, 1/60s, ISO 3200'),
            _photo('late', ['street'], 9, 'f/8, 1/500s, ISO 100'),
            _photo('middle', ['landscape'], 5, 'f/11, 1/250s, ISO 200'),
        ]
        self.albums = [Album(slug='tokyo', title='Tokyo', date=datetime(2024, 3, 1))]

    def test_initial_state_lists_everything_sorted(self):
        view = GalleryView(self.photos, self.albums)
        result = view.apply(view.initial_state())
        self.assertEqual([p.slug for p in result.photos], ['late', 'middle', 'early'])
        self.assertEqual(result.total_count, 3)
        self.assertEqual(result.available_tags, ['landscape', 'night', 'street'])

    def test_album_direction(self):
        view = GalleryView(self.photos, self.albums, date_direction=ASC)
        result = view.apply(view.initial_state())
        self.assertEqual([p.slug for p in result.photos], ['early', 'middle', 'late'])

    def test_and_filter_and_availability(self):
        view = GalleryView(self.photos, self.albums)
        state = view.initial_state(TagLogic.AND).with_changes(selected_tags=['street'])
        result = view.apply(state)
        self.assertEqual([p.slug for p in result.photos], ['late', 'early'])
        self.assertEqual(result.available_tags, ['night', 'street'])

    def test_range_filter(self):
        view = GalleryView(self.photos, self.albums)
        state = view.initial_state().with_changes(iso_range=NumericRange(min=100, max=200))
        self.assertEqual([p.slug for p in view.apply(state).photos], ['late', 'middle'])

    def test_viewer_gets_filtered_order(self):
        viewer = MagicMock()
        view = GalleryView(self.photos, self.albums, bridge=ViewSyncBridge(viewer=viewer))
        view.apply(view.initial_state().with_changes(selected_tags=['street']))
        payload = viewer.update_photos.call_args[0][0]
        self.assertEqual([p['id'] for p in payload], ['tokyo/late', 'tokyo/early'])
        self.assertEqual(payload[0]['data']['album_title'], 'Tokyo')

    def test_facet_change_published_only_when_tags_change(self):
        bridge = ViewSyncBridge()
        seen = []
        bridge.on_active_tags_change(seen.append)
        view = GalleryView(self.photos, self.albums, bridge=bridge)
        state = view.initial_state().with_changes(selected_tags=['street'])

        view.apply(state)
        view.apply(state.with_changes(iso_range=NumericRange(min=100, max=200)))
        view.apply(state.with_changes(selected_tags=['street', 'night']))
        self.assertEqual(seen, [['street'], ['night', 'street']])


class TestTagListing(unittest.TestCase):

    def setUp(self):
        self.photos = [
            _photo('a', ['Street', 'night'], 1),
            _photo('b', ['street'], 2),
            _photo('c', ['night'], 3),
        ]

    def test_single_tag(self):
        self.assertEqual([p.slug for p in tag_listing(self.photos, ['street'])], ['b', 'a'])

    def test_multiple_tags_are_anded(self):
        self.assertEqual([p.slug for p in tag_listing(self.photos, ['street', 'NIGHT'])], ['a'])

    def test_no_tags_shows_nothing(self):
        self.assertEqual(tag_listing(self.photos, []), [])
        self.assertEqual(tag_listing(self.photos, ['  ']), [])


if __name__ == '__main__':
    unittest.main()
