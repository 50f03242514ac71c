"""
Tests for the facet filter engine and FilterState.

Run: python3 -m pytest test_facet_filter.py -v
"""

import os
import sys
import unittest
from datetime import date, datetime, timezone

# Ensure project root is on sys.path
_script_dir = os.path.dirname(os.path.abspath(__file__))
if _script_dir not in sys.path:
    sys.path.insert(0, _script_dir)

from catalog import Photo
from filtering import (
    FilterState, TagLogic, NumericRange, DateRange,
    compute_bounds, filter_photos, filter_by_tags, matches_tags,
)


def _photo(photo_id, tags=(), settings=None, focal_length=None, day=1, album='tokyo',
           camera=None, order_score=0):
    return Photo(
        id=f"{album}/{photo_id}",
        title=photo_id.title(),
        album=album,
        filename=f"{album}/{photo_id}.jpg",
        tags=list(tags),
        date=datetime(2024, 3, day, 12, 0, tzinfo=timezone.utc),
        camera=camera,
        settings=settings,
        focal_length=focal_length,
        order_score=order_score,
    )


def _ids(photos):
    return [p.id for p in photos]


class TestTagLogic(unittest.TestCase):
    """Three photos: street+night, street, landscape."""

    def setUp(self):
        self.photos = [
            _photo('one', ['street', 'night']),
            _photo('two', ['Street']),
            _photo('three', ['landscape']),
        ]

    def test_or_mode(self):
        state = FilterState(selected_tags={'street', 'night'}, tag_logic=TagLogic.OR)
        self.assertEqual(_ids(filter_photos(self.photos, state)), ['tokyo/one', 'tokyo/two'])

    def test_and_mode(self):
        state = FilterState(selected_tags={'street', 'night'}, tag_logic=TagLogic.AND)
        self.assertEqual(_ids(filter_photos(self.photos, state)), ['tokyo/one'])

    def test_and_is_subset_of_or(self):
        for tags in (['street'], ['street', 'night'], ['night', 'landscape'], ['missing']):
            and_ids = set(_ids(filter_by_tags(self.photos, tags, TagLogic.AND)))
            or_ids = set(_ids(filter_by_tags(self.photos, tags, TagLogic.OR)))
            self.assertTrue(and_ids <= or_ids, tags)

    def test_selected_tags_are_normalized(self):
        state = FilterState(selected_tags=[' NIGHT ', ''])
        self.assertEqual(state.selected_tags, frozenset({'night'}))
        self.assertEqual(_ids(filter_photos(self.photos, state)), ['tokyo/one'])

    def test_single_tag_string(self):
        state = FilterState(selected_tags=' Street ')
        self.assertEqual(state.selected_tags, frozenset({'street'}))
        self.assertEqual(_ids(filter_photos(self.photos, state)), ['tokyo/one', 'tokyo/two'])

    def test_no_tags_matches_everything(self):
        self.assertTrue(matches_tags({'a'}, set(), TagLogic.AND))
        self.assertEqual(len(filter_by_tags(self.photos, [], TagLogic.AND)), 3)

    def test_unknown_tag_gives_empty(self):
        state = FilterState(selected_tags={'underwater'})
        self.assertEqual(filter_photos(self.photos, state), [])


class TestNoConstraint(unittest.TestCase):

    def setUp(self):
        self.photos = [
            _photo('a', ['x'], settings='f/2.8, 1/250s, ISO 400', focal_length=35, day=1),
            _photo('b', [], settings=None, day=2),
            _photo('c', ['y'], settings='ISO 1600', focal_length=85, day=3),
        ]

    def test_empty_state_returns_input(self):
        self.assertEqual(filter_photos(self.photos, FilterState()), self.photos)

    def test_corpus_bounds_state_returns_input(self):
        state = FilterState.for_corpus(self.photos)
        self.assertEqual(state.active_dimensions(), [])
        self.assertEqual(filter_photos(self.photos, state), self.photos)

    def test_order_preserved(self):
        reversed_photos = list(reversed(self.photos))
        state = FilterState(selected_tags={'x', 'y'})
        self.assertEqual(_ids(filter_photos(reversed_photos, state)), ['tokyo/c', 'tokyo/a'])

    def test_idempotent(self):
        state = FilterState.for_corpus(self.photos).with_changes(
            iso_range=NumericRange(min=100, max=800))
        once = filter_photos(self.photos, state)
        self.assertEqual(filter_photos(once, state), once)

    def test_input_not_mutated(self):
        before = list(self.photos)
        filter_photos(self.photos, FilterState(selected_tags={'x'}))
        self.assertEqual(self.photos, before)


class TestRanges(unittest.TestCase):

    def setUp(self):
        self.photos = [
            _photo('wide', settings='f/2.8, 1/250s, ISO 400', focal_length=24, day=1),
            _photo('tele', settings='f/8, 1/1000s, ISO 100', focal_length=200, day=10),
            _photo('night', settings='f/1.8, 2s, ISO 3200', focal_length=50, day=20),
            _photo('phone', settings=None, focal_length=None, day=15),
        ]
        self.state = FilterState.for_corpus(self.photos)

    def test_bounds(self):
        bounds = compute_bounds(self.photos)
        self.assertEqual(bounds.aperture, NumericRange(min=1.8, max=8))
        self.assertEqual(bounds.iso, NumericRange(min=100, max=3200))
        self.assertEqual(bounds.focal_length, NumericRange(min=24, max=200))
        self.assertEqual(bounds.date, DateRange(min=date(2024, 3, 1), max=date(2024, 3, 20)))

    def test_bounds_of_empty_corpus(self):
        bounds = compute_bounds([])
        self.assertIsNone(bounds.aperture)
        self.assertIsNone(bounds.date)

    def test_aperture_range(self):
        state = self.state.with_changes(aperture_range=NumericRange(min=2, max=8))
        self.assertEqual(_ids(filter_photos(self.photos, state)), ['tokyo/wide', 'tokyo/tele'])

    def test_shutter_range(self):
        state = self.state.with_changes(shutter_range=NumericRange(min=1, max=30))
        self.assertEqual(_ids(filter_photos(self.photos, state)), ['tokyo/night'])

    def test_bounds_inclusive(self):
        state = self.state.with_changes(iso_range=NumericRange(min=400, max=3200))
        self.assertEqual(_ids(filter_photos(self.photos, state)), ['tokyo/wide', 'tokyo/night'])

    def test_focal_length_range(self):
        state = self.state.with_changes(focal_length_range=NumericRange(min=35, max=100))
        self.assertEqual(_ids(filter_photos(self.photos, state)), ['tokyo/night'])

    def test_date_range_by_day(self):
        state = self.state.with_changes(
            date_range=DateRange(min=date(2024, 3, 10), max=date(2024, 3, 15)))
        self.assertEqual(_ids(filter_photos(self.photos, state)), ['tokyo/tele', 'tokyo/phone'])

    def test_missing_value_excluded_once_narrowed(self):
        state = self.state.with_changes(iso_range=NumericRange(min=100, max=400))
        self.assertNotIn('tokyo/phone', _ids(filter_photos(self.photos, state)))

    def test_missing_value_kept_at_bounds(self):
        self.assertIn('tokyo/phone', _ids(filter_photos(self.photos, self.state)))

    def test_inverted_range_is_empty(self):
        state = self.state.with_changes(aperture_range=NumericRange(min=8, max=2))
        self.assertEqual(filter_photos(self.photos, state), [])

    def test_active_dimensions(self):
        state = self.state.with_changes(
            selected_tags={'x'}, iso_range=NumericRange(min=100, max=400))
        self.assertEqual(state.active_dimensions(), ['tags', 'iso'])
        self.assertTrue(state.is_range_active('iso'))
        self.assertFalse(state.is_range_active('aperture'))


class TestAlbumsAndCameras(unittest.TestCase):

    def setUp(self):
        self.photos = [
            _photo('a', album='tokyo', camera='Sony A7 III'),
            _photo('b', album='kyoto', camera='Fujifilm X100V'),
            _photo('c', album='ghost-album', camera=None),
        ]

    def test_album_filter(self):
        state = FilterState(selected_albums={'kyoto', 'ghost-album'})
        self.assertEqual(_ids(filter_photos(self.photos, state)), ['kyoto/b', 'ghost-album/c'])

    def test_camera_filter(self):
        state = FilterState(selected_cameras=[' Sony A7 III '])
        self.assertEqual(_ids(filter_photos(self.photos, state)), ['tokyo/a'])

    def test_contradictory_filters(self):
        state = FilterState(selected_albums={'tokyo'}, selected_cameras={'Fujifilm X100V'})
        self.assertEqual(filter_photos(self.photos, state), [])


if __name__ == '__main__':
    unittest.main()
