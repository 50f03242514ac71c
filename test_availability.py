"""
Tests for tag availability and facet option counts.

Run: python3 -m pytest test_availability.py -v
"""

import os
import sys
import unittest
from datetime import datetime

# Ensure project root is on sys.path
_script_dir = os.path.dirname(os.path.abspath(__file__))
if _script_dir not in sys.path:
    sys.path.insert(0, _script_dir)

from catalog import Photo
from filtering import FilterState, TagLogic, available_tags, facet_counts


def _photo(photo_id, tags, album='tokyo', camera=None):
    return Photo(id=f"{album}/{photo_id}", title=photo_id, album=album, tags=tags,
                 date=datetime(2024, 1, 1), camera=camera)


class TestAvailableTags(unittest.TestCase):

    def setUp(self):
        self.photos = [
            _photo('one', ['street', 'night', 'neon']),
            _photo('two', ['street', 'rain']),
            _photo('three', ['landscape', 'Fog']),
        ]

    def test_or_mode_offers_every_tag(self):
        state = FilterState(selected_tags={'street'}, tag_logic=TagLogic.OR)
        self.assertEqual(available_tags(self.photos, state),
                         {'street', 'night', 'neon', 'rain', 'landscape', 'fog'})

    def test_and_mode_narrows_to_co_occurring_tags(self):
        state = FilterState(selected_tags={'street'}, tag_logic=TagLogic.AND)
        self.assertEqual(available_tags(self.photos, state), {'street', 'night', 'neon', 'rain'})

        state = FilterState(selected_tags={'street', 'night'}, tag_logic=TagLogic.AND)
        self.assertEqual(available_tags(self.photos, state), {'street', 'night', 'neon'})

    def test_and_mode_without_selection_offers_everything(self):
        state = FilterState(tag_logic=TagLogic.AND)
        self.assertEqual(len(available_tags(self.photos, state)), 6)

    def test_selected_tags_stay_available(self):
        # Nothing carries both, but the selection must remain deselectable
        state = FilterState(selected_tags={'rain', 'landscape'}, tag_logic=TagLogic.AND)
        self.assertEqual(available_tags(self.photos, state), {'rain', 'landscape'})

    def test_or_is_superset_of_and(self):
        selections = [set(), {'street'}, {'street', 'night'}, {'fog', 'night'}, {'missing'}]
        for selected in selections:
            or_tags = available_tags(self.photos, FilterState(selected_tags=selected, tag_logic=TagLogic.OR))
            and_tags = available_tags(self.photos, FilterState(selected_tags=selected, tag_logic=TagLogic.AND))
            self.assertTrue(and_tags <= or_tags, selected)


class TestFacetCounts(unittest.TestCase):

    def test_counts_sorted(self):
        photos = [
            _photo('a', ['Street'], album='tokyo', camera='Sony A7 III'),
            _photo('b', ['street', 'night'], album='tokyo', camera='Sony A7 III'),
            _photo('c', ['night'], album='kyoto', camera=' '),
            _photo('d', ['alley'], album='kyoto', camera='Fujifilm X100V'),
        ]
        counts = facet_counts(photos)
        self.assertEqual(counts['tags'], [('night', 2), ('street', 2), ('alley', 1)])
        self.assertEqual(counts['albums'], [('kyoto', 2), ('tokyo', 2)])
        self.assertEqual(counts['cameras'], [('Sony A7 III', 2), ('Fujifilm X100V', 1)])

    def test_empty_corpus(self):
        self.assertEqual(facet_counts([]), {'tags': [], 'albums': [], 'cameras': []})


if __name__ == '__main__':
    unittest.main()
