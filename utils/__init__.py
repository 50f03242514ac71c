"""
Lumen utilities package.

Re-exports all public functions for short imports.
"""

from utils.exif import parse_settings, format_shutter_speed, format_settings
from utils.tags import (
    normalize_tag, normalize_tags, string_to_tags,
    aggregate_tags, filter_entries_by_tag,
)
from utils.urls import photo_url, resized_photo_url
