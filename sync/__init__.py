"""
Lumen view sync package.
"""

from sync.bridge import (
    FACET_CHANGE_CHANNEL, FacetChange, FacetChannel, PhotoViewer,
    ViewSyncBridge, to_viewer_photo,
)
