"""
Photo URL helpers.

Photos are served either from a CDN (with on-the-fly resizing) or from the
local ``/photos`` directory when no CDN is configured.
"""


def _local_url(filename):
    return f"/photos{filename}" if filename.startswith('/') else f"/photos/{filename}"


def photo_url(filename, cdn_url=None):
    """
    Full URL for a photo.

    Args:
        filename: Path relative to the photos root, e.g. "tokyo/alley.jpg"
        cdn_url: Optional CDN base URL

    Returns:
        str: CDN URL when configured, otherwise the local /photos path
    """
    filename = filename or ''
    if cdn_url:
        return f"{cdn_url.rstrip('/')}/{filename.lstrip('/')}"
    return _local_url(filename)


def resized_photo_url(filename, cdn_url=None, width=400, quality=85):
    """Grid thumbnail URL through the CDN's image resizing path (original URL without a CDN)."""
    filename = filename or ''
    if cdn_url:
        return (f"{cdn_url.rstrip('/')}/cdn-cgi/image/width={width},quality={quality},format=jpg/"
                f"{filename.lstrip('/')}")
    return _local_url(filename)
