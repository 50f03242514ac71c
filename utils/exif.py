"""
EXIF settings string parsing for Lumen.

Photo frontmatter stores camera settings as a single human-readable string
("f/2.8, 1/250s, ISO 400"). The numeric values used by the range filters are
rebuilt from that string on demand.
"""

import re

_APERTURE_RE = re.compile(r'f/(\d+(?:\.\d+)?)')
_SHUTTER_FRACTION_RE = re.compile(r'(\d+(?:\.\d+)?)/(\d+(?:\.\d+)?)\s*s\b')
# Lookbehind keeps the denominator of a fraction from matching as a decimal
_SHUTTER_DECIMAL_RE = re.compile(r'(?<![\d./])(\d+(?:\.\d+)?)\s*s\b')
_ISO_RE = re.compile(r'\bISO\s*(\d+)', re.IGNORECASE)


def parse_settings(raw):
    """
    Parse a free-form EXIF settings string into numeric fields.

    Args:
        raw: Settings string such as "f/2.8, 1/250s, ISO 400", or None

    Returns:
        dict: Any of 'aperture' (float), 'shutter_speed' (float seconds) and
        'iso' (int). Fields missing from the string are omitted.
    """
    if not raw:
        return {}
    text = str(raw)
    result = {}

    match = _APERTURE_RE.search(text)
    if match:
        result['aperture'] = float(match.group(1))

    shutter = _parse_shutter(text)
    if shutter is not None:
        result['shutter_speed'] = shutter

    match = _ISO_RE.search(text)
    if match:
        result['iso'] = int(match.group(1))

    return result


def _parse_shutter(text):
    """Return shutter speed in seconds; the fraction form wins over decimals."""
    match = _SHUTTER_FRACTION_RE.search(text)
    if match:
        numerator = float(match.group(1))
        denominator = float(match.group(2))
        if denominator == 0:
            return None
        return numerator / denominator

    match = _SHUTTER_DECIMAL_RE.search(text)
    if match:
        return float(match.group(1))
    return None


def format_shutter_speed(seconds):
    """Format shutter speed seconds for display (0.001 -> "1/1000s", 2 -> "2.0s")."""
    if seconds is None or seconds <= 0:
        return ''
    if seconds < 1:
        return f"1/{int(round(1 / seconds))}s"
    return f"{seconds:.1f}s"


def format_settings(aperture=None, shutter_speed=None, iso=None):
    """
    Build the canonical settings string written by the photo importers.

    Args:
        aperture: F-number, e.g. 2.8
        shutter_speed: Exposure time in seconds
        iso: ISO sensitivity

    Returns:
        str: e.g. "f/2.8, 1/1000s, ISO 400", or None if every value is missing
    """
    parts = []
    if aperture:
        parts.append(f"f/{aperture:g}")
    if shutter_speed:
        if shutter_speed >= 1:
            parts.append(f"{shutter_speed:g}s")
        else:
            parts.append(format_shutter_speed(shutter_speed))
    if iso:
        parts.append(f"ISO {iso}")
    if not parts:
        return None
    return ', '.join(parts)
