"""
Tag normalization utilities for Lumen.

Tags are compared only after normalization (trim + lowercase), so "Street"
and " street " are the same facet value.
"""


def normalize_tag(tag):
    """
    Canonicalize a tag string.

    Args:
        tag: Tag string (None is accepted)

    Returns:
        str: Lowercased, trimmed tag; empty string for missing input
    """
    if not tag:
        return ''
    return str(tag).lower().strip()


def normalize_tags(tags):
    """Return the set of non-empty normalized tags from an iterable."""
    if not tags:
        return set()
    normalized = (normalize_tag(tag) for tag in tags)
    return {tag for tag in normalized if tag}


def string_to_tags(tags_str):
    """
    Split a comma-separated query parameter into tags.

    Args:
        tags_str: Comma-separated tag string

    Returns:
        list: List of tag strings
    """
    if not tags_str:
        return []
    return [tag.strip() for tag in tags_str.split(',') if tag.strip()]


def aggregate_tags(entries):
    """
    Count tag usage across blog posts and projects.

    The first spelling seen for a tag is kept for display.

    Args:
        entries: Iterable of objects with a ``tags`` list

    Returns:
        list: Dicts with 'tag', 'display_tag' and 'count', most used first,
        ties broken by display tag
    """
    summary = {}
    for entry in entries:
        for raw_tag in entry.tags or []:
            trimmed = (raw_tag or '').strip()
            if not trimmed:
                continue
            normalized = normalize_tag(trimmed)
            if normalized in summary:
                summary[normalized]['count'] += 1
            else:
                summary[normalized] = {'tag': normalized, 'display_tag': trimmed, 'count': 1}

    return sorted(summary.values(), key=lambda s: (-s['count'], s['display_tag']))


def filter_entries_by_tag(entries, tag):
    """Return entries carrying ``tag`` (normalized comparison), in input order."""
    wanted = normalize_tag(tag)
    if not wanted:
        return []
    return [entry for entry in entries if wanted in normalize_tags(entry.tags)]
