"""
Full-text search over the photography and professional content spaces.

A query is split into lowercase tokens; a candidate matches when every token
occurs in its haystack (title, tags, body... joined and lowercased). Photo
relevance is the total number of token occurrences.
"""

import logging
import re
from typing import Literal, Optional

from pydantic import BaseModel

from catalog.models import album_title_map
from ranking.order import date_sort_key, sort_albums, sort_entries
from utils.urls import photo_url, resized_photo_url

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r'\s+')

PHOTOGRAPHY = 'photography'
PROFESSIONAL = 'professional'
SEARCH_SPACES = (PROFESSIONAL, PHOTOGRAPHY)


class SearchResult(BaseModel):
    kind: Literal['blog', 'project', 'photo', 'album']
    space: Literal['professional', 'photography']
    title: str
    url: str
    snippet: str = ''
    tags: list[str] = []
    date: Optional[str] = None
    album_title: Optional[str] = None
    album_slug: Optional[str] = None
    camera: Optional[str] = None
    location: Optional[str] = None
    thumb_url: Optional[str] = None
    cover_url: Optional[str] = None
    # Photo-only fields so a result can open the viewer directly
    id: Optional[str] = None
    body: Optional[str] = None
    filename: Optional[str] = None
    settings: Optional[str] = None
    focal_length: Optional[float] = None
    position: Optional[str] = None


def tokenize(query):
    """Lowercase whitespace-separated tokens; blank queries give []."""
    return [token for token in (query or '').lower().split() if token]


def build_haystack(*parts):
    """
    Join display fields into one searchable string.

    Args:
        *parts: Strings, lists of strings or None

    Returns:
        str: Lowercased, whitespace-collapsed text
    """
    pieces = []
    for part in parts:
        items = part if isinstance(part, (list, tuple)) else [part]
        for item in items:
            if item:
                pieces.append(str(item).strip())
    return _WHITESPACE_RE.sub(' ', ' '.join(pieces)).lower()


def matches_query(terms, haystack):
    return all(term in haystack for term in terms)


def compute_relevance(terms, haystack):
    """Sum of the (non-overlapping) occurrence counts of every term."""
    return sum(haystack.count(term) for term in terms)


def make_snippet(primary=None, fallback=None, limit=180):
    """First ``limit`` characters of the body (or fallback), whitespace-collapsed."""
    raw = _WHITESPACE_RE.sub(' ', primary or fallback or '').strip()
    if len(raw) > limit:
        return f"{raw[:limit]}…"
    return raw


def _iso(value):
    return value.isoformat() if value is not None else None


def search_photography(query, corpus, snippet_length=180, cdn_url=None):
    """
    Search albums and photos.

    Albums come first (in canonical album order); photos follow ranked by
    order_score, relevance, then date (newest first).

    Args:
        query: Free-text query
        corpus: Corpus with photos and albums
        snippet_length: Maximum snippet length
        cdn_url: Optional photo CDN base URL

    Returns:
        list: SearchResult items
    """
    terms = tokenize(query)
    if not terms:
        return []

    album_titles = album_title_map(corpus.albums)

    album_results = []
    for album in sort_albums(corpus.albums):
        if not matches_query(terms, build_haystack(album.title, album.description, album.body)):
            continue
        album_results.append(SearchResult(
            kind='album',
            space=PHOTOGRAPHY,
            title=album.title,
            url=f"/photography/album/{album.slug}",
            snippet=make_snippet(album.body, album.description, snippet_length),
            date=_iso(album.date),
            album_slug=album.slug,
            cover_url=photo_url(album.cover_photo, cdn_url) if album.cover_photo else None,
        ))

    scored = []
    for photo in corpus.photos:
        album_title = album_titles.get(photo.album)
        haystack = build_haystack(
            photo.title, photo.tags, album_title, photo.camera,
            photo.settings, photo.location, photo.body,
        )
        if not matches_query(terms, haystack):
            continue
        result = SearchResult(
            kind='photo',
            space=PHOTOGRAPHY,
            id=photo.id,
            title=photo.title,
            url=photo_url(photo.filename, cdn_url),
            filename=photo.filename,
            body=photo.body,
            snippet=make_snippet(
                photo.body,
                photo.location or photo.camera or album_title or photo.album,
                snippet_length,
            ),
            tags=list(photo.tags),
            date=_iso(photo.date),
            album_title=album_title,
            album_slug=photo.album,
            camera=photo.camera,
            settings=photo.settings,
            focal_length=photo.focal_length,
            position=photo.position,
            location=photo.location,
            thumb_url=resized_photo_url(photo.filename, cdn_url),
        )
        scored.append((photo, compute_relevance(terms, haystack), result))

    scored.sort(key=lambda item: item[0].id)
    scored.sort(key=lambda item: date_sort_key(item[0].date), reverse=True)
    scored.sort(key=lambda item: (item[0].order_score or 0, item[1]), reverse=True)

    logger.debug("Photography search %r: %d albums, %d photos", query, len(album_results), len(scored))
    return album_results + [result for _, _, result in scored]


def search_professional(query, corpus, snippet_length=180, excluded_slugs=('about',)):
    """
    Search blog posts and projects, newest first.

    Args:
        query: Free-text query
        corpus: Corpus with posts and projects
        snippet_length: Maximum snippet length
        excluded_slugs: Blog slugs that never appear in results

    Returns:
        list: SearchResult items
    """
    terms = tokenize(query)
    if not terms:
        return []

    excluded = set(excluded_slugs or ())
    candidates = [post for post in corpus.posts if post.slug not in excluded]
    candidates += list(corpus.projects)

    results = []
    for entry in sort_entries(candidates):
        haystack = build_haystack(entry.title, entry.description, entry.tags, entry.body)
        if not matches_query(terms, haystack):
            continue
        prefix = 'blog' if entry.kind == 'blog' else 'projects'
        results.append(SearchResult(
            kind=entry.kind,
            space=PROFESSIONAL,
            title=entry.title,
            url=f"/{prefix}/{entry.slug}",
            snippet=make_snippet(entry.body, entry.description, snippet_length),
            tags=list(entry.tags),
            date=_iso(entry.date),
        ))

    logger.debug("Professional search %r: %d results", query, len(results))
    return results


def search(query, corpus, space=PROFESSIONAL, snippet_length=180, cdn_url=None,
           excluded_slugs=('about',)):
    """
    Search one content space.

    Args:
        query: Free-text query
        corpus: Corpus
        space: 'professional' (default) or 'photography'
        snippet_length: Maximum snippet length
        cdn_url: Photo CDN base URL (photography only)
        excluded_slugs: Hidden blog slugs (professional only)

    Returns:
        list: SearchResult items

    Raises:
        ValueError: If ``space`` is unknown
    """
    space = (space or PROFESSIONAL).lower()
    if space == PHOTOGRAPHY:
        return search_photography(query, corpus, snippet_length=snippet_length, cdn_url=cdn_url)
    if space == PROFESSIONAL:
        return search_professional(query, corpus, snippet_length=snippet_length,
                                   excluded_slugs=excluded_slugs)
    raise ValueError(f"Unknown search space: {space}")
