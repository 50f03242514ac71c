"""
Gallery router — all-photos, album and tag listings.

"""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Request

from api.config import get_config
from api.corpus import get_corpus
from api.models.gallery import AlbumItem, AlbumPhotosResponse, AlbumsResponse, GalleryResponse
from filtering import FilterState, GalleryView, TagLogic, available_tags, tag_listing
from filtering.state import DateRange, NumericRange, RANGE_FIELDS
from ranking import sort_albums
from utils import (
    format_shutter_speed, parse_settings, photo_url, resized_photo_url, string_to_tags,
)

router = APIRouter(tags=["gallery"])

# (dimension, min query key, max query key, number type)
_RANGE_PARAMS = [
    ('aperture', 'min_aperture', 'max_aperture', float),
    ('shutter_speed', 'min_shutter', 'max_shutter', float),
    ('iso', 'min_iso', 'max_iso', int),
    ('focal_length', 'min_focal', 'max_focal', float),
]


def _parse_number(value, cast):
    if value in (None, ''):
        return None
    try:
        return cast(value)
    except ValueError:
        return None


def _parse_date(value):
    if not value:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


def build_filter_state(qp, photos, default_logic='or'):
    """Build a FilterState for ``photos`` from query parameters.

    Ranges not mentioned in the query stay at the corpus bounds (inert). A
    range given on one side keeps the bound on the other. Unparsable numbers
    and dates are ignored.
    """
    logic = (qp.get('tag_logic') or default_logic).lower()
    state = FilterState.for_corpus(photos, tag_logic=TagLogic.AND if logic == 'and' else TagLogic.OR)
    changes = {
        'selected_tags': string_to_tags(qp.get('tags', '')),
        'selected_albums': string_to_tags(qp.get('albums', '')),
        'selected_cameras': string_to_tags(qp.get('cameras', '')),
    }

    for dim, min_key, max_key, cast in _RANGE_PARAMS:
        min_val = _parse_number(qp.get(min_key), cast)
        max_val = _parse_number(qp.get(max_key), cast)
        if min_val is None and max_val is None:
            continue
        bound = getattr(state.bounds, dim)
        if min_val is None:
            min_val = bound.min if bound else float('-inf')
        if max_val is None:
            max_val = bound.max if bound else float('inf')
        changes[RANGE_FIELDS[dim]] = NumericRange(min=min_val, max=max_val)

    date_from = _parse_date(qp.get('date_from'))
    date_to = _parse_date(qp.get('date_to'))
    if date_from or date_to:
        bound = state.bounds.date
        if date_from is None:
            date_from = bound.min if bound else date.min
        if date_to is None:
            date_to = bound.max if bound else date.max
        changes['date_range'] = DateRange(min=date_from, max=date_to)

    return state.with_changes(**changes)


def serialize_photo(photo, album_titles, cdn):
    """Photo dict for the grid: stored fields plus parsed EXIF values and URLs."""
    exif = parse_settings(photo.settings)
    data = photo.model_dump(mode='json')
    data.update({
        'slug': photo.slug,
        'album_title': album_titles.get(photo.album),
        'aperture': exif.get('aperture'),
        'shutter_speed': exif.get('shutter_speed'),
        'shutter_formatted': format_shutter_speed(exif.get('shutter_speed')),
        'iso': exif.get('iso'),
        'url': photo_url(photo.filename, cdn.get('photo_cdn_url')),
        'thumb_url': resized_photo_url(
            photo.filename, cdn.get('photo_cdn_url'),
            width=cdn.get('resize_width', 400), quality=cdn.get('resize_quality', 85)),
    })
    return data


def _album_item(album, photo_count, cdn):
    return AlbumItem(
        slug=album.slug,
        title=album.title,
        description=album.description,
        date=album.date.isoformat() if album.date else None,
        featured=album.featured,
        order_score=album.order_score,
        cover_url=photo_url(album.cover_photo, cdn.get('photo_cdn_url')) if album.cover_photo else None,
        photo_count=photo_count,
    )


def _run_listing(qp, photos, corpus, config, listing):
    view = GalleryView(photos, corpus.albums, date_direction=config.get_listing_direction(listing))
    state = build_filter_state(qp, view.photos, config.get('filters.default_tag_logic', 'or'))
    result = view.apply(state)
    album_titles = corpus.album_titles()
    cdn = config.get_cdn_settings()
    return {
        'photos': [serialize_photo(p, album_titles, cdn) for p in result.photos],
        'total_count': result.total_count,
        'available_tags': result.available_tags,
        'tag_logic': state.tag_logic.value,
        'active_filters': state.active_dimensions(),
    }


@router.get("/api/photos", response_model=GalleryResponse)
async def api_photos(request: Request, corpus=Depends(get_corpus), config=Depends(get_config)):
    """All-photos listing with the full filter panel."""
    qp = dict(request.query_params)
    return _run_listing(qp, corpus.photos, corpus, config, 'photos')


@router.get("/api/photos/featured", response_model=GalleryResponse)
async def api_featured_photos(request: Request, corpus=Depends(get_corpus), config=Depends(get_config)):
    """Featured photos listing."""
    qp = dict(request.query_params)
    featured = [p for p in corpus.photos if p.featured]
    return _run_listing(qp, featured, corpus, config, 'featured')


@router.get("/api/albums", response_model=AlbumsResponse)
async def api_albums(corpus=Depends(get_corpus), config=Depends(get_config)):
    """Albums in canonical order with photo counts."""
    cdn = config.get_cdn_settings()
    counts = {}
    for photo in corpus.photos:
        counts[photo.album] = counts.get(photo.album, 0) + 1
    return {'albums': [_album_item(a, counts.get(a.slug, 0), cdn) for a in sort_albums(corpus.albums)]}


@router.get("/api/albums/{slug}/photos", response_model=AlbumPhotosResponse)
async def api_album_photos(slug: str, request: Request, corpus=Depends(get_corpus),
                           config=Depends(get_config)):
    """One album's photos, using the album listing's date direction."""
    album = next((a for a in corpus.albums if a.slug == slug), None)
    if album is None:
        raise HTTPException(status_code=404, detail=f"Album not found: {slug}")

    qp = dict(request.query_params)
    photos = [p for p in corpus.photos if p.album == slug]
    response = _run_listing(qp, photos, corpus, config, 'album')
    response['album'] = _album_item(album, len(photos), config.get_cdn_settings())
    return response


@router.get("/api/tags/{tag}/photos", response_model=GalleryResponse)
async def api_tag_photos(tag: str, request: Request, corpus=Depends(get_corpus),
                         config=Depends(get_config)):
    """Per-tag page: photos carrying ``tag`` and every extra tag in ``tags``."""
    qp = dict(request.query_params)
    tags = [tag] + string_to_tags(qp.get('tags', ''))
    photos = tag_listing(corpus.photos, tags, config.get_listing_direction('tag'))
    album_titles = corpus.album_titles()
    cdn = config.get_cdn_settings()
    state = FilterState(selected_tags=tags, tag_logic=TagLogic.AND)
    return {
        'photos': [serialize_photo(p, album_titles, cdn) for p in photos],
        'total_count': len(photos),
        'available_tags': sorted(available_tags(corpus.photos, state)),
        'tag_logic': TagLogic.AND.value,
        'active_filters': state.active_dimensions(),
    }
